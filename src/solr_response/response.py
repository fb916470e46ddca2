"""Response: lazily decoded view over a raw Solr query response."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from solr_response.codecs import Failure, decode_payload
from solr_response.document import Document
from solr_response.errors import ConfigurationError
from solr_response.normalize import normalize_response_docs
from solr_response.transport import metadata_from_httpx, resolve_transport
from solr_response.types import WIRE_FORMATS

if TYPE_CHECKING:
    from collections.abc import Callable, KeysView, Mapping

    import httpx

    from solr_response.config import Settings
    from solr_response.errors import DecodeError
    from solr_response.types import FieldSink, Record, Value, WireFormat

logger = logging.getLogger(__name__)


class Response:
    """A Solr response whose body is decoded on first field access.

    Transport metadata is resolved eagerly in the constructor. The body is
    kept untouched until ``get()`` (or any accessor built on it) is first
    called; it is then decoded, its result documents normalized, and the
    outcome cached for the life of the instance.

    A body that cannot be decoded does not raise. Every field simply reads
    as absent and ``decode_error`` describes what went wrong.

    Example:
        response = Response(body, {"errno": 0, "http_code": 200,
                                   "content_type": "application/json"})
        if response.http_status == 200:
            for doc in response.docs:
                print(doc.id, doc.title)
    """

    def __init__(
        self,
        raw_response: bytes | str,
        transport_metadata: Mapping[str, Any] | None = None,
        create_documents: bool = True,
        collapse_single_value_arrays: bool = True,
        *,
        wire_format: WireFormat = "auto",
        document_factory: Callable[[], FieldSink] = Document,
    ) -> None:
        if wire_format not in WIRE_FORMATS:
            raise ConfigurationError(
                f"Unknown wire format: {wire_format!r}",
                hint=f"Supported wire formats: {', '.join(WIRE_FORMATS)}.",
            )
        info = resolve_transport(transport_metadata)

        self._raw_response = raw_response
        self._http_status = info.status
        self._http_status_message = info.status_message
        self._content_type = info.content_type
        self._charset = info.charset
        self._create_documents = bool(create_documents)
        self._collapse_single_value_arrays = bool(collapse_single_value_arrays)
        self._wire_format: WireFormat = wire_format
        self._document_factory = document_factory

        self._decode_lock = threading.Lock()
        self._is_decoded = False
        self._data: Record = {}
        self._decode_error: DecodeError | None = None

    # --- Alternate constructors ---

    @classmethod
    def from_settings(
        cls,
        raw_response: bytes | str,
        transport_metadata: Mapping[str, Any] | None = None,
        *,
        settings: Settings | None = None,
    ) -> Response:
        """Build a response using resolved ``Settings`` for the decode options."""
        if settings is None:
            from solr_response.config import resolve_settings

            settings = resolve_settings()
        return cls(
            raw_response,
            transport_metadata,
            settings.create_documents,
            settings.collapse_single_value_arrays,
            wire_format=settings.wire_format,
        )

    @classmethod
    def from_httpx(
        cls, http_response: httpx.Response, *, settings: Settings | None = None
    ) -> Response:
        """Wrap an already-received ``httpx.Response``.

        The body must have been read (``http_response.content`` available).
        """
        return cls.from_settings(
            http_response.content,
            metadata_from_httpx(http_response),
            settings=settings,
        )

    # --- Transport accessors ---

    @property
    def http_status(self) -> int:
        return self._http_status

    @property
    def http_status_message(self) -> str:
        return self._http_status_message

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def charset(self) -> str:
        """Character set of the body. Should usually be UTF-8."""
        return self._charset

    @property
    def raw_response(self) -> bytes | str:
        """The body exactly as given to the constructor."""
        return self._raw_response

    @property
    def create_documents(self) -> bool:
        return self._create_documents

    @property
    def collapse_single_value_arrays(self) -> bool:
        return self._collapse_single_value_arrays

    @property
    def wire_format(self) -> WireFormat:
        return self._wire_format

    # --- Decoded fields ---

    @property
    def is_decoded(self) -> bool:
        """Whether a decode has been attempted (successful or not)."""
        return self._is_decoded

    @property
    def decode_error(self) -> DecodeError | None:
        """Why the body could not be decoded, or None.

        Triggers the decode if it has not happened yet.
        """
        self._ensure_decoded()
        return self._decode_error

    def get(self, name: str, default: Value = None) -> Value:
        """Return the decoded top-level field *name*, or *default* when absent."""
        self._ensure_decoded()
        return self._data.get(name, default)

    def __contains__(self, name: object) -> bool:
        self._ensure_decoded()
        return name in self._data

    def keys(self) -> KeysView[str]:
        """Top-level field names of the decoded body."""
        self._ensure_decoded()
        return self._data.keys()

    @property
    def header(self) -> Value:
        """The ``responseHeader`` section, or None."""
        return self.get("responseHeader")

    @property
    def qtime(self) -> Value:
        header = self.header
        return header.get("QTime") if isinstance(header, dict) else None

    @property
    def num_found(self) -> Value:
        response = self.get("response")
        return response.get("numFound") if isinstance(response, dict) else None

    @property
    def docs(self) -> list[Any]:
        """Result documents from ``response.docs``; empty when there are none."""
        response = self.get("response")
        if isinstance(response, dict):
            docs = response.get("docs")
            if isinstance(docs, list):
                return docs
        return []

    def _ensure_decoded(self) -> None:
        if self._is_decoded:
            return
        with self._decode_lock:
            if self._is_decoded:
                return
            try:
                self._decode()
            finally:
                # Never retried, whatever the outcome.
                self._is_decoded = True

    def _decode(self) -> None:
        outcome = decode_payload(
            self._raw_response,
            wire_format=self._wire_format,
            charset=self._charset,
            content_type=self._content_type,
        )
        if isinstance(outcome, Failure):
            logger.debug("Response body not decodable: %s", outcome.error)
            self._decode_error = outcome.error
            return

        self._data = normalize_response_docs(
            outcome.value,
            create_documents=self._create_documents,
            collapse_single_value_arrays=self._collapse_single_value_arrays,
            document_factory=self._document_factory,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(http_status={self._http_status!r}, "
            f"content_type={self._content_type!r}, decoded={self._is_decoded!r})"
        )
