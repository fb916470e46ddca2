"""Transport metadata resolution.

The transport layer hands over a flat record describing how the request
went. This module turns it into a definite ``TransportInfo`` using fixed
defaults for anything missing or unusable. Resolution never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from solr_response._http import http_status_message

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

DEFAULT_STATUS = 0
DEFAULT_STATUS_MESSAGE = "Communication Error"
DEFAULT_CONTENT_TYPE = "text/plain"
DEFAULT_CHARSET = "UTF-8"


@dataclass(frozen=True, slots=True)
class TransportInfo:
    """Resolved HTTP status, reason phrase, media type and charset."""

    status: int = DEFAULT_STATUS
    status_message: str = DEFAULT_STATUS_MESSAGE
    content_type: str = DEFAULT_CONTENT_TYPE
    charset: str = DEFAULT_CHARSET


def resolve_transport(metadata: Mapping[str, Any] | None) -> TransportInfo:
    """Derive a ``TransportInfo`` from optional transport metadata.

    Recognised keys: ``errno``, ``errmsg``, ``http_code``, ``content_type``.

    A non-zero ``errno`` short-circuits everything else: only the message is
    taken from ``errmsg`` and the status stays at ``0``, even if an
    ``http_code`` is also present. Otherwise the status code and the
    content type are resolved independently, each falling back to its own
    default.
    """
    if not metadata:
        return TransportInfo()

    if _is_transport_error(metadata.get("errno")):
        errmsg = metadata.get("errmsg")
        return TransportInfo(
            status_message=str(errmsg) if errmsg is not None else DEFAULT_STATUS_MESSAGE
        )

    status = DEFAULT_STATUS
    status_message = DEFAULT_STATUS_MESSAGE
    code = _coerce_status(metadata.get("http_code"))
    if code is not None:
        status = code
        status_message = http_status_message(code)

    content_type, charset = parse_content_type(metadata.get("content_type"))
    return TransportInfo(
        status=status,
        status_message=status_message,
        content_type=content_type,
        charset=charset,
    )


def parse_content_type(value: Any) -> tuple[str, str]:
    """Split a ``Content-Type`` header value into ``(media_type, charset)``.

    ``"text/plain; charset=ISO-8859-1"`` -> ``("text/plain", "ISO-8859-1")``.
    Anything missing falls back to the module defaults.
    """
    if not isinstance(value, str):
        return DEFAULT_CONTENT_TYPE, DEFAULT_CHARSET

    media_type, sep, params = value.partition(";")
    charset = DEFAULT_CHARSET
    if sep and params:
        _, eq, raw_charset = params.partition("=")
        if eq and raw_charset.strip():
            charset = raw_charset.strip()
    return media_type.strip(), charset


def metadata_from_httpx(response: httpx.Response) -> dict[str, Any]:
    """Build a transport metadata record from a completed ``httpx.Response``.

    No request is performed; the response must already have been received.
    """
    metadata: dict[str, Any] = {
        "errno": 0,
        "errmsg": "",
        "http_code": response.status_code,
    }
    content_type = response.headers.get("content-type")
    if content_type is not None:
        metadata["content_type"] = content_type
    return metadata


def _is_transport_error(errno: Any) -> bool:
    if errno is None:
        return False
    try:
        return int(errno) != 0
    except (TypeError, ValueError):
        # Unparseable indicator: treat any truthy value as an error.
        return bool(errno)


def _coerce_status(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
