"""Wire codecs: raw Solr payload -> decoded field mapping.

Two writer formats are understood:

- ``json``: Solr's ``wt=json`` output.
- ``phps``: Solr's ``wt=phps`` output, i.e. PHP ``serialize()`` text.

``auto`` picks one from the response content type, falling back to a look
at the first bytes of the payload when the content type carries no hint.

Codecs never raise for bad input. They return ``Success`` with the decoded
mapping or ``Failure`` with a ``DecodeError``.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import re
from typing import TYPE_CHECKING, Any

import phpserialize

from solr_response.errors import DecodeError
from solr_response.transport import DEFAULT_CHARSET

if TYPE_CHECKING:
    from solr_response.types import Record, Value, WireFormat

logger = logging.getLogger(__name__)

_PHPS_PREFIX_RE = re.compile(rb"^\s*a:\d+:\{")


@dataclasses.dataclass(frozen=True, slots=True)
class Success:
    """A payload that decoded to a top-level field mapping."""

    value: Record


@dataclasses.dataclass(frozen=True, slots=True)
class Failure:
    """A payload that could not be decoded; ``error`` says why."""

    error: DecodeError


type DecodeOutcome = Success | Failure


def resolve_wire_format(
    wire_format: WireFormat, *, content_type: str, raw: bytes | str
) -> WireFormat:
    """Return the concrete codec name (``json`` or ``phps``) for a payload."""
    if wire_format != "auto":
        return wire_format
    media_type = content_type.lower()
    if "php" in media_type:
        return "phps"
    if "json" in media_type:
        return "json"
    head = raw[:64].encode("latin-1", "replace") if isinstance(raw, str) else raw[:64]
    if _PHPS_PREFIX_RE.match(head):
        return "phps"
    return "json"


def decode_payload(
    raw: bytes | str,
    *,
    wire_format: WireFormat = "auto",
    charset: str = DEFAULT_CHARSET,
    content_type: str = "",
) -> DecodeOutcome:
    """Decode *raw* into a top-level field mapping.

    Args:
        raw: The payload exactly as received.
        wire_format: ``json``, ``phps`` or ``auto``.
        charset: Character set used to turn bytes into text. Surrounding
            quotes (``charset="utf-8"``) are ignored.
        content_type: Media type, consulted only when ``wire_format`` is ``auto``.

    Returns:
        ``Success`` carrying a dict, or ``Failure`` carrying a ``DecodeError``.
    """
    fmt = resolve_wire_format(wire_format, content_type=content_type, raw=raw)
    codec_charset = _codec_charset(charset)
    try:
        if fmt == "phps":
            data = _decode_phps(raw, codec_charset)
        else:
            data = _decode_json(raw, codec_charset)
    except LookupError as exc:
        return Failure(
            DecodeError(
                f"Unknown charset {charset!r}: {exc}",
                hint="Check the charset parameter of the response Content-Type.",
                wire_format=fmt,
            )
        )
    except RecursionError:
        return Failure(
            DecodeError(
                f"{fmt} payload is nested too deeply to decode",
                wire_format=fmt,
            )
        )
    except (ValueError, TypeError) as exc:
        return Failure(
            DecodeError(
                f"Malformed {fmt} payload: {exc}",
                hint=f"Make sure the request asked Solr for wt={fmt}.",
                wire_format=fmt,
            )
        )

    if not isinstance(data, dict):
        return Failure(
            DecodeError(
                f"Expected a mapping at the top level, got {type(data).__name__}",
                wire_format=fmt,
            )
        )
    logger.debug("Decoded %s payload with %d top-level fields", fmt, len(data))
    return Success(data)


def _codec_charset(charset: str) -> str:
    """``'"utf-8"'`` -> ``'utf-8'``; header charsets may be quoted."""
    return charset.strip().strip("\"'").strip() or DEFAULT_CHARSET


def _decode_json(raw: bytes | str, charset: str) -> Any:
    text = raw.decode(charset) if isinstance(raw, bytes) else raw
    return json.loads(text)


def _decode_phps(raw: bytes | str, charset: str) -> Any:
    data = raw.encode(charset) if isinstance(raw, str) else raw
    return _from_php(phpserialize.loads(data, charset=charset, decode_strings=True))


def _from_php(value: Any) -> Value:
    """Turn PHP arrays into lists or dicts.

    An array whose keys are exactly ``0..n-1`` becomes a list; any other
    array becomes a dict with string keys.
    """
    if isinstance(value, dict):
        if list(value.keys()) == list(range(len(value))):
            return [_from_php(v) for v in value.values()]
        return {str(k): _from_php(v) for k, v in value.items()}
    return value
