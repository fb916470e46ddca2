"""Exception hierarchy for solr-response."""

from __future__ import annotations


class SolrResponseError(Exception):
    """Base exception for all solr-response errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(SolrResponseError):
    """Configuration validation or resolution failed."""


class DecodeError(SolrResponseError):
    """A raw payload could not be decoded into a field mapping.

    ``Response`` never raises this; it records the failure on
    ``Response.decode_error`` and behaves as if every field were absent.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        wire_format: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.wire_format = wire_format
