"""solr-response: lazy, normalizing decoder for Solr query responses.

Public API:
    - Response: raw body + transport metadata, decoded on first field access
    - Document: ordered named-field record for a single result
    - resolve_settings(): default decode options from pyproject/env/overrides
"""

from __future__ import annotations

import logging

from solr_response._http import HTTP_STATUS_MESSAGES, http_status_message
from solr_response.config import Settings, resolve_settings
from solr_response.document import Document
from solr_response.errors import ConfigurationError, DecodeError, SolrResponseError
from solr_response.response import Response
from solr_response.transport import (
    TransportInfo,
    metadata_from_httpx,
    parse_content_type,
    resolve_transport,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("solr-response")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("solr_response").addHandler(logging.NullHandler())

__all__ = [
    "HTTP_STATUS_MESSAGES",
    "ConfigurationError",
    "DecodeError",
    "Document",
    "Response",
    "Settings",
    "SolrResponseError",
    "TransportInfo",
    "http_status_message",
    "metadata_from_httpx",
    "parse_content_type",
    "resolve_settings",
    "resolve_transport",
]
