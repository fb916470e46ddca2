"""HTTP status reason phrases.

This module is intentionally tiny to avoid circular imports and drift.
"""

from __future__ import annotations

UNKNOWN_STATUS_MESSAGE = "Unknown"

# Standard codes plus the WebDAV, Microsoft and Apache extensions Solr
# deployments have been seen to return.
HTTP_STATUS_MESSAGES: dict[int, str] = {
    # 1xx Informational
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",  # WebDAV
    122: "Request-URI too long",  # Microsoft
    # 2xx Success
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-Status",  # WebDAV
    # 3xx Redirection
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    306: "Switch Proxy",  # deprecated
    307: "Temporary Redirect",
    # 4xx Client Error
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Request Entity Too Large",
    414: "Request-URI Too Long",
    415: "Unsupported Media Type",
    416: "Requested Range Not Satisfiable",
    417: "Expectation Failed",
    422: "Unprocessable Entity",  # WebDAV
    423: "Locked",  # WebDAV
    424: "Failed Dependency",  # WebDAV
    425: "Unordered Collection",  # WebDAV
    426: "Upgrade Required",
    449: "Retry With",  # Microsoft
    450: "Blocked",  # Microsoft
    # 5xx Server Error
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",  # WebDAV
    509: "Bandwidth Limit Exceeded",  # Apache
    510: "Not Extended",
}


def http_status_message(code: int) -> str:
    """Return the reason phrase for *code*, or ``"Unknown"``."""
    return HTTP_STATUS_MESSAGES.get(code, UNKNOWN_STATUS_MESSAGE)
