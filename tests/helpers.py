"""Test helpers: payload builders shared across suites.

Keep this file tiny; it exists so each suite does not hand-roll its own
Solr bodies.
"""

from __future__ import annotations

import json
from typing import Any

import phpserialize


def solr_body(docs: list[dict[str, Any]], **extra: Any) -> dict[str, Any]:
    """Return a decoded Solr body shaped like a ``/select`` response."""
    body: dict[str, Any] = {
        "responseHeader": {"status": 0, "QTime": 3, "params": {"q": "*:*"}},
        "response": {"numFound": len(docs), "start": 0, "docs": docs},
    }
    body.update(extra)
    return body


def as_json(body: Any) -> bytes:
    return json.dumps(body).encode("utf-8")


def as_phps(body: Any) -> bytes:
    return phpserialize.dumps(body)
