"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and shared sample
data. Fixtures marked autouse apply to every test unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os
from typing import Any

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "solr_response.config.load_dotenv",
            lambda *_args, **_kwargs: False,
            raising=False,
        )


@pytest.fixture(autouse=True)
def isolate_settings_env(request, monkeypatch):
    """Clear SOLR_RESPONSE_* variables so tests never see the host's config.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("SOLR_RESPONSE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def isolate_cwd(monkeypatch, tmp_path):
    """Run each test from an empty directory so no pyproject.toml leaks in."""
    monkeypatch.chdir(tmp_path)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# Sample Data
# =============================================================================


@pytest.fixture
def sample_docs() -> list[dict[str, Any]]:
    return [
        {"id": "1", "title": ["Only One"], "tags": ["a", "b"]},
        {"id": "2", "title": ["Second"], "tags": []},
    ]


@pytest.fixture
def json_metadata() -> dict[str, Any]:
    return {
        "errno": 0,
        "errmsg": "",
        "http_code": 200,
        "content_type": "application/json; charset=UTF-8",
    }
