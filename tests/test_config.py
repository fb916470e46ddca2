"""Settings resolution: defaults, pyproject, environment, overrides."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
import pytest

from solr_response.config import (
    Settings,
    load_env,
    load_pyproject,
    resolve_settings,
)
from solr_response.errors import ConfigurationError

pytestmark = pytest.mark.unit


def _write_pyproject(path: Path, body: str) -> Path:
    target = path / "pyproject.toml"
    target.write_text(body, encoding="utf-8")
    return target


def test_defaults() -> None:
    settings = resolve_settings()

    assert settings == Settings()
    assert settings.create_documents is True
    assert settings.collapse_single_value_arrays is True
    assert settings.wire_format == "auto"


def test_settings_are_frozen() -> None:
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.create_documents = False  # type: ignore[misc]


def test_wire_format_is_normalized() -> None:
    assert Settings(wire_format="  PHPS ").wire_format == "phps"  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), ("YES", True), ("on", True), ("0", False), ("off", False)],
)
def test_env_bool_coercion(monkeypatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("SOLR_RESPONSE_CREATE_DOCUMENTS", raw)

    assert load_env() == {"create_documents": expected}
    assert resolve_settings().create_documents is expected


def test_env_ignores_unknown_names(monkeypatch) -> None:
    monkeypatch.setenv("SOLR_RESPONSE_PROFILE", "dev")
    monkeypatch.setenv("SOLR_RESPONSE_WIRE_FORMAT", "json")

    assert load_env() == {"wire_format": "json"}


def test_pyproject_table_is_loaded(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        '[tool.solr_response]\ncreate_documents = false\nwire_format = "phps"\n',
    )

    assert load_pyproject() == {"create_documents": False, "wire_format": "phps"}
    settings = resolve_settings()
    assert settings.create_documents is False
    assert settings.wire_format == "phps"


def test_pyproject_explicit_path(tmp_path: Path) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    path = _write_pyproject(nested, "[tool.solr_response]\nwire_format = 'json'\n")

    assert resolve_settings(pyproject_path=path).wire_format == "json"


@pytest.mark.parametrize("body", ["not = [valid toml", "[tool.other]\nx = 1\n"])
def test_missing_or_invalid_pyproject_is_empty(tmp_path: Path, body: str) -> None:
    _write_pyproject(tmp_path, body)
    assert load_pyproject() == {}


def test_precedence_env_over_pyproject_and_overrides_over_env(
    tmp_path: Path, monkeypatch
) -> None:
    _write_pyproject(
        tmp_path,
        "[tool.solr_response]\ncreate_documents = false\n"
        "collapse_single_value_arrays = false\n",
    )
    monkeypatch.setenv("SOLR_RESPONSE_CREATE_DOCUMENTS", "true")

    settings = resolve_settings(collapse_single_value_arrays=True)

    assert settings.create_documents is True
    assert settings.collapse_single_value_arrays is True


def test_none_overrides_are_ignored(monkeypatch) -> None:
    monkeypatch.setenv("SOLR_RESPONSE_WIRE_FORMAT", "phps")
    assert resolve_settings(wire_format=None).wire_format == "phps"


def test_invalid_wire_format_raises_configuration_error(monkeypatch) -> None:
    monkeypatch.setenv("SOLR_RESPONSE_WIRE_FORMAT", "xml")

    with pytest.raises(ConfigurationError) as exc:
        resolve_settings()

    assert "wire_format" in str(exc.value)
    assert exc.value.hint is not None
    assert "json" in exc.value.hint


def test_invalid_bool_raises_configuration_error(monkeypatch) -> None:
    monkeypatch.setenv("SOLR_RESPONSE_CREATE_DOCUMENTS", "sometimes")

    with pytest.raises(ConfigurationError) as exc:
        resolve_settings()

    assert exc.value.hint == "Set SOLR_RESPONSE_CREATE_DOCUMENTS to true or false."


def test_unknown_override_is_rejected() -> None:
    with pytest.raises(ConfigurationError) as exc:
        resolve_settings(colapse=True)

    assert "Known settings" in (exc.value.hint or "")


@pytest.mark.allow_dotenv
def test_dotenv_file_is_honoured(tmp_path: Path, monkeypatch) -> None:
    # Placeholder so monkeypatch restores the variable after the test.
    monkeypatch.setenv("SOLR_RESPONSE_WIRE_FORMAT", "json")
    (tmp_path / ".env").write_text("SOLR_RESPONSE_WIRE_FORMAT=phps\n", encoding="utf-8")
    monkeypatch.setattr(
        "solr_response.config.load_dotenv",
        lambda: _load_dotenv_from(tmp_path / ".env"),
    )

    assert resolve_settings().wire_format == "phps"


def _load_dotenv_from(path: Path) -> bool:
    from dotenv import load_dotenv

    return load_dotenv(path, override=True)
