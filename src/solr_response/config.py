"""Configuration: default decoding options resolved once from layered sources.

Precedence (lowest to highest):

1. ``Settings`` field defaults
2. ``[tool.solr_response]`` in ``pyproject.toml``
3. ``SOLR_RESPONSE_*`` environment variables (``.env`` files are honoured)
4. Explicit keyword overrides passed to ``resolve_settings``

Example:
    settings = resolve_settings(collapse_single_value_arrays=False)
    response = Response.from_settings(raw, info, settings=settings)
"""

from __future__ import annotations

import os
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from solr_response.errors import ConfigurationError
from solr_response.types import WIRE_FORMATS, WireFormat

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX = "SOLR_RESPONSE_"
CONFIG_TOOL_NAME = "solr_response"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


class Settings(BaseModel):
    """Validated decoding options.

    Instances are frozen so they can be shared between responses.
    """

    create_documents: bool = True
    collapse_single_value_arrays: bool = True
    wire_format: WireFormat = "auto"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("wire_format", mode="before")
    @classmethod
    def normalize_wire_format(cls, v: Any) -> Any:
        """Trim and lower-case wire format names."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


# --- Loaders ---


def _coerce_bool(value: str) -> bool | str:
    """Convert an env string to bool, leaving unknown spellings for pydantic."""
    lowered = value.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    return value


def load_env() -> dict[str, Any]:
    """Read ``SOLR_RESPONSE_*`` variables from ``os.environ``.

    Only names matching a ``Settings`` field are kept. Boolean fields get
    the usual ``1/true/yes/on`` coercion.
    """
    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        info = Settings.model_fields.get(field_name)
        if info is None:
            continue
        config[field_name] = _coerce_bool(value) if info.annotation is bool else value
    return config


def _read_toml(path: Path) -> dict[str, Any]:
    """Read a TOML file, returning an empty dict when missing or invalid."""
    if not path.exists():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def load_pyproject(path: Path | None = None) -> dict[str, Any]:
    """Load the ``[tool.solr_response]`` table.

    Args:
        path: File to read. Defaults to ``pyproject.toml`` in the working
            directory.
    """
    data = _read_toml(path or Path.cwd() / "pyproject.toml")
    section = data.get("tool", {}).get(CONFIG_TOOL_NAME, {})
    return dict(section) if isinstance(section, dict) else {}


# --- Resolution ---


def resolve_settings(
    *,
    pyproject_path: Path | None = None,
    **overrides: Any,
) -> Settings:
    """Resolve ``Settings`` from all layers.

    ``None`` overrides are ignored so callers can forward optional
    arguments untouched.

    Raises:
        ConfigurationError: If the merged values fail validation.
    """
    load_dotenv()
    merged: dict[str, Any] = {}
    merged.update(load_pyproject(pyproject_path))
    merged.update(load_env())
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return _validate(merged)


def _validate(values: Mapping[str, Any]) -> Settings:
    try:
        return Settings.model_validate(dict(values))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        raise ConfigurationError(
            f"Invalid setting {field!r}: {first.get('msg', 'invalid value')}",
            hint=_field_hint(field),
        ) from exc


def _field_hint(field: str) -> str:
    if field == "wire_format":
        return f"Supported wire formats: {', '.join(WIRE_FORMATS)}."
    if field in Settings.model_fields:
        return f"Set {ENV_PREFIX}{field.upper()} to true or false."
    return f"Known settings: {', '.join(Settings.model_fields)}."
