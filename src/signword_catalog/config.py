"""signword_catalog.config

Runtime configuration: which spreadsheet to read, the tab names for the
two sheets, and the optional Apps Script proxy used for video playback.

Values come from an optional YAML file, then SIGNWORD_* environment
variables override them.  Blank values count as unset.

Usage:
    from pathlib import Path
    from signword_catalog.config import load_config

    config = load_config(Path("config/signword.example.yml"))
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from signword_catalog.normalize import trim

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_WORDS_SHEET = "words"
DEFAULT_VIDEOS_SHEET = "videos"
DEFAULT_TIMEOUT = 30.0

VALID_KEYS = frozenset({"sheet_id", "words_sheet", "videos_sheet", "proxy_url", "timeout"})

ENV_OVERRIDES = {
    "SIGNWORD_SHEET_ID": "sheet_id",
    "SIGNWORD_WORDS_SHEET": "words_sheet",
    "SIGNWORD_VIDEOS_SHEET": "videos_sheet",
    "SIGNWORD_PROXY_URL": "proxy_url",
    "SIGNWORD_TIMEOUT": "timeout",
}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ConfigValidationError(ValueError):
    """Raised when a config file or override fails validation."""


# ---------------------------------------------------------------------------
# CatalogConfig dataclass
# ---------------------------------------------------------------------------

@dataclass
class CatalogConfig:
    sheet_id: str | None = None
    words_sheet: str = DEFAULT_WORDS_SHEET
    videos_sheet: str = DEFAULT_VIDEOS_SHEET
    proxy_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT


# ---------------------------------------------------------------------------
# Loader + validator
# ---------------------------------------------------------------------------

def load_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> CatalogConfig:
    """Build a CatalogConfig from an optional YAML file plus env overrides.

    Args:
        path: YAML file to read, or None to start from defaults.
        environ: Environment mapping; defaults to os.environ.

    Raises:
        ConfigValidationError: If the YAML document or any value is invalid.
        FileNotFoundError: If path is given but does not exist.
    """
    data: dict[str, Any] = {}
    if path is not None:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        if loaded is not None:
            if not isinstance(loaded, dict):
                raise ConfigValidationError(
                    f"{path}: top-level YAML must be a mapping, got {type(loaded).__name__}"
                )
            data.update(loaded)

    env = os.environ if environ is None else environ
    for env_name, key in ENV_OVERRIDES.items():
        value = env.get(env_name)
        if value is not None and value.strip():
            data[key] = value.strip()

    validate_config(data)
    return _build(data)


def validate_config(data: dict[str, Any]) -> None:
    """Raise ConfigValidationError if data does not match the config schema."""
    unknown = set(data) - VALID_KEYS
    if unknown:
        raise ConfigValidationError(f"Unknown config keys: {sorted(unknown)}")

    for key in ("sheet_id", "words_sheet", "videos_sheet", "proxy_url"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigValidationError(f"'{key}' must be a string, got {value!r}")

    if data.get("timeout") is not None:
        try:
            timeout = float(data["timeout"])
        except (TypeError, ValueError) as exc:
            raise ConfigValidationError(f"'timeout' must be a number, got {data['timeout']!r}") from exc
        if timeout <= 0:
            raise ConfigValidationError(f"'timeout' must be > 0, got {timeout}")


def _build(data: dict[str, Any]) -> CatalogConfig:
    timeout = data.get("timeout")
    return CatalogConfig(
        sheet_id=trim(data.get("sheet_id")),
        words_sheet=trim(data.get("words_sheet")) or DEFAULT_WORDS_SHEET,
        videos_sheet=trim(data.get("videos_sheet")) or DEFAULT_VIDEOS_SHEET,
        proxy_url=trim(data.get("proxy_url")),
        timeout=float(timeout) if timeout is not None else DEFAULT_TIMEOUT,
    )
