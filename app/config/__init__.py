"""Application-wide configuration loaded from JSON resources."""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Mapping

_CONFIG_RESOURCE = "app.json"
_APP_CONFIG_CACHE: AppConfig | None = None

_DEFAULT_SAMPLE_PATH = "example.mid"
_DEFAULT_VERBOSITY = "info"
_VALID_VERBOSITIES = ("disabled", "error", "warning", "info", "verbose")


@dataclass(frozen=True)
class SummaryConfig:
    """Settings for the ``smf-summary`` command."""

    default_path: str


@dataclass(frozen=True)
class LoggingConfig:
    """Settings applied when the application log file is configured."""

    verbosity: str


@dataclass(frozen=True)
class AppConfig:
    """Structured configuration values for the command-line tools."""

    summary: SummaryConfig
    logging: LoggingConfig


def get_app_config() -> AppConfig:
    """Return the cached application configuration."""

    global _APP_CONFIG_CACHE
    if _APP_CONFIG_CACHE is None:
        _APP_CONFIG_CACHE = load_app_config()
    return _APP_CONFIG_CACHE


def reset_app_config_cache() -> None:
    """Reset the cached configuration for subsequent reloads."""

    global _APP_CONFIG_CACHE
    _APP_CONFIG_CACHE = None


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load configuration from ``path`` or the bundled JSON resource."""

    data = _read_config_data(path)
    summary_section = data.get("summary") if isinstance(data, Mapping) else None
    summary = _parse_summary_section(summary_section)
    logging_section = data.get("logging") if isinstance(data, Mapping) else None
    logging_config = _parse_logging_section(logging_section)
    return AppConfig(summary=summary, logging=logging_config)


def get_summary_config() -> SummaryConfig:
    """Convenience accessor for the summary command configuration."""

    return get_app_config().summary


def get_logging_config() -> LoggingConfig:
    """Convenience accessor for the logging configuration."""

    return get_app_config().logging


def _read_config_data(path: str | Path | None) -> Mapping[str, Any]:
    if path is not None:
        return _load_json_from_path(Path(path).expanduser())
    return _load_default_config_data()


def _load_json_from_path(path: Path) -> Mapping[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    return _parse_json(raw)


def _load_default_config_data() -> Mapping[str, Any]:
    try:
        resource = resources.files(__package__).joinpath(_CONFIG_RESOURCE)
        raw = resource.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return {}
    return _parse_json(raw)


def _parse_json(raw: str) -> Mapping[str, Any]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    if isinstance(parsed, Mapping):
        return parsed
    return {}


def _parse_summary_section(section: Mapping[str, Any] | None) -> SummaryConfig:
    if not isinstance(section, Mapping):
        return SummaryConfig(default_path=_DEFAULT_SAMPLE_PATH)
    default_path = _coerce_non_empty_str(section.get("default_path"), default=_DEFAULT_SAMPLE_PATH)
    return SummaryConfig(default_path=default_path)


def _parse_logging_section(section: Mapping[str, Any] | None) -> LoggingConfig:
    if not isinstance(section, Mapping):
        return LoggingConfig(verbosity=_DEFAULT_VERBOSITY)
    verbosity = _coerce_non_empty_str(section.get("verbosity"), default=_DEFAULT_VERBOSITY).lower()
    if verbosity not in _VALID_VERBOSITIES:
        verbosity = _DEFAULT_VERBOSITY
    return LoggingConfig(verbosity=verbosity)


def _coerce_non_empty_str(value: Any, *, default: str) -> str:
    if not isinstance(value, str):
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate
