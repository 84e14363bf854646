"""Installed version of the smf-tools distribution."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata

DISTRIBUTION_NAME = "smf-tools"
_FALLBACK_VERSION = "0.0.0-dev"


@lru_cache(maxsize=1)
def get_app_version() -> str:
    """Return the version recorded in the installed distribution metadata.

    Running from a source checkout that was never installed yields a
    development placeholder instead.
    """

    try:
        version = metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return _FALLBACK_VERSION
    return version or _FALLBACK_VERSION


__all__ = ["DISTRIBUTION_NAME", "get_app_version"]
