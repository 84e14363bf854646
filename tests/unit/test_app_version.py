from __future__ import annotations

from importlib import metadata

import pytest

from app import version as version_module
from app.version import DISTRIBUTION_NAME, get_app_version


@pytest.fixture(autouse=True)
def _clear_version_cache():
    get_app_version.cache_clear()
    yield
    get_app_version.cache_clear()


def test_get_app_version_reads_distribution_metadata(monkeypatch) -> None:
    requested = []

    def fake_version(name: str) -> str:
        requested.append(name)
        return "2.4.1"

    monkeypatch.setattr(version_module.metadata, "version", fake_version)

    assert get_app_version() == "2.4.1"
    assert requested == [DISTRIBUTION_NAME]


def test_get_app_version_falls_back_when_not_installed(monkeypatch) -> None:
    def missing(name: str) -> str:
        raise metadata.PackageNotFoundError(name)

    monkeypatch.setattr(version_module.metadata, "version", missing)

    assert get_app_version() == "0.0.0-dev"


def test_get_app_version_falls_back_on_empty_metadata(monkeypatch) -> None:
    monkeypatch.setattr(version_module.metadata, "version", lambda name: "")

    assert get_app_version() == "0.0.0-dev"


def test_get_app_version_is_cached(monkeypatch) -> None:
    calls = []

    def counting(name: str) -> str:
        calls.append(name)
        return "1.0.0"

    monkeypatch.setattr(version_module.metadata, "version", counting)

    assert get_app_version() == get_app_version() == "1.0.0"
    assert len(calls) == 1
