from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    """Guarantee the repository root is discoverable for absolute imports."""

    root = Path(__file__).resolve().parent.parent
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_path()


@pytest.fixture(autouse=True)
def _log_dir_env(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory):
    """Route log files to a temporary location so tests never touch the user's home."""

    log_dir = tmp_path_factory.mktemp("logs")
    monkeypatch.delenv("SMF_TOOLS_LOG_FILE", raising=False)
    monkeypatch.setenv("SMF_TOOLS_LOG_DIR", str(log_dir))
    yield
