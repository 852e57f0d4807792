from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """
    Keep a `src/` layout while allowing `pytest` to run without requiring an editable install.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_path = project_root / "src"
    sys.path.insert(0, str(src_path))


@pytest.fixture
def write_config(tmp_path):
    """Write a config JSON under `tmp_path`, overriding the `station` section."""

    def _write(**station) -> str:
        cfg = {
            "app": {"name": "Test"},
            "station": {"default_capacity": 20, "release_order": "lifo", **station},
            "api": {"host": "127.0.0.1", "port": 8000},
            "logging": {"level": "INFO", "format": "%(message)s"},
        }
        path = tmp_path / "config.json"
        path.write_text(json.dumps(cfg), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def _clear_override_env(monkeypatch) -> None:
    # Keep tests deterministic even if the developer shell exports overrides.
    for name in ("BIKESHARE_DEFAULT_CAPACITY", "BIKESHARE_RELEASE_ORDER", "BIKESHARE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
