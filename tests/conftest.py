# File: tests/conftest.py
from __future__ import annotations
import importlib
from pathlib import Path

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def build_dir(tmp_path, monkeypatch) -> Path:
    """Fresh working directory so VERSION/TIMESTAMP never come from the repo."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(scope="function")
def test_client(build_dir, monkeypatch):
    """
    Function-scoped client. Settings read env at import time, so env is
    patched first and the package is re-imported.
    """
    monkeypatch.setenv("BUILD_INFO_DIR", "")
    monkeypatch.setenv("LOG_DIR", "")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    for mod in list(importlib.sys.modules.keys()):
        if mod.startswith("timestamp_server."):
            importlib.sys.modules.pop(mod, None)

    from timestamp_server.main import app
    with TestClient(app) as client:
        yield client
