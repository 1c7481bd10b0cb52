"""Shared fixtures for backend tests."""

import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager
from services.preview_store import PreviewStore


@pytest.fixture(autouse=True)
def isolated_singletons(tmp_path, monkeypatch):
    """Point config at a temp dir and start every test with fresh singletons."""
    monkeypatch.setenv("JUST_PASTE_DIFF_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setattr(ConfigManager, "_instance", None)
    monkeypatch.setattr(PreviewStore, "_instance", None)
    yield


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client
