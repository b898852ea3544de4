"""Pytest fixtures for site editor backend tests."""

import pytest
from fastapi.testclient import TestClient

from services.config_manager import CONFIG_DIR_ENV, ConfigManager
from services.editor_session import EditorSession
from services.history_store import HistoryStore
from services.message_stream import MessageStream


@pytest.fixture
def history():
    """A fresh, bounded history store."""
    return HistoryStore(max_depth=100)


@pytest.fixture
def stream():
    """An empty message list."""
    return MessageStream()


@pytest.fixture
def session():
    """An editor session with a known id."""
    return EditorSession(session_id="test-session")


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config singleton at a temporary directory."""
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()


@pytest.fixture
def client(config_dir):
    """Test client with the application lifespan running."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_id(client):
    """Id of a session created through the API."""
    response = client.post("/api/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]
