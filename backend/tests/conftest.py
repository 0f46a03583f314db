import pytest
from fastapi.testclient import TestClient

from noteful.config import load_settings
from noteful.main import create_app


@pytest.fixture()
def event_log_path(tmp_path):
    return tmp_path / "events.log"


@pytest.fixture()
def client(event_log_path, monkeypatch):
    # fresh seeded store and event log per test
    monkeypatch.delenv("NOTES_SEED_FILE", raising=False)
    monkeypatch.delenv("NOTES_STATIC_DIR", raising=False)
    monkeypatch.setenv("NOTES_EVENT_LOG", str(event_log_path))

    return TestClient(create_app(load_settings()))
