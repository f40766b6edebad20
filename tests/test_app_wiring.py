"""Store selection through settings when create_app builds the service itself."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.repositories import AsyncSQLClientRepository, InMemoryClientRepository
from app.main import create_app


@pytest.fixture
def database_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "database")
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'clients.db'}")


def test_memory_backend_by_default(monkeypatch):
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "memory")
    app = create_app()
    assert isinstance(app.state.client_service.repository, InMemoryClientRepository)
    assert app.state.engine is None


def test_database_backend_round_trip(database_settings):
    app = create_app()
    assert isinstance(app.state.client_service.repository, AsyncSQLClientRepository)
    assert app.state.engine is not None

    # Startup creates the clients table
    with TestClient(app) as c:
        assert c.post("/clients", json={"name": "A"}).status_code == 201
        resp = c.get("/clients/1")
        assert resp.status_code == 200
        assert resp.json() == {"id": 1, "name": "A"}


def test_database_backend_persists_across_apps(database_settings):
    with TestClient(create_app()) as c:
        c.post("/clients", json={"id": 7, "name": "G"})

    with TestClient(create_app()) as c:
        resp = c.get("/clients")
    assert resp.status_code == 200
    assert resp.json() == [{"id": 7, "name": "G"}]


def test_shutdown_disposes_engine(database_settings, monkeypatch):
    app = create_app()
    disposed = []
    original_dispose = AsyncEngine.dispose

    async def dispose(self, *args, **kwargs):
        disposed.append(self)
        await original_dispose(self, *args, **kwargs)

    monkeypatch.setattr(AsyncEngine, "dispose", dispose)
    with TestClient(app):
        assert disposed == []
    assert len(disposed) == 1
    assert disposed[0] is app.state.engine


def test_database_backend_without_url(monkeypatch):
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "database")
    monkeypatch.setattr(settings, "DATABASE_URL", None)
    with pytest.raises(RuntimeError):
        create_app()
