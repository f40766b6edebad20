import pytest
from fastapi.testclient import TestClient

from app.adapters.outbound.persistence.repositories import InMemoryClientRepository
from app.application.use_cases.client_use_cases import AsyncClientService
from app.main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def repository():
    return InMemoryClientRepository()


@pytest.fixture
def service(repository):
    return AsyncClientService(repository)


@pytest.fixture
def client(service):
    """HTTP test client over a fresh in-memory store."""
    with TestClient(create_app(service)) as c:
        yield c


@pytest.fixture
def sample_client():
    return {"id": 1, "name": "A", "email": "a@example.com", "phone": "+1 555 0100"}
