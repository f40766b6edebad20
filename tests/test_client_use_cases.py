import pytest

from app.domain.models.client_domain_model import Client


@pytest.mark.anyio
async def test_create_then_read(service):
    await service.create(Client(id=1, name="A"))
    assert await service.read(1) == Client(id=1, name="A")


@pytest.mark.anyio
async def test_create_returns_assigned_id(service):
    created = await service.create(Client(name="A"))
    assert created.id == 1
    assert await service.read(created.id) == created


@pytest.mark.anyio
async def test_create_duplicate_id(service):
    await service.create(Client(id=3, name="A"))
    created = await service.create(Client(id=3, name="B"))
    assert created == Client(id=4, name="B")
    assert await service.read(3) == Client(id=3, name="A")


@pytest.mark.anyio
async def test_read_all_empty(service):
    assert await service.read_all() == []


@pytest.mark.anyio
async def test_read_missing(service):
    assert await service.read(1) is None


@pytest.mark.anyio
async def test_update(service):
    await service.create(Client(id=1, name="A", email="a@example.com"))
    assert await service.update(Client(name="B"), 1) is True
    assert await service.read(1) == Client(id=1, name="B")


@pytest.mark.anyio
async def test_update_missing(service):
    assert await service.update(Client(name="B"), 1) is False
    assert await service.read_all() == []


@pytest.mark.anyio
async def test_delete(service):
    await service.create(Client(id=1, name="A"))
    assert await service.delete(1) is True
    assert await service.read(1) is None
    assert await service.delete(1) is False
