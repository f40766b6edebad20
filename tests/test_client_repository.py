"""Tests for the SQLAlchemy client store, run against SQLite."""

import pytest

from app.adapters.outbound.persistence.database import build_engine, build_session_factory, create_tables
from app.adapters.outbound.persistence.repositories import AsyncSQLClientRepository
from app.domain.models.client_domain_model import Client


@pytest.fixture
async def sql_repository(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'clients.db'}")
    await create_tables(engine)
    yield AsyncSQLClientRepository(build_session_factory(engine))
    await engine.dispose()


@pytest.mark.anyio
async def test_add_assigns_id(sql_repository):
    created = await sql_repository.add(Client(name="A", email="a@example.com"))
    assert created == Client(id=1, name="A", email="a@example.com")
    assert await sql_repository.get(1) == created


@pytest.mark.anyio
async def test_add_with_taken_id(sql_repository):
    await sql_repository.add(Client(id=4, name="A"))
    created = await sql_repository.add(Client(id=4, name="B"))
    assert created == Client(id=5, name="B")
    assert (await sql_repository.get(4)).name == "A"


@pytest.mark.anyio
async def test_list_ordered(sql_repository):
    assert await sql_repository.list() == []
    await sql_repository.add(Client(id=3, name="C"))
    await sql_repository.add(Client(id=1, name="A"))
    assert [c.id for c in await sql_repository.list()] == [1, 3]


@pytest.mark.anyio
async def test_replace(sql_repository):
    await sql_repository.add(Client(id=1, name="A", phone="123"))
    assert await sql_repository.replace(1, Client(id=8, name="B")) is True
    assert await sql_repository.get(1) == Client(id=1, name="B")
    assert await sql_repository.get(8) is None


@pytest.mark.anyio
async def test_replace_missing(sql_repository):
    assert await sql_repository.replace(1, Client(name="B")) is False


@pytest.mark.anyio
async def test_remove(sql_repository):
    await sql_repository.add(Client(id=1, name="A"))
    assert await sql_repository.remove(1) is True
    assert await sql_repository.get(1) is None
    assert await sql_repository.remove(1) is False
