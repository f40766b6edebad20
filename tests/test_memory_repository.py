import asyncio

import pytest

from app.domain.models.client_domain_model import Client


@pytest.mark.anyio
async def test_counter_moves_past_supplied_id(repository):
    await repository.add(Client(id=10, name="J"))
    created = await repository.add(Client(name="K"))
    assert created.id == 11


@pytest.mark.anyio
async def test_deleted_id_is_not_reused(repository):
    first = await repository.add(Client(name="A"))
    await repository.remove(first.id)
    second = await repository.add(Client(name="B"))
    assert second.id == first.id + 1


@pytest.mark.anyio
async def test_returned_records_are_copies(repository):
    await repository.add(Client(id=1, name="A"))
    fetched = await repository.get(1)
    fetched.name = "changed"
    assert (await repository.get(1)).name == "A"


@pytest.mark.anyio
async def test_input_record_is_not_stored(repository):
    client = Client(name="A")
    await repository.add(client)
    client.name = "changed"
    assert client.id is None
    assert (await repository.get(1)).name == "A"


@pytest.mark.anyio
async def test_concurrent_adds_get_unique_ids(repository):
    created = await asyncio.gather(*(repository.add(Client(name=str(i))) for i in range(50)))
    ids = [c.id for c in created]
    assert sorted(ids) == list(range(1, 51))
    assert len(await repository.list()) == 50
