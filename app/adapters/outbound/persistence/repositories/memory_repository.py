# app/adapters/outbound/persistence/repositories/memory_repository.py

"""
In-memory repository for clients.

Keeps clients in a dict keyed by id. All access goes through one
asyncio.Lock, so each operation is atomic with respect to the others.
"""

import asyncio
import dataclasses
import logging
from typing import Dict, List, Optional

from app.application.ports.outbound import IClientRepository
from app.domain.models.client_domain_model import Client


class InMemoryClientRepository(IClientRepository):
    """
    Dict-backed implementation of IClientRepository.

    Ids come from a counter starting at 1. A client supplied with a free id
    keeps it and the counter moves past it; one supplied with a taken id
    gets the next counter value instead.
    """

    def __init__(self):
        self._clients: Dict[int, Client] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    async def add(self, client: Client) -> Client:
        async with self._lock:
            if client.id is None or client.id in self._clients:
                client_id = self._last_id + 1
                if client.id is not None:
                    self.logger.info(f"Client ID {client.id} is taken, assigning ID {client_id}")
            else:
                client_id = client.id

            self._last_id = max(self._last_id, client_id)
            stored = dataclasses.replace(client, id=client_id)
            self._clients[client_id] = stored
            return dataclasses.replace(stored)

    async def get(self, id: int) -> Optional[Client]:
        async with self._lock:
            client = self._clients.get(id)
            return dataclasses.replace(client) if client is not None else None

    async def list(self) -> List[Client]:
        async with self._lock:
            return [dataclasses.replace(self._clients[key]) for key in sorted(self._clients)]

    async def replace(self, id: int, client: Client) -> bool:
        async with self._lock:
            if id not in self._clients:
                return False
            self._clients[id] = dataclasses.replace(client, id=id)
            return True

    async def remove(self, id: int) -> bool:
        async with self._lock:
            return self._clients.pop(id, None) is not None
