# app/application/use_cases/client_use_cases.py (async version)

"""
Service for client management.

This module implements the CRUD use cases for clients on top of
any store implementing IClientRepository.
"""

import logging
from typing import List, Optional

from app.application.ports.inbound import IClientUseCase
from app.application.ports.outbound import IClientRepository
from app.domain.models.client_domain_model import Client

logger = logging.getLogger(__name__)


class AsyncClientService(IClientUseCase):
    """
    Service for client management.

    Every operation is a single atomic call on the repository.
    """

    def __init__(self, repository: IClientRepository):
        self.repository = repository

    async def create(self, client: Client) -> Client:
        """
        Stores a new client. Returns the stored record, which carries the
        id assigned by the store when the input had none.
        """
        created = await self.repository.add(client)
        logger.info(f"Client created: ID {created.id}")
        return created

    async def read_all(self) -> List[Client]:
        return await self.repository.list()

    async def read(self, id: int) -> Optional[Client]:
        client = await self.repository.get(id)
        if client is None:
            logger.debug(f"Client not found: ID {id}")
        return client

    async def update(self, client: Client, id: int) -> bool:
        """
        Replaces every field of the client stored at ``id``.
        The stored record always keeps ``id``, whatever the input carries.
        """
        updated = await self.repository.replace(id, client)
        if updated:
            logger.info(f"Client updated: ID {id}")
        else:
            logger.warning(f"Update of non-existent client: ID {id}")
        return updated

    async def delete(self, id: int) -> bool:
        deleted = await self.repository.remove(id)
        if deleted:
            logger.info(f"Client deleted: ID {id}")
        else:
            logger.warning(f"Delete of non-existent client: ID {id}")
        return deleted
