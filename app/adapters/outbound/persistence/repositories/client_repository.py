# app/adapters/outbound/persistence/repositories/client_repository.py (async version)

"""
Repository for client operations.

This module implements the repository that performs database operations
related to clients, implementing the IClientRepository interface.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.outbound.persistence.database import get_db_context
from app.adapters.outbound.persistence.models import Client
from app.application.ports.outbound import IClientRepository
from app.domain.models.client_domain_model import Client as DomainClient
from app.domain.exceptions import DatabaseOperationException


class AsyncSQLClientRepository(IClientRepository):
    """
    Async SQLAlchemy implementation of IClientRepository.

    Every operation runs in its own session and transaction.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory
        self.logger = logging.getLogger(f"{__name__}.{Client.__name__}")

    async def add(self, client: DomainClient) -> DomainClient:
        """
        Insert a client. The database assigns the id when the client has none
        or when the given id is already taken.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            async with get_db_context(self.session_factory) as db:
                client_id = client.id
                if client_id is not None and await db.get(Client, client_id) is not None:
                    self.logger.info(f"Client ID {client_id} is taken, letting the database assign one")
                    client_id = None

                db_obj = Client(id=client_id, name=client.name, email=client.email, phone=client.phone)
                db.add(db_obj)
                await db.flush()
                await db.refresh(db_obj)

                self.logger.info(f"Client created with ID: {db_obj.id}")
                return self.to_domain(db_obj)

        except SQLAlchemyError as e:
            self.logger.error(f"Error creating client: {str(e)}")
            raise DatabaseOperationException(
                detail="Error creating client",
                original_error=e
            )

    async def get(self, id: int) -> Optional[DomainClient]:
        try:
            async with get_db_context(self.session_factory) as db:
                db_obj = await db.get(Client, id)
                return self.to_domain(db_obj) if db_obj is not None else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching client with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error fetching client",
                original_error=e
            )

    async def list(self) -> List[DomainClient]:
        try:
            async with get_db_context(self.session_factory) as db:
                result = await db.execute(select(Client).order_by(Client.id))
                return [self.to_domain(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing clients: {str(e)}")
            raise DatabaseOperationException(
                detail="Error listing clients",
                original_error=e
            )

    async def replace(self, id: int, client: DomainClient) -> bool:
        """
        Overwrite every field of the client at ``id``.

        Returns:
            True if the client existed and was updated, False otherwise
        """
        try:
            async with get_db_context(self.session_factory) as db:
                db_obj = await db.get(Client, id)
                if db_obj is None:
                    return False

                db_obj.name = client.name
                db_obj.email = client.email
                db_obj.phone = client.phone
                db.add(db_obj)
                return True

        except SQLAlchemyError as e:
            self.logger.error(f"Error updating client with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error updating client",
                original_error=e
            )

    async def remove(self, id: int) -> bool:
        try:
            async with get_db_context(self.session_factory) as db:
                db_obj = await db.get(Client, id)
                if db_obj is None:
                    return False

                await db.delete(db_obj)
                return True

        except SQLAlchemyError as e:
            self.logger.error(f"Error deleting client with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error deleting client",
                original_error=e
            )

    def to_domain(self, db_model: Client) -> DomainClient:
        """
        Convert database model to domain model.

        Args:
            db_model: Client ORM model

        Returns:
            Domain model of client
        """
        return DomainClient(
            id=db_model.id,
            name=db_model.name,
            email=db_model.email,
            phone=db_model.phone
        )
