# app/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.client_domain_model import Client


class IClientRepository(ABC):
    """Client store interface: a flat collection of clients keyed by id."""

    @abstractmethod
    async def add(self, client: Client) -> Client:
        """Insert a client, assigning an id when it has none."""
        pass

    @abstractmethod
    async def get(self, id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    async def list(self) -> List[Client]:
        """List all clients ordered by ID."""
        pass

    @abstractmethod
    async def replace(self, id: int, client: Client) -> bool:
        """Replace the client stored at ID. False if there is none."""
        pass

    @abstractmethod
    async def remove(self, id: int) -> bool:
        """Remove the client stored at ID. False if there is none."""
        pass
