# app/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.client_domain_model import Client


class IClientUseCase(ABC):
    """Interface for client-related use cases."""

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Create a new client."""
        pass

    @abstractmethod
    async def read_all(self) -> List[Client]:
        """Return every stored client."""
        pass

    @abstractmethod
    async def read(self, id: int) -> Optional[Client]:
        """Get client by ID, or None."""
        pass

    @abstractmethod
    async def update(self, client: Client, id: int) -> bool:
        """Replace the client at ID with the given data."""
        pass

    @abstractmethod
    async def delete(self, id: int) -> bool:
        """Delete the client at ID."""
        pass
