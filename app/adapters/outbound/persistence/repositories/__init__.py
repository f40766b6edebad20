# app/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
Client store adapters.

This module exports the implementations of IClientRepository.
"""

from app.adapters.outbound.persistence.repositories.memory_repository import InMemoryClientRepository
from app.adapters.outbound.persistence.repositories.client_repository import AsyncSQLClientRepository

__all__ = [
    "InMemoryClientRepository",
    "AsyncSQLClientRepository",
]
