# app/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

Exports the SQLAlchemy models of the system.
"""

from app.adapters.outbound.persistence.models.base_model import Base
from app.adapters.outbound.persistence.models.client_model import Client

__all__ = [
    "Base",
    "Client",
]
