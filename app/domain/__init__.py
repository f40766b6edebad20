# app/domain/__init__.py

"""
Domain package: entities and exceptions with no framework dependencies.
"""

from app.domain.exceptions import (
    DomainException,
    ResourceNotFoundException,
    DatabaseOperationException,
)
from app.domain.models.client_domain_model import Client

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "DatabaseOperationException",
    "Client",
]
