# app/domain/models/client_domain_model.py

from dataclasses import dataclass
from typing import Optional


@dataclass
class Client:
    """Domain model for a customer record."""
    id: Optional[int] = None  # Assigned by the store when missing
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
