# app/adapters/outbound/persistence/models/client_model.py

"""
Client ORM model.

This module defines the table that backs the database client store.
"""

from sqlalchemy import Column, Integer, String, DateTime, func
from app.adapters.outbound.persistence.models.base_model import Base


class Client(Base):
    """
    Model representing a customer record.

    Attributes:
        id: Unique identifier of the client
        name: Client name
        email: Contact e-mail
        phone: Contact phone number
        created_at: Creation date and time
        updated_at: Date and time of the last update
    """
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name={self.name})>"
