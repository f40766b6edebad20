# app/application/dtos/client_dto.py

"""
Schemas for client (customer) data.

This module defines the Pydantic DTOs used to validate request bodies
and serialize responses of the client endpoints.
"""

from typing import Optional

from pydantic import Field

from app.application.dtos.base_dto import CustomBaseModel
from app.domain.models.client_domain_model import Client


class ClientBase(CustomBaseModel):
    """
    Base schema for client data.

    Contains the attributes shared by every client schema.
    """
    name: Optional[str] = Field(None, description="Client name")
    email: Optional[str] = Field(None, description="Contact e-mail")
    phone: Optional[str] = Field(None, description="Contact phone number")


class ClientInput(ClientBase):
    """
    Schema for create and update request bodies.

    The id is optional: on create the store assigns one when it is missing,
    on update the id from the path always wins.
    """
    id: Optional[int] = Field(None, description="Client identifier")

    def to_domain(self) -> Client:
        return Client(**self.model_dump())


class ClientOutput(ClientBase):
    """
    Schema for returning client data.
    """
    id: int = Field(..., description="Client identifier")
