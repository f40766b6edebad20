# app/adapters/inbound/api/v1/endpoints/client_endpoint.py (async version)

"""
CRUD endpoints for clients.

Each route translates one HTTP verb and path into one service call
and maps its outcome to a status code.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Path, Response, status

from app.adapters.inbound.api.deps import get_client_service
from app.application.ports.inbound import IClientUseCase
from app.application.dtos.client_dto import ClientInput, ClientOutput
from app.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Client not found",
        "content": {
            "application/json": {
                "example": {
                    "detail": "Client not found (ID: 1)",
                    "code": "RESOURCE_NOT_FOUND"
                }
            }
        }
    }
}


@router.post(
    "",
    response_model=ClientOutput,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create Client",
    description="Stores a new client. The id is assigned when the body has none or when it is taken.",
)
async def create_client(
        client: ClientInput,
        service: IClientUseCase = Depends(get_client_service),
):
    return await service.create(client.to_domain())


@router.get(
    "",
    response_model=List[ClientOutput],
    response_model_exclude_none=True,
    summary="List Clients",
    description="Returns every stored client. Responds 404 when there are none.",
    responses={
        404: {
            "description": "No clients stored",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "No clients found",
                        "code": "RESOURCE_NOT_FOUND"
                    }
                }
            }
        }
    }
)
async def read_all_clients(service: IClientUseCase = Depends(get_client_service)):
    clients = await service.read_all()
    if not clients:
        raise ResourceNotFoundException(detail="No clients found")
    return clients


@router.get(
    "/{id}",
    response_model=ClientOutput,
    response_model_exclude_none=True,
    summary="Get Client",
    description="Returns the client with the given id.",
    responses=NOT_FOUND_RESPONSE,
)
async def read_client(
        id: int = Path(..., description="ID of the client"),
        service: IClientUseCase = Depends(get_client_service),
):
    client = await service.read(id)
    if client is None:
        raise ResourceNotFoundException(detail="Client not found", resource_id=id)
    return client


@router.put(
    "/{id}",
    status_code=status.HTTP_200_OK,
    summary="Update Client",
    description="Replaces every field of the client with the given id.",
    responses=NOT_FOUND_RESPONSE,
)
async def update_client(
        client: ClientInput,
        id: int = Path(..., description="ID of the client to update"),
        service: IClientUseCase = Depends(get_client_service),
):
    if not await service.update(client.to_domain(), id):
        raise ResourceNotFoundException(detail="Client not found", resource_id=id)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{id}",
    status_code=status.HTTP_200_OK,
    summary="Delete Client",
    description="Removes the client with the given id.",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_client(
        id: int = Path(..., description="ID of the client to delete"),
        service: IClientUseCase = Depends(get_client_service),
):
    if not await service.delete(id):
        raise ResourceNotFoundException(detail="Client not found", resource_id=id)
    return Response(status_code=status.HTTP_200_OK)
