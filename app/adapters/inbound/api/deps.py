# app/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

The client service is built once by the application factory and kept on
``app.state``; endpoints receive it through FastAPI Depends().
"""

from fastapi import Request

from app.application.ports.inbound import IClientUseCase


def get_client_service(request: Request) -> IClientUseCase:
    """
    Provide the client service attached to the running application.

    Args:
        request: Current request

    Returns:
        The IClientUseCase instance passed to create_app
    """
    return request.app.state.client_service
