from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.client_service import ClientService
from src.app.core.validation import (
    unwrap,
    validate_client_create,
    validate_client_update,
    validate_identifier,
)
from src.client.schemas import ClientResponse
from src.app.api.errors import api_error
from src.app.api.mappers import to_client_response
from src.shared.exceptions import (
    ConflictingEntityFound,
    EntityInUse,
    EntityNotFound,
    InvalidInput,
    StoreError,
)
from src.app.logging import get_logger

router = APIRouter(prefix="/clients", tags=["clients"])
logger = get_logger(__name__)

CLIENT_NOT_FOUND = "Client not found."
EMAIL_TAKEN = "This email is already registered."
EMAIL_TAKEN_BY_OTHER = "This email is already registered for another client."
CLIENT_HAS_ASSETS = "Cannot delete the client because it has associated assets."
INVALID_CLIENT_ID = "Invalid client ID."


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@inject
async def create_client(
    payload: Any = Body(default=None),
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Create a new client."""
    try:
        request = unwrap(validate_client_create(payload))
        client = await service.create_client(request)
        return to_client_response(client)
    except InvalidInput as e:
        logger.error(f"Failed to create client due to validation error: {e.details}")
        raise api_error(status.HTTP_400_BAD_REQUEST, e.message, e.details)
    except ConflictingEntityFound as e:
        logger.error(f"Failed to create client: {e}")
        raise api_error(status.HTTP_409_CONFLICT, EMAIL_TAKEN)
    except StoreError as e:
        logger.error(f"Failed to create client: {e}")
        raise api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error while creating the client.")


@router.get("/list", response_model=list[ClientResponse])
@inject
async def list_clients(
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[ClientResponse]:
    """List all clients."""
    try:
        clients = await service.list_clients()
        return [to_client_response(client) for client in clients]
    except StoreError as e:
        logger.error(f"Failed to list clients: {e}")
        raise api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error while listing clients.")


@router.put("/edit/{client_id}", response_model=ClientResponse)
@inject
async def update_client(
    client_id: str,
    payload: Any = Body(default=None),
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """
    Partially update a client.

    Only the fields present in the body are changed. Sending no fields at all
    is rejected with 400.
    """
    try:
        parsed_id = unwrap(validate_identifier(client_id, "id"))
    except InvalidInput as e:
        logger.error(f"Failed to update client, invalid ID {client_id!r}")
        raise api_error(status.HTTP_400_BAD_REQUEST, INVALID_CLIENT_ID, e.details)

    try:
        request = unwrap(validate_client_update(payload))
        client = await service.update_client(parsed_id, request)
        return to_client_response(client)
    except InvalidInput as e:
        logger.error(f"Failed to update client {parsed_id} due to validation error: {e.message}")
        raise api_error(status.HTTP_400_BAD_REQUEST, e.message, e.details)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise api_error(status.HTTP_404_NOT_FOUND, CLIENT_NOT_FOUND)
    except ConflictingEntityFound as e:
        logger.error(f"Failed to update client: {e}")
        raise api_error(status.HTTP_409_CONFLICT, EMAIL_TAKEN_BY_OTHER)
    except StoreError as e:
        logger.error(f"Failed to update client {parsed_id}: {e}")
        raise api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error while updating the client.")


@router.delete("/delete/{client_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@inject
async def delete_client(
    client_id: str,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> Response:
    """Delete a client that owns no assets."""
    try:
        parsed_id = unwrap(validate_identifier(client_id, "id"))
        await service.delete_client(parsed_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except InvalidInput as e:
        logger.error(f"Failed to delete client, invalid ID {client_id!r}")
        raise api_error(status.HTTP_400_BAD_REQUEST, INVALID_CLIENT_ID, e.details)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise api_error(status.HTTP_404_NOT_FOUND, CLIENT_NOT_FOUND)
    except EntityInUse as e:
        logger.error(f"Failed to delete client: {e}")
        raise api_error(status.HTTP_409_CONFLICT, CLIENT_HAS_ASSETS)
    except StoreError as e:
        logger.error(f"Failed to delete client {client_id}: {e}")
        raise api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error while deleting the client.")
