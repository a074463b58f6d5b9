from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.asset_service import AssetService
from src.app.core.validation import unwrap, validate_asset_create, validate_identifier
from src.client.schemas import AssetResponse, AssetWithClientResponse, CatalogEntryResponse
from src.app.api.errors import api_error
from src.app.api.mappers import (
    to_asset_response,
    to_asset_with_client_response,
    to_catalog_entry_response,
)
from src.shared.exceptions import EntityNotFound, InvalidInput, OperationNotAllowed, StoreError
from src.app.logging import get_logger

router = APIRouter(prefix="/assets", tags=["assets"])
logger = get_logger(__name__)

CLIENT_NOT_FOUND = "Client not found."
ASSET_NOT_FOUND = "Asset not found."
INVALID_CLIENT_ID = "Invalid client ID."
INVALID_ASSET_ID = "Invalid asset ID."


@router.post("", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=AssetResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@inject
async def create_asset(
    payload: Any = Body(default=None),
    service: AssetService = Depends(Provide[Container.asset_service]),
) -> AssetResponse:
    """
    Create an asset for a client.

    Raises:
        HTTPException 400: If the payload is invalid
        HTTPException 403: If the client is inactive
        HTTPException 404: If the client does not exist
    """
    try:
        request = unwrap(validate_asset_create(payload))
        asset = await service.create_asset(request)
        return to_asset_response(asset)
    except InvalidInput as e:
        logger.error(f"Failed to create asset due to validation error: {e.details}")
        raise api_error(status.HTTP_400_BAD_REQUEST, e.message, e.details)
    except EntityNotFound as e:
        logger.error(f"Failed to create asset, client not found: {e}")
        raise api_error(status.HTTP_404_NOT_FOUND, CLIENT_NOT_FOUND)
    except OperationNotAllowed as e:
        logger.error(f"Failed to create asset: {e}")
        raise api_error(status.HTTP_403_FORBIDDEN, str(e))
    except StoreError as e:
        logger.error(f"Failed to create asset: {e}")
        raise api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error while creating the asset.")


@router.get("", response_model=list[AssetWithClientResponse])
@router.get("/", response_model=list[AssetWithClientResponse], include_in_schema=False)
@inject
async def list_assets(
    service: AssetService = Depends(Provide[Container.asset_service]),
) -> list[AssetWithClientResponse]:
    """List all assets together with their owning client."""
    try:
        assets = await service.list_assets()
        return [to_asset_with_client_response(asset) for asset in assets]
    except StoreError as e:
        logger.error(f"Failed to list assets: {e}")
        raise api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error while listing assets.")


@router.get("/catalog", response_model=list[CatalogEntryResponse])
async def list_catalog() -> list[CatalogEntryResponse]:
    """Return the fixed instrument catalog with reference values."""
    return [to_catalog_entry_response(entry) for entry in AssetService.list_catalog()]


@router.get("/cliente/{client_id}", response_model=list[AssetResponse])
@inject
async def list_client_assets(
    client_id: str,
    service: AssetService = Depends(Provide[Container.asset_service]),
) -> list[AssetResponse]:
    """List the assets of one client. Returns an empty list when the client has none."""
    try:
        parsed_id = unwrap(validate_identifier(client_id, "id"))
        assets = await service.list_assets_by_client(parsed_id)
        return [to_asset_response(asset) for asset in assets]
    except InvalidInput as e:
        logger.error(f"Failed to list assets, invalid client ID {client_id!r}")
        raise api_error(status.HTTP_400_BAD_REQUEST, INVALID_CLIENT_ID, e.details)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise api_error(status.HTTP_404_NOT_FOUND, CLIENT_NOT_FOUND)
    except StoreError as e:
        logger.error(f"Failed to list assets for client {client_id}: {e}")
        raise api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error while fetching the client's assets.")


@router.delete("/delete/{asset_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@inject
async def delete_asset(
    asset_id: str,
    service: AssetService = Depends(Provide[Container.asset_service]),
) -> Response:
    """Delete an asset."""
    try:
        parsed_id = unwrap(validate_identifier(asset_id, "id"))
        await service.delete_asset(parsed_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except InvalidInput as e:
        logger.error(f"Failed to delete asset, invalid ID {asset_id!r}")
        raise api_error(status.HTTP_400_BAD_REQUEST, INVALID_ASSET_ID, e.details)
    except EntityNotFound as e:
        logger.error(f"Asset not found: {e}")
        raise api_error(status.HTTP_404_NOT_FOUND, ASSET_NOT_FOUND)
    except StoreError as e:
        logger.error(f"Failed to delete asset {asset_id}: {e}")
        raise api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error while deleting the asset.")
