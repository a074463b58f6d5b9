"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import Asset, AssetWithClient, CatalogEntry, Client
from src.client.schemas import (
    AssetResponse,
    AssetWithClientResponse,
    CatalogEntryResponse,
    ClientResponse,
)


def to_client_response(client: Client) -> ClientResponse:
    """
    Convert a Client domain model to ClientResponse API schema.

    Args:
        client: Domain model

    Returns:
        API response schema
    """
    return ClientResponse(
        id=client.id,
        name=client.name,
        email=client.email,
        active=client.active,
        created_at=client.created_at,
    )


def to_asset_response(asset: Asset) -> AssetResponse:
    """Convert an Asset domain model to AssetResponse API schema."""
    return AssetResponse(
        id=asset.id,
        name=asset.name,
        value=asset.value,
        client_id=asset.client_id,
        created_at=asset.created_at,
    )


def to_asset_with_client_response(asset: AssetWithClient) -> AssetWithClientResponse:
    """Convert an AssetWithClient domain model, nesting the owner as a ClientResponse."""
    return AssetWithClientResponse(
        id=asset.id,
        name=asset.name,
        value=asset.value,
        client_id=asset.client_id,
        created_at=asset.created_at,
        client=to_client_response(asset.client),
    )


def to_catalog_entry_response(entry: CatalogEntry) -> CatalogEntryResponse:
    return CatalogEntryResponse(
        name=entry.name,
        category=entry.category,
        value=entry.value,
    )
