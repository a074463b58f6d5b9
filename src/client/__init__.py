"""Python client for the Portfolio API."""
from src.client.portfolio_client import PortfolioClient
from src.client.schemas import (
    AssetResponse,
    AssetWithClientResponse,
    CatalogEntryResponse,
    ClientResponse,
    CreateAssetRequest,
    CreateClientRequest,
    ErrorResponse,
    UpdateClientRequest,
)

__all__ = [
    "PortfolioClient",
    "AssetResponse",
    "AssetWithClientResponse",
    "CatalogEntryResponse",
    "ClientResponse",
    "CreateAssetRequest",
    "CreateClientRequest",
    "ErrorResponse",
    "UpdateClientRequest",
]
