"""Infrastructure mappers for converting between domain models and database entities."""
from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.mappers.asset_mapper import AssetMapper

__all__ = [
    "ClientMapper",
    "AssetMapper",
]
