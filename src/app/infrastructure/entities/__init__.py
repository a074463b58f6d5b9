"""Database entities for the infrastructure layer."""
from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.entities.asset_entity import AssetEntity

__all__ = [
    "ClientEntity",
    "AssetEntity",
]
