from uuid import UUID
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.orm import joinedload

from src.app.core.domain.models import Asset, AssetWithClient
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.asset_entity import AssetEntity
from src.app.infrastructure.mappers.asset_mapper import AssetMapper


class AssetRepository(BaseRepository[AssetEntity, Asset]):
    """Repository for Asset operations."""

    def __init__(self, db: Database, mapper: AssetMapper):
        super().__init__(db, mapper)

    async def get_by_id(self, asset_id: UUID) -> Optional[Asset]:
        """Get an asset by ID."""
        return await self.find_one(
            select(AssetEntity).where(AssetEntity.id == asset_id)
        )

    async def get_by_client_id(self, client_id: UUID) -> list[Asset]:
        """Get all assets owned by a client."""
        return await self.find_all(
            select(AssetEntity)
            .where(AssetEntity.client_id == client_id)
            .order_by(AssetEntity.created_at, AssetEntity.id)
        )

    async def count_by_client_id(self, client_id: UUID) -> int:
        """Count the assets owned by a client."""
        return await self.count(
            select(func.count()).select_from(AssetEntity).where(AssetEntity.client_id == client_id)
        )

    async def get_all_with_client(self) -> list[AssetWithClient]:
        """
        Get every asset together with its owning client.

        The client is loaded in the same query with a join, so no lazy loading
        happens after the session is closed.
        """
        return await self.find_all(
            select(AssetEntity)
            .options(joinedload(AssetEntity.client))
            .order_by(AssetEntity.created_at, AssetEntity.id),
            to_model=AssetMapper.to_model_with_client,
        )
