from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Asset, AssetName, AssetWithClient
from src.app.infrastructure.entities.asset_entity import AssetEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper


class AssetMapper(BaseEntityMapper[Asset, AssetEntity]):
    """Mapper for converting between Asset domain model and AssetEntity."""

    @staticmethod
    def to_entity(model_instance: Asset) -> AssetEntity:
        """Convert an Asset (domain model) to AssetEntity (database entity)."""
        return AssetEntity(
            id=model_instance.id,
            name=model_instance.name.value,
            value=model_instance.value,
            client_id=model_instance.client_id,
            created_at=model_instance.created_at,
        )

    @staticmethod
    def to_model(entity: AssetEntity) -> Asset:
        """Convert an AssetEntity (database entity) to Asset (domain model)."""
        return Asset(
            id=entity.id,
            name=AssetName(entity.name),
            value=entity.value,
            client_id=entity.client_id,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_model_with_client(entity: AssetEntity) -> AssetWithClient:
        """Convert an AssetEntity with its eagerly loaded client to AssetWithClient."""
        return AssetWithClient(
            id=entity.id,
            name=AssetName(entity.name),
            value=entity.value,
            client_id=entity.client_id,
            created_at=entity.created_at,
            client=ClientMapper.to_model(entity.client),
        )
