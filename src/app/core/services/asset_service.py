from uuid import UUID, uuid4
from datetime import datetime, UTC

from src.app.core.domain.catalog import ASSET_CATALOG
from src.app.core.domain.models import Asset, AssetWithClient, CatalogEntry
from src.shared.database.unit_of_work import UnitOfWork
from src.client.schemas import CreateAssetRequest

from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.asset_repository import AssetRepository
from src.app.logging import get_logger

from src.shared.exceptions import EntityNotFound, ForeignKeyViolation, OperationNotAllowed

logger = get_logger(__name__)

INACTIVE_CLIENT_MESSAGE = "Client is inactive. Activate it before adding assets."


class AssetService:
    """Service for handling Asset business logic."""

    def __init__(
        self,
        client_repository: ClientRepository,
        asset_repository: AssetRepository,
        unit_of_work: UnitOfWork,
    ):
        self.client_repository = client_repository
        self.asset_repository = asset_repository
        self.unit_of_work = unit_of_work

    async def _require_client(self, client_id: UUID):
        client = await self.client_repository.get_by_id(client_id)
        if not client:
            raise EntityNotFound("Client", client_id)
        return client

    async def create_asset(self, request: CreateAssetRequest) -> Asset:
        """
        Create an asset for an active client.

        Raises:
            EntityNotFound: If the owning client does not exist
            OperationNotAllowed: If the owning client is inactive
        """
        client = await self._require_client(request.client_id)
        if not client.active:
            raise OperationNotAllowed(INACTIVE_CLIENT_MESSAGE)

        asset = Asset(
            id=uuid4(),
            name=request.name,
            value=request.value,
            client_id=client.id,
            created_at=datetime.now(UTC),
        )

        try:
            async with self.unit_of_work:
                self.unit_of_work.add(asset)
        except ForeignKeyViolation as e:
            # Client removed after the existence check
            raise EntityNotFound("Client", request.client_id) from e

        logger.info(f"Created asset {asset.id} for client {client.id}")
        return asset

    async def list_assets(self) -> list[AssetWithClient]:
        """List every asset joined with its owning client."""
        return await self.asset_repository.get_all_with_client()

    async def list_assets_by_client(self, client_id: UUID) -> list[Asset]:
        """List the assets of one client. A client without assets yields an empty list."""
        await self._require_client(client_id)
        return await self.asset_repository.get_by_client_id(client_id)

    async def delete_asset(self, asset_id: UUID) -> None:
        """Delete an asset."""
        asset = await self.asset_repository.get_by_id(asset_id)
        if not asset:
            raise EntityNotFound("Asset", asset_id)

        async with self.unit_of_work:
            await self.unit_of_work.delete(asset)

        logger.info(f"Deleted asset {asset_id}")

    @staticmethod
    def list_catalog() -> list[CatalogEntry]:
        """Return the fixed instrument catalog."""
        return list(ASSET_CATALOG)
