from uuid import UUID, uuid4
from datetime import datetime, UTC

from src.app.core.domain.models import Client
from src.shared.database.unit_of_work import UnitOfWork
from src.client.schemas import CreateClientRequest, UpdateClientRequest

from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.asset_repository import AssetRepository
from src.app.logging import get_logger

from src.shared.exceptions import (
    ConflictingEntityFound,
    EntityInUse,
    EntityNotFound,
    ForeignKeyViolation,
    UniqueViolation,
)

logger = get_logger(__name__)


class ClientService:
    """Service for handling Client business logic."""

    def __init__(
        self,
        repository: ClientRepository,
        asset_repository: AssetRepository,
        unit_of_work: UnitOfWork,
    ):
        self.repository = repository
        self.asset_repository = asset_repository
        self.unit_of_work = unit_of_work

    async def create_client(self, request: CreateClientRequest) -> Client:
        """Create a new client."""
        # Create domain model with generated ID and timestamp
        client = Client(
            id=uuid4(),
            name=request.name,
            email=request.email,
            active=request.active,
            created_at=datetime.now(UTC),
        )

        # Persist using unit of work - database will enforce email uniqueness
        try:
            async with self.unit_of_work:
                self.unit_of_work.add(client)
        except UniqueViolation as e:
            raise ConflictingEntityFound("Client", "email", request.email) from e

        logger.info(f"Created client {client.id}")
        return client

    async def list_clients(self) -> list[Client]:
        """List every client."""
        return await self.repository.get_all()

    async def get_client(self, client_id: UUID) -> Client:
        """Get a client by ID."""
        client = await self.repository.get_by_id(client_id)
        if not client:
            raise EntityNotFound("Client", client_id)
        return client

    async def update_client(self, client_id: UUID, request: UpdateClientRequest) -> Client:
        """Apply the supplied fields of a partial update to an existing client."""
        client = await self.get_client(client_id)
        changes = request.supplied_fields()

        new_email = changes.get("email")
        if new_email is not None and new_email != client.email:
            owner = await self.repository.get_by_email(new_email)
            if owner is not None and owner.id != client_id:
                raise ConflictingEntityFound("Client", "email", new_email)

        updated = client.model_copy(update=changes)
        try:
            async with self.unit_of_work:
                await self.unit_of_work.update(updated)
        except UniqueViolation as e:
            # Another client took the email between the check and the write
            raise ConflictingEntityFound("Client", "email", new_email) from e

        logger.info(f"Updated client {client_id} fields {sorted(changes)}")
        return updated

    async def delete_client(self, client_id: UUID) -> None:
        """Delete a client that owns no assets."""
        client = await self.get_client(client_id)

        if await self.asset_repository.count_by_client_id(client_id) > 0:
            raise EntityInUse("Client", client_id, "assets")

        try:
            async with self.unit_of_work:
                await self.unit_of_work.delete(client)
        except ForeignKeyViolation as e:
            raise EntityInUse("Client", client_id, "assets") from e

        logger.info(f"Deleted client {client_id}")
