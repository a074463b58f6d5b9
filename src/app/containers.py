"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.database.entity_mapper import EntityMapper

from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.mappers.asset_mapper import AssetMapper

from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.asset_repository import AssetRepository

from src.app.core.services.client_service import ClientService
from src.app.core.services.asset_service import AssetService

from src.app.core.domain.models import Asset, Client

API_MODULES = [
    "src.app.api.v1.clients",
    "src.app.api.v1.assets",
]


def create_entity_mapper(
    client_mapper: ClientMapper,
    asset_mapper: AssetMapper,
) -> EntityMapper:
    """Factory function to create EntityMapper with proper mappings."""
    return EntityMapper(
        entity_mappings={
            Client: client_mapper.to_entity,
            Asset: asset_mapper.to_entity,
        }
    )


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(modules=API_MODULES)

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETONS - Stateless Mappers (reusable across all requests)
    # =========================================================================
    client_mapper = providers.Singleton(ClientMapper)
    asset_mapper = providers.Singleton(AssetMapper)

    entity_mapper = providers.Singleton(
        create_entity_mapper,
        client_mapper=client_mapper,
        asset_mapper=asset_mapper,
    )

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    client_repository = providers.Factory(
        ClientRepository,
        db=database,
        mapper=client_mapper,
    )

    asset_repository = providers.Factory(
        AssetRepository,
        db=database,
        mapper=asset_mapper,
    )

    # =========================================================================
    # FACTORY - Unit of Work (per-request)
    # =========================================================================
    unit_of_work = providers.Factory(
        UnitOfWork,
        db=database,
        entity_mapper=entity_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    client_service = providers.Factory(
        ClientService,
        repository=client_repository,
        asset_repository=asset_repository,
        unit_of_work=unit_of_work,
    )

    asset_service = providers.Factory(
        AssetService,
        client_repository=client_repository,
        asset_repository=asset_repository,
        unit_of_work=unit_of_work,
    )
