import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.database import Database
from src.shared.database.entity_mapper import EntityMapper
from src.shared.database.integrity import translate_integrity_error
from src.shared.exceptions import StoreError

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Groups writes into a single transaction.

    Commits when the ``async with`` block exits cleanly and rolls back otherwise.
    Constraint violations surface as UniqueViolation / ForeignKeyViolation and any
    other store failure as StoreError, so callers never see driver exceptions.
    """

    def __init__(
        self,
        db: Database,
        entity_mapper: EntityMapper,
    ) -> None:
        self.db = db
        self.session: AsyncSession
        self.entity_mapper = entity_mapper

    async def __aenter__(self):
        self.session = self.db.session_maker()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            if self.session:
                await self.session.close()

    def _map_to_entity(self, model_instance: Any):
        return self.entity_mapper.map_to_entity(model_instance)

    def add(self, model_instance: Any):
        entity = self._map_to_entity(model_instance)
        self.session.add(entity)

    async def update(self, model_instance: Any):
        entity = self._map_to_entity(model_instance)
        try:
            await self.session.merge(entity)
        except SQLAlchemyError as e:
            logger.exception("Failed to merge %s", type(model_instance).__name__)
            raise StoreError("Failed to update the data store") from e

    async def delete(self, model_instance: Any):
        entity = self._map_to_entity(model_instance)
        try:
            persistent = await self.session.merge(entity)
            await self.session.delete(persistent)
        except SQLAlchemyError as e:
            logger.exception("Failed to delete %s", type(model_instance).__name__)
            raise StoreError("Failed to delete from the data store") from e

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.rollback()
            violation = translate_integrity_error(e)
            logger.warning("Commit rejected by the data store: %s", violation)
            raise violation from e
        except SQLAlchemyError as e:
            await self.rollback()
            logger.exception("Commit failed")
            raise StoreError("Failed to commit changes") from e

    async def rollback(self):
        await self.session.rollback()
