import abc
import logging
from typing import Callable, Generic, TypeVar, Optional

from sqlalchemy import Executable
from sqlalchemy.exc import SQLAlchemyError

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database
from src.shared.exceptions import StoreError


TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel")

logger = logging.getLogger(__name__)


class BaseRepository(abc.ABC, Generic[TEntity, TModel]):
    def __init__(self, db: Database, mapper: BaseEntityMapper[TModel, TEntity]):
        self.db = db
        self.mapper = mapper

    async def find_one(self, statement: Executable) -> Optional[TModel]:
        try:
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entity = result.scalar_one_or_none()
                if entity is None:
                    return None
                return self.mapper.to_model(entity)
        except SQLAlchemyError as e:
            logger.exception("Query failed")
            raise StoreError("Failed to read from the data store") from e

    async def find_all(
        self,
        statement: Executable,
        to_model: Callable[[TEntity], TModel] | None = None,
    ) -> list[TModel]:
        """
        Execute a query returning entities and map each of them to a model.

        Args:
            statement: SQLAlchemy select statement returning entities
            to_model: Optional mapping function, defaults to the repository mapper

        Returns:
            List of models
        """
        convert = to_model or self.mapper.to_model
        try:
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entities = list(result.scalars().all())
                return [convert(entity) for entity in entities]
        except SQLAlchemyError as e:
            logger.exception("Query failed")
            raise StoreError("Failed to read from the data store") from e

    async def count(self, statement: Executable) -> int:
        try:
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                return int(result.scalar_one())
        except SQLAlchemyError as e:
            logger.exception("Count query failed")
            raise StoreError("Failed to read from the data store") from e
