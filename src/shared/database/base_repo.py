import abc
from typing import Any, Generic, TypeVar

from sqlalchemy import Executable

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database


TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel")


class BaseRepository(abc.ABC, Generic[TEntity, TModel]):
    def __init__(self, db: Database, mapper: BaseEntityMapper[TModel, TEntity]):
        self.db = db
        self.mapper = mapper

    async def find_all(self, statement: Executable) -> list[TModel]:
        async with self.db.session_maker() as session:
            result = await session.execute(statement)
            entities = list(result.scalars().all())
            return [self.mapper.to_model(entity) for entity in entities]

    async def add(self, model_instance: Any) -> TModel:
        """
        Persist a single model and return it as re-read from its entity.

        The insert runs in its own transaction: it is committed on success and
        rolled back if the flush or commit raises. Database-generated values
        (such as autoincrement keys) are present on the returned model.
        """
        entity = self.mapper.to_entity(model_instance)
        async with self.db.session_maker() as session:
            async with session.begin():
                session.add(entity)
        return self.mapper.to_model(entity)
