"""SQLAlchemy-backed document collections."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.connection import get_async_session
from ..dbmodels import Base, Clients, Projects
from ..logging import get_logger
from .base import DocumentCollection, DuplicateKeyError, InvalidFilterError

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class SqlCollection(DocumentCollection[ModelT]):
    """
    A collection stored as one table, one row per document.

    Each call runs in its own session, so every operation is atomic on its
    own and nothing spans two calls.
    """

    def __init__(self, model: type[ModelT], session_factory: SessionFactory = get_async_session):
        self.model = model
        self.name = model.__tablename__
        self._session_factory = session_factory

    def _conditions(self, filter: Mapping[str, Any] | None) -> list[ColumnElement[bool]]:
        columns = self.model.__table__.columns
        conditions = []
        for key, value in (filter or {}).items():
            column = columns.get(key)
            if column is None:
                raise InvalidFilterError(f"Unknown field '{key}' for collection '{self.name}'")
            conditions.append(column == value)
        return conditions

    def _check_fields(self, fields: Mapping[str, Any]) -> None:
        columns = self.model.__table__.columns
        unknown = [key for key in fields if key not in columns or key == "id"]
        if unknown:
            raise InvalidFilterError(
                f"Cannot write field(s) {', '.join(unknown)} on collection '{self.name}'"
            )

    async def find_by_id(self, id: str) -> ModelT | None:
        async with self._session_factory() as session:
            return await session.get(self.model, id)

    async def find_all(self, filter: Mapping[str, Any] | None = None) -> list[ModelT]:
        stmt = select(self.model).where(*self._conditions(filter))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def insert(self, record: Mapping[str, Any]) -> ModelT:
        self._check_fields(record)
        try:
            async with self._session_factory() as session:
                document = self.model(**record)
                session.add(document)
                await session.flush()
        except IntegrityError as e:
            logger.warning("Insert rejected by unique index", collection=self.name)
            raise DuplicateKeyError(self.name, str(e.orig)) from e
        return document

    async def update_by_id(self, id: str, fields: Mapping[str, Any]) -> ModelT | None:
        self._check_fields(fields)
        try:
            async with self._session_factory() as session:
                document = await session.get(self.model, id)
                if document is None:
                    return None
                for key, value in fields.items():
                    setattr(document, key, value)
                await session.flush()
        except IntegrityError as e:
            logger.warning("Update rejected by unique index", collection=self.name, id=id)
            raise DuplicateKeyError(self.name, str(e.orig)) from e
        return document

    async def delete_by_id(self, id: str) -> ModelT | None:
        async with self._session_factory() as session:
            document = await session.get(self.model, id)
            if document is None:
                return None
            await session.delete(document)
            await session.flush()
        return document

    async def delete_many(self, filter: Mapping[str, Any]) -> int:
        stmt = (
            delete(self.model)
            .where(*self._conditions(filter))
            .execution_options(synchronize_session=False)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.rowcount or 0


@dataclass(frozen=True)
class Collections:
    """The two collections the resolvers work against."""

    clients: DocumentCollection[Any]
    projects: DocumentCollection[Any]


def default_collections(session_factory: SessionFactory = get_async_session) -> Collections:
    """Collections backed by the shared database engine."""
    return Collections(
        clients=SqlCollection(Clients, session_factory),
        projects=SqlCollection(Projects, session_factory),
    )
