"""Document store interface used by the resolvers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

DocT = TypeVar("DocT")


class StoreError(Exception):
    """Base exception for store-level failures."""

    pass


class DuplicateKeyError(StoreError):
    """A write violated a unique index."""

    def __init__(self, collection: str, detail: str):
        super().__init__(f"Duplicate key in '{collection}': {detail}")
        self.collection = collection
        self.detail = detail


class DocumentValidationError(StoreError):
    """The persistence layer rejected a field value."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class InvalidFilterError(StoreError):
    """A filter referenced a field the collection does not have."""

    pass


class DocumentCollection(ABC, Generic[DocT]):
    """
    Abstract collection of documents addressed by an opaque string id.

    Every method is a single atomic store operation. Failures propagate as
    raised; implementations never translate them into ``None``.
    """

    name: str

    @abstractmethod
    async def find_by_id(self, id: str) -> DocT | None:
        """Return the document with ``id`` or None."""
        pass

    @abstractmethod
    async def find_all(self, filter: Mapping[str, Any] | None = None) -> list[DocT]:
        """Return every document whose fields equal the values in ``filter``."""
        pass

    @abstractmethod
    async def insert(self, record: Mapping[str, Any]) -> DocT:
        """Insert a new document and return it with its assigned id."""
        pass

    @abstractmethod
    async def update_by_id(self, id: str, fields: Mapping[str, Any]) -> DocT | None:
        """Replace the given fields; return the updated document or None."""
        pass

    @abstractmethod
    async def delete_by_id(self, id: str) -> DocT | None:
        """Delete a document; return what was deleted or None."""
        pass

    @abstractmethod
    async def delete_many(self, filter: Mapping[str, Any]) -> int:
        """Delete every matching document and return how many were removed."""
        pass
