"""
Error taxonomy for the resolution layer.

Every failure that leaves an operation resolver belongs to exactly one
``ErrorKind``. Classified errors carry their kind explicitly; anything else
(store connectivity, duplicate keys, persistence-layer validation, bugs) is
``INTERNAL`` and is only described in detail in the server logs.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Stable classification handed to the transport boundary."""

    NOT_FOUND = ("NOT_FOUND", 404)
    VALIDATION = ("BAD_USER_INPUT", 400)
    UNAUTHORIZED = ("UNAUTHENTICATED", 401)
    FORBIDDEN = ("FORBIDDEN", 403)
    INTERNAL = ("INTERNAL_SERVER_ERROR", 500)

    def __init__(self, code: str, status: int):
        self.code = code
        self.status = status

    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, "status": self.status}


class ResolutionError(Exception):
    """Base class for errors with a known classification."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, Any]:
        """GraphQL error extensions; graphql-core copies these onto the response error."""
        return self.kind.extensions()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class NotFoundError(ResolutionError):
    """Requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class ValidationError(ResolutionError):
    """Mutation input violates a shape rule; raised before any store call."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

    @property
    def extensions(self) -> dict[str, Any]:
        extensions = self.kind.extensions()
        if self.field:
            extensions["field"] = self.field
        return extensions


class UnauthorizedError(ResolutionError):
    """No valid credentials were presented."""

    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(ResolutionError):
    """Credentials are valid but lack the required role."""

    kind = ErrorKind.FORBIDDEN


class InternalError(ResolutionError):
    """Unclassified failure. The caller only ever sees the generic message."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


def classify(error: BaseException | None) -> ErrorKind:
    """Return the kind of ``error``; anything unclassified is INTERNAL."""
    if isinstance(error, ResolutionError):
        return error.kind
    return ErrorKind.INTERNAL
