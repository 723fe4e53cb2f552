"""
Document store abstraction for clients and projects
"""

from .base import (
    DocumentCollection,
    DocumentValidationError,
    DuplicateKeyError,
    InvalidFilterError,
    StoreError,
)

__all__ = [
    "DocumentCollection",
    "DocumentValidationError",
    "DuplicateKeyError",
    "InvalidFilterError",
    "StoreError",
]
