"""
Database module for the clientdesk backend
"""

from .connection import (
    create_tables,
    dispose_database,
    get_async_engine,
    get_async_session,
    init_database,
)

__all__ = [
    "create_tables",
    "dispose_database",
    "get_async_engine",
    "get_async_session",
    "init_database",
]
