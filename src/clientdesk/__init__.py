"""
clientdesk backend
GraphQL API for clients and the projects they own
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
