"""Authentication and authorization for clientdesk."""

from .adapters.base import AuthAdapter, AuthenticationError, Principal
from .context import AuthUser
from .factory import get_auth_adapter
from .middleware import authenticate, authenticate_optional, authorize

__all__ = [
    "AuthAdapter",
    "AuthenticationError",
    "AuthUser",
    "Principal",
    "authenticate",
    "authenticate_optional",
    "authorize",
    "get_auth_adapter",
]
