"""Access gate: token authentication and role authorization."""

from __future__ import annotations

from ..errors import ForbiddenError, UnauthorizedError
from ..logging import get_logger
from .adapters.base import AuthAdapter, AuthenticationError
from .context import AuthUser

logger = get_logger(__name__)


def extract_token(authorization: str | None) -> str | None:
    """Accept either a bare token or `Bearer <token>`."""
    if not authorization:
        return None
    token = authorization[7:] if authorization.startswith("Bearer ") else authorization
    return token.strip() or None


async def authenticate(authorization: str | None, adapter: AuthAdapter) -> AuthUser:
    """
    Verify the Authorization header and return the caller.

    Raises:
        UnauthorizedError: If no token was sent or the token does not verify
    """
    token = extract_token(authorization)
    if token is None:
        raise UnauthorizedError("Unauthorized")

    try:
        principal = await adapter.verify_token(token)
    except AuthenticationError as e:
        logger.warning("Authentication failed", error=str(e))
        raise UnauthorizedError("Unauthorized") from e

    user = AuthUser.from_principal(principal)
    logger.debug("Request authenticated", subject=user.subject, role=user.role)
    return user


async def authenticate_optional(
    authorization: str | None, adapter: AuthAdapter | None
) -> AuthUser | None:
    """
    Optional authentication - returns None if no usable token.

    Use this when building the request context; operations that need a role
    call `authorize`, which turns a missing user into UnauthorizedError.
    """
    if adapter is None or extract_token(authorization) is None:
        return None
    try:
        return await authenticate(authorization, adapter)
    except UnauthorizedError:
        return None


def authorize(user: AuthUser | None, required_role: str) -> AuthUser:
    """
    Require an authenticated user holding `required_role`.

    Raises:
        UnauthorizedError: If there is no authenticated user
        ForbiddenError: If the user's role differs from `required_role`
    """
    if user is None:
        raise UnauthorizedError("Unauthorized")
    if not user.has_role(required_role):
        logger.info(
            "Role check failed", subject=user.subject, role=user.role, required=required_role
        )
        raise ForbiddenError("Forbidden")
    return user
