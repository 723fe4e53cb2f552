"""
Shared access control logic for GraphQL resolvers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..auth.context import AuthUser
from ..auth.middleware import authorize

if TYPE_CHECKING:
    from .context import RequestContext


def ensure_can_mutate(context: RequestContext) -> AuthUser | None:
    """
    Run the role check that precedes every mutation.

    Returns the authorized user, or the (possibly absent) user unchanged when
    the context carries no required role.

    Raises:
        UnauthorizedError: No authenticated user
        ForbiddenError: User lacks the required role
    """
    if context.required_role is None:
        return context.user
    return authorize(context.user, context.required_role)
