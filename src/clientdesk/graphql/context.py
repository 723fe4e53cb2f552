"""
Typed per-request context handed to every resolver
"""

from __future__ import annotations

from strawberry.fastapi import BaseContext

from ..auth.context import AuthUser
from ..store.base import DocumentCollection
from ..store.sql import Collections


class RequestContext(BaseContext):
    """
    Everything a resolver may use for one request.

    The user is resolved once, when the context is built, and never
    reassigned afterwards. `required_role` is the role mutations demand;
    None turns the role check off.
    """

    def __init__(
        self,
        collections: Collections,
        user: AuthUser | None = None,
        required_role: str | None = None,
    ):
        super().__init__()
        self.collections = collections
        self.user = user
        self.required_role = required_role

    @property
    def clients(self) -> DocumentCollection:
        return self.collections.clients

    @property
    def projects(self) -> DocumentCollection:
        return self.collections.projects
