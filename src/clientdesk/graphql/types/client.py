"""
Client GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

import strawberry

if TYPE_CHECKING:
    from .project import Project


@strawberry.type(description="Represents a client")
class Client:
    """Client type for GraphQL API."""

    id: strawberry.ID = strawberry.field(description="The ID of the client")
    name: str = strawberry.field(description="The name of the client")
    email: str = strawberry.field(description="The email of the client")
    phone: str = strawberry.field(description="The phone number of the client")

    @strawberry.field(description="List of projects for the client")
    async def projects(
        self, info: strawberry.Info
    ) -> list[Annotated["Project", strawberry.lazy(".project")]]:
        from ..resolvers.client import resolve_client_projects

        return await resolve_client_projects(self, info.context)

    @classmethod
    def from_document(cls, document: Any) -> "Client":
        return cls(
            id=strawberry.ID(str(document.id)),
            name=document.name,
            email=document.email,
            phone=document.phone,
        )
