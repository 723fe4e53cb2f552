"""
Root GraphQL query definitions
"""

from typing import Annotated

import strawberry

from ..types.client import Client
from ..types.project import Project


@strawberry.type(name="RootQueryType", description="Root Query")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="List of all projects")
    async def projects(self, info: strawberry.Info) -> list[Project]:
        from ..resolvers.project import resolve_projects

        return await resolve_projects(info.context)

    @strawberry.field(description="Get a project by ID")
    async def project(
        self,
        info: strawberry.Info,
        id: Annotated[strawberry.ID, strawberry.argument(description="ID of the project")],
    ) -> Project | None:
        from ..resolvers.project import resolve_project_by_id

        return await resolve_project_by_id(info.context, id)

    @strawberry.field(description="List of all clients")
    async def clients(self, info: strawberry.Info) -> list[Client]:
        from ..resolvers.client import resolve_clients

        return await resolve_clients(info.context)

    @strawberry.field(description="Get a client by ID")
    async def client(
        self,
        info: strawberry.Info,
        id: Annotated[strawberry.ID, strawberry.argument(description="ID of the client")],
    ) -> Client | None:
        from ..resolvers.client import resolve_client_by_id

        return await resolve_client_by_id(info.context, id)
