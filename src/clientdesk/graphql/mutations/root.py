"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.client import Client
from ..types.project import Project, ProjectStatus, ProjectStatusUpdate


@strawberry.type(description="Mutations")
class Mutation:
    """Root GraphQL mutation type."""

    # Client mutations
    @strawberry.mutation(name="addClient", description="Add a new client")
    async def add_client(
        self,
        info: strawberry.Info,
        name: Annotated[str, strawberry.argument(description="Name of the client")],
        email: Annotated[str, strawberry.argument(description="Email of the client")],
        phone: Annotated[str, strawberry.argument(description="Phone number of the client")],
    ) -> Client | None:
        from ..resolvers.client import add_client

        return await add_client(info.context, name, email, phone)

    @strawberry.mutation(name="deleteClient", description="Delete a client by ID")
    async def delete_client(
        self,
        info: strawberry.Info,
        id: Annotated[strawberry.ID, strawberry.argument(description="ID of the client")],
    ) -> Client | None:
        from ..resolvers.client import delete_client

        return await delete_client(info.context, id)

    # Project mutations
    @strawberry.mutation(name="addProject", description="Add a new project")
    async def add_project(
        self,
        info: strawberry.Info,
        name: str,
        client_id: strawberry.ID,
        description: str | None = None,
        status: ProjectStatus = ProjectStatus.NOT_STARTED,
    ) -> Project | None:
        from ..resolvers.project import add_project

        return await add_project(
            info.context, name, client_id, description=description, status=status
        )

    @strawberry.mutation(name="deleteProject", description="Delete a project by ID")
    async def delete_project(self, info: strawberry.Info, id: strawberry.ID) -> Project | None:
        from ..resolvers.project import delete_project

        return await delete_project(info.context, id)

    # Omitted arguments stay UNSET; an explicit null is passed through.
    @strawberry.mutation(name="updateProject", description="Update fields of a project")
    async def update_project(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = strawberry.UNSET,
        description: str | None = strawberry.UNSET,
        status: ProjectStatusUpdate | None = strawberry.UNSET,
    ) -> Project | None:
        from ..resolvers.project import update_project

        return await update_project(
            info.context, id, name=name, description=description, status=status
        )
