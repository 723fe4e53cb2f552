"""
Project GraphQL type definitions
"""

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any

import strawberry

if TYPE_CHECKING:
    from .client import Client


@strawberry.enum(description="Lifecycle state of a new project")
class ProjectStatus(Enum):
    """Project status accepted by addProject; values are what gets persisted."""

    NOT_STARTED = strawberry.enum_value("Not Started", name="new")
    IN_PROGRESS = strawberry.enum_value("In Progress", name="progress")
    COMPLETED = strawberry.enum_value("Completed", name="completed")


@strawberry.enum(description="Lifecycle state to move an existing project to")
class ProjectStatusUpdate(Enum):
    """Project status accepted by updateProject; any state may follow any other."""

    NOT_STARTED = strawberry.enum_value("Not Started", name="new")
    IN_PROGRESS = strawberry.enum_value("In Progress", name="progress")
    COMPLETED = strawberry.enum_value("Completed", name="completed")


@strawberry.type(description="Represents a project")
class Project:
    """Project type for GraphQL API."""

    id: strawberry.ID = strawberry.field(description="The ID of the project")
    name: str = strawberry.field(description="The name of the project")
    description: str | None = strawberry.field(description="The description of the project")
    status: str = strawberry.field(description="The status of the project")
    client_id: strawberry.ID = strawberry.field(
        description="The ID of the client the project belongs to"
    )

    @strawberry.field(description="The client associated with the project")
    async def client(
        self, info: strawberry.Info
    ) -> Annotated["Client", strawberry.lazy(".client")] | None:
        from ..resolvers.project import resolve_project_client

        return await resolve_project_client(self, info.context)

    @classmethod
    def from_document(cls, document: Any) -> "Project":
        return cls(
            id=strawberry.ID(str(document.id)),
            name=document.name,
            description=document.description,
            status=document.status,
            client_id=strawberry.ID(str(document.client_id)),
        )
