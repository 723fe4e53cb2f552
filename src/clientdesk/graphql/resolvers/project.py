from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

import strawberry

from ...errors import NotFoundError, ValidationError
from ...logging import get_logger
from ...validation import DEFAULT_PROJECT_STATUS, validate_project_input
from ..access_control import ensure_can_mutate
from ..types.client import Client
from ..types.project import Project, ProjectStatus, ProjectStatusUpdate

if TYPE_CHECKING:
    from ..context import RequestContext

logger = get_logger(__name__)


def _status_value(status: Enum | str | None) -> str | None:
    if isinstance(status, Enum):
        return status.value
    return status


def _raise_if_invalid(record: dict[str, Any], partial: bool = False) -> None:
    result = validate_project_input(record, partial=partial)
    if not result.valid:
        logger.info("Project input rejected", field=result.field, reason=result.message)
        raise ValidationError(result.message or "Invalid project input", field=result.field)


# Query resolvers
async def resolve_projects(context: RequestContext) -> list[Project]:
    """Resolve every project."""
    documents = await context.projects.find_all()
    return [Project.from_document(document) for document in documents]


async def resolve_project_by_id(context: RequestContext, id: str) -> Project:
    """
    Resolve a project by its ID.

    Raises:
        NotFoundError: If no project has this ID
    """
    document = await context.projects.find_by_id(id)
    if document is None:
        logger.info("Project not found", project_id=id)
        raise NotFoundError("Project not found")
    return Project.from_document(document)


# Field resolvers
async def resolve_project_client(project: Project, context: RequestContext) -> Client | None:
    """
    The client a project points at, or None when that client does not exist.

    clientId is not checked on create, so a dangling reference is a normal
    state here rather than an error.
    """
    document = await context.clients.find_by_id(str(project.client_id))
    if document is None:
        logger.debug(
            "Project references a missing client",
            project_id=str(project.id),
            client_id=str(project.client_id),
        )
        return None
    return Client.from_document(document)


# Mutation resolvers
async def add_project(
    context: RequestContext,
    name: str,
    client_id: str,
    description: str | None = None,
    status: ProjectStatus | str | None = None,
) -> Project:
    """
    Validate and insert a project.

    The client ID is stored as given; no client lookup is made.

    Raises:
        ValidationError: Input breaks a validation rule; nothing is written
    """
    ensure_can_mutate(context)

    record = {
        "name": name,
        "description": description,
        "status": _status_value(status) or DEFAULT_PROJECT_STATUS,
        "client_id": client_id,
    }
    _raise_if_invalid(record)

    document = await context.projects.insert(record)
    logger.info("Project created", project_id=str(document.id), client_id=client_id)
    return Project.from_document(document)


async def delete_project(context: RequestContext, id: str) -> Project | None:
    """Delete a project. Returns None, without raising, when it does not exist."""
    ensure_can_mutate(context)

    document = await context.projects.delete_by_id(id)
    if document is None:
        logger.info("Project not found for deletion", project_id=id)
        return None

    logger.info("Project deleted", project_id=id)
    return Project.from_document(document)


async def update_project(
    context: RequestContext,
    id: str,
    name: str | None = strawberry.UNSET,
    description: str | None = strawberry.UNSET,
    status: ProjectStatusUpdate | str | None = strawberry.UNSET,
) -> Project | None:
    """
    Replace the supplied fields of a project; omitted (UNSET) fields keep their
    value. An explicit None clears the description and is rejected for name
    and status.

    Any status may follow any other. Returns None, without raising, when the
    project does not exist.

    Raises:
        ValidationError: A supplied field breaks a validation rule
    """
    ensure_can_mutate(context)

    supplied = {"name": name, "description": description, "status": status}
    fields = {
        key: _status_value(value) if key == "status" else value
        for key, value in supplied.items()
        if value is not strawberry.UNSET
    }
    _raise_if_invalid(fields, partial=True)

    document = await context.projects.update_by_id(id, fields)
    if document is None:
        logger.info("Project not found for update", project_id=id)
        return None

    logger.info("Project updated", project_id=id, fields=sorted(fields))
    return Project.from_document(document)
