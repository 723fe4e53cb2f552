from __future__ import annotations

from typing import TYPE_CHECKING

from ...errors import NotFoundError, ValidationError
from ...logging import get_logger
from ...validation import validate_client_input
from ..access_control import ensure_can_mutate
from ..types.client import Client
from ..types.project import Project

if TYPE_CHECKING:
    from ..context import RequestContext

logger = get_logger(__name__)


# Query resolvers
async def resolve_clients(context: RequestContext) -> list[Client]:
    """Resolve every client."""
    documents = await context.clients.find_all()
    return [Client.from_document(document) for document in documents]


async def resolve_client_by_id(context: RequestContext, id: str) -> Client:
    """
    Resolve a client by its ID.

    Raises:
        NotFoundError: If no client has this ID
    """
    document = await context.clients.find_by_id(id)
    if document is None:
        logger.info("Client not found", client_id=id)
        raise NotFoundError("Client not found")
    return Client.from_document(document)


# Field resolvers
async def resolve_client_projects(client: Client, context: RequestContext) -> list[Project]:
    """Projects owned by a client. Only queried when the field is selected."""
    documents = await context.projects.find_all({"client_id": str(client.id)})
    return [Project.from_document(document) for document in documents]


# Mutation resolvers
async def add_client(context: RequestContext, name: str, email: str, phone: str) -> Client:
    """
    Validate and insert a new client.

    Raises:
        ValidationError: Input breaks a validation rule; nothing is written
    """
    ensure_can_mutate(context)

    record = {"name": name, "email": email, "phone": phone}
    result = validate_client_input(record)
    if not result.valid:
        logger.info("Client input rejected", field=result.field, reason=result.message)
        raise ValidationError(result.message or "Invalid client input", field=result.field)

    # Duplicate emails and phone numbers outside the regional format are
    # rejected by the store and surface as internal errors.
    document = await context.clients.insert(record)
    logger.info("Client created", client_id=str(document.id))
    return Client.from_document(document)


async def delete_client(context: RequestContext, id: str) -> Client:
    """
    Delete a client and then every project that references it.

    The project cascade is only issued after the client delete has succeeded,
    and the deleted client is returned only once the cascade has finished.

    Raises:
        NotFoundError: If no client has this ID; no project is touched
    """
    ensure_can_mutate(context)

    document = await context.clients.delete_by_id(id)
    if document is None:
        logger.info("Client not found for deletion", client_id=id)
        raise NotFoundError("Client not found")

    removed = await context.projects.delete_many({"client_id": id})
    logger.info("Client deleted", client_id=id, projects_removed=removed)
    return Client.from_document(document)
