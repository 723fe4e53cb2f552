"""
Main GraphQL schema definition using Strawberry
"""

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..auth.adapters.base import AuthAdapter
from ..auth.factory import get_auth_adapter
from ..auth.middleware import authenticate_optional
from ..config import settings
from ..errors import ErrorKind, classify
from ..logging import bind_user_id, get_logger
from ..store.sql import Collections, default_collections
from .context import RequestContext
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def is_internal_error(error: GraphQLError) -> bool:
    """True for errors raised by resolvers that carry no classification."""
    original = error.original_error
    if original is None or isinstance(original, GraphQLError):
        return False
    return classify(original) is ErrorKind.INTERNAL


class MaskInternalErrors(MaskErrors):
    """Replace unclassified resolver errors with a generic internal error."""

    def __init__(self) -> None:
        super().__init__(should_mask_error=is_internal_error, error_message=INTERNAL_ERROR_MESSAGE)

    def anonymise_error(self, error: GraphQLError) -> GraphQLError:
        return GraphQLError(
            self.error_message,
            nodes=error.nodes,
            source=error.source,
            positions=error.positions,
            path=error.path,
            original_error=None,
            extensions=ErrorKind.INTERNAL.extensions(),
        )


class ClientDeskSchema(strawberry.Schema):
    """Schema whose error hook is the one place failures get logged."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if original is None or isinstance(original, GraphQLError):
                logger.info("GraphQL request error", message=error.message, path=error.path)
                continue

            kind = classify(original)
            if kind is ErrorKind.INTERNAL:
                logger.error(
                    "[InternalServerError]",
                    path=error.path,
                    error=repr(original),
                    exc_info=original,
                )
            else:
                logger.warning(
                    f"[{kind.name}]: {original}",
                    kind=kind.name,
                    status=kind.status,
                    path=error.path,
                )


# Create the GraphQL schema
schema = ClientDeskSchema(
    query=Query,
    mutation=Mutation,
    extensions=[MaskInternalErrors()],
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    This ensures that all type references can be resolved and catches
    circular reference errors early, causing the server to fail fast
    rather than returning 404s at runtime.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(
    collections: Collections | None = None,
    auth_adapter: AuthAdapter | None = None,
) -> GraphQLRouter[RequestContext, None]:
    """Create a GraphQL router for FastAPI."""
    collections = collections or default_collections()
    if auth_adapter is None and settings.jwt_secret:
        auth_adapter = get_auth_adapter()
    required_role = settings.mutation_role if settings.auth_enabled else None

    async def get_context(request: Request) -> RequestContext:
        """Get the context for GraphQL resolvers."""
        user = await authenticate_optional(request.headers.get("authorization"), auth_adapter)
        bind_user_id(user.subject if user else None)
        return RequestContext(collections=collections, user=user, required_role=required_role)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=settings.debug,
        context_getter=get_context,
    )
