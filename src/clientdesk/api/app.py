"""
Main FastAPI application for the clientdesk backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import dispose_database, init_database
from ..database.connection import check_database_connection
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.sql import Collections

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting clientdesk API...")
    init_database()

    success, error_message = await check_database_connection()
    if success:
        logger.info("Database connection validation successful")
    else:
        logger.error("Database connection validation failed", error=error_message)
        if settings.environment.lower() in ("production", "prod"):
            raise RuntimeError(f"Database unavailable: {error_message}")

    if settings.auth_enabled and not settings.jwt_secret:
        logger.warning(
            "Auth is enabled but CLIENTDESK_JWT_SECRET is not set; every mutation will be rejected"
        )

    yield

    logger.info("Shutting down clientdesk API...")
    await dispose_database()


def create_app(collections: Collections | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="clientdesk API",
        description="Clients and their projects over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(collections=collections), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "clientdesk.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
