#!/usr/bin/env python3
"""
Main CLI entry point for the clientdesk server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from clientdesk import __version__
from clientdesk.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="clientdesk")
def cli() -> None:
    """clientdesk CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=4000, type=int, help="Port to bind to (default: 4000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--workers", default=1, type=int, help="Number of worker processes (default: 1)"
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the clientdesk API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting clientdesk API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # The app module reads settings at import time, including in reloaded workers
    if log_level == "debug":
        os.environ["CLIENTDESK_DEBUG"] = "true"
        os.environ["CLIENTDESK_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("CLIENTDESK_DEBUG", "false")
        os.environ.setdefault("CLIENTDESK_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "clientdesk.api.app:app",
            host=host,
            port=port,
            reload=reload,
            workers=(workers if not reload else 1),
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option("--database-url", default=None, help="Override CLIENTDESK_DATABASE_URL")
def init_db(database_url: str | None) -> None:
    """Create the clients and projects tables if they do not exist."""
    from clientdesk.database import create_tables, dispose_database, init_database

    configure_logging(debug=False)

    async def _run() -> None:
        init_database(database_url, force_reinit=True)
        try:
            await create_tables()
        finally:
            await dispose_database()

    try:
        asyncio.run(_run())
    except Exception as e:
        logger.error("Table creation failed", error=str(e))
        sys.exit(1)


@cli.command("issue-token")
@click.option("--subject", required=True, help="Value of the `sub` claim")
@click.option("--role", default=None, help="Role claim (defaults to the mutation role)")
@click.option("--hours", default=24, type=int, help="Token lifetime in hours (default: 24)")
def issue_token(subject: str, role: str | None, hours: int) -> None:
    """Print a signed JWT for local development."""
    from clientdesk.auth.adapters.jwt import JWTAuthAdapter
    from clientdesk.config import settings

    if not settings.jwt_secret:
        logger.error("CLIENTDESK_JWT_SECRET is not set")
        sys.exit(1)

    adapter = JWTAuthAdapter(
        secret_key=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        role_claim=settings.jwt_role_claim,
        token_expiry_hours=hours,
    )
    token = asyncio.run(adapter.issue_token(subject, role=role or settings.mutation_role))
    click.echo(token)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
