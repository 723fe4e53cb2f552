#!/usr/bin/env python3
"""
clientdesk-migrate: Alembic commands for the clients and projects schema.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from alembic.util.exc import AutogenerateDiffsDetected
from clientdesk import __version__
from clientdesk.logging import configure_logging, get_logger

logger = get_logger(__name__)

PROJECT_DIR = Path(__file__).parent.parent.parent.parent


def get_alembic_config(database_url: str | None = None) -> Config:
    """Build the Alembic config from the project's alembic.ini.

    `database_url` overrides CLIENTDESK_DATABASE_URL for this invocation; it is
    read back by alembic/env.py through `config.attributes`.
    """
    alembic_ini = PROJECT_DIR / "alembic.ini"
    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(PROJECT_DIR / "alembic"))
    if database_url:
        config.attributes["database_url"] = database_url
    return config


def _run(action: str, operation: Callable[[Config], None]) -> None:
    database_url = click.get_current_context().obj.get("database_url")
    try:
        operation(get_alembic_config(database_url))
    except Exception as e:
        logger.error(f"{action} failed", error=str(e))
        sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option("--database-url", default=None, help="Override CLIENTDESK_DATABASE_URL")
@click.version_option(version=__version__, prog_name="clientdesk-migrate")
@click.pass_context
def main(ctx: click.Context, log_level: str, database_url: str | None) -> None:
    """Manage the clientdesk database schema."""
    configure_logging(debug=(log_level == "debug"), level=log_level)
    ctx.obj = {"database_url": database_url}


@main.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    logger.info("Upgrading database", revision=revision)
    _run("Database upgrade", lambda config: command.upgrade(config, revision))
    logger.info("Database upgrade completed successfully")


@main.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    logger.info("Downgrading database", revision=revision)
    _run("Database downgrade", lambda config: command.downgrade(config, revision))
    logger.info("Database downgrade completed successfully")


@main.command()
@click.argument("revision", default="head")
def stamp(revision: str) -> None:
    """Record a revision without running it, e.g. after `clientdesk init-db`."""
    _run("Stamp", lambda config: command.stamp(config, revision))
    logger.info("Database stamped", revision=revision)


@main.command()
def check() -> None:
    """Fail if the models have changes no migration covers."""
    database_url = click.get_current_context().obj.get("database_url")
    try:
        command.check(get_alembic_config(database_url))
    except AutogenerateDiffsDetected as e:
        logger.error("Models and migrations differ", detail=str(e))
        sys.exit(1)
    except Exception as e:
        logger.error("Migration check failed", error=str(e))
        sys.exit(1)
    logger.info("Migrations match the models")


@main.command()
def current() -> None:
    """Show current database revision."""
    _run("Reading the current revision", command.current)


@main.command()
def history() -> None:
    """Show migration history."""
    _run("Reading migration history", command.history)


if __name__ == "__main__":
    main()
