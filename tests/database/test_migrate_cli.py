"""Tests for the clientdesk-migrate command group."""

from unittest.mock import patch

from click.testing import CliRunner

from clientdesk.database.cli import PROJECT_DIR, get_alembic_config, main


def test_alembic_config_points_at_project_scripts():
    config = get_alembic_config()

    assert config.get_main_option("script_location") == str(PROJECT_DIR / "alembic")
    assert "database_url" not in config.attributes


def test_database_url_override_is_passed_to_env():
    config = get_alembic_config("sqlite:///override.db")

    assert config.attributes["database_url"] == "sqlite:///override.db"


def test_upgrade_uses_override():
    runner = CliRunner()

    with patch("clientdesk.database.cli.command.upgrade") as upgrade:
        result = runner.invoke(main, ["--database-url", "sqlite:///x.db", "upgrade"])

    assert result.exit_code == 0, result.output
    config, revision = upgrade.call_args.args
    assert revision == "head"
    assert config.attributes["database_url"] == "sqlite:///x.db"


def test_failed_command_exits_non_zero():
    runner = CliRunner()

    with patch("clientdesk.database.cli.command.downgrade", side_effect=RuntimeError("boom")):
        result = runner.invoke(main, ["downgrade", "base"])

    assert result.exit_code == 1
