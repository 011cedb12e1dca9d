"""Tests for the command line interface."""

from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from user_lookup.cli import app
from user_lookup.runtime.config.config_data import ConfigData, DatabaseConfig
from user_lookup.runtime.context import with_context

runner = CliRunner()


@pytest.fixture
def database_file(tmp_path: Path) -> Generator[Path]:
    """Point the configuration at a throwaway SQLite file."""
    path = tmp_path / "users.db"
    with with_context(ConfigData(database=DatabaseConfig(url=f"sqlite:///{path}"))):
        yield path


@pytest.fixture
def initialized_database(database_file: Path) -> Path:
    result = runner.invoke(app, ["db", "init"])
    assert result.exit_code == 0, result.output
    return database_file


def test_no_arguments_shows_help():
    result = runner.invoke(app, [])

    assert "Usage" in result.output


def test_db_init_creates_file(database_file: Path):
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0, result.output
    assert "Database initialized" in result.output
    assert database_file.exists()


def test_add_then_show(initialized_database: Path):
    added = runner.invoke(
        app,
        ["users", "add", "--email", "a@x.com", "--name", "Ann", "--instant", "2024-01-01T00:00:00"],
    )
    assert added.exit_code == 0, added.output
    assert "Created user 1" in added.output

    shown = runner.invoke(app, ["users", "show", "1"])

    assert shown.exit_code == 0, shown.output
    assert "a@x.com" in shown.output
    assert "Ann" in shown.output
    assert "2024-01-01T00:00:00+00:00" in shown.output


def test_show_missing_user(initialized_database: Path):
    result = runner.invoke(app, ["users", "show", "2"])

    assert result.exit_code == 0
    assert "No user with id 2" in result.output


def test_show_rejects_non_integer_id(initialized_database: Path):
    result = runner.invoke(app, ["users", "show", "abc"])

    assert result.exit_code == 2


def test_show_reports_storage_failure(database_file: Path):
    # Schema was never created
    result = runner.invoke(app, ["users", "show", "1"])

    assert result.exit_code == 1
    assert "Failed to look up user" in result.output
