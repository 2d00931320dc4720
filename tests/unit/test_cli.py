"""Tests for the operator CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from contact_api.cli import app
from contact_api.runtime.config.config_data import ConfigData, DatabaseConfig, SecurityConfig
from contact_api.runtime.context import with_context

runner = CliRunner()


@pytest.fixture
def file_database(tmp_path: Path):
    override = ConfigData(
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'cli.db'}"),
        security=SecurityConfig(bcrypt_rounds=4),
    )
    with with_context(override):
        yield


@pytest.mark.usefixtures("file_database")
class TestCli:
    def test_init_db_is_repeatable(self):
        first = runner.invoke(app, ["init-db"])
        second = runner.invoke(app, ["init-db"])

        assert first.exit_code == 0, first.output
        assert second.exit_code == 0
        assert "Database initialized" in second.output

    def test_create_admin_then_list(self):
        created = runner.invoke(app, ["create-admin", "root", "--password", "s3cret"])
        listed = runner.invoke(app, ["list-users"])

        assert created.exit_code == 0, created.output
        assert "Created admin 'root'" in created.output
        assert "root" in listed.output
        assert "ADMIN" in listed.output

    def test_duplicate_admin_fails(self):
        runner.invoke(app, ["create-admin", "root", "--password", "s3cret"])

        result = runner.invoke(app, ["create-admin", "root", "--password", "other"])

        assert result.exit_code == 1
        assert "Username is already taken!" in result.output

    def test_list_users_on_empty_database(self):
        runner.invoke(app, ["init-db"])

        result = runner.invoke(app, ["list-users"])

        assert "No users found" in result.output
