"""Unit tests for configuration loading and the context manager."""

from pathlib import Path

import pytest

from contact_api.runtime.config.config_data import ConfigData, DatabaseConfig, JWTConfig
from contact_api.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)
from contact_api.runtime.context import get_config, merge_configs, with_context

CONFIG_YAML = """
config:
  app:
    environment: test
    port: ${CONTACT_API_TEST_PORT:-9090}
  jwt:
    secret_key: ${CONTACT_API_TEST_SECRET:?signing secret required}
    expiration_time_ms: 1000
  database:
    url: sqlite://
"""


class TestSubstitution:
    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("CONTACT_API_TEST_VAR", raising=False)

        assert substitute_env_vars("x=${CONTACT_API_TEST_VAR:-fallback}") == "x=fallback"

    def test_environment_wins_over_default(self, monkeypatch):
        monkeypatch.setenv("CONTACT_API_TEST_VAR", "set")

        assert substitute_env_vars("${CONTACT_API_TEST_VAR:-fallback}") == "set"

    def test_required_variable_missing(self, monkeypatch):
        monkeypatch.delenv("CONTACT_API_TEST_VAR", raising=False)

        with pytest.raises(ValueError, match="must be provided"):
            substitute_env_vars("${CONTACT_API_TEST_VAR:?must be provided}")
        with pytest.raises(ValueError, match="not set"):
            substitute_env_vars("${CONTACT_API_TEST_VAR}")


class TestLoadTemplatedYaml:
    def test_loads_into_config_data(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CONTACT_API_TEST_SECRET", "c2VjcmV0")
        monkeypatch.delenv("CONTACT_API_TEST_PORT", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(CONFIG_YAML)

        config = load_templated_yaml(path)

        assert config.app.environment == "test"
        assert config.app.port == 9090
        assert config.jwt.secret_key == "c2VjcmV0"
        assert config.jwt.expiration_time_seconds == 1
        assert config.database.is_in_memory is True

    def test_environment_prefixed_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("APP_ENVIRONMENT", "staging")
        monkeypatch.setenv("STAGING_CONTACT_API_TEST_SECRET", "c3RhZ2luZw==")
        monkeypatch.delenv("CONTACT_API_TEST_SECRET", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(CONFIG_YAML)

        config = load_templated_yaml(path)

        assert config.jwt.secret_key == "c3RhZ2luZw=="

    def test_invalid_values_are_reported(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  app:\n    port: not-a-number\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)


class TestContextOverrides:
    def test_with_context_overrides_only_set_fields(self):
        original = get_config()
        override = ConfigData(jwt=JWTConfig(expiration_time_ms=1234))

        with with_context(override):
            current = get_config()
            assert current.jwt.expiration_time_ms == 1234
            assert current.database.url == original.database.url

        assert get_config() is original

    def test_merge_configs_keeps_base_values(self):
        base = ConfigData(database=DatabaseConfig(url="sqlite:///base.db"))
        override = ConfigData(jwt=JWTConfig(clock_skew=5))

        merged = merge_configs(base, override)

        assert merged.database.url == "sqlite:///base.db"
        assert merged.jwt.clock_skew == 5
