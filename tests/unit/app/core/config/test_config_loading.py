"""Unit tests for YAML configuration loading."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.app.runtime.config.config_data import ConfigData
from src.app.runtime.config.config_template import (
    apply_environment_overrides,
    load_config,
    load_templated_yaml,
    parse_config,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            text = "Server running at http://${HOST}:${PORT}/api"
            assert substitute_env_vars(text) == "Server running at http://localhost:8080/api"

    def test_substitute_env_var_with_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-default_value}") == "default_value"

    def test_substitute_env_var_with_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_substitute_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_substitute_env_var_with_custom_error(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError,
                match="Required environment variable DB_URL: database is required",
            ):
                substitute_env_vars("${DB_URL:?database is required}")


class TestParseConfig:
    def test_parses_config_section(self):
        content = """
config:
  app:
    port: 9000
  database:
    url: "sqlite:///./parsed.db"
"""
        config = parse_config(content)

        assert config.app.port == 9000
        assert config.database.url == "sqlite:///./parsed.db"
        assert config.logging.level == "INFO"

    def test_empty_document_is_rejected(self):
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            parse_config("")

    def test_invalid_yaml_is_rejected(self):
        with pytest.raises(ValueError, match="Error parsing YAML"):
            parse_config("config: [unclosed")

    def test_invalid_values_are_rejected(self):
        with pytest.raises(ValueError, match="Invalid configuration"):
            parse_config("config:\n  app:\n    environment: staging\n")


class TestLoadTemplatedYaml:
    def test_environment_prefixed_variables_win(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text('config:\n  database:\n    url: "${ORDERS_DB:-sqlite://}"\n')

        with patch.dict(
            os.environ,
            {"APP_ENVIRONMENT": "production", "PRODUCTION_ORDERS_DB": "sqlite:///prod.db"},
        ):
            config = load_templated_yaml(config_file)

        assert config.database.url == "sqlite:///prod.db"

    def test_apply_environment_overrides(self):
        with patch.dict(os.environ, {"STAGE_X_SETTING": "1"}):
            applied = apply_environment_overrides("stage")
            assert applied == ["X_SETTING"]
            assert os.environ["X_SETTING"] == "1"

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "absent.yaml")

        assert config == ConfigData()

    def test_repository_config_file_loads(self):
        config = load_config(Path(__file__).parents[5] / "config.yaml")

        assert config.app.environment == "test"
        assert config.database.create_tables_on_startup is True
