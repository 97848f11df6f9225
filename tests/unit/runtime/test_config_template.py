"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from orm_bootstrap.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

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
                match="Required environment variable DB_PATH: storage is required",
            ):
                substitute_env_vars("${DB_PATH:?storage is required}")

    def test_text_without_placeholders_is_unchanged(self):
        assert substitute_env_vars("dialect: sqlite") == "dialect: sqlite"


class TestLoadTemplatedYaml:
    """Test cases for load_templated_yaml function."""

    def test_missing_file_returns_defaults(self, tmp_path: Path):
        config = load_templated_yaml(tmp_path / "absent.yaml")

        assert config.database.connection_string == "sqlite:///./database.sqlite"

    def test_loads_config_section(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  database:\n"
            "    dialect: sqlite\n"
            "    storage: ${LESSON_DB:-./lesson.sqlite}\n"
            "  bootstrap:\n"
            "    on_startup: true\n"
        )

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(config_file, env_mode="development")

        assert config.database.storage == "./lesson.sqlite"
        assert config.bootstrap.on_startup is True

    def test_environment_prefixed_override(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  database:\n    storage: ${LESSON_DB:-./lesson.sqlite}\n")

        with patch.dict(os.environ, {"TEST_LESSON_DB": ":memory:"}, clear=True):
            config = load_templated_yaml(config_file, env_mode="test")

        assert config.database.is_memory

    def test_invalid_yaml_raises_value_error(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config: [unclosed\n")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(config_file, env_mode="development")

    def test_non_mapping_content_raises_value_error(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_templated_yaml(config_file, env_mode="development")

    def test_invalid_values_raise_value_error(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  database:\n    dialect: oracle\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file, env_mode="development")
