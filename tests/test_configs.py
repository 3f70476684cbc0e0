"""Tests for RegistryConfig loading and create_registry."""

import logging

import pytest
import yaml

from scopehub import (
    ReleasePolicy,
    RegistryConfig,
    ResourceRegistry,
    create_registry,
    load_config,
)
from scopehub.configs import CONFIG_ENV_VAR


# ============================================================================
# Tests: RegistryConfig
# ============================================================================

class TestRegistryConfig:
    """Test the config model and YAML loading."""

    def test_defaults(self):
        config = RegistryConfig()

        assert config.name == "scope"
        assert config.release_policy is ReleasePolicy.FAIL_FAST
        assert config.builtin_kinds is True
        assert config.log is None

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "scopehub.yaml"
        path.write_text(
            "name: request\n"
            "release_policy: best_effort\n"
            "builtin_kinds: false\n"
            "log:\n"
            "  name: scopehub.tests.yaml\n"
            "  level: DEBUG\n"
            "  handlers:\n"
            "    - type: console\n"
            "      use_rich: false\n"
        )

        config = RegistryConfig.from_yaml_file(path)

        assert config.name == "request"
        assert config.release_policy is ReleasePolicy.BEST_EFFORT
        assert config.builtin_kinds is False
        assert config.log.level == "DEBUG"
        assert len(config.log.handlers) == 1

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RegistryConfig.from_yaml_file(path) == RegistryConfig()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RegistryConfig.from_yaml_file(tmp_path / "missing.yaml")

    def test_malformed_yaml_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("name: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            RegistryConfig.from_yaml_file(path)

    def test_invalid_policy_raises(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("release_policy: retry_forever\n")

        with pytest.raises(ValueError, match="RegistryConfig"):
            RegistryConfig.from_yaml_file(path)

    def test_to_yaml_string_roundtrips_policy(self):
        text = RegistryConfig(release_policy=ReleasePolicy.BEST_EFFORT).to_yaml_string()
        assert "release_policy: best_effort" in text


class TestLoadConfig:
    """Test config resolution order."""

    def test_defaults_when_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)

        assert load_config() == RegistryConfig()

    def test_reads_current_directory_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / "scopehub.yaml").write_text("name: from-cwd\n")

        assert load_config().name == "from-cwd"

    def test_env_var_takes_precedence(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "scopehub.yaml").write_text("name: from-cwd\n")
        env_file = tmp_path / "env.yaml"
        env_file.write_text("name: from-env\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_file))

        assert load_config().name == "from-env"

    def test_env_var_pointing_nowhere_raises(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.yaml"))

        with pytest.raises(FileNotFoundError):
            load_config()

    def test_explicit_path_wins(self, tmp_path, monkeypatch):
        env_file = tmp_path / "env.yaml"
        env_file.write_text("name: from-env\n")
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("name: explicit\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_file))

        assert load_config(explicit).name == "explicit"


# ============================================================================
# Tests: create_registry
# ============================================================================

class TestCreateRegistry:
    """Test building registries from config."""

    def test_default_registry(self):
        registry = create_registry()

        assert isinstance(registry, ResourceRegistry)
        assert registry.name == "scope"
        assert registry.kinds() == ["list", "map", "set"]
        assert not registry.closed

    def test_each_call_builds_a_fresh_registry(self):
        first = create_registry()
        second = create_registry()

        assert first is not second
        assert first.acquire_singleton("map", "x") is not second.acquire_singleton("map", "x")

    def test_config_applied(self):
        config = RegistryConfig(
            name="request",
            release_policy=ReleasePolicy.BEST_EFFORT,
            builtin_kinds=False,
        )
        registry = create_registry(config)

        assert registry.name == "request"
        assert registry.release_policy is ReleasePolicy.BEST_EFFORT
        assert registry.kinds() == []

    def test_name_override(self):
        registry = create_registry(RegistryConfig(name="request"), name="request-42")
        assert registry.name == "request-42"

    def test_log_config_applied(self):
        config = RegistryConfig(log={
            "name": "scopehub.tests.factory",
            "level": "DEBUG",
            "handlers": [{"type": "console", "use_rich": False}],
        })
        create_registry(config)

        logger = logging.getLogger("scopehub.tests.factory")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
