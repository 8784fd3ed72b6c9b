"""Tests for configuration file loading."""

import pytest

from lxclocal.config import CONFIG_ENV_VAR, load_config
from lxclocal.errors import ConfigurationError


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestLoadConfig:
    """Test load_config."""

    def test_defaults_without_file(self):
        config = load_config()
        assert config.compat_level == 5

    def test_load_from_file(self, tmp_path):
        """Test loading a YAML settings file."""
        config_file = tmp_path / "lxc-local.yaml"
        config_file.write_text("""
compat_level: 4
log_level: debug
paths:
  hook_dir: /opt/lxc/hooks
""")

        config = load_config(config_file)

        assert config.compat_level == 4
        assert config.log_level == "DEBUG"
        assert config.paths.hook_dir == "/opt/lxc/hooks"
        assert config.paths.template_config == "/usr/share/lxc/config"

    def test_env_var(self, tmp_path, monkeypatch):
        """Test that the environment variable names the file."""
        config_file = tmp_path / "env.yaml"
        config_file.write_text("compat_level: 7\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        assert load_config().compat_level == 7

    def test_explicit_path_wins_over_env(self, tmp_path, monkeypatch):
        env_file = tmp_path / "env.yaml"
        env_file.write_text("compat_level: 7\n")
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("compat_level: 2\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_file))

        assert load_config(explicit).compat_level == 2

    def test_empty_file_means_defaults(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_config(config_file).log_level == "INFO"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_invalid_values(self, tmp_path):
        """Test that validation errors become ConfigurationError."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("log_level: chatty\n")

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(config_file)
