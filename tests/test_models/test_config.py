"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from lxclocal.models.config import LxcLocalConfig, PathsConfig


class TestLxcLocalConfig:
    """Test LxcLocalConfig model."""

    def test_defaults(self):
        """Test default values."""
        config = LxcLocalConfig()

        assert config.compat_level == 5
        assert config.log_level == "INFO"
        assert config.paths.hook_dir == "/usr/share/lxc/hooks"
        assert config.paths.template_config == "/usr/share/lxc/config"
        assert config.paths.proc_dir == "/proc"

    def test_log_level_normalized(self):
        """Test that log level is upper-cased."""
        config = LxcLocalConfig(log_level="debug")
        assert config.log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test validation of log level."""
        with pytest.raises(ValidationError) as exc_info:
            LxcLocalConfig(log_level="chatty")

        assert "log_level" in str(exc_info.value)

    def test_compat_level_must_be_positive(self):
        with pytest.raises(ValidationError):
            LxcLocalConfig(compat_level=0)

    def test_unknown_keys_ignored(self):
        """Test that extra keys don't break loading."""
        config = LxcLocalConfig(
            compat_level=3,
            legacy_option=True,
            paths={"hook_dir": "/opt/lxc/hooks", "unused": 1},
        )

        assert config.compat_level == 3
        assert config.paths.hook_dir == "/opt/lxc/hooks"
        assert not hasattr(config, "legacy_option")


class TestPathsConfig:
    def test_override(self):
        paths = PathsConfig(template_config="/etc/lxc/config")
        assert paths.template_config == "/etc/lxc/config"
        assert paths.hook_dir == "/usr/share/lxc/hooks"
