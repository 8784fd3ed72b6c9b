"""Configuration models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_COMPAT_LEVEL = 5


class PathsConfig(BaseModel):
    """Install-time paths."""
    model_config = ConfigDict(extra="ignore")

    hook_dir: str = Field(default="/usr/share/lxc/hooks")
    template_config: str = Field(default="/usr/share/lxc/config")
    proc_dir: str = Field(default="/proc")


class LxcLocalConfig(BaseModel):
    """Main configuration model."""
    model_config = ConfigDict(extra="ignore")

    compat_level: int = Field(default=DEFAULT_COMPAT_LEVEL, ge=1)
    log_level: str = Field(default="INFO")
    paths: PathsConfig = Field(default_factory=PathsConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()
