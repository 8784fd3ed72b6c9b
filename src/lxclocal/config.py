"""Configuration loading."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from lxclocal.errors import ConfigurationError
from lxclocal.models.config import LxcLocalConfig


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LXC_LOCAL_CONFIG"


def load_config(path: Optional[Union[str, Path]] = None) -> LxcLocalConfig:
    """Load settings from a YAML file, falling back to defaults.

    An explicit ``path`` wins over the ``LXC_LOCAL_CONFIG`` environment
    variable. With neither, the built-in defaults are returned.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)

    if not path:
        logger.debug("No configuration file given, using defaults")
        return LxcLocalConfig()

    config_file = Path(path)
    if not config_file.is_file():
        raise ConfigurationError(f"Configuration file not found: {config_file}")

    yaml = YAML(typ="safe")
    try:
        data = yaml.load(config_file.read_text())
    except YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping in {config_file}")

    try:
        config = LxcLocalConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise ConfigurationError(f"Invalid configuration in {config_file}: {e}") from e

    logger.debug(f"Loaded configuration from {config_file}")
    return config
