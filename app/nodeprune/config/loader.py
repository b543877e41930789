"""Configuration file loading.

Reads the TOML configuration file and validates it into a PruneConfig.
"""

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from nodeprune.config.models import PruneConfig
from nodeprune.core.paths import get_config_path

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """The configuration file could not be read or is invalid."""


def load_config(path: Path | None = None) -> PruneConfig:
    """Load and validate the configuration file.

    A missing default configuration file is not an error: built-in
    defaults are used. A missing file that was asked for explicitly is.

    Args:
        path: Explicit config file path. Defaults to the XDG config path.

    Returns:
        Validated PruneConfig.

    Raises:
        ConfigError: If the file is missing (explicit path only), unreadable,
            not valid TOML, or fails validation.
    """
    explicit = path is not None
    config_path = path if path is not None else get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        if explicit:
            msg = f"Config file not found: {config_path}"
            raise ConfigError(msg) from e
        logger.debug("No config file at %s, using defaults", config_path)
        return PruneConfig()
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse {config_path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        config = PruneConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid configuration in {config_path}: {e}"
        raise ConfigError(msg) from e

    logger.debug("Loaded config from %s", config_path)
    return config
