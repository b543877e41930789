"""Configuration file models and loading."""

from nodeprune.config.loader import ConfigError, load_config
from nodeprune.config.models import PruneConfig, RulesConfig

__all__ = [
    "ConfigError",
    "PruneConfig",
    "RulesConfig",
    "load_config",
]
