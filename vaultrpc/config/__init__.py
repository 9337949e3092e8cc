"""Configuration module for vaultrpc."""

from vaultrpc.config.access import clear_config_cache, get_config, get_id_source
from vaultrpc.config.loader import build_id_source, get_config_path, load_config, save_config
from vaultrpc.config.schema import Config, IdsConfig, LoggingConfig

__all__ = [
    "Config",
    "IdsConfig",
    "LoggingConfig",
    "build_id_source",
    "clear_config_cache",
    "get_config",
    "get_config_path",
    "get_id_source",
    "load_config",
    "save_config",
]
