"""Configuration management for catalogfetch."""

from catalogfetch.config.paths import config_dir, config_file
from catalogfetch.config.settings import (
    Config,
    FetchConfig,
    OutputConfig,
    get_config,
    load_config,
    reload_config,
    save_config,
)

__all__ = [
    # paths
    "config_dir",
    "config_file",
    # settings
    "Config",
    "FetchConfig",
    "OutputConfig",
    "get_config",
    "load_config",
    "reload_config",
    "save_config",
]
