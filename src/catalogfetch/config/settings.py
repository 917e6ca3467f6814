"""Configuration structures and loading for catalogfetch."""

import os
import tomllib
from pathlib import Path
from typing import Annotated

import msgspec


# Default values
DEFAULT_URL = "https://fakestoreapi.com/products"
DEFAULT_TIMEOUT = 5.0
DEFAULT_MAX_RETRIES = 5
DEFAULT_OUTPUT_PATH = "grouped_products.json"
DEFAULT_INDENT = 2


# Fetch configuration
class FetchConfig(msgspec.Struct, omit_defaults=True, forbid_unknown_fields=True):
    """Fetch behavior settings."""

    url: str = DEFAULT_URL
    timeout: Annotated[float, msgspec.Meta(gt=0)] = DEFAULT_TIMEOUT
    max_retries: Annotated[int, msgspec.Meta(ge=0)] = DEFAULT_MAX_RETRIES


# Output configuration
class OutputConfig(msgspec.Struct, omit_defaults=True, forbid_unknown_fields=True):
    """Where and how the grouped catalog is written."""

    path: str = DEFAULT_OUTPUT_PATH
    indent: Annotated[int, msgspec.Meta(ge=0)] = DEFAULT_INDENT


# Main configuration
class Config(msgspec.Struct, omit_defaults=True, forbid_unknown_fields=True):
    """Main configuration structure."""

    fetch: FetchConfig = msgspec.field(default_factory=FetchConfig)
    output: OutputConfig = msgspec.field(default_factory=OutputConfig)


def _load_from_toml(path: Path) -> dict:
    """Load configuration from TOML file."""
    if not path.exists():
        return {}

    with path.open("rb") as f:
        return tomllib.load(f)


def _save_to_toml(data: dict, path: Path) -> None:
    """Save configuration to TOML file."""
    import tomli_w

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def convert_config(data: dict) -> Config:
    """Convert raw dict to Config struct.

    Raises:
        msgspec.ValidationError: If a value has the wrong type or is out of range
    """
    return msgspec.convert(data, type=Config)


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config.

    CATALOGFETCH_URL: Catalog endpoint to fetch
    CATALOGFETCH_OUTPUT: Output file path
    """
    if url := os.environ.get("CATALOGFETCH_URL"):
        fetch = msgspec.structs.replace(config.fetch, url=url)
        config = msgspec.structs.replace(config, fetch=fetch)

    if output_path := os.environ.get("CATALOGFETCH_OUTPUT"):
        output = msgspec.structs.replace(config.output, path=output_path)
        config = msgspec.structs.replace(config, output=output)

    return config


# Config state storage
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = load_config()
    return _config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file with defaults."""
    from .paths import config_file

    config_path = path or config_file()

    raw_data = _load_from_toml(config_path)
    if not raw_data:
        config = Config()
    else:
        config = convert_config(raw_data)

    return _apply_env_overrides(config)


def save_config(config: Config, path: Path | None = None) -> None:
    """Save configuration to file."""
    from .paths import config_file

    config_path = path or config_file()

    # omit_defaults keeps the file down to what the user changed
    data = msgspec.to_builtins(config)
    _save_to_toml(data, config_path)

    global _config
    _config = config
