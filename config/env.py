"""
A module for loading configuration overrides from a YAML file.

The file is looked up in the `ABI_TYPES_CONFIG` environment variable and
defaults to `abi-types.yaml` in the working directory. A missing file leaves
every setting at its default. Pydantic validates the content, so an unknown
prefix policy or a malformed flag is reported when the file is loaded.

Usage:
- Initialize an instance of EnvConfig to load the configuration.
- Access configuration values as attributes (e.g., EnvConfig().PREFIX_POLICY).
"""

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .app import AppConfig

CONFIG_ENV_VAR = "ABI_TYPES_CONFIG"
DEFAULT_CONFIG_FILE = "abi-types.yaml"


def config_path() -> Path:
    """Return the path of the configuration file."""
    return Path(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE))


class EnvConfig(AppConfig):
    """
    Loads and validates the configuration from a YAML file.

    This is a wrapper class for the AppConfig model. It reads a config file
    from disk, when present, into an AppConfig model and then exposes it.
    """

    def __init__(self, path: Path | None = None):
        """Init for the EnvConfig class."""
        path = path if path is not None else config_path()
        config_data = {}
        if path.exists():
            with path.open("r") as file:
                config_data = yaml.safe_load(file) or {}
        if not isinstance(config_data, dict):
            raise ValueError(f"Invalid configuration: '{path}' does not contain a mapping")
        try:
            # Validate and parse with Pydantic
            super().__init__(**config_data)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e
