"""Configuration loader for httpexpect.

This module loads the optional YAML settings file (httpexpect.yaml) and
provides a singleton config object used for defaults by Expect.
"""

import os
from pathlib import Path
from typing import Any, cast

import yaml

from ..exceptions import ConfigurationError
from ..logging_config import get_module_logger

logger = get_module_logger("config")

CONFIG_ENV_VAR = "HTTPEXPECT_CONFIG"
DEFAULT_CONFIG_FILE = "httpexpect.yaml"


class Config:
    """Configuration manager that loads and provides access to settings."""

    def __init__(self, config_dict: dict[str, Any] | None = None, config_file: Path | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, no config file is loaded from disk.
            config_file: Optional explicit path to a YAML file. Defaults to
                        $HTTPEXPECT_CONFIG, then ./httpexpect.yaml.
        """
        self._configs: dict[str, Any]
        self._config_file: Path | None

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = config_dict
            self._config_file = None
        else:
            self._configs = {}
            self._config_file = config_file or self._find_config_file()
            self._load_config()

    def _find_config_file(self) -> Path:
        """Locate the settings file from the environment or the working directory."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)
        return Path.cwd() / DEFAULT_CONFIG_FILE

    def _load_config(self):
        """Load the YAML settings file, if it exists."""
        if self._config_file is None:
            return

        if not self._config_file.exists():
            logger.debug(f"Config file not found at {self._config_file}, using defaults")
            return

        with open(self._config_file, encoding="utf-8") as f:
            loaded_config = yaml.safe_load(f)

        if loaded_config is None:
            return

        if not isinstance(loaded_config, dict):
            raise ConfigurationError(
                f"{self._config_file} must contain a mapping, got {type(loaded_config).__name__}"
            )

        self._configs = loaded_config

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "client.timeout")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("client.timeout")
            30
            >>> config.get("base_url")
            "http://localhost:8080"
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def get_required(self, path: str) -> Any:
        """Get a configuration value that must be present.

        Raises:
            ConfigurationError: If the path is not set
        """
        value = self.get(path)
        if value is None:
            raise ConfigurationError("required value is missing", config_key=path)
        return value

    @property
    def client(self) -> dict[str, Any]:
        """Get transport configuration."""
        section = self._configs.get("client", {})
        if not isinstance(section, dict):
            raise ConfigurationError("must be a mapping", config_key="client")
        return cast(dict[str, Any], section)

    def reload(self):
        """Reload the settings file."""
        self._configs = {}
        self._load_config()


# Create a singleton instance
config = Config()
