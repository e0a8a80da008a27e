import os
from typing import Any, Dict, List, Optional

import yaml

from .core.errors import ConfigurationError
from .core.identifiers import IDENTIFIER_KINDS, Representation

# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "identifiers": "text",
    "keep_tags": True,
    "progress": False,
}

LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
BOOLEAN_PARAMS: List[str] = ["keep_tags", "progress"]


class Config:
    """
    Manages configuration settings for the command line tools.

    Loads settings from a YAML file and applies explicit overrides on top
    (typically the options given on the command line).
    """
    def __init__(self):
        self._settings: Dict[str, Any] = DEFAULT_CONFIG.copy()

    def load(self, config_file: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        """
        Loads configuration from a file and overrides.

        Args:
            config_file: Optional path to a YAML configuration file.
            overrides: Settings that win over the file; None values are ignored.
        """
        # 1. Load from config file if specified
        if config_file:
            if not os.path.exists(config_file):
                raise ConfigurationError(f"Config file not found: {config_file}")
            try:
                with open(config_file, 'r') as f:
                    file_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Error parsing config file {config_file}: {e}")
            if file_config:
                if not isinstance(file_config, dict):
                    raise ConfigurationError(f"Config file {config_file} must contain a mapping")
                self._settings.update(file_config)

        # 2. Override with explicitly provided values
        if overrides:
            self._settings.update({key: value for key, value in overrides.items() if value is not None})

        # 3. Validate
        self._validate()
        return self

    def _validate(self):
        """Checks that every known setting has an acceptable value."""
        log_level = str(self._settings.get("log_level")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log_level '{self._settings.get('log_level')}', expected one of: {', '.join(LOG_LEVELS)}"
            )
        self._settings["log_level"] = log_level

        if self._settings.get("identifiers") not in IDENTIFIER_KINDS:
            raise ConfigurationError(
                f"Invalid identifiers '{self._settings.get('identifiers')}', "
                f"expected one of: {', '.join(IDENTIFIER_KINDS)}"
            )

        for param in BOOLEAN_PARAMS:
            if not isinstance(self._settings.get(param), bool):
                raise ConfigurationError(f"Configuration parameter {param} must be true or false")

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieves a configuration value."""
        return self._settings.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """Retrieves all configuration settings."""
        return self._settings.copy()

    def representation(self) -> Representation:
        """The identifier/tag representation selected by this configuration."""
        return Representation.from_options(self._settings["identifiers"], self._settings["keep_tags"])
