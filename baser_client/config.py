"""
Configuration for baser-client.

Settings are read from an optional JSON file and then overridden by
environment variables:

    BASER_CONFIG_FILE  - Path to the JSON configuration file
    BASER_SERVER_URL   - baserCMS server address (e.g. https://example.com)
    BASER_VERIFY_SSL   - "false" / "0" / "no" disables TLS verification
    BASER_EMAIL        - Login email for admin commands
    BASER_PASSWORD     - Login password for admin commands

The configuration is never written back to disk.
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path.home() / ".baser" / "config.json"

ENV_CONFIG_FILE = "BASER_CONFIG_FILE"
ENV_SERVER_URL = "BASER_SERVER_URL"
ENV_VERIFY_SSL = "BASER_VERIFY_SSL"
ENV_EMAIL = "BASER_EMAIL"
ENV_PASSWORD = "BASER_PASSWORD"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class BaserConfig:
    """Connection settings for a baserCMS server."""

    server_url: str = ""
    verify_ssl: bool = True
    email: str = ""
    password: str = ""

    def is_configured(self) -> bool:
        """Check whether a server address is set."""
        return bool(self.server_url)

    def has_credentials(self) -> bool:
        """Check whether both login credentials are set."""
        return bool(self.email.strip() and self.password.strip())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaserConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if "verify_ssl" in values:
            values["verify_ssl"] = _parse_bool(values["verify_ssl"])
        return cls(**values)

    def to_dict(self, mask_secrets: bool = True) -> Dict[str, Any]:
        """Return the settings as a plain dict."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        if mask_secrets and data["password"]:
            data["password"] = "********"
        return data


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in _FALSE_VALUES


class ConfigManager:
    """Loads configuration from file and environment."""

    def __init__(self, config_file: Optional[Path] = None):
        env_file = os.environ.get(ENV_CONFIG_FILE)
        if config_file is not None:
            self.config_file = Path(config_file)
        elif env_file:
            self.config_file = Path(env_file)
        else:
            self.config_file = DEFAULT_CONFIG_FILE
        self._config: Optional[BaserConfig] = None

    def get_config_path(self) -> Path:
        """Get the configuration file path."""
        return self.config_file

    def _load_file(self) -> Dict[str, Any]:
        if not self.config_file.exists():
            logger.debug(f"No config file at {self.config_file}")
            return {}

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read config file {self.config_file}",
                details=str(e)
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {self.config_file} must contain a JSON object"
            )
        return data

    def _apply_env(self, config: BaserConfig) -> BaserConfig:
        if os.environ.get(ENV_SERVER_URL):
            config.server_url = os.environ[ENV_SERVER_URL]
        if os.environ.get(ENV_VERIFY_SSL):
            config.verify_ssl = _parse_bool(os.environ[ENV_VERIFY_SSL])
        if os.environ.get(ENV_EMAIL):
            config.email = os.environ[ENV_EMAIL]
        if os.environ.get(ENV_PASSWORD):
            config.password = os.environ[ENV_PASSWORD]
        return config

    def load(self) -> BaserConfig:
        """Read the file and environment into a fresh config."""
        config = BaserConfig.from_dict(self._load_file())
        return self._apply_env(config)

    def get(self) -> BaserConfig:
        """Get the configuration, loading it on first use."""
        if self._config is None:
            self._config = self.load()
        return self._config


def get_config_manager(config_file: Optional[Path] = None) -> ConfigManager:
    """Create a configuration manager."""
    return ConfigManager(config_file)


def get_config(config_file: Optional[Path] = None) -> BaserConfig:
    """Load the effective configuration."""
    return get_config_manager(config_file).get()
