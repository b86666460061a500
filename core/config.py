import os
from dataclasses import dataclass, field
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from core.errors import ConfigError
from core.tiers import AccessTier

DEFAULT_BASE_URL = "https://pro-api.coinmarketcap.com"
TRANSPORTS = ("stdio", "http", "both")

# Keys accepted from the environment and from caller-supplied config objects
ENV_KEYS = {
    "api_key": "COINMARKETCAP_API_KEY",
    "subscription_level": "SUBSCRIPTION_LEVEL",
    "base_url": "CMC_API_URL",
    "host": "HOST",
    "port": "PORT",
    "transport": "MCP_TRANSPORT",
    "request_timeout": "REQUEST_TIMEOUT",
    "log_level": "LOG_LEVEL",
    "log_dir": "LOG_DIR",
}


class ConfigLoader:
    _instance = None
    _config = None

    def __new__(cls):
        """
        Create a singleton instance of ConfigLoader.
        Loads configuration from YAML file on first instantiation.
        """
        if cls._instance is None:
            cls._load_config()
            cls._instance = super(ConfigLoader, cls).__new__(cls)
        return cls._instance

    @classmethod
    def _load_config(cls):
        """
        Load config.yaml (or the file named by CMC_MCP_CONFIG) into _config.
        A missing file yields an empty configuration.
        """
        config_path = os.environ.get("CMC_MCP_CONFIG") or os.path.join(os.path.dirname(__file__), "..", "config.yaml")
        config_path = os.path.abspath(config_path)
        if not os.path.isfile(config_path):
            cls._config = {}
            return
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"{config_path} must contain a mapping at the top level")
        cls._config = loaded

    @classmethod
    def reload(cls):
        """Drop the cached configuration so the next access re-reads the file."""
        cls._instance = None
        cls._config = None

    def get_config(self):
        """
        Return the loaded configuration dictionary.
        """
        return self._config


def get_config():
    """
    Helper function to get the singleton configuration instance's config dictionary.
    """
    return ConfigLoader().get_config()


@dataclass(frozen=True)
class Settings:
    """Process configuration, fixed once the server is constructed."""

    api_key: str | None = field(default=None, repr=False)
    subscription_level: AccessTier = AccessTier.BASIC
    base_url: str = DEFAULT_BASE_URL
    host: str = "127.0.0.1"
    port: int = 3000
    transport: str = "both"
    request_timeout: float = 30.0
    log_level: str = "INFO"
    log_dir: str | None = None

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def _as_int(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def _as_float(name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be a number, got {value!r}")


def load_settings(overrides: Mapping[str, Any] | None = None) -> Settings:
    """Build Settings from defaults, config.yaml, the environment and `overrides`.

    Later sources win. `overrides` uses the same upper-case names as the
    environment (COINMARKETCAP_API_KEY, SUBSCRIPTION_LEVEL, ...) so a
    caller-supplied config object can be passed through as-is.
    """
    load_dotenv()
    file_cfg = get_config() or {}

    values: dict[str, Any] = {}
    for attr in ENV_KEYS:
        if file_cfg.get(attr) is not None:
            values[attr] = file_cfg[attr]
    for attr, env_name in ENV_KEYS.items():
        env_value = os.environ.get(env_name)
        if env_value:
            values[attr] = env_value
    for attr, env_name in ENV_KEYS.items():
        if overrides and overrides.get(env_name) not in (None, ""):
            values[attr] = overrides[env_name]

    if "subscription_level" in values:
        values["subscription_level"] = AccessTier.parse(values["subscription_level"])
    if "port" in values:
        values["port"] = _as_int("PORT", values["port"])
    if "request_timeout" in values:
        values["request_timeout"] = _as_float("REQUEST_TIMEOUT", values["request_timeout"])
    if "base_url" in values:
        values["base_url"] = str(values["base_url"]).rstrip("/")
    if "transport" in values:
        transport = str(values["transport"]).strip().lower()
        if transport not in TRANSPORTS:
            raise ConfigError(f"MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}")
        values["transport"] = transport
    if "log_level" in values:
        values["log_level"] = str(values["log_level"]).upper()

    return Settings(**values)
