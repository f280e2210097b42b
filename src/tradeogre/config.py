"""
TradeOgre client configuration.

YAML-based configuration with environment variable substitution. A .env
file (project root or current directory) is loaded first with
python-dotenv; ``${VAR}`` and ``${VAR:default}`` references in the YAML
are then replaced from the environment.

Example config.yaml:

    tradeogre:
      base_url: "https://tradeogre.com/api/v1/"
      credentials:
        api_key: "${TRADEOGRE_API_KEY}"
        secret_key: "${TRADEOGRE_API_SECRET}"
      network:
        request_timeout: 10.0
        connect_timeout: 5.0

Usage:
    from tradeogre.config import load_config

    config = load_config("config.yaml")
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Union

import msgspec
import yaml
from dotenv import load_dotenv
from msgspec import Struct

from .exceptions import ConfigurationError
from .rest.base_rest import DEFAULT_BASE_URL, normalize_base_url
from .transport.structs import RestConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "TRADEOGRE_API_KEY"
API_SECRET_ENV = "TRADEOGRE_API_SECRET"

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}")


class NetworkConfig(Struct, frozen=True):
    """
    Network configuration settings.

    Attributes:
        request_timeout: Total HTTP request timeout in seconds
        connect_timeout: Connection timeout in seconds
    """
    request_timeout: float = 10.0
    connect_timeout: float = 5.0

    def validate(self) -> None:
        """Validate network configuration."""
        if self.request_timeout <= 0:
            raise ConfigurationError("request_timeout must be positive", "network.request_timeout")
        if self.connect_timeout <= 0:
            raise ConfigurationError("connect_timeout must be positive", "network.connect_timeout")


class ExchangeCredentials(Struct, frozen=True):
    """Exchange API credentials."""
    api_key: str = ""
    secret_key: str = ""

    @property
    def has_private_api(self) -> bool:
        """Check if both credentials are provided."""
        return bool(self.api_key) and bool(self.secret_key)

    def get_preview(self) -> str:
        """Get safe preview of credentials for logging."""
        if not self.api_key:
            return "Not configured"
        if len(self.api_key) > 8:
            return f"{self.api_key[:4]}...{self.api_key[-4:]}"
        return "***"

    def validate(self) -> None:
        """Allow empty credentials (public-only mode) but not half of a pair."""
        if bool(self.api_key) != bool(self.secret_key):
            raise ConfigurationError(
                "Both api_key and secret_key must be provided together or both empty",
                "credentials"
            )


class TradeOgreConfig(Struct, frozen=True):
    """Complete client configuration."""
    base_url: str = DEFAULT_BASE_URL
    credentials: ExchangeCredentials = msgspec.field(default_factory=ExchangeCredentials)
    network: NetworkConfig = msgspec.field(default_factory=NetworkConfig)

    def validate(self) -> None:
        normalize_base_url(self.base_url)
        self.credentials.validate()
        self.network.validate()

    def to_rest_config(self) -> RestConfig:
        return RestConfig(
            timeout=self.network.request_timeout,
            connect_timeout=self.network.connect_timeout
        )


def _substitute_env(content: str) -> str:
    """Replace ${VAR} / ${VAR:default} in raw config text before YAML parsing."""
    def replace(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        resolved = os.getenv(name, default)
        if resolved is None:
            logger.warning(f"Environment variable {name} is not set - using empty value")
            return ""
        return resolved

    return _ENV_PATTERN.sub(replace, content)


def _load_env_file() -> None:
    for env_path in (Path.cwd() / '.env', Path(__file__).parent.parent.parent / '.env'):
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
            logger.debug(f"Loaded environment variables from: {env_path}")
            return


def load_config(path: Optional[Union[str, Path]] = None) -> TradeOgreConfig:
    """
    Load configuration from a YAML file.

    Without a path, defaults are used and credentials are read from the
    TRADEOGRE_API_KEY / TRADEOGRE_API_SECRET environment variables.

    Raises:
        ConfigurationError: If the file cannot be read or is invalid
    """
    _load_env_file()

    data: dict = {}
    if path is not None:
        try:
            with open(path, 'r') as f:
                raw = yaml.safe_load(_substitute_env(f.read())) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        data = raw.get('tradeogre', raw) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Section 'tradeogre' in {path} must be a mapping", "tradeogre")

    if not data.get('credentials'):
        data['credentials'] = {
            'api_key': os.getenv(API_KEY_ENV, ''),
            'secret_key': os.getenv(API_SECRET_ENV, ''),
        }

    try:
        config = msgspec.convert(data, TradeOgreConfig)
    except msgspec.ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    config.validate()
    logger.info(f"TradeOgre config loaded: {config.base_url} (credentials: {config.credentials.get_preview()})")
    return config
