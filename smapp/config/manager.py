"""
Configuration management for Smapp SDK.

Configuration is read from a TOML file, `${VAR}` placeholders are replaced
with environment variables. Example `smapp.toml`:

    [smapp]
    api-base-url = "https://api.example.com/"
    api-key = "${SMAPP_API_KEY}"
    api-key-name = "X-Smapp-Key"
    api-key-source = "header"
    timeout = 5
    version = "v1"

    [logging]
    level = "DEBUG"
    console = true
"""

import logging
import os
import re
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any, Dict, Optional

import tomli

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: float = 10
DEFAULT_VERSION: str = "v1"


class ApiKeySource(StrEnum):
    """Where API key is transmitted in a request."""

    HEADER = "header"
    QUERY_PARAM = "query"


@dataclass
class Config:
    """Connection settings shared by Smapp clients.

    `apiKeySource` is deliberately a plain string: unknown values are only
    rejected when a request is made.
    """

    apiBaseUrl: str
    apiKey: str = ""
    apiKeyName: str = ""
    apiKeySource: str = ApiKeySource.HEADER


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace `${VAR}` match with environment value, keep placeholder if VAR is unset."""
    return os.getenv(match.group(1), match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute `${VAR}` placeholders in strings, dicts and lists."""
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


def loadDotEnv(path: str = ".env", populateEnv: bool = True) -> Dict[str, str]:
    """Read KEY=VALUE lines from dotenv file.

    Args:
        path: Path to .env file
        populateEnv: Whether to put loaded values into os.environ. Variables
            already set in environment are never overridden

    Returns:
        Dictionary of loaded key-value pairs
    """
    ret: Dict[str, str] = {}
    with open(path, "rt", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            ret[key.strip()] = value.strip().strip('"')

    if populateEnv:
        for key, value in ret.items():
            os.environ.setdefault(key, value)
    return ret


class ConfigManager:
    """Loads SDK configuration from TOML file, dood!"""

    def __init__(self, configPath: str = "smapp.toml", dotEnvFile: Optional[str] = ".env") -> None:
        """Load configuration.

        Args:
            configPath: Path to TOML config file
            dotEnvFile: Optional dotenv file loaded before placeholders are substituted.
                Missing dotenv file is ignored.

        Raises:
            ConfigurationError: If config file is missing or is not valid TOML
        """
        self.configPath = configPath
        if dotEnvFile is not None and Path(dotEnvFile).is_file():
            loadDotEnv(dotEnvFile)
            logger.debug(f"Loaded environment from {dotEnvFile}")
        self.config: Dict[str, Any] = substituteEnvVars(self._loadConfig())

    def _loadConfig(self) -> Dict[str, Any]:
        configFile = Path(self.configPath)
        if not configFile.is_file():
            raise ConfigurationError(f"Configuration file {self.configPath} not found")

        try:
            with open(configFile, "rb") as f:
                config = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ConfigurationError(f"Failed to parse configuration file {self.configPath}", e) from e

        logger.info(f"Loaded config from {self.configPath}")
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get top-level configuration table by key."""
        return self.config.get(key, default)

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get `[logging]` table suitable for `initLogging()`."""
        return self.get("logging", {})

    def getSmappConfig(self) -> Config:
        """Get client connection settings from `[smapp]` table.

        Raises:
            ConfigurationError: If `api-base-url` is not set
        """
        section = self.get("smapp", {})
        baseUrl = section.get("api-base-url")
        if not baseUrl:
            raise ConfigurationError("smapp.api-base-url is not set")

        return Config(
            apiBaseUrl=baseUrl,
            apiKey=section.get("api-key", ""),
            apiKeyName=section.get("api-key-name", ""),
            apiKeySource=section.get("api-key-source", ApiKeySource.HEADER),
        )

    def getTimeout(self) -> float:
        """Get request timeout in seconds."""
        return float(self.get("smapp", {}).get("timeout", DEFAULT_TIMEOUT))

    def getVersion(self) -> str:
        """Get API version segment of request URL."""
        return str(self.get("smapp", {}).get("version", DEFAULT_VERSION))
