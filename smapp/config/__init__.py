"""
Smapp SDK configuration.
"""

from .manager import ApiKeySource, Config, ConfigManager, substituteEnvVars

__all__ = [
    "ApiKeySource",
    "Config",
    "ConfigManager",
    "substituteEnvVars",
]
