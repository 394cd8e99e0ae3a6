"""Configuration module for termstack.

This module provides:
- Pydantic models for configuration validation
- YAML config file loading and discovery
- Default configuration values
- Environment variable expansion
- Logging setup from the logging section
"""

from termstack.config.defaults import DEFAULT_CONFIG
from termstack.config.loader import (
    Config,
    ConfigError,
    ConfigKeyError,
    ConfigSyntaxError,
    ConfigValidationError,
    KeybindingsConfig,
    LayoutConfig,
    LoggingConfig,
    configure_logging,
    get_config_path,
    load_config,
)

__all__ = [
    "Config",
    "ConfigError",
    "ConfigKeyError",
    "ConfigSyntaxError",
    "ConfigValidationError",
    "KeybindingsConfig",
    "LayoutConfig",
    "LoggingConfig",
    "DEFAULT_CONFIG",
    "configure_logging",
    "get_config_path",
    "load_config",
]
