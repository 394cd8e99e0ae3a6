"""Configuration loading and validation for termstack.

This module provides:
- Pydantic models for configuration validation
- YAML config file discovery and loading
- Environment variable expansion in config values
- Merging of config file and CLI overrides over the defaults
- User-friendly error messages for config issues
- File logging set up from the logging section
"""

from difflib import get_close_matches
import logging
import os
from pathlib import Path
import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import yaml

from termstack.config.defaults import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class ConfigError(Exception):
    """Base exception for configuration errors.

    Attributes:
        message: The main error message
        file_path: Path to the config file (if applicable)
        line_number: Line number where the error occurred (if known)
        column: Column of the error (if known)
        suggestion: Helpful suggestion for fixing the error
        context_lines: Offending source lines shown under the message
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        line_number: int | None = None,
        column: int | None = None,
        suggestion: str | None = None,
        context_lines: list[str] | None = None,
    ) -> None:
        self.message = message
        self.file_path = file_path
        self.line_number = line_number
        self.column = column
        self.suggestion = suggestion
        self.context_lines = context_lines
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with location, context and suggestion."""
        if self.file_path:
            location = f"Error in {self.file_path}"
            if self.line_number:
                location += f" line {self.line_number}"
            parts = [location + ":"]
        else:
            parts = ["Configuration error:"]

        parts.append(f"  {self.message}")

        if self.context_lines and self.column:
            parts.append("")
            parts.extend(f"    {line}" for line in self.context_lines)
            parts.append(" " * (self.column + 3) + "^")

        if self.suggestion:
            parts.append("")
            parts.append(f"  Suggestion: {self.suggestion}")

        return "\n".join(parts)


class ConfigSyntaxError(ConfigError):
    """Error for YAML syntax issues."""

    pass


class ConfigValidationError(ConfigError):
    """Error for configuration value validation failures."""

    pass


class ConfigKeyError(ConfigError):
    """Error for unknown or invalid configuration keys."""

    pass


# Known keys per section, used for "Did you mean" suggestions
VALID_KEYS: dict[tuple[str, ...], set[str]] = {
    (): {"theme", "layout", "keybindings", "logging"},
    ("layout",): {"direction", "full_screen", "border", "width", "height"},
    ("logging",): {"enabled", "level", "file"},
}

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

# Hints keyed on fragments of PyYAML problem descriptions
YAML_HINTS = [
    ("could not find expected ':'", "Check for missing colons after keys (e.g., 'key: value')"),
    ("mapping values are not allowed", "Check your indentation - nested keys must be indented"),
    ("found character '\\t'", "Use spaces instead of tabs for indentation"),
    ("found undefined alias", "Define YAML anchors (&name) before their aliases (*name)"),
]


def _suggest_key(unknown_key: str, valid_keys: set[str]) -> str | None:
    """Suggest a similar valid key for an unknown key.

    Args:
        unknown_key: The key that was not recognized
        valid_keys: Set of valid key names

    Returns:
        A suggestion message, or None if no good match found
    """
    matches = get_close_matches(unknown_key, sorted(valid_keys), n=1, cutoff=0.6)
    if matches:
        return f"Did you mean '{matches[0]}'?"
    return None


def _describe(value: Any) -> str:
    """Human-readable type description for a config value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return f'string "{value}"'
    if isinstance(value, list):
        return "list"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _lookup(data: Any, loc: tuple[Any, ...]) -> Any:
    """Follow a pydantic error location into the raw config data."""
    for key in loc:
        if isinstance(data, dict):
            data = data.get(key)
        else:
            return None
    return data


def _format_pydantic_error(
    error: ValidationError,
    config_data: dict[str, Any],
    file_path: str | None = None,
) -> ConfigError:
    """Convert a pydantic ValidationError into a friendly ConfigError.

    Only the first error is reported, with a suggestion where one applies.
    Unknown keys become ConfigKeyError, everything else ConfigValidationError.

    Args:
        error: The pydantic validation error
        config_data: The merged config data that failed validation
        file_path: Path to the config file

    Returns:
        A ConfigKeyError or ConfigValidationError with a helpful message
    """
    errors = error.errors()
    if not errors:
        return ConfigValidationError("Configuration validation failed", file_path=file_path)

    first = errors[0]
    loc = tuple(first.get("loc", ()))
    error_type = first.get("type", "")
    ctx = first.get("ctx", {}) or {}
    path = ".".join(str(part) for part in loc)
    value = _lookup(config_data, loc)
    suggestion = None

    if error_type == "literal_error":
        message = f"Invalid value for '{path}': got {_describe(value)}"
        suggestion = f"Expected one of: {ctx.get('expected', '')}"
    elif error_type in ("greater_than_equal", "less_than_equal"):
        message = f"Value for '{path}' is out of range: {value}"
        if error_type == "greater_than_equal":
            suggestion = f"Value must be at least {ctx.get('ge')}"
        else:
            suggestion = f"Value must be at most {ctx.get('le')}"
    elif error_type in ("int_parsing", "int_type", "int_from_float"):
        message = f"Invalid number for '{path}': got {_describe(value)}"
        suggestion = "Please provide a whole number"
    elif error_type in ("bool_type", "bool_parsing"):
        message = f"Expected boolean for '{path}': got {_describe(value)}"
        suggestion = "Use 'true' or 'false'"
    elif error_type == "string_type":
        message = f"Expected string for '{path}': got {_describe(value)}"
        suggestion = "Please provide a text value"
    elif error_type == "extra_forbidden":
        message = f"Unknown configuration key '{path}'"
        valid = VALID_KEYS.get(loc[:-1])
        if valid and loc:
            suggestion = _suggest_key(str(loc[-1]), valid)
        suggestion = suggestion or "Check the documentation for valid configuration options"
        return ConfigKeyError(message, file_path=file_path, suggestion=suggestion)
    else:
        message = f"Invalid value for '{path}': {first.get('msg', 'Invalid value')}"

    return ConfigValidationError(message, file_path=file_path, suggestion=suggestion)


def _format_yaml_error(
    error: yaml.YAMLError,
    file_path: str | None = None,
    content: str | None = None,
) -> ConfigSyntaxError:
    """Convert a YAML error into a ConfigSyntaxError with position and context.

    Args:
        error: The YAML error
        file_path: Path to the config file
        content: The file content for context

    Returns:
        A ConfigSyntaxError with helpful message and context
    """
    line_number = None
    column = None
    context_lines = None

    mark = getattr(error, "problem_mark", None)
    if mark is not None:
        line_number = mark.line + 1
        column = mark.column + 1
        if content:
            lines = content.splitlines()
            if 0 <= mark.line < len(lines):
                context_lines = [lines[mark.line]]

    error_text = str(error).lower()
    suggestion = next((hint for fragment, hint in YAML_HINTS if fragment in error_text), None)

    problem = getattr(error, "problem", None)
    message = f"YAML syntax error: {problem}" if problem else "Invalid YAML syntax"

    return ConfigSyntaxError(
        message,
        file_path=file_path,
        line_number=line_number,
        column=column,
        context_lines=context_lines,
        suggestion=suggestion,
    )


def expand_env_vars(value: Any) -> Any:
    """Recursively expand ${VAR} and ${VAR:-default} in config values.

    Unset variables without a default are left as written.
    """
    if isinstance(value, str):

        def replace(match: re.Match[str]) -> str:
            env_value = os.environ.get(match.group(1))
            if env_value is not None:
                return env_value
            if match.group(2) is not None:
                return match.group(2)
            return match.group(0)

        return ENV_VAR_PATTERN.sub(replace, value)
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


# Pydantic Configuration Models


class LayoutConfig(BaseModel):
    """Settings for the demo layout."""

    model_config = ConfigDict(extra="forbid")

    direction: Literal["row", "column"] = "row"
    full_screen: bool = False
    border: bool = True
    width: int = Field(default=80, ge=1, le=1000)
    height: int = Field(default=35, ge=1, le=1000)


class KeybindingsConfig(BaseModel):
    """Keyboard shortcuts for the interactive demo (Textual key names)."""

    model_config = ConfigDict(extra="allow")

    quit: str = "escape"
    add_view: str = "plus"
    previous_view: str = "up"
    next_view: str = "down"
    clear_view: str = "delete"
    newline: str = "enter"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    file: str = "~/.termstack/termstack.log"


class Config(BaseModel):
    """Main configuration model for termstack.

    Loaded from YAML files and overridden by CLI flags.
    """

    model_config = ConfigDict(extra="forbid")

    theme: Literal["dark", "light"] = "dark"
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    keybindings: KeybindingsConfig = Field(default_factory=KeybindingsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_config_path(custom_path: str | None = None) -> Path | None:
    """Determine the configuration file path.

    Checks locations in this order:
    1. Custom path (if provided via --config flag)
    2. TERMSTACK_CONFIG_PATH environment variable
    3. ~/.config/termstack/config.yaml (XDG standard)
    4. ~/.termstack/config.yaml (legacy location)

    Args:
        custom_path: Optional custom config path from CLI

    Returns:
        Path to config file if found, None otherwise

    Raises:
        FileNotFoundError: If custom_path is given but does not exist
    """
    if custom_path:
        path = Path(custom_path).expanduser()
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {custom_path}")

    env_path = os.environ.get("TERMSTACK_CONFIG_PATH")
    if env_path:
        path = Path(env_path).expanduser()
        if path.exists():
            return path
        logger.warning("TERMSTACK_CONFIG_PATH points to a missing file: %s", env_path)
        return None

    for candidate in (
        Path.home() / ".config" / "termstack" / "config.yaml",
        Path.home() / ".termstack" / "config.yaml",
    ):
        if candidate.exists():
            return candidate

    return None


def load_config(
    config_path: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
    raise_on_error: bool = True,
) -> Config:
    """Load and validate configuration.

    Configuration is merged in this order (later overrides earlier):
    1. Default configuration
    2. Config file (if found)
    3. CLI overrides (if provided)

    Args:
        config_path: Optional custom config file path
        cli_overrides: Optional dict of CLI argument overrides
        raise_on_error: If True, raise ConfigError on issues; if False, fall
            back to defaults and log a warning

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If custom config path doesn't exist
        ConfigSyntaxError: If config file has invalid YAML syntax
        ConfigValidationError: If config values are invalid
    """
    config_data = DEFAULT_CONFIG.copy()
    resolved_path: Path | None = None

    path = get_config_path(config_path)
    if path:
        resolved_path = path
        content = path.read_text()
        try:
            file_config = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            if raise_on_error:
                raise _format_yaml_error(e, str(path), content) from e
            logger.warning("Ignoring config file with invalid YAML: %s", path)
            file_config = {}
        if not isinstance(file_config, dict):
            if raise_on_error:
                raise ConfigSyntaxError(
                    "Config file must contain a mapping of keys to values",
                    file_path=str(path),
                )
            file_config = {}
        config_data = deep_merge(config_data, file_config)

    if cli_overrides:
        config_data = deep_merge(config_data, cli_overrides)

    config_data = expand_env_vars(config_data)

    try:
        return Config(**config_data)
    except ValidationError as e:
        if raise_on_error:
            raise _format_pydantic_error(
                e,
                config_data,
                str(resolved_path) if resolved_path else None,
            ) from e
        logger.warning("Invalid configuration, using defaults: %s", e)
        return Config(**DEFAULT_CONFIG)


def configure_logging(config: LoggingConfig) -> logging.Handler | None:
    """Attach a file handler to the termstack logger.

    Logging never writes to the terminal, which belongs to the TUI.

    Args:
        config: The logging section of the configuration

    Returns:
        The installed handler, or None when logging is disabled
    """
    if not config.enabled:
        return None

    log_path = Path(config.file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("termstack")
    package_logger.setLevel(config.level)
    package_logger.addHandler(handler)
    logger.info("Logging to %s at %s", log_path, config.level)
    return handler
