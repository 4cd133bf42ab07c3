"""
Application configuration module.

Settings come from (highest priority first):
1. Environment variables with the PBCALC_ prefix (PBCALC_LOGGING__LEVEL=debug)
2. The YAML config file (--config, or $HOME/.pbc/config)
3. Defaults
"""
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from punch_board.core.contracts import validate_config

DEFAULT_LOGGING_LEVEL = "warn"
ENV_PREFIX = "PBCALC_"
CONFIG_DIR_NAME = ".pbc"
CONFIG_FILE_NAME = "config"


class ConfigError(ValueError):
    """Configuration file cannot be read or does not match the schema."""


class LoggingSettings(BaseModel):
    """Logging section of the configuration."""
    level: str = DEFAULT_LOGGING_LEVEL
    format: Literal["console", "json"] = "console"


class Settings(BaseSettings):
    """
    Application settings.
    (Note: environment variables take precedence over config file values)
    """
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
        )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Config file values arrive as init kwargs; env wins over them
        return env_settings, init_settings


def default_config_path() -> Path:
    """Default config file location: $HOME/.pbc/config (YAML, no extension)."""
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Read and validate a YAML config file.

    Args:
        path: Path to the config file

    Returns:
        Parsed mapping (empty for an empty file)

    Raises:
        ConfigError: If the file is unreadable, not YAML, or violates the schema
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")

    errors = validate_config(data)
    if errors:
        raise ConfigError(f"invalid config file {path}: " + "; ".join(errors))

    return data


def load_settings(config_file: str | None = None) -> tuple[Settings, Path | None]:
    """
    Build settings from the config file and environment.

    An explicit config_file must exist. The default file is optional.

    Args:
        config_file: Path given with --config, or None for the default location

    Returns:
        (settings, path of the config file used or None)

    Raises:
        ConfigError: If the config file is missing (explicit only) or invalid,
            or an environment variable holds an invalid value
    """
    if config_file:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigError(f"config file not found: {path}")
    else:
        path = default_config_path()
        if not path.is_file():
            path = None

    data = read_config_file(path) if path is not None else {}

    # Environment values are only checked here
    try:
        settings = Settings(**data)
    except ValidationError as e:
        details = "; ".join(
            ".".join(str(p) for p in err["loc"]) + ": " + err["msg"] for err in e.errors()
        )
        raise ConfigError(f"invalid settings: {details}") from e

    return settings, path
