"""
Configuration management for the to-do list.

Uses pydantic-settings for environment variable support and YAML config loading.
Values come from (highest priority first):
1. Values in the YAML config file (configs/todolist.yaml)
2. Environment variables (prefixed with TODOLIST_)
3. Default values in the Settings class
"""

from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from todolist.exceptions import ConfigurationError

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


class AppConfig(BaseModel):
    """Screen configuration."""

    title: str = "To-Do List"
    placeholder: str = "New task"
    show_summary: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    format: Literal["structured", "simple"] = "simple"
    file_path: str | None = None
    max_size_mb: int = 10
    backup_count: int = 5


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are prefixed with TODOLIST_.
    Example: TODOLIST_LOG_LEVEL=DEBUG, TODOLIST_APP__TITLE="Chores"
    """

    model_config = SettingsConfigDict(
        env_prefix="TODOLIST_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = "INFO"
    debug: bool = False

    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {sorted(VALID_LOG_LEVELS)}")
        return v.upper()

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise log_level."""
        return "DEBUG" if self.debug else self.log_level

    @classmethod
    def from_yaml(cls, config_path: Path | None = None) -> Settings:
        """
        Load settings from a YAML config file.

        Args:
            config_path: Path to YAML config file. Defaults to configs/todolist.yaml

        Returns:
            Settings instance with merged configuration

        Raises:
            ConfigurationError: If the file is not valid YAML or holds invalid values
        """
        if config_path is None:
            config_path = get_project_root() / "configs" / "todolist.yaml"

        config_data: dict[str, Any] = {}

        if config_path.exists():
            try:
                with config_path.open() as f:
                    raw_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in {config_path}", details={"error": str(e)}
                ) from e
            if not isinstance(raw_config, dict):
                raise ConfigurationError(f"Config file {config_path} must contain a mapping")
            config_data = _expand_env_vars(raw_config)

        try:
            return cls(**config_data)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"])
            raise ConfigurationError(
                f"Invalid configuration: {first['msg']}", config_key=key
            ) from e


def _expand_env_vars(obj: Any) -> Any:
    """
    Recursively expand environment variables in config values.

    Supports ${VAR} and ${VAR:-default} syntax.
    """
    if isinstance(obj, str):

        def replacer(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default = match.group(2) or ""
            return os.environ.get(var_name, default)

        return _ENV_VAR_PATTERN.sub(replacer, obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_yaml()
