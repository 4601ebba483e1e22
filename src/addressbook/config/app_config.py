from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError, field_validator

from src.addressbook.common.exceptions import ConfigurationError
from src.addressbook.domain.base import DomainModel

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "ADDRESSBOOK_LOG_LEVEL"
ENV_LOG_FILE = "ADDRESSBOOK_LOG_FILE"
ENV_SAMPLE_DATA = "ADDRESSBOOK_SAMPLE_DATA"
ENV_PROMPT = "ADDRESSBOOK_PROMPT"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_to_bool(name: str, env: Mapping[str, str]) -> bool | None:
    """Return an environment variable parsed as a boolean flag, or None if unset."""
    value = env.get(name)
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean value for {name}: {value!r}", {"variable": name}
    )


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v


class AppConfig(DomainModel):
    """Top-level application configuration."""

    logging: LoggingConfig = LoggingConfig()
    load_sample_data: bool = True
    prompt: str = "> "

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
        """Collect the settings present in the environment.

        Only variables that are actually set appear in the result, so it can
        be merged over values loaded from a file.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        if (level := env.get(ENV_LOG_LEVEL)) is not None:
            overrides.setdefault("logging", {})["level"] = level
        if (log_file := env.get(ENV_LOG_FILE)) is not None:
            overrides.setdefault("logging", {})["log_file"] = log_file or None
        if (sample_data := _env_to_bool(ENV_SAMPLE_DATA, env)) is not None:
            overrides["load_sample_data"] = sample_data
        if (prompt := env.get(ENV_PROMPT)) is not None:
            overrides["prompt"] = prompt

        return overrides


def _merge_dicts(d1: dict[str, Any], d2: dict[str, Any]) -> dict[str, Any]:
    for k, v in d2.items():
        if k in d1 and isinstance(d1[k], dict) and isinstance(v, dict):
            _merge_dicts(d1[k], v)
        else:
            d1[k] = v
    return d1


def _load_yaml_file(path: Path) -> dict[str, Any]:
    if path.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            {"path": str(path)},
        )
    try:
        with open(path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {path}", {"path": str(path)}
        ) from exc
    if not isinstance(file_config, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping: {path}", {"path": str(path)}
        )
    return file_config


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from defaults, an optional YAML file and the environment.

    Later sources override earlier ones.

    Args:
        config_path: Optional path to a ``.yaml``/``.yml`` file; a missing
            file is logged and skipped
        environ: Environment to read instead of ``os.environ``

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If the file or any value is invalid
    """
    config_data: dict[str, Any] = AppConfig().model_dump(mode="json")

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning("Configuration file not found: %s", config_path)
        else:
            _merge_dicts(config_data, _load_yaml_file(path))

    _merge_dicts(config_data, AppConfig.from_env(environ))

    try:
        return AppConfig.model_validate(config_data)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid configuration", {"errors": exc.errors(include_url=False)}
        ) from exc
