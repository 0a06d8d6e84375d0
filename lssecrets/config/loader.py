"""
lssecrets Config - Loading from file and environment.

Priority (highest first):
1. Command-line flags (applied by the CLI)
2. Environment variables (LSSECRETS_*)
3. Config file ($LSSECRETS_CONFIG or ~/.config/lssecrets/config.yaml)
4. Defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from lssecrets.config.constants import APP_NAME, CONFIG_ENV_VAR
from lssecrets.config.models import Config
from lssecrets.core.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / APP_NAME / "config.yaml"

_TRUE_VALUES = ("1", "true", "yes", "on")


def default_config_path() -> Path:
    """Config file location, honouring $LSSECRETS_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def _read_file(path: Path) -> dict[str, Any]:
    """Read a YAML mapping, or nothing when the file does not exist."""
    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", {"path": str(path)}) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping", {"path": str(path)})
    return data


def _apply_env(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay LSSECRETS_* environment variables onto raw config data."""
    report = dict(data.get("report") or {})

    detail = os.environ.get("LSSECRETS_DETAIL")
    if detail is not None:
        try:
            report["detail"] = int(detail)
        except ValueError as e:
            raise ConfigError(f"LSSECRETS_DETAIL must be an integer, got {detail!r}") from e

    unlock = os.environ.get("LSSECRETS_UNLOCK")
    if unlock is not None:
        report["unlock"] = unlock.lower() in _TRUE_VALUES

    return {**data, "report": report}


def load_config(path: Path | None = None) -> Config:
    """
    Load configuration.

    Args:
        path: Explicit config file; defaults to default_config_path()

    Returns:
        Validated Config

    Raises:
        ConfigError: If the file is unreadable or does not validate
    """
    config_path = path or default_config_path()
    data = _apply_env(_read_file(config_path))

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    logger.debug(
        f"Config loaded: detail={int(config.report.detail)} unlock={config.report.unlock}"
    )
    return config
