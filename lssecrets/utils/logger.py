"""
Centralized logging for lssecrets.

Provides:
- A rotated log file (~/.lssecrets/logs/app.log by default)
- Optional stderr logging with --verbose
- Sensitive data redaction on every record

The report itself never goes through the logger; stdout stays clean.
"""
import sys
from typing import Any, Dict, Optional

from loguru import logger

from lssecrets.utils.log_config import LogConfig, load_log_config
from lssecrets.utils.security import redact_sensitive_info


def _redaction_patcher(record: Dict[str, Any]) -> None:
    """Redact sensitive info from all logs."""
    try:
        record["message"] = redact_sensitive_info(record["message"])
    except Exception:
        record["message"] = "[REDACTED]"


def setup_logger(verbose: bool = False, config: Optional[LogConfig] = None) -> LogConfig:
    """
    Configure loguru sinks.

    Rules:
    1. FILE: log to config.log_path (rotated) unless file logging is disabled.
    2. CONSOLE: only with verbose, DEBUG+ to stderr. Without it nothing is
       written to the terminal by the logger.

    Args:
        verbose: Enable console logging
        config: Optional LogConfig override (for testing)

    Returns:
        The LogConfig in effect
    """
    logger.remove()

    if config is None:
        config = load_log_config()

    if config.file_enabled:
        try:
            config.log_path.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                config.log_path,
                rotation=config.rotation_size,
                retention=config.retention,
                level=config.file_level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
                compression=config.compression,
            )
        except OSError as e:
            # An unwritable log dir must not stop the report
            print(f"Warning: cannot write logs to {config.log_dir}: {e}", file=sys.stderr)

    if verbose:
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
                "<level>{message}</level>"
            ),
            level="DEBUG",
            colorize=True,
        )

    logger.configure(patcher=_redaction_patcher)
    return config
