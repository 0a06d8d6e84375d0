"""
lssecrets Config - Configuration management.
"""

from lssecrets.config.loader import default_config_path, load_config
from lssecrets.config.models import Config, LoggingConfig, ReportConfig

__all__ = [
    "Config",
    "LoggingConfig",
    "ReportConfig",
    "default_config_path",
    "load_config",
]
