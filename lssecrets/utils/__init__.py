"""
lssecrets Utils - Logging and redaction helpers.
"""

from lssecrets.utils.logger import setup_logger
from lssecrets.utils.security import redact_sensitive_info

__all__ = ["redact_sensitive_info", "setup_logger"]
