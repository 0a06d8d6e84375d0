"""
Value formatting for the report.
"""

from __future__ import annotations

from datetime import datetime

from lssecrets.config.constants import TIMESTAMP_FORMAT
from lssecrets.core.types import SecretValue


def format_timestamp(seconds: int) -> str:
    """
    Seconds since the epoch as local 'YYYY-MM-DD HH:MM:SS'.

    Values the platform cannot represent are shown as raw seconds.
    """
    try:
        return datetime.fromtimestamp(seconds).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, ValueError, OSError):
        return str(seconds)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_label(label: str | None) -> str:
    if label is None:
        return "(no label)"
    return f'"{label}"'


def hex_dump(data: bytes) -> str:
    """Two lowercase hex digits per byte, no separators."""
    return data.hex()


def format_secret_value(secret: SecretValue) -> str:
    """
    Render a secret payload.

    Text payloads (see SecretValue.text) are shown quoted; anything else as
    a labelled hex dump.

    Examples:
        >>> format_secret_value(SecretValue("text/plain", b"hunter2"))
        '"hunter2"'
        >>> format_secret_value(SecretValue("application/octet-stream", b"\\xde\\xad"))
        '{ dead } (hex)'
    """
    text = secret.text
    if text is not None:
        return f'"{text}"'
    return f"{{ {hex_dump(secret.payload or b'')} }} (hex)"
