"""
lssecrets Config - Configuration models.

Pydantic models for type-safe configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from lssecrets.core.types import DetailLevel


class ReportConfig(BaseModel):
    """What the report shows and whether it may unlock things."""

    detail: DetailLevel = Field(
        default=DetailLevel.ITEMS, description="Report depth (0-4)"
    )
    unlock: bool = Field(
        default=False, description="Unlock locked collections and items on the way"
    )

    @property
    def want_secrets(self) -> bool:
        """Secret values are requested, so a session must be opened."""
        return self.detail.wants_secrets


class LoggingConfig(BaseModel):
    """Logging settings."""

    file_level: Literal["debug", "info", "warning", "error"] = Field(
        default="debug", description="File log level"
    )
    log_dir: str | None = Field(default=None, description="Log directory override")
    file_enabled: bool = Field(default=True, description="Write the log file")


class Config(BaseModel):
    """Complete lssecrets configuration."""

    report: ReportConfig = Field(default_factory=ReportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
