"""
Report renderer.

Turns scanner reports into indented text. Every block ends with a blank
line so siblings are visually separated. Depth layout (two spaces each):

    0  Service
    1    service fields
    2    alias entries / Collection
    3      collection fields
    4        Item
    5          item fields
    6            attribute entries / secret fields
"""

from __future__ import annotations

from lssecrets.config.constants import INDENT_UNIT
from lssecrets.core.types import CollectionReport, ItemReport, ServiceReport
from lssecrets.report.formatting import (
    format_bool,
    format_label,
    format_secret_value,
    format_timestamp,
)
from lssecrets.ui.console import ConsoleUI

SERVICE_DEPTH = 0
COLLECTION_DEPTH = 2
ITEM_DEPTH = 4


def _line(depth: int, text: str = "") -> str:
    if not text:
        return ""
    return f"{INDENT_UNIT * depth}{text}"


def service_lines(report: ServiceReport) -> list[str]:
    d = SERVICE_DEPTH
    lines = [_line(d, "Service"), _line(d + 1, f"Path: {report.path}")]

    if report.aliases.forward:
        lines.append(_line(d + 1, "Aliases:"))
        for alias, path in sorted(report.aliases.forward.items()):
            lines.append(_line(d + 2, f"{alias}: {path}"))

    lines.append("")
    return lines


def _timestamp_lines(depth: int, created: int | None, modified: int | None) -> list[str]:
    lines = []
    if created:
        lines.append(_line(depth, f"Created: {format_timestamp(created)}"))
    if modified:
        lines.append(_line(depth, f"Modified: {format_timestamp(modified)}"))
    return lines


def item_lines(report: ItemReport) -> list[str]:
    d = ITEM_DEPTH
    lines = [
        _line(d, f"Item: {format_label(report.label)}"),
        _line(d + 1, f"Path: {report.path}"),
    ]
    lines += _timestamp_lines(d + 1, report.created, report.modified)

    if report.attributes:
        lines.append(_line(d + 1, "Attributes:"))
        for key, value in sorted(report.attributes.items()):
            lines.append(_line(d + 2, f'"{key}" = "{value}"'))
    if report.attributes_error:
        lines.append(_line(d + 1, f"Error: {report.attributes_error}"))

    if report.locked is not None:
        lines.append(_line(d + 1, f"Locked: {format_bool(report.locked)}"))

    if report.secret is not None:
        lines.append(_line(d + 1, "Secret:"))
        lines.append(_line(d + 2, f"Type: {report.secret.content_type}"))
        lines.append(_line(d + 2, f"Value: {format_secret_value(report.secret)}"))

    if report.error:
        lines.append(_line(d + 1, f"Error: {report.error}"))

    lines.append("")
    return lines


def collection_lines(report: CollectionReport) -> list[str]:
    d = COLLECTION_DEPTH
    lines = [
        _line(d, f"Collection: {format_label(report.label)}"),
        _line(d + 1, f"Path: {report.path}"),
    ]
    lines += [_line(d + 1, f"Alias: {alias}") for alias in report.aliases]
    lines += _timestamp_lines(d + 1, report.created, report.modified)

    if report.unlock_error:
        lines.append(_line(d + 1, f"Error: {report.unlock_error}"))
    if report.locked is not None:
        lines.append(_line(d + 1, f"Locked: {format_bool(report.locked)}"))
    if report.error:
        lines.append(_line(d + 1, f"Error: {report.error}"))

    lines.append("")
    for item in report.items:
        lines += item_lines(item)
    return lines


class ReportRenderer:
    """Writes report blocks to the console as soon as they are handed over."""

    def __init__(self, ui: ConsoleUI) -> None:
        self.ui = ui

    def _write(self, lines: list[str]) -> None:
        for line in lines:
            self.ui.line(line)

    def render_service(self, report: ServiceReport) -> None:
        self._write(service_lines(report))

    def render_collection(self, report: CollectionReport) -> None:
        self._write(collection_lines(report))
