"""
lssecrets Report - Text rendering of the keyring walk.
"""

from lssecrets.report.renderer import (
    ReportRenderer,
    collection_lines,
    item_lines,
    service_lines,
)

__all__ = [
    "ReportRenderer",
    "collection_lines",
    "item_lines",
    "service_lines",
]
