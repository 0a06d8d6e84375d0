"""
lssecrets UI - Console output.
"""

from lssecrets.ui.console import ConsoleUI

__all__ = ["ConsoleUI"]
