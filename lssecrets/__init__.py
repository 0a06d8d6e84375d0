"""
lssecrets - List the contents of the Secret Service keyring.

Walks the keyring collections and items exposed over D-Bus and prints
a hierarchical, human-readable report.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("lssecrets")
except PackageNotFoundError:
    # Package not installed, fallback to pyproject.toml
    __version__ = "0.1.0"

__author__ = "lssecrets Contributors"
