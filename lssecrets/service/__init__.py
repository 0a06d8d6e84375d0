"""
lssecrets Service - Talking to the Secret Service.
"""

from lssecrets.service.dbus import DBusSecretService, connect
from lssecrets.service.scanner import KeyringScanner
from lssecrets.service.unlock import unlock

__all__ = [
    "DBusSecretService",
    "KeyringScanner",
    "connect",
    "unlock",
]
