"""
lssecrets Core - Types, protocols and errors shared by every layer.
"""

from lssecrets.core.exceptions import (
    SERVICE_ERRORS,
    ConfigError,
    ErrorKind,
    KeyringError,
    LsSecretsError,
    ProtocolError,
    classify,
)
from lssecrets.core.types import (
    AliasMap,
    CollectionReport,
    DetailLevel,
    ItemReport,
    SecretValue,
    ServiceReport,
)

__all__ = [
    "AliasMap",
    "CollectionReport",
    "ConfigError",
    "DetailLevel",
    "ErrorKind",
    "ItemReport",
    "KeyringError",
    "LsSecretsError",
    "ProtocolError",
    "SERVICE_ERRORS",
    "SecretValue",
    "ServiceReport",
    "classify",
]
