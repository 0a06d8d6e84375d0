"""
Core Exceptions - Error taxonomy for lssecrets.

Every failure coming back from the Secret Service is classified into a
closed set of kinds, each with one human-readable message.
"""

from __future__ import annotations

from enum import StrEnum

from jeepney import DBusErrorResponse
from secretstorage.exceptions import (
    ItemNotFoundException,
    LockedException,
    SecretServiceNotAvailableException,
    SecretStorageException,
)


class LsSecretsError(Exception):
    """Base exception for all lssecrets errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | {self.details}"
        return self.message


class ConfigError(LsSecretsError):
    """Configuration file could not be read or validated."""
    pass


# =============================================================================
# Keyring Errors
# =============================================================================

class ErrorKind(StrEnum):
    """Why a Secret Service operation failed."""

    UNAVAILABLE = "unavailable"
    PROTOCOL = "protocol"
    LOCKED = "locked"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    OTHER = "other"


_KIND_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.UNAVAILABLE: "Couldn't get secret service.",
    ErrorKind.PROTOCOL: "Received invalid data from secret service.",
    ErrorKind.LOCKED: "Secret item or collection is locked.",
    ErrorKind.NOT_FOUND: "Secret item or collection not found.",
    ErrorKind.ALREADY_EXISTS: "Secret item or collection already exists.",
    ErrorKind.OTHER: "",
}

# D-Bus error names understood by the classifier
_DBUS_ERROR_KINDS: dict[str, ErrorKind] = {
    "org.freedesktop.Secret.Error.IsLocked": ErrorKind.LOCKED,
    "org.freedesktop.Secret.Error.NoSuchObject": ErrorKind.NOT_FOUND,
    "org.freedesktop.Secret.Error.AlreadyExists": ErrorKind.ALREADY_EXISTS,
    "org.freedesktop.DBus.Error.UnknownObject": ErrorKind.NOT_FOUND,
    "org.freedesktop.DBus.Error.InvalidArgs": ErrorKind.PROTOCOL,
    "org.freedesktop.DBus.Error.InvalidSignature": ErrorKind.PROTOCOL,
    "org.freedesktop.DBus.Error.UnknownProperty": ErrorKind.PROTOCOL,
}

SECRET_ERROR_PREFIX = "org.freedesktop.Secret.Error."


class KeyringError(LsSecretsError):
    """
    A classified Secret Service failure.

    Attributes:
        kind: The error category
        description: The underlying error text, appended to the category message
    """

    def __init__(self, kind: ErrorKind, description: str = ""):
        self.kind = kind
        self.description = description
        message = f"{_KIND_MESSAGES[kind]} {description}".strip()
        super().__init__(message, {})


class ProtocolError(KeyringError):
    """The service answered with data of an unexpected shape."""

    def __init__(self, description: str):
        super().__init__(ErrorKind.PROTOCOL, description)


# Errors that per-object handlers report inline and move past
SERVICE_ERRORS = (SecretStorageException, DBusErrorResponse, KeyringError)


def _describe_dbus_error(exc: DBusErrorResponse) -> str:
    """Pick the human part of a D-Bus error reply."""
    data = exc.data
    if isinstance(data, tuple) and data and isinstance(data[0], str):
        return data[0]
    return str(exc)


def classify(exc: BaseException) -> KeyringError:
    """
    Map any exception raised while talking to the service to a KeyringError.

    Errors outside the Secret Service domain are reported as UNAVAILABLE,
    with the exception text appended.

    Args:
        exc: The exception to classify

    Returns:
        A KeyringError (the same object when already classified)
    """
    if isinstance(exc, KeyringError):
        return exc

    if isinstance(exc, LockedException):
        return KeyringError(ErrorKind.LOCKED, str(exc))
    if isinstance(exc, ItemNotFoundException):
        return KeyringError(ErrorKind.NOT_FOUND, str(exc))
    if isinstance(exc, SecretServiceNotAvailableException):
        return KeyringError(ErrorKind.UNAVAILABLE, str(exc))
    if isinstance(exc, SecretStorageException):
        return KeyringError(ErrorKind.OTHER, str(exc))

    if isinstance(exc, DBusErrorResponse):
        name = exc.name or ""
        description = _describe_dbus_error(exc)
        kind = _DBUS_ERROR_KINDS.get(name)
        if kind is not None:
            return KeyringError(kind, description)
        if name.startswith(SECRET_ERROR_PREFIX):
            return KeyringError(ErrorKind.OTHER, description)
        return KeyringError(ErrorKind.UNAVAILABLE, description)

    return KeyringError(ErrorKind.UNAVAILABLE, str(exc))
