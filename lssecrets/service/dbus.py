"""
Secret Service backend over D-Bus.

Uses secretstorage (on top of jeepney) to reach org.freedesktop.secrets.
Properties are read through plain D-Bus address wrappers so every value
shown in the report is a fresh read; secret decryption is delegated to
secretstorage's Item.
"""

from __future__ import annotations

from typing import Any

import secretstorage
from jeepney.io.blocking import DBusConnection
from loguru import logger
from secretstorage.dhcrypto import Session
from secretstorage.util import DBusAddressWrapper, open_session, unlock_objects

from lssecrets.config.constants import (
    COLLECTION_IFACE,
    ITEM_IFACE,
    NO_OBJECT_PATH,
    SECRETS_BUS_NAME,
    SECRETS_PATH,
    SERVICE_IFACE,
)
from lssecrets.core.exceptions import (
    SERVICE_ERRORS,
    ErrorKind,
    KeyringError,
    ProtocolError,
    classify,
)
from lssecrets.core.protocols import SecretObject
from lssecrets.core.types import SecretValue


class DBusSecretObject:
    """Common property access for collections and items."""

    interface: str = ""

    def __init__(self, connection: DBusConnection, path: str, session: Session | None = None):
        self._connection = connection
        self._path = path
        self._session = session
        self._props = DBusAddressWrapper(path, self.interface, connection)

    @property
    def path(self) -> str:
        return self._path

    def _get_property(self, name: str, expected: type) -> Any:
        value = self._props.get_property(name)
        if not isinstance(value, expected):
            raise ProtocolError(
                f"{name} of {self._path} is {type(value).__name__}, expected {expected.__name__}"
            )
        return value

    def get_label(self) -> str:
        return self._get_property("Label", str)

    def get_created(self) -> int:
        return self._get_property("Created", int)

    def get_modified(self) -> int:
        return self._get_property("Modified", int)

    def is_locked(self) -> bool:
        return self._get_property("Locked", bool)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"


class DBusItem(DBusSecretObject):
    """org.freedesktop.Secret.Item"""

    interface = ITEM_IFACE

    def get_attributes(self) -> dict[str, str]:
        attributes = self._get_property("Attributes", dict)
        return {str(key): str(value) for key, value in attributes.items()}

    def get_secret(self) -> SecretValue | None:
        """
        Load the secret through the session opened at connect time.

        Raises:
            secretstorage.exceptions.LockedException: If the item is locked
        """
        item = secretstorage.Item(self._connection, self._path, self._session)
        content_type = item.get_secret_content_type()
        payload = item.get_secret()
        return SecretValue(content_type=content_type, payload=payload)


class DBusCollection(DBusSecretObject):
    """org.freedesktop.Secret.Collection"""

    interface = COLLECTION_IFACE

    def get_items(self) -> list[DBusItem]:
        paths = self._get_property("Items", list)
        return [DBusItem(self._connection, path, self._session) for path in paths]


class DBusSecretService:
    """
    Live handle to the Secret Service.

    Use connect() to obtain one; close it (or use it as a context manager)
    to release the D-Bus connection.
    """

    def __init__(self, connection: DBusConnection, session: Session | None = None):
        self._connection = connection
        self._session = session
        self._service = DBusAddressWrapper(SECRETS_PATH, SERVICE_IFACE, connection)

    @property
    def path(self) -> str:
        return SECRETS_PATH

    @property
    def has_session(self) -> bool:
        return self._session is not None

    def read_alias(self, alias: str) -> str | None:
        """Collection path bound to `alias`; None when unbound or unreadable."""
        try:
            (path,) = self._service.call("ReadAlias", "s", alias)
        except SERVICE_ERRORS as e:
            logger.debug(f"Alias '{alias}' could not be read: {classify(e)}")
            return None

        if not isinstance(path, str) or path == NO_OBJECT_PATH:
            return None
        return path

    def get_collections(self) -> list[DBusCollection]:
        paths = self._service.get_property("Collections")
        if not isinstance(paths, list):
            raise ProtocolError(f"Collections is {type(paths).__name__}, expected list")
        return [DBusCollection(self._connection, path, self._session) for path in paths]

    def unlock(self, target: SecretObject) -> bool:
        """Unlock exactly `target`, running the service prompt if one is needed."""
        return unlock_objects(self._connection, [target.path])

    def close(self) -> None:
        """Release the D-Bus connection (and with it the session)."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.debug("Secret Service connection closed")

    def __enter__(self) -> DBusSecretService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def connect(want_secrets: bool) -> DBusSecretService:
    """
    Open a handle to the Secret Service.

    Args:
        want_secrets: Also negotiate an encrypted session, required to read secrets

    Returns:
        A fully usable DBusSecretService

    Raises:
        KeyringError: If the service cannot be reached or the session fails
    """
    logger.debug(f"Connecting to Secret Service (session={want_secrets})")
    try:
        connection = secretstorage.dbus_init()
    except Exception as e:
        raise classify(e) from e

    try:
        if not secretstorage.check_service_availability(connection):
            raise KeyringError(ErrorKind.UNAVAILABLE, f"{SECRETS_BUS_NAME} is not running")
        session = open_session(connection) if want_secrets else None
    except Exception as e:
        connection.close()
        raise classify(e) from e

    logger.info(f"Connected to Secret Service at {SECRETS_PATH}")
    return DBusSecretService(connection, session)
