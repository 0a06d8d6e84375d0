"""
Core Protocols - Interfaces between the scanner and the service backend.

The scanner only depends on these; the D-Bus backend and the test fakes
both implement them.
"""
from typing import Protocol, runtime_checkable

from lssecrets.core.types import SecretValue

# =============================================================================
# Keyring Objects
# =============================================================================

@runtime_checkable
class SecretObject(Protocol):
    """Anything that has a path, a label, timestamps and a lock state."""

    @property
    def path(self) -> str:
        """D-Bus object path."""
        ...

    def get_label(self) -> str:
        ...

    def get_created(self) -> int:
        """Seconds since the epoch, 0 when unknown."""
        ...

    def get_modified(self) -> int:
        """Seconds since the epoch, 0 when unknown."""
        ...

    def is_locked(self) -> bool:
        """Fresh read of the lock state."""
        ...


@runtime_checkable
class SecretItem(SecretObject, Protocol):
    """A single secret entry."""

    def get_attributes(self) -> dict[str, str]:
        ...

    def get_secret(self) -> SecretValue | None:
        """Load and decrypt the secret. Raises when locked."""
        ...


@runtime_checkable
class SecretCollection(SecretObject, Protocol):
    """A container of items."""

    def get_items(self) -> list[SecretItem]:
        ...


# =============================================================================
# Service Protocol
# =============================================================================

@runtime_checkable
class SecretService(Protocol):
    """
    A live handle to the Secret Service.

    Owned by the top-level run; nothing else opens or closes it.
    """

    @property
    def path(self) -> str:
        ...

    def read_alias(self, alias: str) -> str | None:
        """Collection path bound to `alias`, or None."""
        ...

    def get_collections(self) -> list[SecretCollection]:
        ...

    def unlock(self, target: SecretObject) -> bool:
        """
        Ask the service to unlock exactly one object.

        Returns True when the unlock prompt was dismissed.
        """
        ...

    def close(self) -> None:
        ...
