"""
lssecrets Core - Shared types and enums.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

# Content types whose payload may be shown as text
TEXT_CONTENT_TYPES = ("text/plain", "", "application/octet-stream")


class DetailLevel(IntEnum):
    """How deep the report goes. Each level includes the ones below it."""

    SERVICE = 0
    COLLECTIONS = 1
    ITEMS = 2
    ATTRIBUTES = 3
    SECRETS = 4

    @property
    def wants_secrets(self) -> bool:
        """True when secret values are loaded, which needs an open session."""
        return self >= DetailLevel.SECRETS


@dataclass(frozen=True)
class SecretValue:
    """A decrypted secret as returned by the service."""

    content_type: str
    payload: bytes | None

    @property
    def is_null(self) -> bool:
        """Present but carrying nothing."""
        return not self.payload

    @property
    def text(self) -> str | None:
        """
        The payload as text, or None when it should be shown as bytes.

        text/plain payloads are text. Untyped and application/octet-stream
        payloads are text when they happen to be valid UTF-8. Any other
        content type, or invalid UTF-8, is binary.
        """
        if self.payload is None or self.content_type not in TEXT_CONTENT_TYPES:
            return None
        try:
            return self.payload.decode("utf-8")
        except UnicodeDecodeError:
            return None


@dataclass
class AliasMap:
    """
    Alias bindings, resolved once before any collection is rendered.

    Attributes:
        forward: alias name -> collection path
        reverse: collection path -> alias names (several aliases may share a path)
    """

    forward: dict[str, str] = field(default_factory=dict)
    reverse: dict[str, list[str]] = field(default_factory=dict)

    def bind(self, alias: str, path: str) -> None:
        """Record that `alias` currently points at `path`."""
        self.forward[alias] = path
        self.reverse.setdefault(path, []).append(alias)

    def aliases_for(self, path: str) -> list[str]:
        """Aliases bound to a collection path, in resolution order."""
        return list(self.reverse.get(path, []))


@dataclass
class ServiceReport:
    """Top of the report: the service itself."""

    path: str
    aliases: AliasMap = field(default_factory=AliasMap)


@dataclass
class ItemReport:
    """
    What was observed for one item.

    `error` is terminal: fields after the stage that failed stay unset.
    """

    path: str
    label: str | None = None
    created: int | None = None
    modified: int | None = None
    attributes: dict[str, str] | None = None
    attributes_error: str | None = None
    locked: bool | None = None
    secret: SecretValue | None = None
    error: str | None = None


@dataclass
class CollectionReport:
    """What was observed for one collection and, depending on detail, its items."""

    path: str
    label: str | None = None
    aliases: list[str] = field(default_factory=list)
    created: int | None = None
    modified: int | None = None
    unlock_error: str | None = None
    locked: bool | None = None
    items: list[ItemReport] = field(default_factory=list)
    error: str | None = None
