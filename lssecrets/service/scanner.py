"""
Keyring scanner.

Walks service -> collections -> items and records what it sees into
report dataclasses. Errors tied to a single collection or item are
recorded on that object's report and the walk moves on; only errors at
the service level propagate.
"""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from lssecrets.config.constants import KNOWN_ALIASES, NULL_SECRET_MESSAGE
from lssecrets.config.models import ReportConfig
from lssecrets.core.exceptions import SERVICE_ERRORS, classify
from lssecrets.core.protocols import SecretCollection, SecretItem, SecretObject, SecretService
from lssecrets.core.types import (
    AliasMap,
    CollectionReport,
    DetailLevel,
    ItemReport,
    ServiceReport,
)
from lssecrets.service.unlock import unlock


def _timestamp(value: int) -> int | None:
    """0 means the service does not know."""
    return value or None


class KeyringScanner:
    """
    Enumerates the keyring for one report.

    Args:
        service: Live service handle, owned by the caller
        options: Detail level and unlock policy
    """

    def __init__(self, service: SecretService, options: ReportConfig) -> None:
        self.service = service
        self.options = options

    @property
    def detail(self) -> DetailLevel:
        return self.options.detail

    # =========================================================================
    # Service
    # =========================================================================

    def read_aliases(self) -> AliasMap:
        """Resolve the well-known aliases. Unbound aliases are skipped."""
        aliases = AliasMap()
        for alias in KNOWN_ALIASES:
            path = self.service.read_alias(alias)
            if path:
                aliases.bind(alias, path)
        logger.debug(f"Aliases resolved: {aliases.forward}")
        return aliases

    def scan_service(self) -> ServiceReport:
        return ServiceReport(path=self.service.path, aliases=self.read_aliases())

    def iter_collections(self, aliases: AliasMap) -> Iterator[CollectionReport]:
        """
        Yield one report per collection, in the order the service lists them.

        Nothing is listed below DetailLevel.COLLECTIONS.
        """
        if self.detail < DetailLevel.COLLECTIONS:
            return

        collections = self.service.get_collections()
        logger.debug(f"Service lists {len(collections)} collection(s)")
        for collection in collections:
            yield self.scan_collection(collection, aliases)

    # =========================================================================
    # Locking
    # =========================================================================

    def _unlock_if_requested(self, target: SecretObject) -> str | None:
        """
        Unlock `target` when asked to and it is currently locked.

        Returns:
            The unlock error message, if any
        """
        if not self.options.unlock or not target.is_locked():
            return None

        error = unlock(self.service, target)
        return str(error) if error else None

    # =========================================================================
    # Collections
    # =========================================================================

    def scan_collection(self, collection: SecretCollection, aliases: AliasMap) -> CollectionReport:
        report = CollectionReport(path=collection.path, aliases=aliases.aliases_for(collection.path))

        try:
            report.label = collection.get_label()
            report.created = _timestamp(collection.get_created())
            report.modified = _timestamp(collection.get_modified())
        except SERVICE_ERRORS as e:
            report.error = str(classify(e))
            logger.warning(f"Collection {collection.path}: {report.error}")
            return report

        try:
            report.unlock_error = self._unlock_if_requested(collection)
            report.locked = collection.is_locked()
        except SERVICE_ERRORS as e:
            report.error = str(classify(e))
            logger.warning(f"Collection {collection.path}: {report.error}")
            return report

        if self.detail < DetailLevel.ITEMS:
            return report

        try:
            items = collection.get_items()
        except SERVICE_ERRORS as e:
            report.error = str(classify(e))
            logger.warning(f"Items of {collection.path}: {report.error}")
            return report

        report.items = [self.scan_item(item) for item in items]
        return report

    # =========================================================================
    # Items
    # =========================================================================

    def scan_item(self, item: SecretItem) -> ItemReport:
        report = ItemReport(path=item.path)

        try:
            report.label = item.get_label()
            report.created = _timestamp(item.get_created())
            report.modified = _timestamp(item.get_modified())
        except SERVICE_ERRORS as e:
            report.error = str(classify(e))
            logger.warning(f"Item {item.path}: {report.error}")
            return report

        if self.detail >= DetailLevel.ATTRIBUTES:
            try:
                attributes = item.get_attributes()
                report.attributes = {key: attributes[key] for key in sorted(attributes)}
            except SERVICE_ERRORS as e:
                report.attributes_error = str(classify(e))
                logger.warning(f"Attributes of {item.path}: {report.attributes_error}")

        try:
            unlock_error = self._unlock_if_requested(item)
            if unlock_error:
                # No secret is read from an item that failed to unlock
                report.error = unlock_error
                return report
            report.locked = item.is_locked()
        except SERVICE_ERRORS as e:
            report.error = str(classify(e))
            logger.warning(f"Item {item.path}: {report.error}")
            return report

        if self.detail < DetailLevel.SECRETS:
            return report

        try:
            secret = item.get_secret()
        except SERVICE_ERRORS as e:
            report.error = str(classify(e))
            logger.info(f"Secret of {item.path} not loaded: {report.error}")
            return report

        if secret is None or secret.is_null:
            report.error = NULL_SECRET_MESSAGE
        else:
            report.secret = secret
        return report
