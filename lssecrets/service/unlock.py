"""
Unlock helper.

One request per object, so every failure is attributed to exactly the
collection or item being unlocked. The helper never checks whether the
unlock worked; callers re-read the lock state.
"""

from __future__ import annotations

from loguru import logger

from lssecrets.core.exceptions import SERVICE_ERRORS, KeyringError, classify
from lssecrets.core.protocols import SecretObject, SecretService


def unlock(service: SecretService, target: SecretObject) -> KeyringError | None:
    """
    Ask the service to unlock a single collection or item.

    Args:
        service: Live service handle
        target: The object to unlock

    Returns:
        The classified error, or None when the request went through
    """
    logger.debug(f"Unlocking {target.path}")
    try:
        dismissed = service.unlock(target)
    except SERVICE_ERRORS as e:
        error = classify(e)
        logger.warning(f"Unlock of {target.path} failed: {error}")
        return error

    if dismissed:
        logger.info(f"Unlock prompt for {target.path} was dismissed")
    return None
