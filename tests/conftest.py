"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest
from fakes import LOGIN_PATH, TEST_ITEM_PATH, FakeCollection, FakeItem, FakeService
from loguru import logger

from lssecrets.core.types import SecretValue

# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep loguru off the terminal during tests."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Point config and log locations at a temporary directory."""
    monkeypatch.setenv("LSSECRETS_CONFIG", str(tmp_path / "config.yaml"))
    monkeypatch.setenv("LSSECRETS_LOG_DIR", str(tmp_path / "logs"))
    for var in ("LSSECRETS_DETAIL", "LSSECRETS_UNLOCK"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def test_item() -> FakeItem:
    return FakeItem(
        path=TEST_ITEM_PATH,
        label="Test",
        attributes={"app": "demo"},
        secret=SecretValue("text/plain", b"hunter2"),
    )


@pytest.fixture
def login_collection(test_item: FakeItem) -> FakeCollection:
    return FakeCollection(path=LOGIN_PATH, label="Login", items=[test_item])


@pytest.fixture
def login_service(login_collection: FakeCollection) -> FakeService:
    """One unlocked 'Login' collection, aliased as default, holding item 'Test'."""
    return FakeService(collections=[login_collection], aliases={"default": LOGIN_PATH})
