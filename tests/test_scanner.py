"""
Tests for the keyring scanner.

Covers alias resolution, detail gating, the unlock policy and per-object
error handling against an in-memory service.
"""
import pytest
from fakes import LOGIN_PATH, FakeCollection, FakeDBusError, FakeItem, FakeService
from secretstorage.exceptions import ItemNotFoundException, LockedException

from lssecrets.config.models import ReportConfig
from lssecrets.core.exceptions import ProtocolError
from lssecrets.core.types import DetailLevel, SecretValue
from lssecrets.service.scanner import KeyringScanner


def scan_all(service, detail=DetailLevel.ITEMS, unlock=False):
    scanner = KeyringScanner(service, ReportConfig(detail=detail, unlock=unlock))
    service_report = scanner.scan_service()
    return service_report, list(scanner.iter_collections(service_report.aliases))


class TestAliases:
    """Tests for alias resolution."""

    def test_reads_every_known_alias(self, login_service):
        scanner = KeyringScanner(login_service, ReportConfig())
        scanner.read_aliases()
        assert login_service.alias_reads == ["default", "login", "session"]

    def test_unbound_aliases_are_skipped(self, login_service):
        aliases = KeyringScanner(login_service, ReportConfig()).read_aliases()
        assert aliases.forward == {"default": LOGIN_PATH}

    def test_reverse_map_collects_shared_paths(self):
        service = FakeService(aliases={"default": LOGIN_PATH, "login": LOGIN_PATH})
        aliases = KeyringScanner(service, ReportConfig()).read_aliases()
        assert aliases.aliases_for(LOGIN_PATH) == ["default", "login"]

    def test_collection_report_carries_aliases(self, login_service):
        _, collections = scan_all(login_service)
        assert collections[0].aliases == ["default"]


class TestDetailGating:
    """Tests for what each detail level visits."""

    def test_service_level_never_lists_collections(self, login_service):
        service_report, collections = scan_all(login_service, detail=DetailLevel.SERVICE)
        assert collections == []
        assert login_service.list_calls == 0
        assert service_report.aliases.forward == {"default": LOGIN_PATH}

    def test_collections_level_skips_items(self, login_service, login_collection):
        _, collections = scan_all(login_service, detail=DetailLevel.COLLECTIONS)
        assert collections[0].label == "Login"
        assert collections[0].items == []
        assert "get_items" not in login_collection.calls

    def test_items_level_skips_attributes(self, login_service, test_item):
        _, collections = scan_all(login_service, detail=DetailLevel.ITEMS)
        item = collections[0].items[0]
        assert item.label == "Test"
        assert item.attributes is None
        assert "get_attributes" not in test_item.calls

    def test_attributes_level_sorts_keys(self, login_service, test_item):
        test_item.attributes = {"zeta": "1", "app": "demo", "mid": "2"}
        _, collections = scan_all(login_service, detail=DetailLevel.ATTRIBUTES)
        assert list(collections[0].items[0].attributes) == ["app", "mid", "zeta"]

    @pytest.mark.parametrize("detail", [0, 1, 2, 3])
    def test_no_secret_read_below_secrets_level(self, login_service, detail):
        scan_all(login_service, detail=DetailLevel(detail), unlock=True)
        assert login_service.secret_reads() == 0

    def test_secrets_level_loads_secret(self, login_service):
        _, collections = scan_all(login_service, detail=DetailLevel.SECRETS)
        item = collections[0].items[0]
        assert item.secret == SecretValue("text/plain", b"hunter2")
        assert item.locked is False
        assert item.error is None

    def test_service_order_is_preserved(self):
        names = ["zz", "aa", "mm"]
        service = FakeService(
            collections=[FakeCollection(path=f"/c/{n}", label=n) for n in names]
        )
        _, collections = scan_all(service, detail=DetailLevel.COLLECTIONS)
        assert [c.label for c in collections] == names


class TestUnlockPolicy:
    """Tests for when unlock is attempted."""

    def test_no_unlock_without_flag(self, login_service, login_collection):
        login_collection.locked = True
        _, collections = scan_all(login_service, unlock=False)
        assert login_service.unlock_requests == []
        assert collections[0].locked is True

    def test_unlocked_objects_are_left_alone(self, login_service):
        scan_all(login_service, detail=DetailLevel.SECRETS, unlock=True)
        assert login_service.unlock_requests == []

    def test_locked_collection_is_unlocked_and_reread(self, login_service, login_collection):
        login_collection.locked = True
        _, collections = scan_all(login_service, unlock=True)
        assert login_service.unlock_requests == [LOGIN_PATH]
        assert collections[0].locked is False
        assert collections[0].unlock_error is None
        # read before and after the unlock
        assert login_collection.calls.count("is_locked") == 2

    def test_displayed_state_is_fresh_after_failed_unlock(self, login_service, login_collection):
        login_collection.locked = True
        login_collection.unlock_works = False
        _, collections = scan_all(login_service, unlock=True)
        assert collections[0].locked is True

    def test_dismissed_prompt_is_not_an_error(self, login_service, login_collection):
        login_collection.locked = True
        login_service.dismiss_prompts = True
        _, collections = scan_all(login_service, unlock=True)
        assert collections[0].unlock_error is None
        assert collections[0].locked is True

    def test_collection_unlock_failure_still_lists_items(self, login_service, login_collection):
        login_collection.locked = True
        login_collection.unlock_error = FakeDBusError(
            "org.freedesktop.Secret.Error.IsLocked", "denied"
        )

        _, collections = scan_all(login_service, unlock=True)

        report = collections[0]
        assert report.unlock_error == "Secret item or collection is locked. denied"
        assert report.locked is True
        assert [item.label for item in report.items] == ["Test"]

    def test_item_unlock_failure_skips_secret_only_for_that_item(self, login_collection, test_item):
        test_item.locked = True
        test_item.unlock_error = ItemNotFoundException("gone")
        sibling = FakeItem(
            path=LOGIN_PATH + "/2", label="Other", secret=SecretValue("text/plain", b"pw")
        )
        login_collection.items.append(sibling)
        other = FakeCollection(path="/c/other", label="Other collection")
        service = FakeService(collections=[login_collection, other])

        _, collections = scan_all(service, detail=DetailLevel.SECRETS, unlock=True)

        failed, ok = collections[0].items
        assert failed.error == "Secret item or collection not found. gone"
        assert failed.locked is None
        assert "get_secret" not in test_item.calls
        assert ok.secret == SecretValue("text/plain", b"pw")
        assert collections[1].label == "Other collection"


class TestPerObjectErrors:
    """Tests for errors that stay attached to one collection or item."""

    def test_locked_collection_secret_fails_inline(self, login_service, login_collection, test_item):
        login_collection.locked = True
        test_item.locked = True

        _, collections = scan_all(login_service, detail=DetailLevel.SECRETS)

        item = collections[0].items[0]
        assert collections[0].locked is True
        assert item.locked is True
        assert item.error == "Secret item or collection is locked. Item is locked!"

    def test_vanished_item_does_not_stop_siblings(self, login_collection, test_item):
        test_item.label_error = ItemNotFoundException("No such item")
        sibling = FakeItem(path=LOGIN_PATH + "/2", label="Next")
        login_collection.items.append(sibling)
        service = FakeService(collections=[login_collection])

        _, collections = scan_all(service)

        gone, nxt = collections[0].items
        assert gone.label is None
        assert gone.error == "Secret item or collection not found. No such item"
        assert nxt.label == "Next"

    def test_attribute_failure_is_not_terminal(self, login_service, test_item):
        test_item.attributes_error = ProtocolError("Attributes is str, expected dict")
        _, collections = scan_all(login_service, detail=DetailLevel.SECRETS)
        item = collections[0].items[0]
        assert item.attributes_error.startswith("Received invalid data from secret service.")
        assert item.secret is not None

    def test_items_listing_failure_is_per_collection(self, login_collection):
        login_collection.items_error = LockedException("Collection is locked!")
        other = FakeCollection(path="/c/other", label="Other")
        service = FakeService(collections=[login_collection, other])

        _, collections = scan_all(service)

        assert collections[0].error.startswith("Secret item or collection is locked.")
        assert collections[1].error is None

    def test_secret_load_failure_is_per_item(self, login_service, test_item):
        test_item.secret_error = ItemNotFoundException("vanished")
        _, collections = scan_all(login_service, detail=DetailLevel.SECRETS)
        assert collections[0].items[0].error == "Secret item or collection not found. vanished"

    @pytest.mark.parametrize("payload", [None, b""])
    def test_null_secret_is_flagged(self, login_service, test_item, payload):
        test_item.secret = SecretValue("text/plain", payload)
        _, collections = scan_all(login_service, detail=DetailLevel.SECRETS)
        item = collections[0].items[0]
        assert item.secret is None
        assert item.error == "secret is null"

    def test_missing_secret_is_flagged(self, login_service, test_item):
        test_item.secret = None
        _, collections = scan_all(login_service, detail=DetailLevel.SECRETS)
        assert collections[0].items[0].error == "secret is null"

    def test_zero_timestamps_are_absent(self, login_service, login_collection):
        login_collection.created = 0
        login_collection.modified = 1700000000
        _, collections = scan_all(login_service, detail=DetailLevel.COLLECTIONS)
        assert collections[0].created is None
        assert collections[0].modified == 1700000000

    def test_collection_listing_failure_propagates(self):
        class BrokenService(FakeService):
            def get_collections(self):
                raise ProtocolError("Collections is str, expected list")

        scanner = KeyringScanner(BrokenService(), ReportConfig())
        with pytest.raises(ProtocolError):
            list(scanner.iter_collections(scanner.read_aliases()))


class TestRepeatability:
    """Scanning twice without unlocking yields the same reports."""

    def test_pure_query(self, login_service):
        first = scan_all(login_service, detail=DetailLevel.SECRETS)
        second = scan_all(login_service, detail=DetailLevel.SECRETS)
        assert first == second
