"""Tests for LookupService."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from account_intake.exceptions import (
    AccountNotFoundError,
    InvalidLookupKeyError,
    StoreNotInitializedError,
)
from account_intake.ingest import IngestionPipeline
from account_intake.lookup import LookupService
from account_intake.models import AccountRecord
from account_intake.store import AccountStore


@pytest.fixture
def service(store: AccountStore) -> LookupService:
    return LookupService(store)


class TestLookup:
    """Tests for lookup."""

    @pytest.mark.parametrize("key", ["", "   ", None])
    def test_blank_key_never_queries_store(self, key: str | None) -> None:
        store = MagicMock(spec=AccountStore)
        service = LookupService(store)

        with pytest.raises(InvalidLookupKeyError, match="required"):
            service.lookup(key)
        store.find_by_key.assert_not_called()

    def test_unknown_key(self, service: LookupService) -> None:
        with pytest.raises(AccountNotFoundError, match="ZZZ"):
            service.lookup("ZZZ")

    def test_found_after_ingestion(
        self, service: LookupService, store: AccountStore, write_csv
    ) -> None:
        path = write_csv(
            [
                ["A1", "Ann Smith", "555-0101", "10", "active", "Atlas"],
                ["A1", "Ann Smith", "555-0101", "20", "active", "Atlas"],
            ]
        )
        IngestionPipeline(store).ingest(path)

        record = service.lookup("A1")

        assert record.balance == 20
        assert record.debtor_name == "Ann Smith"
        assert record.phone_number == "555-0101"
        assert record.status == "active"
        assert record.client_name == "Atlas"
        assert record.created_at is not None

    def test_key_trimmed(self, service: LookupService, store: AccountStore) -> None:
        store.upsert(AccountRecord(account_number="A1", balance=Decimal("5")))

        assert service.lookup("  A1 ").account_number == "A1"

    def test_uninitialized_store_is_not_a_miss(self, db_path) -> None:
        service = LookupService(AccountStore(db_path))

        with pytest.raises(StoreNotInitializedError):
            service.lookup("A1")


class TestCount:
    """Tests for count."""

    def test_count_delegates_to_store(self, service: LookupService, store: AccountStore) -> None:
        store.upsert(AccountRecord(account_number="A1"))
        store.upsert(AccountRecord(account_number="A2"))

        assert service.count() == 2
