"""Tests for domain models."""

from decimal import Decimal

from account_intake.models import AccountRecord, IngestStats, ValidationResult


class TestAccountRecord:
    """Tests for AccountRecord."""

    def test_defaults(self) -> None:
        record = AccountRecord(account_number="ACC001")

        assert record.balance == Decimal("0")
        assert record.debtor_name is None
        assert record.phone_number is None
        assert record.status is None
        assert record.client_name is None
        assert record.created_at is None
        assert record.updated_at is None

    def test_default_balance_not_shared(self) -> None:
        a = AccountRecord(account_number="A")
        b = AccountRecord(account_number="B")
        assert a.balance == b.balance == Decimal("0")


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_accept(self) -> None:
        record = AccountRecord(account_number="ACC001")
        result = ValidationResult.accept(record)

        assert result.ok is True
        assert result.record is record
        assert result.errors == []

    def test_reject(self) -> None:
        result = ValidationResult.reject("Row 2: bad", "Row 2: worse")

        assert result.ok is False
        assert result.record is None
        assert result.errors == ["Row 2: bad", "Row 2: worse"]


class TestIngestStats:
    """Tests for IngestStats."""

    def test_defaults(self) -> None:
        stats = IngestStats()

        assert stats.total == stats.inserted == stats.updated == stats.skipped == 0
        assert stats.errors == []

    def test_summary(self) -> None:
        stats = IngestStats(
            source="inventory.csv",
            total=5,
            inserted=3,
            updated=1,
            skipped=1,
            errors=["Row 4: Missing required field 'account_number'"],
            records_before=0,
            records_after=3,
        )

        assert stats.summary() == {
            "total": 5,
            "inserted": 3,
            "updated": 1,
            "skipped": 1,
            "errors": 1,
            "records_before": 0,
            "records_after": 3,
        }
