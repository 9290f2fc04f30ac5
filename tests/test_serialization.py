"""Tests for shared serialization utilities."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal

from account_intake.models import AccountRecord
from account_intake.serialization import dataclass_to_dict, serialize_value


@dataclass
class _SampleData:
    name: str
    amount: Decimal
    created_at: datetime


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("99.99")) == 99.99

    def test_datetime(self) -> None:
        dt = datetime(2024, 6, 15, 10, 30, 0, tzinfo=timezone.utc)
        assert serialize_value(dt) == "2024-06-15T10:30:00+00:00"

    def test_date(self) -> None:
        assert serialize_value(date(2024, 6, 15)) == "2024-06-15"

    def test_nested(self) -> None:
        data = {"amounts": [Decimal("10.00"), Decimal("20.50")], "info": {"date": date(2024, 1, 1)}}
        result = serialize_value(data)
        assert result["amounts"] == [10.0, 20.5]
        assert result["info"]["date"] == "2024-01-01"

    def test_none_passthrough(self) -> None:
        assert serialize_value(None) is None


class TestDataclassToDict:
    """Tests for dataclass_to_dict function."""

    def test_account_record(self) -> None:
        record = AccountRecord(account_number="A1", balance=Decimal("12.34"))

        result = dataclass_to_dict(record)

        assert result == {
            "account_number": "A1",
            "debtor_name": None,
            "phone_number": None,
            "balance": 12.34,
            "status": None,
            "client_name": None,
            "created_at": None,
            "updated_at": None,
        }

    def test_nested_values_serialized(self) -> None:
        obj = _SampleData(name="test", amount=Decimal("100.50"), created_at=datetime(2024, 1, 1))

        result = dataclass_to_dict(obj)

        assert result["name"] == "test"
        assert result["amount"] == 100.5
        assert result["created_at"] == "2024-01-01T00:00:00"
