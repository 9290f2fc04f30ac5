"""Pydantic response schemas for the account read API."""

from datetime import datetime

from pydantic import BaseModel

from account_intake.models import AccountRecord
from account_intake.serialization import dataclass_to_dict


class AccountResponse(BaseModel):
    """One stored account, with the balance rendered as a JSON number."""

    account_number: str
    debtor_name: str | None = None
    phone_number: str | None = None
    balance: float
    status: str | None = None
    client_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, record: AccountRecord) -> "AccountResponse":
        return cls(**dataclass_to_dict(record))


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime


class StatsResponse(BaseModel):
    total_accounts: int
    timestamp: datetime
