"""Account model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

# Recognised input columns, in canonical file order.
ACCOUNT_COLUMNS = (
    "account_number",
    "debtor_name",
    "phone_number",
    "balance",
    "status",
    "client_name",
)

OPTIONAL_TEXT_FIELDS = ("debtor_name", "phone_number", "status", "client_name")


@dataclass
class AccountRecord:
    """Collection account keyed by ``account_number``.

    Optional text fields are ``None`` when the input had no value; they are
    never the empty string. Timestamps belong to the store and stay ``None``
    until the record has been persisted.
    """

    account_number: str
    debtor_name: str | None = None
    phone_number: str | None = None
    balance: Decimal = field(default_factory=lambda: Decimal("0"))
    status: str | None = None
    client_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
