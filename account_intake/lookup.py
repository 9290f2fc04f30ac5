"""Read-only account lookups."""

from account_intake.exceptions import AccountNotFoundError, InvalidLookupKeyError
from account_intake.models import AccountRecord
from account_intake.store import AccountStore


class LookupService:
    """Read-only facade over the account store."""

    def __init__(self, store: AccountStore) -> None:
        self.store = store

    def lookup(self, account_number: str | None) -> AccountRecord:
        """Return the account stored under ``account_number``.

        Raises
        ------
        InvalidLookupKeyError
            If the key is missing or blank. The store is not queried.
        AccountNotFoundError
            If no account has that number.
        """
        key = (account_number or "").strip()
        if not key:
            raise InvalidLookupKeyError("Account number is required")

        record = self.store.find_by_key(key)
        if record is None:
            raise AccountNotFoundError(key)
        return record

    def count(self) -> int:
        return self.store.count()
