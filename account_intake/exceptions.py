"""Custom exception hierarchy for account-intake."""


class AccountIntakeError(Exception):
    """Base exception for all account-intake errors."""


class ConfigurationError(AccountIntakeError):
    """Raised when configuration is invalid or missing."""


class SourceError(AccountIntakeError):
    """Raised when an ingestion source cannot be opened or parsed."""


class StoreError(AccountIntakeError):
    """Raised when a store operation fails."""


class StoreNotInitializedError(StoreError):
    """Raised when the store is used before ``initialize()`` has run."""


class InvalidLookupKeyError(AccountIntakeError):
    """Raised when a lookup is attempted with a blank account number."""


class EntityNotFoundError(AccountIntakeError):
    """Raised when a referenced entity does not exist."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no account exists for the requested account number."""

    def __init__(self, account_number: str) -> None:
        super().__init__(f"Account with number '{account_number}' does not exist")
        self.account_number = account_number
