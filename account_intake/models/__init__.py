"""Domain models for account ingestion."""

from account_intake.models.account import ACCOUNT_COLUMNS, OPTIONAL_TEXT_FIELDS, AccountRecord
from account_intake.models.ingest import IngestStats, ValidationResult

__all__ = [
    "ACCOUNT_COLUMNS",
    "OPTIONAL_TEXT_FIELDS",
    "AccountRecord",
    "IngestStats",
    "ValidationResult",
]
