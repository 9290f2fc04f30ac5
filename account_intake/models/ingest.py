"""Result models for validation and ingestion runs."""

from dataclasses import dataclass, field

from account_intake.models.account import AccountRecord


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one input row."""

    ok: bool
    record: AccountRecord | None = None
    errors: list[str] = field(default_factory=list)

    @classmethod
    def accept(cls, record: AccountRecord) -> "ValidationResult":
        return cls(ok=True, record=record, errors=[])

    @classmethod
    def reject(cls, *errors: str) -> "ValidationResult":
        return cls(ok=False, record=None, errors=list(errors))


@dataclass
class IngestStats:
    """Counters and defect messages for one ingestion run.

    ``inserted`` and ``updated`` are decided within the run only: a key seen
    for the first time in this file counts as inserted even when the store
    already held it from an earlier run.
    """

    source: str = ""
    total: int = 0
    inserted: int = 0
    updated: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)
    records_before: int = 0
    records_after: int = 0
    duration_seconds: float = 0.0

    def summary(self) -> dict[str, int]:
        """Return the run counters."""
        return {
            "total": self.total,
            "inserted": self.inserted,
            "updated": self.updated,
            "skipped": self.skipped,
            "errors": len(self.errors),
            "records_before": self.records_before,
            "records_after": self.records_after,
        }
