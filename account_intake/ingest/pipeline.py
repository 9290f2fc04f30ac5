"""Ingestion run: validate each CSV row and upsert it into the account store."""

import logging
import time
from pathlib import Path
from typing import TextIO

from account_intake.exceptions import StoreError
from account_intake.ingest.source import describe_source, read_rows
from account_intake.ingest.validation import validate_row
from account_intake.models import IngestStats
from account_intake.store import AccountStore

logger = logging.getLogger(__name__)

# Data rows start on line 2 of the file, after the header.
HEADER_LINES = 1


class IngestionPipeline:
    """Sequential CSV-to-store ingestion.

    Rows are applied in file order, so when a file repeats an account
    number the last occurrence wins. A bad row is counted and reported but
    never stops the run. Only a source that cannot be read aborts it.

    Parameters
    ----------
    store : AccountStore
        Initialized store that receives the upserts.
    """

    def __init__(self, store: AccountStore) -> None:
        self.store = store

    def ingest(self, source: str | Path | TextIO) -> IngestStats:
        """Ingest every row of ``source`` and flush the store once at the end.

        Parameters
        ----------
        source : str | Path | TextIO
            CSV file path or open text stream with a header row.

        Returns
        -------
        IngestStats
            Run counters and per-row defect messages.

        Raises
        ------
        SourceError
            If the source cannot be opened or parsed.
        StoreNotInitializedError
            If the store has not been initialized.
        """
        name = describe_source(source)
        stats = IngestStats(source=name)
        stats.records_before = self.store.count()
        seen: set[str] = set()
        started = time.perf_counter()

        logger.info("=" * 60)
        logger.info("Ingesting accounts from %s", name)
        logger.info("=" * 60)

        for row in read_rows(source):
            stats.total += 1
            row_number = stats.total + HEADER_LINES

            result = validate_row(row, row_number)
            if not result.ok:
                stats.skipped += 1
                stats.errors.extend(result.errors)
                continue

            record = result.record
            is_duplicate = record.account_number in seen
            seen.add(record.account_number)

            try:
                self.store.upsert(record)
            except StoreError as e:
                stats.skipped += 1
                stats.errors.append(f"Row {row_number}: Database error - {e}")
                continue

            if is_duplicate:
                stats.updated += 1
            else:
                stats.inserted += 1

        self.store.flush()
        stats.records_after = self.store.count()
        stats.duration_seconds = time.perf_counter() - started

        log_report(stats)
        return stats


def log_report(stats: IngestStats) -> None:
    """Log the run counters and every row defect."""
    logger.info("Ingestion results for %s (%.2fs):", stats.source, stats.duration_seconds)
    logger.info("  Total rows processed: %d", stats.total)
    logger.info("  New records inserted: %d", stats.inserted)
    logger.info("  Records updated:      %d", stats.updated)
    logger.info("  Rows skipped:         %d", stats.skipped)
    logger.info("  Store records before: %d", stats.records_before)
    logger.info("  Store records after:  %d", stats.records_after)
    for error in stats.errors:
        logger.warning("  %s", error)
