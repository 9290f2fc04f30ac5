"""CSV ingestion: row validation, source reading, and the ingestion run."""

from account_intake.ingest.pipeline import IngestionPipeline
from account_intake.ingest.source import read_rows
from account_intake.ingest.validation import validate_row

__all__ = ["IngestionPipeline", "read_rows", "validate_row"]
