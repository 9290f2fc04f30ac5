"""Command-line entry point: ingest a CSV file or serve the read API."""

import argparse
import logging
import sys
from pathlib import Path

from account_intake.config import AppConfig
from account_intake.exceptions import AccountIntakeError, ConfigurationError
from account_intake.ingest import IngestionPipeline
from account_intake.logging import setup_logging
from account_intake.models import IngestStats
from account_intake.store import AccountStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="account-intake",
        description="Ingest account inventory CSV files and serve account lookups.",
    )
    parser.add_argument("--db", type=Path, default=None, help="Account store file (env: ACCOUNT_DB_PATH)")
    parser.add_argument("--log-level", default=None, help="Log level (env: LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    ingest = subparsers.add_parser("ingest", help="Ingest a CSV file into the account store")
    ingest.add_argument("csv_path", nargs="?", type=Path, default=None, help="CSV file (env: CSV_PATH)")

    serve = subparsers.add_parser("serve", help="Ingest the configured CSV, then serve the API")
    serve.add_argument("--host", default=None, help="Bind address (env: HOST)")
    serve.add_argument("--port", type=int, default=None, help="Port (env: PORT)")
    serve.add_argument("--no-ingest", action="store_true", help="Skip the startup ingestion run")

    return parser


def print_report(stats: IngestStats) -> None:
    """Print an ingestion report to stdout."""
    print("\nIngestion Results:")
    print("-" * 40)
    print(f"   Total rows processed: {stats.total}")
    print(f"   New records inserted: {stats.inserted}")
    print(f"   Records updated:      {stats.updated}")
    print(f"   Rows skipped:         {stats.skipped}")
    print("-" * 40)
    print(f"   DB records before:    {stats.records_before}")
    print(f"   DB records after:     {stats.records_after}")

    if stats.errors:
        print("\nValidation Errors:")
        for error in stats.errors:
            print(f"   - {error}")
    print()


def run_ingest(config: AppConfig) -> int:
    store = AccountStore(config.store.db_path, flush_on_write=config.store.flush_on_write)
    try:
        store.initialize()
        stats = IngestionPipeline(store).ingest(config.ingest.csv_path)
    except AccountIntakeError as e:
        logger.error("Ingestion failed: %s", e)
        return 1
    finally:
        store.close()

    print_report(stats)
    return 0


def run_serve(config: AppConfig) -> int:
    import uvicorn

    from account_intake.api import create_app

    app = create_app(config)
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = AppConfig.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.db is not None:
        config.store.db_path = args.db
    if args.log_level is not None:
        config.log_level = args.log_level
    setup_logging(config.log_level, config.log_format)

    if args.command == "ingest":
        if args.csv_path is not None:
            config.ingest.csv_path = args.csv_path
        return run_ingest(config)

    if args.host is not None:
        config.server.host = args.host
    if args.port is not None:
        config.server.port = args.port
    if args.no_ingest:
        config.ingest.auto_ingest = False
    return run_serve(config)


if __name__ == "__main__":
    sys.exit(main())
