"""Reading account rows from delimited text sources."""

import csv
import io
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from account_intake.exceptions import SourceError

REQUIRED_COLUMNS = ("account_number",)


def describe_source(source: str | Path | TextIO) -> str:
    """Human-readable name of a source for logs and reports."""
    if isinstance(source, (str, Path)):
        return str(source)
    return str(getattr(source, "name", "<stream>"))


def read_rows(source: str | Path | TextIO) -> Iterator[dict[str, str | None]]:
    """Yield one dict per data row of a CSV source.

    The first row names the columns. Header names are trimmed and
    lower-cased. Blank lines are skipped. Rows shorter than the header get
    ``None`` for the missing cells and cells beyond the header are dropped,
    so ragged rows never stop the scan.

    Raises
    ------
    SourceError
        If the source cannot be opened, decoded or parsed, or its header has
        no ``account_number`` column.
    """
    if isinstance(source, (str, Path)):
        try:
            handle = open(source, newline="", encoding="utf-8-sig")
        except OSError as e:
            raise SourceError(f"CSV file not found or unreadable at '{source}': {e}") from e
        with handle:
            yield from _read_csv(handle, describe_source(source))
    else:
        yield from _read_csv(source, describe_source(source))


def _read_csv(handle: TextIO, name: str) -> Iterator[dict[str, str | None]]:
    reader = csv.reader(handle)
    try:
        header = next(reader, None)
        if header is None:
            return
        columns = [_normalize_header(h) for h in header]
        missing = [c for c in REQUIRED_COLUMNS if c not in columns]
        if missing:
            raise SourceError(f"{name}: header is missing required column(s) {missing}")

        width = len(columns)
        for cells in reader:
            if not cells:
                continue
            padded = cells[:width] + [None] * (width - len(cells))
            yield dict(zip(columns, padded))
    except csv.Error as e:
        raise SourceError(f"CSV parsing error in {name} at line {reader.line_num}: {e}") from e
    except (UnicodeDecodeError, io.UnsupportedOperation, OSError) as e:
        raise SourceError(f"Could not read {name}: {e}") from e


def _normalize_header(name: str) -> str:
    return name.lstrip("\ufeff").strip().lower()
