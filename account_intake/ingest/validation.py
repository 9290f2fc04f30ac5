"""Row validation for account inventory files."""

import math
import re
from collections.abc import Mapping
from decimal import Decimal

from account_intake.models import OPTIONAL_TEXT_FIELDS, AccountRecord, ValidationResult

# Plain decimal literal: optional sign, digits with optional fraction, optional exponent.
# The value must also fit a double, since the API renders balances as JSON numbers.
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


def validate_row(row: Mapping[str, str | None], row_number: int) -> ValidationResult:
    """Validate one raw input row and normalize it into an ``AccountRecord``.

    Parameters
    ----------
    row : Mapping[str, str | None]
        Column name to raw cell text. Missing cells may be ``None``.
    row_number : int
        1-based line number of the row in the source file, used in messages.

    Returns
    -------
    ValidationResult
        The normalized record, or the defects that rejected the row.
    """
    account_number = _clean(row.get("account_number"))
    if account_number is None:
        return ValidationResult.reject(
            f"Row {row_number}: Missing required field 'account_number'"
        )

    raw_balance = row.get("balance")
    balance_text = _clean(raw_balance)
    if balance_text is None:
        balance = Decimal("0")
    elif _DECIMAL_RE.match(balance_text) and math.isfinite(float(balance_text)):
        balance = Decimal(balance_text)
    else:
        return ValidationResult.reject(
            f"Row {row_number}: Invalid balance '{raw_balance}' - must be numeric"
        )

    optional = {name: _clean(row.get(name)) for name in OPTIONAL_TEXT_FIELDS}
    return ValidationResult.accept(
        AccountRecord(account_number=account_number, balance=balance, **optional)
    )


def _clean(value: str | None) -> str | None:
    """Trim a cell; blank becomes ``None``."""
    if value is None:
        return None
    value = value.strip()
    return value or None
