"""Sample account inventory generator."""

import csv
from collections.abc import Iterable, Iterator
from decimal import Decimal
from pathlib import Path

from account_intake.generators.base import BaseGenerator
from account_intake.models import ACCOUNT_COLUMNS, OPTIONAL_TEXT_FIELDS


class InventoryGenerator(BaseGenerator):
    """Generate CSV rows shaped like a client's placed-account inventory.

    Rows are raw text, as they would appear in a file. Optional defect
    injection produces the rows an ingestion run has to cope with:

    - duplicates: an earlier account number repeated with a new balance
    - invalid: a blank account number or a non-numeric balance
    - sparse: some optional fields left blank

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    duplicate_rate : float
        Probability that a row repeats an earlier account number.
    invalid_rate : float
        Probability that a row is malformed.
    sparse_rate : float
        Probability that a row leaves optional fields blank.
    num_clients : int
        Number of distinct creditor clients to spread accounts across.
    """

    STATUSES = ["active", "in_collections", "payment_plan", "disputed", "paid", "closed"]
    STATUS_WEIGHTS = [0.35, 0.30, 0.15, 0.05, 0.10, 0.05]

    INVALID_BALANCES = ["N/A", "abc", "$1,200.00", "12.5.3", "--"]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        duplicate_rate: float = 0.0,
        invalid_rate: float = 0.0,
        sparse_rate: float = 0.0,
        num_clients: int = 5,
    ) -> None:
        super().__init__(seed, locale)
        self.duplicate_rate = duplicate_rate
        self.invalid_rate = invalid_rate
        self.sparse_rate = sparse_rate
        self.clients = [self.fake.company() for _ in range(num_clients)]
        self.injected = {"duplicates": 0, "invalid": 0, "sparse": 0}

    def generate(self, index: int) -> dict[str, str]:
        """Generate one well-formed row with account number ``ACC{index:06d}``."""
        return {
            "account_number": f"ACC{index:06d}",
            "debtor_name": self.fake.name(),
            "phone_number": self.fake.phone_number(),
            "balance": self._balance(),
            "status": self.rng.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
            "client_name": self.rng.choice(self.clients),
        }

    def generate_batch(self, count: int) -> Iterator[dict[str, str]]:
        """Generate ``count`` rows, applying the configured defect rates."""
        emitted: list[dict[str, str]] = []
        next_index = 1

        for _ in range(count):
            if emitted and self.rng.random() < self.duplicate_rate:
                row = dict(self.rng.choice(emitted))
                row["balance"] = self._balance()
                self.injected["duplicates"] += 1
            else:
                row = self.generate(next_index)
                next_index += 1

            if self.rng.random() < self.invalid_rate:
                self._break(row)
                self.injected["invalid"] += 1
            elif self.rng.random() < self.sparse_rate:
                for name in self.rng.sample(OPTIONAL_TEXT_FIELDS, k=2):
                    row[name] = ""
                self.injected["sparse"] += 1
            else:
                emitted.append(row)

            yield row

    def _balance(self) -> str:
        # Skewed like real placements: many small balances, a few large ones.
        balance = Decimal(str(round(self.rng.lognormvariate(7.0, 1.0), 2)))
        return str(balance.quantize(Decimal("0.01")))

    def _break(self, row: dict[str, str]) -> None:
        if self.rng.random() < 0.5:
            row["account_number"] = ""
        else:
            row["balance"] = self.rng.choice(self.INVALID_BALANCES)


def write_csv(path: str | Path, rows: Iterable[dict[str, str]]) -> int:
    """Write rows under the standard account header. Returns the row count."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(ACCOUNT_COLUMNS))
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
            count += 1
    return count
