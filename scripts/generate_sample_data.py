#!/usr/bin/env python3
"""Generate a sample account inventory CSV.

The file exercises the ingestion run: by default it contains repeated
account numbers, malformed rows and rows with blank optional fields.

Usage::

    python scripts/generate_sample_data.py --rows 500 --output atlas_inventory.csv
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from account_intake.generators import InventoryGenerator, write_csv


def main() -> None:
    """Generate the sample file."""
    parser = argparse.ArgumentParser(description="Generate a sample account inventory CSV")
    parser.add_argument("--rows", type=int, default=200, help="Number of rows")
    parser.add_argument("--output", type=Path, default=Path("atlas_inventory.csv"))
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--duplicate-rate", type=float, default=0.05)
    parser.add_argument("--invalid-rate", type=float, default=0.02)
    parser.add_argument("--sparse-rate", type=float, default=0.10)
    args = parser.parse_args()

    generator = InventoryGenerator(
        seed=args.seed,
        duplicate_rate=args.duplicate_rate,
        invalid_rate=args.invalid_rate,
        sparse_rate=args.sparse_rate,
    )

    print("=" * 60)
    print("Generating Sample Account Inventory")
    print("=" * 60)

    count = write_csv(args.output, generator.generate_batch(args.rows))

    print(f"Saved {count} rows to {args.output}")
    print(f"  Repeated account numbers: {generator.injected['duplicates']}")
    print(f"  Malformed rows:           {generator.injected['invalid']}")
    print(f"  Sparse rows:              {generator.injected['sparse']}")


if __name__ == "__main__":
    main()
