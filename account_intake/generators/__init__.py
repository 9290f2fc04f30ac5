"""Synthetic account inventory generation."""

from account_intake.generators.inventory import InventoryGenerator, write_csv

__all__ = ["InventoryGenerator", "write_csv"]
