"""HTTP read API for account lookups."""

from account_intake.api.app import create_app

__all__ = ["create_app"]
