"""Durable account storage."""

from account_intake.store.accounts import AccountStore

__all__ = ["AccountStore"]
