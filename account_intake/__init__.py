"""Account inventory ingestion and lookup service."""

__version__ = "0.1.0"
