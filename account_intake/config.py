"""Configuration management for account-intake."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from account_intake.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class StoreConfig:
    """Account store configuration.

    ``flush_on_write`` selects the durability policy: ``False`` writes the
    database image once at the end of each ingestion run, ``True`` writes it
    after every upsert.
    """

    db_path: Path = field(default_factory=lambda: Path("accounts.db"))
    flush_on_write: bool = False


@dataclass
class IngestConfig:
    """Startup ingestion configuration."""

    csv_path: Path = field(default_factory=lambda: Path("atlas_inventory.csv"))
    auto_ingest: bool = True


@dataclass
class ServerConfig:
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3000


@dataclass
class AppConfig:
    """Main configuration for account-intake."""

    store: StoreConfig = field(default_factory=StoreConfig)
    ingest: IngestConfig = field(default_factory=IngestConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        store = StoreConfig(
            db_path=Path(os.getenv("ACCOUNT_DB_PATH", "accounts.db")),
            flush_on_write=_env_bool("FLUSH_ON_WRITE", False),
        )

        ingest = IngestConfig(
            csv_path=Path(os.getenv("CSV_PATH", "atlas_inventory.csv")),
            auto_ingest=_env_bool("AUTO_INGEST", True),
        )

        server = ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", 3000),
        )

        return cls(
            store=store,
            ingest=ingest,
            server=server,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid {name}: {raw!r} is not an integer") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid {name}: {raw!r} is not a boolean")
