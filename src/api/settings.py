"""Runtime settings read from environment variables (.env is loaded by api.main)."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PORT = 8780
_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


def default_contacts_file() -> Path:
    return _repo_root() / "data" / "contacts.json"


@dataclass(frozen=True)
class Settings:
    contacts_file: Path
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    strict_reads: bool = False
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from CONTACTS_FILE, CONTACTS_HOST, CONTACTS_PORT, CONTACTS_STRICT_READS and LOG_LEVEL."""
    path = os.environ.get("CONTACTS_FILE", "").strip()
    contacts_file = Path(path).resolve() if path else default_contacts_file()
    port_raw = os.environ.get("CONTACTS_PORT", "").strip()
    try:
        port = int(port_raw) if port_raw else DEFAULT_PORT
    except ValueError as e:
        raise ValueError(f"CONTACTS_PORT must be an integer, got {port_raw!r}") from e
    log_level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if log_level not in _LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {log_level!r}"
        )
    return Settings(
        contacts_file=contacts_file,
        host=os.environ.get("CONTACTS_HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=port,
        strict_reads=os.environ.get("CONTACTS_STRICT_READS", "").strip().lower()
        in _TRUTHY,
        log_level=log_level,
    )
