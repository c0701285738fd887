"""JSON file implementation of ContactRepository.
The whole collection lives in one file as a JSON array of {id, name, phone} objects.
Writes go to a temporary file in the same directory and are swapped in with os.replace.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from contactbook.application.ports import StorageReadError
from contactbook.domain import Contact

logger = logging.getLogger(__name__)


def _parse_contacts(raw: str) -> list[Contact]:
    """Decode the stored array. Raises ValueError if it is not a valid collection."""
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("Stored contacts must be a JSON array.")
    contacts = [Contact.from_dict(item) for item in data]
    ids = {c.id for c in contacts}
    if len(ids) != len(contacts):
        raise ValueError("Stored contacts contain duplicate ids.")
    return contacts


class JsonFileContactRepository:
    """Stores the contact collection in a single JSON file.

    A missing file is an empty collection. A corrupt or unreadable file is
    also treated as empty unless strict_reads is set, in which case load()
    raises StorageReadError.
    """

    def __init__(self, path: str | Path, *, strict_reads: bool = False) -> None:
        self._path = Path(path)
        self._strict_reads = strict_reads

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_parent(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> list[Contact]:
        try:
            self._ensure_parent()
            if not self._path.exists():
                return []
            raw = self._path.read_bytes()
        except OSError as e:
            logger.error("Failed to read %s: %s", self._path, e)
            if self._strict_reads:
                raise StorageReadError(f"Cannot read {self._path}: {e}") from e
            return []
        try:
            return _parse_contacts(raw.decode("utf-8"))
        except (ValueError, RecursionError) as e:
            # UnicodeDecodeError and json.JSONDecodeError are ValueErrors; deep nesting recurses.
            logger.warning("Ignoring corrupt contacts file %s: %s", self._path, e)
            if self._strict_reads:
                raise StorageReadError(f"Corrupt contacts file {self._path}: {e}") from e
            return []

    def save(self, contacts: list[Contact]) -> bool:
        payload = json.dumps(
            [c.to_dict() for c in contacts], indent=2, ensure_ascii=False
        )
        tmp_name = None
        try:
            self._ensure_parent()
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
            return True
        except OSError as e:
            logger.error("Failed to write %s: %s", self._path, e)
            return False
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_name)
