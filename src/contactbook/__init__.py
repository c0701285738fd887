"""
Contactbook core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), result DTOs.
- infrastructure: adapters (InMemoryContactRepository, JsonFileContactRepository).
"""

from contactbook.application import (
    ContactRepository,
    ContactService,
    Deleted,
    Invalid,
    NotFound,
    ReadFailed,
    StorageReadError,
    WriteFailed,
)
from contactbook.domain import Contact
from contactbook.infrastructure import (
    InMemoryContactRepository,
    JsonFileContactRepository,
)

__all__ = [
    "Contact",
    "ContactRepository",
    "ContactService",
    "Deleted",
    "InMemoryContactRepository",
    "Invalid",
    "JsonFileContactRepository",
    "NotFound",
    "ReadFailed",
    "StorageReadError",
    "WriteFailed",
]
