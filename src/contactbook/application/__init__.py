"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contactbook.application.contact_service import ContactService
from contactbook.application.dto import (
    Deleted,
    Invalid,
    NotFound,
    ReadFailed,
    WriteFailed,
)
from contactbook.application.ports import ContactRepository, StorageReadError

__all__ = [
    "ContactRepository",
    "ContactService",
    "Deleted",
    "Invalid",
    "NotFound",
    "ReadFailed",
    "StorageReadError",
    "WriteFailed",
]
