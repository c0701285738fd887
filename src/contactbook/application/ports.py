"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class StorageReadError(Exception):
    """The durable artifact exists but could not be read or parsed."""


class ContactRepository(Protocol):
    """Loads and saves the whole contact collection as one unit."""

    def load(self) -> list[Contact]:
        """Return all contacts in insertion order. Missing storage is an empty list.

        May raise StorageReadError when configured to surface corrupt or
        unreadable storage instead of treating it as empty.
        """
        ...

    def save(self, contacts: list[Contact]) -> bool:
        """Overwrite the stored collection. Returns False if the write failed."""
        ...
