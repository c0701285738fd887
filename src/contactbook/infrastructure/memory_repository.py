"""In-memory implementation of ContactRepository (no file)."""

from contactbook.domain import Contact


class InMemoryContactRepository:
    """Keeps the collection in a list. Order preserved by insertion.
    load() hands out a copy so callers mutate it freely until save().
    """

    def __init__(self, contacts: list[Contact] | None = None) -> None:
        self._contacts: list[Contact] = list(contacts or [])

    def load(self) -> list[Contact]:
        return list(self._contacts)

    def save(self, contacts: list[Contact]) -> bool:
        self._contacts = list(contacts)
        return True
