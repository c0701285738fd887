"""Contact list, get, add, update and delete over a ContactRepository.

Every call is one load-mutate-save cycle. Mutations are serialized through a
single lock so concurrent writers cannot overwrite each other's changes.
"""

import logging
import threading

from contactbook.application.dto import (
    Deleted,
    Invalid,
    NotFound,
    ReadFailed,
    WriteFailed,
)
from contactbook.application.ports import ContactRepository, StorageReadError
from contactbook.domain import Contact

logger = logging.getLogger(__name__)


class ContactService:
    """CRUD use cases for the contacts directory. Holds no state between calls besides the write lock."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository
        self._write_lock = threading.Lock()

    def _load(self) -> list[Contact] | ReadFailed:
        try:
            return self._repo.load()
        except StorageReadError as e:
            logger.error("Contacts could not be loaded: %s", e)
            return ReadFailed(reason=str(e))

    def list_contacts(self) -> list[Contact] | ReadFailed:
        """Return all contacts in insertion order."""
        return self._load()

    def get_contact(self, contact_id: str) -> Contact | NotFound | ReadFailed:
        contacts = self._load()
        if isinstance(contacts, ReadFailed):
            return contacts
        for contact in contacts:
            if contact.id == contact_id:
                return contact
        return NotFound(contact_id=contact_id)

    def add_contact(
        self, name: str | None, phone: str | None
    ) -> Contact | Invalid | WriteFailed | ReadFailed:
        """Create a contact with a fresh id and append it to the collection."""
        name_clean = (name or "").strip()
        phone_clean = (phone or "").strip()
        if not name_clean or not phone_clean:
            return Invalid(reason="Name and phone are required.")

        contact = Contact(name=name_clean, phone=phone_clean)
        with self._write_lock:
            contacts = self._load()
            if isinstance(contacts, ReadFailed):
                return contacts
            contacts.append(contact)
            if not self._repo.save(contacts):
                return WriteFailed()
        logger.info("Contact %s created", contact.id)
        return contact

    def update_contact(
        self, contact_id: str | None, name: str | None, phone: str | None
    ) -> Contact | Invalid | NotFound | WriteFailed | ReadFailed:
        """Replace name and phone of an existing contact. Id and position are kept."""
        contact_id = (contact_id or "").strip()
        name_clean = (name or "").strip()
        phone_clean = (phone or "").strip()
        if not contact_id or not name_clean or not phone_clean:
            return Invalid(reason="Id, name and phone are required.")

        with self._write_lock:
            contacts = self._load()
            if isinstance(contacts, ReadFailed):
                return contacts
            index = next(
                (i for i, c in enumerate(contacts) if c.id == contact_id), None
            )
            if index is None:
                return NotFound(contact_id=contact_id)
            updated = Contact(id=contact_id, name=name_clean, phone=phone_clean)
            contacts[index] = updated
            if not self._repo.save(contacts):
                return WriteFailed()
        logger.info("Contact %s updated", contact_id)
        return updated

    def delete_contact(
        self, contact_id: str | None
    ) -> Deleted | Invalid | NotFound | WriteFailed | ReadFailed:
        contact_id = (contact_id or "").strip()
        if not contact_id:
            return Invalid(reason="Id is required.")

        with self._write_lock:
            contacts = self._load()
            if isinstance(contacts, ReadFailed):
                return contacts
            remaining = [c for c in contacts if c.id != contact_id]
            if len(remaining) == len(contacts):
                return NotFound(contact_id=contact_id)
            if not self._repo.save(remaining):
                return WriteFailed()
        logger.info("Contact %s deleted", contact_id)
        return Deleted(contact_id=contact_id)
