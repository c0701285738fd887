"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contactbook.domain.entities import Contact, new_contact_id

__all__ = ["Contact", "new_contact_id"]
