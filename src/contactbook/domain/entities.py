"""Domain entities: Contact."""

import uuid
from dataclasses import dataclass, field


def new_contact_id() -> str:
    """Return a fresh contact id. Random UUID4, never reused."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Contact:
    """
    A single entry of the contacts directory.
    Name and phone are stored trimmed; neither may be empty. The id is
    assigned at creation and never changes.
    """

    id: str = field(default_factory=new_contact_id)
    name: str = field(default="")
    phone: str = field(default="")

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("Contact id must be a non-empty string.")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Contact name must be non-empty.")
        if not isinstance(self.phone, str) or not self.phone.strip():
            raise ValueError("Contact phone must be non-empty.")
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "phone", self.phone.strip())

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "phone": self.phone}

    @classmethod
    def from_dict(cls, raw: object) -> "Contact":
        """Build a Contact from its stored form. Raises ValueError if malformed."""
        if not isinstance(raw, dict):
            raise ValueError("Contact record must be an object.")
        return cls(id=raw.get("id"), name=raw.get("name"), phone=raw.get("phone"))
