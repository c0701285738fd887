"""Result objects returned by ContactService instead of raising."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Invalid:
    """A required field (id, name or phone) was empty after trimming."""

    reason: str


@dataclass(frozen=True)
class NotFound:
    contact_id: str


@dataclass(frozen=True)
class WriteFailed:
    """The durable artifact could not be written; the change did not happen."""

    reason: str = "Could not persist contacts."


@dataclass(frozen=True)
class ReadFailed:
    """Only returned when the repository runs with strict reads."""

    reason: str = "Could not read contacts."


@dataclass(frozen=True)
class Deleted:
    contact_id: str
