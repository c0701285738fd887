"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.memory_repository import InMemoryContactRepository
from contactbook.infrastructure.persistence.json_repository import (
    JsonFileContactRepository,
)

__all__ = [
    "InMemoryContactRepository",
    "JsonFileContactRepository",
]
