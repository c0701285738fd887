"""Contact entity validation."""

import uuid

import pytest

from contactbook.domain import Contact


def test_contact_trims_and_assigns_uuid() -> None:
    c = Contact(name="  Ann ", phone=" 123 ")
    assert c.name == "Ann"
    assert c.phone == "123"
    uuid.UUID(c.id)


def test_default_ids_differ() -> None:
    assert Contact(name="A", phone="1").id != Contact(name="A", phone="1").id


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "phone": "1"},
        {"name": "   ", "phone": "1"},
        {"name": "Ann", "phone": ""},
        {"name": "Ann", "phone": None},
        {"id": "", "name": "Ann", "phone": "1"},
    ],
)
def test_contact_rejects_empty_fields(kwargs) -> None:
    with pytest.raises(ValueError):
        Contact(**kwargs)


def test_from_dict_and_to_dict() -> None:
    c = Contact.from_dict({"id": "abc", "name": "Ann", "phone": "123"})
    assert c == Contact(id="abc", name="Ann", phone="123")
    assert c.to_dict() == {"id": "abc", "name": "Ann", "phone": "123"}


def test_from_dict_rejects_non_objects_and_missing_keys() -> None:
    with pytest.raises(ValueError):
        Contact.from_dict(["abc", "Ann", "123"])
    with pytest.raises(ValueError):
        Contact.from_dict({"id": "abc", "name": "Ann"})
    with pytest.raises(ValueError):
        Contact.from_dict({"id": 7, "name": "Ann", "phone": "1"})
