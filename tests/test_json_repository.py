"""JsonFileContactRepository against a real file under tmp_path."""

import json

import pytest

from contactbook.application import ContactService, StorageReadError
from contactbook.domain import Contact
from contactbook.infrastructure import JsonFileContactRepository


def test_missing_file_loads_empty_and_creates_parent(tmp_path):
    path = tmp_path / "data" / "contacts.json"
    repo = JsonFileContactRepository(path)
    assert repo.load() == []
    assert path.parent.is_dir()
    assert not path.exists()


def test_missing_file_is_not_an_error_in_strict_mode(tmp_path):
    repo = JsonFileContactRepository(tmp_path / "contacts.json", strict_reads=True)
    assert repo.load() == []


def test_save_then_load_preserves_records_and_order(tmp_path):
    path = tmp_path / "contacts.json"
    repo = JsonFileContactRepository(path)
    contacts = [
        Contact(name="Zoë", phone="+44 20 7946 0000"),
        Contact(name="Ann", phone="123"),
        Contact(name="Bob", phone="456"),
    ]
    assert repo.save(contacts) is True
    assert repo.load() == contacts
    assert JsonFileContactRepository(path).load() == contacts


def test_saved_file_is_indented_json_array(tmp_path):
    path = tmp_path / "contacts.json"
    c = Contact(id="1", name="Zoë", phone="9")
    JsonFileContactRepository(path).save([c])
    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == [{"id": "1", "name": "Zoë", "phone": "9"}]
    assert "Zoë" in text
    assert '\n  {' in text


def test_save_empty_collection(tmp_path):
    path = tmp_path / "contacts.json"
    repo = JsonFileContactRepository(path)
    repo.save([Contact(name="Ann", phone="1")])
    assert repo.save([]) is True
    assert json.loads(path.read_text(encoding="utf-8")) == []


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "",
        '{"id": "1", "name": "Ann", "phone": "1"}',
        '[{"id": "1", "name": "Ann"}]',
        '[{"id": "1", "name": "  ", "phone": "1"}]',
        '["Ann"]',
        '[{"id": "1", "name": "Ann", "phone": "1"}, {"id": "1", "name": "Bob", "phone": "2"}]',
    ],
)
def test_corrupt_file_loads_empty(tmp_path, content):
    path = tmp_path / "contacts.json"
    path.write_text(content, encoding="utf-8")
    assert JsonFileContactRepository(path).load() == []


_BAD_BYTES = [
    b'[{"id": "1", "name": "\xff\xfe", "phone": "1"}]',
    b"\x80\x81 not utf-8",
    b"[" * 100000 + b"]" * 100000,
]


@pytest.mark.parametrize("content", _BAD_BYTES)
def test_undecodable_or_deeply_nested_file_loads_empty(tmp_path, content):
    path = tmp_path / "contacts.json"
    path.write_bytes(content)
    assert JsonFileContactRepository(path).load() == []


@pytest.mark.parametrize("content", _BAD_BYTES)
def test_undecodable_or_deeply_nested_file_raises_in_strict_mode(tmp_path, content):
    path = tmp_path / "contacts.json"
    path.write_bytes(content)
    with pytest.raises(StorageReadError):
        JsonFileContactRepository(path, strict_reads=True).load()


def test_path_property_reports_artifact_location(tmp_path):
    path = tmp_path / "contacts.json"
    assert JsonFileContactRepository(str(path)).path == path


def test_corrupt_file_raises_in_strict_mode(tmp_path):
    path = tmp_path / "contacts.json"
    path.write_text("{broken", encoding="utf-8")
    with pytest.raises(StorageReadError):
        JsonFileContactRepository(path, strict_reads=True).load()


def test_unreadable_file_loads_empty_or_raises_in_strict_mode(tmp_path):
    # A directory where the file should be cannot be read as text.
    path = tmp_path / "contacts.json"
    path.mkdir()
    assert JsonFileContactRepository(path).load() == []
    with pytest.raises(StorageReadError):
        JsonFileContactRepository(path, strict_reads=True).load()


def test_failed_save_returns_false_and_leaves_no_temp_file(tmp_path):
    path = tmp_path / "contacts.json"
    path.mkdir()
    repo = JsonFileContactRepository(path)
    assert repo.save([Contact(name="Ann", phone="1")]) is False
    assert sorted(p.name for p in tmp_path.iterdir()) == ["contacts.json"]


def test_successful_save_leaves_only_the_artifact(tmp_path):
    path = tmp_path / "contacts.json"
    repo = JsonFileContactRepository(path)
    repo.save([Contact(name="Ann", phone="1")])
    repo.save([Contact(name="Bob", phone="2")])
    assert [p.name for p in tmp_path.iterdir()] == ["contacts.json"]


def test_service_over_file_survives_restart(tmp_path):
    path = tmp_path / "contacts.json"
    service = ContactService(JsonFileContactRepository(path))
    ann = service.add_contact("Ann", "1")
    bob = service.add_contact("Bob", "2")
    service.update_contact(ann.id, "Ann B", "11")
    service.delete_contact(bob.id)

    reopened = ContactService(JsonFileContactRepository(path))
    assert reopened.list_contacts() == [Contact(id=ann.id, name="Ann B", phone="11")]


def test_add_after_corrupt_file_starts_fresh(tmp_path):
    path = tmp_path / "contacts.json"
    path.write_text("garbage", encoding="utf-8")
    service = ContactService(JsonFileContactRepository(path))
    created = service.add_contact("Ann", "1")
    assert service.list_contacts() == [created]
