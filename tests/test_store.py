from __future__ import annotations

import pytest

from briefcase_kv.store import EntryStore, InvalidEntryNameError, validate_entry_name


def test_store_roundtrip_and_overwrite(tmp_path) -> None:
    store = EntryStore(tmp_path / "briefcase")
    assert not store.exists

    store.set("token", "first value")
    store.set("token", "second")

    assert store.exists
    assert store.get("token") == b"second"
    assert (tmp_path / "briefcase" / "token").read_bytes() == b"second"


def test_store_keeps_raw_bytes(tmp_path) -> None:
    store = EntryStore(tmp_path / "briefcase")
    payload = b"\x00\xffline one\nline two\n"

    store.set("blob", payload)

    assert store.get("blob") == payload


def test_store_missing_directory_is_empty(tmp_path) -> None:
    store = EntryStore(tmp_path / "missing")

    assert store.list_entries() == []
    assert store.count() == 0
    with pytest.raises(FileNotFoundError):
        store.get("anything")
    with pytest.raises(FileNotFoundError):
        store.remove("anything")
    assert not store.exists


def test_store_list_remove_purge(tmp_path) -> None:
    store = EntryStore(tmp_path / "briefcase")
    for name in ("MyVar3", "MyVar", "MyVar2"):
        store.set(name, f"data-{name}")

    assert store.list_entries() == ["MyVar", "MyVar2", "MyVar3"]

    store.remove("MyVar2")
    assert store.list_entries() == ["MyVar", "MyVar3"]

    assert store.purge() is True
    assert not store.directory.exists()
    assert store.list_entries() == []
    assert store.purge() is False


@pytest.mark.parametrize("name", ["", ".", "..", "../escape", "a/b", "nul\x00byte"])
def test_invalid_entry_names_are_rejected(tmp_path, name) -> None:
    store = EntryStore(tmp_path / "briefcase")

    with pytest.raises(InvalidEntryNameError):
        store.set(name, "value")
    assert not (tmp_path / "escape").exists()


def test_validate_entry_name_accepts_plain_names() -> None:
    assert validate_entry_name("db.password-2") == "db.password-2"
