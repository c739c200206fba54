import pytest

from lldkit.factory_method import (
    DiskStorage,
    MemoryStorage,
    StorageError,
    StorageType,
    new_storage,
)


def test_memory_storage_round_trip():
    store = new_storage(StorageType.MEMORY)
    store.save_data("hello, world!")
    assert store.get_data() == "hello, world!"


def test_memory_storage_starts_empty():
    assert new_storage(StorageType.MEMORY).get_data() == ""


def test_memory_storage_overwrites():
    store = MemoryStorage()
    store.save_data("one")
    store.save_data("two")
    assert store.get_data() == "two"


def test_disk_storage_round_trip(tmp_path):
    store = DiskStorage(tmp_path / "data.txt")
    assert store.get_data() == ""
    store.save_data("hello, world!")
    assert DiskStorage(tmp_path / "data.txt").get_data() == "hello, world!"


def test_factory_disk_storage_round_trip():
    store = new_storage(StorageType.DISK)
    try:
        store.save_data("line one\nline two")
        assert store.get_data() == "line one\nline two"
    finally:
        store.path.unlink()


def test_disk_storage_write_failure_raises(tmp_path):
    store = DiskStorage(tmp_path / "missing" / "data.txt")
    with pytest.raises(StorageError):
        store.save_data("x")


def test_invalid_storage_type():
    with pytest.raises(StorageError, match="invalid storage type, storage type: 5"):
        new_storage(5)