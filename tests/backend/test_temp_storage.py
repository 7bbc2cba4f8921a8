import asyncio
import re
import tempfile
from pathlib import Path

from persistence_lib import PersistenceStore
from persistence_lib.storage import temp_backend
from persistence_lib.storage.temp_backend import TempStorageBackend


def test_directory_layout_with_label(tmp_path):
    backend = TempStorageBackend("App", temp_root=tmp_path)
    d = backend.base_directory
    assert d.is_dir()
    assert d.parent == tmp_path / "App"
    assert re.fullmatch(r"[0-9a-f]{8}", d.name)


def test_default_label_and_system_temp_root():
    backend = TempStorageBackend()
    try:
        assert backend.base_directory.parent == Path(tempfile.gettempdir()) / "PersistenceProvider"
    finally:
        backend.cleanup_directory()


def test_each_instance_gets_its_own_directory(tmp_path):
    a = TempStorageBackend("App", temp_root=tmp_path)
    b = TempStorageBackend("App", temp_root=tmp_path)
    assert a.base_directory != b.base_directory


def test_close_keeps_files(tmp_path):
    backend = TempStorageBackend("App", temp_root=tmp_path)
    with PersistenceStore(backend) as store:
        asyncio.run(store.store("k", {"v": 1}))
    assert (backend.base_directory / "k.json").exists()


def test_async_context_manager_keeps_files(tmp_path):
    backend = TempStorageBackend("App", temp_root=tmp_path)

    async def scenario():
        async with PersistenceStore(backend) as store:
            await store.store("k", 1)

    asyncio.run(scenario())
    assert (backend.base_directory / "k.json").exists()


def test_cleanup_removes_directory_and_exists_reports_false(tmp_path):
    backend = TempStorageBackend("App", temp_root=tmp_path)
    store = PersistenceStore(backend)
    asyncio.run(store.store("k", 1))

    backend.cleanup_directory()
    assert not backend.base_directory.exists()
    assert asyncio.run(store.exists("k")) is False
    assert asyncio.run(store.list_keys()) == []
    # second cleanup is harmless
    backend.cleanup_directory()


def test_store_after_cleanup_recreates_directory(tmp_path):
    backend = TempStorageBackend("App", temp_root=tmp_path)
    store = PersistenceStore(backend)
    backend.cleanup_directory()
    asyncio.run(store.store("k", 1))
    assert asyncio.run(store.retrieve("k")) == 1


def test_cleanup_swallows_errors(tmp_path, monkeypatch):
    backend = TempStorageBackend("App", temp_root=tmp_path)

    def boom(path):
        raise PermissionError("denied")

    monkeypatch.setattr(temp_backend.shutil, "rmtree", boom)
    backend.cleanup_directory()
    assert backend.base_directory.exists()


def test_provider_properties(tmp_path):
    store = PersistenceStore(TempStorageBackend(temp_root=tmp_path))
    assert store.provider_name == "Temp"
    assert store.is_persistent is False
