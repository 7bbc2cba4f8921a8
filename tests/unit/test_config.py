import logging
import uuid

import pytest
from pydantic import ValidationError

from persistence_lib.config import StoreConfig, create_store, load_config
from persistence_lib.logging_config import configure_logging
from persistence_lib.storage.appdata_backend import AppDataRepositoryBackend
from persistence_lib.storage.file_backend import FileStorageBackend
from persistence_lib.storage.memory_backend import MemoryStorage
from persistence_lib.storage.serializer import YAMLSerializer
from persistence_lib.storage.temp_backend import TempStorageBackend


def test_defaults_build_memory_store():
    store = create_store()
    assert isinstance(store.backend, MemoryStorage)
    assert store.key_type is str


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "absent.yml") == StoreConfig()


def test_load_from_yaml(tmp_path):
    cfg_file = tmp_path / "persistence.yml"
    cfg_file.write_text(
        "backend: filesystem\n"
        f"base_directory: {tmp_path / 'data'}\n"
        "serializer: yaml\n"
        "key_type: uuid\n"
    )
    cfg = load_config(cfg_file)
    store = create_store(cfg)
    assert isinstance(store.backend, FileStorageBackend)
    assert isinstance(store.serializer, YAMLSerializer)
    assert store.backend.extension == ".yml"
    assert store.key_type is uuid.UUID


def test_non_mapping_yaml_rejected(tmp_path):
    cfg_file = tmp_path / "persistence.yml"
    cfg_file.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(cfg_file)


def test_unknown_backend_rejected():
    with pytest.raises(ValidationError):
        StoreConfig(backend="s3")
    with pytest.raises(ValidationError):
        create_store(backend="s3")


def test_filesystem_requires_base_directory():
    with pytest.raises(ValueError):
        create_store(backend="filesystem")


def test_overrides_select_backends(tmp_path):
    temp = create_store(backend="temp", temp_label="Cfg", root_directory=str(tmp_path))
    assert isinstance(temp.backend, TempStorageBackend)
    assert temp.backend.base_directory.parent == tmp_path / "Cfg"

    repo = create_store(backend="appdata_repository", application_name="App", root_directory=str(tmp_path))
    assert isinstance(repo.backend, AppDataRepositoryBackend)
    assert repo.supports_enumeration is False

    with pytest.raises(ValueError):
        create_store(backend="appdata", root_directory=str(tmp_path))


def test_configure_logging_reads_level(tmp_path):
    cfg_file = tmp_path / "persistence.yml"
    cfg_file.write_text("log_level: debug\n")
    root = logging.getLogger()
    old_level, old_handlers = root.level, root.handlers[:]
    try:
        configure_logging(cfg_file)
        assert root.level == logging.DEBUG
        cfg_file.write_text("log_level: nonsense\n")
        configure_logging(cfg_file)
        assert root.level == logging.WARNING
    finally:
        for h in root.handlers[:]:
            root.removeHandler(h)
        for h in old_handlers:
            root.addHandler(h)
        root.setLevel(old_level)
