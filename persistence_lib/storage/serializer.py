from typing import Any, Optional, Protocol
import functools
import json
import yaml
from pydantic import PydanticSchemaGenerationError, TypeAdapter
from pydantic_core import to_jsonable_python


class Serializer(Protocol):
    """Serialize/deserialize Python values to and from text.

    Implementations should be symmetric: `dump` -> str, `load` <- str.
    `file_extension` tells file-backed stores which suffix to use.
    """

    file_extension: str

    def dump(self, value: Any) -> str: ...

    def load(self, data: str, target: Optional[type] = None) -> Any: ...


def _object_state(value: Any) -> Any:
    # Plain objects are stored as their attribute dict.
    try:
        return vars(value)
    except TypeError:
        raise TypeError(f"Object of type {type(value).__name__} is not serializable") from None


def to_plain(value: Any) -> Any:
    """Convert models, dataclasses, UUIDs, datetimes, ... to JSON-compatible data."""
    return to_jsonable_python(value, fallback=_object_state)


@functools.lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def from_plain(data: Any, target: Optional[type]) -> Any:
    """Rebuild `target` from decoded data. Returns `data` as-is when no target."""
    if target is None or target is Any:
        return data
    try:
        adapter = _adapter(target)
    except PydanticSchemaGenerationError:
        # Arbitrary classes: call the constructor with the stored attributes.
        if isinstance(data, dict):
            return target(**data)
        return target(data)
    return adapter.validate_python(data)


class JSONSerializer:
    """Serializer using JSON (text). This is the default."""

    file_extension = ".json"

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = indent

    def dump(self, value: Any) -> str:
        return json.dumps(to_plain(value), indent=self.indent)

    def load(self, data: str, target: Optional[type] = None) -> Any:
        return from_plain(json.loads(data), target)


class YAMLSerializer:
    """Serializer using YAML (text). Caller must ensure values are YAML-serializable."""

    file_extension = ".yml"

    def dump(self, value: Any) -> str:
        return yaml.safe_dump(to_plain(value), sort_keys=False)

    def load(self, data: str, target: Optional[type] = None) -> Any:
        return from_plain(yaml.safe_load(data), target)


def get_serializer(name: str) -> Serializer:
    if name == "json":
        return JSONSerializer()
    if name == "yaml":
        return YAMLSerializer()
    raise ValueError(f"Unknown serializer: {name!r}")
