"""Uniform key-value persistence on top of any StorageBackend.

`PersistenceStore` is the single implementation of the store contract. The
backend decides where text lives; the store owns key encoding,
serialization, cancellation checks and error wrapping.

Cancellation: every operation takes an optional `cancel` object exposing
``is_set()`` (``threading.Event``, ``asyncio.Event``). A set signal raises
``asyncio.CancelledError`` before I/O starts and between the steps of a
write. Cancellation is never wrapped in :class:`PersistenceError`.
"""
from __future__ import annotations
import asyncio
import functools
import logging
from typing import Any, Callable, List, Optional, Protocol, Type, TypeVar

from persistence_lib.errors import PersistenceError
from .base import StorageBackend
from .codec import KeyCodec
from .serializer import JSONSerializer, Serializer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CancelSignal(Protocol):
    def is_set(self) -> bool: ...


def check_cancelled(cancel: Optional[CancelSignal]) -> None:
    if cancel is not None and cancel.is_set():
        raise asyncio.CancelledError()


class PersistenceStore:
    """Store, retrieve and enumerate serializable objects by key.

    Parameters
    - backend: where serialized text is kept
    - serializer: value <-> text conversion (JSON by default)
    - key_type: type that `list_keys` decodes stored tokens into
    """

    def __init__(
        self,
        backend: StorageBackend,
        serializer: Optional[Serializer] = None,
        key_type: Type[Any] = str,
    ) -> None:
        if backend is None:
            raise ValueError("backend is required")
        self.backend = backend
        self.serializer = serializer or JSONSerializer()
        self.codec = KeyCodec(key_type)

    @property
    def provider_name(self) -> str:
        return self.backend.provider_name

    @property
    def is_persistent(self) -> bool:
        return self.backend.is_persistent

    @property
    def supports_enumeration(self) -> bool:
        return self.backend.supports_enumeration

    @property
    def key_type(self) -> Type[Any]:
        return self.codec.key_type

    async def _call(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        if self.backend.blocking_io:
            return await asyncio.to_thread(functools.partial(fn, *args, **kwargs))
        return fn(*args, **kwargs)

    def _error(self, operation: str, key: Any, cause: BaseException) -> PersistenceError:
        return PersistenceError(operation, key, cause, provider=self.provider_name)

    @staticmethod
    def _require_key(key: Any) -> None:
        if key is None:
            raise ValueError("key must not be None")

    async def store(self, key: Any, value: Any, *, cancel: Optional[CancelSignal] = None) -> None:
        """Persist `value` under `key`. Storing None removes the key."""
        self._require_key(key)
        if value is None:
            await self.remove(key, cancel=cancel)
            return
        check_cancelled(cancel)

        name = self.codec.encode(key)
        try:
            text = self.serializer.dump(value)
            check_cancelled(cancel)
            await self._call(self.backend.ensure_namespace)
            check_cancelled(cancel)
            await self._call(self.backend.write_text, name, text, functools.partial(check_cancelled, cancel))
        except Exception as e:
            raise self._error("store", key, e) from e
        logger.debug("%s: stored %r", self.provider_name, key)

    async def retrieve(self, key: Any, target: Optional[Type[T]] = None, *,
                       cancel: Optional[CancelSignal] = None) -> Optional[T]:
        """Return the value stored under `key`, rebuilt as `target`, or None."""
        self._require_key(key)
        check_cancelled(cancel)

        name = self.codec.encode(key)
        try:
            text = await self._call(self.backend.read_text, name)
            if not text:
                return None
            check_cancelled(cancel)
            return self.serializer.load(text, target)
        except Exception as e:
            raise self._error("retrieve", key, e) from e

    async def retrieve_or_create(self, key: Any, target: Type[T], *,
                                 factory: Optional[Callable[[], T]] = None,
                                 cancel: Optional[CancelSignal] = None) -> T:
        """Like :meth:`retrieve` but returns a fresh default when absent.

        The default comes from `factory` (or `target()`) and is not stored.
        """
        value = await self.retrieve(key, target, cancel=cancel)
        if value is not None:
            return value
        try:
            return factory() if factory is not None else target()
        except Exception as e:
            raise self._error("create default for", key, e) from e

    async def exists(self, key: Any, *, cancel: Optional[CancelSignal] = None) -> bool:
        self._require_key(key)
        check_cancelled(cancel)
        try:
            return await self._call(self.backend.exists, self.codec.encode(key))
        except Exception as e:
            raise self._error("check existence of", key, e) from e

    async def remove(self, key: Any, *, cancel: Optional[CancelSignal] = None) -> bool:
        """Delete `key`. Returns False if nothing was stored."""
        self._require_key(key)
        check_cancelled(cancel)
        try:
            removed = await self._call(self.backend.delete_text, self.codec.encode(key))
        except Exception as e:
            raise self._error("remove", key, e) from e
        if removed:
            logger.debug("%s: removed %r", self.provider_name, key)
        return removed

    async def list_keys(self, *, cancel: Optional[CancelSignal] = None) -> List[Any]:
        """Return every stored key decoded to `key_type`.

        Tokens that do not decode are skipped. The result is a snapshot.
        """
        check_cancelled(cancel)
        if not self.supports_enumeration:
            logger.debug("%s: enumeration unsupported, returning no keys", self.provider_name)
            return []
        try:
            if not await self._call(self.backend.namespace_exists):
                return []
            names = await self._call(self.backend.list_names)
        except Exception as e:
            raise self._error("list keys", None, e) from e

        keys = []
        for name in names:
            if not name:
                continue
            key = self.codec.decode(name)
            if key is None:
                logger.debug("%s: skipping entry %r, not a valid %s", self.provider_name, name,
                             getattr(self.key_type, "__name__", self.key_type))
                continue
            keys.append(key)
        return keys

    async def clear(self, *, cancel: Optional[CancelSignal] = None) -> None:
        """Delete every entry; the namespace itself is kept."""
        check_cancelled(cancel)
        if not self.supports_enumeration:
            logger.debug("%s: clear unsupported, nothing removed", self.provider_name)
            return
        try:
            if not await self._call(self.backend.namespace_exists):
                return
            names = await self._call(self.backend.list_names)
            for name in names:
                check_cancelled(cancel)
                await self._call(self.backend.delete_text, name)
        except Exception as e:
            raise self._error("clear all objects", None, e) from e
        logger.debug("%s: cleared %d entries", self.provider_name, len(names))

    def close(self) -> None:
        self.backend.close()

    def __enter__(self) -> "PersistenceStore":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    async def __aenter__(self) -> "PersistenceStore":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self.close()

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"PersistenceStore(provider={self.provider_name!r}, key_type={self.key_type.__name__})"
