from typing import Any, Callable, List, Optional, Protocol, Type, runtime_checkable


@runtime_checkable
class PersistenceProtocol(Protocol):
    """Store contract mirroring `persistence_lib.storage.store.PersistenceStore`.

    Host code should depend on this Protocol rather than on a concrete
    backend so memory, file system, app-data and temp stores stay
    interchangeable.
    """

    provider_name: str
    is_persistent: bool

    async def store(self, key: Any, value: Any, *, cancel: Any = None) -> None: ...

    async def retrieve(self, key: Any, target: Optional[Type[Any]] = None, *, cancel: Any = None) -> Any: ...

    async def retrieve_or_create(self, key: Any, target: Type[Any], *,
                                 factory: Optional[Callable[[], Any]] = None, cancel: Any = None) -> Any: ...

    async def exists(self, key: Any, *, cancel: Any = None) -> bool: ...

    async def remove(self, key: Any, *, cancel: Any = None) -> bool: ...

    async def list_keys(self, *, cancel: Any = None) -> List[Any]: ...

    async def clear(self, *, cancel: Any = None) -> None: ...
