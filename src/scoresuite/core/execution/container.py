"""
Shared key-value storage handed to every test case during a suite run.
"""

from typing import Any, Iterator, Protocol, runtime_checkable


@runtime_checkable
class Container(Protocol):
    """Interface for the context passed to ``TestCase.run``."""

    def has(self, key: str) -> bool: ...

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def forget(self, key: str) -> None: ...


class InMemoryContainer:
    """Default dictionary backed container."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._storage: dict[str, Any] = dict(initial or {})

    def has(self, key: str) -> bool:
        return key in self._storage

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key`` or ``default``.

        A stored ``None`` and a missing key both come back as ``None`` with the
        default argument; use :meth:`has` to tell them apart.
        """
        return self._storage.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._storage[key] = value

    def forget(self, key: str) -> None:
        self._storage.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._storage)

    def __contains__(self, key: object) -> bool:
        return key in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(keys={self.keys()!r})"
