"""Object pools that recycle released objects."""

from __future__ import annotations

from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")


class MemoryPool(Generic[T]):
    """A pool pre-filled with objects; allocation falls back to the factory."""

    def __init__(self, factory: Callable[[], T], capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._factory = factory
        self._free: List[T] = [factory() for _ in range(capacity)]

    @property
    def free_count(self) -> int:
        return len(self._free)

    def allocate(self) -> T:
        """Take the most recently freed object, or make a new one."""
        return self._free.pop() if self._free else self._factory()

    def deallocate(self, obj: T) -> None:
        """Return an object to the pool."""
        self._free.append(obj)


class NodePool(Generic[T]):
    """A pool that starts empty and keeps released nodes for reuse."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._pool: List[T] = []

    def __len__(self) -> int:
        return len(self._pool)

    def acquire(self) -> T:
        """Reuse the last released node, or make a new one."""
        return self._pool.pop() if self._pool else self._factory()

    def release(self, node: T) -> None:
        """Keep a node for later reuse."""
        self._pool.append(node)