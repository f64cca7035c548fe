"""A pool that hands out recycled objects before building new ones."""

from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")


class Factory(Generic[T]):
    """Builds objects with ``kind(x, y, *args)`` or reuses removed ones.

    A reused object is repositioned with its ``reset(x, y)`` method.
    """

    def __init__(self, kind: Callable[..., T]) -> None:
        self._kind = kind
        self._buffer: List[T] = []

    def create(self, x, y, *args) -> T:
        x, y = float(x), float(y)
        if self._buffer:
            obj = self._buffer.pop()
            obj.reset(x, y)
            return obj
        return self._kind(x, y, *args)

    def remove(self, obj: T) -> None:
        """Give an object back to the pool for later reuse."""
        self._buffer.append(obj)