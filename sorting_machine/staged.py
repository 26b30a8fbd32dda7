"""
Typed-state handles for the two phases.

An `Inserter` only accepts elements; `finish()` hands its heap over to a
new `Extractor` and retires the inserter, so there is no object on which
`add` after the mode change, or `remove_first` before it, could be called.
A retired inserter raises `IllegalStateError` on any further use.
"""

from typing import Generic, Iterable, Iterator, TypeVar, final
from loguru import logger

from .errors import EmptyContainerError, IllegalStateError
from .heap import HeapStore
from .order import Comparator

T = TypeVar("T")


@final
class Inserter(Generic[T]):
    def __init__(self, order: Comparator):
        self._order = order
        self._store: HeapStore[T] | None = HeapStore(order)

    def _live(self, operation: str) -> HeapStore[T]:
        if self._store is None:
            raise IllegalStateError(f"Inserter.{operation}", "finished inserter")
        return self._store

    def add(self, item: T) -> "Inserter[T]":
        self._live("add").append(item)
        return self

    def extend(self, items: Iterable[T]) -> "Inserter[T]":
        store = self._live("extend")
        for item in items:
            store.append(item)
        return self

    def finish(self) -> "Extractor[T]":
        store = self._live("finish")
        self._store = None
        store.heapify()
        logger.debug(f"inserter finished with {len(store)} elements")
        return Extractor(store)

    def size(self) -> int:
        return len(self._live("size"))

    def order(self) -> Comparator:
        return self._order

    def __len__(self) -> int:
        return self.size()


@final
class Extractor(Generic[T]):
    def __init__(self, store: HeapStore[T]):
        self._store = store

    def remove_first(self) -> T:
        if not self._store:
            raise EmptyContainerError("remove from an empty extractor")
        return self._store.extract_min()

    def peek(self) -> T:
        return self._store.peek()

    def size(self) -> int:
        return len(self._store)

    def order(self) -> Comparator:
        return self._store.order

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[T]:
        while self._store:
            yield self._store.extract_min()
