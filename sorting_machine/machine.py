from collections import Counter
from enum import Enum
from functools import cmp_to_key
from typing import Generic, Iterable, Iterator, TypeVar
from loguru import logger

from .config import DEFAULT_STRATEGY, Strategy
from .errors import EmptyContainerError, IllegalStateError
from .heap import HeapStore
from .order import Comparator

T = TypeVar("T")


class Mode(Enum):
    INSERTION = "insertion mode"
    EXTRACTION = "extraction mode"

    def __str__(self) -> str:
        return self.value


def order_name(order: Comparator) -> str:
    return getattr(order, "__name__", None) or repr(order)


def _match_run(left: list, right: list) -> bool:
    try:
        return Counter(left) == Counter(right)
    except TypeError:
        pass
    # unhashable elements, match pairwise with ==
    rest = list(right)
    for item in left:
        for i, candidate in enumerate(rest):
            if candidate == item:
                del rest[i]
                break
        else:
            return False
    return True


def same_multiset(a: Iterable[T], b: Iterable[T], order: Comparator) -> bool:
    """
    True if `a` and `b` hold the same elements with the same counts.

    Both sides are sorted under `order`; each run of equal-ranked elements
    is then matched with `==`, so distinct elements that tie under `order`
    are not confused with each other.
    """
    key = cmp_to_key(order)
    left = sorted(a, key=key)
    right = sorted(b, key=key)
    if len(left) != len(right):
        return False
    start = 0
    while start < len(left):
        end = start + 1
        while end < len(left) and order(left[start], left[end]) == 0:
            end += 1
        if not _match_run(left[start:end], right[start:end]):
            return False
        start = end
    return True


class SortingMachine(Generic[T]):
    """
    Two-phase ordered container.

    Elements are added in any order while the machine is in insertion mode.
    After `change_to_extraction_mode` they can only be taken out one at a
    time with `remove_first`, smallest first under `order`. Equal-ranked
    elements come out in no particular order.
    """

    def __init__(self, order: Comparator, strategy: Strategy | None = None):
        self._order = order
        self._strategy = strategy if strategy is not None else DEFAULT_STRATEGY
        self._mode = Mode.INSERTION
        self._store: HeapStore[T] = HeapStore(order)

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @property
    def mode(self) -> Mode:
        return self._mode

    def _require(self, mode: Mode, operation: str):
        if self._mode is not mode:
            logger.debug(f"{operation} called in {self._mode}")
            raise IllegalStateError(operation, self._mode)

    def add(self, item: T):
        self._require(Mode.INSERTION, "add")
        if self._strategy is Strategy.INCREMENTAL:
            self._store.insert(item)
        else:
            self._store.append(item)

    def change_to_extraction_mode(self):
        self._require(Mode.INSERTION, "change_to_extraction_mode")
        if self._strategy is Strategy.DEFERRED:
            self._store.heapify()
        if __debug__:
            assert self._store.is_heap(), "heap order broken at mode change"
        self._mode = Mode.EXTRACTION
        logger.debug(f"changed to {self._mode}, size = {len(self._store)}, strategy = {self._strategy.value}")

    def remove_first(self) -> T:
        self._require(Mode.EXTRACTION, "remove_first")
        if not self._store:
            raise EmptyContainerError("remove from an empty sorting machine")
        return self._store.extract_min()

    def drain(self) -> Iterator[T]:
        self._require(Mode.EXTRACTION, "drain")

        def remaining():
            while self._store:
                yield self._store.extract_min()

        return remaining()

    def size(self) -> int:
        return len(self._store)

    def is_in_insertion_mode(self) -> bool:
        return self._mode is Mode.INSERTION

    def order(self) -> Comparator:
        return self._order

    def clear(self):
        self._store.clear()
        self._mode = Mode.INSERTION

    def new_instance(self) -> "SortingMachine[T]":
        return SortingMachine(self._order, self._strategy)

    def transfer_from(self, source: "SortingMachine[T]"):
        if source is self:
            raise ValueError("cannot transfer from self")
        if source.order() != self._order:
            raise ValueError(f"order mismatch: {order_name(source.order())} != {order_name(self._order)}")
        self._store, self._mode = source._store, source._mode
        if self._mode is Mode.INSERTION and self._strategy is Strategy.INCREMENTAL:
            self._store.heapify()
        source._store = HeapStore(source.order())
        source._mode = Mode.INSERTION

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._store))

    def __eq__(self, other) -> bool:
        try:
            mode, order, size = other.is_in_insertion_mode(), other.order(), other.size()
        except AttributeError:
            return NotImplemented
        return (
            mode == self.is_in_insertion_mode()
            and order == self._order
            and size == self.size()
            and same_multiset(self, other, self._order)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(repr(item) for item in sorted(self, key=cmp_to_key(self._order)))
        return f"({self.is_in_insertion_mode()}, {order_name(self._order)}, {{{items}}})"

    __str__ = __repr__


def sort(items: Iterable[T], order: Comparator) -> list[T]:
    machine: SortingMachine[T] = SortingMachine(order)
    for item in items:
        machine.add(item)
    machine.change_to_extraction_mode()
    return list(machine.drain())
