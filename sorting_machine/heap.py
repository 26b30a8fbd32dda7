from typing import Generic, Iterable, Iterator, TypeVar, final
from loguru import logger

from .errors import EmptyContainerError
from .order import Comparator

T = TypeVar("T")


def sift_up(array: list[T], index: int, order: Comparator) -> int:
    item = array[index]
    while index > 0:
        parent = (index - 1) // 2
        if order(item, array[parent]) >= 0:
            break
        array[index] = array[parent]
        index = parent
    array[index] = item
    return index


def sift_down(array: list[T], index: int, order: Comparator, length: int | None = None) -> int:
    if length is None:
        length = len(array)
    item = array[index]
    while True:
        child = 2 * index + 1
        if child >= length:
            break
        right = child + 1
        # left child wins ties between the two children
        if right < length and order(array[right], array[child]) < 0:
            child = right
        if order(array[child], item) >= 0:
            break
        array[index] = array[child]
        index = child
    array[index] = item
    return index


def heapify(array: list[T], order: Comparator, length: int | None = None):
    if length is None:
        length = len(array)
    for index in range(length // 2 - 1, -1, -1):
        sift_down(array, index, order, length)


def is_heap(array: list[T], order: Comparator) -> bool:
    return all(order(array[(i - 1) // 2], array[i]) <= 0 for i in range(1, len(array)))


def heapsort(items: Iterable[T], order: Comparator) -> list[T]:
    """
    Returns a new list with `items` in non-decreasing order.

    Builds a min-heap bottom-up, then repeatedly swaps the root behind the
    shrinking heap, which leaves the array in non-increasing order; the
    result is that array reversed.
    """
    array = list(items)
    heapify(array, order)
    for end in range(len(array) - 1, 0, -1):
        array[0], array[end] = array[end], array[0]
        sift_down(array, 0, order, end)
    array.reverse()
    return array


@final
class HeapStore(Generic[T]):
    """
    Array-backed binary min-heap under an injected comparator.

    Children of position i live at 2i+1 and 2i+2. `insert` and
    `extract_min` keep the heap order; `append` does not, and callers that
    use it must `heapify` before extracting.
    """

    def __init__(self, order: Comparator, items: Iterable[T] = ()):
        self._order = order
        self.data: list[T] = list(items)
        if self.data:
            self.heapify()

    @property
    def order(self) -> Comparator:
        return self._order

    def insert(self, item: T):
        self.data.append(item)
        sift_up(self.data, len(self.data) - 1, self._order)

    def append(self, item: T):
        self.data.append(item)

    def heapify(self):
        logger.debug(f"heapify {len(self.data)} elements")
        heapify(self.data, self._order)

    def peek(self) -> T:
        if not self.data:
            raise EmptyContainerError("peek from an empty heap")
        return self.data[0]

    def extract_min(self) -> T:
        if not self.data:
            raise EmptyContainerError("pop from an empty heap")
        last = self.data.pop()
        if not self.data:
            return last
        top = self.data[0]
        self.data[0] = last
        sift_down(self.data, 0, self._order)
        return top

    def is_heap(self) -> bool:
        return is_heap(self.data, self._order)

    def clear(self):
        self.data.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"HeapStore({self.data!r})"
