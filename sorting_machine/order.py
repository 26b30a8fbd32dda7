from typing import Any, Callable, Protocol, TypeVar


class SupportsLessThan(Protocol):
    def __lt__(self, value: Any, /) -> bool: ...


T = TypeVar("T")
L = TypeVar("L", bound=SupportsLessThan)

Comparator = Callable[[T, T], int]


def natural(a: L, b: L) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def case_insensitive(a: str, b: str) -> int:
    return natural(a.casefold(), b.casefold())


class by_key:
    """
    Compares `key(a)` with `key(b)` using `order`.
    """

    def __init__(self, key: Callable[[Any], Any], order: Comparator = natural):
        self.key = key
        self.order = order

    def __call__(self, a, b) -> int:
        return self.order(self.key(a), self.key(b))

    def __eq__(self, other) -> bool:
        if not isinstance(other, by_key):
            return NotImplemented
        return self.key == other.key and self.order == other.order

    def __hash__(self) -> int:
        return hash((by_key, self.key, self.order))

    def __repr__(self) -> str:
        return f"by_key({self.key!r}, {self.order!r})"


class reversed_order:
    def __init__(self, order: Comparator = natural):
        self.order = order

    def __call__(self, a, b) -> int:
        return self.order(b, a)

    def __eq__(self, other) -> bool:
        if not isinstance(other, reversed_order):
            return NotImplemented
        return self.order == other.order

    def __hash__(self) -> int:
        return hash((reversed_order, self.order))

    def __repr__(self) -> str:
        return f"reversed_order({self.order!r})"
