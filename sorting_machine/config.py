import os
from enum import Enum


class Strategy(Enum):
    DEFERRED = "deferred"  # append on add, heapify once at the mode change
    INCREMENTAL = "incremental"  # sift-up on every add


def default_strategy() -> Strategy:
    value = os.environ.get("SORTING_MACHINE_STRATEGY")
    if not value:
        return Strategy.DEFERRED
    try:
        return Strategy(value.strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown SORTING_MACHINE_STRATEGY: {value!r}, expected one of {[s.value for s in Strategy]}"
        ) from None


DEFAULT_STRATEGY = default_strategy()
