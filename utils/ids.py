import time
from typing import Callable, Iterable, Optional


def now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdFactory:
    """
    Time-based ids: the current millisecond stamp, prefixed per entity kind.
    A stamp already used by a sibling is bumped until it is free.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self.clock = clock or now_ms

    def new_id(self, prefix: str, taken: Iterable[str] = ()) -> str:
        existing = set(taken)
        stamp = self.clock()
        while f"{prefix}{stamp}" in existing:
            stamp += 1
        return f"{prefix}{stamp}"
