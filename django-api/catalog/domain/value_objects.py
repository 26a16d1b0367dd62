"""Domain primitives that enforce validity at creation time."""

import threading
import time
from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import Self

MAX_ID_LENGTH = 64


@dataclass(frozen=True)
class EntityId:
    """Opaque identifier for an Event, EventEdition or Paper."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value) > MAX_ID_LENGTH:
            raise ValueError("Entity id must be 1-64 characters")
        if any(ch.isspace() or ch == "/" for ch in self.value):
            raise ValueError("Entity id cannot contain whitespace or slashes")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value


class IdGenerator:
    """Allocates ids from the wall clock, in milliseconds.

    Consecutive calls inside the same clock tick are bumped by one, so the
    ids stay unique and strictly increasing in creation order. Ids already
    present in a collection (e.g. loaded from a previous run with a clock
    ahead of ours) are skipped.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self, taken: Collection[str] = ()) -> str:
        with self._lock:
            candidate = max(int(self._clock() * 1000), self._last + 1)
            while str(candidate) in taken:
                candidate += 1
            self._last = candidate
            return str(candidate)
