"""Bounded, time-limited ledger of already-dispatched interaction ids.

An id is claimed before its first outbound call, so a copy delivered while
the original is still running is turned away too. Claims are either
promoted with ``remember`` on success or dropped with ``release``.
"""

import time
from collections import OrderedDict
from typing import Callable, Set


class RecentInteractions:
    def __init__(
        self,
        max_entries: int = 1000,
        ttl_seconds: float = 900,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._max_entries = max_entries
        self._ttl = ttl_seconds
        self._clock = clock
        self._seen: "OrderedDict[str, float]" = OrderedDict()
        self._in_flight: Set[str] = set()

    def __len__(self) -> int:
        return len(self._seen)

    def _expire(self):
        cutoff = self._clock() - self._ttl
        while self._seen:
            oldest_id, seen_at = next(iter(self._seen.items()))
            if seen_at > cutoff:
                break
            del self._seen[oldest_id]

    def seen(self, interaction_id: str) -> bool:
        if not interaction_id:
            return False
        self._expire()
        return interaction_id in self._seen

    def in_flight(self, interaction_id: str) -> bool:
        return interaction_id in self._in_flight

    def claim(self, interaction_id: str) -> bool:
        """Reserve an id for dispatch; False if it is done or already running.

        Ids are never tracked when empty, so they always claim.
        """
        if not interaction_id:
            return True
        if self.seen(interaction_id) or interaction_id in self._in_flight:
            return False
        self._in_flight.add(interaction_id)
        return True

    def release(self, interaction_id: str):
        self._in_flight.discard(interaction_id)

    def remember(self, interaction_id: str):
        if not interaction_id:
            return
        self._in_flight.discard(interaction_id)
        self._seen[interaction_id] = self._clock()
        self._seen.move_to_end(interaction_id)
        while len(self._seen) > self._max_entries:
            self._seen.popitem(last=False)
