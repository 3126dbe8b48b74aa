"""Thread name allocation from a persisted, monotonically increasing counter."""

import asyncio

from modmail.ports.outbound import StoragePort

COUNTER_KEY = "thread_counter"


class ThreadNameAllocator:
    """Hands out ``<prefix>-0001``, ``<prefix>-0002``, ...

    The counter is written back before the name is returned, so a thread
    that later fails to be created burns its number instead of reusing it.
    Allocation is serialised per process; several processes sharing one
    storage directory are not coordinated. The counter file is read and
    written synchronously while the lock is held, blocking the loop briefly.
    """

    def __init__(self, storage: StoragePort, prefix: str = "mod-mail", width: int = 4):
        self._storage = storage
        self._prefix = prefix
        self._width = width
        self._lock = asyncio.Lock()

    @property
    def current(self) -> int:
        value = self._storage.load(COUNTER_KEY, 0)
        return value if isinstance(value, int) and value >= 0 else 0

    async def next_name(self) -> str:
        async with self._lock:
            number = self.current + 1
            self._storage.save(COUNTER_KEY, number)
        return f"{self._prefix}-{number:0{self._width}d}"
