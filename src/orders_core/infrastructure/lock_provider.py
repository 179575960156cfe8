from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import Lock
from typing import TYPE_CHECKING

from orders_core.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(slots=True)
class _KeyedLock:
    lock: Lock = field(default_factory=Lock)
    users: int = 0


class InMemoryLockProvider(LockProvider):
    """In-memory lock provider using per-key locks.

    Implementation uses two-phase locking:
    1. Registry lock protects the key table during lookup/creation
    2. Key lock serializes the critical section for that key

    Each key entry counts its holder and waiters; the entry is dropped
    when the count returns to zero, so the table only holds keys that
    are currently in use.

    Limitations:
    - Single-process only (locks don't work across processes)
    - Not suitable for production with multiple instances
    """

    def __init__(self) -> None:
        self._locks: dict[str, _KeyedLock] = {}
        self._registry_lock = Lock()

    @contextmanager
    def acquire(self, key: str) -> Iterator[None]:
        with self._registry_lock:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = _KeyedLock()
            entry.users += 1

        try:
            with entry.lock:
                yield
        finally:
            with self._registry_lock:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[key]

