from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from threading import Lock
from typing import TYPE_CHECKING, Any

from orders_core.application.ports import ComputationCache

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime, timedelta

    from orders_core.application.ports import TimeProvider


@dataclass(slots=True)
class _Entry:
    future: Future[Any]
    expires_at: datetime | None = None


class SingleFlightCache(ComputationCache):
    """In-memory single-flight cache with time-based expiry.

    Implementation notes:
    - The first caller for a key registers a Future and computes outside
      the table lock; later callers block on that Future
    - Expiry is measured from completion, using the injected TimeProvider
    - A failed computation is removed so the next caller retries it;
      callers already waiting receive the same exception
    """

    def __init__(self, time_provider: TimeProvider, ttl: timedelta) -> None:
        self._time_provider = time_provider
        self._ttl = ttl
        self._entries: dict[str, _Entry] = {}
        self._lock = Lock()

    def get_or_compute(self, key: str, compute: Callable[[], Any]) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._is_expired(entry):
                del self._entries[key]
                entry = None
            is_owner = entry is None
            if entry is None:
                entry = self._entries[key] = _Entry(future=Future())

        if not is_owner:
            return entry.future.result()

        try:
            value = compute()
        except BaseException as exc:
            with self._lock:
                if self._entries.get(key) is entry:
                    del self._entries[key]
            entry.future.set_exception(exc)
            raise

        with self._lock:
            entry.expires_at = self._time_provider.now() + self._ttl
        entry.future.set_result(value)
        return value

    def _is_expired(self, entry: _Entry) -> bool:
        return entry.expires_at is not None and self._time_provider.now() >= entry.expires_at
