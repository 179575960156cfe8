from __future__ import annotations

from collections import defaultdict
from threading import Lock
from typing import TYPE_CHECKING

from orders_core.application.ports import NumberGenerator

if TYPE_CHECKING:
    from orders_core.application.ports import TimeProvider


class SequentialNumberGenerator(NumberGenerator):
    """Formats templates with the current time and a per-template counter.

    Counters start at 1 and live in memory only, so numbers are unique
    within one process run.
    """

    def __init__(self, time_provider: TimeProvider) -> None:
        self._time_provider = time_provider
        self._counters: defaultdict[str, int] = defaultdict(int)
        self._lock = Lock()

    def generate(self, template: str) -> str:
        with self._lock:
            self._counters[template] += 1
            sequence = self._counters[template]
        return template.format(self._time_provider.now(), sequence)
