from datetime import UTC, datetime, timedelta

from orders_core.application.ports import TimeProvider


def _require_utc(moment: datetime) -> datetime:
    # Statistics windows, cache expiry and number prefixes all compare in UTC.
    if moment.tzinfo is not UTC:
        raise ValueError(f"clock must run on tzinfo=UTC, got tzinfo={moment.tzinfo}")
    return moment


class SystemTimeProvider(TimeProvider):
    """Wall clock used by the order module in production."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Clock that only moves when told to.

    Lets tests pin the dashboard statistics window, the day prefix of
    generated document numbers and the expiry of cached statistics.
    advance() is not thread-safe; call it between concurrent phases.
    """

    def __init__(self, moment: datetime) -> None:
        self._moment = _require_utc(moment)

    def now(self) -> datetime:
        return self._moment

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward, e.g. past a cache TTL or into the next numbering day."""
        if delta < timedelta(0):
            raise ValueError(f"clock cannot move backwards, got {delta}")
        self._moment += delta
