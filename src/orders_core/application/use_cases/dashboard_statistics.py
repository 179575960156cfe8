from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

import structlog

from orders_core.application.ports import as_utc
from orders_core.config import OrderModuleSettings

if TYPE_CHECKING:
    from datetime import datetime

    from orders_core.application.ports import ComputationCache, StatisticsCollector, TimeProvider
    from orders_core.domain.entities import DashboardStatistics

logger = structlog.get_logger(__name__)


class GetDashboardStatisticsUseCase:
    """Order statistics for the dashboard, computed at most once per interval.

    The interval defaults to the last statistics_window_days. The end is
    padded by statistics_end_padding_days to absorb callers that send
    local dates instead of UTC ones. Results are cached per calendar
    interval, and concurrent requests for the same interval share one
    computation.
    """

    def __init__(
        self,
        time_provider: TimeProvider,
        collector: StatisticsCollector,
        cache: ComputationCache,
        settings: OrderModuleSettings | None = None,
    ) -> None:
        self._time_provider = time_provider
        self._collector = collector
        self._cache = cache
        self._settings = settings or OrderModuleSettings()

    def execute(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> DashboardStatistics:
        now = self._time_provider.now()
        window = timedelta(days=self._settings.statistics_window_days)
        start = as_utc(start) if start else now - window
        end = (as_utc(end) if end else now) + timedelta(
            days=self._settings.statistics_end_padding_days
        )

        cache_key = f"Statistic:{start:%Y-%m-%d}:{end:%Y-%m-%d}"
        return self._cache.get_or_compute(cache_key, lambda: self._collect(start, end))

    def _collect(self, start: datetime, end: datetime) -> DashboardStatistics:
        statistics = self._collector.collect(start, end)
        logger.info(
            "statistics_computed",
            start=start.isoformat(),
            end=end.isoformat(),
            order_count=statistics.order_count,
        )
        return statistics

