from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from orders_core.domain.entities import CustomerOrder, DashboardStatistics, OperationLog


class StatisticsCollector(ABC):
    """Port for the (expensive) dashboard statistics computation."""

    @abstractmethod
    def collect(self, start: datetime, end: datetime) -> DashboardStatistics:
        """Aggregate orders created in [start, end)."""


class ChangeLogService(ABC):
    """Port for change-log storage."""

    @abstractmethod
    def get_operations(self, object_ids: Sequence[str]) -> list[OperationLog]:
        """Return operation logs recorded for any of the given object ids."""


class InvoiceRenderer(ABC):
    """Port for invoice document rendering (notification template + PDF)."""

    media_type: str = "application/pdf"

    @abstractmethod
    def render(self, order: CustomerOrder) -> bytes:
        """Render the invoice of an order as a document of media_type."""
