from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import TYPE_CHECKING

from orders_core.application.ports import (
    ChangeLogService,
    InvoiceRenderer,
    StatisticsCollector,
    as_utc,
)
from orders_core.domain.entities import DashboardStatistics

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from orders_core.domain.entities import CustomerOrder, OperationLog
    from orders_core.infrastructure.order_repository import InMemoryOrderRepository


class InMemoryStatisticsCollector(StatisticsCollector):
    """Aggregates the orders of an InMemoryOrderRepository."""

    def __init__(self, order_repository: InMemoryOrderRepository) -> None:
        self._orders = order_repository

    def collect(self, start: datetime, end: datetime) -> DashboardStatistics:
        revenue: defaultdict[str, Decimal] = defaultdict(Decimal)
        count = 0
        for order in self._orders.list_all():
            if order.created_date is None or not start <= as_utc(order.created_date) < end:
                continue
            count += 1
            revenue[order.currency] += order.total
        return DashboardStatistics(
            start_date=start,
            end_date=end,
            order_count=count,
            revenue=dict(revenue),
        )


class InMemoryChangeLogService(ChangeLogService):
    def __init__(self) -> None:
        self._logs: list[OperationLog] = []

    def add(self, log: OperationLog) -> None:
        self._logs.append(log)

    def get_operations(self, object_ids: Sequence[str]) -> list[OperationLog]:
        wanted = set(object_ids)
        return [log for log in self._logs if log.object_id in wanted]


class PlainTextInvoiceRenderer(InvoiceRenderer):
    """Renders a plain text invoice. Stands in for the PDF renderer in tests."""

    media_type = "text/plain; charset=utf-8"

    def render(self, order: CustomerOrder) -> bytes:
        lines = [
            f"Invoice for order {order.number}",
            f"Store: {order.store_id}",
            f"Customer: {order.customer_id or '-'}",
            f"Total: {order.total} {order.currency}",
        ]
        lines += [
            f"Payment {payment.number or payment.id}: {payment.amount} ({payment.status.value})"
            for payment in order.in_payments
        ]
        return "\n".join(lines).encode("utf-8")
