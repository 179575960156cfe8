from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class DashboardStatistics:
    """Aggregated order figures for a reporting interval."""

    start_date: datetime
    end_date: datetime
    order_count: int
    revenue: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class OperationLog:
    """A single change-log record of an order or one of its documents."""

    id: str
    object_id: str
    object_type: str
    operation_type: str
    created_date: datetime
    detail: str = ""
