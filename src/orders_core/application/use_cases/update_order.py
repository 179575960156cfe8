from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from orders_core.application.ports import as_utc

if TYPE_CHECKING:
    from orders_core.application.ports import OrderRepository
    from orders_core.application.services import OrderLocator, OrderScopeFilter
    from orders_core.domain.entities import CustomerOrder

logger = structlog.get_logger(__name__)


class UpdateOrderUseCase:
    """Saves a caller-edited order after a scope-bound permission check.

    The caller must be allowed to read both the stored order and the
    submitted one, so an order cannot be moved into (or out of) a store
    the caller has no scope for. A naive created_date is stored as UTC.
    """

    def __init__(
        self,
        scope_filter: OrderScopeFilter,
        order_locator: OrderLocator,
        order_repository: OrderRepository,
    ) -> None:
        self._scope_filter = scope_filter
        self._locator = order_locator
        self._orders = order_repository

    def execute(self, caller_name: str, order: CustomerOrder) -> None:
        stored = self._locator.by_id(order.id)
        if stored is not None:
            self._scope_filter.authorize(caller_name, stored)
        self._scope_filter.authorize(caller_name, order)

        if order.created_date is not None:
            order.created_date = as_utc(order.created_date)
        self._orders.save([order])
        logger.info("order_updated", caller=caller_name, order_id=order.id)
