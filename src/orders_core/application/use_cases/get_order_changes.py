from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orders_core.application.ports import ChangeLogService
    from orders_core.application.services import OrderLocator
    from orders_core.domain.entities import OperationLog


class GetOrderChangesUseCase:
    """Change history of an order and of its payments and shipments."""

    def __init__(self, order_locator: OrderLocator, change_log: ChangeLogService) -> None:
        self._locator = order_locator
        self._change_log = change_log

    def execute(self, order_id: str) -> list[OperationLog]:
        """Return operations oldest first; an unknown order has no history."""
        order = self._locator.by_id(order_id)
        if order is None:
            return []

        object_ids = [order.id]
        object_ids += [payment.id for payment in order.in_payments]
        object_ids += [shipment.id for shipment in order.shipments]

        unique = {log.id: log for log in self._change_log.get_operations(object_ids)}
        return sorted(unique.values(), key=lambda log: log.created_date)
