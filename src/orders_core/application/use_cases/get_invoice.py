from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from orders_core.domain.exceptions import OrderNotFoundError

if TYPE_CHECKING:
    from orders_core.application.ports import InvoiceRenderer
    from orders_core.application.services import OrderLocator, OrderScopeFilter


@dataclass(frozen=True, slots=True)
class InvoiceDocument:
    order_number: str
    content: bytes
    media_type: str


class GetInvoiceUseCase:
    """Renders the invoice of an order found by number.

    Goes through the same price restriction and scope check as every
    other single-order read.
    """

    def __init__(
        self,
        scope_filter: OrderScopeFilter,
        order_locator: OrderLocator,
        renderer: InvoiceRenderer,
    ) -> None:
        self._scope_filter = scope_filter
        self._locator = order_locator
        self._renderer = renderer

    def execute(self, caller_name: str, order_number: str) -> InvoiceDocument:
        group = self._scope_filter.restrict_response_group(caller_name)
        order = self._locator.by_number(order_number, group)
        if order is None:
            raise OrderNotFoundError(f"Cannot find order with number {order_number}")

        order.scopes = self._scope_filter.authorize(caller_name, order)
        return InvoiceDocument(
            order_number=order.number,
            content=self._renderer.render(order),
            media_type=self._renderer.media_type,
        )
