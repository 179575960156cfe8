from __future__ import annotations

import copy
from decimal import Decimal
from typing import TYPE_CHECKING

from orders_core.application.dtos import OrderSearchResult
from orders_core.application.ports import OrderRepository, OrderSearchService
from orders_core.domain.value_objects import ResponseGroup

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orders_core.domain.entities import CustomerOrder
    from orders_core.domain.value_objects import OrderSearchCriteria


class InMemoryOrderRepository(OrderRepository, OrderSearchService):
    """In-memory order storage and search for tests and local runs.

    Implementation notes:
    - Returns deep copies from reads to mimic database detachment
    - Stores deep copies in save() with the transient scopes cleared
    - Reads project the order onto the response group: payments and
      shipments are only loaded when requested, and without WithPrices
      every monetary amount is zeroed
    - NOT thread-safe for concurrent writes to the same order; callers
      serialize with a LockProvider where that matters

    Copy-on-read rationale:
    Returning copies catches bugs where code mutates an order without
    calling save(), and keeps each request's order private to it.
    """

    def __init__(self) -> None:
        self._orders: dict[str, CustomerOrder] = {}

    def get_by_ids(
        self,
        ids: Sequence[str],
        response_group: ResponseGroup | None = None,
    ) -> list[CustomerOrder]:
        group = ResponseGroup.FULL if response_group is None else response_group
        return [_project(self._orders[i], group) for i in ids if i in self._orders]

    def save(self, orders: Sequence[CustomerOrder]) -> None:
        for order in orders:
            stored = copy.deepcopy(order)
            stored.scopes = ()
            self._orders[order.id] = stored

    def search(self, criteria: OrderSearchCriteria) -> OrderSearchResult:
        matches = sorted(
            (order for order in self._orders.values() if _matches(order, criteria)),
            key=lambda order: order.number,
        )
        page = matches[criteria.skip : criteria.skip + criteria.take]
        return OrderSearchResult(
            results=[_project(order, criteria.response_group) for order in page],
            total_count=len(matches),
        )

    def list_all(self) -> list[CustomerOrder]:
        return [copy.deepcopy(order) for order in self._orders.values()]


def _matches(order: CustomerOrder, criteria: OrderSearchCriteria) -> bool:
    if criteria.number is not None and order.number != criteria.number:
        return False
    if criteria.store_ids is not None and order.store_id not in criteria.store_ids:
        return False
    if criteria.employee_id is not None and order.employee_id != criteria.employee_id:
        return False
    if criteria.customer_id is not None and order.customer_id != criteria.customer_id:
        return False
    return True


def _project(order: CustomerOrder, group: ResponseGroup) -> CustomerOrder:
    result = copy.deepcopy(order)
    if ResponseGroup.WITH_IN_PAYMENTS not in group:
        result.in_payments = []
    if ResponseGroup.WITH_SHIPMENTS not in group:
        result.shipments = []
    if ResponseGroup.WITH_PRICES not in group:
        result.total = Decimal("0")
        for payment in result.in_payments:
            payment.amount = Decimal("0")
    return result
