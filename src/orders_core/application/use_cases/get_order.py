from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from orders_core.domain.exceptions import OrderNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable

    from orders_core.application.services import OrderLocator, OrderScopeFilter
    from orders_core.domain.entities import CustomerOrder
    from orders_core.domain.value_objects import ResponseGroup

logger = structlog.get_logger(__name__)


class GetOrderUseCase:
    """Reads a single order by id, by number, or by either.

    These reads bypass the pre-query narrowing of a search, so every one
    of them runs the same pipeline:

        fetch -> authorize -> project

    - fetch: load with the caller's price-restricted response group
    - authorize: the caller must hold a read scope matching the order
    - project: expose the order's scope strings to the caller

    A missing order raises OrderNotFoundError and a forbidden one
    AccessDeniedError; the two are never merged.
    """

    def __init__(self, scope_filter: OrderScopeFilter, order_locator: OrderLocator) -> None:
        self._scope_filter = scope_filter
        self._locator = order_locator

    def by_id(
        self, caller_name: str, order_id: str, response_group: ResponseGroup | None = None
    ) -> CustomerOrder:
        return self._read(caller_name, order_id, response_group, self._locator.by_id)

    def by_number(
        self, caller_name: str, number: str, response_group: ResponseGroup | None = None
    ) -> CustomerOrder:
        return self._read(caller_name, number, response_group, self._locator.by_number)

    def by_identifier(
        self, caller_name: str, identifier: str, response_group: ResponseGroup | None = None
    ) -> CustomerOrder:
        """Read an order given either its id or its number (id is tried first)."""
        return self._read(caller_name, identifier, response_group, self._locator.by_id_or_number)

    def _read(
        self,
        caller_name: str,
        identifier: str,
        response_group: ResponseGroup | None,
        find: Callable[[str, ResponseGroup], CustomerOrder | None],
    ) -> CustomerOrder:
        order = self._fetch(caller_name, identifier, response_group, find)
        scopes = self._authorize(caller_name, order)
        return self._project(order, scopes)

    def _fetch(
        self,
        caller_name: str,
        identifier: str,
        response_group: ResponseGroup | None,
        find: Callable[[str, ResponseGroup], CustomerOrder | None],
    ) -> CustomerOrder:
        group = self._scope_filter.restrict_response_group(caller_name, response_group)
        order = find(identifier, group)
        if order is None:
            logger.info("order_not_found", caller=caller_name, identifier=identifier)
            raise OrderNotFoundError(f"Cannot find order {identifier}")
        return order

    def _authorize(self, caller_name: str, order: CustomerOrder) -> tuple[str, ...]:
        return self._scope_filter.authorize(caller_name, order)

    @staticmethod
    def _project(order: CustomerOrder, scopes: tuple[str, ...]) -> CustomerOrder:
        order.scopes = scopes
        return order
