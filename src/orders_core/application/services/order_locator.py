from __future__ import annotations

from typing import TYPE_CHECKING

from orders_core.domain.value_objects import OrderSearchCriteria, ResponseGroup

if TYPE_CHECKING:
    from orders_core.application.ports import OrderRepository, OrderSearchService
    from orders_core.domain.entities import CustomerOrder


class OrderLocator:
    """Finds a single order by id, by number, or by either.

    Callers hand in identifiers they cannot classify up front: storefronts
    pass ids, gateways usually echo the human order number.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        search_service: OrderSearchService,
    ) -> None:
        self._orders = order_repository
        self._search = search_service

    def by_id(
        self, order_id: str, response_group: ResponseGroup = ResponseGroup.FULL
    ) -> CustomerOrder | None:
        return next(iter(self._orders.get_by_ids([order_id], response_group)), None)

    def by_number(
        self, number: str, response_group: ResponseGroup = ResponseGroup.FULL
    ) -> CustomerOrder | None:
        criteria = OrderSearchCriteria(number=number, response_group=response_group, take=1)
        return next(iter(self._search.search(criteria).results), None)

    def by_id_or_number(
        self, identifier: str, response_group: ResponseGroup = ResponseGroup.FULL
    ) -> CustomerOrder | None:
        return self.by_id(identifier, response_group) or self.by_number(identifier, response_group)

    def by_number_or_id(
        self, identifier: str, response_group: ResponseGroup = ResponseGroup.FULL
    ) -> CustomerOrder | None:
        return self.by_number(identifier, response_group) or self.by_id(identifier, response_group)
