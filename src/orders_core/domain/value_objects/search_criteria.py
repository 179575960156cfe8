from __future__ import annotations

from dataclasses import dataclass

from orders_core.domain.value_objects.response_group import ResponseGroup


@dataclass(frozen=True, slots=True)
class OrderSearchCriteria:
    """Filter and paging for an order search.

    store_ids semantics:
        - None: no store filter
        - empty tuple: matches no order

    Instances are immutable; the scope filter returns a narrowed copy
    before the criteria are handed to the search service.
    """

    number: str | None = None
    store_ids: tuple[str, ...] | None = None
    employee_id: str | None = None
    customer_id: str | None = None
    response_group: ResponseGroup = ResponseGroup.FULL
    skip: int = 0
    take: int = 20
