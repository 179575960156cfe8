from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orders_core.application.dtos import OrderSearchResult
    from orders_core.application.ports import OrderSearchService
    from orders_core.application.services import OrderScopeFilter
    from orders_core.domain.value_objects import OrderSearchCriteria


class SearchOrdersUseCase:
    """Scope-bound order search: narrow the criteria, then dispatch them."""

    def __init__(self, scope_filter: OrderScopeFilter, search_service: OrderSearchService) -> None:
        self._scope_filter = scope_filter
        self._search = search_service

    def execute(self, caller_name: str, criteria: OrderSearchCriteria) -> OrderSearchResult:
        effective = self._scope_filter.narrow(caller_name, criteria)
        return self._search.search(effective)
