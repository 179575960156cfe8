from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orders_core.application.dtos import OrderSearchResult
    from orders_core.domain.entities import CustomerOrder
    from orders_core.domain.value_objects import OrderSearchCriteria, ResponseGroup


class OrderRepository(ABC):
    """Port for customer order persistence.

    Contract:
    - get_by_ids() skips unknown ids (no exception)
    - Returned orders are request-local copies; mutations are invisible
      to other requests until save() is called
    - save() performs upsert and never persists the transient scopes field
    """

    @abstractmethod
    def get_by_ids(
        self,
        ids: Sequence[str],
        response_group: ResponseGroup | None = None,
    ) -> list[CustomerOrder]:
        """Retrieve orders by id.

        Args:
            ids: Order identifiers.
            response_group: Parts of the order to load; None means Full.

        Returns:
            Found orders, in the order of ids.
        """

    @abstractmethod
    def save(self, orders: Sequence[CustomerOrder]) -> None:
        """Persist mutated orders (upsert semantics)."""


class OrderSearchService(ABC):
    """Port for order search execution.

    The criteria reaching this port have already been narrowed by the
    scope filter where the read path requires it.
    """

    @abstractmethod
    def search(self, criteria: OrderSearchCriteria) -> OrderSearchResult:
        """Return one page of matching orders and the total match count."""
