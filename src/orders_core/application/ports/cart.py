from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orders_core.domain.entities import CustomerOrder, ShoppingCart


class CartService(ABC):
    """Port for shopping cart storage."""

    @abstractmethod
    def get_by_ids(self, ids: Sequence[str]) -> list[ShoppingCart]:
        """Retrieve carts by id, skipping unknown ids."""

    @abstractmethod
    def delete(self, ids: Sequence[str]) -> None:
        """Remove carts. Unknown ids are ignored."""


class OrderBuilder(ABC):
    """Port for order placement from a shopping cart."""

    @abstractmethod
    def place_order_from_cart(self, cart: ShoppingCart) -> CustomerOrder:
        """Create, persist and return a new order for the cart.

        Not idempotent: every call creates a new order. Callers serialize
        per cart with the LockProvider.
        """
