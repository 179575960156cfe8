from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from orders_core.domain.exceptions import CartNotFoundError

if TYPE_CHECKING:
    from orders_core.application.ports import CartService, LockProvider, OrderBuilder
    from orders_core.application.services import OrderScopeFilter
    from orders_core.domain.entities import CustomerOrder

logger = structlog.get_logger(__name__)


class CreateOrderFromCartUseCase:
    """Converts a shopping cart into a customer order, exactly once.

    Responsibilities:
    - Check the caller may create orders, before any lock is taken
    - Acquire the per-cart lock
    - Load the cart inside the lock
    - Place the order and consume the cart before releasing the lock

    A duplicate submission (double click, retry after timeout) waits for
    the first one, then finds the cart consumed and fails with
    CartNotFoundError instead of placing a second order.
    """

    def __init__(
        self,
        scope_filter: OrderScopeFilter,
        lock_provider: LockProvider,
        cart_service: CartService,
        order_builder: OrderBuilder,
    ) -> None:
        self._scope_filter = scope_filter
        self._lock_provider = lock_provider
        self._carts = cart_service
        self._builder = order_builder

    def execute(self, caller_name: str, cart_id: str) -> CustomerOrder:
        """Place the order of a cart on behalf of caller_name.

        Raises:
            AccessDeniedError: The caller may not create orders.
            CartNotFoundError: The cart does not exist or was already converted.
        """
        self._scope_filter.authorize_create(caller_name)

        with self._lock_provider.acquire(cart_id):
            return self._execute_within_lock(caller_name, cart_id)

    def _execute_within_lock(self, caller_name: str, cart_id: str) -> CustomerOrder:
        cart = next(iter(self._carts.get_by_ids([cart_id])), None)
        if cart is None:
            logger.info("cart_not_found", cart_id=cart_id)
            raise CartNotFoundError(f"Cannot find cart with ID {cart_id}")

        order = self._builder.place_order_from_cart(cart)
        self._carts.delete([cart_id])

        logger.info(
            "cart_converted",
            caller=caller_name,
            cart_id=cart_id,
            order_id=order.id,
            order_number=order.number,
        )
        return order
