from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from orders_core.application.ports import CartService, OrderBuilder
from orders_core.domain.entities import CustomerOrder, PaymentIn

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orders_core.application.ports import NumberGenerator, OrderRepository, TimeProvider
    from orders_core.domain.entities import ShoppingCart

ORDER_NUMBER_TEMPLATE = "CO{0:%y%m%d}-{1:05d}"


class InMemoryCartService(CartService):
    def __init__(self) -> None:
        self._carts: dict[str, ShoppingCart] = {}

    def save(self, cart: ShoppingCart) -> None:
        self._carts[cart.id] = cart

    def get_by_ids(self, ids: Sequence[str]) -> list[ShoppingCart]:
        return [self._carts[i] for i in ids if i in self._carts]

    def delete(self, ids: Sequence[str]) -> None:
        for cart_id in ids:
            self._carts.pop(cart_id, None)


class InMemoryOrderBuilder(OrderBuilder):
    """Places an order with one payment for the cart's chosen gateway."""

    def __init__(
        self,
        order_repository: OrderRepository,
        number_generator: NumberGenerator,
        time_provider: TimeProvider,
        number_template: str = ORDER_NUMBER_TEMPLATE,
    ) -> None:
        self._orders = order_repository
        self._numbers = number_generator
        self._time_provider = time_provider
        self._number_template = number_template

    def place_order_from_cart(self, cart: ShoppingCart) -> CustomerOrder:
        order = CustomerOrder(
            id=str(uuid4()),
            number=self._numbers.generate(self._number_template),
            store_id=cart.store_id,
            currency=cart.currency,
            customer_id=cart.customer_id,
            shopping_cart_id=cart.id,
            total=cart.total,
            created_date=self._time_provider.now(),
        )
        if cart.payment_gateway_code:
            order.in_payments.append(
                PaymentIn(
                    id=str(uuid4()),
                    gateway_code=cart.payment_gateway_code,
                    currency=cart.currency,
                    customer_id=cart.customer_id,
                    amount=cart.total,
                )
            )
        self._orders.save([order])
        return order
