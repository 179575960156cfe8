from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from orders_core.config import (
    PAYMENT_NUMBER_TEMPLATE_SETTING,
    SHIPMENT_NUMBER_TEMPLATE_SETTING,
    OrderModuleSettings,
)
from orders_core.domain.entities import PaymentIn, PaymentStatus, Shipment
from orders_core.domain.exceptions import OrderNotFoundError, StoreNotFoundError

if TYPE_CHECKING:
    from orders_core.application.ports import NumberGenerator, StoreRepository
    from orders_core.application.services import OrderLocator
    from orders_core.domain.entities import CustomerOrder, Store


class NewDocumentsUseCase:
    """Prefills new shipment and payment documents for an existing order.

    The documents are returned unsaved; the caller adds them to the
    order and submits it through an update.
    """

    def __init__(
        self,
        order_locator: OrderLocator,
        store_repository: StoreRepository,
        number_generator: NumberGenerator,
        settings: OrderModuleSettings | None = None,
    ) -> None:
        self._locator = order_locator
        self._stores = store_repository
        self._numbers = number_generator
        self._settings = settings or OrderModuleSettings()

    def new_shipment(self, order_id: str) -> Shipment:
        order, store = self._load(order_id)
        template = store.get_setting(
            SHIPMENT_NUMBER_TEMPLATE_SETTING, self._settings.shipment_number_template
        )
        return Shipment(
            id=str(uuid4()),
            number=self._numbers.generate(template),
            status="New",
            currency=order.currency,
        )

    def new_payment(self, order_id: str) -> PaymentIn:
        order, store = self._load(order_id)
        template = store.get_setting(
            PAYMENT_NUMBER_TEMPLATE_SETTING, self._settings.payment_number_template
        )
        return PaymentIn(
            id=str(uuid4()),
            gateway_code="",
            number=self._numbers.generate(template),
            status=PaymentStatus.NEW,
            currency=order.currency,
            customer_id=order.customer_id,
        )

    def _load(self, order_id: str) -> tuple[CustomerOrder, Store]:
        order = self._locator.by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Cannot find order with ID {order_id}")
        store = self._stores.get_by_id(order.store_id)
        if store is None:
            raise StoreNotFoundError(f"Cannot find store with ID {order.store_id}")
        return order, store
