from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from orders_core.application.dtos import ProcessPaymentContext
from orders_core.domain.exceptions import (
    OrderNotFoundError,
    PaymentMethodNotFoundError,
    PaymentNotFoundError,
    StoreNotFoundError,
)

if TYPE_CHECKING:
    from orders_core.application.dtos import BankCardInfo, ProcessPaymentResult
    from orders_core.application.ports import OrderRepository, StoreRepository
    from orders_core.application.services import OrderLocator, PaymentGatewayRegistry

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessPaymentRequest:
    """Input DTO for payment initiation.

    order_id may hold either an order id or an order number.
    """

    order_id: str
    payment_id: str
    bank_card_info: BankCardInfo | None = None


class ProcessPaymentUseCase:
    """Registers an order payment with its external payment gateway.

    Responsibilities:
    - Resolve order (id, then number), payment, store and gateway
    - Invoke the gateway with the evaluation context
    - Anchor the gateway's outer id on the payment for callback matching
    - Persist the order as the final step

    Any lookup failure raises before the gateway is called and before
    anything is persisted.
    """

    def __init__(
        self,
        order_locator: OrderLocator,
        order_repository: OrderRepository,
        store_repository: StoreRepository,
        gateway_registry: PaymentGatewayRegistry,
    ) -> None:
        self._locator = order_locator
        self._orders = order_repository
        self._stores = store_repository
        self._registry = gateway_registry

    def execute(self, request: ProcessPaymentRequest) -> ProcessPaymentResult:
        """Execute the payment initiation workflow.

        Returns:
            The gateway's result, unchanged.

        Raises:
            OrderNotFoundError: No order with that id or number.
            PaymentNotFoundError: The order has no payment with that id.
            StoreNotFoundError: The order's store does not exist.
            PaymentMethodNotFoundError: The payment's gateway code is not an
                active payment method of the store.
        """
        log = logger.bind(order_id=request.order_id, payment_id=request.payment_id)

        order = self._locator.by_id_or_number(request.order_id)
        if order is None:
            raise OrderNotFoundError(f"Cannot find order with ID {request.order_id}")

        payment = order.find_payment(request.payment_id)
        if payment is None:
            raise PaymentNotFoundError(f"Cannot find payment with ID {request.payment_id}")

        store = self._stores.get_by_id(order.store_id)
        if store is None:
            raise StoreNotFoundError(f"Cannot find store with ID {order.store_id}")

        gateway = self._registry.resolve(store, payment.gateway_code)
        if gateway is None:
            log.error("payment_method_orphaned", gateway_code=payment.gateway_code)
            raise PaymentMethodNotFoundError(
                f"Cannot find payment method with code {payment.gateway_code}"
            )

        context = ProcessPaymentContext(
            order=order,
            payment=payment,
            store=store,
            bank_card_info=request.bank_card_info,
        )
        result = gateway.process_payment(context)
        if result.outer_id is not None:
            payment.outer_id = result.outer_id

        self._orders.save([order])

        log.info(
            "payment_processed",
            gateway_code=gateway.code,
            is_success=result.is_success,
            outer_id=payment.outer_id,
        )
        return result
