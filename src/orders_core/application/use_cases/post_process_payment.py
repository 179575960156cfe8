from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import structlog

from orders_core.application.dtos import (
    PaymentCallbackParameters,
    PostProcessPaymentContext,
    PostProcessPaymentResult,
)
from orders_core.domain.exceptions import (
    MissingParameterError,
    OrderNotFoundError,
    PaymentNotFoundError,
    StoreNotFoundError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from orders_core.application.ports import OrderRepository, PaymentGateway, StoreRepository
    from orders_core.application.services import OrderLocator, PaymentGatewayRegistry
    from orders_core.domain.entities import CustomerOrder, PaymentIn, Store

logger = structlog.get_logger(__name__)

ORDER_ID_PARAMETER = "orderid"
CODE_PARAMETER = "code"
PAYMENT_METHOD_NOT_FOUND = "Payment method not found"


class PostProcessPaymentUseCase:
    """Applies an asynchronous payment gateway callback to an order.

    Callbacks arrive as a partially-trusted parameter bag whose only
    correlation is a merchant order reference ("orderid"). Each candidate
    gateway of the order is asked whether the bag is addressed to it; the
    first that says yes post-processes it.

    A bag that no gateway recognizes is answered with a result carrying
    PAYMENT_METHOD_NOT_FOUND instead of an error, so that gateways do not
    keep retrying the callback.

    Duplicate delivery: the same callback is matched to the same payment
    (outer id equality) and post-processed again. Suppressing repeated
    side effects is the gateway's responsibility.
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

    def execute(self, parameters: Mapping[str, str]) -> PostProcessPaymentResult | None:
        """Execute the callback reconciliation workflow.

        Returns:
            The gateway's post-processing result stamped with the order
            number, None if the gateway had nothing to report, or an
            unsuccessful result if no gateway recognized the callback.

        Raises:
            MissingParameterError: No "orderid" parameter.
            OrderNotFoundError: No order with that number or id.
            StoreNotFoundError: The order's store does not exist.
            PaymentNotFoundError: The asserted outer id matches no payment.
        """
        if not isinstance(parameters, PaymentCallbackParameters):
            parameters = PaymentCallbackParameters(parameters)

        order_reference = parameters.get(ORDER_ID_PARAMETER)
        if not order_reference:
            raise MissingParameterError(ORDER_ID_PARAMETER)

        log = logger.bind(order_reference=order_reference)

        # Gateways usually echo the order number, so look that up first.
        order = self._locator.by_number_or_id(order_reference)
        if order is None:
            log.warning("order_not_found")
            raise OrderNotFoundError(f"Cannot find order with ID {order_reference}")

        store = self._stores.get_by_id(order.store_id)
        if store is None:
            raise StoreNotFoundError(f"Cannot find store with ID {order.store_id}")

        candidates = self._registry.candidates(
            store,
            order.payment_gateway_codes(),
            parameters.get(CODE_PARAMETER) or None,
        )
        for gateway in candidates:
            validation = gateway.validate_post_process_request(parameters)
            if validation.is_success:
                return self._post_process(order, store, gateway, validation.outer_id, parameters)

        log.warning(
            "payment_callback_unmatched",
            order_id=order.id,
            candidate_codes=[gateway.code for gateway in candidates],
        )
        return PostProcessPaymentResult(error_message=PAYMENT_METHOD_NOT_FOUND)

    def _post_process(
        self,
        order: CustomerOrder,
        store: Store,
        gateway: PaymentGateway,
        outer_id: str | None,
        parameters: Mapping[str, str],
    ) -> PostProcessPaymentResult | None:
        payment = self._match_payment(order, outer_id)
        if payment is None:
            raise PaymentNotFoundError(f"Cannot find payment with outer ID {outer_id}")

        if not payment.outer_id and outer_id:
            payment.outer_id = outer_id

        context = PostProcessPaymentContext(
            order=order,
            payment=payment,
            store=store,
            outer_id=outer_id,
            parameters=parameters,
        )
        result = gateway.post_process_payment(context)
        if result is None:
            return None

        self._orders.save([order])

        logger.info(
            "payment_callback_processed",
            order_id=order.id,
            order_number=order.number,
            payment_id=payment.id,
            gateway_code=gateway.code,
            outer_id=outer_id,
            is_success=result.is_success,
        )
        return replace(result, order_id=order.number)

    @staticmethod
    def _match_payment(order: CustomerOrder, outer_id: str | None) -> PaymentIn | None:
        """Payment already anchored to outer_id, else the first one not yet anchored."""
        if outer_id:
            anchored = next((p for p in order.in_payments if p.outer_id == outer_id), None)
            if anchored is not None:
                return anchored
        return next((p for p in order.in_payments if not p.outer_id), None)
