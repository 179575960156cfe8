"""Tests for PostProcessPaymentUseCase.

Tests cover:
- Callback correlation by order number (then id)
- Gateway selection among the order's candidate gateways
- Payment matching and outer id anchoring
- Duplicate callback delivery
- Unrecognized callbacks answered without an error
"""

from collections.abc import Callable

import pytest
from structlog.testing import capture_logs

from orders_core.application.dtos import PaymentCallbackParameters
from orders_core.application.services import OrderLocator, PaymentGatewayRegistry
from orders_core.application.use_cases import PAYMENT_METHOD_NOT_FOUND, PostProcessPaymentUseCase
from orders_core.domain.entities import CustomerOrder, PaymentIn, PaymentStatus, Store
from orders_core.domain.exceptions import (
    MissingParameterError,
    OrderNotFoundError,
    PaymentNotFoundError,
    StoreNotFoundError,
)
from orders_core.infrastructure.order_repository import InMemoryOrderRepository
from orders_core.infrastructure.store_repository import InMemoryStoreRepository

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def primary_gateway(gateway_factory: Callable):
    return gateway_factory("TESTGATEWAY")


@pytest.fixture
def manual_gateway(gateway_factory: Callable):
    return gateway_factory("DefaultManualPaymentMethod")


@pytest.fixture
def use_case(
    order_locator: OrderLocator,
    order_repository: InMemoryOrderRepository,
    store_repository: InMemoryStoreRepository,
    primary_gateway,
    manual_gateway,
) -> PostProcessPaymentUseCase:
    return PostProcessPaymentUseCase(
        order_locator=order_locator,
        order_repository=order_repository,
        store_repository=store_repository,
        gateway_registry=PaymentGatewayRegistry([primary_gateway, manual_gateway]),
    )


@pytest.fixture(autouse=True)
def seeded(
    order_repository: InMemoryOrderRepository,
    store_repository: InMemoryStoreRepository,
    order: CustomerOrder,
    store: Store,
) -> None:
    order_repository.save([order])
    store_repository.save(store)


def _callback(**parameters: str) -> dict[str, str]:
    return parameters


def _stored(order_repository: InMemoryOrderRepository) -> CustomerOrder:
    return order_repository.get_by_ids(["order-1"])[0]


# =============================================================================
# Reconciliation
# =============================================================================


class TestPostProcessPaymentReconciliation:
    def test_callback_anchors_outer_id_and_reports_order_number(
        self, use_case: PostProcessPaymentUseCase, order_repository: InMemoryOrderRepository
    ) -> None:
        result = use_case.execute(
            _callback(orderid="ORD-1001", code="TESTGATEWAY", outerId="ext-55")
        )

        assert result is not None
        assert result.is_success is True
        assert result.order_id == "ORD-1001"
        stored = _stored(order_repository)
        assert stored.in_payments[0].outer_id == "ext-55"
        assert stored.in_payments[0].status is PaymentStatus.PAID

    def test_order_id_is_accepted_in_place_of_number(
        self, use_case: PostProcessPaymentUseCase
    ) -> None:
        result = use_case.execute(_callback(orderid="order-1", code="TESTGATEWAY", outerId="e1"))

        assert result.order_id == "ORD-1001"

    def test_parameter_names_are_case_insensitive(
        self, use_case: PostProcessPaymentUseCase
    ) -> None:
        parameters = PaymentCallbackParameters(
            [("OrderId", "ORD-1001"), ("CODE", "TESTGATEWAY"), ("outerId", "e1")]
        )

        assert use_case.execute(parameters).is_success is True

    def test_repeated_callback_is_post_processed_again(
        self,
        use_case: PostProcessPaymentUseCase,
        order_repository: InMemoryOrderRepository,
        primary_gateway,
    ) -> None:
        callback = _callback(orderid="ORD-1001", code="TESTGATEWAY", outerId="ext-55")

        use_case.execute(callback)
        second = use_case.execute(callback)

        assert second.order_id == "ORD-1001"
        assert [c.payment.id for c in primary_gateway.post_processed] == ["payment-1", "payment-1"]
        assert _stored(order_repository).in_payments[0].outer_id == "ext-55"

    def test_anchored_payment_wins_over_unanchored_one(
        self,
        use_case: PostProcessPaymentUseCase,
        order_repository: InMemoryOrderRepository,
        order: CustomerOrder,
        primary_gateway,
    ) -> None:
        order.in_payments[0].outer_id = None
        order.in_payments.append(
            PaymentIn(id="payment-2", gateway_code="TESTGATEWAY", outer_id="ext-77")
        )
        order_repository.save([order])

        use_case.execute(_callback(orderid="ORD-1001", code="TESTGATEWAY", outerId="ext-77"))

        assert primary_gateway.post_processed[0].payment.id == "payment-2"
        assert _stored(order_repository).in_payments[0].outer_id is None

    def test_gateway_receives_context(
        self, use_case: PostProcessPaymentUseCase, primary_gateway
    ) -> None:
        use_case.execute(_callback(orderid="ORD-1001", code="TESTGATEWAY", outerId="ext-55"))

        context = primary_gateway.post_processed[0]
        assert context.order.id == "order-1"
        assert context.store.id == "store-a"
        assert context.outer_id == "ext-55"
        assert context.parameters["ORDERID"] == "ORD-1001"

    def test_gateway_with_nothing_to_report_persists_nothing(
        self,
        use_case: PostProcessPaymentUseCase,
        order_repository: InMemoryOrderRepository,
        primary_gateway,
    ) -> None:
        primary_gateway.post_process_returns_none = True

        result = use_case.execute(
            _callback(orderid="ORD-1001", code="TESTGATEWAY", outerId="ext-55")
        )

        assert result is None
        assert _stored(order_repository).in_payments[0].outer_id is None

    def test_logs_processed_callback(self, use_case: PostProcessPaymentUseCase) -> None:
        with capture_logs() as logs:
            use_case.execute(_callback(orderid="ORD-1001", code="TESTGATEWAY", outerId="ext-55"))

        processed = [log for log in logs if log["event"] == "payment_callback_processed"]
        assert len(processed) == 1
        assert processed[0]["order_number"] == "ORD-1001"
        assert processed[0]["gateway_code"] == "TESTGATEWAY"


# =============================================================================
# Gateway selection
# =============================================================================


class TestPostProcessPaymentGatewaySelection:
    def test_only_gateways_of_the_order_are_asked(
        self, use_case: PostProcessPaymentUseCase, manual_gateway
    ) -> None:
        use_case.execute(_callback(orderid="ORD-1001", code="TESTGATEWAY", outerId="ext-55"))

        assert manual_gateway.validated == []

    def test_explicit_code_selects_its_gateway(
        self,
        use_case: PostProcessPaymentUseCase,
        order_repository: InMemoryOrderRepository,
        order: CustomerOrder,
        primary_gateway,
        manual_gateway,
    ) -> None:
        order.in_payments.insert(
            0, PaymentIn(id="payment-0", gateway_code="DefaultManualPaymentMethod")
        )
        order_repository.save([order])

        use_case.execute(
            _callback(orderid="ORD-1001", code="DefaultManualPaymentMethod", outerId="m-1")
        )

        assert len(primary_gateway.validated) == 0
        assert len(manual_gateway.post_processed) == 1

    def test_unrecognized_callback_is_answered_without_error(
        self,
        use_case: PostProcessPaymentUseCase,
        order_repository: InMemoryOrderRepository,
        primary_gateway,
    ) -> None:
        with capture_logs() as logs:
            result = use_case.execute(_callback(orderid="ORD-1001", somethingElse="x"))

        assert result is not None
        assert result.is_success is False
        assert result.error_message == PAYMENT_METHOD_NOT_FOUND
        assert primary_gateway.post_processed == []
        assert _stored(order_repository).in_payments[0].outer_id is None
        assert [log["event"] for log in logs] == ["payment_callback_unmatched"]

    def test_explicit_code_of_another_gateway_matches_nothing(
        self, use_case: PostProcessPaymentUseCase, primary_gateway
    ) -> None:
        result = use_case.execute(
            _callback(orderid="ORD-1001", code="DefaultManualPaymentMethod", outerId="x")
        )

        assert result.error_message == PAYMENT_METHOD_NOT_FOUND
        assert primary_gateway.validated == []


# =============================================================================
# Failures
# =============================================================================


class TestPostProcessPaymentFailures:
    def test_missing_order_reference(self, use_case: PostProcessPaymentUseCase) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            use_case.execute(_callback(code="TESTGATEWAY"))

        assert exc_info.value.parameter == "orderid"
        assert str(exc_info.value) == "the 'orderid' parameter must be passed"

    def test_empty_order_reference(self, use_case: PostProcessPaymentUseCase) -> None:
        with pytest.raises(MissingParameterError):
            use_case.execute(_callback(orderid=""))

    def test_unknown_order(self, use_case: PostProcessPaymentUseCase) -> None:
        with capture_logs() as logs, pytest.raises(OrderNotFoundError):
            use_case.execute(_callback(orderid="ORD-404", code="TESTGATEWAY", outerId="x"))

        assert logs == [
            {"event": "order_not_found", "log_level": "warning", "order_reference": "ORD-404"}
        ]

    def test_unknown_store(
        self,
        use_case: PostProcessPaymentUseCase,
        store_repository: InMemoryStoreRepository,
    ) -> None:
        store_repository._stores.clear()

        with pytest.raises(StoreNotFoundError):
            use_case.execute(_callback(orderid="ORD-1001", code="TESTGATEWAY", outerId="x"))

    def test_outer_id_of_no_payment_when_all_are_anchored(
        self,
        use_case: PostProcessPaymentUseCase,
        order_repository: InMemoryOrderRepository,
        order: CustomerOrder,
    ) -> None:
        order.in_payments[0].outer_id = "ext-1"
        order_repository.save([order])

        with pytest.raises(PaymentNotFoundError):
            use_case.execute(_callback(orderid="ORD-1001", code="TESTGATEWAY", outerId="ext-2"))
