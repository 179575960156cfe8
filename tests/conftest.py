"""Shared pytest fixtures for the test suite."""

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from decimal import Decimal

import pytest

from orders_core.application.dtos import (
    PostProcessPaymentContext,
    PostProcessPaymentResult,
    ProcessPaymentContext,
    ProcessPaymentResult,
    ValidatePostProcessRequestResult,
)
from orders_core.application.ports import PaymentGateway
from orders_core.application.services import OrderLocator, OrderScopeFilter
from orders_core.domain.entities import (
    CustomerOrder,
    Identity,
    PaymentIn,
    PaymentStatus,
    Permission,
    Store,
    StorePaymentMethod,
)
from orders_core.domain.value_objects import PermissionScope
from orders_core.infrastructure.lock_provider import InMemoryLockProvider
from orders_core.infrastructure.order_repository import InMemoryOrderRepository
from orders_core.infrastructure.security_service import InMemorySecurityService
from orders_core.infrastructure.store_repository import InMemoryStoreRepository
from orders_core.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def lock_provider() -> InMemoryLockProvider:
    """An in-memory lock provider for testing."""
    return InMemoryLockProvider()


# =============================================================================
# Repositories and services
# =============================================================================


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def store_repository() -> InMemoryStoreRepository:
    return InMemoryStoreRepository()


@pytest.fixture
def security_service() -> InMemorySecurityService:
    """Users covering each kind of read permission.

    - admin: administrator, no explicit permissions
    - global-reader: unscoped order:read plus order:read_prices
    - store-a-reader: order:read scoped to store-a
    - responsible-reader: order:read scoped to orders they are responsible for
    - no-scope-reader: order:read:export scoped to a store with an empty id
    - stranger: known user without any order permission
    - clerk: may create orders, but not read them
    """
    service = InMemorySecurityService()
    service.add_user(Identity("admin", is_administrator=True))
    service.add_user(
        Identity("global-reader"),
        [Permission("order:read"), Permission("order:read_prices")],
    )
    service.add_user(
        Identity("store-a-reader"),
        [Permission("order:read", (PermissionScope.store("store-a"),))],
    )
    service.add_user(
        Identity("responsible-reader"),
        [Permission("order:read", (PermissionScope.responsible(),))],
    )
    service.add_user(
        Identity("no-scope-reader"),
        [Permission("order:read:export", (PermissionScope.store(""),))],
    )
    service.add_user(Identity("stranger"), [Permission("catalog:read")])
    service.add_user(Identity("clerk"), [Permission("order:create")])
    return service


@pytest.fixture
def scope_filter(security_service: InMemorySecurityService) -> OrderScopeFilter:
    return OrderScopeFilter(security_service)


@pytest.fixture
def order_locator(order_repository: InMemoryOrderRepository) -> OrderLocator:
    return OrderLocator(order_repository, order_repository)


# =============================================================================
# Sample data
# =============================================================================


@pytest.fixture
def store() -> Store:
    return Store(
        id="store-a",
        name="Store A",
        payment_methods=(
            StorePaymentMethod("TESTGATEWAY"),
            StorePaymentMethod("DefaultManualPaymentMethod"),
            StorePaymentMethod("DisabledGateway", is_active=False),
        ),
    )


@pytest.fixture
def order(fixed_time: datetime) -> CustomerOrder:
    return CustomerOrder(
        id="order-1",
        number="ORD-1001",
        store_id="store-a",
        currency="USD",
        customer_id="customer-1",
        employee_id="responsible-reader",
        total=Decimal("150.00"),
        created_date=fixed_time,
        in_payments=[
            PaymentIn(
                id="payment-1",
                gateway_code="TESTGATEWAY",
                number="PI-1",
                currency="USD",
                customer_id="customer-1",
                amount=Decimal("150.00"),
            )
        ],
    )


# =============================================================================
# Payment gateways
# =============================================================================


class FakeGateway(PaymentGateway):
    """Configurable gateway that records every call it receives.

    - Recognizes a callback when its "code" parameter equals this code
      and it carries an "outerId"
    - process_payment() answers with process_outer_id
    - post_process_payment() marks the payment paid, or returns None
      when post_process_returns_none is set
    """

    def __init__(
        self,
        code: str = "TESTGATEWAY",
        *,
        process_outer_id: str | None = "ext-1",
        post_process_returns_none: bool = False,
    ) -> None:
        self.code = code
        self.process_outer_id = process_outer_id
        self.post_process_returns_none = post_process_returns_none
        self.processed: list[ProcessPaymentContext] = []
        self.validated: list[Mapping[str, str]] = []
        self.post_processed: list[PostProcessPaymentContext] = []

    def process_payment(self, context: ProcessPaymentContext) -> ProcessPaymentResult:
        self.processed.append(context)
        return ProcessPaymentResult(
            is_success=True,
            new_payment_status=PaymentStatus.PENDING,
            outer_id=self.process_outer_id,
            redirect_url="https://gateway.test/pay",
        )

    def validate_post_process_request(
        self, parameters: Mapping[str, str]
    ) -> ValidatePostProcessRequestResult:
        self.validated.append(parameters)
        if (parameters.get("code") or "").lower() != self.code.lower():
            return ValidatePostProcessRequestResult(is_success=False)
        outer_id = parameters.get("outerId")
        return ValidatePostProcessRequestResult(is_success=bool(outer_id), outer_id=outer_id)

    def post_process_payment(
        self, context: PostProcessPaymentContext
    ) -> PostProcessPaymentResult | None:
        self.post_processed.append(context)
        if self.post_process_returns_none:
            return None
        context.payment.status = PaymentStatus.PAID
        return PostProcessPaymentResult(
            is_success=True,
            new_payment_status=PaymentStatus.PAID,
            outer_id=context.outer_id,
        )


@pytest.fixture
def gateway_factory() -> Callable[..., FakeGateway]:
    """Build FakeGateway instances without importing conftest."""
    return FakeGateway
