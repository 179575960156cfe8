"""Wiring of use cases onto concrete adapters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from orders_core.application.services import (
    OrderLocator,
    OrderScopeFilter,
    PaymentGatewayRegistry,
)
from orders_core.application.use_cases import (
    CreateOrderFromCartUseCase,
    GetDashboardStatisticsUseCase,
    GetInvoiceUseCase,
    GetOrderChangesUseCase,
    GetOrderUseCase,
    NewDocumentsUseCase,
    PostProcessPaymentUseCase,
    ProcessPaymentUseCase,
    SearchOrdersUseCase,
    UpdateOrderUseCase,
)
from orders_core.config import OrderModuleSettings
from orders_core.infrastructure import (
    InMemoryLockProvider,
    SingleFlightCache,
    SystemTimeProvider,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orders_core.application.ports import (
        CartService,
        ChangeLogService,
        ComputationCache,
        InvoiceRenderer,
        LockProvider,
        NumberGenerator,
        OrderBuilder,
        OrderRepository,
        OrderSearchService,
        PaymentGateway,
        SecurityService,
        StatisticsCollector,
        StoreRepository,
        TimeProvider,
    )


@dataclass(frozen=True, slots=True)
class OrderModule:
    """Every operation the order module exposes to its transport layer."""

    settings: OrderModuleSettings
    search_orders: SearchOrdersUseCase
    get_order: GetOrderUseCase
    update_order: UpdateOrderUseCase
    process_payment: ProcessPaymentUseCase
    post_process_payment: PostProcessPaymentUseCase
    create_order_from_cart: CreateOrderFromCartUseCase
    new_documents: NewDocumentsUseCase
    dashboard_statistics: GetDashboardStatisticsUseCase
    get_invoice: GetInvoiceUseCase
    get_order_changes: GetOrderChangesUseCase


def build_order_module(
    *,
    security_service: SecurityService,
    order_repository: OrderRepository,
    search_service: OrderSearchService,
    store_repository: StoreRepository,
    cart_service: CartService,
    order_builder: OrderBuilder,
    number_generator: NumberGenerator,
    change_log: ChangeLogService,
    invoice_renderer: InvoiceRenderer,
    statistics_collector: StatisticsCollector,
    gateways: Iterable[PaymentGateway],
    settings: OrderModuleSettings | None = None,
    lock_provider: LockProvider | None = None,
    time_provider: TimeProvider | None = None,
    statistics_cache: ComputationCache | None = None,
) -> OrderModule:
    settings = settings or OrderModuleSettings()
    lock_provider = lock_provider or InMemoryLockProvider()
    time_provider = time_provider or SystemTimeProvider()
    statistics_cache = statistics_cache or SingleFlightCache(
        time_provider, timedelta(seconds=settings.statistics_cache_ttl_seconds)
    )

    scope_filter = OrderScopeFilter(security_service, settings)
    locator = OrderLocator(order_repository, search_service)
    registry = PaymentGatewayRegistry(gateways)

    return OrderModule(
        settings=settings,
        search_orders=SearchOrdersUseCase(scope_filter, search_service),
        get_order=GetOrderUseCase(scope_filter, locator),
        update_order=UpdateOrderUseCase(scope_filter, locator, order_repository),
        process_payment=ProcessPaymentUseCase(
            locator, order_repository, store_repository, registry
        ),
        post_process_payment=PostProcessPaymentUseCase(
            locator, order_repository, store_repository, registry
        ),
        create_order_from_cart=CreateOrderFromCartUseCase(
            scope_filter, lock_provider, cart_service, order_builder
        ),
        new_documents=NewDocumentsUseCase(locator, store_repository, number_generator, settings),
        dashboard_statistics=GetDashboardStatisticsUseCase(
            time_provider, statistics_collector, statistics_cache, settings
        ),
        get_invoice=GetInvoiceUseCase(scope_filter, locator, invoice_renderer),
        get_order_changes=GetOrderChangesUseCase(locator, change_log),
    )
