"""Use cases - The operations the order module exposes to its transport layer."""

from orders_core.application.use_cases.create_order_from_cart import CreateOrderFromCartUseCase
from orders_core.application.use_cases.dashboard_statistics import GetDashboardStatisticsUseCase
from orders_core.application.use_cases.get_invoice import GetInvoiceUseCase, InvoiceDocument
from orders_core.application.use_cases.get_order import GetOrderUseCase
from orders_core.application.use_cases.get_order_changes import GetOrderChangesUseCase
from orders_core.application.use_cases.new_documents import NewDocumentsUseCase
from orders_core.application.use_cases.post_process_payment import (
    PAYMENT_METHOD_NOT_FOUND,
    PostProcessPaymentUseCase,
)
from orders_core.application.use_cases.process_payment import (
    ProcessPaymentRequest,
    ProcessPaymentUseCase,
)
from orders_core.application.use_cases.search_orders import SearchOrdersUseCase
from orders_core.application.use_cases.update_order import UpdateOrderUseCase

__all__ = [
    "PAYMENT_METHOD_NOT_FOUND",
    "CreateOrderFromCartUseCase",
    "GetDashboardStatisticsUseCase",
    "GetInvoiceUseCase",
    "GetOrderChangesUseCase",
    "GetOrderUseCase",
    "InvoiceDocument",
    "NewDocumentsUseCase",
    "PostProcessPaymentUseCase",
    "ProcessPaymentRequest",
    "ProcessPaymentUseCase",
    "SearchOrdersUseCase",
    "UpdateOrderUseCase",
]
