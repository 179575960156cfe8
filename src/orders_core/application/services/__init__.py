"""Application services shared by several use cases."""

from orders_core.application.services.gateway_registry import PaymentGatewayRegistry
from orders_core.application.services.order_locator import OrderLocator
from orders_core.application.services.scope_filter import OrderScopeFilter

__all__ = [
    "OrderLocator",
    "OrderScopeFilter",
    "PaymentGatewayRegistry",
]
