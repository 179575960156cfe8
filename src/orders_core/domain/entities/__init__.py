"""Domain entities - Objects with identity and lifecycle."""

from orders_core.domain.entities.cart import ShoppingCart
from orders_core.domain.entities.order import CustomerOrder, PaymentIn, PaymentStatus, Shipment
from orders_core.domain.entities.permission import Identity, Permission
from orders_core.domain.entities.reporting import DashboardStatistics, OperationLog
from orders_core.domain.entities.store import Store, StorePaymentMethod

__all__ = [
    "CustomerOrder",
    "DashboardStatistics",
    "Identity",
    "OperationLog",
    "PaymentIn",
    "PaymentStatus",
    "Permission",
    "Shipment",
    "ShoppingCart",
    "Store",
    "StorePaymentMethod",
]
