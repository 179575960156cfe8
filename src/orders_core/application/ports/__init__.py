"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from orders_core.application.ports.cache import ComputationCache
from orders_core.application.ports.cart import CartService, OrderBuilder
from orders_core.application.ports.lock_provider import LockProvider
from orders_core.application.ports.number_generator import NumberGenerator
from orders_core.application.ports.order_repository import OrderRepository, OrderSearchService
from orders_core.application.ports.payment_gateway import PaymentGateway
from orders_core.application.ports.reporting import (
    ChangeLogService,
    InvoiceRenderer,
    StatisticsCollector,
)
from orders_core.application.ports.security_service import SecurityService
from orders_core.application.ports.store_repository import StoreRepository
from orders_core.application.ports.time_provider import TimeProvider, as_utc

__all__ = [
    "CartService",
    "ChangeLogService",
    "ComputationCache",
    "InvoiceRenderer",
    "LockProvider",
    "NumberGenerator",
    "OrderBuilder",
    "OrderRepository",
    "OrderSearchService",
    "PaymentGateway",
    "SecurityService",
    "StatisticsCollector",
    "StoreRepository",
    "TimeProvider",
    "as_utc",
]
