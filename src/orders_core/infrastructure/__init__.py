"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- In-memory adapters for orders, stores, carts, security and reporting
- Payment gateways shipped with the module
- Locking: keyed mutation locks
- Single-flight computation cache
- Time Provider: Clock abstraction for testability
- Logging configuration

Infrastructure adapters implement the ports defined in the application layer.
"""

from orders_core.infrastructure.cart import InMemoryCartService, InMemoryOrderBuilder
from orders_core.infrastructure.lock_provider import InMemoryLockProvider
from orders_core.infrastructure.number_generator import SequentialNumberGenerator
from orders_core.infrastructure.order_repository import InMemoryOrderRepository
from orders_core.infrastructure.reporting import (
    InMemoryChangeLogService,
    InMemoryStatisticsCollector,
    PlainTextInvoiceRenderer,
)
from orders_core.infrastructure.security_service import InMemorySecurityService
from orders_core.infrastructure.single_flight_cache import SingleFlightCache
from orders_core.infrastructure.store_repository import InMemoryStoreRepository
from orders_core.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryCartService",
    "InMemoryChangeLogService",
    "InMemoryLockProvider",
    "InMemoryOrderBuilder",
    "InMemoryOrderRepository",
    "InMemorySecurityService",
    "InMemoryStatisticsCollector",
    "InMemoryStoreRepository",
    "PlainTextInvoiceRenderer",
    "SequentialNumberGenerator",
    "SingleFlightCache",
    "SystemTimeProvider",
]
