"""Payment gateway implementations shipped with the order module."""

from orders_core.infrastructure.gateways.manual import ManualPaymentGateway

__all__ = ["ManualPaymentGateway"]
