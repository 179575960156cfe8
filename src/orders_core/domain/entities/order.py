"""Customer order aggregate with its incoming payments and shipments.

Unlike value objects, these entities are mutable: payment gateways update
payment status in place, and the orchestrator assigns outer ids before the
order is handed back to the repository.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class PaymentStatus(Enum):
    """Lifecycle states of an incoming payment."""

    NEW = "New"
    PENDING = "Pending"
    AUTHORIZED = "Authorized"
    PAID = "Paid"
    PARTIALLY_REFUNDED = "PartiallyRefunded"
    REFUNDED = "Refunded"
    VOIDED = "Voided"
    CANCELLED = "Cancelled"
    DECLINED = "Declined"
    ERROR = "Error"


@dataclass(slots=True)
class PaymentIn:
    """Incoming payment of a customer order.

    outer_id is unset until the gateway responds. Once set it is the
    key used to match later gateway callbacks to this payment.
    """

    id: str
    gateway_code: str
    number: str = ""
    status: PaymentStatus = PaymentStatus.NEW
    outer_id: str | None = None
    currency: str = ""
    customer_id: str | None = None
    amount: Decimal = Decimal("0")
    is_approved: bool = False


@dataclass(slots=True)
class Shipment:
    id: str
    number: str = ""
    status: str = "New"
    currency: str = ""


@dataclass(slots=True)
class CustomerOrder:
    """Customer order aggregate.

    scopes is transient: it is populated once per read response to tell
    the caller which scope strings apply to this order, and it is never
    persisted.
    """

    id: str
    number: str
    store_id: str
    currency: str = ""
    customer_id: str | None = None
    employee_id: str | None = None
    shopping_cart_id: str | None = None
    total: Decimal = Decimal("0")
    created_date: datetime | None = None
    in_payments: list[PaymentIn] = field(default_factory=list)
    shipments: list[Shipment] = field(default_factory=list)
    scopes: tuple[str, ...] = ()

    def find_payment(self, payment_id: str) -> PaymentIn | None:
        return next((p for p in self.in_payments if p.id == payment_id), None)

    def payment_gateway_codes(self) -> list[str]:
        """Distinct gateway codes of this order's payments, in payment order."""
        return list(dict.fromkeys(p.gateway_code for p in self.in_payments))
