from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class ShoppingCart:
    """The parts of a shopping cart this core needs to place an order."""

    id: str
    store_id: str
    customer_id: str | None = None
    currency: str = ""
    total: Decimal = Decimal("0")
    payment_gateway_code: str | None = None
