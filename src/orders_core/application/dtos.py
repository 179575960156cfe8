"""Data Transfer Objects passed between use cases and payment gateways."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from orders_core.domain.entities import CustomerOrder, PaymentIn, PaymentStatus, Store


class PaymentCallbackParameters(Mapping[str, str]):
    """Raw parameter bag of a gateway callback.

    Keys are case-insensitive ("orderId" and "orderid" are the same
    parameter). Repeated keys are joined with a comma in arrival order.
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] | Mapping[str, str] = ()) -> None:
        self._items: dict[str, tuple[str, str]] = {}
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for key, value in items:
            folded = key.lower()
            if folded in self._items:
                original_key, existing = self._items[folded]
                self._items[folded] = (original_key, f"{existing},{value}")
            else:
                self._items[folded] = (key, value)

    def __getitem__(self, key: str) -> str:
        return self._items[key.lower()][1]

    def __iter__(self) -> Iterator[str]:
        return (original_key for original_key, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._items

    def __repr__(self) -> str:
        return f"PaymentCallbackParameters({dict(self)!r})"


@dataclass(frozen=True, slots=True)
class BankCardInfo:
    """Card data forwarded verbatim to the gateway; never stored."""

    card_number: str = ""
    card_cvv2: str = ""
    card_expiration_month: int | None = None
    card_expiration_year: int | None = None
    card_holder_name: str = ""
    card_type: str = ""


# =============================================================================
# Gateway evaluation contexts
# =============================================================================


@dataclass(frozen=True, slots=True)
class ProcessPaymentContext:
    order: CustomerOrder
    payment: PaymentIn
    store: Store
    bank_card_info: BankCardInfo | None = None


@dataclass(frozen=True, slots=True)
class PostProcessPaymentContext:
    order: CustomerOrder
    payment: PaymentIn
    store: Store
    outer_id: str | None
    parameters: Mapping[str, str]


# =============================================================================
# Gateway results
# =============================================================================


@dataclass(frozen=True, slots=True)
class ProcessPaymentResult:
    """Result of a payment initiation, returned to the caller verbatim."""

    is_success: bool
    new_payment_status: PaymentStatus | None = None
    outer_id: str | None = None
    redirect_url: str | None = None
    html_form: str | None = None
    error_message: str | None = None


@dataclass(frozen=True, slots=True)
class ValidatePostProcessRequestResult:
    """Whether a callback parameter bag is addressed to a gateway."""

    is_success: bool
    outer_id: str | None = None


@dataclass(frozen=True, slots=True)
class PostProcessPaymentResult:
    """Result of callback post-processing.

    order_id carries the order NUMBER once the orchestrator has
    processed the callback. A result with only error_message set means
    no gateway recognized the callback.
    """

    is_success: bool = False
    new_payment_status: PaymentStatus | None = None
    outer_id: str | None = None
    order_id: str | None = None
    return_url: str | None = None
    error_message: str | None = None


# =============================================================================
# Search
# =============================================================================


@dataclass(frozen=True, slots=True)
class OrderSearchResult:
    results: list[CustomerOrder] = field(default_factory=list)
    total_count: int = 0
