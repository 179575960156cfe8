"""Domain exceptions for orders-core.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors
    │   ├── MissingParameterError
    │   └── InvalidResponseGroupError
    ├── Not Found Errors
    │   └── NotFoundError
    │       ├── OrderNotFoundError
    │       ├── PaymentNotFoundError
    │       ├── StoreNotFoundError
    │       ├── PaymentMethodNotFoundError
    │       └── CartNotFoundError
    └── Authorization Errors
        └── AccessDeniedError

A payment callback that no gateway recognizes is NOT an exception. It is
returned as a PostProcessPaymentResult carrying an error message.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class MissingParameterError(DomainException):
    """Raised when a required request parameter is absent or empty.

    This is caller-input validation (HTTP 400), not a system fault.
    The request must not be retried unchanged.
    """

    def __init__(self, parameter: str) -> None:
        super().__init__(f"the '{parameter}' parameter must be passed")
        self.parameter = parameter


class InvalidResponseGroupError(DomainException):
    """Raised when a response group string names an unknown flag."""


# =============================================================================
# Not Found Errors
# =============================================================================


class NotFoundError(DomainException):
    """Base for every "entity does not exist" fault (HTTP 404)."""


class OrderNotFoundError(NotFoundError):
    """Raised when an order matches neither an id nor an order number."""


class PaymentNotFoundError(NotFoundError):
    """Raised when no payment of the order matches.

    On the callback path this also guards against outer ids that
    belong to no known payment.
    """


class StoreNotFoundError(NotFoundError):
    """Raised when the store referenced by an order does not exist."""


class PaymentMethodNotFoundError(NotFoundError):
    """Raised when a payment's gateway code has no active store payment method.

    An orphaned gateway code is a data-integrity error.
    """


class CartNotFoundError(NotFoundError):
    """Raised when a shopping cart does not exist (or was already converted)."""


# =============================================================================
# Authorization Errors
# =============================================================================


class AccessDeniedError(DomainException):
    """Raised when the caller holds no read permission scope matching the order.

    Always distinct from NotFoundError, even where the transport layer
    chooses to hide the difference from unauthenticated callers.
    """
