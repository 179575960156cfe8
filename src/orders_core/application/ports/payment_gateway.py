from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from orders_core.application.dtos import (
        PostProcessPaymentContext,
        PostProcessPaymentResult,
        ProcessPaymentContext,
        ProcessPaymentResult,
        ValidatePostProcessRequestResult,
    )


class PaymentGateway(ABC):
    """Port for a payment gateway implementation.

    Contract:
    - code identifies the gateway; stores enable it by configuring a
      payment method with the same code (compared case-insensitively)
    - Implementations are stateless per invocation: results depend only
      on the context they are given
    - validate_post_process_request() MUST be side-effect free; the
      orchestrator calls it on every candidate gateway of an order
    - post_process_payment() owns duplicate suppression: the same callback
      may be delivered, and post-processed, more than once
    """

    code: str

    @abstractmethod
    def process_payment(self, context: ProcessPaymentContext) -> ProcessPaymentResult:
        """Initiate a payment with the external payment system."""

    @abstractmethod
    def validate_post_process_request(
        self, parameters: Mapping[str, str]
    ) -> ValidatePostProcessRequestResult:
        """Report whether a callback parameter bag is addressed to this gateway.

        Returns:
            A successful result carrying the outer id asserted by the
            callback, or an unsuccessful one if the bag is not ours.
        """

    @abstractmethod
    def post_process_payment(
        self, context: PostProcessPaymentContext
    ) -> PostProcessPaymentResult | None:
        """Apply a validated callback to the payment.

        Returns:
            The result to report to the caller, or None if there is
            nothing to persist.
        """
