from __future__ import annotations

from typing import TYPE_CHECKING

from orders_core.application.dtos import (
    PostProcessPaymentResult,
    ProcessPaymentResult,
    ValidatePostProcessRequestResult,
)
from orders_core.application.ports import PaymentGateway
from orders_core.domain.entities import PaymentStatus

if TYPE_CHECKING:
    from collections.abc import Mapping

    from orders_core.application.dtos import PostProcessPaymentContext, ProcessPaymentContext

OUTER_ID_PARAMETER = "outerId"


class ManualPaymentGateway(PaymentGateway):
    """Payment settled outside any payment system (cash, bank transfer).

    Initiation leaves the payment pending. A back-office confirmation
    arrives as a callback carrying this gateway's code and a reference
    number in "outerId", and marks the payment paid. Confirming an
    already paid payment changes nothing.
    """

    code = "DefaultManualPaymentMethod"

    def process_payment(self, context: ProcessPaymentContext) -> ProcessPaymentResult:
        context.payment.status = PaymentStatus.PENDING
        return ProcessPaymentResult(is_success=True, new_payment_status=PaymentStatus.PENDING)

    def validate_post_process_request(
        self, parameters: Mapping[str, str]
    ) -> ValidatePostProcessRequestResult:
        code = parameters.get("code") or ""
        outer_id = parameters.get(OUTER_ID_PARAMETER)
        if code.lower() != self.code.lower() or not outer_id:
            return ValidatePostProcessRequestResult(is_success=False)
        return ValidatePostProcessRequestResult(is_success=True, outer_id=outer_id)

    def post_process_payment(self, context: PostProcessPaymentContext) -> PostProcessPaymentResult:
        payment = context.payment
        if payment.status is not PaymentStatus.PAID:
            payment.status = PaymentStatus.PAID
            payment.is_approved = True
        return PostProcessPaymentResult(
            is_success=True,
            new_payment_status=payment.status,
            outer_id=context.outer_id,
        )
