"""Request bodies of the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field, TypeAdapter

from orders_core.application.dtos import BankCardInfo, PaymentCallbackParameters
from orders_core.domain.entities import CustomerOrder
from orders_core.domain.value_objects import OrderSearchCriteria, ResponseGroup

customer_order_adapter: TypeAdapter[CustomerOrder] = TypeAdapter(CustomerOrder)


class OrderSearchRequest(BaseModel):
    number: str | None = None
    store_ids: list[str] | None = None
    employee_id: str | None = None
    customer_id: str | None = None
    response_group: str | None = None
    skip: int = Field(default=0, ge=0)
    take: int = Field(default=20, ge=0, le=1000)

    def to_criteria(self) -> OrderSearchCriteria:
        return OrderSearchCriteria(
            number=self.number,
            store_ids=tuple(self.store_ids) if self.store_ids is not None else None,
            employee_id=self.employee_id,
            customer_id=self.customer_id,
            response_group=ResponseGroup.parse(self.response_group),
            skip=self.skip,
            take=self.take,
        )


class KeyValue(BaseModel):
    key: str
    value: str = ""


class PaymentCallbackRequest(BaseModel):
    parameters: list[KeyValue] = Field(default_factory=list)

    def to_parameters(self) -> PaymentCallbackParameters:
        return PaymentCallbackParameters((item.key, item.value) for item in self.parameters)


class BankCardInfoRequest(BaseModel):
    card_number: str = ""
    card_cvv2: str = ""
    card_expiration_month: int | None = Field(default=None, ge=1, le=12)
    card_expiration_year: int | None = None
    card_holder_name: str = ""
    card_type: str = ""

    def to_bank_card_info(self) -> BankCardInfo:
        return BankCardInfo(**self.model_dump())
