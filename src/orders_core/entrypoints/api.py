"""FastAPI routes of the order module.

Endpoints are plain (sync) functions: FastAPI runs each request on its
own worker thread, which is what the keyed locks and the single-flight
cache are built for.

Fault mapping:
    NotFoundError           -> 404
    AccessDeniedError       -> 401
    MissingParameterError   -> 400
    InvalidResponseGroupError -> 400
    pydantic ValidationError  -> 422

The payment callback answers 200 whenever the order was found, even
when no gateway recognized the callback; the failure is in the body.
"""

from datetime import datetime
from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Body, Depends, FastAPI, Header, HTTPException, Query, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from orders_core.application.use_cases import ProcessPaymentRequest
from orders_core.domain.exceptions import (
    AccessDeniedError,
    DomainException,
    InvalidResponseGroupError,
    MissingParameterError,
    NotFoundError,
)
from orders_core.domain.value_objects import ResponseGroup
from orders_core.entrypoints.container import OrderModule
from orders_core.entrypoints.schemas import (
    BankCardInfoRequest,
    OrderSearchRequest,
    PaymentCallbackRequest,
    customer_order_adapter,
)
from orders_core.infrastructure.logging_config import configure_logging

logger = structlog.get_logger(__name__)

_STATUS_BY_EXCEPTION: dict[type[Exception], int] = {
    NotFoundError: 404,
    AccessDeniedError: 401,
    MissingParameterError: 400,
    InvalidResponseGroupError: 400,
    ValidationError: 422,
}


def get_module(request: Request) -> OrderModule:
    return request.app.state.order_module


def current_user_name(x_user_name: Annotated[str | None, Header()] = None) -> str:
    if not x_user_name:
        raise HTTPException(status_code=401, detail="Missing X-User-Name header")
    return x_user_name


Module = Annotated[OrderModule, Depends(get_module)]
Caller = Annotated[str, Depends(current_user_name)]
RespGroup = Annotated[str | None, Query(alias="respGroup")]

orders = APIRouter(prefix="/api/order/customerOrders", tags=["orders"])
module_routes = APIRouter(prefix="/api", tags=["order-module"])


@orders.post("/search")
def search_orders(body: OrderSearchRequest, caller: Caller, module: Module) -> Any:
    result = module.search_orders.execute(caller, body.to_criteria())
    return {
        "customer_orders": jsonable_encoder(result.results),
        "total_count": result.total_count,
    }


@orders.get("/number/{number}")
def get_order_by_number(
    number: str, caller: Caller, module: Module, resp_group: RespGroup = None
) -> Any:
    order = module.get_order.by_number(caller, number, _response_group(resp_group))
    return jsonable_encoder(order)


@orders.get("/invoice/{order_number}")
def get_invoice(order_number: str, caller: Caller, module: Module) -> Response:
    document = module.get_invoice.execute(caller, order_number)
    return Response(content=document.content, media_type=document.media_type)


@orders.get("/{order_id}")
def get_order_by_id(
    order_id: str, caller: Caller, module: Module, resp_group: RespGroup = None
) -> Any:
    order = module.get_order.by_identifier(caller, order_id, _response_group(resp_group))
    return jsonable_encoder(order)


@orders.put("", status_code=204)
def update_order(
    body: Annotated[dict[str, Any], Body()], caller: Caller, module: Module
) -> Response:
    order = customer_order_adapter.validate_python(body)
    module.update_order.execute(caller, order)
    return Response(status_code=204)


@orders.post("/{order_id}/processPayment/{payment_id}")
def process_payment(
    order_id: str,
    payment_id: str,
    module: Module,
    bank_card_info: Annotated[BankCardInfoRequest | None, Body()] = None,
) -> Any:
    request = ProcessPaymentRequest(
        order_id=order_id,
        payment_id=payment_id,
        bank_card_info=bank_card_info.to_bank_card_info() if bank_card_info else None,
    )
    return jsonable_encoder(module.process_payment.execute(request))


@orders.post("/{cart_id}")
def create_order_from_cart(cart_id: str, caller: Caller, module: Module) -> Any:
    return jsonable_encoder(module.create_order_from_cart.execute(caller, cart_id))


@orders.get("/{order_id}/shipments/new")
def get_new_shipment(order_id: str, module: Module) -> Any:
    return jsonable_encoder(module.new_documents.new_shipment(order_id))


@orders.get("/{order_id}/payments/new")
def get_new_payment(order_id: str, module: Module) -> Any:
    return jsonable_encoder(module.new_documents.new_payment(order_id))


@orders.get("/{order_id}/changes")
def get_order_changes(order_id: str, module: Module) -> Any:
    return jsonable_encoder(module.get_order_changes.execute(order_id))


@module_routes.get("/order/dashboardStatistics")
def get_dashboard_statistics(
    module: Module, start: datetime | None = None, end: datetime | None = None
) -> Any:
    return jsonable_encoder(module.dashboard_statistics.execute(start, end))


@module_routes.post("/paymentcallback")
def post_process_payment(
    module: Module,
    callback: Annotated[PaymentCallbackRequest | None, Body()] = None,
) -> Any:
    parameters = (callback or PaymentCallbackRequest()).to_parameters()
    return jsonable_encoder(module.post_process_payment.execute(parameters))


def _response_group(value: str | None) -> ResponseGroup | None:
    return ResponseGroup.parse(value) if value else None


def _exception_handler(status_code: int):
    def handle(request: Request, exc: Exception) -> JSONResponse:
        logger.info(
            "request_failed",
            path=request.url.path,
            status_code=status_code,
            error=type(exc).__name__,
        )
        detail: Any = (
            exc.errors(include_url=False, include_context=False)
            if isinstance(exc, ValidationError)
            else str(exc)
        )
        return JSONResponse(
            status_code=status_code,
            content={"error": type(exc).__name__, "detail": jsonable_encoder(detail)},
        )

    return handle


def create_app(module: OrderModule) -> FastAPI:
    """Build the HTTP application around a wired OrderModule."""
    configure_logging(module.settings)

    app = FastAPI(title="orders-core")
    app.state.order_module = module
    app.include_router(orders)
    app.include_router(module_routes)

    for exc_type, status_code in _STATUS_BY_EXCEPTION.items():
        app.add_exception_handler(exc_type, _exception_handler(status_code))
    app.add_exception_handler(DomainException, _exception_handler(400))

    return app
