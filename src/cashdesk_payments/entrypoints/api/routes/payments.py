"""
Payment routes.

GET    /api/payments?cashDesk=1&dateFrom=2024-05-13T00:00:00
GET    /api/payments/{id}
POST   /api/payments
PUT    /api/payments/{id}
PATCH  /api/payments/{id}                 body: {"paymentType": "Cash"}
POST   /api/payments/{id}/confirm
POST   /api/payments/{id}/items
DELETE /api/payments/{id}?deleteItems=true
"""

from __future__ import annotations

from datetime import datetime
from http import HTTPStatus

from fastapi import APIRouter, Depends, Query, Request, Response

from cashdesk_payments.application.dtos import AddPaymentItemRequest
from cashdesk_payments.application.result import Failure, Success
from cashdesk_payments.application.services import PaymentLifecycleService, PaymentQueryService
from cashdesk_payments.entrypoints.api.dependencies import (
    get_lifecycle_service,
    get_query_service,
)
from cashdesk_payments.entrypoints.api.problems import failure_response, problem_response
from cashdesk_payments.entrypoints.api.schemas import (
    NewPaymentCommand,
    NewPaymentItemCommand,
    PaymentDetailOut,
    PaymentOut,
    PaymentTypePatch,
)

router = APIRouter(prefix="/api/payments", tags=["payments"])

PROBLEM_RESPONSES = {
    400: {"description": "Validation failed (problem details)"},
    404: {"description": "Payment not found (problem details)"},
}


@router.get("", response_model=list[PaymentOut])
def list_payments(
    cash_desk: int | None = Query(default=None, alias="cashDesk"),
    date_from: datetime | None = Query(default=None, alias="dateFrom"),
    service: PaymentQueryService = Depends(get_query_service),
):
    summaries = service.list_payments(cash_desk_number=cash_desk, date_from=date_from)
    return [PaymentOut.from_summary(summary) for summary in summaries]


@router.get(
    "/{payment_id}",
    response_model=PaymentDetailOut,
    responses={404: PROBLEM_RESPONSES[404]},
)
def get_payment(
    payment_id: int,
    request: Request,
    service: PaymentQueryService = Depends(get_query_service),
):
    match service.get_payment(payment_id):
        case Success(value=detail):
            return PaymentDetailOut.from_detail(detail)
        case Failure() as failure:
            return failure_response(request, failure)


@router.post(
    "",
    status_code=HTTPStatus.CREATED,
    response_model=int,
    responses=PROBLEM_RESPONSES,
)
def create_payment(
    command: NewPaymentCommand,
    request: Request,
    response: Response,
    service: PaymentLifecycleService = Depends(get_lifecycle_service),
):
    match service.create_payment(command.to_create_request()):
        case Success(value=payment_id):
            response.headers["Location"] = str(
                request.url_for("get_payment", payment_id=payment_id)
            )
            return payment_id
        case Failure() as failure:
            return failure_response(request, failure)


@router.put(
    "/{payment_id}",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    responses=PROBLEM_RESPONSES,
)
def update_payment(
    payment_id: int,
    command: NewPaymentCommand,
    request: Request,
    service: PaymentLifecycleService = Depends(get_lifecycle_service),
):
    match service.update_payment(command.to_update_request(payment_id)):
        case Success():
            return Response(status_code=HTTPStatus.NO_CONTENT)
        case Failure() as failure:
            return failure_response(request, failure)


@router.patch(
    "/{payment_id}",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    responses=PROBLEM_RESPONSES,
)
def patch_payment(
    payment_id: int,
    patch: PaymentTypePatch,
    request: Request,
    service: PaymentLifecycleService = Depends(get_lifecycle_service),
):
    if patch.payment_type is None:
        return problem_response(request, HTTPStatus.BAD_REQUEST, "Missing 'paymentType'.")

    match service.set_payment_type(payment_id, patch.payment_type):
        case Success():
            return Response(status_code=HTTPStatus.NO_CONTENT)
        case Failure() as failure:
            return failure_response(request, failure)


@router.post(
    "/{payment_id}/confirm",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    responses=PROBLEM_RESPONSES,
)
def confirm_payment(
    payment_id: int,
    request: Request,
    service: PaymentLifecycleService = Depends(get_lifecycle_service),
):
    match service.confirm_payment(payment_id):
        case Success():
            return Response(status_code=HTTPStatus.NO_CONTENT)
        case Failure() as failure:
            return failure_response(request, failure)


@router.post(
    "/{payment_id}/items",
    status_code=HTTPStatus.CREATED,
    response_model=int,
    responses=PROBLEM_RESPONSES,
)
def add_payment_item(
    payment_id: int,
    command: NewPaymentItemCommand,
    request: Request,
    service: PaymentLifecycleService = Depends(get_lifecycle_service),
):
    result = service.add_payment_item(
        AddPaymentItemRequest(
            payment_id=payment_id,
            article_name=command.article_name,
            amount=command.amount,
            price=command.price,
        )
    )
    match result:
        case Success(value=item_id):
            return item_id
        case Failure() as failure:
            return failure_response(request, failure)


@router.delete(
    "/{payment_id}",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    responses=PROBLEM_RESPONSES,
)
def delete_payment(
    payment_id: int,
    request: Request,
    delete_items: bool = Query(default=False, alias="deleteItems"),
    service: PaymentLifecycleService = Depends(get_lifecycle_service),
):
    match service.delete_payment(payment_id, delete_items=delete_items):
        case Success():
            return Response(status_code=HTTPStatus.NO_CONTENT)
        case Failure() as failure:
            return failure_response(request, failure)
