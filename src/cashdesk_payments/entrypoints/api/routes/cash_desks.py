from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends, Request

from cashdesk_payments.application.result import Failure, Success
from cashdesk_payments.application.services import MasterDataService
from cashdesk_payments.entrypoints.api.dependencies import get_master_data_service
from cashdesk_payments.entrypoints.api.problems import failure_response
from cashdesk_payments.entrypoints.api.schemas import CashDeskIn, CashDeskOut

router = APIRouter(prefix="/api/cashdesks", tags=["cash desks"])


@router.get("", response_model=list[CashDeskOut])
def list_cash_desks(service: MasterDataService = Depends(get_master_data_service)):
    return [CashDeskOut.from_entity(cash_desk) for cash_desk in service.list_cash_desks()]


@router.get("/{number}", response_model=CashDeskOut)
def get_cash_desk(
    number: int,
    request: Request,
    service: MasterDataService = Depends(get_master_data_service),
):
    match service.get_cash_desk(number):
        case Success(value=cash_desk):
            return CashDeskOut.from_entity(cash_desk)
        case Failure() as failure:
            return failure_response(request, failure)


@router.post("", status_code=HTTPStatus.CREATED, response_model=CashDeskOut)
def register_cash_desk(
    command: CashDeskIn,
    request: Request,
    service: MasterDataService = Depends(get_master_data_service),
):
    match service.register_cash_desk(command.number):
        case Success(value=cash_desk):
            return CashDeskOut.from_entity(cash_desk)
        case Failure() as failure:
            return failure_response(request, failure)
