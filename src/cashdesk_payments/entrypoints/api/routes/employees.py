from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends, Query, Request

from cashdesk_payments.application.result import Failure, Success
from cashdesk_payments.application.services import MasterDataService
from cashdesk_payments.domain.entities import EmployeeType
from cashdesk_payments.domain.exceptions import InvalidEntityError
from cashdesk_payments.entrypoints.api.dependencies import get_master_data_service
from cashdesk_payments.entrypoints.api.problems import failure_response, problem_response
from cashdesk_payments.entrypoints.api.schemas import EmployeeIn, EmployeeOut

router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeOut])
def list_employees(
    request: Request,
    type: str | None = Query(default=None),
    service: MasterDataService = Depends(get_master_data_service),
):
    employee_type = None
    if type is not None:
        try:
            employee_type = EmployeeType.parse(type)
        except InvalidEntityError as e:
            return problem_response(request, HTTPStatus.BAD_REQUEST, str(e))
    return [EmployeeOut.from_entity(employee) for employee in service.list_employees(employee_type)]


@router.get("/{registration_number}", response_model=EmployeeOut)
def get_employee(
    registration_number: int,
    request: Request,
    service: MasterDataService = Depends(get_master_data_service),
):
    match service.get_employee(registration_number):
        case Success(value=employee):
            return EmployeeOut.from_entity(employee)
        case Failure() as failure:
            return failure_response(request, failure)


@router.post("", status_code=HTTPStatus.CREATED, response_model=EmployeeOut)
def register_employee(
    command: EmployeeIn,
    request: Request,
    service: MasterDataService = Depends(get_master_data_service),
):
    result = service.register_employee(
        registration_number=command.registration_number,
        first_name=command.first_name,
        last_name=command.last_name,
        employee_type=command.type,
        address=command.address_entity(),
    )
    match result:
        case Success(value=employee):
            return EmployeeOut.from_entity(employee)
        case Failure() as failure:
            return failure_response(request, failure)
