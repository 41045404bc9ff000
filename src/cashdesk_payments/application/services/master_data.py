"""Cash desk and employee registration and lookup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cashdesk_payments.application.errors import NotFoundError, ValidationError
from cashdesk_payments.application.result import Failure, Result, Success
from cashdesk_payments.domain.entities import Address, CashDesk, Employee, EmployeeType
from cashdesk_payments.domain.exceptions import InvalidEntityError

if TYPE_CHECKING:
    from cashdesk_payments.application.ports import UnitOfWorkFactory

logger = logging.getLogger(__name__)

CASH_DESK_EXISTS = "Cash desk already exists."
CASH_DESK_NOT_FOUND = "Cash desk not found."
INVALID_CASH_DESK_NUMBER = "Invalid cashdesk number"
EMPLOYEE_EXISTS = "Employee already exists."
EMPLOYEE_NOT_FOUND = "Employee not found."


class MasterDataService:
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def list_cash_desks(self) -> list[CashDesk]:
        with self._uow_factory() as uow:
            return uow.cash_desks.list()

    def get_cash_desk(self, number: int) -> Result[CashDesk]:
        with self._uow_factory() as uow:
            cash_desk = uow.cash_desks.get(number)
        if cash_desk is None:
            return Failure(NotFoundError(CASH_DESK_NOT_FOUND))
        return Success(cash_desk)

    def register_cash_desk(self, number: int) -> Result[CashDesk]:
        try:
            cash_desk = CashDesk.create(number)
        except InvalidEntityError:
            return Failure(ValidationError(INVALID_CASH_DESK_NUMBER))

        with self._uow_factory() as uow:
            if uow.cash_desks.get(number) is not None:
                return Failure(ValidationError(CASH_DESK_EXISTS))
            uow.cash_desks.add(cash_desk)
            uow.commit()

        logger.info("Registered cash desk %s", number)
        return Success(cash_desk)

    def list_employees(self, employee_type: EmployeeType | None = None) -> list[Employee]:
        with self._uow_factory() as uow:
            return uow.employees.list(employee_type)

    def get_employee(self, registration_number: int) -> Result[Employee]:
        with self._uow_factory() as uow:
            employee = uow.employees.get(registration_number)
        if employee is None:
            return Failure(NotFoundError(EMPLOYEE_NOT_FOUND))
        return Success(employee)

    def register_employee(
        self,
        registration_number: int,
        first_name: str,
        last_name: str,
        employee_type: EmployeeType | str,
        address: Address | None = None,
    ) -> Result[Employee]:
        try:
            if isinstance(employee_type, str):
                employee_type = EmployeeType.parse(employee_type)
            employee = Employee.create(
                registration_number=registration_number,
                first_name=first_name,
                last_name=last_name,
                employee_type=employee_type,
                address=address,
            )
        except InvalidEntityError as e:
            return Failure(ValidationError(str(e)))

        with self._uow_factory() as uow:
            if uow.employees.get(registration_number) is not None:
                return Failure(ValidationError(EMPLOYEE_EXISTS))
            uow.employees.add(employee)
            uow.commit()

        logger.info("Registered %s %s", employee.type.value.lower(), registration_number)
        return Success(employee)
