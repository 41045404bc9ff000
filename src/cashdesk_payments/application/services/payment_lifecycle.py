from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from cashdesk_payments.application.errors import NotFoundError, ValidationError
from cashdesk_payments.application.result import Failure, Result, Success
from cashdesk_payments.domain.entities import PaymentItem, PaymentType
from cashdesk_payments.domain.entities.payment import Payment
from cashdesk_payments.domain.exceptions import InvalidPaymentItemError, InvalidPaymentTypeError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cashdesk_payments.application.dtos import (
        AddPaymentItemRequest,
        CreatePaymentRequest,
        PaymentItemInput,
        UpdatePaymentRequest,
    )
    from cashdesk_payments.application.ports import TimeProvider, UnitOfWork, UnitOfWorkFactory
    from cashdesk_payments.domain.entities import CashDesk, Employee

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_DATE_TOLERANCE = timedelta(minutes=1)

INVALID_CASH_DESK = "Invalid cashdesk"
INVALID_EMPLOYEE = "Invalid employee"
INVALID_PAYMENT_TYPE = "Invalid payment type."
INSUFFICIENT_RIGHTS = "Insufficient rights to create a credit card payment."
INVALID_PAYMENT_DATE = "Invalid payment date"
PAYMENT_NOT_FOUND = "Payment not found."
ALREADY_CONFIRMED = "Payment already confirmed."
HAS_PAYMENT_ITEMS = "Payment has payment items."

# ConfirmPayment reports without the trailing period.
CONFIRM_PAYMENT_NOT_FOUND = "Payment not found"
CONFIRM_ALREADY_CONFIRMED = "Payment already confirmed"


@dataclass(frozen=True, slots=True)
class _PaymentDetails:
    """Validated references and attributes shared by create and update."""

    cash_desk: CashDesk
    employee: Employee
    payment_date_time: datetime
    payment_type: PaymentType


def as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class PaymentLifecycleService:
    """Validates and executes every mutation of a payment.

    Responsibilities:
    - Resolve cash desk and employee references
    - Enforce the credit-card-requires-manager rule
    - Enforce the payment date tolerance against the injected clock
    - Keep confirmed payments immutable
    - Run each operation in its own unit of work (commit or rollback)

    Every operation returns Success(value) or Failure(ValidationError |
    NotFoundError); validation outcomes are never raised.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        time_provider: TimeProvider,
        payment_date_tolerance: timedelta = DEFAULT_PAYMENT_DATE_TOLERANCE,
    ) -> None:
        self._uow_factory = uow_factory
        self._time_provider = time_provider
        self._payment_date_tolerance = payment_date_tolerance

    def create_payment(self, request: CreatePaymentRequest) -> Result[int]:
        """Create an open payment, optionally with initial items.

        Returns:
            Success with the generated payment id.
        """
        with self._uow_factory() as uow:
            details = self._resolve_details(
                uow,
                request.cash_desk_number,
                request.employee_registration_number,
                request.payment_date_time,
                request.payment_type,
            )
            if isinstance(details, Failure):
                return self._reject("create payment", None, details)

            items = self._build_items(request.items)
            if isinstance(items, Failure):
                return self._reject("create payment", None, items)

            payment = Payment.open(
                cash_desk=details.value.cash_desk,
                employee=details.value.employee,
                payment_date_time=details.value.payment_date_time,
                payment_type=details.value.payment_type,
            )
            payment_id = uow.payments.add(payment)
            self._insert_items(uow, payment_id, items.value)
            uow.commit()

        logger.info(
            "Created payment %s at cash desk %s by employee %s (%s, %d items)",
            payment_id,
            request.cash_desk_number,
            request.employee_registration_number,
            details.value.payment_type.value,
            len(items.value),
        )
        return Success(payment_id)

    def confirm_payment(self, payment_id: int) -> Result[None]:
        """Confirm an open payment with the current timestamp."""
        with self._uow_factory() as uow:
            payment = uow.payments.get(payment_id, for_update=True)
            if payment is None:
                return self._reject(
                    "confirm payment", payment_id, Failure(NotFoundError(CONFIRM_PAYMENT_NOT_FOUND))
                )
            if payment.is_confirmed:
                return self._reject(
                    "confirm payment",
                    payment_id,
                    Failure(ValidationError(CONFIRM_ALREADY_CONFIRMED)),
                )

            confirmed = payment.confirm(self._time_provider.now())
            uow.payments.save(confirmed)
            uow.commit()

        logger.info("Confirmed payment %s at %s", payment_id, confirmed.confirmed)
        return Success(None)

    def add_payment_item(self, request: AddPaymentItemRequest) -> Result[int]:
        """Append an item to an open payment.

        Returns:
            Success with the generated item id.
        """
        with self._uow_factory() as uow:
            payment = uow.payments.get(request.payment_id, for_update=True)
            if payment is None:
                return self._reject(
                    "add payment item",
                    request.payment_id,
                    Failure(NotFoundError(PAYMENT_NOT_FOUND)),
                )
            if payment.is_confirmed:
                return self._reject(
                    "add payment item",
                    request.payment_id,
                    Failure(ValidationError(ALREADY_CONFIRMED)),
                )

            try:
                item = PaymentItem.create(
                    article_name=request.article_name,
                    amount=request.amount,
                    price=request.price,
                    payment_id=payment.id,
                )
            except InvalidPaymentItemError as e:
                return self._reject(
                    "add payment item", request.payment_id, Failure(ValidationError(str(e)))
                )

            item_id = uow.payments.add_item(item)
            uow.commit()

        logger.info(
            "Added item %s (%s x%d) to payment %s",
            item_id,
            item.article_name,
            item.amount,
            request.payment_id,
        )
        return Success(item_id)

    def delete_payment(self, payment_id: int, delete_items: bool = False) -> Result[None]:
        """Delete a payment.

        A payment with items is only deleted when delete_items is True;
        the items are removed first, then the payment.
        """
        with self._uow_factory() as uow:
            payment = uow.payments.get(payment_id, include_items=True, for_update=True)
            if payment is None:
                return self._reject(
                    "delete payment", payment_id, Failure(NotFoundError(PAYMENT_NOT_FOUND))
                )
            if payment.items and not delete_items:
                return self._reject(
                    "delete payment", payment_id, Failure(ValidationError(HAS_PAYMENT_ITEMS))
                )

            if payment.items:
                uow.payments.remove_items(payment.items)
            uow.payments.remove(payment)
            uow.commit()

        logger.info("Deleted payment %s with %d items", payment_id, len(payment.items))
        return Success(None)

    def update_payment(self, request: UpdatePaymentRequest) -> Result[None]:
        """Replace references, date, type and the whole item collection.

        Existing items are deleted and the supplied items inserted fresh;
        there is no merge by article or id.
        """
        with self._uow_factory() as uow:
            payment = uow.payments.get(request.payment_id, include_items=True, for_update=True)
            if payment is None:
                return self._reject(
                    "update payment",
                    request.payment_id,
                    Failure(NotFoundError(PAYMENT_NOT_FOUND)),
                )
            if payment.is_confirmed:
                return self._reject(
                    "update payment",
                    request.payment_id,
                    Failure(ValidationError(ALREADY_CONFIRMED)),
                )

            details = self._resolve_details(
                uow,
                request.cash_desk_number,
                request.employee_registration_number,
                request.payment_date_time,
                request.payment_type,
            )
            if isinstance(details, Failure):
                return self._reject("update payment", request.payment_id, details)

            items = self._build_items(request.items)
            if isinstance(items, Failure):
                return self._reject("update payment", request.payment_id, items)

            updated = payment.with_details(
                cash_desk=details.value.cash_desk,
                employee=details.value.employee,
                payment_date_time=details.value.payment_date_time,
                payment_type=details.value.payment_type,
            )
            uow.payments.save(updated)
            if payment.items:
                uow.payments.remove_items(payment.items)
            self._insert_items(uow, payment.id, items.value)
            uow.commit()

        logger.info(
            "Updated payment %s (replaced %d items with %d)",
            request.payment_id,
            len(payment.items),
            len(items.value),
        )
        return Success(None)

    def set_payment_type(self, payment_id: int, payment_type: PaymentType | str) -> Result[None]:
        """Change only the payment type, leaving every other field and the items."""
        with self._uow_factory() as uow:
            payment = uow.payments.get(payment_id, for_update=True)
            if payment is None:
                return self._reject(
                    "set payment type", payment_id, Failure(NotFoundError(PAYMENT_NOT_FOUND))
                )
            if payment.is_confirmed:
                return self._reject(
                    "set payment type", payment_id, Failure(ValidationError(ALREADY_CONFIRMED))
                )

            parsed = self._parse_payment_type(payment_type)
            if isinstance(parsed, Failure):
                return self._reject("set payment type", payment_id, parsed)

            rights = self._check_rights(payment.employee, parsed.value)
            if isinstance(rights, Failure):
                return self._reject("set payment type", payment_id, rights)

            uow.payments.save(payment.with_payment_type(parsed.value))
            uow.commit()

        logger.info("Set type of payment %s to %s", payment_id, parsed.value.value)
        return Success(None)

    def _resolve_details(
        self,
        uow: UnitOfWork,
        cash_desk_number: int,
        employee_registration_number: int,
        payment_date_time: datetime,
        payment_type: PaymentType | str,
    ) -> Result[_PaymentDetails]:
        """Run the checks shared by create and update, in contract order."""
        cash_desk = uow.cash_desks.get(cash_desk_number)
        if cash_desk is None:
            return Failure(ValidationError(INVALID_CASH_DESK))

        employee = uow.employees.get(employee_registration_number)
        if employee is None:
            return Failure(ValidationError(INVALID_EMPLOYEE))

        parsed = self._parse_payment_type(payment_type)
        if isinstance(parsed, Failure):
            return parsed

        rights = self._check_rights(employee, parsed.value)
        if isinstance(rights, Failure):
            return rights

        payment_date_time = as_utc(payment_date_time)
        if payment_date_time > self._time_provider.now() + self._payment_date_tolerance:
            return Failure(ValidationError(INVALID_PAYMENT_DATE))

        return Success(
            _PaymentDetails(
                cash_desk=cash_desk,
                employee=employee,
                payment_date_time=payment_date_time,
                payment_type=parsed.value,
            )
        )

    @staticmethod
    def _parse_payment_type(payment_type: PaymentType | str) -> Result[PaymentType]:
        try:
            return Success(PaymentType.parse(payment_type))
        except InvalidPaymentTypeError:
            return Failure(ValidationError(INVALID_PAYMENT_TYPE))

    @staticmethod
    def _check_rights(employee: Employee, payment_type: PaymentType) -> Result[None]:
        if payment_type is PaymentType.CREDIT_CARD and not employee.can_create_credit_card_payment:
            return Failure(ValidationError(INSUFFICIENT_RIGHTS))
        return Success(None)

    @staticmethod
    def _build_items(inputs: Iterable[PaymentItemInput]) -> Result[list[PaymentItem]]:
        items = []
        for line in inputs:
            try:
                items.append(PaymentItem.create(line.article_name, line.amount, line.price))
            except InvalidPaymentItemError as e:
                return Failure(ValidationError(str(e)))
        return Success(items)

    @staticmethod
    def _insert_items(uow: UnitOfWork, payment_id: int, items: Iterable[PaymentItem]) -> None:
        for item in items:
            uow.payments.add_item(replace(item, payment_id=payment_id))

    @staticmethod
    def _reject(operation: str, payment_id: int | None, failure: Failure) -> Failure:
        logger.info(
            "Rejected %s%s: %s",
            operation,
            f" for payment {payment_id}" if payment_id is not None else "",
            failure.message,
        )
        return failure
