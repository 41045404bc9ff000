"""Data Transfer Objects for service input/output."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from cashdesk_payments.domain.entities import Payment, PaymentType


@dataclass(frozen=True)
class PaymentItemInput:
    """One line of a create/update request."""

    article_name: str
    amount: int
    price: Decimal


@dataclass(frozen=True)
class CreatePaymentRequest:
    """Input DTO for PaymentLifecycleService.create_payment."""

    cash_desk_number: int
    employee_registration_number: int
    payment_date_time: datetime
    payment_type: PaymentType | str
    items: tuple[PaymentItemInput, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class UpdatePaymentRequest:
    """Input DTO for PaymentLifecycleService.update_payment.

    items replaces the whole item collection; an empty tuple clears it.
    """

    payment_id: int
    cash_desk_number: int
    employee_registration_number: int
    payment_date_time: datetime
    payment_type: PaymentType | str
    items: tuple[PaymentItemInput, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AddPaymentItemRequest:
    """Input DTO for PaymentLifecycleService.add_payment_item."""

    payment_id: int
    article_name: str
    amount: int
    price: Decimal


@dataclass(frozen=True)
class PaymentSummary:
    """Read model for payment listings."""

    id: int
    employee_first_name: str
    employee_last_name: str
    payment_date_time: datetime
    cash_desk_number: int
    payment_type: str
    total_amount: Decimal

    @classmethod
    def from_payment(cls, payment: Payment) -> PaymentSummary:
        return cls(
            id=payment.id,
            employee_first_name=payment.employee.first_name,
            employee_last_name=payment.employee.last_name,
            payment_date_time=payment.payment_date_time,
            cash_desk_number=payment.cash_desk.number,
            payment_type=payment.payment_type.value,
            total_amount=payment.total_amount,
        )


@dataclass(frozen=True)
class PaymentItemDetail:
    id: int
    article_name: str
    amount: int
    price: Decimal


@dataclass(frozen=True)
class PaymentDetail:
    """Read model for a single payment with its items."""

    id: int
    employee_registration_number: int
    employee_first_name: str
    employee_last_name: str
    payment_date_time: datetime
    cash_desk_number: int
    payment_type: str
    confirmed: datetime | None
    items: tuple[PaymentItemDetail, ...]

    @classmethod
    def from_payment(cls, payment: Payment) -> PaymentDetail:
        return cls(
            id=payment.id,
            employee_registration_number=payment.employee.registration_number,
            employee_first_name=payment.employee.first_name,
            employee_last_name=payment.employee.last_name,
            payment_date_time=payment.payment_date_time,
            cash_desk_number=payment.cash_desk.number,
            payment_type=payment.payment_type.value,
            confirmed=payment.confirmed,
            items=tuple(
                PaymentItemDetail(
                    id=item.id,
                    article_name=item.article_name,
                    amount=item.amount,
                    price=item.price,
                )
                for item in payment.items
            ),
        )
