"""Request and response bodies of the HTTP API (camelCase on the wire)."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cashdesk_payments.application.dtos import (
    CreatePaymentRequest,
    PaymentDetail,
    PaymentItemInput,
    PaymentSummary,
    UpdatePaymentRequest,
)
from cashdesk_payments.domain.entities import Address, CashDesk, Employee


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Payments
# =============================================================================


class PaymentItemIn(CamelModel):
    article_name: str
    amount: int
    price: Decimal = Field(max_digits=10, decimal_places=2)

    def to_input(self) -> PaymentItemInput:
        return PaymentItemInput(
            article_name=self.article_name, amount=self.amount, price=self.price
        )


class NewPaymentCommand(CamelModel):
    cash_desk_number: int
    employee_registration_number: int
    payment_date_time: datetime
    payment_type: str
    payment_items: list[PaymentItemIn] | None = None

    def _items(self) -> tuple[PaymentItemInput, ...]:
        return tuple(item.to_input() for item in self.payment_items or ())

    def to_create_request(self) -> CreatePaymentRequest:
        return CreatePaymentRequest(
            cash_desk_number=self.cash_desk_number,
            employee_registration_number=self.employee_registration_number,
            payment_date_time=self.payment_date_time,
            payment_type=self.payment_type,
            items=self._items(),
        )

    def to_update_request(self, payment_id: int) -> UpdatePaymentRequest:
        return UpdatePaymentRequest(
            payment_id=payment_id,
            cash_desk_number=self.cash_desk_number,
            employee_registration_number=self.employee_registration_number,
            payment_date_time=self.payment_date_time,
            payment_type=self.payment_type,
            items=self._items(),
        )


class PaymentTypePatch(CamelModel):
    payment_type: str | None = None


class NewPaymentItemCommand(CamelModel):
    article_name: str
    amount: int
    price: Decimal = Field(max_digits=10, decimal_places=2)


class PaymentOut(CamelModel):
    id: int
    employee_first_name: str
    employee_last_name: str
    payment_date_time: datetime
    cash_desk_number: int
    payment_type: str
    total_amount: Decimal

    @classmethod
    def from_summary(cls, summary: PaymentSummary) -> PaymentOut:
        return cls(
            id=summary.id,
            employee_first_name=summary.employee_first_name,
            employee_last_name=summary.employee_last_name,
            payment_date_time=summary.payment_date_time,
            cash_desk_number=summary.cash_desk_number,
            payment_type=summary.payment_type,
            total_amount=summary.total_amount,
        )


class PaymentItemOut(CamelModel):
    id: int
    article_name: str
    amount: int
    price: Decimal


class PaymentDetailOut(CamelModel):
    id: int
    employee_registration_number: int
    employee_first_name: str
    employee_last_name: str
    payment_date_time: datetime
    cash_desk_number: int
    payment_type: str
    confirmed: datetime | None
    payment_items: list[PaymentItemOut]

    @classmethod
    def from_detail(cls, detail: PaymentDetail) -> PaymentDetailOut:
        return cls(
            id=detail.id,
            employee_registration_number=detail.employee_registration_number,
            employee_first_name=detail.employee_first_name,
            employee_last_name=detail.employee_last_name,
            payment_date_time=detail.payment_date_time,
            cash_desk_number=detail.cash_desk_number,
            payment_type=detail.payment_type,
            confirmed=detail.confirmed,
            payment_items=[
                PaymentItemOut(
                    id=item.id,
                    article_name=item.article_name,
                    amount=item.amount,
                    price=item.price,
                )
                for item in detail.items
            ],
        )


# =============================================================================
# Cash desks and employees
# =============================================================================


class CashDeskIn(CamelModel):
    number: int


class CashDeskOut(CamelModel):
    number: int

    @classmethod
    def from_entity(cls, cash_desk: CashDesk) -> CashDeskOut:
        return cls(number=cash_desk.number)


class AddressModel(CamelModel):
    street: str = Field(max_length=255)
    zip: str = Field(max_length=16)
    city: str = Field(max_length=255)


class EmployeeIn(CamelModel):
    registration_number: int
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)
    type: str
    address: AddressModel | None = None

    def address_entity(self) -> Address | None:
        if self.address is None:
            return None
        return Address(street=self.address.street, zip=self.address.zip, city=self.address.city)


class EmployeeOut(CamelModel):
    registration_number: int
    first_name: str
    last_name: str
    type: str
    can_create_credit_card_payment: bool
    address: AddressModel | None = None

    @classmethod
    def from_entity(cls, employee: Employee) -> EmployeeOut:
        address = employee.address
        return cls(
            registration_number=employee.registration_number,
            first_name=employee.first_name,
            last_name=employee.last_name,
            type=employee.type.value,
            can_create_credit_card_payment=employee.can_create_credit_card_payment,
            address=(
                AddressModel(street=address.street, zip=address.zip, city=address.city)
                if address
                else None
            ),
        )
