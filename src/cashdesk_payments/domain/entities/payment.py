"""Payment entity with lifecycle behavior.

A payment is created open (confirmed is None), collects line items while
open and is confirmed exactly once. Confirmation is terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from cashdesk_payments.domain.exceptions import (
    InvalidPaymentItemError,
    InvalidPaymentTypeError,
    InvalidStateTransitionError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from cashdesk_payments.domain.entities.cash_desk import CashDesk
    from cashdesk_payments.domain.entities.employee import Employee

# Prices are stored as NUMERIC(10, 2).
PRICE_STEP = Decimal("0.01")
MAX_PRICE = Decimal("100000000")


class PaymentType(Enum):
    CASH = "Cash"
    CREDIT_CARD = "CreditCard"

    @classmethod
    def parse(cls, value: str | PaymentType) -> PaymentType:
        """Resolve a payment type from its name, ignoring case.

        Accepts "Cash", "cash", "CreditCard", "creditcard", "CREDIT_CARD".

        Raises:
            InvalidPaymentTypeError: If value names no payment type.
        """
        if isinstance(value, PaymentType):
            return value
        normalized = value.strip().replace("_", "").lower()
        for member in cls:
            if normalized == member.value.lower():
                return member
        raise InvalidPaymentTypeError(f"Unknown payment type: {value!r}")


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """One line entry (article, quantity, price) of a payment.

    id and payment_id are None until the item is persisted.
    """

    id: int | None
    payment_id: int | None
    article_name: str
    amount: int
    price: Decimal

    @classmethod
    def create(
        cls,
        article_name: str,
        amount: int,
        price: Decimal | int | float | str,
        payment_id: int | None = None,
    ) -> PaymentItem:
        """Factory method to create a PaymentItem with validation.

        Raises:
            InvalidPaymentItemError: If the article name is blank, amount <= 0
                or price is negative, finer than a cent or too large for
                the price column (10 digits, 2 of them decimal places).
        """
        if not article_name or not article_name.strip():
            raise InvalidPaymentItemError("Article name must not be empty.")
        if amount <= 0:
            raise InvalidPaymentItemError(f"Amount must be greater than 0, got {amount}.")

        price = Decimal(str(price))
        if price < 0:
            raise InvalidPaymentItemError(f"Price must not be negative, got {price}.")
        if price >= MAX_PRICE:
            raise InvalidPaymentItemError(f"Price must be less than {MAX_PRICE}, got {price}.")
        if price != price.quantize(PRICE_STEP):
            raise InvalidPaymentItemError(
                f"Price must not have more than 2 decimal places, got {price}."
            )

        return cls(
            id=None,
            payment_id=payment_id,
            article_name=article_name.strip(),
            amount=amount,
            price=price.quantize(PRICE_STEP),
        )


@dataclass(frozen=True, slots=True)
class Payment:
    """Payment entity.

    Payment is immutable (frozen dataclass). All state-changing methods
    return a new Payment instance.

    Lifecycle:
        - open (confirmed is None): details may change, items may be added
        - confirmed (confirmed is a timestamp): terminal, nothing may change
    """

    id: int | None
    cash_desk: CashDesk
    employee: Employee
    payment_date_time: datetime
    payment_type: PaymentType
    confirmed: datetime | None = None
    items: tuple[PaymentItem, ...] = ()

    @classmethod
    def open(
        cls,
        cash_desk: CashDesk,
        employee: Employee,
        payment_date_time: datetime,
        payment_type: PaymentType,
    ) -> Payment:
        """Create a new, not yet persisted, open payment."""
        return cls(
            id=None,
            cash_desk=cash_desk,
            employee=employee,
            payment_date_time=payment_date_time,
            payment_type=payment_type,
        )

    @property
    def is_confirmed(self) -> bool:
        return self.confirmed is not None

    @property
    def total_amount(self) -> Decimal:
        return sum((item.price for item in self.items), Decimal("0"))

    def confirm(self, now: datetime) -> Payment:
        """Confirm the payment.

        Raises:
            InvalidStateTransitionError: If the payment is already confirmed.
        """
        self._ensure_open("confirm")
        return replace(self, confirmed=now)

    def with_details(
        self,
        cash_desk: CashDesk,
        employee: Employee,
        payment_date_time: datetime,
        payment_type: PaymentType,
    ) -> Payment:
        """Replace cash desk, employee, date and type of an open payment."""
        self._ensure_open("update")
        return replace(
            self,
            cash_desk=cash_desk,
            employee=employee,
            payment_date_time=payment_date_time,
            payment_type=payment_type,
        )

    def with_payment_type(self, payment_type: PaymentType) -> Payment:
        self._ensure_open("change the type of")
        return replace(self, payment_type=payment_type)

    def with_items(self, items: Iterable[PaymentItem]) -> Payment:
        return replace(self, items=tuple(items))

    def _ensure_open(self, action: str) -> None:
        if self.is_confirmed:
            raise InvalidStateTransitionError(
                f"Cannot {action} payment {self.id}; it was confirmed at {self.confirmed}"
            )
