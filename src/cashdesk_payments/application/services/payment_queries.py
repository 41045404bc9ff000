from __future__ import annotations

from typing import TYPE_CHECKING

from cashdesk_payments.application.dtos import PaymentDetail, PaymentSummary
from cashdesk_payments.application.errors import NotFoundError
from cashdesk_payments.application.result import Failure, Result, Success
from cashdesk_payments.application.services.payment_lifecycle import PAYMENT_NOT_FOUND, as_utc

if TYPE_CHECKING:
    from datetime import datetime

    from cashdesk_payments.application.ports import UnitOfWorkFactory


class PaymentQueryService:
    """Read-only access to payments. Never commits."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def list_payments(
        self,
        cash_desk_number: int | None = None,
        date_from: datetime | None = None,
    ) -> list[PaymentSummary]:
        if date_from is not None:
            date_from = as_utc(date_from)
        with self._uow_factory() as uow:
            payments = uow.payments.list(cash_desk_number=cash_desk_number, date_from=date_from)
        return [PaymentSummary.from_payment(payment) for payment in payments]

    def get_payment(self, payment_id: int) -> Result[PaymentDetail]:
        with self._uow_factory() as uow:
            payment = uow.payments.get(payment_id, include_items=True)
        if payment is None:
            return Failure(NotFoundError(PAYMENT_NOT_FOUND))
        return Success(PaymentDetail.from_payment(payment))
