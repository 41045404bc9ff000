from __future__ import annotations

from collections import defaultdict
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import delete, select

from cashdesk_payments.application.ports import (
    CashDeskRepository,
    EmployeeRepository,
    PaymentRepository,
)
from cashdesk_payments.domain.entities import (
    Address,
    CashDesk,
    Employee,
    EmployeeType,
    Payment,
    PaymentItem,
    PaymentType,
)
from cashdesk_payments.infrastructure.orm.models import (
    CashDeskRecord,
    EmployeeRecord,
    PaymentItemRecord,
    PaymentRecord,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy.orm import Session


def to_db_time(value: datetime) -> datetime:
    """Store timestamps as naive UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def from_db_time(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _cash_desk_from_record(record: CashDeskRecord) -> CashDesk:
    return CashDesk(number=record.number)


def _employee_from_record(record: EmployeeRecord) -> Employee:
    address = None
    if record.address_street or record.address_zip or record.address_city:
        address = Address(
            street=record.address_street or "",
            zip=record.address_zip or "",
            city=record.address_city or "",
        )
    return Employee(
        registration_number=record.registration_number,
        first_name=record.first_name,
        last_name=record.last_name,
        type=EmployeeType(record.type),
        address=address,
    )


def _item_from_record(record: PaymentItemRecord) -> PaymentItem:
    return PaymentItem(
        id=record.id,
        payment_id=record.payment_id,
        article_name=record.article_name,
        amount=record.amount,
        price=record.price,
    )


def _payment_from_record(record: PaymentRecord, items: Iterable[PaymentItem] = ()) -> Payment:
    return Payment(
        id=record.id,
        cash_desk=_cash_desk_from_record(record.cash_desk),
        employee=_employee_from_record(record.employee),
        payment_date_time=from_db_time(record.payment_date_time),
        payment_type=PaymentType(record.payment_type),
        confirmed=from_db_time(record.confirmed),
        items=tuple(items),
    )


class SqlAlchemyCashDeskRepository(CashDeskRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, number: int) -> CashDesk | None:
        record = self._session.get(CashDeskRecord, number)
        return _cash_desk_from_record(record) if record is not None else None

    def list(self) -> list[CashDesk]:
        records = self._session.scalars(select(CashDeskRecord).order_by(CashDeskRecord.number))
        return [_cash_desk_from_record(record) for record in records]

    def add(self, cash_desk: CashDesk) -> None:
        self._session.add(CashDeskRecord(number=cash_desk.number))
        self._session.flush()


class SqlAlchemyEmployeeRepository(EmployeeRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, registration_number: int) -> Employee | None:
        record = self._session.get(EmployeeRecord, registration_number)
        return _employee_from_record(record) if record is not None else None

    def list(self, employee_type: EmployeeType | None = None) -> list[Employee]:
        stmt = select(EmployeeRecord).order_by(EmployeeRecord.registration_number)
        if employee_type is not None:
            stmt = stmt.where(EmployeeRecord.type == employee_type.value)
        return [_employee_from_record(record) for record in self._session.scalars(stmt)]

    def add(self, employee: Employee) -> None:
        address = employee.address
        self._session.add(
            EmployeeRecord(
                registration_number=employee.registration_number,
                first_name=employee.first_name,
                last_name=employee.last_name,
                type=employee.type.value,
                address_street=address.street if address else None,
                address_zip=address.zip if address else None,
                address_city=address.city if address else None,
            )
        )
        self._session.flush()


class SqlAlchemyPaymentRepository(PaymentRepository):
    """Payment repository on top of one session.

    Every write is flushed immediately so later reads in the same unit
    of work see it and generated ids are available; nothing is committed
    here.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(
        self, payment_id: int, *, include_items: bool = False, for_update: bool = False
    ) -> Payment | None:
        # SQLite ignores FOR UPDATE; its transactions start with BEGIN IMMEDIATE.
        record = self._session.get(PaymentRecord, payment_id, with_for_update=for_update)
        if record is None:
            return None
        items = self._items_by_payment([payment_id])[payment_id] if include_items else []
        return _payment_from_record(record, items)

    def list(
        self,
        cash_desk_number: int | None = None,
        date_from: datetime | None = None,
    ) -> list[Payment]:
        stmt = select(PaymentRecord).order_by(PaymentRecord.id)
        if cash_desk_number is not None:
            stmt = stmt.where(PaymentRecord.cash_desk_number == cash_desk_number)
        if date_from is not None:
            stmt = stmt.where(PaymentRecord.payment_date_time >= to_db_time(date_from))

        records = self._session.scalars(stmt).unique().all()
        items = self._items_by_payment([record.id for record in records])
        return [_payment_from_record(record, items[record.id]) for record in records]

    def add(self, payment: Payment) -> int:
        if payment.id is not None:
            raise ValueError(f"Payment already has an id: {payment.id}")
        record = PaymentRecord(
            cash_desk_number=payment.cash_desk.number,
            employee_registration_number=payment.employee.registration_number,
            payment_date_time=to_db_time(payment.payment_date_time),
            payment_type=payment.payment_type.value,
            confirmed=to_db_time(payment.confirmed) if payment.confirmed else None,
        )
        self._session.add(record)
        self._session.flush()
        return record.id

    def save(self, payment: Payment) -> None:
        record = self._session.get(PaymentRecord, payment.id)
        if record is None:
            raise KeyError(f"Payment {payment.id} is not persisted")
        record.cash_desk_number = payment.cash_desk.number
        record.employee_registration_number = payment.employee.registration_number
        record.payment_date_time = to_db_time(payment.payment_date_time)
        record.payment_type = payment.payment_type.value
        record.confirmed = to_db_time(payment.confirmed) if payment.confirmed else None
        self._session.flush()
        # Reload the many-to-one references after a re-assignment.
        self._session.expire(record, ["cash_desk", "employee"])

    def remove(self, payment: Payment) -> None:
        self._session.execute(delete(PaymentRecord).where(PaymentRecord.id == payment.id))

    def add_item(self, item: PaymentItem) -> int:
        record = PaymentItemRecord(
            payment_id=item.payment_id,
            article_name=item.article_name,
            amount=item.amount,
            price=item.price,
        )
        self._session.add(record)
        self._session.flush()
        return record.id

    def remove_items(self, items: Iterable[PaymentItem]) -> None:
        ids = [item.id for item in items]
        if ids:
            self._session.execute(delete(PaymentItemRecord).where(PaymentItemRecord.id.in_(ids)))

    def _items_by_payment(self, payment_ids: Iterable[int]) -> dict[int, list[PaymentItem]]:
        grouped: dict[int, list[PaymentItem]] = defaultdict(list)
        payment_ids = [*payment_ids]
        if not payment_ids:
            return grouped
        stmt = (
            select(PaymentItemRecord)
            .where(PaymentItemRecord.payment_id.in_(payment_ids))
            .order_by(PaymentItemRecord.id)
        )
        for record in self._session.scalars(stmt):
            grouped[record.payment_id].append(_item_from_record(record))
        return grouped
