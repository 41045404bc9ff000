"""In-memory store with transactional units of work.

Used by unit tests and for running the API without a database
(``CASHDESK_DATABASE_URL=memory://``).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from threading import Lock
from typing import TYPE_CHECKING

from cashdesk_payments.application.ports import (
    CashDeskRepository,
    EmployeeRepository,
    PaymentRepository,
    UnitOfWork,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime
    from types import TracebackType

    from cashdesk_payments.domain.entities import (
        CashDesk,
        Employee,
        EmployeeType,
        Payment,
        PaymentItem,
    )


@dataclass
class _StoreState:
    """Committed (or staged) contents of the store.

    Entities are frozen dataclasses, so copying the dicts is enough to
    isolate a staged state from the committed one.
    """

    cash_desks: dict[int, CashDesk] = field(default_factory=dict)
    employees: dict[int, Employee] = field(default_factory=dict)
    payments: dict[int, Payment] = field(default_factory=dict)
    items: dict[int, PaymentItem] = field(default_factory=dict)
    next_payment_id: int = 1
    next_item_id: int = 1

    def copy(self) -> _StoreState:
        return _StoreState(
            cash_desks=dict(self.cash_desks),
            employees=dict(self.employees),
            payments=dict(self.payments),
            items=dict(self.items),
            next_payment_id=self.next_payment_id,
            next_item_id=self.next_item_id,
        )


class InMemoryStore:
    """Process-local store shared by all units of work created from it.

    Implementation notes:
    - One store-wide lock is held for the whole lifetime of a unit of
      work, so units of work are fully serialized (serializable isolation)
    - Writes go to a staged copy of the state and replace the committed
      state atomically on commit()
    - Units of work must not be nested in the same thread
    """

    def __init__(self) -> None:
        self._state = _StoreState()
        self._lock = Lock()

    def unit_of_work(self) -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(self)


class InMemoryCashDeskRepository(CashDeskRepository):
    def __init__(self, state: _StoreState) -> None:
        self._state = state

    def get(self, number: int) -> CashDesk | None:
        return self._state.cash_desks.get(number)

    def list(self) -> list[CashDesk]:
        return [self._state.cash_desks[number] for number in sorted(self._state.cash_desks)]

    def add(self, cash_desk: CashDesk) -> None:
        self._state.cash_desks[cash_desk.number] = cash_desk


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, state: _StoreState) -> None:
        self._state = state

    def get(self, registration_number: int) -> Employee | None:
        return self._state.employees.get(registration_number)

    def list(self, employee_type: EmployeeType | None = None) -> list[Employee]:
        return [
            self._state.employees[number]
            for number in sorted(self._state.employees)
            if employee_type is None or self._state.employees[number].type is employee_type
        ]

    def add(self, employee: Employee) -> None:
        self._state.employees[employee.registration_number] = employee


class InMemoryPaymentRepository(PaymentRepository):
    """Payments are stored without items; items live in their own table."""

    def __init__(self, state: _StoreState) -> None:
        self._state = state

    def get(
        self, payment_id: int, *, include_items: bool = False, for_update: bool = False
    ) -> Payment | None:
        # Units of work already hold the store-wide lock, for_update adds nothing.
        payment = self._state.payments.get(payment_id)
        if payment is None:
            return None
        if include_items:
            return payment.with_items(self._items_of(payment_id))
        return payment

    def list(
        self,
        cash_desk_number: int | None = None,
        date_from: datetime | None = None,
    ) -> list[Payment]:
        return [
            payment.with_items(self._items_of(payment_id))
            for payment_id, payment in sorted(self._state.payments.items())
            if (cash_desk_number is None or payment.cash_desk.number == cash_desk_number)
            and (date_from is None or payment.payment_date_time >= date_from)
        ]

    def add(self, payment: Payment) -> int:
        if payment.id is not None:
            raise ValueError(f"Payment already has an id: {payment.id}")
        payment_id = self._state.next_payment_id
        self._state.next_payment_id += 1
        self._state.payments[payment_id] = replace(payment, id=payment_id, items=())
        return payment_id

    def save(self, payment: Payment) -> None:
        if payment.id not in self._state.payments:
            raise KeyError(f"Payment {payment.id} is not persisted")
        self._state.payments[payment.id] = payment.with_items(())

    def remove(self, payment: Payment) -> None:
        if self._items_of(payment.id):
            raise ValueError(f"Payment {payment.id} still has payment items")
        del self._state.payments[payment.id]

    def add_item(self, item: PaymentItem) -> int:
        if item.payment_id not in self._state.payments:
            raise KeyError(f"Payment {item.payment_id} is not persisted")
        item_id = self._state.next_item_id
        self._state.next_item_id += 1
        self._state.items[item_id] = replace(item, id=item_id)
        return item_id

    def remove_items(self, items: Iterable[PaymentItem]) -> None:
        for item in items:
            self._state.items.pop(item.id, None)

    def _items_of(self, payment_id: int) -> list[PaymentItem]:
        return [
            item
            for item_id, item in sorted(self._state.items.items())
            if item.payment_id == payment_id
        ]


class InMemoryUnitOfWork(UnitOfWork):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._staged: _StoreState | None = None

    def __enter__(self) -> InMemoryUnitOfWork:
        self._store._lock.acquire()
        self._begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._staged = None
            self._store._lock.release()

    def commit(self) -> None:
        self._store._state = self._staged
        self._begin()

    def rollback(self) -> None:
        self._begin()

    def _begin(self) -> None:
        self._staged = self._store._state.copy()
        self.cash_desks = InMemoryCashDeskRepository(self._staged)
        self.employees = InMemoryEmployeeRepository(self._staged)
        self.payments = InMemoryPaymentRepository(self._staged)
