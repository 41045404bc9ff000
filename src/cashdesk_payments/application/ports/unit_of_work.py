from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from types import TracebackType

    from cashdesk_payments.application.ports.cash_desk_repository import CashDeskRepository
    from cashdesk_payments.application.ports.employee_repository import EmployeeRepository
    from cashdesk_payments.application.ports.payment_repository import PaymentRepository


class UnitOfWork(ABC):
    """Port for one transactional unit of work against the store.

    Contract:
    - Repositories are only usable inside the ``with`` block
    - commit() makes every staged write durable at once
    - Leaving the block without commit() (normally or by exception)
      discards every staged write
    - Reads inside one unit of work see its own staged writes

    Usage:
        with uow_factory() as uow:
            payment = uow.payments.get(payment_id)
            ...
            uow.commit()
    """

    cash_desks: CashDeskRepository
    employees: EmployeeRepository
    payments: PaymentRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make all staged writes durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard all staged writes. A no-op after commit()."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
