from __future__ import annotations

from typing import TYPE_CHECKING

from cashdesk_payments.application.ports import UnitOfWork
from cashdesk_payments.infrastructure.orm.repositories import (
    SqlAlchemyCashDeskRepository,
    SqlAlchemyEmployeeRepository,
    SqlAlchemyPaymentRepository,
)

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.orm import Session, sessionmaker


class SqlAlchemyUnitOfWork(UnitOfWork):
    """One session, one database transaction.

    The session is opened on enter and closed on exit. Anything not
    committed by then is rolled back, whichever way the block is left.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.cash_desks = SqlAlchemyCashDeskRepository(self._session)
        self.employees = SqlAlchemyEmployeeRepository(self._session)
        self.payments = SqlAlchemyPaymentRepository(self._session)
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
            self._session.close()
            self._session = None

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()
