"""Fixtures for tests against the SQLAlchemy adapters (in-memory SQLite)."""

from collections.abc import Iterator
from functools import partial

import pytest
from sqlalchemy.engine import Engine

from cashdesk_payments.domain.entities import CashDesk, Employee
from cashdesk_payments.infrastructure.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from cashdesk_payments.infrastructure.orm import SqlAlchemyUnitOfWork


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_uow_factory(engine: Engine):
    return partial(SqlAlchemyUnitOfWork, create_session_factory(engine))


@pytest.fixture
def seeded_sql_uow_factory(
    sql_uow_factory, cash_desk: CashDesk, manager: Employee, cashier: Employee
):
    """Database with cash desk 1, manager 1001 and cashier 2002."""
    with sql_uow_factory() as uow:
        uow.cash_desks.add(cash_desk)
        uow.employees.add(manager)
        uow.employees.add(cashier)
        uow.commit()
    return sql_uow_factory
