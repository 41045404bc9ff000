"""Shared pytest fixtures for the test suite."""

from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from cashdesk_payments.application.services import PaymentLifecycleService
from cashdesk_payments.domain.entities import CashDesk, Employee, EmployeeType
from cashdesk_payments.infrastructure.in_memory import InMemoryStore, InMemoryUnitOfWork
from cashdesk_payments.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def store() -> InMemoryStore:
    """An empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def uow_factory(store: InMemoryStore) -> Callable[[], InMemoryUnitOfWork]:
    return store.unit_of_work


@pytest.fixture
def cash_desk() -> CashDesk:
    return CashDesk(number=1)


@pytest.fixture
def manager() -> Employee:
    return Employee(
        registration_number=1001,
        first_name="Anna",
        last_name="Manager",
        type=EmployeeType.MANAGER,
    )


@pytest.fixture
def cashier() -> Employee:
    return Employee(
        registration_number=2002,
        first_name="Ben",
        last_name="Cashier",
        type=EmployeeType.CASHIER,
    )


@pytest.fixture
def seeded_store(
    store: InMemoryStore, cash_desk: CashDesk, manager: Employee, cashier: Employee
) -> InMemoryStore:
    """Store with cash desk 1, manager 1001 and cashier 2002."""
    with store.unit_of_work() as uow:
        uow.cash_desks.add(cash_desk)
        uow.employees.add(manager)
        uow.employees.add(cashier)
        uow.commit()
    return store


@pytest.fixture
def service(
    seeded_store: InMemoryStore, time_provider: FixedTimeProvider
) -> PaymentLifecycleService:
    return PaymentLifecycleService(
        uow_factory=seeded_store.unit_of_work,
        time_provider=time_provider,
    )
