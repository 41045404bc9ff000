"""SQLAlchemy adapters: ORM models, repositories and unit of work."""

from cashdesk_payments.infrastructure.orm.models import (
    Base,
    CashDeskRecord,
    EmployeeRecord,
    PaymentItemRecord,
    PaymentRecord,
)
from cashdesk_payments.infrastructure.orm.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "Base",
    "CashDeskRecord",
    "EmployeeRecord",
    "PaymentItemRecord",
    "PaymentRecord",
    "SqlAlchemyUnitOfWork",
]
