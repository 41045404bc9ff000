"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from cashdesk_payments.application.ports.cash_desk_repository import CashDeskRepository
from cashdesk_payments.application.ports.employee_repository import EmployeeRepository
from cashdesk_payments.application.ports.payment_repository import PaymentRepository
from cashdesk_payments.application.ports.time_provider import TimeProvider
from cashdesk_payments.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "CashDeskRepository",
    "EmployeeRepository",
    "PaymentRepository",
    "TimeProvider",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
