"""Domain entities - Objects with identity and lifecycle."""

from cashdesk_payments.domain.entities.cash_desk import CashDesk
from cashdesk_payments.domain.entities.employee import Address, Employee, EmployeeType
from cashdesk_payments.domain.entities.payment import Payment, PaymentItem, PaymentType

__all__ = [
    "Address",
    "CashDesk",
    "Employee",
    "EmployeeType",
    "Payment",
    "PaymentItem",
    "PaymentType",
]
