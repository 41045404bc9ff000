"""Employee entity.

Managers and cashiers share one shape; the variant only decides whether
the employee may record credit-card payments.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cashdesk_payments.domain.exceptions import InvalidEntityError


class EmployeeType(Enum):
    """Employee variants. The value doubles as the stored discriminator."""

    MANAGER = "Manager"
    CASHIER = "Cashier"

    @property
    def can_create_credit_card_payment(self) -> bool:
        return self is EmployeeType.MANAGER

    @classmethod
    def parse(cls, value: str) -> EmployeeType:
        """Resolve a variant from its name or value, ignoring case.

        Raises:
            InvalidEntityError: If value names no variant.
        """
        normalized = value.strip().lower()
        for member in cls:
            if normalized in (member.name.lower(), member.value.lower()):
                return member
        raise InvalidEntityError(f"Unknown employee type: {value}")


@dataclass(frozen=True, slots=True)
class Address:
    street: str
    zip: str
    city: str


@dataclass(frozen=True, slots=True)
class Employee:
    """An employee identified by an externally assigned registration number."""

    registration_number: int
    first_name: str
    last_name: str
    type: EmployeeType
    address: Address | None = None

    @property
    def can_create_credit_card_payment(self) -> bool:
        return self.type.can_create_credit_card_payment

    @classmethod
    def create(
        cls,
        registration_number: int,
        first_name: str,
        last_name: str,
        employee_type: EmployeeType,
        address: Address | None = None,
    ) -> Employee:
        """Create an employee with validated names.

        Raises:
            InvalidEntityError: If the registration number is not positive
                or a name is blank.
        """
        if registration_number <= 0:
            raise InvalidEntityError(
                f"Registration number must be positive, got {registration_number}"
            )
        if not first_name.strip() or not last_name.strip():
            raise InvalidEntityError("Employee first and last name must not be empty")

        return cls(
            registration_number=registration_number,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            type=employee_type,
            address=address,
        )
