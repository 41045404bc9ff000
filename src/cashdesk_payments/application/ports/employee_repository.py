from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cashdesk_payments.domain.entities import Employee, EmployeeType


class EmployeeRepository(ABC):
    """Port for employee lookup and registration.

    get() resolves the stored discriminator into the matching
    EmployeeType, so callers see managers and cashiers alike.
    """

    @abstractmethod
    def get(self, registration_number: int) -> Employee | None:
        """Retrieve an employee by registration number, None if absent."""

    @abstractmethod
    def list(self, employee_type: EmployeeType | None = None) -> list[Employee]:
        """Return employees ordered by registration number, optionally by type."""

    @abstractmethod
    def add(self, employee: Employee) -> None:
        """Register a new employee."""
