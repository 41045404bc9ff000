from __future__ import annotations

from dataclasses import dataclass

from cashdesk_payments.domain.exceptions import InvalidEntityError


@dataclass(frozen=True, slots=True)
class CashDesk:
    """A point-of-sale register identified by its number."""

    number: int

    @classmethod
    def create(cls, number: int) -> CashDesk:
        """Create a cash desk, rejecting non-positive numbers.

        Raises:
            InvalidEntityError: If number <= 0.
        """
        if number <= 0:
            raise InvalidEntityError(f"Cash desk number must be positive, got {number}")
        return cls(number=number)
