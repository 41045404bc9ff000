from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cashdesk_payments.domain.entities import CashDesk


class CashDeskRepository(ABC):
    """Port for cash desk lookup and registration.

    Contract:
    - get() returns None if no cash desk has that number (no exception)
    - add() is insert-only; callers check for duplicates with get() first
    """

    @abstractmethod
    def get(self, number: int) -> CashDesk | None:
        """Retrieve a cash desk by its number."""

    @abstractmethod
    def list(self) -> list[CashDesk]:
        """Return all cash desks ordered by number."""

    @abstractmethod
    def add(self, cash_desk: CashDesk) -> None:
        """Register a new cash desk."""
