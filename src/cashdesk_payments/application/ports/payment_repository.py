from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from cashdesk_payments.domain.entities import Payment, PaymentItem


class PaymentRepository(ABC):
    """Port for payment and payment item persistence.

    Contract:
    - get() returns None if the payment does not exist (no exception)
    - add() assigns and returns the generated payment id
    - save() updates an already persisted payment; items are NOT touched
    - Items are only written through add_item() and removed through
      remove_items(), so the caller controls replace semantics
    - Writes are staged in the enclosing UnitOfWork until commit()
    """

    @abstractmethod
    def get(
        self, payment_id: int, *, include_items: bool = False, for_update: bool = False
    ) -> Payment | None:
        """Retrieve a payment by id.

        Args:
            payment_id: The payment identifier.
            include_items: Load the payment's items eagerly. Without it the
                returned payment carries an empty items tuple.
            for_update: Lock the payment row until the unit of work ends, so
                concurrent check-then-write operations on it are serialized.

        Returns:
            The Payment entity if found, None otherwise.
        """

    @abstractmethod
    def list(
        self,
        cash_desk_number: int | None = None,
        date_from: datetime | None = None,
    ) -> list[Payment]:
        """List payments with items, filtered by cash desk and start date.

        Filters combine with AND; date_from is inclusive. Ordered by id.
        """

    @abstractmethod
    def add(self, payment: Payment) -> int:
        """Insert a new payment (payment.id must be None) and return its id."""

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """Persist changed fields of an existing payment."""

    @abstractmethod
    def remove(self, payment: Payment) -> None:
        """Remove a payment. Its items must already be removed."""

    @abstractmethod
    def add_item(self, item: PaymentItem) -> int:
        """Insert an item for item.payment_id and return the generated id."""

    @abstractmethod
    def remove_items(self, items: Iterable[PaymentItem]) -> None:
        """Remove the given persisted items."""
