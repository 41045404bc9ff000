"""Result values for service operations.

Usage:
    match service.confirm_payment(payment_id):
        case Success():
            ...
        case Failure(error=NotFoundError()):
            ...
        case Failure(error=error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from cashdesk_payments.application.errors import ServiceError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    error: ServiceError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message


Result = Union[Success[T], Failure]
