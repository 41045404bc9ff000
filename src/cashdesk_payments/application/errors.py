"""Typed failures returned by application services.

These are values, not exceptions. Services return them inside a
``Failure`` and the delivery layer maps them to status codes:

    ServiceError (base)
    ├── ValidationError  - caller input is wrong (HTTP 400)
    └── NotFoundError    - referenced entity is absent (HTTP 404)

Message text is part of the service contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class ServiceError:
    message: str

    is_not_found: ClassVar[bool] = False

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class ValidationError(ServiceError):
    """The request violates a business rule or references invalid data."""


@dataclass(frozen=True, slots=True)
class NotFoundError(ServiceError):
    """The entity addressed by the request does not exist."""

    is_not_found: ClassVar[bool] = True
