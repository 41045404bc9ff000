"""Domain exceptions for cashdesk-payments.

Exception hierarchy:
    DomainException (base)
    ├── InvalidStateTransitionError
    ├── InvalidPaymentTypeError
    ├── InvalidPaymentItemError
    └── InvalidEntityError

These are raised by entity factories and transitions. The application
layer catches them and reports them to callers as result values; they
never cross the service boundary.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors."""


class InvalidStateTransitionError(DomainException):
    """Raised when a transition violates the payment lifecycle.

    Valid transitions:
        - open → confirmed (confirm)

    A confirmed payment is terminal: it cannot be confirmed again and
    its details and items cannot change.
    """


class InvalidPaymentTypeError(DomainException):
    """Raised when a payment type string matches no PaymentType member."""


class InvalidPaymentItemError(DomainException):
    """Raised when a payment line fails validation.

    Article name must be non-empty, amount must be greater than 0 and
    price must not be negative.
    """


class InvalidEntityError(DomainException):
    """Raised when a cash desk or employee fails validation on creation."""
