"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: SQLAlchemy models, repositories and unit of work
- In-memory store: Transactional test double for the repositories
- Time Provider: Clock abstraction for testability

Infrastructure adapters implement the ports defined in the application layer.
"""

from cashdesk_payments.infrastructure.in_memory import InMemoryStore, InMemoryUnitOfWork
from cashdesk_payments.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "SystemTimeProvider",
]
