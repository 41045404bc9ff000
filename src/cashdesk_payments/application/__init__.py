"""Application layer - Services, ports and result values.

This layer contains:
- Services: Payment lifecycle commands and read-side queries
- Ports: Abstract interfaces (repositories, unit of work, clock)
- DTOs: Request and read-model objects for the service boundary
- Errors/Results: Typed outcomes returned to the delivery layer

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
