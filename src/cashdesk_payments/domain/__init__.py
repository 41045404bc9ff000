"""Domain layer - Core business entities and rules.

This layer contains:
- Entities: CashDesk, Employee, Payment, PaymentItem
- Enumerations: EmployeeType (tagged variant), PaymentType
- Domain Exceptions: Entity-level invariant violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
