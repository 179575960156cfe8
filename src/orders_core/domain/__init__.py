"""Domain layer - Orders, payments, stores, permissions and their rules.

This layer contains:
- Entities: Objects with identity and lifecycle (e.g., CustomerOrder, PaymentIn)
- Value Objects: Immutable objects defined by their attributes (e.g., ResponseGroup, scopes)
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
