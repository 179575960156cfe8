"""Application layer - Use cases, shared services and port definitions.

This layer contains:
- Use Cases: Order reads, payment orchestration, cart conversion, reporting
- Services: Scope filter, payment gateway registry, order lookup
- Ports: Abstract interfaces (ABCs) for external collaborators
- DTOs: Gateway contexts and results

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
