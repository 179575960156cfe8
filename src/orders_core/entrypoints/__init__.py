"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- API: HTTP endpoints (FastAPI routes) and their request schemas
- Container: wiring of use cases onto concrete adapters

Entrypoints translate external requests into use case calls
and format responses for the delivery mechanism.
"""
