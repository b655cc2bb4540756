"""Services Layer — request handlers that sit between routes and the core.

Invariants:
    - Handlers take plain values and return plain values (no Starlette types)

Design Decisions:
    - Routes adapt handler results to HTTP responses; handlers stay testable without a client
"""
