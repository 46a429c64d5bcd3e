"""
UserValidation — demonstration REST service over an in-memory user collection.

Application package root. Laid out as a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: listing, lookup and creation of users with validated input.

Layers:
    - domain: Entities, outcome values, ports (ABCs), constraint tables.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (i18n, errors, security, logging).
"""
