"""
Appeal Tracker: lifecycle service for support appeals.

Application package root. This is a small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - appeals: Appeal creation, processing, completion, cancellation,
      bulk cancellation and date-range retrieval.

Layers:
    - domain: Pure business logic, entities, lifecycle rules, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SQL store) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
