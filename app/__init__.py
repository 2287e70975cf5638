"""
Products API: CRUD service for the products catalog.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - catalog: Products and their availability.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: SQL adapters and schema migrations implementing domain ports.
    - interfaces: FastAPI routers, validation rules, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, validation, security, logging).
    - core: Configuration and database engine construction.
"""
