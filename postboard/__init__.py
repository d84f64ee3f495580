"""
Postboard — REST API for posts and user profiles.

Application package root. This is a small monolith using
hexagonal architecture (ports & adapters).

Layers:
    - domain: Entities, ports (ABCs), domain errors and ownership guards.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: SQLAlchemy persistence and password/token adapters.
    - interfaces: FastAPI routers, Pydantic schemas, auth dependencies.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
