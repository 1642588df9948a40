"""
Host Network Statistics — telemetry API for a network of hosts.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - hosts: Uptime, network capacity, host listings, stats, registrations.

Layers:
    - domain: Entities, capacity aggregation, ports (ABCs), error taxonomy.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: MongoDB adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
