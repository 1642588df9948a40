"""
Interfaces layer package.

FastAPI routers, dependency wiring and Pydantic response schemas.
Routes build query DTOs, call use cases and shape responses.
"""
