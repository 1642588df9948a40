"""
Application layer for the hosts bounded context.

Use cases coordinate domain entities and ports to fulfill
read-only telemetry queries. No framework or infrastructure imports allowed.
"""
