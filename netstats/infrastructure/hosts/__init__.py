"""
Infrastructure adapters for the hosts bounded context.

Each adapter implements a domain port (ABC) on top of the
MongoDB document store.
"""
