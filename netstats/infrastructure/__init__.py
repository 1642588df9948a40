"""
Infrastructure layer package.

Concrete adapters of the domain ports, backed by the MongoDB
connection pool owned by DocumentStore.
"""
