"""
Domain layer package.

Entities, the capacity aggregation and the error taxonomy, plus the
port interfaces the store adapters implement.
No framework imports, no IO.
"""
