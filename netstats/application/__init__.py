"""
Application layer package.

Use cases orchestrate the read queries behind each endpoint.
Each use case is a single class with one async `execute` method.
This layer depends on domain ports, never on the MongoDB adapters.
"""
