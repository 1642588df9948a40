"""
Shared pytest configuration.

Settings are read from the environment when netstats is first imported,
so the required connection string is supplied here before any test
module imports the application.
"""

import os

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "10000/minute")
