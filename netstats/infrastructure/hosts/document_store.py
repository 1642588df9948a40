"""
Adapter: MongoDB connection pool handle.

Owns the AsyncMongoClient for the lifetime of the application.
The client is a thread-safe connection pool; one DocumentStore is
built at startup and handed to repositories through dependency
injection rather than living in a module-level global.
"""

import logging

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from netstats.core.config import Settings

logger = logging.getLogger(__name__)


class DocumentStore:
    """Connection pool plus the databases the API reads from."""

    def __init__(
        self,
        client: AsyncMongoClient,
        database_name: str,
        opsconsole_database_name: str,
    ) -> None:
        self._client = client
        self._database_name = database_name
        self._opsconsole_database_name = opsconsole_database_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentStore":
        """Build a store from application settings.

        The driver connects lazily, so this never blocks on the network.
        """
        client: AsyncMongoClient = AsyncMongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
        )
        logger.info(
            "Document store configured: database=%s, opsconsole=%s",
            settings.database_name,
            settings.opsconsole_database_name,
        )
        return cls(
            client=client,
            database_name=settings.database_name,
            opsconsole_database_name=settings.opsconsole_database_name,
        )

    @property
    def telemetry(self) -> AsyncDatabase:
        """Database holding performance, status and assignment collections."""
        return self._client[self._database_name]

    @property
    def opsconsole(self) -> AsyncDatabase:
        """Database holding host operator registrations."""
        return self._client[self._opsconsole_database_name]

    async def close(self) -> None:
        """Release every pooled connection."""
        await self._client.close()
        logger.info("Document store connections closed")
