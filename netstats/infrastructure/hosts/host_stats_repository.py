"""
Adapter: Host status repository.

Implements HostStatsRepository port.
Reads the holoport_status collection populated by each host's netstat daemon.
"""

import logging
from typing import Optional

from pymongo import DESCENDING
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from netstats.domain.hosts.entities import HostStats
from netstats.domain.hosts.errors import DatabaseError
from netstats.domain.hosts.ports import HostStatsRepository
from netstats.infrastructure.hosts.documents import MalformedDocumentError, to_host_stats

logger = logging.getLogger(__name__)


class HostStatsRepositoryAdapter(HostStatsRepository):
    """MongoDB adapter for the holoport_status collection."""

    def __init__(self, collection: AsyncCollection) -> None:
        self._collection = collection

    async def get_latest(self, holoport_id: str) -> Optional[HostStats]:
        """Return the newest status report for a host, or None.

        Reports carry their collection time as a free-form string, so
        "newest" follows insertion order: ObjectId values begin with
        their creation second and sort chronologically.
        """
        try:
            doc = await self._collection.find_one(
                {"holoportId": holoport_id},
                sort=[("_id", DESCENDING)],
            )
        except PyMongoError as exc:
            raise DatabaseError(f"host stats lookup failed: {exc}") from exc

        if doc is None:
            logger.debug("No status report for holoport_id=%s", holoport_id)
            return None

        try:
            return to_host_stats(doc, self._collection.name)
        except MalformedDocumentError as exc:
            raise DatabaseError(str(exc)) from exc
