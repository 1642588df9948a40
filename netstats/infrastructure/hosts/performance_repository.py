"""
Adapter: Performance summary repository.

Implements PerformanceRepository port.
Reads the performance_summary collection (one document per host per
snapshot). Every driver failure is raised as DatabaseError.
"""

import logging
from collections.abc import AsyncIterator
from typing import Optional

from pymongo import DESCENDING
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from netstats.domain.hosts.capacity import tally_capacity_stream
from netstats.domain.hosts.entities import Capacity, PerformanceRecord, Uptime
from netstats.domain.hosts.errors import DatabaseError
from netstats.domain.hosts.ports import PerformanceRepository
from netstats.infrastructure.hosts.documents import (
    MalformedDocumentError,
    to_created_at,
    to_performance_record,
    to_uptime,
)

logger = logging.getLogger(__name__)

PING_RESPONSE = "Connected to db."


class PerformanceRepositoryAdapter(PerformanceRepository):
    """MongoDB adapter for the performance_summary collection."""

    def __init__(self, collection: AsyncCollection) -> None:
        self._collection = collection

    async def ping(self) -> str:
        """Run the ping command against the owning database."""
        try:
            await self._collection.database.command("ping")
        except PyMongoError as exc:
            raise DatabaseError(f"ping failed: {exc}") from exc
        return PING_RESPONSE

    async def find_host_uptime_by_name(self, name: str) -> Optional[Uptime]:
        """Return the uptime of the host named exactly `name`, or None."""
        try:
            doc = await self._collection.find_one({"name": name})
        except PyMongoError as exc:
            raise DatabaseError(f"uptime lookup failed: {exc}") from exc

        if doc is None:
            logger.debug("No performance record for host=%s", name)
            return None

        try:
            return Uptime(uptime=to_uptime(doc, self._collection.name))
        except MalformedDocumentError as exc:
            raise DatabaseError(str(exc)) from exc

    async def _iter_uptimes(self) -> AsyncIterator[float]:
        cursor = self._collection.find({}, projection={"uptime": True, "_id": False})
        async for doc in cursor:
            yield to_uptime(doc, self._collection.name)

    async def aggregate_network_capacity(self) -> Capacity:
        """Fold every record's uptime into a Capacity.

        The cursor is consumed lazily. A failure at any point discards
        the counts gathered so far.
        """
        try:
            capacity = await tally_capacity_stream(self._iter_uptimes())
        except (PyMongoError, MalformedDocumentError) as exc:
            raise DatabaseError(f"capacity aggregation failed: {exc}") from exc

        logger.debug(
            "Aggregated capacity: total=%d, read_only=%d, source_chain=%d",
            capacity.total_hosts,
            capacity.read_only,
            capacity.source_chain,
        )
        return capacity

    async def list_hosts_at_timestamp(self, timestamp: int) -> list[PerformanceRecord]:
        """Return every record created at exactly `timestamp`."""
        try:
            cursor = self._collection.find({"created_at": timestamp})
            return [
                to_performance_record(doc, self._collection.name)
                async for doc in cursor
            ]
        except (PyMongoError, MalformedDocumentError) as exc:
            raise DatabaseError(f"host listing failed: {exc}") from exc

    async def latest_timestamp(self) -> Optional[int]:
        """Return the greatest created_at value, or None if empty."""
        try:
            doc = await self._collection.find_one(
                {},
                projection={"created_at": True, "_id": False},
                sort=[("created_at", DESCENDING)],
            )
        except PyMongoError as exc:
            raise DatabaseError(f"latest timestamp lookup failed: {exc}") from exc

        if doc is None or doc.get("created_at") is None:
            return None
        try:
            return to_created_at(doc, self._collection.name)
        except MalformedDocumentError as exc:
            raise DatabaseError(str(exc)) from exc
