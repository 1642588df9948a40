"""
Use case: List every host of one performance snapshot.

Input: ListHostsQuery (optional pinned timestamp)
Output: list[HostRecordResult]
Side effects: None (read-only query).
Failure cases: DatabaseError.

Collectors write one document per host per snapshot, all sharing the
snapshot's created_at. Unless a timestamp is pinned, the newest
snapshot in the store is listed.
"""

import logging

from netstats.application.hosts.dtos import HostRecordResult, ListHostsQuery
from netstats.domain.hosts.ports import PerformanceRepository

logger = logging.getLogger(__name__)


class ListHostsUseCase:
    """Orchestrates snapshot discovery and host listing."""

    def __init__(self, performance_repo: PerformanceRepository) -> None:
        self._performance_repo = performance_repo

    async def execute(self, query: ListHostsQuery) -> list[HostRecordResult]:
        """Run the host listing use case.

        Args:
            query: Listing parameters (optional pinned timestamp).

        Returns:
            Hosts of the selected snapshot. Empty when the store is empty.
        """
        timestamp = query.timestamp
        if timestamp is None:
            timestamp = await self._performance_repo.latest_timestamp()
            if timestamp is None:
                logger.info("No performance snapshots stored")
                return []

        logger.info("Listing hosts at snapshot timestamp=%d", timestamp)

        records = await self._performance_repo.list_hosts_at_timestamp(timestamp)

        return [
            HostRecordResult(
                id=record.id,
                name=record.name,
                description=record.description,
                physical_address=record.physical_address,
                zt_ipaddress=record.zt_ipaddress,
                created_at=record.created_at,
                uptime=record.uptime,
            )
            for record in records
        ]
