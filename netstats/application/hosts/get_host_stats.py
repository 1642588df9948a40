"""
Use case: Retrieve the latest status report of a host.

Input: GetHostStatsQuery (holoport_id)
Output: HostStatsResult
Side effects: None.
Failure cases: MissingRecord, DatabaseError.
"""

import logging

from netstats.application.hosts.dtos import GetHostStatsQuery, HostStatsResult
from netstats.domain.hosts.errors import ApiError, ErrorKind
from netstats.domain.hosts.ports import HostStatsRepository

logger = logging.getLogger(__name__)


class GetHostStatsUseCase:
    """Orchestrates status report retrieval for one host."""

    def __init__(self, stats_repo: HostStatsRepository) -> None:
        self._stats_repo = stats_repo

    async def execute(self, query: GetHostStatsQuery) -> HostStatsResult:
        logger.info("Retrieving stats for holoport_id=%s", query.holoport_id)

        stats = await self._stats_repo.get_latest(query.holoport_id)
        if stats is None:
            raise ApiError.message(ErrorKind.MISSING_RECORD, "Host stats not found")

        return HostStatsResult(
            holoport_id=stats.holoport_id,
            holo_network=stats.holo_network,
            channel=stats.channel,
            holoport_model=stats.holoport_model,
            ssh_status=stats.ssh_status,
            zt_ip=stats.zt_ip,
            wan_ip=stats.wan_ip,
            timestamp=stats.timestamp,
        )
