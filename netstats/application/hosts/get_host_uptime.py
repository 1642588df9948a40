"""
Use case: Retrieve the uptime of a single host.

Input: GetHostUptimeQuery (name)
Output: HostUptimeResult
Side effects: None.
Failure cases: MissingRecord when no host has that name, DatabaseError.
"""

import logging

from netstats.application.hosts.dtos import GetHostUptimeQuery, HostUptimeResult
from netstats.domain.hosts.errors import ApiError, ErrorKind
from netstats.domain.hosts.ports import PerformanceRepository

logger = logging.getLogger(__name__)


class GetHostUptimeUseCase:
    """Orchestrates uptime lookup by exact host name.

    The repository reports absence as None; this use case turns
    absence into a MissingRecord error for the API boundary.
    """

    def __init__(self, performance_repo: PerformanceRepository) -> None:
        self._performance_repo = performance_repo

    async def execute(self, query: GetHostUptimeQuery) -> HostUptimeResult:
        """Run the uptime lookup.

        Args:
            query: The lookup request containing the host name.

        Returns:
            The host's uptime fraction.

        Raises:
            ApiError: MissingRecord when the host is unknown.
        """
        logger.info("Retrieving uptime for host=%s", query.name)

        uptime = await self._performance_repo.find_host_uptime_by_name(query.name)
        if uptime is None:
            raise ApiError.message(ErrorKind.MISSING_RECORD, "Host not found")

        return HostUptimeResult(uptime=uptime.uptime)
