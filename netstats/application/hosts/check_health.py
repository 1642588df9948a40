"""
Use case: Check that the document store is reachable.

Input: None
Output: liveness string
Side effects: None.
Failure cases: DatabaseError.
"""

import logging

from netstats.domain.hosts.ports import PerformanceRepository

logger = logging.getLogger(__name__)


class CheckHealthUseCase:
    """Pings the store once. Failures are not retried."""

    def __init__(self, performance_repo: PerformanceRepository) -> None:
        self._performance_repo = performance_repo

    async def execute(self) -> str:
        logger.debug("Pinging document store")
        return await self._performance_repo.ping()
