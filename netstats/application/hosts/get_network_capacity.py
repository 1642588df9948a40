"""
Use case: Compute network capacity.

Input: None
Output: NetworkCapacityResult
Side effects: None (read-only query, computed fresh on every call).
Failure cases: DatabaseError. Partial counts are never returned.
"""

import logging

from netstats.application.hosts.dtos import NetworkCapacityResult
from netstats.domain.hosts.ports import PerformanceRepository

logger = logging.getLogger(__name__)


class GetNetworkCapacityUseCase:
    """Orchestrates the capacity aggregation over every known host."""

    def __init__(self, performance_repo: PerformanceRepository) -> None:
        self._performance_repo = performance_repo

    async def execute(self) -> NetworkCapacityResult:
        logger.info("Aggregating network capacity")

        capacity = await self._performance_repo.aggregate_network_capacity()

        return NetworkCapacityResult(
            total_hosts=capacity.total_hosts,
            read_only=capacity.read_only,
            source_chain=capacity.source_chain,
        )
