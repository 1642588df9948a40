"""
Use case: List host network assignments.

Input: None
Output: list[AssignmentResult]
Side effects: None (read-only query).
Failure cases: DatabaseError.
"""

import logging

from netstats.application.hosts.dtos import AssignmentResult
from netstats.domain.hosts.ports import AssignmentRepository

logger = logging.getLogger(__name__)


class ListAssignmentsUseCase:
    def __init__(self, assignment_repo: AssignmentRepository) -> None:
        self._assignment_repo = assignment_repo

    async def execute(self) -> list[AssignmentResult]:
        logger.info("Listing host assignments")
        assignments = await self._assignment_repo.list_all()
        return [AssignmentResult(name=a.name) for a in assignments]
