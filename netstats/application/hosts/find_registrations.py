"""
Use case: Find host registrations that issued an agent key.

Input: FindRegistrationsQuery (pub_key)
Output: list[RegistrationResult]
Side effects: None (read-only query).
Failure cases: BadRequest for a blank key, DatabaseError.
"""

import logging

from netstats.application.hosts.dtos import (
    AgentPubKeyResult,
    FindRegistrationsQuery,
    RegistrationCodeResult,
    RegistrationResult,
)
from netstats.domain.hosts.errors import ApiError, ErrorKind
from netstats.domain.hosts.ports import RegistrationRepository

logger = logging.getLogger(__name__)


class FindRegistrationsUseCase:
    """Orchestrates registration lookup by agent public key.

    Registrations are returned without their internal identifiers.
    """

    def __init__(self, registration_repo: RegistrationRepository) -> None:
        """Initialize the use case.

        Args:
            registration_repo: Repository for reading registrations.
        """
        self._registration_repo = registration_repo

    async def execute(self, query: FindRegistrationsQuery) -> list[RegistrationResult]:
        """Run the registration lookup.

        Args:
            query: The lookup request containing the agent key.

        Returns:
            Matching registrations, possibly empty.
        """
        pub_key = query.pub_key.strip()
        if not pub_key:
            raise ApiError.message(ErrorKind.BAD_REQUEST, "Agent key must not be blank")

        logger.info("Finding registrations by agent key")

        registrations = await self._registration_repo.find_by_agent_pub_key(pub_key)

        return [
            RegistrationResult(
                given_names=r.given_names,
                last_name=r.last_name,
                is_jurisdiction_not_in_list=r.is_jurisdiction_not_in_list,
                legal_jurisdiction=r.legal_jurisdiction,
                created=r.created,
                old_holoport_ids=list(r.old_holoport_ids),
                registration_code=[
                    RegistrationCodeResult(
                        code=c.code,
                        role=c.role,
                        agent_pub_keys=[
                            AgentPubKeyResult(pub_key=k.pub_key, role=k.role)
                            for k in c.agent_pub_keys
                        ],
                    )
                    for c in r.registration_code
                ],
            )
            for r in registrations
        ]
