"""
Adapter: Host registration repository.

Implements RegistrationRepository port.
Reads the registration collection of the ops-console database, where
each document nests registration codes and the agent keys issued under them.
"""

import logging

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from netstats.domain.hosts.entities import HostRegistration
from netstats.domain.hosts.errors import DatabaseError
from netstats.domain.hosts.ports import RegistrationRepository
from netstats.infrastructure.hosts.documents import MalformedDocumentError, to_registration

logger = logging.getLogger(__name__)

AGENT_PUB_KEY_PATH = "registrationCode.agentPubKeys.pubKey"


class RegistrationRepositoryAdapter(RegistrationRepository):
    """MongoDB adapter for the registration collection."""

    def __init__(self, collection: AsyncCollection) -> None:
        self._collection = collection

    async def find_by_agent_pub_key(self, pub_key: str) -> list[HostRegistration]:
        """Return registrations holding `pub_key` in any registration code.

        Args:
            pub_key: Agent public key to search for.

        Returns:
            Matching registrations, possibly empty.
        """
        try:
            cursor = self._collection.find({AGENT_PUB_KEY_PATH: pub_key})
            registrations = [
                to_registration(doc, self._collection.name) async for doc in cursor
            ]
        except (PyMongoError, MalformedDocumentError) as exc:
            raise DatabaseError(f"registration lookup failed: {exc}") from exc

        logger.debug("Found %d registrations for agent key", len(registrations))
        return registrations
