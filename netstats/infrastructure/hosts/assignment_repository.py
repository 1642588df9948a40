"""
Adapter: Host assignment repository.

Implements AssignmentRepository port over the holoports_assignment collection.
"""

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from netstats.domain.hosts.entities import HostAssignment
from netstats.domain.hosts.errors import DatabaseError
from netstats.domain.hosts.ports import AssignmentRepository
from netstats.infrastructure.hosts.documents import MalformedDocumentError, to_assignment


class AssignmentRepositoryAdapter(AssignmentRepository):
    """MongoDB adapter for the holoports_assignment collection."""

    def __init__(self, collection: AsyncCollection) -> None:
        self._collection = collection

    async def list_all(self) -> list[HostAssignment]:
        try:
            cursor = self._collection.find({}, projection={"name": True, "_id": False})
            return [to_assignment(doc, self._collection.name) async for doc in cursor]
        except (PyMongoError, MalformedDocumentError) as exc:
            raise DatabaseError(f"assignment listing failed: {exc}") from exc
