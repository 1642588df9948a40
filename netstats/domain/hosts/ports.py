"""
Port interfaces (ABCs) for the hosts bounded context.

Ports define the read contracts the domain requires from the document
store. Infrastructure adapters implement these interfaces and raise
DatabaseError for any store failure.
"""

from abc import ABC, abstractmethod
from typing import Optional

from netstats.domain.hosts.entities import (
    Capacity,
    HostAssignment,
    HostRegistration,
    HostStats,
    PerformanceRecord,
    Uptime,
)


class PerformanceRepository(ABC):
    """Port for reading the performance summary collection."""

    @abstractmethod
    async def ping(self) -> str:
        """Check store liveness and return a short status string."""
        raise NotImplementedError

    @abstractmethod
    async def find_host_uptime_by_name(self, name: str) -> Optional[Uptime]:
        """Return the uptime of the host with exactly this name, or None."""
        raise NotImplementedError

    @abstractmethod
    async def aggregate_network_capacity(self) -> Capacity:
        """Stream every record's uptime into a Capacity."""
        raise NotImplementedError

    @abstractmethod
    async def list_hosts_at_timestamp(self, timestamp: int) -> list[PerformanceRecord]:
        """Return all records created at exactly this timestamp."""
        raise NotImplementedError

    @abstractmethod
    async def latest_timestamp(self) -> Optional[int]:
        """Return the newest record timestamp, or None for an empty collection."""
        raise NotImplementedError


class HostStatsRepository(ABC):
    """Port for reading host status reports."""

    @abstractmethod
    async def get_latest(self, holoport_id: str) -> Optional[HostStats]:
        """Return the newest status report of a host, or None."""
        raise NotImplementedError


class AssignmentRepository(ABC):
    """Port for reading host network assignments."""

    @abstractmethod
    async def list_all(self) -> list[HostAssignment]:
        """Return every assignment."""
        raise NotImplementedError


class RegistrationRepository(ABC):
    """Port for reading host operator registrations."""

    @abstractmethod
    async def find_by_agent_pub_key(self, pub_key: str) -> list[HostRegistration]:
        """Return registrations that issued the given agent key."""
        raise NotImplementedError
