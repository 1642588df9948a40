"""
Data Transfer Objects for the hosts application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class GetHostUptimeQuery:
    """Input DTO for looking up one host's uptime.

    Attributes:
        name: Exact host name as stored in the performance summary.
    """

    name: str


@dataclass(frozen=True)
class HostUptimeResult:
    """Output DTO carrying a host's uptime fraction."""

    uptime: float


@dataclass(frozen=True)
class NetworkCapacityResult:
    """Output DTO for network capacity.

    Attributes:
        total_hosts: Number of hosts in the performance summary.
        read_only: Hosts with uptime >= 0.5.
        source_chain: Hosts with uptime >= 0.9.
    """

    total_hosts: int
    read_only: int
    source_chain: int


@dataclass(frozen=True)
class ListHostsQuery:
    """Input DTO for listing hosts of one snapshot.

    Attributes:
        timestamp: Snapshot to list (epoch milliseconds). None selects
            the latest snapshot in the store.
    """

    timestamp: Optional[int] = None


@dataclass(frozen=True)
class HostRecordResult:
    """Output DTO for one host entry of a snapshot."""

    id: str
    name: str
    description: str
    physical_address: Optional[str]
    zt_ipaddress: str
    created_at: int
    uptime: float


@dataclass(frozen=True)
class GetHostStatsQuery:
    """Input DTO for retrieving the latest status report of a host."""

    holoport_id: str


@dataclass(frozen=True)
class HostStatsResult:
    """Output DTO for a host status report. Unknown values stay None."""

    holoport_id: str
    holo_network: Optional[str]
    channel: Optional[str]
    holoport_model: Optional[str]
    ssh_status: Optional[bool]
    zt_ip: Optional[str]
    wan_ip: Optional[str]
    timestamp: Optional[str]


@dataclass(frozen=True)
class AssignmentResult:
    """Output DTO for a host assignment."""

    name: str


@dataclass(frozen=True)
class FindRegistrationsQuery:
    """Input DTO for finding registrations by agent key."""

    pub_key: str


@dataclass(frozen=True)
class AgentPubKeyResult:
    pub_key: str
    role: str


@dataclass(frozen=True)
class RegistrationCodeResult:
    code: str
    role: str
    agent_pub_keys: list[AgentPubKeyResult] = field(default_factory=list)


@dataclass(frozen=True)
class RegistrationResult:
    """Output DTO for a host operator registration."""

    given_names: str
    last_name: str
    is_jurisdiction_not_in_list: bool
    legal_jurisdiction: str
    created: datetime
    old_holoport_ids: list[str] = field(default_factory=list)
    registration_code: list[RegistrationCodeResult] = field(default_factory=list)
