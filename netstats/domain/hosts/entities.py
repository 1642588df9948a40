"""
Domain entities for the hosts bounded context.

Entities are read-only projections of documents stored by the
telemetry collectors. They contain no framework imports and no IO.
Optional fields mirror upstream data that may be partially collected.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

READ_ONLY_THRESHOLD = 0.5
SOURCE_CHAIN_THRESHOLD = 0.9


@dataclass(frozen=True)
class PerformanceRecord:
    """A host's entry in the performance summary collection."""

    id: str
    name: str
    description: str
    physical_address: Optional[str]
    zt_ipaddress: str
    created_at: int
    uptime: float


@dataclass(frozen=True)
class Uptime:
    """Uptime fraction of a single host."""

    uptime: float


@dataclass
class Capacity:
    """Network capacity tallied over host uptimes.

    Tiers:
        read_only    — uptime >= 0.5
        source_chain — uptime >= 0.9

    Since the thresholds are ordered, source_chain <= read_only <= total_hosts.
    """

    total_hosts: int = 0
    read_only: int = 0
    source_chain: int = 0

    def add_host(self, uptime: float) -> None:
        """Count one host into every tier its uptime qualifies for."""
        self.total_hosts += 1
        if uptime >= READ_ONLY_THRESHOLD:
            self.read_only += 1
        if uptime >= SOURCE_CHAIN_THRESHOLD:
            self.source_chain += 1


@dataclass(frozen=True)
class HostAssignment:
    """A host assigned to a network."""

    name: str


@dataclass(frozen=True)
class HostStats:
    """Status report sent by a host's netstat daemon.

    Any field except holoport_id is None when the daemon failed to collect it.
    """

    holoport_id: str
    holo_network: Optional[str] = None
    channel: Optional[str] = None
    holoport_model: Optional[str] = None
    ssh_status: Optional[bool] = None
    zt_ip: Optional[str] = None
    wan_ip: Optional[str] = None
    timestamp: Optional[str] = None


@dataclass(frozen=True)
class AgentPubKey:
    """An agent key bound to a registration code."""

    pub_key: str
    role: str


@dataclass(frozen=True)
class RegistrationCode:
    """A registration code and the agent keys issued under it."""

    code: str
    role: str
    agent_pub_keys: list[AgentPubKey] = field(default_factory=list)


@dataclass(frozen=True)
class HostRegistration:
    """A host operator's registration record."""

    given_names: str
    last_name: str
    is_jurisdiction_not_in_list: bool
    legal_jurisdiction: str
    created: datetime
    old_holoport_ids: list[str] = field(default_factory=list)
    registration_code: list[RegistrationCode] = field(default_factory=list)
