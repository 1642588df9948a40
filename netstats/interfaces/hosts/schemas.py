"""
Pydantic schemas for the hosts API responses.

These schemas define the external JSON contract. Field names follow
what existing dashboards consume: camelCase for capacity, stats and
registrations, and the stored document names for host records.
No business logic belongs here.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UptimeResponse(BaseModel):
    """Response schema for the host uptime endpoint."""

    uptime: float


class CapacityResponse(CamelModel):
    """Response schema for the network capacity endpoint."""

    total_hosts: int
    read_only: int
    source_chain: int


class HostRecordItem(BaseModel):
    """A single host entry of a performance snapshot."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    physical_address: str | None = Field(default=None, alias="physicalAddress")
    zt_ipaddress: str
    created_at: int
    uptime: float


class HostStatsResponse(CamelModel):
    """Latest status report of a host. Uncollected values are null."""

    holoport_id: str
    holo_network: str | None = None
    channel: str | None = None
    holoport_model: str | None = None
    ssh_status: bool | None = None
    zt_ip: str | None = None
    wan_ip: str | None = None
    timestamp: str | None = None


class AssignmentItem(BaseModel):
    name: str


class AgentPubKeyItem(CamelModel):
    pub_key: str
    role: str


class RegistrationCodeItem(CamelModel):
    code: str
    role: str
    agent_pub_keys: list[AgentPubKeyItem]


class RegistrationItem(CamelModel):
    """A host operator registration without internal identifiers."""

    given_names: str
    last_name: str
    is_jurisdiction_not_in_list: bool
    legal_jurisdiction: str
    created: datetime
    old_holoport_ids: list[str]
    registration_code: list[RegistrationCodeItem]


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
