"""
FastAPI router for the hosts bounded context.

All routes delegate to use cases. No business logic here.
Path and query validation is handled by FastAPI.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path, Query, Request

from netstats.application.hosts.dtos import (
    FindRegistrationsQuery,
    GetHostStatsQuery,
    GetHostUptimeQuery,
    ListHostsQuery,
)
from netstats.application.hosts.find_registrations import FindRegistrationsUseCase
from netstats.application.hosts.get_host_stats import GetHostStatsUseCase
from netstats.application.hosts.get_host_uptime import GetHostUptimeUseCase
from netstats.application.hosts.get_network_capacity import GetNetworkCapacityUseCase
from netstats.application.hosts.list_assignments import ListAssignmentsUseCase
from netstats.application.hosts.list_hosts import ListHostsUseCase
from netstats.core.config import settings
from netstats.interfaces.hosts.dependencies import (
    get_find_registrations_use_case,
    get_host_stats_use_case,
    get_host_uptime_use_case,
    get_list_assignments_use_case,
    get_list_hosts_use_case,
    get_network_capacity_use_case,
)
from netstats.interfaces.hosts.schemas import (
    AgentPubKeyItem,
    AssignmentItem,
    CapacityResponse,
    ErrorResponse,
    HostRecordItem,
    HostStatsResponse,
    RegistrationCodeItem,
    RegistrationItem,
    UptimeResponse,
)
from netstats.shared.security.rate_limiting import default_rate_limit, limiter

router = APIRouter(tags=["hosts"])

SERVER_ERROR = {500: {"model": ErrorResponse}}


@router.get(
    "/hosts",
    response_model=list[HostRecordItem],
    responses=SERVER_ERROR,
    summary="List hosts",
    description="List every host of the latest performance snapshot.",
)
@limiter.limit(default_rate_limit)
async def list_hosts(
    request: Request,
    use_case: ListHostsUseCase = Depends(get_list_hosts_use_case),
) -> list[HostRecordItem]:
    """List hosts sharing the snapshot timestamp."""
    query = ListHostsQuery(timestamp=settings.hosts_snapshot_timestamp)
    results = await use_case.execute(query)
    return [
        HostRecordItem(
            id=r.id,
            name=r.name,
            description=r.description,
            physical_address=r.physical_address,
            zt_ipaddress=r.zt_ipaddress,
            created_at=r.created_at,
            uptime=r.uptime,
        )
        for r in results
    ]


@router.get(
    "/hosts/assignments",
    response_model=list[AssignmentItem],
    responses=SERVER_ERROR,
    summary="List host assignments",
)
@limiter.limit(default_rate_limit)
async def list_assignments(
    request: Request,
    use_case: ListAssignmentsUseCase = Depends(get_list_assignments_use_case),
) -> list[AssignmentItem]:
    results = await use_case.execute()
    return [AssignmentItem(name=r.name) for r in results]


@router.get(
    "/hosts/registrations",
    response_model=list[RegistrationItem],
    responses={400: {"model": ErrorResponse}, **SERVER_ERROR},
    summary="Find registrations by agent key",
    description="Return host registrations that issued the given agent public key.",
)
@limiter.limit(default_rate_limit)
async def find_registrations(
    request: Request,
    pub_key: str = Query(..., alias="pubKey", min_length=1, max_length=128),
    use_case: FindRegistrationsUseCase = Depends(get_find_registrations_use_case),
) -> list[RegistrationItem]:
    """Find registrations holding an agent key."""
    results = await use_case.execute(FindRegistrationsQuery(pub_key=pub_key))
    return [
        RegistrationItem(
            given_names=r.given_names,
            last_name=r.last_name,
            is_jurisdiction_not_in_list=r.is_jurisdiction_not_in_list,
            legal_jurisdiction=r.legal_jurisdiction,
            created=r.created,
            old_holoport_ids=r.old_holoport_ids,
            registration_code=[
                RegistrationCodeItem(
                    code=c.code,
                    role=c.role,
                    agent_pub_keys=[
                        AgentPubKeyItem(pub_key=k.pub_key, role=k.role)
                        for k in c.agent_pub_keys
                    ],
                )
                for c in r.registration_code
            ],
        )
        for r in results
    ]


@router.get(
    "/hosts/{name}/uptime",
    response_model=UptimeResponse,
    responses={404: {"model": ErrorResponse}, **SERVER_ERROR},
    summary="Get host uptime",
    description="Return the uptime fraction of the host with exactly this name.",
)
@limiter.limit(default_rate_limit)
async def get_host_uptime(
    request: Request,
    name: str = Path(..., min_length=1),
    use_case: GetHostUptimeUseCase = Depends(get_host_uptime_use_case),
) -> UptimeResponse:
    """Get uptime for a given host name."""
    result = await use_case.execute(GetHostUptimeQuery(name=name))
    return UptimeResponse(uptime=result.uptime)


@router.get(
    "/hosts/{holoport_id}/stats",
    response_model=HostStatsResponse,
    responses={404: {"model": ErrorResponse}, **SERVER_ERROR},
    summary="Get host stats",
    description="Return the latest status report sent by a host.",
)
@limiter.limit(default_rate_limit)
async def get_host_stats(
    request: Request,
    holoport_id: str = Path(..., min_length=1),
    use_case: GetHostStatsUseCase = Depends(get_host_stats_use_case),
) -> HostStatsResponse:
    """Get the latest stats for a host."""
    result = await use_case.execute(GetHostStatsQuery(holoport_id=holoport_id))
    return HostStatsResponse(
        holoport_id=result.holoport_id,
        holo_network=result.holo_network,
        channel=result.channel,
        holoport_model=result.holoport_model,
        ssh_status=result.ssh_status,
        zt_ip=result.zt_ip,
        wan_ip=result.wan_ip,
        timestamp=result.timestamp,
    )


@router.get(
    "/network/capacity",
    response_model=CapacityResponse,
    responses=SERVER_ERROR,
    summary="Get network capacity",
    description="Count hosts by uptime tier across the whole network.",
)
@limiter.limit(default_rate_limit)
async def get_network_capacity(
    request: Request,
    use_case: GetNetworkCapacityUseCase = Depends(get_network_capacity_use_case),
) -> CapacityResponse:
    """Get network capacity."""
    result = await use_case.execute()
    return CapacityResponse(
        total_hosts=result.total_hosts,
        read_only=result.read_only,
        source_chain=result.source_chain,
    )
