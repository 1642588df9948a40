"""
Dependency injection for the hosts bounded context.

Provides FastAPI dependency functions that wire the shared document
store into repository adapters and use cases via constructor injection.
These are the composition root for the hosts context.
"""

from fastapi import Depends, Request

from netstats.application.hosts.check_health import CheckHealthUseCase
from netstats.application.hosts.find_registrations import FindRegistrationsUseCase
from netstats.application.hosts.get_host_stats import GetHostStatsUseCase
from netstats.application.hosts.get_host_uptime import GetHostUptimeUseCase
from netstats.application.hosts.get_network_capacity import GetNetworkCapacityUseCase
from netstats.application.hosts.list_assignments import ListAssignmentsUseCase
from netstats.application.hosts.list_hosts import ListHostsUseCase
from netstats.core.config import settings
from netstats.domain.hosts.ports import (
    AssignmentRepository,
    HostStatsRepository,
    PerformanceRepository,
    RegistrationRepository,
)
from netstats.infrastructure.hosts.assignment_repository import (
    AssignmentRepositoryAdapter,
)
from netstats.infrastructure.hosts.document_store import DocumentStore
from netstats.infrastructure.hosts.host_stats_repository import (
    HostStatsRepositoryAdapter,
)
from netstats.infrastructure.hosts.performance_repository import (
    PerformanceRepositoryAdapter,
)
from netstats.infrastructure.hosts.registration_repository import (
    RegistrationRepositoryAdapter,
)


def get_document_store(request: Request) -> DocumentStore:
    """Return the store opened by the application lifespan."""
    return request.app.state.document_store


def get_performance_repository(
    store: DocumentStore = Depends(get_document_store),
) -> PerformanceRepository:
    return PerformanceRepositoryAdapter(
        store.telemetry[settings.performance_collection]
    )


def get_host_stats_repository(
    store: DocumentStore = Depends(get_document_store),
) -> HostStatsRepository:
    return HostStatsRepositoryAdapter(store.telemetry[settings.host_stats_collection])


def get_assignment_repository(
    store: DocumentStore = Depends(get_document_store),
) -> AssignmentRepository:
    return AssignmentRepositoryAdapter(store.telemetry[settings.assignment_collection])


def get_registration_repository(
    store: DocumentStore = Depends(get_document_store),
) -> RegistrationRepository:
    return RegistrationRepositoryAdapter(
        store.opsconsole[settings.registration_collection]
    )


def get_check_health_use_case(
    repo: PerformanceRepository = Depends(get_performance_repository),
) -> CheckHealthUseCase:
    """Build CheckHealthUseCase with its infrastructure dependencies."""
    return CheckHealthUseCase(performance_repo=repo)


def get_host_uptime_use_case(
    repo: PerformanceRepository = Depends(get_performance_repository),
) -> GetHostUptimeUseCase:
    """Build GetHostUptimeUseCase with its infrastructure dependencies."""
    return GetHostUptimeUseCase(performance_repo=repo)


def get_network_capacity_use_case(
    repo: PerformanceRepository = Depends(get_performance_repository),
) -> GetNetworkCapacityUseCase:
    """Build GetNetworkCapacityUseCase with its infrastructure dependencies."""
    return GetNetworkCapacityUseCase(performance_repo=repo)


def get_list_hosts_use_case(
    repo: PerformanceRepository = Depends(get_performance_repository),
) -> ListHostsUseCase:
    """Build ListHostsUseCase with its infrastructure dependencies."""
    return ListHostsUseCase(performance_repo=repo)


def get_host_stats_use_case(
    repo: HostStatsRepository = Depends(get_host_stats_repository),
) -> GetHostStatsUseCase:
    """Build GetHostStatsUseCase with its infrastructure dependencies."""
    return GetHostStatsUseCase(stats_repo=repo)


def get_list_assignments_use_case(
    repo: AssignmentRepository = Depends(get_assignment_repository),
) -> ListAssignmentsUseCase:
    """Build ListAssignmentsUseCase with its infrastructure dependencies."""
    return ListAssignmentsUseCase(assignment_repo=repo)


def get_find_registrations_use_case(
    repo: RegistrationRepository = Depends(get_registration_repository),
) -> FindRegistrationsUseCase:
    """Build FindRegistrationsUseCase with its infrastructure dependencies."""
    return FindRegistrationsUseCase(registration_repo=repo)
