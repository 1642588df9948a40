"""
Tests for the hosts API endpoints.

Tests FastAPI routes with mocked repositories injected through
dependency overrides. Validates response shapes, error mapping and
security headers. The application lifespan is not started, so no
database connection is opened.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import AutoReconnect

from netstats.core.config import settings
from netstats.domain.hosts.entities import (
    AgentPubKey,
    Capacity,
    HostAssignment,
    HostRegistration,
    HostStats,
    PerformanceRecord,
    RegistrationCode,
    Uptime,
)
from netstats.domain.hosts.errors import ApiError, DatabaseError, ErrorKind
from netstats.domain.hosts.ports import (
    AssignmentRepository,
    HostStatsRepository,
    PerformanceRepository,
    RegistrationRepository,
)
from netstats.interfaces.hosts.dependencies import (
    get_assignment_repository,
    get_host_stats_repository,
    get_performance_repository,
    get_registration_repository,
)
from netstats.main import app
from netstats.shared.security.headers import SECURE_HEADERS
from netstats.shared.security.rate_limiting import limiter

client = TestClient(app)

SNAPSHOT = 1631612888888


@pytest.fixture
def performance_repo():
    repo = AsyncMock(spec=PerformanceRepository)
    app.dependency_overrides[get_performance_repository] = lambda: repo
    yield repo
    app.dependency_overrides.clear()


@pytest.fixture
def stats_repo():
    repo = AsyncMock(spec=HostStatsRepository)
    app.dependency_overrides[get_host_stats_repository] = lambda: repo
    yield repo
    app.dependency_overrides.clear()


@pytest.fixture
def assignment_repo():
    repo = AsyncMock(spec=AssignmentRepository)
    app.dependency_overrides[get_assignment_repository] = lambda: repo
    yield repo
    app.dependency_overrides.clear()


@pytest.fixture
def registration_repo():
    repo = AsyncMock(spec=RegistrationRepository)
    app.dependency_overrides[get_registration_repository] = lambda: repo
    yield repo
    app.dependency_overrides.clear()


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_store_reachable(self, performance_repo: AsyncMock) -> None:
        performance_repo.ping.return_value = "Connected to db."

        response = client.get("/health")

        assert response.status_code == 200
        assert response.text == "Connected to db."

    def test_store_unreachable(self, performance_repo: AsyncMock) -> None:
        performance_repo.ping.side_effect = DatabaseError("server selection timeout")

        response = client.get("/health")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestUptimeEndpoint:
    """Tests for GET /hosts/{name}/uptime."""

    def test_known_host(self, performance_repo: AsyncMock) -> None:
        performance_repo.find_host_uptime_by_name.return_value = Uptime(0.87)

        response = client.get("/hosts/hp-01/uptime")

        assert response.status_code == 200
        assert response.json() == {"uptime": 0.87}
        performance_repo.find_host_uptime_by_name.assert_awaited_once_with("hp-01")

    def test_unknown_host_returns_404(self, performance_repo: AsyncMock) -> None:
        performance_repo.find_host_uptime_by_name.return_value = None

        response = client.get("/hosts/ghost/uptime")

        assert response.status_code == 404
        assert response.json() == {"error": "MissingRecord", "detail": "Host not found"}


class TestCapacityEndpoint:
    """Tests for GET /network/capacity."""

    def test_camel_case_payload(self, performance_repo: AsyncMock) -> None:
        performance_repo.aggregate_network_capacity.return_value = Capacity(4, 3, 2)

        response = client.get("/network/capacity")

        assert response.status_code == 200
        assert response.json() == {"totalHosts": 4, "readOnly": 3, "sourceChain": 2}

    def test_failure_is_generic_server_error(self, performance_repo: AsyncMock) -> None:
        performance_repo.aggregate_network_capacity.side_effect = DatabaseError(
            "connection reset mid-cursor"
        )

        response = client.get("/network/capacity")

        assert response.status_code == 500
        assert "cursor" not in response.text


class TestHostsEndpoint:
    """Tests for GET /hosts."""

    def test_lists_latest_snapshot(self, performance_repo: AsyncMock) -> None:
        performance_repo.latest_timestamp.return_value = SNAPSHOT
        performance_repo.list_hosts_at_timestamp.return_value = [
            PerformanceRecord(
                id="6140b0f8",
                name="hp-01",
                description="lab host",
                physical_address=None,
                zt_ipaddress="172.26.0.1",
                created_at=SNAPSHOT,
                uptime=0.99,
            )
        ]

        response = client.get("/hosts")

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": "6140b0f8",
                "name": "hp-01",
                "description": "lab host",
                "physicalAddress": None,
                "zt_ipaddress": "172.26.0.1",
                "created_at": SNAPSHOT,
                "uptime": 0.99,
            }
        ]

    def test_pinned_snapshot(self, performance_repo: AsyncMock, monkeypatch) -> None:
        monkeypatch.setattr(settings, "hosts_snapshot_timestamp", 1000)
        performance_repo.list_hosts_at_timestamp.return_value = []

        response = client.get("/hosts")

        assert response.status_code == 200
        assert response.json() == []
        performance_repo.latest_timestamp.assert_not_awaited()
        performance_repo.list_hosts_at_timestamp.assert_awaited_once_with(1000)


class TestHostStatsEndpoint:
    """Tests for GET /hosts/{holoport_id}/stats."""

    def test_partial_report(self, stats_repo: AsyncMock) -> None:
        stats_repo.get_latest.return_value = HostStats(
            holoport_id="hp-01", holo_network="flexNet", ssh_status=True
        )

        response = client.get("/hosts/hp-01/stats")

        body = response.json()
        assert response.status_code == 200
        assert body["holoportId"] == "hp-01"
        assert body["holoNetwork"] == "flexNet"
        assert body["sshStatus"] is True
        assert body["wanIp"] is None

    def test_missing_report(self, stats_repo: AsyncMock) -> None:
        stats_repo.get_latest.return_value = None

        assert client.get("/hosts/hp-404/stats").status_code == 404


class TestAssignmentsEndpoint:
    def test_lists_names(self, assignment_repo: AsyncMock) -> None:
        assignment_repo.list_all.return_value = [HostAssignment("hp-01")]

        response = client.get("/hosts/assignments")

        assert response.json() == [{"name": "hp-01"}]


class TestRegistrationsEndpoint:
    """Tests for GET /hosts/registrations."""

    def test_camel_case_registrations(self, registration_repo: AsyncMock) -> None:
        registration_repo.find_by_agent_pub_key.return_value = [
            HostRegistration(
                given_names="Ada",
                last_name="Lovelace",
                is_jurisdiction_not_in_list=False,
                legal_jurisdiction="United Kingdom",
                created=datetime(2021, 9, 14, tzinfo=timezone.utc),
                registration_code=[
                    RegistrationCode(
                        code="A1",
                        role="host",
                        agent_pub_keys=[AgentPubKey("uhCAk1", "host")],
                    )
                ],
            )
        ]

        response = client.get("/hosts/registrations", params={"pubKey": "uhCAk1"})

        body = response.json()
        assert response.status_code == 200
        assert body[0]["givenNames"] == "Ada"
        assert body[0]["registrationCode"][0]["agentPubKeys"] == [
            {"pubKey": "uhCAk1", "role": "host"}
        ]

    def test_missing_key_is_bad_request(self, registration_repo: AsyncMock) -> None:
        response = client.get("/hosts/registrations")

        assert response.status_code == 400
        assert response.json()["error"] == "BadRequest"
        registration_repo.find_by_agent_pub_key.assert_not_awaited()


class TestErrorMapping:
    """Every error kind renders with its fixed status code."""

    @pytest.mark.parametrize(
        ("kind", "status"),
        [
            (ErrorKind.BAD_REQUEST, 400),
            (ErrorKind.INVALID_PAYLOAD, 400),
            (ErrorKind.MISSING_RECORD, 404),
            (ErrorKind.MISSING_SIGNATURE, 401),
            (ErrorKind.INVALID_SIGNATURE, 401),
            (ErrorKind.DATABASE, 500),
        ],
    )
    def test_status_per_kind(
        self, performance_repo: AsyncMock, kind: ErrorKind, status: int
    ) -> None:
        performance_repo.ping.side_effect = ApiError.message(kind, "fixed text")

        response = client.get("/health")

        assert response.status_code == status

    def test_info_detail_is_not_exposed(self, performance_repo: AsyncMock) -> None:
        performance_repo.ping.side_effect = ApiError.info(
            ErrorKind.INVALID_SIGNATURE, "hmac mismatch for key 42"
        )

        response = client.get("/health")

        assert response.status_code == 401
        assert response.json() == {"error": "InvalidSignature"}

    def test_escaped_driver_error_is_generic(self, performance_repo: AsyncMock) -> None:
        performance_repo.ping.side_effect = AutoReconnect("node 10.0.0.7 down")

        response = client.get("/health")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_unexpected_error_is_hidden(self, performance_repo: AsyncMock) -> None:
        performance_repo.ping.side_effect = RuntimeError("boom")
        lenient = TestClient(app, raise_server_exceptions=False)

        response = lenient.get("/health")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, performance_repo: AsyncMock) -> None:
        performance_repo.ping.return_value = "Connected to db."

        response = client.get("/health")

        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value


class TestRateLimiting:
    """Tests for the per-client request limit."""

    @pytest.fixture(autouse=True)
    def tight_limit(self, monkeypatch):
        monkeypatch.setattr(settings, "rate_limit_default", "2/minute")
        limiter.reset()
        yield
        limiter.reset()

    def test_third_request_is_throttled(self, performance_repo: AsyncMock) -> None:
        performance_repo.ping.return_value = "Connected to db."

        statuses = [client.get("/health").status_code for _ in range(3)]

        assert statuses == [200, 200, 429]

    def test_throttled_response_body(self, assignment_repo: AsyncMock) -> None:
        assignment_repo.list_all.return_value = []
        for _ in range(2):
            client.get("/hosts/assignments")

        response = client.get("/hosts/assignments")

        assert response.status_code == 429
        body = response.json()
        assert body["error"] == "Rate limit exceeded"
        assert "2 per 1 minute" in body["detail"]
        assert response.headers["Cache-Control"] == "no-store"
