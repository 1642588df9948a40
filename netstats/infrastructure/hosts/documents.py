"""
Document-to-entity mapping for the hosts collections.

Each function converts one raw BSON document (as a dict) into a domain
entity. A document that lacks a required field or carries a value of
the wrong type raises MalformedDocumentError; repositories translate
that into DatabaseError.
"""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from netstats.domain.hosts.entities import (
    AgentPubKey,
    HostAssignment,
    HostRegistration,
    HostStats,
    PerformanceRecord,
    RegistrationCode,
)

Document = Mapping[str, Any]


class MalformedDocumentError(ValueError):
    """Raised when a stored document does not match the expected schema."""

    def __init__(self, collection: str, reason: str) -> None:
        super().__init__(f"Malformed document in {collection}: {reason}")
        self.collection = collection
        self.reason = reason


def _required(doc: Document, key: str, collection: str) -> Any:
    value = doc.get(key)
    if value is None:
        raise MalformedDocumentError(collection, f"missing field '{key}'")
    return value


def _as_int(value: Any) -> int:
    # Extended JSON exports keep 64-bit integers as {"$numberLong": "..."}.
    if isinstance(value, Mapping):
        value = value.get("$numberLong", value.get("numberLong"))
    return int(value)


def to_created_at(doc: Document, collection: str = "performance_summary") -> int:
    """Extract the snapshot timestamp (epoch milliseconds) from a document."""
    value = _required(doc, "created_at", collection)
    try:
        return _as_int(value)
    except (TypeError, ValueError) as exc:
        raise MalformedDocumentError(
            collection, "created_at is not an integer"
        ) from exc


def to_uptime(doc: Document, collection: str = "performance_summary") -> float:
    """Extract the uptime fraction from a performance document."""
    value = _required(doc, "uptime", collection)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedDocumentError(collection, "uptime is not a number") from exc


def to_performance_record(
    doc: Document, collection: str = "performance_summary"
) -> PerformanceRecord:
    """Map a performance_summary document to a PerformanceRecord."""
    try:
        return PerformanceRecord(
            id=str(_required(doc, "_id", collection)),
            name=str(_required(doc, "name", collection)),
            description=str(_required(doc, "description", collection)),
            physical_address=doc.get("physicalAddress"),
            zt_ipaddress=str(_required(doc, "zt_ipaddress", collection)),
            created_at=to_created_at(doc, collection),
            uptime=to_uptime(doc, collection),
        )
    except MalformedDocumentError:
        raise
    except (TypeError, ValueError) as exc:
        raise MalformedDocumentError(collection, str(exc)) from exc


def to_host_stats(doc: Document, collection: str = "holoport_status") -> HostStats:
    """Map a holoport_status document to HostStats."""
    ssh_status: Optional[Any] = doc.get("sshStatus")
    return HostStats(
        holoport_id=str(_required(doc, "holoportId", collection)),
        holo_network=doc.get("holoNetwork"),
        channel=doc.get("channel"),
        holoport_model=doc.get("holoportModel"),
        ssh_status=None if ssh_status is None else bool(ssh_status),
        zt_ip=doc.get("ztIp"),
        wan_ip=doc.get("wanIp"),
        timestamp=None if doc.get("timestamp") is None else str(doc["timestamp"]),
    )


def to_assignment(
    doc: Document, collection: str = "holoports_assignment"
) -> HostAssignment:
    """Map a holoports_assignment document to HostAssignment."""
    return HostAssignment(name=str(_required(doc, "name", collection)))


def _to_created(value: Any, collection: str) -> datetime:
    if isinstance(value, Mapping):
        value = value.get("date", value.get("$date"))
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if value is None:
        raise MalformedDocumentError(collection, "missing creation date")
    return datetime.fromtimestamp(_as_int(value) / 1000, tz=timezone.utc)


def to_registration(doc: Document, collection: str = "registration") -> HostRegistration:
    """Map a registration document to HostRegistration.

    The internal `_id` and `__v` fields are dropped.
    """
    try:
        codes = [
            RegistrationCode(
                code=str(_required(code, "code", collection)),
                role=str(_required(code, "role", collection)),
                agent_pub_keys=[
                    AgentPubKey(
                        pub_key=str(_required(key, "pubKey", collection)),
                        role=str(_required(key, "role", collection)),
                    )
                    for key in code.get("agentPubKeys") or []
                ],
            )
            for code in doc.get("registrationCode") or []
        ]
        return HostRegistration(
            given_names=str(_required(doc, "givenNames", collection)),
            last_name=str(_required(doc, "lastName", collection)),
            is_jurisdiction_not_in_list=bool(doc.get("isJurisdictionNotInList", False)),
            legal_jurisdiction=str(_required(doc, "legalJurisdiction", collection)),
            created=_to_created(doc.get("created"), collection),
            old_holoport_ids=[str(i) for i in doc.get("oldHoloportIds") or []],
            registration_code=codes,
        )
    except MalformedDocumentError:
        raise
    except (AttributeError, TypeError, ValueError) as exc:
        raise MalformedDocumentError(collection, str(exc)) from exc
