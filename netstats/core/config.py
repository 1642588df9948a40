"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        mongo_uri: Connection string of the document store. Required;
            the application refuses to start without it.
        database_name: Database holding the telemetry collections.
        opsconsole_database_name: Database holding host registrations.
        server_selection_timeout_ms: Driver server selection timeout.
        hosts_snapshot_timestamp: Pin the host listing to one snapshot
            (epoch milliseconds). When unset, the latest snapshot is used.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Host Network Statistics"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"

    mongo_uri: str
    database_name: str = "pjs-test"
    opsconsole_database_name: str = "opsconsoledb"
    server_selection_timeout_ms: int = 30_000

    performance_collection: str = "performance_summary"
    host_stats_collection: str = "holoport_status"
    assignment_collection: str = "holoports_assignment"
    registration_collection: str = "registration"

    hosts_snapshot_timestamp: Optional[int] = None


settings = Settings()
