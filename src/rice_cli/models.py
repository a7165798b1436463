"""Data models for the setup wizard.

Connection parameters are pydantic models so their defaults live in one
place; probe outcomes and write outcomes are plain dataclasses and enums.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

import httpx
from pydantic import BaseModel, Field, model_validator

DEFAULT_INSTANCE_URL = "localhost:50051"
DEFAULT_STORAGE_USER = "admin"
DEFAULT_HTTP_PORT = "3000"
DEFAULT_RUN_ID = "default"


class StorageParams(BaseModel):
    """Connection parameters for Rice Storage."""

    url: str = Field(
        default=DEFAULT_INSTANCE_URL,
        description="Storage instance address (host:port)",
    )
    user: str = Field(default=DEFAULT_STORAGE_USER, description="Storage user")
    token: str = Field(default="", description="Auth token or password, may be empty")
    http_port: str = Field(
        default=DEFAULT_HTTP_PORT,
        description="HTTP port used for the health probe",
    )

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> StorageParams:
        """Build from persisted STORAGE_* variables, defaulting missing ones."""
        values = {
            "url": environ.get("STORAGE_INSTANCE_URL"),
            "user": environ.get("STORAGE_USER"),
            "token": environ.get("STORAGE_AUTH_TOKEN"),
            "http_port": environ.get("STORAGE_HTTP_PORT"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})


class StateParams(BaseModel):
    """Connection parameters for Rice State (agent memory)."""

    url: str = Field(
        default=DEFAULT_INSTANCE_URL,
        description="State instance address (host:port)",
    )
    token: str = Field(default="", description="Auth token, may be empty")
    run_id: str = Field(default=DEFAULT_RUN_ID, description="Run identifier")


class SetupAnswers(BaseModel):
    """Everything the user answered during one setup session."""

    storage_enabled: bool = True
    state_enabled: bool = True
    storage: StorageParams | None = None
    state: StateParams | None = None

    @model_validator(mode="after")
    def check_at_least_one_service(self) -> SetupAnswers:
        if not (self.storage_enabled or self.state_enabled):
            raise ValueError("at least one service must be enabled")
        return self

    @property
    def storage_params(self) -> StorageParams:
        """Storage parameters, or defaults when storage was not configured."""
        return self.storage or StorageParams()

    @property
    def state_params(self) -> StateParams:
        """State parameters, or defaults when state was not configured."""
        return self.state or StateParams()


class WriteOutcome(Enum):
    """What happened to a project file during setup."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"
    APPENDED = "appended"


class HealthStatus(Enum):
    """Classification of a health probe."""

    HEALTHY = "healthy"  # 2xx response
    UNHEALTHY = "unhealthy"  # Any other status
    UNREACHABLE = "unreachable"  # Transport failure (DNS, refused, timeout)


@dataclass(frozen=True)
class HealthCheckResult:
    """Outcome of a single health probe."""

    status: HealthStatus
    url: str
    status_code: int | None = None
    error: str | None = None

    @classmethod
    def healthy(cls, url: str, status_code: int) -> HealthCheckResult:
        return cls(HealthStatus.HEALTHY, url, status_code=status_code)

    @classmethod
    def unhealthy(cls, url: str, status_code: int) -> HealthCheckResult:
        return cls(HealthStatus.UNHEALTHY, url, status_code=status_code)

    @classmethod
    def unreachable(cls, url: str, error: str) -> HealthCheckResult:
        return cls(HealthStatus.UNREACHABLE, url, error=error)

    @property
    def ok(self) -> bool:
        return self.status is HealthStatus.HEALTHY

    @property
    def status_text(self) -> str:
        """Status code with its reason phrase, e.g. "503 Service Unavailable"."""
        if self.status_code is None:
            return ""
        reason = httpx.codes.get_reason_phrase(self.status_code)
        return f"{self.status_code} {reason}".rstrip()


@dataclass
class SetupReport:
    """Result of a completed setup session."""

    answers: SetupAnswers
    settings_outcome: WriteOutcome
    env_outcome: WriteOutcome
    health: HealthCheckResult | None = None


__all__ = [
    "DEFAULT_INSTANCE_URL",
    "DEFAULT_STORAGE_USER",
    "DEFAULT_HTTP_PORT",
    "DEFAULT_RUN_ID",
    "StorageParams",
    "StateParams",
    "SetupAnswers",
    "WriteOutcome",
    "HealthStatus",
    "HealthCheckResult",
    "SetupReport",
]
