"""
Lease and Response Envelope

The data handed to the lease manager when a secret is issued, and the
request context passed back into renew/revoke hooks.
"""

from datetime import datetime, timedelta
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, SkipValidation, field_validator


class Lease(BaseModel):
    """Lease metadata attached to an issued secret.

    Attributes:
        lease_id: ``<type>-<suffix>`` identifier of this lease.
        renewable: Whether the lease manager may call the renew hook.
        duration: Lifetime of the lease from issuance.
        grace_period: Extra time after expiry during which renewal is allowed.
    """

    model_config = ConfigDict(validate_assignment=True)

    lease_id: str = Field(..., description="Type-tagged lease identifier")
    renewable: bool = Field(default=False)
    duration: timedelta = Field(default=timedelta(0))
    grace_period: timedelta = Field(default=timedelta(0))

    @field_validator("duration", "grace_period")
    @classmethod
    def validate_non_negative(cls, v: timedelta) -> timedelta:
        if v < timedelta(0):
            raise ValueError("Lease durations must not be negative")
        return v

    def expires_at(self, issued_at: datetime) -> datetime:
        """Time at which a lease issued at *issued_at* expires."""
        return issued_at + self.duration

    def renewable_until(self, issued_at: datetime) -> datetime:
        """Last moment a renewal is accepted, including the grace period."""
        return issued_at + self.duration + self.grace_period


class SecretResponse(BaseModel):
    """Response envelope returned to the caller and tracked by the lease manager.

    ``is_secret`` marks the envelope as leased; plain responses leave it False
    and carry no lease. Callers may override lease timing after construction.
    """

    model_config = ConfigDict(validate_assignment=True)

    is_secret: bool = Field(default=False)
    lease: Optional[Lease] = Field(default=None)
    data: SkipValidation[dict[str, Any]] = Field(default_factory=dict)

    @property
    def lease_id(self) -> Optional[str]:
        return self.lease.lease_id if self.lease else None


class LeaseRequest(BaseModel):
    """Context passed to renew and revoke hooks."""

    lease_id: str = Field(..., description="Lease being renewed or revoked")
    lease: Optional[Lease] = Field(default=None)
    data: dict[str, Any] = Field(
        default_factory=dict, description="Data the secret was issued with"
    )

    @classmethod
    def for_response(cls, response: SecretResponse) -> "LeaseRequest":
        """Build a hook request for the lease carried by *response*."""
        if response.lease is None:
            raise ValueError("Response carries no lease")
        return cls(
            lease_id=response.lease.lease_id,
            lease=response.lease,
            data=response.data,
        )
