"""
Secret Descriptor

A secrets engine declares each kind of dynamic secret it issues with a
``Secret``. The descriptor names the type (used as the lease ID prefix and
registry key), documents its data fields, sets default lease timing, and
carries the renew/revoke hooks the lease manager calls later.
"""

import logging
from datetime import timedelta
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from secretlease.generator import DEFAULT_GENERATOR, IdGenerator
from secretlease.identifier import encode_lease_id
from secretlease.lease import Lease, LeaseRequest, SecretResponse
from secretlease.schema import FieldSchema

logger = logging.getLogger(__name__)

OperationFunc = Callable[[LeaseRequest], Optional[SecretResponse]]


class Secret(BaseModel):
    """Immutable declaration of a secret kind.

    Attributes:
        type: Secret kind name. Must match ``^[A-Za-z0-9_]+$`` and must not
            change once leases have been issued under it.
        fields: Schema of the data returned with each issued secret.
        default_duration: Lease duration applied to every issued secret.
        default_grace_period: Grace period applied to every issued secret.
        renew: Hook that extends a lease. If unset the type is not renewable.
        revoke: Hook that invalidates the underlying credential. Required at
            registration.

    Example:
        >>> secret = Secret(
        ...     type="aws",
        ...     default_duration=timedelta(hours=1),
        ...     revoke=revoke_access_key,
        ... )
        >>> response = secret.response({"access_key": "AKIA..."})
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Secret type, also the lease ID prefix")
    fields: Mapping[str, FieldSchema] = Field(default_factory=dict, validate_default=True)
    default_duration: timedelta = Field(default=timedelta(0))
    default_grace_period: timedelta = Field(default=timedelta(0))
    renew: Optional[OperationFunc] = Field(default=None)
    revoke: Optional[OperationFunc] = Field(default=None)

    @field_validator("fields")
    @classmethod
    def freeze_fields(cls, v: Mapping[str, FieldSchema]) -> Mapping[str, FieldSchema]:
        return MappingProxyType(dict(v))

    @property
    def renewable(self) -> bool:
        """Whether leases of this type can be renewed."""
        return self.renew is not None

    def response(
        self,
        data: dict[str, Any],
        generator: Optional[IdGenerator] = None,
    ) -> SecretResponse:
        """Build the leased response for one issued instance of this secret.

        Args:
            data: Instance data returned to the caller, attached as-is.
            generator: Source of the unique lease ID suffix. Defaults to
                random UUIDs.

        Returns:
            A secret response whose lease carries this type's defaults.
            Callers that need different timing adjust ``response.lease``.

        Raises:
            Whatever the generator raises, unchanged.
        """
        suffix = (generator or DEFAULT_GENERATOR).generate()
        lease_id = encode_lease_id(self.type, suffix)
        logger.debug("Issuing lease %s (renewable=%s)", lease_id, self.renewable)
        return SecretResponse(
            is_secret=True,
            lease=Lease(
                lease_id=lease_id,
                renewable=self.renewable,
                duration=self.default_duration,
                grace_period=self.default_grace_period,
            ),
            data=data,
        )

    def describe(self) -> dict[str, Any]:
        """Return a JSON-friendly summary for help output."""
        return {
            "type": self.type,
            "renewable": self.renewable,
            "default_duration": self.default_duration.total_seconds(),
            "default_grace_period": self.default_grace_period.total_seconds(),
            "fields": {
                name: schema.model_dump(mode="json")
                for name, schema in sorted(self.fields.items())
            },
        }
