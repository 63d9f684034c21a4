"""
Secret Registry

Maps secret types to their descriptors so that a lease manager can resolve
the renew/revoke hooks for a lease from its ID alone. A registry is an
ordinary object: engines register into the instance they are given, and the
lease manager holds a reference to the same instance.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from secretlease.config import LeaseConfig
from secretlease.exceptions import (
    NotRenewableError,
    RegistrationError,
    UnknownSecretTypeError,
)
from secretlease.identifier import SEPARATOR, is_valid_secret_type, secret_type
from secretlease.lease import LeaseRequest, SecretResponse
from secretlease.secret import Secret

logger = logging.getLogger(__name__)


class SecretRegistry:
    """Type to descriptor lookup with registration-time validation.

    Type names are matched case-insensitively.

    Args:
        config: Limits applied to registered descriptors.

    Example:
        >>> registry = SecretRegistry()
        >>> registry.register(aws_secret)
        >>> registry.revoke(LeaseRequest(lease_id="aws-1234"))
    """

    def __init__(self, config: Optional[LeaseConfig] = None) -> None:
        self._config = config or LeaseConfig()
        self._secrets: dict[str, Secret] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> LeaseConfig:
        return self._config

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, secret: Secret) -> None:
        """Validate and register a secret descriptor.

        Raises:
            RegistrationError: If the type is empty or malformed, the revoke
                hook is missing, default timing exceeds the configured limits,
                or the type is already registered and replacement is off.
        """
        self._validate(secret)
        key = secret.type.lower()
        with self._lock:
            if key in self._secrets and not self._config.allow_replace:
                raise RegistrationError(
                    f"Secret type {secret.type!r} is already registered"
                )
            self._secrets[key] = secret
        logger.info(
            "Registered secret type %s (renewable=%s)", secret.type, secret.renewable
        )

    def _validate(self, secret: Secret) -> None:
        if not is_valid_secret_type(secret.type):
            raise RegistrationError(
                f"Invalid secret type {secret.type!r}: must be non-empty and "
                "contain only letters, digits, or underscores"
            )
        if secret.revoke is None:
            raise RegistrationError(
                f"Secret type {secret.type!r} has no revoke hook"
            )
        limit = self._config.max_default_duration
        if limit is not None and secret.default_duration > limit:
            raise RegistrationError(
                f"Secret type {secret.type!r} default duration "
                f"{secret.default_duration} exceeds maximum {limit}"
            )
        limit = self._config.max_default_grace_period
        if limit is not None and secret.default_grace_period > limit:
            raise RegistrationError(
                f"Secret type {secret.type!r} default grace period "
                f"{secret.default_grace_period} exceeds maximum {limit}"
            )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, secret_type_name: str) -> Optional[Secret]:
        """Return the descriptor registered for a type, or None."""
        with self._lock:
            return self._secrets.get(secret_type_name.lower())

    def resolve(self, lease_id: str) -> Optional[Secret]:
        """Return the descriptor that issued *lease_id*, or None.

        IDs that decode to an empty type never resolve.
        """
        type_name, _ = secret_type(lease_id)
        if not type_name:
            return None
        return self.get(type_name)

    def types(self) -> list[str]:
        """Registered type names, sorted."""
        with self._lock:
            secrets = list(self._secrets.values())
        return sorted(s.type for s in secrets)

    def __contains__(self, secret_type_name: object) -> bool:
        if not isinstance(secret_type_name, str):
            return False
        with self._lock:
            return secret_type_name.lower() in self._secrets

    def __len__(self) -> int:
        with self._lock:
            return len(self._secrets)

    # ------------------------------------------------------------------
    # Hook dispatch
    # ------------------------------------------------------------------

    def renew(self, request: LeaseRequest) -> Optional[SecretResponse]:
        """Call the renew hook of the descriptor that issued the lease.

        Raises:
            UnknownSecretTypeError: If the lease ID resolves to no descriptor.
            NotRenewableError: If the descriptor has no renew hook.
        """
        secret = self._require(request.lease_id)
        if secret.renew is None:
            raise NotRenewableError(
                f"Secret type {secret.type!r} is not renewable"
            )
        logger.debug("Renewing lease %s", request.lease_id)
        return secret.renew(request)

    def revoke(self, request: LeaseRequest) -> Optional[SecretResponse]:
        """Call the revoke hook of the descriptor that issued the lease.

        Raises:
            UnknownSecretTypeError: If the lease ID resolves to no descriptor.
        """
        secret = self._require(request.lease_id)
        logger.debug("Revoking lease %s", request.lease_id)
        # register() guarantees a revoke hook
        return secret.revoke(request)  # type: ignore[misc]

    def _require(self, lease_id: str) -> Secret:
        secret = self.resolve(lease_id)
        if secret is None:
            type_name, _ = secret_type(lease_id)
            logger.warning("No secret type registered for lease %s", lease_id)
            if not type_name:
                raise UnknownSecretTypeError(
                    f"Lease ID {lease_id!r} has no {SEPARATOR!r}-separated type"
                )
            raise UnknownSecretTypeError(f"Unknown secret type {type_name!r}")
        return secret
