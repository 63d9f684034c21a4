# Copyright (c) Secretlease Contributors. All rights reserved.
# Licensed under the MIT License.
"""Centralized exception hierarchy for secretlease.

All secretlease exceptions inherit from SecretLeaseError, so lease managers
can catch the whole family in one place.
"""


class SecretLeaseError(Exception):
    """Base exception for all secretlease errors."""


class RegistrationError(SecretLeaseError):
    """A secret descriptor was rejected by the registry."""


class DispatchError(SecretLeaseError):
    """Errors while routing a renew/revoke request to a descriptor."""


class UnknownSecretTypeError(DispatchError):
    """The lease ID does not resolve to any registered secret type."""


class NotRenewableError(DispatchError):
    """Renewal was requested for a secret type without a renew hook."""


class ConfigError(SecretLeaseError):
    """Errors related to loading or validating configuration."""


__all__ = [
    "SecretLeaseError",
    "RegistrationError",
    "DispatchError",
    "UnknownSecretTypeError",
    "NotRenewableError",
    "ConfigError",
]
