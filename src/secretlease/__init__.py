"""
secretlease - Lease contracts for dynamically issued secrets

Secrets engines declare each kind of secret they issue with a ``Secret``
descriptor, build leased responses from it, and register it so a lease
manager can later renew or revoke leases by ID.
"""

__version__ = "0.1.0"

from .config import LeaseConfig, load_config
from .exceptions import (
    ConfigError,
    DispatchError,
    NotRenewableError,
    RegistrationError,
    SecretLeaseError,
    UnknownSecretTypeError,
)
from .generator import IdGenerator, UUIDGenerator
from .identifier import SEPARATOR, encode_lease_id, is_valid_secret_type, secret_type
from .lease import Lease, LeaseRequest, SecretResponse
from .registry import SecretRegistry
from .schema import FieldSchema, FieldType
from .secret import OperationFunc, Secret

__all__ = [
    "__version__",
    # Descriptor
    "Secret",
    "OperationFunc",
    "FieldSchema",
    "FieldType",
    # Identifiers
    "SEPARATOR",
    "encode_lease_id",
    "secret_type",
    "is_valid_secret_type",
    "IdGenerator",
    "UUIDGenerator",
    # Envelope
    "Lease",
    "LeaseRequest",
    "SecretResponse",
    # Registry and config
    "SecretRegistry",
    "LeaseConfig",
    "load_config",
    # Exceptions
    "SecretLeaseError",
    "RegistrationError",
    "DispatchError",
    "UnknownSecretTypeError",
    "NotRenewableError",
    "ConfigError",
]
