"""
Lease Identifier Codec

Lease IDs have the form ``<type>-<suffix>``. The type names the secret
descriptor that issued the lease; the suffix is an opaque unique value.
Decoding splits on the first separator only, so suffixes may contain
further separators (UUIDs do).
"""

import re

SEPARATOR = "-"

SECRET_TYPE_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


def is_valid_secret_type(type_name: str) -> bool:
    """Return True if *type_name* is usable as a lease ID prefix."""
    return bool(type_name) and SECRET_TYPE_PATTERN.fullmatch(type_name) is not None


def encode_lease_id(type_name: str, suffix: str) -> str:
    """Join a secret type and a unique suffix into a lease ID.

    Raises:
        ValueError: If *type_name* contains the separator, which would
            make the ID decode to a different type.
    """
    if SEPARATOR in type_name:
        raise ValueError(
            f"Secret type {type_name!r} must not contain {SEPARATOR!r}"
        )
    return f"{type_name}{SEPARATOR}{suffix}"


def secret_type(lease_id: str) -> tuple[str, str]:
    """Split a lease ID into ``(type, suffix)``.

    IDs without a separator decode to ``("", lease_id)``. An empty type means
    the issuing descriptor cannot be resolved; this never raises.
    """
    prefix, sep, suffix = lease_id.partition(SEPARATOR)
    if not sep:
        return "", lease_id
    return prefix, suffix
