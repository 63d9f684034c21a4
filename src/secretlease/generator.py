"""
Lease ID suffix generators.
"""

import uuid
from typing import Protocol, runtime_checkable


@runtime_checkable
class IdGenerator(Protocol):
    """Source of unique lease ID suffixes.

    Implementations must be safe for concurrent use and return values that
    are unique for the lifetime of the process. Failures are raised.
    """

    def generate(self) -> str:
        ...


class UUIDGenerator:
    """Generates random UUID4 strings from the OS entropy pool."""

    def generate(self) -> str:
        return str(uuid.uuid4())


DEFAULT_GENERATOR = UUIDGenerator()
