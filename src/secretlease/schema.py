"""
Field schemas describing the shape of issued secret data.
"""

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldType(str, enum.Enum):
    """Supported secret data field types."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"
    MAP = "map"
    DURATION = "duration"


class FieldSchema(BaseModel):
    """Documentation and validation metadata for one data field.

    Schemas are informational: they are not checked against the data a
    secret is issued with.
    """

    model_config = ConfigDict(frozen=True)

    type: FieldType = Field(default=FieldType.STRING)
    description: str = Field(default="")
    default: Optional[Any] = Field(default=None)
