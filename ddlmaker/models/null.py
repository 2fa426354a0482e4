# ============================================================================
# NULLABLE WRAPPERS
# ============================================================================
# STATUS: Core model - SQL NULL-capable scalar containers
# PURPOSE: Pair a value with a validity flag, generic and hand-rolled forms
# CREATED: 10 OCT 2026
# EXPORTS: Null, NullBool, NullByte, NullFloat64, NullInt16, NullInt32,
#          NullInt64, NullString, NullTime
# DEPENDENCIES: pydantic
# ============================================================================
"""
Nullable Wrappers

Null[T] is the generic container; the NullX classes are fixed
parametrizations kept for readability. The type resolver descends into the
`value` field of any Null subclass, so `NullInt64` and `Null[Int64]` produce
identical columns, both nullable.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from ddlmaker.models.types import Float64, Int16, Int32, Int64, Uint8

T = TypeVar("T")


class Null(BaseModel, Generic[T]):
    """A value that may be SQL NULL."""

    value: Optional[T] = None
    valid: bool = False

    @classmethod
    def of(cls, value: T) -> "Null[T]":
        return cls(value=value, valid=True)

    @classmethod
    def none(cls) -> "Null[T]":
        return cls()


class NullBool(Null[bool]):
    pass


class NullByte(Null[Uint8]):
    pass


class NullFloat64(Null[Float64]):
    pass


class NullInt16(Null[Int16]):
    pass


class NullInt32(Null[Int32]):
    pass


class NullInt64(Null[Int64]):
    pass


class NullString(Null[str]):
    pass


class NullTime(Null[datetime]):
    pass


__all__ = [
    "Null",
    "NullBool",
    "NullByte",
    "NullFloat64",
    "NullInt16",
    "NullInt32",
    "NullInt64",
    "NullString",
    "NullTime",
]
