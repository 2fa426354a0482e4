# ============================================================================
# FIELD TYPE VOCABULARY
# ============================================================================
# STATUS: Core model - Fixed-width scalar types and tag marker
# PURPOSE: Give annotations enough precision to pick an exact SQL type
# CREATED: 10 OCT 2026
# EXPORTS: Int8, Int16, Int32, Int64, Uint8, Uint16, Uint32, Uint64,
#          Float32, Float64, RawJSON, fixed_bytes, Tag
# DEPENDENCIES: annotated_types
# ============================================================================
"""
Field Type Vocabulary

Python's int and float carry no width, so models that care about the exact
column type annotate with these NewTypes:

    class Item(BaseModel):
        id: Uint64                          # BIGINT UNSIGNED
        qty: Int16                          # SMALLINT
        digest: fixed_bytes(32)             # BINARY(32)
        payload: RawJSON                    # JSON
        name: Annotated[str, Tag(ddl="item_name,size=64")]

Plain int and float map to BIGINT and DOUBLE.
"""

from typing import Annotated, Any, Dict, NewType

from annotated_types import Len

Int8 = NewType("Int8", int)
Int16 = NewType("Int16", int)
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)

Uint8 = NewType("Uint8", int)
Uint16 = NewType("Uint16", int)
Uint32 = NewType("Uint32", int)
Uint64 = NewType("Uint64", int)

Float32 = NewType("Float32", float)
Float64 = NewType("Float64", float)

# Pre-encoded JSON document, stored as-is
RawJSON = NewType("RawJSON", bytes)


def fixed_bytes(length: int) -> Any:
    """Annotation for a fixed-length byte string (BINARY(length))."""
    return Annotated[bytes, Len(length, length)]


class Tag:
    """
    Struct-tag style field annotation.

    Holds one raw tag string per key, so the same field can carry tags for
    several tools. Used as Annotated metadata:

        id: Annotated[Int64, Tag(ddl="id,auto")]
    """

    __slots__ = ("_values",)

    def __init__(self, **values: str):
        self._values: Dict[str, str] = dict(values)

    def get(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._values.items())))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"Tag({args})"


__all__ = [
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "Float32",
    "Float64",
    "RawJSON",
    "fixed_bytes",
    "Tag",
]
