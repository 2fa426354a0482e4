# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for descriptors and field type vocabulary
# CREATED: 10 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

- Descriptors produced by extraction: Table, Column, keys and indexes
- Vocabulary used in user models: fixed-width NewTypes, Tag, Null wrappers
"""

from ddlmaker.models.column import Column
from ddlmaker.models.table import Table
from ddlmaker.models.constraints import (
    PrimaryKey,
    Index,
    UniqueIndex,
    ForeignKey,
    FullTextIndex,
    SpatialIndex,
    primary_key,
    index,
    unique_index,
    foreign_key,
    full_text_index,
    spatial_index,
)
from ddlmaker.models.types import (
    Int8,
    Int16,
    Int32,
    Int64,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    Float32,
    Float64,
    RawJSON,
    fixed_bytes,
    Tag,
)
from ddlmaker.models.null import (
    Null,
    NullBool,
    NullByte,
    NullFloat64,
    NullInt16,
    NullInt32,
    NullInt64,
    NullString,
    NullTime,
)

__all__ = [
    # Descriptors
    "Column",
    "Table",
    "PrimaryKey",
    "Index",
    "UniqueIndex",
    "ForeignKey",
    "FullTextIndex",
    "SpatialIndex",
    "primary_key",
    "index",
    "unique_index",
    "foreign_key",
    "full_text_index",
    "spatial_index",
    # Field types
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
    # Nullable wrappers
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
