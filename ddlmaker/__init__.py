# ============================================================================
# DDLMAKER PACKAGE
# ============================================================================
# STATUS: Package initialization
# PURPOSE: Export the extraction API, descriptors and field vocabulary
# CREATED: 09 OCT 2026
# ============================================================================
"""
ddlmaker - relational schema extraction from annotated Python models.

    from ddlmaker import build_table, Tag, Uint64

    class User(BaseModel):
        id: Annotated[Uint64, Tag(ddl=",auto")]
        name: str

    table = build_table(User)
"""

from ddlmaker.__version__ import __version__
from ddlmaker.config import ExtractionConfig, get_config, reset_config
from ddlmaker.contracts import SQLType, ForeignKeyOption, JSONSerializable
from ddlmaker.errors import (
    DDLMakerError,
    TagParseError,
    UnsupportedTypeError,
    NotAStructError,
    DuplicateColumnError,
    DuplicateTableError,
    HookSignatureError,
    SkipColumn,
)
from ddlmaker.models import (
    Column,
    Table,
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
from ddlmaker.schema import (
    SchemaRegistry,
    build_column,
    build_table,
    camel_to_snake,
    parse_tag,
    resolve_type,
)

__all__ = [
    "__version__",
    # Config
    "ExtractionConfig",
    "get_config",
    "reset_config",
    # Contracts
    "SQLType",
    "ForeignKeyOption",
    "JSONSerializable",
    # Errors
    "DDLMakerError",
    "TagParseError",
    "UnsupportedTypeError",
    "NotAStructError",
    "DuplicateColumnError",
    "DuplicateTableError",
    "HookSignatureError",
    "SkipColumn",
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
    "Null",
    "NullBool",
    "NullByte",
    "NullFloat64",
    "NullInt16",
    "NullInt32",
    "NullInt64",
    "NullString",
    "NullTime",
    # Extraction
    "SchemaRegistry",
    "build_column",
    "build_table",
    "camel_to_snake",
    "parse_tag",
    "resolve_type",
]
