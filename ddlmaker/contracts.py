# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# STATUS: Foundation - SQL type names, FK actions and model capability hooks
# PURPOSE: Define the closed set of optional hooks a model may implement
# CREATED: 09 OCT 2026
# EXPORTS: SQLType, ForeignKeyOption, TableNameHook, TableCommentHook,
#          PrimaryKeyHook, IndexesHook, UniqueIndexesHook, ForeignKeysHook,
#          FullTextIndexesHook, SpatialIndexesHook, JSONSerializable
# DEPENDENCIES: enum, typing
# ============================================================================
"""
Base contracts for schema extraction.

A model customizes its table by implementing any of the hook protocols
below. Hooks are probed with isinstance() against runtime-checkable
protocols, so a model simply defines the method:

    class User(BaseModel):
        id: Int64

        @classmethod
        def table(cls) -> str:
            return "users"

        @classmethod
        def primary_key(cls) -> PrimaryKey:
            return PrimaryKey(columns=("id",))

When a class (rather than an instance) is passed to the table builder,
hooks must be classmethods or staticmethods.
"""

from enum import Enum
from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from ddlmaker.models.constraints import (
        ForeignKey,
        FullTextIndex,
        Index,
        PrimaryKey,
        SpatialIndex,
        UniqueIndex,
    )


# ============================================================================
# ENUMS
# ============================================================================

class SQLType(str, Enum):
    """SQL type names produced by type inference."""
    TINYINT = "TINYINT"
    SMALLINT = "SMALLINT"
    INTEGER = "INTEGER"
    BIGINT = "BIGINT"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    VARCHAR = "VARCHAR"
    BINARY = "BINARY"
    VARBINARY = "VARBINARY"
    JSON = "JSON"
    DATETIME = "DATETIME"


class ForeignKeyOption(str, Enum):
    """Referential actions for ON UPDATE / ON DELETE."""
    CASCADE = "CASCADE"
    SET_NULL = "SET NULL"
    RESTRICT = "RESTRICT"
    NO_ACTION = "NO ACTION"
    SET_DEFAULT = "SET DEFAULT"


# ============================================================================
# MODEL HOOKS
# ============================================================================

@runtime_checkable
class TableNameHook(Protocol):
    """Overrides the table name derived from the class name."""

    def table(self) -> str: ...


@runtime_checkable
class TableCommentHook(Protocol):
    """Supplies the table comment."""

    def table_comment(self) -> str: ...


@runtime_checkable
class PrimaryKeyHook(Protocol):
    def primary_key(self) -> "PrimaryKey": ...


@runtime_checkable
class IndexesHook(Protocol):
    def indexes(self) -> Sequence["Index"]: ...


@runtime_checkable
class UniqueIndexesHook(Protocol):
    def unique_indexes(self) -> Sequence["UniqueIndex"]: ...


@runtime_checkable
class ForeignKeysHook(Protocol):
    def foreign_keys(self) -> Sequence["ForeignKey"]: ...


@runtime_checkable
class FullTextIndexesHook(Protocol):
    def full_text_indexes(self) -> Sequence["FullTextIndex"]: ...


@runtime_checkable
class SpatialIndexesHook(Protocol):
    def spatial_indexes(self) -> Sequence["SpatialIndex"]: ...


@runtime_checkable
class JSONSerializable(Protocol):
    """
    Marker for types that own their JSON encoding.

    Pydantic models satisfy it out of the box; such a field is stored in a
    JSON column whatever its Python shape.
    """

    def model_dump_json(self, **kwargs) -> str: ...

    @classmethod
    def model_validate_json(cls, json_data, **kwargs): ...


__all__ = [
    "SQLType",
    "ForeignKeyOption",
    "TableNameHook",
    "TableCommentHook",
    "PrimaryKeyHook",
    "IndexesHook",
    "UniqueIndexesHook",
    "ForeignKeysHook",
    "FullTextIndexesHook",
    "SpatialIndexesHook",
    "JSONSerializable",
]
