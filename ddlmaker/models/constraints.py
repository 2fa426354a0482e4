# ============================================================================
# CONSTRAINT & INDEX DESCRIPTORS
# ============================================================================
# STATUS: Core model - Keys and indexes returned by model hooks
# PURPOSE: Describe primary keys, indexes and foreign keys of a table
# CREATED: 10 OCT 2026
# EXPORTS: PrimaryKey, Index, UniqueIndex, ForeignKey, FullTextIndex,
#          SpatialIndex, primary_key, index, unique_index, foreign_key,
#          full_text_index, spatial_index
# DEPENDENCIES: pydantic
# ============================================================================
"""
Constraint & Index Descriptors

Models return these from their hooks; the table builder stores them as-is.
Column references are SQL column names and are not checked against the
table here.

    class User(BaseModel):
        ...
        @classmethod
        def primary_key(cls):
            return primary_key("id")

        @classmethod
        def indexes(cls):
            return [index("idx_name", "name").model_copy(update={"comment": "lookup"})]
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ddlmaker.contracts import ForeignKeyOption


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True)


class PrimaryKey(_Descriptor):
    """PRIMARY KEY over one or more columns."""
    columns: Tuple[str, ...] = Field(..., min_length=1)


class Index(_Descriptor):
    name: str
    columns: Tuple[str, ...] = Field(..., min_length=1)
    comment: Optional[str] = None
    invisible: bool = False


class UniqueIndex(_Descriptor):
    name: str
    columns: Tuple[str, ...] = Field(..., min_length=1)
    comment: Optional[str] = None
    invisible: bool = False


class ForeignKey(_Descriptor):
    """
    FOREIGN KEY (columns) REFERENCES table (references).

    columns and references pair up positionally.
    """
    name: str
    columns: Tuple[str, ...] = Field(..., min_length=1)
    table: str
    references: Tuple[str, ...] = Field(..., min_length=1)
    on_update: Optional[ForeignKeyOption] = None
    on_delete: Optional[ForeignKeyOption] = None
    comment: Optional[str] = None

    @model_validator(mode="after")
    def _check_arity(self) -> "ForeignKey":
        if len(self.columns) != len(self.references):
            raise ValueError(
                f"foreign key {self.name}: {len(self.columns)} columns "
                f"but {len(self.references)} references"
            )
        return self


class FullTextIndex(_Descriptor):
    name: str
    column: str
    comment: Optional[str] = None
    invisible: bool = False
    parser: Optional[str] = None  # e.g. "ngram"


class SpatialIndex(_Descriptor):
    name: str
    column: str
    comment: Optional[str] = None
    invisible: bool = False


# ============================================================================
# CONVENIENCE CONSTRUCTORS
# ============================================================================

def primary_key(*columns: str) -> PrimaryKey:
    return PrimaryKey(columns=columns)


def index(name: str, *columns: str) -> Index:
    return Index(name=name, columns=columns)


def unique_index(name: str, *columns: str) -> UniqueIndex:
    return UniqueIndex(name=name, columns=columns)


def foreign_key(name: str, columns, table: str, references) -> ForeignKey:
    """Build a foreign key; columns/references accept a name or a sequence."""
    if isinstance(columns, str):
        columns = (columns,)
    if isinstance(references, str):
        references = (references,)
    return ForeignKey(name=name, columns=tuple(columns), table=table, references=tuple(references))


def full_text_index(name: str, column: str) -> FullTextIndex:
    return FullTextIndex(name=name, column=column)


def spatial_index(name: str, column: str) -> SpatialIndex:
    return SpatialIndex(name=name, column=column)


__all__ = [
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
]
