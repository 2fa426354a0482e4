# ============================================================================
# TABLE DESCRIPTOR
# ============================================================================
# STATUS: Core model - Fully resolved table
# PURPOSE: Output of the table builder, handed to the schema registry
# CREATED: 10 OCT 2026
# EXPORTS: Table
# DEPENDENCIES: pydantic
# ============================================================================
"""
Table Model

Columns keep field declaration order. Keys and indexes are whatever the
model's hooks returned.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ddlmaker.models.column import Column
from ddlmaker.models.constraints import (
    ForeignKey,
    FullTextIndex,
    Index,
    PrimaryKey,
    SpatialIndex,
    UniqueIndex,
)


class Table(BaseModel):
    """A table derived from one model class."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Table name in SQL")
    source_name: str = Field(..., description="Model class name, for diagnostics")
    columns: Tuple[Column, ...] = ()
    comment: Optional[str] = None

    primary_key: Optional[PrimaryKey] = None
    indexes: Tuple[Index, ...] = ()
    unique_indexes: Tuple[UniqueIndex, ...] = ()
    foreign_keys: Tuple[ForeignKey, ...] = ()
    full_text_indexes: Tuple[FullTextIndex, ...] = ()
    spatial_indexes: Tuple[SpatialIndex, ...] = ()

    def column(self, name: str) -> Optional[Column]:
        """Look up a column by SQL name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    @property
    def column_names(self) -> Tuple[str, ...]:
        return tuple(col.name for col in self.columns)


__all__ = ["Table"]
