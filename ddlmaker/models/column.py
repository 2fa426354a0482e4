# ============================================================================
# COLUMN DESCRIPTOR
# ============================================================================
# STATUS: Core model - Fully resolved column
# PURPOSE: Output of the column builder, one per eligible model field
# CREATED: 10 OCT 2026
# EXPORTS: Column
# DEPENDENCIES: pydantic
# ============================================================================
"""
Column Model

A Column is immutable once built. `resolved_type` keeps the unwrapped
annotation that drove inference so later serialization (scanning values,
companion code) can tell e.g. an Int32 from a plain int.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Column(BaseModel):
    """A table column derived from one model field."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Column name in SQL")
    source_name: str = Field(..., description="Field name in the model")
    sql_type: str = Field(..., description="SQL type name, e.g. VARCHAR")
    resolved_type: Any = Field(default=None, description="Unwrapped field annotation")

    # 0 means unspecified: char length, binary length or fractional seconds
    size: int = 0

    unsigned: bool = False
    auto_increment: bool = False
    # https://dev.mysql.com/doc/refman/8.0/en/invisible-columns.html
    invisible: bool = False
    nullable: bool = False

    default: Optional[str] = Field(default=None, description="Raw DEFAULT expression")
    comment: Optional[str] = None
    charset: Optional[str] = None
    collation: Optional[str] = None

    # Spatial reference system id
    srid: Optional[int] = None


__all__ = ["Column"]
