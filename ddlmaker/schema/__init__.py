# ============================================================================
# SCHEMA MODULE
# ============================================================================
# STATUS: Core - Schema extraction engine
# PURPOSE: Turn annotated models into table/column/constraint descriptors
# CREATED: 11 OCT 2026
# ============================================================================

from ddlmaker.schema.naming import camel_to_snake
from ddlmaker.schema.tag_parser import TagOption, ParsedTag, parse_tag, split_options
from ddlmaker.schema.type_resolver import ResolvedType, resolve_type
from ddlmaker.schema.column_builder import build_column, infer_sql_type, OPTION_SETTERS
from ddlmaker.schema.table_builder import FieldSpec, build_table, visible_fields
from ddlmaker.schema.registry import SchemaRegistry

__all__ = [
    # Naming
    "camel_to_snake",
    # Tag grammar
    "TagOption",
    "ParsedTag",
    "parse_tag",
    "split_options",
    # Types
    "ResolvedType",
    "resolve_type",
    "infer_sql_type",
    # Builders
    "build_column",
    "build_table",
    "visible_fields",
    "FieldSpec",
    "OPTION_SETTERS",
    # Registry
    "SchemaRegistry",
]
