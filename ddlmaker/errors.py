# ============================================================================
# EXCEPTIONS
# ============================================================================
# STATUS: Foundation - Error taxonomy for schema extraction
# PURPOSE: Typed failures raised by the tag parser, column and table builders
# CREATED: 09 OCT 2026
# EXPORTS: DDLMakerError, TagParseError, UnsupportedTypeError, NotAStructError,
#          DuplicateColumnError, DuplicateTableError, HookSignatureError,
#          SkipColumn
# ============================================================================
"""
Schema Extraction Errors

Every failure is terminal for the field or model being processed: a bad
definition is a static mistake, so nothing here is retried.

SkipColumn is not a DDLMakerError. It is the control-flow
signal a field raises when its tag name is the skip marker, and the table
builder consumes it silently.
"""

from typing import Any, Optional


def type_name(typ: Any) -> str:
    """Readable name of a type or typing construct for error messages."""
    # classes and NewTypes carry a plain name, typing constructs only a repr
    if isinstance(typ, type) or hasattr(typ, "__supertype__"):
        return typ.__name__
    return repr(typ)


class DDLMakerError(Exception):
    """Base exception for schema extraction errors."""
    pass


class TagParseError(DDLMakerError):
    """Raised when a boolean or integer tag option has a malformed value."""

    def __init__(self, key: str, value: str, field_name: Optional[str] = None):
        self.key = key
        self.value = value
        self.field_name = field_name
        super().__init__(f"ddlmaker: failed to parse {key} param in tag: {value!r}")


class UnsupportedTypeError(DDLMakerError):
    """Raised when a field type has no SQL mapping and no type= override."""

    def __init__(self, type_: Any, field_name: Optional[str] = None):
        self.type_ = type_
        self.field_name = field_name
        where = f" (field {field_name})" if field_name else ""
        super().__init__(f"ddlmaker: unknown type: {type_name(type_)}{where}")


class NotAStructError(DDLMakerError):
    """Raised when a table build receives something that is not a record type."""

    def __init__(self, value: Any):
        self.value = value
        kind = value if isinstance(value, type) else type(value)
        super().__init__(f"ddlmaker: expected struct: {type_name(kind)}")


class DuplicateColumnError(DDLMakerError):
    """Raised when two fields of one model resolve to the same column name."""

    def __init__(self, column_name: str, first_field: str, second_field: str):
        self.column_name = column_name
        self.first_field = first_field
        self.second_field = second_field
        super().__init__(
            f"ddlmaker: column {column_name!r} defined by both {first_field} and {second_field}"
        )


class DuplicateTableError(DDLMakerError):
    """Raised when two models resolve to the same table name in one registry."""

    def __init__(self, table_name: str, source_name: str):
        self.table_name = table_name
        self.source_name = source_name
        super().__init__(
            f"ddlmaker: table {table_name!r} already registered (from {source_name})"
        )


class HookSignatureError(DDLMakerError):
    """Raised when a hook on a model class needs an instance to be called."""

    def __init__(self, struct_name: str, hook: str):
        self.struct_name = struct_name
        self.hook = hook
        super().__init__(
            f"ddlmaker: {struct_name}.{hook} is an instance method; "
            f"make it a classmethod or pass an instance"
        )


class SkipColumn(Exception):
    """Signal: the field is tagged with the skip marker and has no column."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"ddlmaker: skip column {field_name}")


__all__ = [
    "DDLMakerError",
    "TagParseError",
    "UnsupportedTypeError",
    "NotAStructError",
    "DuplicateColumnError",
    "DuplicateTableError",
    "HookSignatureError",
    "SkipColumn",
    "type_name",
]
