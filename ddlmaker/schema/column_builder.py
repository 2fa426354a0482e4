# ============================================================================
# COLUMN BUILDER
# ============================================================================
# STATUS: Core - Field to column conversion
# PURPOSE: Infer a SQL type from a field annotation, then apply its tag
# CREATED: 12 OCT 2026
# EXPORTS: build_column, infer_sql_type
# DEPENDENCIES: annotated_types
# ============================================================================
"""
Column Builder

Three steps per field:

1. Inference - the resolved base type picks a default (sql_type, size,
   unsigned). NewTypes are followed to their supertype and classes are
   matched through their MRO, so a `str` Enum becomes VARCHAR. A base
   with no mapping is only flagged at this point.
2. Tag - the tag name renames the column (or skips the field), then each
   option is applied in order through OPTION_SETTERS. `type=` replaces the
   inferred type, zeroes size/unsigned and clears the flag.
3. Validation - a flag that survived the tag raises UnsupportedTypeError.

Type mapping:
    bool                    TINYINT(1)
    Int8/16/32/64, int      TINYINT / SMALLINT / INTEGER / BIGINT
    Uint8/16/32/64          same, UNSIGNED
    Float32 / Float64, float FLOAT / DOUBLE
    str                     VARCHAR(191), or VARCHAR(max_length)
    RawJSON                 JSON
    bytes, bytearray        VARBINARY(767), or VARBINARY(max_length)
    fixed_bytes(n)          BINARY(n)
    datetime                DATETIME(6)
    pydantic model          JSON
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Tuple

from annotated_types import MaxLen, MinLen

from ddlmaker.config import ExtractionConfig, get_config
from ddlmaker.contracts import JSONSerializable, SQLType
from ddlmaker.errors import SkipColumn, TagParseError, UnsupportedTypeError
from ddlmaker.logging import ComponentType, get_logger
from ddlmaker.models.column import Column
from ddlmaker.models.types import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    RawJSON,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
)
from ddlmaker.schema.naming import camel_to_snake
from ddlmaker.schema.tag_parser import TagOption, parse_tag
from ddlmaker.schema.type_resolver import ResolvedType, resolve_type

logger = get_logger(__name__, ComponentType.COLUMN_BUILDER)


# ============================================================================
# TYPE INFERENCE
# ============================================================================

# (sql_type, size, unsigned) for types with a fixed mapping
_SCALAR_TYPES: Dict[Any, Tuple[SQLType, int, bool]] = {
    bool: (SQLType.TINYINT, 1, False),
    Int8: (SQLType.TINYINT, 0, False),
    Int16: (SQLType.SMALLINT, 0, False),
    Int32: (SQLType.INTEGER, 0, False),
    Int64: (SQLType.BIGINT, 0, False),
    int: (SQLType.BIGINT, 0, False),
    Uint8: (SQLType.TINYINT, 0, True),
    Uint16: (SQLType.SMALLINT, 0, True),
    Uint32: (SQLType.INTEGER, 0, True),
    Uint64: (SQLType.BIGINT, 0, True),
    Float32: (SQLType.FLOAT, 0, False),
    Float64: (SQLType.DOUBLE, 0, False),
    float: (SQLType.DOUBLE, 0, False),
}

# Types whose size depends on config or annotation metadata
_SIZED_TYPES = (str, bytes, bytearray, datetime, RawJSON)


def _is_known(typ: Any) -> bool:
    try:
        return typ in _SCALAR_TYPES or typ in _SIZED_TYPES
    except TypeError:  # unhashable typing construct
        return False


def _kind_of(base: Any) -> Optional[Any]:
    """Find the mapped type behind NewType chains and subclasses."""
    typ = base
    while True:
        if _is_known(typ):
            return typ
        supertype = getattr(typ, "__supertype__", None)
        if supertype is not None:
            typ = supertype
            continue
        if isinstance(typ, type):
            for klass in typ.__mro__:
                if _is_known(klass):
                    return klass
        return None


def _length_bounds(metadata: Tuple[Any, ...]) -> Tuple[Optional[int], Optional[int]]:
    min_len = max_len = None
    for item in metadata:
        if isinstance(item, MinLen):
            min_len = item.min_length
        elif isinstance(item, MaxLen):
            max_len = item.max_length
    return min_len, max_len


def _implements_json(base: Any) -> bool:
    return isinstance(base, type) and isinstance(base, JSONSerializable)


def infer_sql_type(
    resolved: ResolvedType,
    config: ExtractionConfig,
) -> Optional[Tuple[str, int, bool]]:
    """
    Default (sql_type, size, unsigned) for a resolved type.

    Returns:
        The triple, or None when the type has no mapping
    """
    kind = _kind_of(resolved.base)
    min_len, max_len = _length_bounds(resolved.metadata)
    result: Optional[Tuple[SQLType, int, bool]] = None

    if kind in _SCALAR_TYPES:
        result = _SCALAR_TYPES[kind]
    elif kind is RawJSON:
        result = (SQLType.JSON, 0, False)
    elif kind is str:
        result = (SQLType.VARCHAR, max_len or config.default_varchar_size, False)
    elif kind in (bytes, bytearray):
        if max_len is not None and min_len == max_len:
            result = (SQLType.BINARY, max_len, False)
        else:
            result = (SQLType.VARBINARY, max_len or config.default_varbinary_size, False)
    elif kind is datetime:
        result = (SQLType.DATETIME, config.datetime_precision, False)

    if _implements_json(resolved.base):
        _, size, unsigned = result or (None, 0, False)
        result = (SQLType.JSON, size, unsigned)

    if result is None:
        return None
    sql_type, size, unsigned = result
    return sql_type.value, size, unsigned


# ============================================================================
# TAG OPTIONS
# ============================================================================

@dataclass
class _ColumnDraft:
    """Mutable column state while tag options are applied."""
    name: str
    source_name: str
    sql_type: str
    resolved_type: Any
    size: int = 0
    unsigned: bool = False
    nullable: bool = False
    auto_increment: bool = False
    invisible: bool = False
    default: Optional[str] = None
    comment: Optional[str] = None
    charset: Optional[str] = None
    collation: Optional[str] = None
    srid: Optional[int] = None
    invalid_type: bool = False

    def freeze(self) -> Column:
        return Column(
            name=self.name,
            source_name=self.source_name,
            sql_type=self.sql_type,
            resolved_type=self.resolved_type,
            size=self.size,
            unsigned=self.unsigned,
            auto_increment=self.auto_increment,
            invisible=self.invisible,
            nullable=self.nullable,
            default=self.default,
            comment=self.comment,
            charset=self.charset,
            collation=self.collation,
            srid=self.srid,
        )


OptionSetter = Callable[[_ColumnDraft, TagOption], None]


def _bool_setter(attr: str) -> OptionSetter:
    def setter(draft: _ColumnDraft, option: TagOption) -> None:
        setattr(draft, attr, option.as_bool())
    return setter


def _int_setter(attr: str) -> OptionSetter:
    def setter(draft: _ColumnDraft, option: TagOption) -> None:
        setattr(draft, attr, option.as_int())
    return setter


def _str_setter(attr: str) -> OptionSetter:
    def setter(draft: _ColumnDraft, option: TagOption) -> None:
        setattr(draft, attr, option.value)
    return setter


def _set_type(draft: _ColumnDraft, option: TagOption) -> None:
    draft.sql_type = option.value
    draft.unsigned = False
    draft.size = 0
    draft.invalid_type = False


OPTION_SETTERS: Dict[str, OptionSetter] = {
    "null": _bool_setter("nullable"),
    "auto": _bool_setter("auto_increment"),
    "invisible": _bool_setter("invisible"),
    "unsigned": _bool_setter("unsigned"),
    "size": _int_setter("size"),
    "srid": _int_setter("srid"),
    "type": _set_type,
    "default": _str_setter("default"),
    "charset": _str_setter("charset"),
    "collate": _str_setter("collation"),
    "comment": _str_setter("comment"),
}


# ============================================================================
# BUILDER
# ============================================================================

def build_column(
    field_name: str,
    annotation: Any,
    tag: str = "",
    config: Optional[ExtractionConfig] = None,
) -> Column:
    """
    Build the column for one model field.

    Args:
        field_name: Attribute name on the model
        annotation: Field annotation as declared
        tag: Raw tag string for the configured tag key ("" if untagged)
        config: Extraction config, defaults to the process-wide one

    Returns:
        Column descriptor

    Raises:
        SkipColumn: Tag name is the skip marker
        TagParseError: Malformed boolean or integer option value
        UnsupportedTypeError: No mapping for the type and no type= option
    """
    config = config or get_config()

    parsed = parse_tag(tag)
    if parsed.name == config.skip_marker:
        logger.debug(f"Skipping field {field_name}")
        raise SkipColumn(field_name)

    resolved = resolve_type(annotation)
    inferred = infer_sql_type(resolved, config)

    draft = _ColumnDraft(
        name=parsed.name or camel_to_snake(field_name),
        source_name=field_name,
        sql_type="",
        resolved_type=resolved.base,
        nullable=resolved.optional,
    )
    if inferred is None:
        draft.invalid_type = True
    else:
        draft.sql_type, draft.size, draft.unsigned = inferred

    for option in parsed.options:
        setter = OPTION_SETTERS.get(option.key)
        if setter is None:
            # unknown keys are ignored
            continue
        try:
            setter(draft, option)
        except TagParseError as e:
            raise TagParseError(e.key, e.value, field_name=field_name) from e

    if draft.invalid_type:
        raise UnsupportedTypeError(resolved.base, field_name=field_name)

    column = draft.freeze()
    logger.debug(
        f"Column {column.name} {column.sql_type}",
        extra={"size": column.size, "unsigned": column.unsigned, "nullable": column.nullable},
    )
    return column


__all__ = [
    "build_column",
    "infer_sql_type",
    "OPTION_SETTERS",
]
