# ============================================================================
# TABLE BUILDER
# ============================================================================
# STATUS: Core - Model to table conversion
# PURPOSE: Enumerate model fields, build columns, collect hook results
# CREATED: 12 OCT 2026
# EXPORTS: build_table, visible_fields, FieldSpec
# DEPENDENCIES: pydantic
# ============================================================================
"""
Table Builder

Accepts a pydantic model or a dataclass, as a class or an instance.

Tags are read from the configured key (default "ddl") in, first match wins:
- Tag(...) markers in the field's Annotated metadata
- pydantic Field(json_schema_extra={"ddl": ...})
- dataclass field(metadata={"ddl": ...})

Usage:
    class User(BaseModel):
        id: Annotated[Uint64, Tag(ddl=",auto")]
        name: str
        secret: Annotated[str, Tag(ddl="-")]

        @classmethod
        def table(cls) -> str:
            return "users"

        @classmethod
        def primary_key(cls) -> PrimaryKey:
            return primary_key("id")

    tbl = build_table(User)
"""

import dataclasses
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, get_type_hints

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ddlmaker.config import ExtractionConfig, get_config
from ddlmaker.contracts import (
    ForeignKeysHook,
    FullTextIndexesHook,
    IndexesHook,
    PrimaryKeyHook,
    SpatialIndexesHook,
    TableCommentHook,
    TableNameHook,
    UniqueIndexesHook,
)
from ddlmaker.errors import (
    DuplicateColumnError,
    HookSignatureError,
    NotAStructError,
    SkipColumn,
)
from ddlmaker.logging import ComponentType, get_logger, log_context
from ddlmaker.models.column import Column
from ddlmaker.models.table import Table
from ddlmaker.models.types import Tag
from ddlmaker.schema.column_builder import build_column
from ddlmaker.schema.naming import camel_to_snake
from ddlmaker.schema.type_resolver import resolve_type

logger = get_logger(__name__, ComponentType.TABLE_BUILDER)


@dataclass(frozen=True)
class FieldSpec:
    """A model field as seen by the column builder."""
    name: str
    annotation: Any
    tag: str = ""


# ============================================================================
# FIELD ENUMERATION
# ============================================================================

def _is_struct(cls: Any) -> bool:
    if not isinstance(cls, type):
        return False
    return issubclass(cls, BaseModel) or dataclasses.is_dataclass(cls)


def _annotated_tag(annotation: Any, key: str) -> Optional[str]:
    for item in resolve_type(annotation).metadata:
        if isinstance(item, Tag) and key in item:
            return item.get(key)
    return None


def _pydantic_fields(cls: type, key: str) -> Iterator[FieldSpec]:
    info: FieldInfo
    for name, info in cls.model_fields.items():
        annotation = info.rebuild_annotation()
        tag = _annotated_tag(annotation, key)
        if tag is None and isinstance(info.json_schema_extra, dict):
            extra = info.json_schema_extra.get(key)
            tag = extra if isinstance(extra, str) else None
        yield FieldSpec(name=name, annotation=annotation, tag=tag or "")


def _dataclass_fields(cls: type, key: str) -> Iterator[FieldSpec]:
    hints = get_type_hints(cls, include_extras=True)
    for f in dataclasses.fields(cls):
        annotation = hints.get(f.name, f.type)
        tag = _annotated_tag(annotation, key)
        if tag is None:
            tag = f.metadata.get(key)
        yield FieldSpec(name=f.name, annotation=annotation, tag=tag or "")


def visible_fields(cls: type, config: Optional[ExtractionConfig] = None) -> List[FieldSpec]:
    """
    Fields of a model class in declaration order, inherited fields included.

    Class variables and private attributes are not fields.
    """
    config = config or get_config()
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return list(_pydantic_fields(cls, config.tag_name))
    if _is_struct(cls):
        return list(_dataclass_fields(cls, config.tag_name))
    raise NotAStructError(cls)


# ============================================================================
# HOOKS
# ============================================================================

# Hooks returning a sequence of descriptors, keyed by Table field name
_INDEX_HOOKS = (
    (IndexesHook, "indexes"),
    (UniqueIndexesHook, "unique_indexes"),
    (ForeignKeysHook, "foreign_keys"),
    (FullTextIndexesHook, "full_text_indexes"),
    (SpatialIndexesHook, "spatial_indexes"),
)


def _hook(struct: Any, protocol: type, method: str) -> Optional[Callable[[], Any]]:
    """
    Bound hook method if the model implements it.

    A class only has usable hooks if they are classmethods or staticmethods.
    """
    if not isinstance(struct, protocol):
        return None
    if isinstance(struct, type):
        if inspect.isfunction(inspect.getattr_static(struct, method, None)):
            raise HookSignatureError(struct.__name__, method)
    hook = getattr(struct, method)
    return hook if callable(hook) else None


# ============================================================================
# BUILDER
# ============================================================================

def build_table(struct: Any, config: Optional[ExtractionConfig] = None) -> Table:
    """
    Build the table descriptor for a model.

    Args:
        struct: Model class or instance (pydantic model or dataclass)
        config: Extraction config, defaults to the process-wide one

    Returns:
        Table descriptor

    Raises:
        NotAStructError: struct is not a model
        TagParseError, UnsupportedTypeError: from any non-skipped field
        DuplicateColumnError: two fields share a column name
        HookSignatureError: a class was passed and a hook needs an instance
    """
    config = config or get_config()
    cls = struct if isinstance(struct, type) else type(struct)
    if not _is_struct(cls):
        raise NotAStructError(struct)

    table_hook = _hook(struct, TableNameHook, "table")
    name = table_hook() if table_hook else camel_to_snake(cls.__name__)

    with log_context(struct=cls.__name__, table=name):
        comment = None
        comment_hook = _hook(struct, TableCommentHook, "table_comment")
        if comment_hook:
            comment = comment_hook() or None

        columns: List[Column] = []
        by_name: Dict[str, Column] = {}
        for spec in visible_fields(cls, config):
            with log_context(field=spec.name):
                try:
                    col = build_column(spec.name, spec.annotation, spec.tag, config)
                except SkipColumn:
                    continue
            if col.name in by_name:
                raise DuplicateColumnError(col.name, by_name[col.name].source_name, spec.name)
            by_name[col.name] = col
            columns.append(col)

        hooks: Dict[str, Any] = {}
        pk_hook = _hook(struct, PrimaryKeyHook, "primary_key")
        if pk_hook:
            hooks["primary_key"] = pk_hook()
        for protocol, method in _INDEX_HOOKS:
            hook = _hook(struct, protocol, method)
            if hook:
                hooks[method] = tuple(hook() or ())

        table = Table(
            name=name,
            source_name=cls.__name__,
            columns=tuple(columns),
            comment=comment,
            **hooks,
        )
        logger.debug(
            f"Built table {name} from {cls.__name__}",
            extra={"columns": len(columns), "hooks": sorted(hooks)},
        )
    return table


__all__ = [
    "FieldSpec",
    "build_table",
    "visible_fields",
]
