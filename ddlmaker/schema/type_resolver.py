# ============================================================================
# TYPE RESOLVER
# ============================================================================
# STATUS: Core - Annotation unwrapping
# PURPOSE: Reduce a field annotation to the base type used for SQL inference
# CREATED: 11 OCT 2026
# EXPORTS: ResolvedType, resolve_type
# DEPENDENCIES: typing_extensions, annotated_types
# ============================================================================
"""
Type Resolver

Unwraps, repeatedly and in any nesting order:

- Annotated[T, ...]          -> T, metadata collected
- Optional[T] / T | None     -> T, marked optional
- type aliases (TypeAliasType, `type X = ...`) -> their value
- Null subclasses            -> annotation of their `value` field, marked optional

and stops at the first type that is none of these. Visited types are
remembered; an alias chain that leads back to itself stops at the
reference that closes the cycle instead of looping.
"""

import sys
import types
import typing
from dataclasses import dataclass
from typing import Annotated, Any, ForwardRef, List, Optional, Tuple, Union, get_args, get_origin

from annotated_types import GroupedMetadata
from typing_extensions import TypeAliasType

from ddlmaker.models.null import Null

_NONE_TYPE = type(None)

# typing_extensions may ship its own backport next to the builtin one
_ALIAS_TYPES = tuple(
    {t for t in (TypeAliasType, getattr(typing, "TypeAliasType", None)) if t is not None}
)


@dataclass(frozen=True)
class ResolvedType:
    """
    Result of unwrapping a field annotation.

    Attributes:
        base: The innermost type, used for SQL type inference
        optional: True if any Optional or Null layer was crossed
        metadata: Annotated metadata from every layer, outermost first
    """
    base: Any
    optional: bool = False
    metadata: Tuple[Any, ...] = ()


def _expand_metadata(items) -> List[Any]:
    expanded = []
    for item in items:
        if isinstance(item, GroupedMetadata):
            expanded.extend(item)
        else:
            expanded.append(item)
    return expanded


def _strip_none(typ: Any) -> Optional[Any]:
    """Return T for Optional[T], None for anything else."""
    if get_origin(typ) not in (Union, types.UnionType):
        return None
    args = get_args(typ)
    if _NONE_TYPE not in args:
        return None
    rest = tuple(a for a in args if a is not _NONE_TYPE)
    if len(rest) != 1:
        return None
    return rest[0]


def _is_null_wrapper(typ: Any) -> bool:
    return isinstance(typ, type) and issubclass(typ, Null) and "value" in typ.model_fields


def _lookup_forward_ref(ref: ForwardRef, module: Optional[str]) -> Optional[Any]:
    """Resolve a bare-name forward reference in the module that defined the alias."""
    name = ref.__forward_arg__
    if module is None or not name.isidentifier():
        return None
    namespace = getattr(sys.modules.get(module), "__dict__", {})
    return namespace.get(name)


def _seen(typ: Any, seen: List[Any]) -> bool:
    for s in seen:
        if s is typ or s == typ:
            return True
    return False


def resolve_type(annotation: Any) -> ResolvedType:
    """
    Unwrap an annotation down to its base type.

    Args:
        annotation: Field annotation as written on the model

    Returns:
        ResolvedType with the base type, optionality and collected metadata
    """
    typ = annotation
    optional = False
    metadata: List[Any] = []
    alias_module: Optional[str] = None
    seen = [typ]

    while True:
        if get_origin(typ) is Annotated:
            nxt, *extra = get_args(typ)
            metadata.extend(_expand_metadata(extra))
        elif _strip_none(typ) is not None:
            nxt = _strip_none(typ)
            optional = True
        elif isinstance(typ, _ALIAS_TYPES):
            alias_module = getattr(typ, "__module__", None)
            nxt = typ.__value__
            if isinstance(nxt, str):
                nxt = ForwardRef(nxt)
        elif isinstance(typ, ForwardRef):
            nxt = _lookup_forward_ref(typ, alias_module)
            if nxt is None:
                break
        elif _is_null_wrapper(typ):
            nxt = typ.model_fields["value"].annotation
            optional = True
        else:
            break

        if _seen(nxt, seen):
            # self-referential alias: keep the reference that closes the loop
            break
        seen.append(nxt)
        typ = nxt

    return ResolvedType(base=typ, optional=optional, metadata=tuple(metadata))


__all__ = ["ResolvedType", "resolve_type"]
