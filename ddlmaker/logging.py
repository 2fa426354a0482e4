# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# STATUS: Core - Structured logging with extraction context
# PURPOSE: Tag every record with the model, table and field being processed
# CREATED: 09 OCT 2026
# ============================================================================
"""
Structured Logging

The builders are silent by default (a NullHandler sits on the "ddlmaker"
logger). Applications that want to watch extraction call configure_logging()
or attach their own handler.

While a table is built the builder pushes the model, table and field onto a
per-thread context stack; both formatters read the innermost entry, so a
column failure deep inside build_column() still names the model it came from.

Usage:
    from ddlmaker.logging import ComponentType, get_logger, log_context

    logger = get_logger(__name__, ComponentType.TABLE_BUILDER)

    with log_context(struct="User", table="users"):
        logger.debug("Building table", extra={"field_count": 5})
"""

import dataclasses
import json
import logging
import os
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union


class ComponentType(str, Enum):
    """Extraction stage that emitted a record."""
    TAG_PARSER = "tag_parser"
    TYPE_RESOLVER = "type_resolver"
    COLUMN_BUILDER = "column_builder"
    TABLE_BUILDER = "table_builder"
    REGISTRY = "registry"


# Context fields shown inline by HumanFormatter, in this order
_LOCATION_FIELDS = ("struct", "table", "field")


@dataclass(frozen=True)
class LogContext:
    """Where extraction currently is. Unset fields are omitted from output."""
    struct: Optional[str] = None
    table: Optional[str] = None
    field: Optional[str] = None
    component: Optional[str] = None
    operation: Optional[str] = None
    extra: Dict[str, Any] = dataclasses.field(default_factory=dict)

    def child(self, **changes: Any) -> "LogContext":
        """Copy with some fields replaced; extra is merged, not replaced."""
        extra = {**self.extra, **changes.pop("extra", {})}
        return replace(self, extra=extra, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "extra" and getattr(self, f.name) is not None
        }
        data.update(self.extra)
        return data


_EMPTY = LogContext()
_local = threading.local()


def _stack() -> List[LogContext]:
    stack = getattr(_local, "stack", None)
    if stack is None:
        stack = _local.stack = []
    return stack


def get_current_context() -> LogContext:
    """Innermost context on this thread, or an empty one."""
    stack = _stack()
    return stack[-1] if stack else _EMPTY


@contextmanager
def log_context(**changes: Any) -> Iterator[LogContext]:
    """
    Push a context for the duration of the block.

    Fields not given are inherited from the enclosing context.

    Example:
        with log_context(struct="User", field="CreatedAt"):
            logger.debug("Inferring column")
    """
    ctx = get_current_context().child(**changes)
    stack = _stack()
    stack.append(ctx)
    try:
        yield ctx
    finally:
        stack.pop()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _record_data(record: logging.LogRecord) -> Optional[Dict[str, Any]]:
    # ContextLogger stores its payload under record.extra
    return getattr(record, "extra", None) or None


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def __init__(self, include_context: bool = True, include_source: bool = True):
        super().__init__()
        self.include_context = include_context
        self.include_source = include_source

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": _utcnow().isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = get_current_context().to_dict() if self.include_context else {}
        if context:
            entry["context"] = context

        data = _record_data(record)
        if data:
            entry["data"] = data

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        if self.include_source:
            entry["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Single-line output with the model/table/field location in brackets."""

    def format(self, record: logging.LogRecord) -> str:
        context = get_current_context()
        location = ", ".join(
            f"{name}={getattr(context, name)}"
            for name in _LOCATION_FIELDS
            if getattr(context, name)
        )

        line = "{ts} {level:<8} {logger}{where}: {message}".format(
            ts=_utcnow().strftime("%Y-%m-%d %H:%M:%S"),
            level=record.levelname,
            logger=record.name,
            where=f" [{location}]" if location else "",
            message=record.getMessage(),
        )

        data = _record_data(record)
        if data:
            line += f" {data}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class ContextLogger(logging.LoggerAdapter):
    """
    Adapter that tags every record with the emitting component.

    Call-site extra and the component are attached to the record as a single
    `extra` attribute. The extraction context is not copied here; the
    formatters read it from the context stack.
    """

    def process(self, msg, kwargs):
        data = dict(kwargs.get("extra") or {})
        component = (self.extra or {}).get("component")
        if component:
            data.setdefault("component", component)
        kwargs["extra"] = {"extra": data}
        return msg, kwargs


def get_logger(name: str, component: Optional[ComponentType] = None) -> ContextLogger:
    """Context-aware logger for a ddlmaker module."""
    return ContextLogger(
        logging.getLogger(name),
        {"component": component.value if component else None},
    )


def configure_logging(
    level: Union[str, int] = "INFO",
    json_output: bool = False,
) -> None:
    """
    Route log output to stdout with one of the ddlmaker formatters.

    Meant for scripts and tests; libraries embedding ddlmaker should leave
    handler setup to their host application.

    Args:
        level: Level name or number
        json_output: JSON lines instead of human-readable text.
            LOG_FORMAT=json in the environment has the same effect.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    use_json = json_output or os.getenv("LOG_FORMAT", "").lower() == "json"
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter() if use_json else HumanFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


logging.getLogger("ddlmaker").addHandler(logging.NullHandler())


__all__ = [
    "ComponentType",
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "ContextLogger",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
]
