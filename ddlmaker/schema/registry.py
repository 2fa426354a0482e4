# ============================================================================
# SCHEMA REGISTRY
# ============================================================================
# STATUS: Core - Table accumulation
# PURPOSE: Collect tables built from many models for downstream rendering
# CREATED: 13 OCT 2026
# EXPORTS: SchemaRegistry
# ============================================================================
"""
Schema Registry

Holds the tables a program declares, in registration order, keyed by table
name. Rendering DDL from the registry is left to the consumer.

Usage:
    registry = SchemaRegistry()
    registry.add_structs(User, Post)
    for table in registry:
        ...
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

from ddlmaker.config import ExtractionConfig, get_config
from ddlmaker.errors import DuplicateTableError
from ddlmaker.logging import ComponentType, get_logger
from ddlmaker.models.table import Table
from ddlmaker.schema.table_builder import build_table

logger = get_logger(__name__, ComponentType.REGISTRY)


class SchemaRegistry:
    """
    Ordered collection of table descriptors.

    Each add_structs() call is all-or-nothing: if any model fails to build
    or collides on a table name, nothing from that call is kept.
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.config = config or get_config()
        self._tables: Dict[str, Table] = {}

    def add_structs(self, *structs: Any) -> List[Table]:
        """
        Build and register tables for the given models.

        Returns:
            The tables built by this call, in argument order

        Raises:
            DuplicateTableError: A table name is already taken
            DDLMakerError: Any table build failure
        """
        built = [build_table(s, self.config) for s in structs]

        taken = dict(self._tables)
        for table in built:
            if table.name in taken:
                raise DuplicateTableError(table.name, table.source_name)
            taken[table.name] = table

        self._tables = taken
        logger.info(
            f"Registered {len(built)} tables",
            extra={"tables": [t.name for t in built], "total": len(self._tables)},
        )
        return built

    @property
    def tables(self) -> Tuple[Table, ...]:
        return tuple(self._tables.values())

    def get(self, name: str) -> Optional[Table]:
        return self._tables.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    def __iter__(self) -> Iterator[Table]:
        return iter(self._tables.values())

    def __len__(self) -> int:
        return len(self._tables)


__all__ = ["SchemaRegistry"]
