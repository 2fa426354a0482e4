# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Extraction configuration
# PURPOSE: Tag key, skip marker and type-inference sizes, fixed at startup
# CREATED: 09 OCT 2026
# ============================================================================
"""
Configuration Defaults

The extraction engine has a handful of process-wide knobs. They live in a
single immutable dataclass that is read once (environment overrides applied)
and then passed explicitly into every builder call.

Design:
- Immutable dataclass, never mutated after construction
- Environment variable overrides
- Lazily created global instance, resettable for tests
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Settings that drive tag parsing and column type inference.
    """
    # Key looked up in Tag(...) markers, json_schema_extra and dataclass metadata
    tag_name: str = "ddl"

    # Tag name that removes a field from the schema
    skip_marker: str = "-"

    # Inferred sizes
    default_varchar_size: int = 191  # utf8mb4 index prefix limit
    default_varbinary_size: int = 767
    datetime_precision: int = 6  # microseconds

    def __post_init__(self):
        if not self.tag_name:
            raise ValueError("tag_name must not be empty")
        if not self.skip_marker:
            raise ValueError("skip_marker must not be empty")

    @classmethod
    def from_env(cls) -> "ExtractionConfig":
        """Create from environment variables."""
        return cls(
            tag_name=os.getenv("DDLMAKER_TAG_NAME", "ddl"),
            skip_marker=os.getenv("DDLMAKER_SKIP_MARKER", "-"),
            default_varchar_size=int(os.getenv("DDLMAKER_VARCHAR_SIZE", 191)),
            default_varbinary_size=int(os.getenv("DDLMAKER_VARBINARY_SIZE", 767)),
        )


# ============================================================================
# GLOBAL CONFIG INSTANCE
# ============================================================================

_config: Optional[ExtractionConfig] = None


def get_config() -> ExtractionConfig:
    """Get the process-wide extraction config."""
    global _config
    if _config is None:
        _config = ExtractionConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (for testing)."""
    global _config
    _config = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ExtractionConfig",
    "get_config",
    "reset_config",
]
