# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 09 OCT 2026
# ============================================================================
"""
Configuration Module

Provides the immutable extraction configuration for ddlmaker.
"""

from ddlmaker.config.defaults import (
    ExtractionConfig,
    get_config,
    reset_config,
)

__all__ = [
    "ExtractionConfig",
    "get_config",
    "reset_config",
]
