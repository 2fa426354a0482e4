# ============================================================================
# NAMING
# ============================================================================
# STATUS: Core - Identifier transliteration
# PURPOSE: Derive SQL identifiers from Python class and field names
# CREATED: 11 OCT 2026
# EXPORTS: camel_to_snake
# ============================================================================

import re

# "HTTPServer" -> "HTTP_Server": an uppercase run keeps its last letter for the next word
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
# "UserID" -> "User_ID"
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def camel_to_snake(name: str) -> str:
    """
    Convert CamelCase to snake_case.

    An uppercase run is one token, so "UserID" -> "user_id" and
    "HTTPServer" -> "http_server". snake_case input is returned unchanged.
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()


__all__ = ["camel_to_snake"]
