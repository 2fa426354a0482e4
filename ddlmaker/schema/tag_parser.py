# ============================================================================
# TAG GRAMMAR PARSER
# ============================================================================
# STATUS: Core - Field tag parsing
# PURPOSE: Split a ddl tag string into a column name and ordered options
# CREATED: 11 OCT 2026
# EXPORTS: TagOption, ParsedTag, parse_tag, split_options
# ============================================================================
"""
Tag Grammar Parser

Grammar:

    ["-" | name] ("," key ["=" value])*

The name segment ends at the first comma. Option splitting tracks
parenthesis depth so that values may contain commas:

    "amount,default=f(1,2),comment=total"
        -> name "amount", options default="f(1,2)", comment="total"

Parsing never looks at option keys; typed conversion happens in
TagOption.as_bool() / as_int(), called by the column builder.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple

from ddlmaker.errors import TagParseError

# Accepted boolean spellings
_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")

# Integer options are signed 64-bit
_INT_MIN, _INT_MAX = -(2 ** 63), 2 ** 63 - 1


@dataclass(frozen=True)
class TagOption:
    """One `key` or `key=value` option."""
    key: str
    value: str = ""
    has_value: bool = False

    def as_bool(self) -> bool:
        """Boolean flag; a bare key means True."""
        if not self.has_value:
            return True
        if self.value in _TRUE_LITERALS:
            return True
        if self.value in _FALSE_LITERALS:
            return False
        raise TagParseError(self.key, self.value)

    def as_int(self) -> int:
        """Base-10 integer; a missing value is an error."""
        if _INT_LITERAL.fullmatch(self.value) is None:
            raise TagParseError(self.key, self.value)
        try:
            number = int(self.value)
        except ValueError as e:  # beyond the int string conversion limit
            raise TagParseError(self.key, self.value) from e
        if not _INT_MIN <= number <= _INT_MAX:
            raise TagParseError(self.key, self.value)
        return number


@dataclass(frozen=True)
class ParsedTag:
    name: str
    options: Tuple[TagOption, ...] = ()


def _cut_option(s: str) -> Tuple[str, str, bool]:
    """Cut at the first comma outside parentheses."""
    depth = 0
    for i, ch in enumerate(s):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            return s[:i], s[i + 1:], True
    return s, "", False


def split_options(remain: str) -> List[str]:
    """Split the part after the name into raw option strings."""
    options = []
    while remain:
        opt, remain, _ = _cut_option(remain)
        options.append(opt)
    return options


def parse_tag(raw: str) -> ParsedTag:
    """Parse a raw tag string. Empty input yields an empty name and no options."""
    name, _, remain = raw.partition(",")
    options = []
    for opt in split_options(remain):
        key, sep, value = opt.partition("=")
        options.append(TagOption(key=key, value=value, has_value=bool(sep)))
    return ParsedTag(name=name, options=tuple(options))


__all__ = [
    "TagOption",
    "ParsedTag",
    "parse_tag",
    "split_options",
]
