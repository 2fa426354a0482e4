# ============================================================================
# COLUMN BUILDER TESTS
# ============================================================================
# STATUS: Tests - Field to column conversion
# PURPOSE: Verify type inference, tag options, overrides and failures
# CREATED: 15 OCT 2026
# ============================================================================
"""
Column Builder Tests

Tests:
1. Default (sql_type, size, unsigned) for every supported base type
2. Each tag option, including type= override semantics
3. Nullability is the same for Optional, NullX and Null[T]
4. Skip marker, unsupported types and malformed option values

Run with:
    pytest tests/test_column_builder.py -v
"""

import enum
from datetime import datetime
from typing import Annotated, Dict, List, NewType, Optional

import pytest
from annotated_types import MaxLen
from pydantic import BaseModel

from ddlmaker.config import ExtractionConfig
from ddlmaker.errors import SkipColumn, TagParseError, UnsupportedTypeError
from ddlmaker.models.null import Null, NullInt64, NullString, NullTime
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
    fixed_bytes,
)
from ddlmaker.schema.column_builder import build_column


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def config():
    return ExtractionConfig()


class Profile(BaseModel):
    bio: str = ""
    links: List[str] = []


class Color(str, enum.Enum):
    RED = "red"
    BLUE = "blue"


class Priority(enum.IntEnum):
    LOW = 1
    HIGH = 2


OrderID = NewType("OrderID", Uint32)


def triple(col):
    return col.sql_type, col.size, col.unsigned


# ============================================================================
# TYPE INFERENCE
# ============================================================================


class TestInference:
    @pytest.mark.parametrize(
        "typ, expected",
        [
            (bool, ("TINYINT", 1, False)),
            (Int8, ("TINYINT", 0, False)),
            (Int16, ("SMALLINT", 0, False)),
            (Int32, ("INTEGER", 0, False)),
            (Int64, ("BIGINT", 0, False)),
            (int, ("BIGINT", 0, False)),
            (Uint8, ("TINYINT", 0, True)),
            (Uint16, ("SMALLINT", 0, True)),
            (Uint32, ("INTEGER", 0, True)),
            (Uint64, ("BIGINT", 0, True)),
            (Float32, ("FLOAT", 0, False)),
            (Float64, ("DOUBLE", 0, False)),
            (float, ("DOUBLE", 0, False)),
            (str, ("VARCHAR", 191, False)),
            (RawJSON, ("JSON", 0, False)),
            (bytes, ("VARBINARY", 767, False)),
            (bytearray, ("VARBINARY", 767, False)),
            (fixed_bytes(16), ("BINARY", 16, False)),
            (datetime, ("DATETIME", 6, False)),
        ],
    )
    def test_defaults(self, config, typ, expected):
        col = build_column("Value", typ, "", config)
        assert triple(col) == expected
        assert col.nullable is False

    def test_newtype_chain(self, config):
        assert triple(build_column("ID", OrderID, "", config)) == ("INTEGER", 0, True)

    def test_str_enum_is_varchar(self, config):
        assert triple(build_column("Color", Color, "", config)) == ("VARCHAR", 191, False)

    def test_int_enum_is_bigint(self, config):
        assert build_column("Priority", Priority, "", config).sql_type == "BIGINT"

    def test_max_length_sizes_varchar(self, config):
        col = build_column("Name", Annotated[str, MaxLen(64)], "", config)
        assert (col.sql_type, col.size) == ("VARCHAR", 64)

    def test_max_length_sizes_varbinary(self, config):
        col = build_column("Blob", Annotated[bytes, MaxLen(100)], "", config)
        assert (col.sql_type, col.size) == ("VARBINARY", 100)

    def test_pydantic_model_is_json(self, config):
        col = build_column("Profile", Profile, "", config)
        assert col.sql_type == "JSON"
        assert col.resolved_type is Profile

    def test_resolved_type_kept(self, config):
        assert build_column("N", Optional[Int16], "", config).resolved_type is Int16

    def test_config_sizes(self):
        config = ExtractionConfig(default_varchar_size=255, default_varbinary_size=1024)
        assert build_column("S", str, "", config).size == 255
        assert build_column("B", bytes, "", config).size == 1024

    @pytest.mark.parametrize("typ", [complex, dict, Dict[str, int], List[int], object])
    def test_unsupported(self, config, typ):
        with pytest.raises(UnsupportedTypeError, match="unknown type") as exc_info:
            build_column("Value", typ, "", config)
        assert exc_info.value.field_name == "Value"


# ============================================================================
# NULLABILITY
# ============================================================================


class TestNullability:
    def test_optional_is_nullable(self, config):
        assert build_column("N", Optional[Int64], "", config).nullable is True

    def test_same_column_for_every_spelling(self, config):
        columns = [
            build_column("N", Optional[Int64], "", config),
            build_column("N", NullInt64, "", config),
            build_column("N", Null[Int64], "", config),
        ]
        assert all(c == columns[0] for c in columns)
        assert all(c.resolved_type is Int64 for c in columns)
        assert all(c.nullable for c in columns)

    def test_only_nullability_differs(self, config):
        plain = build_column("At", datetime, "", config)
        wrapped = build_column("At", NullTime, "", config)
        assert triple(plain) == triple(wrapped)
        assert (plain.nullable, wrapped.nullable) == (False, True)

    def test_null_option_overrides_inference(self, config):
        assert build_column("S", NullString, ",null=false", config).nullable is False
        assert build_column("S", str, ",null", config).nullable is True


# ============================================================================
# TAG OPTIONS
# ============================================================================


class TestNaming:
    def test_derived_name(self, config):
        col = build_column("UserID", Int64, "", config)
        assert col.name == "user_id"
        assert col.source_name == "UserID"

    def test_explicit_name(self, config):
        assert build_column("UserID", Int64, "uid", config).name == "uid"

    def test_empty_name_with_options(self, config):
        assert build_column("CreatedAt", datetime, ",null", config).name == "created_at"


class TestOptions:
    def test_flags(self, config):
        col = build_column("ID", Uint64, "id,auto,invisible", config)
        assert col.auto_increment is True
        assert col.invisible is True
        assert col.unsigned is True

    def test_flags_explicit_false(self, config):
        col = build_column("ID", Uint64, "id,auto=false,unsigned=0", config)
        assert col.auto_increment is False
        assert col.unsigned is False

    def test_size(self, config):
        assert build_column("Name", str, ",size=32", config).size == 32

    def test_srid(self, config):
        col = build_column("Location", bytes, ",type=GEOMETRY,srid=4326", config)
        assert col.srid == 4326

    def test_string_options(self, config):
        col = build_column(
            "Name", str, "name,default='anon',charset=utf8mb4,collate=utf8mb4_bin,comment=display name", config
        )
        assert col.default == "'anon'"
        assert col.charset == "utf8mb4"
        assert col.collation == "utf8mb4_bin"
        assert col.comment == "display name"

    def test_default_with_commas(self, config):
        col = build_column("Amount", Int64, "amount,default=f(1,2)", config)
        assert col.default == "f(1,2)"

    def test_default_expression(self, config):
        col = build_column("CreatedAt", datetime, ",default=CURRENT_TIMESTAMP(6)", config)
        assert col.default == "CURRENT_TIMESTAMP(6)"

    def test_unknown_options_ignored(self, config):
        col = build_column("Name", str, ",frobnicate,color=blue,null", config)
        assert col.nullable is True
        assert col.size == 191

    def test_later_option_wins(self, config):
        assert build_column("Name", str, ",size=10,size=20", config).size == 20


class TestTypeOverride:
    def test_override_resets_size_and_unsigned(self, config):
        col = build_column("Count", Uint32, ",type=BIGINT", config)
        assert triple(col) == ("BIGINT", 0, False)

    def test_size_before_type_is_reset(self, config):
        assert build_column("Name", str, ",size=10,type=TEXT", config).size == 0

    def test_options_after_type_apply(self, config):
        col = build_column("Name", str, ",type=CHAR,size=2,unsigned", config)
        assert triple(col) == ("CHAR", 2, True)

    def test_override_rescues_unsupported_type(self, config):
        col = build_column("Value", complex, ",type=VARCHAR", config)
        assert col.sql_type == "VARCHAR"
        assert col.size == 0

    def test_override_keeps_resolved_type(self, config):
        assert build_column("Value", complex, ",type=TEXT", config).resolved_type is complex


# ============================================================================
# FAILURES AND SKIPS
# ============================================================================


class TestSkipAndErrors:
    def test_skip_marker(self, config):
        with pytest.raises(SkipColumn):
            build_column("Secret", str, "-", config)

    def test_skip_unsupported_type(self, config):
        with pytest.raises(SkipColumn):
            build_column("Secret", complex, "-,type=oops,size=bad", config)

    def test_custom_skip_marker(self):
        config = ExtractionConfig(skip_marker="ignore")
        with pytest.raises(SkipColumn):
            build_column("Secret", str, "ignore", config)
        assert build_column("Dash", str, "-", config).name == "-"

    def test_malformed_bool(self, config):
        with pytest.raises(TagParseError, match="null") as exc_info:
            build_column("Name", str, ",null=maybe", config)
        assert exc_info.value.key == "null"
        assert exc_info.value.field_name == "Name"

    def test_malformed_size(self, config):
        with pytest.raises(TagParseError, match="size"):
            build_column("Name", str, ",size=big", config)

    def test_valueless_size(self, config):
        with pytest.raises(TagParseError, match="size"):
            build_column("Name", str, ",size", config)

    def test_tag_error_before_type_error(self, config):
        with pytest.raises(TagParseError):
            build_column("Value", complex, ",srid=x", config)

    def test_oversized_size(self, config):
        with pytest.raises(TagParseError, match="size") as exc_info:
            build_column("Name", str, ",size=" + "9" * 5000, config)
        assert exc_info.value.field_name == "Name"

    def test_size_out_of_range(self, config):
        with pytest.raises(TagParseError, match="size"):
            build_column("Name", str, ",size=99999999999999999999999", config)
