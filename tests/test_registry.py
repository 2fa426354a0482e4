# ============================================================================
# SCHEMA REGISTRY TESTS
# ============================================================================
# STATUS: Tests - Table accumulation
# PURPOSE: Verify ordering, lookup and all-or-nothing registration
# CREATED: 16 OCT 2026
# ============================================================================
"""
Schema Registry Tests

Run with:
    pytest tests/test_registry.py -v
"""

from typing import Annotated

import pytest
from pydantic import BaseModel

from ddlmaker.config import ExtractionConfig
from ddlmaker.errors import DuplicateTableError, TagParseError, UnsupportedTypeError
from ddlmaker.models.types import Int64, Tag
from ddlmaker.schema.registry import SchemaRegistry


class User(BaseModel):
    id: Int64
    name: str


class Post(BaseModel):
    id: Int64
    title: str


class LegacyUser(BaseModel):
    id: Int64

    @classmethod
    def table(cls) -> str:
        return "user"


class Broken(BaseModel):
    id: Annotated[Int64, Tag(ddl=",size=huge")]


@pytest.fixture
def registry():
    return SchemaRegistry(ExtractionConfig())


class TestRegistration:
    def test_add_returns_built_tables(self, registry):
        built = registry.add_structs(User, Post)
        assert [t.name for t in built] == ["user", "post"]

    def test_registration_order(self, registry):
        registry.add_structs(Post)
        registry.add_structs(User)
        assert [t.name for t in registry] == ["post", "user"]
        assert [t.name for t in registry.tables] == ["post", "user"]

    def test_lookup(self, registry):
        registry.add_structs(User)
        assert "user" in registry
        assert "post" not in registry
        assert registry.get("user").source_name == "User"
        assert registry.get("post") is None
        assert len(registry) == 1

    def test_empty_call(self, registry):
        assert registry.add_structs() == []
        assert len(registry) == 0


class TestAtomicity:
    def test_duplicate_with_existing(self, registry):
        registry.add_structs(User)
        with pytest.raises(DuplicateTableError, match="user") as exc_info:
            registry.add_structs(Post, LegacyUser)
        assert exc_info.value.table_name == "user"
        assert exc_info.value.source_name == "LegacyUser"
        assert [t.name for t in registry] == ["user"]

    def test_duplicate_within_call(self, registry):
        with pytest.raises(DuplicateTableError):
            registry.add_structs(User, LegacyUser)
        assert len(registry) == 0

    def test_build_failure_keeps_nothing(self, registry):
        with pytest.raises(TagParseError) as exc_info:
            registry.add_structs(User, Broken)
        assert "size" in str(exc_info.value)
        assert len(registry) == 0

    def test_unsupported_field_keeps_nothing(self, registry):
        class Odd(BaseModel):
            items: dict

        with pytest.raises(UnsupportedTypeError):
            registry.add_structs(Post, Odd)
        assert "post" not in registry

    def test_same_model_twice(self, registry):
        with pytest.raises(DuplicateTableError):
            registry.add_structs(User, User)


class TestConfig:
    def test_uses_given_config(self):
        class Account(BaseModel):
            login: Annotated[str, Tag(sql="user_login")]

        registry = SchemaRegistry(ExtractionConfig(tag_name="sql"))
        registry.add_structs(Account)
        assert registry.get("account").column_names == ("user_login",)

    def test_defaults_to_global_config(self, monkeypatch):
        from ddlmaker.config import reset_config

        monkeypatch.setenv("DDLMAKER_VARCHAR_SIZE", "255")
        reset_config()
        try:
            registry = SchemaRegistry()
            registry.add_structs(User)
            assert registry.get("user").column("name").size == 255
        finally:
            reset_config()
