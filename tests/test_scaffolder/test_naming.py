"""Tests for component path resolution.

Covers:
- Fixed pluralisation table
- File name format
- Directory placement under the base path
- Unknown component kinds
"""

from __future__ import annotations

from pathlib import Path

import pytest

from node_scaffold.scaffolder.models import ComponentKind, UnknownComponentKind
from node_scaffold.scaffolder.naming import (
    BARREL_FILE_NAME,
    SOURCE_EXTENSION,
    component_file_name,
    pluralize_kind,
    resolve_path,
)


pytestmark = pytest.mark.unit


class TestPluralizeKind:
    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("model", "models"),
            ("repository", "repositories"),
            ("service", "services"),
            ("controller", "controllers"),
            ("router", "routers"),
        ],
    )
    def test_fixed_table(self, kind: str, expected: str):
        assert pluralize_kind(kind) == expected

    def test_accepts_enum_member(self):
        assert pluralize_kind(ComponentKind.REPOSITORY) == "repositories"

    def test_case_insensitive(self):
        assert pluralize_kind("Router") == "routers"

    def test_unknown_kind_raises(self):
        with pytest.raises(UnknownComponentKind):
            pluralize_kind("middleware")


class TestResolvePath:
    def test_model_path(self):
        target = resolve_path("./src", "user", "model")
        assert target.directory == Path("./src/models")
        assert target.file_name == "user.model.ts"
        assert target.path == Path("src/models/user.model.ts")

    def test_repository_path(self):
        target = resolve_path(Path("app"), "order", ComponentKind.REPOSITORY)
        assert target.path == Path("app/repositories/order.repository.ts")

    def test_resource_name_used_verbatim(self):
        target = resolve_path("src", "blogpost", "service")
        assert target.file_name == "blogpost.service.ts"

    def test_deterministic(self):
        for kind in ComponentKind:
            assert resolve_path("src", "cat", kind) == resolve_path("src", "cat", kind)

    def test_unknown_kind_raises(self):
        with pytest.raises(UnknownComponentKind) as exc_info:
            resolve_path("src", "user", "widget")
        assert exc_info.value.kind == "widget"
        assert "Valid types are" in str(exc_info.value)


class TestConstants:
    def test_extension(self):
        assert SOURCE_EXTENSION == ".ts"
        assert BARREL_FILE_NAME == "index.ts"

    def test_component_file_name(self):
        assert component_file_name("user", "controller") == "user.controller.ts"
