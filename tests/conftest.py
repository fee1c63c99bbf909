"""Shared pytest fixtures for the node-scaffold test suite.

Provides reusable fixtures for:
- Temporary target trees (``<tmp>/src``) with optional entry files
- Request factories for both ORMs
- Recording confirm callbacks that stand in for the interactive prompt
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from node_scaffold.scaffolder.models import FieldSpec, GenerationRequest


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def base_path(tmp_path: Path) -> Path:
    """``<tmp>/src`` -- not created, so generation starts from nothing."""
    return tmp_path / "src"


@pytest.fixture
def app_entry(tmp_path: Path) -> Path:
    """An ``app.ts`` one level above ``src`` without reflect-metadata."""
    entry = tmp_path / "app.ts"
    entry.write_text(
        "import express from 'express';\n\nconst app = express();\n",
        encoding="utf-8",
    )
    return entry


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run inside *tmp_path* with no SCAFFOLD_* variables set."""
    for name in ("SCAFFOLD_PATH", "SCAFFOLD_ORM", "SCAFFOLD_DI", "SCAFFOLD_FORCE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


@pytest.fixture
def make_request(base_path: Path) -> Callable[..., GenerationRequest]:
    """Factory for ``GenerationRequest`` objects rooted at ``base_path``.

    Defaults: resource ``user``, knex, no DI, all five components, one
    ``email:string`` field.
    """

    def _make(name: str = "user", **overrides: Any) -> GenerationRequest:
        params: dict[str, Any] = {
            "persistence_kind": "knex",
            "use_dependency_injection": False,
            "base_path": base_path,
            "requested_components": ["model", "repository", "service", "controller", "router"],
            "fields": [FieldSpec(name="email", type="string")],
        }
        params.update(overrides)
        return GenerationRequest.for_resource(name, **params)

    return _make


# ---------------------------------------------------------------------------
# Prompt stand-ins
# ---------------------------------------------------------------------------


class RecordingConfirm:
    """Confirm callback that answers with a fixed value and logs each path."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.asked: list[Path] = []

    def __call__(self, path: Path) -> bool:
        self.asked.append(path)
        return self.answer


@pytest.fixture
def accept() -> RecordingConfirm:
    return RecordingConfirm(True)


@pytest.fixture
def decline() -> RecordingConfirm:
    return RecordingConfirm(False)
