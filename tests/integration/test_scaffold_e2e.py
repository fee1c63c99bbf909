"""Integration tests for full resource generation.

These run the real renderer, generator, barrel updater and entry-point
patch against a temporary tree, the way ``scaffold generate`` does, and
check the resulting files.  No Node.js toolchain is required.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from node_scaffold.scaffolder import (
    FieldSpec,
    GenerationRequest,
    ResourceGenerator,
    accept_all,
    decline_all,
)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty project root used as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.integration
class TestScaffoldScenario:
    """The user/knex scenario against an empty ``./src``."""

    async def test_user_model_and_repository(self, project: Path) -> None:
        request = GenerationRequest(
            resource_name="user",
            persistence_kind="relational",
            use_dependency_injection=False,
            base_path=Path("./src"),
            requested_components=["model", "repository"],
            fields=[FieldSpec(name="email", type="string")],
        )

        result = await ResourceGenerator().generate(request)

        assert result.created == [
            Path("./src/models/user.model.ts"),
            Path("./src/repositories/user.repository.ts"),
        ]
        assert result.skipped == []
        assert result.overwritten == []

        models_barrel = (project / "src" / "models" / "index.ts").read_text()
        repos_barrel = (project / "src" / "repositories" / "index.ts").read_text()
        assert models_barrel.splitlines() == ["export * from './user.model';"]
        assert repos_barrel.splitlines() == ["export * from './user.repository';"]

    async def test_rerun_declined_is_idempotent(self, project: Path) -> None:
        request = GenerationRequest.for_resource(
            "user",
            use_dependency_injection=False,
            requested_components=["model", "repository", "service", "controller", "router"],
        )
        first = await ResourceGenerator().generate(request)
        snapshot = {
            p: p.read_bytes() for p in (project / "src").rglob("*") if p.is_file()
        }

        second = await ResourceGenerator(confirm=decline_all).generate(request)

        assert second.skipped == first.created
        assert second.created == [] and second.overwritten == []
        after = {p: p.read_bytes() for p in (project / "src").rglob("*") if p.is_file()}
        assert after == snapshot


@pytest.mark.integration
class TestFullResourceWithDI:
    async def test_generates_wired_resource(self, project: Path) -> None:
        entry = project / "index.ts"
        entry.write_text("#!/usr/bin/env node\n\nimport express from 'express';\n")

        request = GenerationRequest.for_resource(
            "order",
            persistence_kind="mongoose",
            use_dependency_injection=True,
            requested_components=["model", "repository", "service", "controller", "router"],
            fields=[FieldSpec(name="total", type="number"), FieldSpec(name="paid", type="boolean")],
        )

        result = await ResourceGenerator().generate(request)

        assert len(result.created) == 5
        assert entry.read_text() == (
            "#!/usr/bin/env node\n\nimport 'reflect-metadata';\nimport express from 'express';\n"
        )

        src = project / "src"
        assert sorted(p.name for p in src.iterdir()) == [
            "controllers", "models", "repositories", "routers", "services",
        ]
        for directory in src.iterdir():
            assert (directory / "index.ts").exists()

        controller = (src / "controllers" / "order.controller.ts").read_text()
        assert "@inject(OrderService) private orderService: OrderService" in controller
        assert "const id = req.params.id;" in controller

        model = (src / "models" / "order.model.ts").read_text()
        assert "  total: Number,\n  paid: Boolean,\n" in model

    async def test_second_resource_appends_to_barrels(self, project: Path) -> None:
        for name in ("cat", "dog"):
            await ResourceGenerator().generate(
                GenerationRequest.for_resource(
                    name, use_dependency_injection=False, requested_components=["model", "router"]
                )
            )
        await ResourceGenerator(confirm=accept_all).generate(
            GenerationRequest.for_resource(
                "cat", use_dependency_injection=False, requested_components=["model"]
            )
        )

        assert (project / "src" / "models" / "index.ts").read_text() == (
            "export * from './cat.model';\nexport * from './dog.model';\n"
        )
        assert (project / "src" / "routers" / "index.ts").read_text() == (
            "export * from './cat.router';\nexport * from './dog.router';\n"
        )
