"""Main scaffolding orchestrator.

Takes a ``GenerationRequest`` and writes one TypeScript file per requested
component (model, repository, service, controller, router) under the base
path, asking before replacing anything that already exists and keeping each
directory's ``index.ts`` barrel in sync.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable

from node_scaffold.utils import write_text_file

from .barrel import BarrelUpdate, add_export
from .entrypoint import ImportPatchStatus, ensure_side_effect_import
from .models import (
    ComponentKind,
    EventKind,
    GenerationRequest,
    GenerationResult,
    UnknownComponentKind,
)
from .naming import BARREL_FILE_NAME, resolve_path
from .templates import TemplateRenderer

ConfirmOverwrite = Callable[[Path], bool]


# ---------------------------------------------------------------------------
# Overwrite policies
# ---------------------------------------------------------------------------


def decline_all(path: Path) -> bool:
    """Never overwrite.  The default when no prompt is wired in."""
    return False


def accept_all(path: Path) -> bool:
    """Always overwrite (``--force``)."""
    return True


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ResourceGenerator:
    """Writes the component files for one resource.

    Components are processed strictly in request order.  Nothing is rolled
    back: if a later component fails, files written for earlier ones stay
    on disk and the exception propagates.

    Attributes:
        renderer: Turns a component kind and request into file content.
        confirm: Called with the target path when it already exists;
            returning ``False`` skips the component.
    """

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        confirm: ConfirmOverwrite | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.confirm = confirm or decline_all

    # -- Public API --------------------------------------------------------

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Generate every requested component of *request*.

        Returns:
            A ``GenerationResult`` listing created, skipped and overwritten
            paths plus the ordered events of the run.

        Raises:
            UnsupportedPersistenceKind: If a component has no template for
                the request's ORM.  Components written before it remain.
            OSError: If a component file or barrel cannot be written.
        """
        result = GenerationResult()

        if request.use_dependency_injection:
            await self._ensure_reflect_metadata(request.base_path, result)

        for raw_kind in request.requested_components:
            try:
                kind = ComponentKind.parse(raw_kind)
            except UnknownComponentKind:
                result.record(EventKind.IGNORED, message=f"unknown component '{raw_kind}'")
                continue
            await self._generate_component(kind, request, result)

        return result

    # -- Per-component steps -----------------------------------------------

    async def _generate_component(
        self,
        kind: ComponentKind,
        request: GenerationRequest,
        result: GenerationResult,
    ) -> None:
        target = resolve_path(request.base_path, request.resource_name, kind)
        content = self.renderer.render_component(kind, request)
        file_path = target.path

        exists = await asyncio.to_thread(file_path.exists)
        if exists and not self.confirm(file_path):
            result.skipped.append(file_path)
            result.record(EventKind.SKIPPED, file_path)
            return

        await asyncio.to_thread(write_text_file, file_path, content)

        if exists:
            result.overwritten.append(file_path)
            result.record(EventKind.OVERWRITTEN, file_path)
        else:
            result.created.append(file_path)
            result.record(EventKind.CREATED, file_path)

        update = await asyncio.to_thread(
            add_export, target.directory, request.resource_name, kind
        )
        if update is BarrelUpdate.CREATED:
            result.record(EventKind.BARREL_CREATED, target.directory / BARREL_FILE_NAME)
        elif update is BarrelUpdate.APPENDED:
            result.record(EventKind.BARREL_UPDATED, target.directory / BARREL_FILE_NAME)

    async def _ensure_reflect_metadata(
        self, base_path: Path, result: GenerationResult
    ) -> None:
        """Run the entry-point patch and turn its outcome into events."""
        patch = await asyncio.to_thread(ensure_side_effect_import, base_path)

        if patch.status is ImportPatchStatus.ADDED:
            result.record(EventKind.IMPORT_ADDED, patch.path)
        elif patch.status is ImportPatchStatus.ALREADY_PRESENT:
            result.record(EventKind.IMPORT_PRESENT, patch.path)
        else:
            result.record(EventKind.WARNING, patch.path, patch.message)
