"""Ensure ``reflect-metadata`` is imported by the application entry file.

tsyringe's decorators need the ``reflect-metadata`` polyfill loaded before
any decorated class.  When DI output is requested the generator calls
:func:`ensure_side_effect_import` once; it looks for a conventional entry
file next to or one level above the base path and inserts the import at the
top.  Only that one line is ever added, and at most one file is touched.

The patch is best effort: failures are reported in the returned
``ImportPatch`` rather than raised.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

IMPORT_LINE = "import 'reflect-metadata';"

ENTRY_POINT_CANDIDATES: tuple[str, ...] = (
    "index.ts",
    "app.ts",
    "main.ts",
    "server.ts",
    "config/container.ts",
)

IMPORT_MARKERS: tuple[str, ...] = (
    "import 'reflect-metadata'",
    'import "reflect-metadata"',
    "require('reflect-metadata')",
    'require("reflect-metadata")',
)


class ImportPatchStatus(str, Enum):
    ADDED = "added"
    ALREADY_PRESENT = "already_present"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class ImportPatch(BaseModel):
    """Outcome of one ``ensure_side_effect_import`` call."""
    status: ImportPatchStatus
    path: Optional[Path] = None
    message: str = ""


def candidate_paths(base_path: str | Path) -> list[Path]:
    """Every location checked, in order.

    Each candidate name is tried one level above *base_path* first, then
    inside it.  The parent location is normalised so it resolves even when
    *base_path* does not exist yet.
    """
    base = Path(base_path)
    paths: list[Path] = []
    for name in ENTRY_POINT_CANDIDATES:
        paths.append(Path(os.path.normpath(os.path.join(base, "..", name))))
        paths.append(base / name)
    return paths


def has_side_effect_import(content: str) -> bool:
    return any(marker in content for marker in IMPORT_MARKERS)


def insert_import(content: str, line: str = IMPORT_LINE) -> str:
    """Insert *line* after a leading shebang and any leading blank lines."""
    lines = content.split("\n")
    index = 0
    if lines and lines[0].startswith("#!"):
        index = 1
    while index < len(lines) and lines[index].strip() == "":
        index += 1
    lines.insert(index, line)
    return "\n".join(lines)


def ensure_side_effect_import(base_path: str | Path) -> ImportPatch:
    """Add ``import 'reflect-metadata';`` to the first entry file found.

    Returns:
        ``ADDED`` with the patched path, ``ALREADY_PRESENT`` when any of
        the recognised import spellings is in the first existing
        candidate, ``NOT_FOUND`` when no candidate exists, or ``FAILED``
        when a candidate could not be checked, read or written.
    """
    for path in candidate_paths(base_path):
        try:
            if not path.is_file():
                continue
            content = path.read_text(encoding="utf-8")
            if has_side_effect_import(content):
                return ImportPatch(status=ImportPatchStatus.ALREADY_PRESENT, path=path)
            path.write_text(insert_import(content), encoding="utf-8")
        except (OSError, UnicodeError) as exc:
            return ImportPatch(
                status=ImportPatchStatus.FAILED,
                path=path,
                message=f"Could not add reflect-metadata import to {path}: {exc}",
            )
        return ImportPatch(status=ImportPatchStatus.ADDED, path=path)

    return ImportPatch(
        status=ImportPatchStatus.NOT_FOUND,
        message=(
            "Could not find entry point file to add reflect-metadata import. "
            'Please manually add: import "reflect-metadata"; '
            "at the top of your app entry file."
        ),
    )
