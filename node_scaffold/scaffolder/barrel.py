"""Per-directory ``index.ts`` re-export manifests.

Each component directory gets an ``index.ts`` with one
``export * from './<resource>.<kind>';`` line per generated module, in the
order they were first generated.  Updates are a plain read-modify-write
with no locking, so two concurrent runs against one directory can lose an
entry.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

from .models import ComponentKind
from .naming import BARREL_FILE_NAME


class BarrelUpdate(str, Enum):
    """What ``add_export`` did to the manifest."""
    CREATED = "created"
    APPENDED = "appended"
    UNCHANGED = "unchanged"


def export_line(resource_name: str, kind: str | ComponentKind) -> str:
    """The re-export statement for one module."""
    component = ComponentKind.parse(kind)
    return f"export * from './{resource_name}.{component.value}';"


def _export_pattern(resource_name: str, component: ComponentKind) -> re.Pattern[str]:
    module = re.escape(f"./{resource_name}.{component.value}")
    return re.compile(
        rf"^\s*export\s+\*\s+from\s+(['\"]){module}\1",
        re.MULTILINE,
    )


def has_export(content: str, resource_name: str, kind: str | ComponentKind) -> bool:
    """Return ``True`` if *content* already re-exports the module."""
    component = ComponentKind.parse(kind)
    return _export_pattern(resource_name, component).search(content) is not None


def add_export(
    directory: str | Path, resource_name: str, kind: str | ComponentKind
) -> BarrelUpdate:
    """Make sure ``directory/index.ts`` re-exports ``<resource>.<kind>``.

    Creates the manifest when missing.  Otherwise appends the line after
    stripping trailing blank lines, unless an equivalent line is already
    there.

    Raises:
        OSError: If the manifest cannot be read or written.
    """
    barrel = Path(directory) / BARREL_FILE_NAME
    line = export_line(resource_name, kind)

    if not barrel.exists():
        barrel.parent.mkdir(parents=True, exist_ok=True)
        barrel.write_text(line + "\n", encoding="utf-8")
        return BarrelUpdate.CREATED

    content = barrel.read_text(encoding="utf-8")
    if has_export(content, resource_name, kind):
        return BarrelUpdate.UNCHANGED

    body = content.rstrip()
    new_content = f"{body}\n{line}\n" if body else f"{line}\n"
    barrel.write_text(new_content, encoding="utf-8")
    return BarrelUpdate.APPENDED
