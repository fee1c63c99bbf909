"""Where generated files go.

Maps a resource name and component kind to a directory segment and a file
name.  The pluralisation is a fixed table, not English grammar.
"""

from __future__ import annotations

from pathlib import Path

from .models import ComponentKind, ComponentPath

SOURCE_EXTENSION = ".ts"
BARREL_FILE_NAME = f"index{SOURCE_EXTENSION}"

_IRREGULAR_PLURALS: dict[ComponentKind, str] = {
    ComponentKind.REPOSITORY: "repositories",
    ComponentKind.ROUTER: "routers",
}


def pluralize_kind(kind: str | ComponentKind) -> str:
    """Return the directory name for a component kind.

    ``repository`` -> ``repositories``, ``router`` -> ``routers``, anything
    else gets an ``s``.

    Raises:
        UnknownComponentKind: If *kind* is not a supported component.
    """
    component = ComponentKind.parse(kind)
    return _IRREGULAR_PLURALS.get(component, f"{component.value}s")


def component_file_name(resource_name: str, kind: str | ComponentKind) -> str:
    """``user`` + ``model`` -> ``user.model.ts``."""
    component = ComponentKind.parse(kind)
    return f"{resource_name}.{component.value}{SOURCE_EXTENSION}"


def resolve_path(
    base_path: str | Path, resource_name: str, kind: str | ComponentKind
) -> ComponentPath:
    """Resolve the target location of a component file.

    Args:
        base_path: Root under which component directories live (``./src``).
        resource_name: Lowercase singular resource name, used verbatim.
        kind: One of the five component kinds.

    Returns:
        A ``ComponentPath`` whose ``directory`` is
        ``base_path/<plural-kind>`` and whose ``file_name`` is
        ``<resource>.<kind>.ts``.

    Raises:
        UnknownComponentKind: If *kind* is outside the supported set.
    """
    return ComponentPath(
        directory=Path(base_path) / pluralize_kind(kind),
        file_name=component_file_name(resource_name, kind),
    )
