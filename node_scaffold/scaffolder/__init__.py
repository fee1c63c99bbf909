"""Resource scaffolder -- generates TypeScript component files.

Given a resource name this package renders the model, repository, service,
controller and router files for a Node.js/Express project using either the
Knex/Objection or the Mongoose conventions, optionally decorated for
tsyringe dependency injection.

Quick usage::

    from node_scaffold.scaffolder import GenerationRequest, ResourceGenerator

    request = GenerationRequest.for_resource(
        "user",
        persistence_kind="knex",
        use_dependency_injection=False,
        requested_components=["model", "repository"],
    )
    result = await ResourceGenerator().generate(request)
"""

from node_scaffold.scaffolder.barrel import BarrelUpdate, add_export
from node_scaffold.scaffolder.entrypoint import (
    ImportPatch,
    ImportPatchStatus,
    ensure_side_effect_import,
)
from node_scaffold.scaffolder.generator import ResourceGenerator, accept_all, decline_all
from node_scaffold.scaffolder.models import (
    ComponentKind,
    ComponentPath,
    EventKind,
    FieldSpec,
    GenerationEvent,
    GenerationRequest,
    GenerationResult,
    PersistenceKind,
    ScaffoldError,
    UnknownComponentKind,
    UnsupportedPersistenceKind,
)
from node_scaffold.scaffolder.naming import pluralize_kind, resolve_path
from node_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "BarrelUpdate",
    "ComponentKind",
    "ComponentPath",
    "EventKind",
    "FieldSpec",
    "GenerationEvent",
    "GenerationRequest",
    "GenerationResult",
    "ImportPatch",
    "ImportPatchStatus",
    "PersistenceKind",
    "ResourceGenerator",
    "ScaffoldError",
    "TemplateRenderer",
    "UnknownComponentKind",
    "UnsupportedPersistenceKind",
    "accept_all",
    "add_export",
    "decline_all",
    "ensure_side_effect_import",
    "pluralize_kind",
    "resolve_path",
]
