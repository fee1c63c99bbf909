"""Jinja2 template rendering for resource components.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``node_scaffold/scaffolder/templates/`` directory and renders one component
file for a ``GenerationRequest``.  Which template serves which component is
fixed by ``TEMPLATE_MAP``; a component/ORM pair missing from the map is an
``UnsupportedPersistenceKind`` error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .models import ComponentKind, GenerationRequest, PersistenceKind, UnsupportedPersistenceKind


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_BOTH = (PersistenceKind.RELATIONAL, PersistenceKind.DOCUMENT)

# component -> ORM -> template file
TEMPLATE_MAP: dict[ComponentKind, dict[PersistenceKind, str]] = {
    ComponentKind.MODEL: {
        PersistenceKind.RELATIONAL: "model.knex.ts.j2",
        PersistenceKind.DOCUMENT: "model.mongoose.ts.j2",
    },
    ComponentKind.REPOSITORY: {
        PersistenceKind.RELATIONAL: "repository.knex.ts.j2",
        PersistenceKind.DOCUMENT: "repository.mongoose.ts.j2",
    },
    ComponentKind.SERVICE: {kind: "service.ts.j2" for kind in _BOTH},
    ComponentKind.CONTROLLER: {kind: "controller.ts.j2" for kind in _BOTH},
    ComponentKind.ROUTER: {kind: "router.ts.j2" for kind in _BOTH},
}


# ---------------------------------------------------------------------------
# Field type mapping
# ---------------------------------------------------------------------------

_JSON_SCHEMA_TYPES: dict[str, str] = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "date": "string",
    "object": "object",
    "array": "array",
}

_MONGOOSE_TYPES: dict[str, str] = {
    "string": "String",
    "number": "Number",
    "boolean": "Boolean",
    "date": "Date",
    "object": "Object",
    "array": "Array",
}


_TS_TYPES: dict[str, str] = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "date": "Date",
    "object": "Record<string, unknown>",
    "array": "unknown[]",
}


def ts_type(type_tag: str) -> str:
    """TypeScript property type for a field tag; unknown tags are ``unknown``."""
    return _TS_TYPES.get(type_tag.lower(), "unknown")


def json_schema_type(type_tag: str) -> str:
    """Objection ``jsonSchema`` type for a field tag; unknown tags are strings."""
    return _JSON_SCHEMA_TYPES.get(type_tag.lower(), "string")


def mongoose_type(type_tag: str) -> str:
    """Mongoose schema type for a field tag; unknown tags are ``Mixed``."""
    return _MONGOOSE_TYPES.get(type_tag.lower(), "mongoose.Schema.Types.Mixed")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders component templates for a resource.

    The renderer is pure: it turns a request into text and never touches
    the output tree.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        template_map: Mapping[ComponentKind, Mapping[PersistenceKind, str]] | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.template_map = template_map if template_map is not None else TEMPLATE_MAP
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        # Register custom filters
        self.env.filters["ts_type"] = ts_type
        self.env.filters["json_schema_type"] = json_schema_type
        self.env.filters["mongoose_type"] = mongoose_type

    # -- Component rendering -----------------------------------------------

    def template_for(self, kind: ComponentKind, persistence: PersistenceKind) -> str:
        """Return the template file serving *kind* under *persistence*.

        Raises:
            UnsupportedPersistenceKind: If no template is registered.
        """
        try:
            return self.template_map[kind][persistence]
        except KeyError:
            raise UnsupportedPersistenceKind(persistence.value, kind.value) from None

    def render_component(self, kind: str | ComponentKind, request: GenerationRequest) -> str:
        """Render the file content for one component of *request*.

        Raises:
            UnknownComponentKind: If *kind* is not a component kind.
            UnsupportedPersistenceKind: If the request's ORM has no
                template for *kind*.
        """
        component = ComponentKind.parse(kind)
        template_name = self.template_for(component, request.persistence_kind)
        return self.render(template_name, self.build_context(request))

    @staticmethod
    def build_context(request: GenerationRequest) -> dict[str, Any]:
        """Build the Jinja2 template context from a request."""
        return {
            "resource_name": request.resource_name,
            "class_name": request.resource_name_pascal,
            "camel_name": request.resource_name_camel,
            "table_name": request.resource_name_pascal.lower() + "s",
            "orm": request.persistence_kind.value,
            "id_type": request.persistence_kind.id_type,
            "numeric_id": request.persistence_kind is PersistenceKind.RELATIONAL,
            "use_di": request.use_dependency_injection,
            "fields": [field.model_dump() for field in request.fields],
        }

    # -- Raw rendering -----------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"service.ts.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

