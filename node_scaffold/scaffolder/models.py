"""Pydantic v2 models for the resource scaffolder.

Defines the request handed to ``ResourceGenerator.generate``, the structured
result it returns, and the closed enumerations (component kinds and
persistence kinds) every other scaffolder module keys on.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from node_scaffold.utils import to_camel_case, to_pascal_case


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for every error raised by the scaffolder."""


class UnknownComponentKind(ScaffoldError):
    """Raised when a component kind is outside the supported set."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        valid = ", ".join(k.value for k in ComponentKind)
        super().__init__(f"Invalid component type: {kind}\nValid types are: {valid}")


class UnsupportedPersistenceKind(ScaffoldError):
    """Raised when no template exists for the requested ORM/ODM."""

    def __init__(self, kind: str, component: str | None = None) -> None:
        self.kind = kind
        self.component = component
        suffix = f" (component: {component})" if component else ""
        super().__init__(f"Unsupported ORM/ODM: {kind}{suffix}")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ComponentKind(str, Enum):
    """A category of generated file."""
    MODEL = "model"
    REPOSITORY = "repository"
    SERVICE = "service"
    CONTROLLER = "controller"
    ROUTER = "router"

    @classmethod
    def parse(cls, value: str | ComponentKind) -> ComponentKind:
        """Return the kind named by *value* (case-insensitive).

        Raises:
            UnknownComponentKind: If *value* is not one of the five kinds.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownComponentKind(str(value)) from None


class PersistenceKind(str, Enum):
    """Data-access convention the generated model/repository assume.

    The value is the flag accepted on the command line; the member name is
    the convention it stands for.
    """
    RELATIONAL = "knex"
    DOCUMENT = "mongoose"

    @property
    def id_type(self) -> str:
        """TypeScript type of the primary key."""
        return "number" if self is PersistenceKind.RELATIONAL else "string"

    @classmethod
    def parse(cls, value: str | PersistenceKind) -> PersistenceKind:
        """Accept ``knex``/``mongoose`` or ``relational``/``document``.

        Raises:
            UnsupportedPersistenceKind: For any other value.
        """
        if isinstance(value, cls):
            return value
        normalised = str(value).strip().lower()
        for member in cls:
            if normalised in (member.value, member.name.lower()):
                return member
        raise UnsupportedPersistenceKind(str(value))


class EventKind(str, Enum):
    """Observations recorded while generating."""
    CREATED = "created"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"
    IGNORED = "ignored"
    BARREL_CREATED = "barrel_created"
    BARREL_UPDATED = "barrel_updated"
    IMPORT_ADDED = "import_added"
    IMPORT_PRESENT = "import_present"
    WARNING = "warning"


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class FieldSpec(BaseModel):
    """A single model field, e.g. ``email:string``."""
    name: str = Field(..., min_length=1, description="Property name")
    type: str = Field(default="string", description="Type tag, e.g. 'string', 'number'")


class GenerationRequest(BaseModel):
    """Everything one ``generate`` call needs.

    Immutable for the duration of the call. ``requested_components`` holds
    raw strings so unrecognised kinds can reach the generator, which skips
    them.
    """

    model_config = ConfigDict(frozen=True)

    resource_name: str = Field(..., min_length=1, description="Lowercase singular resource name")
    resource_name_pascal: str = Field(default="")
    resource_name_camel: str = Field(default="")
    persistence_kind: PersistenceKind = Field(default=PersistenceKind.RELATIONAL)
    use_dependency_injection: bool = Field(default=True)
    base_path: Path = Field(default=Path("./src"))
    requested_components: list[str] = Field(default_factory=list)
    fields: list[FieldSpec] = Field(default_factory=list)

    @field_validator("persistence_kind", mode="before")
    @classmethod
    def _parse_persistence(cls, value: object) -> PersistenceKind:
        return PersistenceKind.parse(value)  # type: ignore[arg-type]

    @field_validator("requested_components", mode="before")
    @classmethod
    def _dedupe_components(cls, value: object) -> list[str]:
        seen: list[str] = []
        for item in value or []:  # type: ignore[union-attr]
            text = item.value if isinstance(item, ComponentKind) else str(item).strip().lower()
            if text not in seen:
                seen.append(text)
        return seen

    @model_validator(mode="after")
    def _derive_name_forms(self) -> GenerationRequest:
        # frozen model: bypass __setattr__ for the derived fields
        if not self.resource_name_pascal:
            object.__setattr__(self, "resource_name_pascal", to_pascal_case(self.resource_name))
        if not self.resource_name_camel:
            object.__setattr__(self, "resource_name_camel", to_camel_case(self.resource_name))
        return self

    @classmethod
    def for_resource(cls, name: str, **kwargs: object) -> GenerationRequest:
        """Build a request from a raw resource name as typed by the user.

        The file-name form is lower-cased; the Pascal and camel forms are
        derived from the original spelling so ``blogPost`` becomes
        ``BlogPost``/``blogPost``.
        """
        return cls(
            resource_name=name.lower(),
            resource_name_pascal=to_pascal_case(name),
            resource_name_camel=to_camel_case(name),
            **kwargs,  # type: ignore[arg-type]
        )


# ---------------------------------------------------------------------------
# Paths & results
# ---------------------------------------------------------------------------


class ComponentPath(BaseModel):
    """Where a component file lives."""

    model_config = ConfigDict(frozen=True)

    directory: Path
    file_name: str

    @property
    def path(self) -> Path:
        return self.directory / self.file_name


class GenerationEvent(BaseModel):
    """One thing that happened during ``generate``."""
    kind: EventKind
    path: Optional[Path] = None
    message: str = ""


class GenerationResult(BaseModel):
    """Outcome of one ``generate`` call.

    ``created``, ``skipped`` and ``overwritten`` partition the components
    that were processed; unknown kinds appear only in ``events``.
    """

    created: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)
    overwritten: list[Path] = Field(default_factory=list)
    events: list[GenerationEvent] = Field(default_factory=list)

    @property
    def warnings(self) -> list[str]:
        return [e.message for e in self.events if e.kind is EventKind.WARNING]

    def record(
        self, kind: EventKind, path: Path | None = None, message: str = ""
    ) -> GenerationEvent:
        """Append an event and return it."""
        event = GenerationEvent(kind=kind, path=path, message=message)
        self.events.append(event)
        return event
