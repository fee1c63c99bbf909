"""node-scaffold configuration.

Typed defaults for the CLI options.  Values come from, in increasing order
of precedence: built-in defaults, a JSON config file, ``SCAFFOLD_*``
environment variables, and explicit command-line flags.  All settings use a
Pydantic v2 model so they are validated at construction time and serialised
to/from JSON without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from node_scaffold.scaffolder.models import PersistenceKind

DEFAULT_CONFIG_FILE = ".scaffoldrc.json"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ScaffoldConfig(BaseModel):
    """Defaults applied to every ``scaffold`` invocation."""

    base_path: Path = Field(default=Path("./src"), description="Root of generated component dirs")
    orm: PersistenceKind = Field(default=PersistenceKind.RELATIONAL)
    use_di: bool = Field(default=True, description="Emit tsyringe decorators")
    force: bool = Field(default=False, description="Overwrite existing files without asking")
    skip_existing: bool = Field(
        default=False, description="Keep existing files without asking"
    )

    @field_validator("orm", mode="before")
    @classmethod
    def _parse_orm(cls, value: Any) -> PersistenceKind:
        return PersistenceKind.parse(value)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``./.scaffoldrc.json``.

        Returns:
            The path where the file was written.
        """
        target = Path(path or DEFAULT_CONFIG_FILE)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, base: "ScaffoldConfig | None" = None) -> "ScaffoldConfig":
        """Overlay ``SCAFFOLD_*`` environment variables on *base*.

        Recognised variables (all optional):
            SCAFFOLD_PATH, SCAFFOLD_ORM, SCAFFOLD_DI, SCAFFOLD_FORCE.
        """
        overrides: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_PATH"):
            overrides["base_path"] = Path(os.environ["SCAFFOLD_PATH"])
        if os.environ.get("SCAFFOLD_ORM"):
            overrides["orm"] = os.environ["SCAFFOLD_ORM"]
        if os.environ.get("SCAFFOLD_DI"):
            overrides["use_di"] = os.environ["SCAFFOLD_DI"].strip().lower() in _TRUE_VALUES
        if os.environ.get("SCAFFOLD_FORCE"):
            overrides["force"] = os.environ["SCAFFOLD_FORCE"].strip().lower() in _TRUE_VALUES

        return (base or cls()).merged_with(**overrides)

    @classmethod
    def discover(cls, path: Path | None = None) -> "ScaffoldConfig":
        """Load *path* (or ``./.scaffoldrc.json`` if present), then the env.

        An explicitly given *path* must exist; the default file is optional.
        """
        if path is not None:
            base = cls.load(path)
        elif Path(DEFAULT_CONFIG_FILE).is_file():
            base = cls.load(Path(DEFAULT_CONFIG_FILE))
        else:
            base = cls()
        return cls.from_env(base)

    def merged_with(self, **overrides: Any) -> "ScaffoldConfig":
        """Return a copy with every non-``None`` override applied and validated."""
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return type(self).model_validate(data)
