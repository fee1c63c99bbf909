"""Shared utility functions for node-scaffold.

Provides name-case conversion, field-list parsing, Rich-based console
output, and the interactive prompts the CLI hands to the generator.  The
scaffolder core never prints; everything user-facing goes through here.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

if TYPE_CHECKING:
    from node_scaffold.scaffolder.models import FieldSpec, GenerationResult

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def to_camel_case(text: str) -> str:
    """Convert ``blog-post``, ``blog_post`` or ``BlogPost`` to ``blogPost``.

    Examples::

        to_camel_case("user")        -> "user"
        to_camel_case("blog_post")   -> "blogPost"
        to_camel_case("Order Item")  -> "orderItem"
    """
    result = re.sub(r"[-_\s]+(.)?", lambda m: (m.group(1) or "").upper(), text.strip())
    return result[:1].lower() + result[1:]


def to_pascal_case(text: str) -> str:
    """Convert ``blog-post`` or ``blog_post`` to ``BlogPost``."""
    camel = to_camel_case(text)
    return camel[:1].upper() + camel[1:]


def parse_fields(fields: str | None) -> list[FieldSpec]:
    """Parse a ``name:type,name:type`` string into ``FieldSpec`` objects.

    A missing type defaults to ``string``; blank entries are dropped.

    Examples::

        parse_fields("name:string,age:number") -> [name:string, age:number]
        parse_fields("title")                  -> [title:string]
        parse_fields("")                       -> []
    """
    from node_scaffold.scaffolder.models import FieldSpec

    if not fields or not fields.strip():
        return []

    parsed: list[FieldSpec] = []
    for entry in fields.split(","):
        name, _, type_tag = entry.strip().partition(":")
        if not name.strip():
            continue
        parsed.append(FieldSpec(name=name.strip(), type=type_tag.strip() or "string"))
    return parsed


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_text_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Interactive prompts
# ---------------------------------------------------------------------------


def confirm_overwrite(path: Path) -> bool:
    """Ask whether an existing file may be overwritten.

    Defaults to "no".  An interrupt or closed stdin counts as "no".
    """
    try:
        return Confirm.ask(
            f"[yellow]File [cyan]{path}[/cyan] already exists. Overwrite it?[/yellow]",
            default=False,
            console=console,
        )
    except (KeyboardInterrupt, EOFError):
        console.print()
        return False


def prompt_fields() -> str:
    """Ask for the model field list as a raw string."""
    return Prompt.ask(
        "Enter model fields (comma-separated, e.g., name:string,email:string,age:number)",
        default="",
        show_default=False,
        console=console,
    )


def prompt_components(choices: Iterable[str]) -> list[str]:
    """Ask which components to generate; all of them by default."""
    options = list(choices)
    answer = Prompt.ask(
        f"Select components to generate ({', '.join(options)})",
        default=",".join(options),
        console=console,
    )
    return [part.strip().lower() for part in answer.split(",") if part.strip()]


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a dimmed informational line."""
    console.print(f"[dim]{message}[/dim]")


_EVENT_STYLES: dict[str, tuple[str, str]] = {
    "created": ("green", "Created"),
    "overwritten": ("yellow", "Overwritten"),
    "skipped": ("bright_black", "Skipped"),
    "ignored": ("bright_black", "Ignored"),
    "barrel_created": ("cyan", "Barrel created"),
    "barrel_updated": ("cyan", "Barrel updated"),
    "import_added": ("cyan", "Added reflect-metadata import to"),
    "import_present": ("bright_black", "reflect-metadata already imported in"),
}


def print_result(result: GenerationResult) -> None:
    """Render the events of a ``GenerationResult`` in order."""
    for event in result.events:
        kind = event.kind.value
        if kind == "warning":
            print_warning(f"  Warning: {event.message}")
            continue
        color, label = _EVENT_STYLES.get(kind, ("white", kind))
        target = event.path if event.path is not None else event.message
        console.print(f"  [{color}]{label}: {target}[/{color}]")
