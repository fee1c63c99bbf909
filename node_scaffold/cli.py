"""Command-line interface for node-scaffold.

Usage::

    scaffold generate user --orm knex --path ./src
    scaffold g product -o mongoose --no-di --components model,repository
    scaffold add controller user
    python -m node_scaffold add model order --fields "total:number,paid:boolean"
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from node_scaffold import __version__
from node_scaffold.config import ScaffoldConfig
from node_scaffold.scaffolder import (
    ComponentKind,
    GenerationRequest,
    GenerationResult,
    PersistenceKind,
    ResourceGenerator,
    ScaffoldError,
    accept_all,
    decline_all,
)
from node_scaffold.scaffolder.generator import ConfirmOverwrite
from node_scaffold.utils import (
    confirm_overwrite,
    console,
    parse_fields,
    print_error,
    print_info,
    print_result,
    print_success,
    print_summary_table,
    print_warning,
    prompt_components,
    prompt_fields,
)

ALL_COMPONENTS: list[str] = [kind.value for kind in ComponentKind]

_NEXT_STEPS: dict[ComponentKind, list[str]] = {
    ComponentKind.MODEL: ["Review the generated model"],
    ComponentKind.REPOSITORY: [
        "Ensure the model exists",
        "Implement custom query methods if needed",
        "Register in DI container if using DI",
    ],
    ComponentKind.SERVICE: [
        "Ensure repository and model exist",
        "Implement business logic",
        "Add validation rules",
        "Register in DI container if using DI",
    ],
    ComponentKind.CONTROLLER: [
        "Ensure service exists",
        "Register routes in your Express app",
        "Add authentication/authorization middleware if needed",
        "Register in DI container if using DI",
    ],
    ComponentKind.ROUTER: [
        "Ensure controller exists",
        "Mount the router in your Express app, e.g. app.use('/resources', router)",
        "Register in DI container if using DI",
    ],
}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--orm", "-o",
        default=None,
        help="ORM/ODM type: knex (Objection ORM) or mongoose (Mongoose ODM) (default: knex)",
    )
    parser.add_argument(
        "--path", "-p",
        default=None,
        help="Base path for generated files (default: ./src)",
    )
    parser.add_argument(
        "--di",
        dest="di",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate with (or, with --no-di, without) dependency injection",
    )
    parser.add_argument(
        "--fields",
        default=None,
        help='Model fields, e.g. "name:string,age:number" (prompted for if omitted)',
    )
    overwrite = parser.add_mutually_exclusive_group()
    overwrite.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite existing files without asking",
    )
    overwrite.add_argument(
        "--skip-existing",
        action="store_true",
        help="Keep existing files without asking",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (default: ./.scaffoldrc.json if present)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the ``scaffold`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="scaffold",
        description="CLI tool to generate OOP structure with DI for Node.js projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  scaffold generate user\n"
            "  scaffold g product --orm mongoose --no-di\n"
            "  scaffold add controller user --path ./app\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate",
        aliases=["g"],
        help="Generate a new resource (model, repository, service, controller, router)",
    )
    generate.add_argument("resource", help="Resource name, e.g. user")
    generate.add_argument(
        "--components", "-c",
        default=None,
        help=f"Comma-separated components (default: prompt; choices: {','.join(ALL_COMPONENTS)})",
    )
    _add_common_options(generate)

    add = subparsers.add_parser(
        "add",
        aliases=["a"],
        help="Add a single component (model, repository, service, controller, or router)",
    )
    add.add_argument("component", help="Component type")
    add.add_argument("resource", help="Resource name, e.g. user")
    _add_common_options(add)

    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _resolve_config(args: argparse.Namespace) -> ScaffoldConfig:
    config = ScaffoldConfig.discover(args.config)
    return config.merged_with(
        base_path=args.path,
        orm=args.orm,
        use_di=args.di,
        force=args.force or None,
        skip_existing=args.skip_existing or None,
    )


def _confirm_policy(config: ScaffoldConfig) -> ConfirmOverwrite:
    if config.force:
        return accept_all
    if config.skip_existing:
        return decline_all
    return confirm_overwrite


def _build_request(
    args: argparse.Namespace, config: ScaffoldConfig, components: list[str]
) -> GenerationRequest:
    fields = ""
    if ComponentKind.MODEL.value in components:
        fields = args.fields if args.fields is not None else prompt_fields()

    return GenerationRequest.for_resource(
        args.resource,
        persistence_kind=config.orm,
        use_dependency_injection=config.use_di,
        base_path=config.base_path,
        requested_components=components,
        fields=parse_fields(fields),
    )


def _run(request: GenerationRequest, config: ScaffoldConfig) -> GenerationResult:
    generator = ResourceGenerator(confirm=_confirm_policy(config))
    return asyncio.run(generator.generate(request))


def _print_next_steps(components: list[ComponentKind], orm: PersistenceKind) -> None:
    console.print("\n[yellow]Next steps:[/yellow]")
    steps: list[str] = []
    if len(components) == 1:
        steps.extend(_NEXT_STEPS[components[0]])
        if components[0] is ComponentKind.MODEL and orm is PersistenceKind.RELATIONAL:
            steps.extend([
                "Create a migration for this model",
                "Run migrations: npx knex migrate:latest",
            ])
    else:
        steps = [
            "Review the generated files",
            "Implement business logic in the service",
            "Register dependencies in your DI container",
        ]
    for index, step in enumerate(steps, start=1):
        print_info(f"  {index}. {step}")


def _report(result: GenerationResult, request: GenerationRequest) -> None:
    print_result(result)
    console.print()
    print_summary_table(
        {
            "Created": str(len(result.created)),
            "Overwritten": str(len(result.overwritten)),
            "Skipped": str(len(result.skipped)),
        },
        title=f"Resource: {request.resource_name}",
    )


def cmd_generate(args: argparse.Namespace) -> GenerationResult:
    """Handle ``scaffold generate <resource>``."""
    config = _resolve_config(args)
    console.print(f"\n[blue]Generating resource: {args.resource}[/blue]\n")

    if args.components is not None:
        components = [c.strip().lower() for c in args.components.split(",") if c.strip()]
    else:
        components = prompt_components(ALL_COMPONENTS)

    # Reject typos before anything is written; the generator itself skips them.
    kinds = [ComponentKind.parse(c) for c in components]

    request = _build_request(args, config, [k.value for k in kinds])
    result = _run(request, config)

    _report(result, request)
    print_success("Resource generated successfully!")
    _print_next_steps(kinds, config.orm)
    return result


def cmd_add(args: argparse.Namespace) -> GenerationResult:
    """Handle ``scaffold add <component> <resource>``."""
    kind = ComponentKind.parse(args.component)
    config = _resolve_config(args)
    console.print(f"\n[blue]Adding {kind.value} for: {args.resource}[/blue]\n")

    request = _build_request(args, config, [kind.value])
    result = _run(request, config)

    _report(result, request)
    if result.skipped:
        print_warning("Component left unchanged.")
    else:
        print_success("Component added successfully!")
    _print_next_steps([kind], config.orm)
    return result


_HANDLERS = {
    "generate": cmd_generate,
    "g": cmd_generate,
    "add": cmd_add,
    "a": cmd_add,
}


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``scaffold`` / ``python -m node_scaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    try:
        _HANDLERS[args.command](args)
    except (ScaffoldError, OSError, ValidationError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        print_error("Aborted.")
        sys.exit(1)


if __name__ == "__main__":
    main()
