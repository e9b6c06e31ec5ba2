"""Command-line entry point.

``shadpanel resource <name>`` scaffolds one resource; ``shadpanel models``
lists what the schema declares.  Exit statuses follow ``ExitCode``.
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Optional, Sequence

from shadpanel import __version__
from shadpanel.config import ResourceOptions, ScaffoldConfig
from shadpanel.errors import (
    ArtifactConflictError,
    ExitCode,
    ModelNotFoundError,
    ScaffoldError,
)
from shadpanel.parser.classifier import find_identifier
from shadpanel.parser.models import SchemaTable
from shadpanel.parser.schema import load_schema
from shadpanel.scaffolder.generator import ResourceGenerator
from shadpanel.utils import (
    console,
    print_error,
    print_path,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shadpanel",
        description="Scaffold CRUD admin pages from a Prisma schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  shadpanel resource invoice\n"
            "  shadpanel r posts --dry-run\n"
            "  shadpanel resource customer --path ../my-admin --force --skip-menu\n"
            "  shadpanel models\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resource = subparsers.add_parser(
        "resource",
        aliases=["r"],
        help="Generate actions, list, create and edit pages for one model",
    )
    resource.add_argument("name", help="Resource or model name, e.g. 'invoice' or 'Invoices'")
    resource.add_argument("--force", action="store_true", help="Overwrite existing files")
    resource.add_argument("--skip-menu", action="store_true", help="Do not touch the navigation menu")
    resource.add_argument("--dry-run", action="store_true", help="Print the plan without writing")
    resource.add_argument(
        "--path",
        default=None,
        help="Project root (default: current directory or $SHADPANEL_PROJECT_PATH)",
    )
    resource.set_defaults(handler=_run_resource)

    models = subparsers.add_parser("models", help="List the models declared in the schema")
    models.add_argument("--path", default=None, help="Project root")
    models.set_defaults(handler=_run_models)

    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


async def _run_resource(args: argparse.Namespace, config: ScaffoldConfig) -> ExitCode:
    options = ResourceOptions(force=args.force, dry_run=args.dry_run, skip_menu=args.skip_menu)
    result = await ResourceGenerator(config, options).generate(args.name)

    if options.dry_run:
        for line in result.manifest.lines():
            print_path(line)
        print_success(f"Dry run: {len(result.manifest.paths)} file(s) would be written")
    else:
        for path in result.manifest.paths:
            print_path(path)
        print_success(f"Resource '{result.identity.kebab_path}' scaffolded from model {result.model_name}")
    return ExitCode.OK


async def _run_models(args: argparse.Namespace, config: ScaffoldConfig) -> ExitCode:
    schema = await load_schema(config.schema_file)
    if not schema.models:
        print_warning(f"No models declared in {config.schema_file}")
        return ExitCode.OK
    print_summary_table(
        _model_rows(schema),
        columns=("Model", "Identifier", "Fields"),
        title=f"Models in {config.schema_file}",
    )
    return ExitCode.OK


def _model_rows(schema: SchemaTable) -> list[tuple[str, ...]]:
    rows = []
    for model in schema.models.values():
        try:
            identifier = find_identifier(model).name
        except ScaffoldError:
            identifier = "-"
        fields = ", ".join(
            f"{f.name}:{f.declared_type}{'' if f.required else '?'} ({f.kind.value})"
            for f in model.fields
        )
        rows.append((model.name, identifier, fields))
    return rows


def _report(exc: ScaffoldError) -> None:
    print_error(f"Error: {exc}")
    if isinstance(exc, ModelNotFoundError):
        if exc.available:
            console.print("Available models:")
            for name in exc.available:
                console.print(f"  - {name}", markup=False)
        else:
            console.print("The schema declares no models.")
    elif isinstance(exc, ArtifactConflictError) and exc.written:
        print_warning(f"{len(exc.written)} file(s) were written before the conflict:")
        for path in exc.written:
            print_path(path)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = ScaffoldConfig.from_env(project_root=Path(args.path) if args.path else None)
    try:
        code = asyncio.run(args.handler(args, config))
    except ScaffoldError as exc:
        _report(exc)
        return int(exc.exit_code)
    return int(code)


if __name__ == "__main__":
    raise SystemExit(main())
