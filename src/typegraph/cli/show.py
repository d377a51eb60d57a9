"""typegraph show command - summarize the root entries of a type graph."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from typegraph.cli.utils import load_cli_config, load_program
from typegraph.core.errors import TypeGraphError
from typegraph.extract import extract_module
from typegraph.model import (
    AliasModel,
    ClassModel,
    ConstModel,
    DefaultModel,
    EnumLiteralModel,
    EnumModel,
    FunctionModel,
    ImportModel,
    InterfaceModel,
    RefModel,
)


def summarize(node: object) -> str:
    """One-line description of a root entry."""
    if isinstance(node, (InterfaceModel, ClassModel)):
        if node.mapped is not None:
            return f"mapped over {node.mapped.name}"
        parts = [f"{len(node.props)} members"]
        if node.extends:
            parts.append("extends " + ", ".join(_ref_name(e) for e in node.extends))
        return "; ".join(parts)
    if isinstance(node, (EnumModel, EnumLiteralModel)):
        return ", ".join(v.name for v in node.values)
    if isinstance(node, FunctionModel):
        return f"({', '.join(p.param for p in node.parameters)})"
    if isinstance(node, AliasModel):
        return f"= {getattr(node.child, 'kind', '?')}"
    if isinstance(node, (ConstModel, DefaultModel)):
        return _ref_name(node.value)
    if isinstance(node, ImportModel):
        return f"{node.scope} {node.module or ''}".strip()
    return ""


def _ref_name(node: object) -> str:
    if isinstance(node, RefModel):
        return node.ref_name
    return getattr(node, "kind", "?")


@click.command()
@click.argument("target")
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project root holding .typegraph/config.yaml (default: current directory)",
)
@click.pass_context
def show_command(ctx: click.Context, target: str, project: Path | None) -> None:
    """Show the root entries of a program's type graph.

    TARGET is 'package.module:callable'; the callable returns the
    OracleProgram to extract.
    """
    config = load_cli_config(project, verbose=ctx.obj.get("verbose", False))
    program = load_program(target, project)

    try:
        result = extract_module(program, config=config)
    except TypeGraphError as e:
        raise click.ClickException(str(e)) from e

    table = Table(title=f"{program.module.name} ({len(result.graph)} entries)")
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Summary")
    for name, node in result.graph.items():
        table.add_row(name, getattr(node, "kind", "?"), summarize(node))

    Console().print(table)
