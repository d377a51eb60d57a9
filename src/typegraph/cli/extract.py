"""typegraph extract command - write the type graph of a program as JSON."""

from pathlib import Path

import click

from typegraph.cli.utils import load_cli_config, load_program
from typegraph.core.errors import TypeGraphError
from typegraph.core.progress import status
from typegraph.extract import extract_module


@click.command()
@click.argument("target")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write JSON here instead of stdout",
)
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project root holding .typegraph/config.yaml (default: current directory)",
)
@click.option("--strict", is_flag=True, help="Fail when references are left dangling")
@click.option("--isolate", is_flag=True, help="Keep going when one export fails")
@click.pass_context
def extract_command(
    ctx: click.Context,
    target: str,
    output: Path | None,
    project: Path | None,
    strict: bool,
    isolate: bool,
) -> None:
    """Extract the type graph of a program.

    TARGET is 'package.module:callable'; the callable returns the
    OracleProgram to extract.
    """
    extraction: dict[str, bool] = {}
    if strict:
        extraction["strict_refs"] = True
    if isolate:
        extraction["isolate_roots"] = True
    overrides = {"extraction": extraction} if extraction else {}

    config = load_cli_config(project, verbose=ctx.obj.get("verbose", False), **overrides)
    program = load_program(target, project)

    try:
        result = extract_module(program, config=config)
    except TypeGraphError as e:
        raise click.ClickException(str(e)) from e

    text = result.graph.to_json(
        indent=config.output.indent,
        include_prop_ids=config.output.include_prop_ids,
    )
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n")
        status(f"Wrote {len(result.graph)} entries to {output}", style="success")
    else:
        click.echo(text)

    for failure in result.failures:
        status(f"{failure.name}: {failure.error}", style="error")
    if result.dangling:
        status(f"Dangling references: {', '.join(result.dangling)}", style="warning")
