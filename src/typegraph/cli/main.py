"""TypeGraph CLI - typegraph command."""

import click

from typegraph.cli.extract import extract_command
from typegraph.cli.show import show_command


@click.group()
@click.version_option(version="0.1.0", prog_name="typegraph")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """TypeGraph - normalized type graphs from a type-checking oracle."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


cli.add_command(extract_command, name="extract")
cli.add_command(show_command, name="show")


if __name__ == "__main__":
    cli()
