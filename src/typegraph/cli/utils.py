"""CLI utilities."""

import importlib
import sys
from pathlib import Path

import click

from typegraph.config import TypeGraphConfig, load_config
from typegraph.core.errors import ConfigError
from typegraph.core.logging import configure_logging
from typegraph.oracle.protocol import OracleProgram


def load_program(target: str, project: Path | None = None) -> OracleProgram:
    """Import ``package.module:callable`` and call it for the program to extract.

    The project directory is put on ``sys.path`` first so targets living
    next to the sources import without installation.

    Raises:
        click.ClickException: If the target cannot be imported or does not
            produce an OracleProgram.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise click.ClickException(f"Target must look like 'package.module:callable', got '{target}'")

    if project is not None:
        root = str(project.resolve())
        if root not in sys.path:
            sys.path.insert(0, root)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.ClickException(f"Cannot import '{module_name}': {e}") from e

    factory = getattr(module, attr, None)
    if factory is None:
        raise click.ClickException(f"'{module_name}' has no attribute '{attr}'")

    program = factory() if callable(factory) else factory
    if not isinstance(program, OracleProgram):
        raise click.ClickException(
            f"'{target}' returned {type(program).__name__}, expected OracleProgram"
        )
    return program


def load_cli_config(
    project: Path | None, *, verbose: bool = False, **overrides: object
) -> TypeGraphConfig:
    """Load config for a CLI invocation and apply its logging section.

    Config errors become click errors. ``verbose`` (the group's ``-v``)
    lowers the configured log level to DEBUG.
    """
    try:
        config = load_config(project, **overrides)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config.logging, verbose=verbose)
    return config
