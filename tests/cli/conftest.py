"""Fixtures for CLI tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

PROGRAM_SOURCE = '''
from typegraph.oracle import ProgramBuilder


def build():
    b = ProgramBuilder()
    node = b.interface("Node", {"value": b.number}, doc="A list node")
    b.add_members(node, {"next": b.prop(node, optional=True)})
    b.alias("Id", b.union(b.string, b.number))
    return b.build()


def broken():
    b = ProgramBuilder()
    b.interface("Api", {"call": b.method([b.param("x", None)], b.void)})
    b.variable("answer", b.number)
    return b.build()


def not_a_program():
    return 42


PROGRAM = build()
'''


@pytest.fixture
def program_module(tmp_path: Path) -> str:
    """Write a program module into tmp_path and return its importable name.

    Each test gets its own module name so imports never hit a cached module
    from another test.
    """
    name = f"program_{tmp_path.name}"
    (tmp_path / f"{name}.py").write_text(PROGRAM_SOURCE)
    return name


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers the commands attach to streams the runner closes."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()
