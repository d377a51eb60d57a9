"""Fixtures for extraction tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from typegraph.config.models import TypeGraphConfig
from typegraph.extract import ExtractionResult, extract_module
from typegraph.oracle import ProgramBuilder

Extract = Callable[..., ExtractionResult]
Graph = Callable[..., dict[str, Any]]


@pytest.fixture
def extract(builder: ProgramBuilder) -> Extract:
    """Run extraction over the builder's program with config section overrides."""

    def run(**sections: Any) -> ExtractionResult:
        config = TypeGraphConfig.model_validate(sections)
        return extract_module(builder.build(), config=config)

    return run


@pytest.fixture
def graph(extract: Extract) -> Graph:
    """Serialized graph of the builder's program, without prop ids."""

    def run(**sections: Any) -> dict[str, Any]:
        return extract(**sections).graph.to_dict(include_prop_ids=False)

    return run
