"""Structural compositions: tuples, references, unions, intersections, indexed access."""

from __future__ import annotations

from pydantic import BaseModel

from typegraph.extract import dispatch, external, predicates
from typegraph.extract.context import ExtractionContext
from typegraph.model.nodes import (
    IndexedAccessModel,
    IntersectionModel,
    PrefixModel,
    TupleModel,
    UnionModel,
)
from typegraph.oracle.records import Node, OracleType


def include_combinator(ctx: ExtractionContext, type: OracleType) -> BaseModel | None:
    if predicates.is_tuple(type):
        return TupleModel(types=[dispatch.include_type(ctx, t) for t in type.type_arguments or []])

    if predicates.is_reference(type) and type.symbol is not None:
        return include_reference(ctx, type)

    if predicates.is_union(type):
        return get_union(ctx, type.types)

    if predicates.is_intersection(type):
        return IntersectionModel(types=[dispatch.include_type(ctx, t) for t in type.types])

    if predicates.is_indexed_access(type):
        return IndexedAccessModel(
            index=include_index(ctx, type.index_type),
            object_type=(
                dispatch.include_type(ctx, type.object_type) if type.object_type else None
            ),
        )

    return None


def include_reference(ctx: ExtractionContext, type: OracleType) -> BaseModel:
    """A generic instantiation reached without a usable name, e.g. as an alias body.

    The ref keeps the live instantiation so inherited members can still be
    looked up on it.
    """
    ext = external.include_external(ctx, type)
    if ext is not None:
        return ext

    name = type.symbol.name  # type: ignore[union-attr]
    dispatch.ensure_named(ctx, type, name)
    return dispatch.include_ref(ctx, type, name, external=type)


def include_index(ctx: ExtractionContext, type: OracleType | None) -> BaseModel | None:
    if type is None:
        return None
    if predicates.is_keyof(type):
        return get_keyof(ctx, type.operand)  # type: ignore[arg-type]
    return dispatch.include_type(ctx, type)


def include_node(ctx: ExtractionContext, node: Node | None) -> BaseModel | None:
    """Classify ``keyof X`` and ``A | B`` from declaration syntax."""
    if predicates.is_keyof_node(node):
        return get_keyof(ctx, ctx.checker.get_type_from_type_node(node.type))  # type: ignore[union-attr,arg-type]
    if predicates.is_union_node(node):
        return get_union(
            ctx,
            [ctx.checker.get_type_from_type_node(t) for t in node.types],  # type: ignore[union-attr]
        )
    return None


def get_union(ctx: ExtractionContext, types: list[OracleType]) -> UnionModel:
    return UnionModel(types=[dispatch.include_type(ctx, t) for t in types])


def get_keyof(ctx: ExtractionContext, type: OracleType) -> PrefixModel:
    return PrefixModel(prefix="keyof", value=dispatch.include_type(ctx, type))
