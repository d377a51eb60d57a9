"""Generic parameter normalization.

Builds ``typeParameter`` descriptors for declarations and reconciles the type
arguments of an instantiation with the parameters its target declares:
arguments beyond the declared count are dropped, and trailing arguments equal
to the declared default are trimmed so equivalent instantiations serialize
identically.
"""

from __future__ import annotations

from pydantic import BaseModel

from typegraph.extract import combinators, dispatch, predicates
from typegraph.extract.context import ExtractionContext
from typegraph.model.nodes import TypeParameterModel
from typegraph.oracle.records import Node, OracleType


def get_type_arguments(ctx: ExtractionContext, type: OracleType) -> list[BaseModel]:
    return [dispatch.include_type(ctx, t) for t in type.type_arguments or []]


def get_type_parameters(
    ctx: ExtractionContext, params: list[OracleType] | None
) -> list[TypeParameterModel]:
    descriptors = (include_type_parameter(ctx, p) for p in params or [])
    return [d for d in descriptors if d is not None]


def get_declared_type_parameters(ctx: ExtractionContext, decl: Node) -> list[TypeParameterModel]:
    """Descriptors for the type parameters written on a declaration."""
    params = [ctx.checker.get_type_at_location(node) for node in decl.type_parameters]
    return get_type_parameters(ctx, params)


def include_type_parameter(ctx: ExtractionContext, type: OracleType) -> TypeParameterModel | None:
    symbol = type.symbol
    if symbol is None:
        return None
    return TypeParameterModel(
        parameter=dispatch.type_parameter_ref(ctx, symbol.name),
        constraint=include_constraint(ctx, type),
        default_type=include_default(ctx, type),
    )


def include_constraint(ctx: ExtractionContext, type: OracleType) -> BaseModel | None:
    decl = predicates.first_declaration(type.symbol)
    node = decl.constraint if decl is not None else None

    if predicates.is_keyof_node(node):
        operand = ctx.checker.get_type_at_location(node.type)  # type: ignore[union-attr,arg-type]
        return combinators.get_keyof(ctx, operand)
    if node is not None:
        return dispatch.include_type(ctx, ctx.checker.get_type_at_location(node))

    constraint = ctx.checker.get_constraint_of_type_parameter(type)
    if constraint is not None:
        return dispatch.include_type(ctx, constraint)
    return None


def include_default(ctx: ExtractionContext, type: OracleType) -> BaseModel | None:
    decl = predicates.first_declaration(type.symbol)
    if decl is None or decl.default is None:
        return None
    return dispatch.include_type(ctx, ctx.checker.get_type_at_location(decl.default))


def default_type_id(ctx: ExtractionContext, param: Node) -> int | None:
    decl = predicates.first_declaration(param.symbol) or param
    if decl.default is None:
        return None
    return ctx.checker.get_type_at_location(decl.default).id


def normalize_type_arguments(
    ctx: ExtractionContext,
    type: OracleType,
    params: list[Node],
    types: list[BaseModel],
    ref_name: str,
) -> list[BaseModel]:
    """Bound ``types`` to the declared count and trim trailing defaults.

    ``params`` are the type-parameter declarations of the referenced target.
    Trimming walks from the last parameter backwards and stops at the first
    argument that differs from its parameter's default.
    """
    types = list(types)

    max_types = ctx.refs.declared_parameter_count(ref_name)
    if max_types is not None:
        del types[max_types:]

    argument_ids = [t.id for t in (type.alias_type_arguments or type.type_arguments or [])]
    for index in range(len(params) - 1, -1, -1):
        default_id = default_type_id(ctx, params[index])
        if default_id is None or index >= len(argument_ids):
            break
        if default_id != argument_ids[index] or len(types) != index + 1:
            break
        types.pop()

    return types
