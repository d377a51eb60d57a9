"""Object shape builder: interfaces, classes and mapped types.

Members reachable through an ``extends``/``implements`` edge are not
repeated on the derived shape. The ids of every inherited member are
collected transitively (registered bases through their own edges, external
bases by asking the oracle for their properties) and the derived type's
members are filtered against that set.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel

from typegraph.core.errors import ExtractionError
from typegraph.extract import combinators, dispatch, generics, predicates
from typegraph.extract.context import ExtractionContext
from typegraph.model.nodes import (
    ClassModel,
    ConstructorModel,
    FunctionModel,
    IndexModel,
    InferModel,
    InterfaceModel,
    MappedModel,
    ParameterModel,
    PrimitiveModel,
    PropModel,
    RefModel,
)
from typegraph.oracle.flags import HeritageToken, IndexKind, NodeKind, SymbolFlags
from typegraph.oracle.records import Node, OracleSymbol, OracleType, Signature

_HERITAGE_DECLARATIONS = frozenset({NodeKind.INTERFACE, NodeKind.CLASS})


@dataclass
class Heritage:
    extends: list[BaseModel] = field(default_factory=list)
    implements: list[BaseModel] = field(default_factory=list)

    @property
    def edges(self) -> list[BaseModel]:
        return [*self.extends, *self.implements]


def include_object(ctx: ExtractionContext, type: OracleType) -> BaseModel | None:
    if not predicates.is_object(type):
        return None
    if predicates.is_mapped(type):
        return include_mapped_object(ctx, type)
    if predicates.is_class(type):
        return include_class_object(ctx, type)
    return include_standard_object(ctx, type)


# =============================================================================
# Heritage
# =============================================================================


def include_inherited_types(ctx: ExtractionContext, type: OracleType) -> Heritage:
    heritage = Heritage()
    decl = predicates.first_declaration(type.symbol)
    if decl is None or decl.kind not in _HERITAGE_DECLARATIONS:
        return heritage

    for clause in decl.heritage_clauses:
        items = [_include_heritage_entry(ctx, node) for node in clause.types]
        if clause.token is HeritageToken.EXTENDS:
            heritage.extends.extend(items)
        elif clause.token is HeritageToken.IMPLEMENTS:
            heritage.implements.extend(items)
    return heritage


def _include_heritage_entry(ctx: ExtractionContext, node: Node) -> BaseModel:
    base = ctx.checker.get_type_at_location(node)
    result = dispatch.include_type(ctx, base)

    if isinstance(result, RefModel):
        if result.external is None:
            return result.model_copy(update={"external": base})
        return result

    expression = node.expression
    if expression is None or expression.kind is not NodeKind.IDENTIFIER or not expression.name:
        return result

    # A structural base written by name: keep its body reachable under that name.
    name = expression.name
    if name not in ctx.refs:
        ctx.refs[name] = result
    return RefModel(ref_name=name, external=base)


def get_all_prop_ids(
    ctx: ExtractionContext, edges: list[BaseModel], seen: set[str] | None = None
) -> set[int]:
    seen = set() if seen is None else seen
    ids: set[int] = set()

    for edge in edges:
        if not isinstance(edge, RefModel) or edge.ref_name in seen:
            continue
        seen.add(edge.ref_name)
        base = ctx.refs.get(edge.ref_name)

        if isinstance(base, (InterfaceModel, ClassModel)):
            ids.update(p.member_id for p in base.props if isinstance(p, PropModel) and p.member_id)
            base_edges = [*base.extends, *getattr(base, "implements", [])]
            ids |= get_all_prop_ids(ctx, base_edges, seen)
        elif edge.external is not None:
            props = ctx.checker.get_properties_of_type(edge.external)
            ids.update(predicates.prop_identity(p) for p in props)

    return ids


def _inherits_index(
    ctx: ExtractionContext, edges: list[BaseModel], kind: IndexKind, index_type: OracleType
) -> bool:
    for edge in edges:
        live = edge.external if isinstance(edge, RefModel) else None
        if live is None:
            continue
        if kind is IndexKind.NUMBER:
            inherited = ctx.checker.get_number_index_type(live)
        else:
            inherited = ctx.checker.get_string_index_type(live)
        if inherited is index_type:
            return True
    return False


# =============================================================================
# Shapes
# =============================================================================


def include_standard_object(
    ctx: ExtractionContext, type: OracleType, heritage: Heritage | None = None
) -> InterfaceModel:
    if heritage is None:
        heritage = include_inherited_types(ctx, type)
    edges = heritage.edges
    inherited_ids = get_all_prop_ids(ctx, edges)

    props: list[BaseModel] = [
        get_prop_type(ctx, prop)
        for prop in ctx.checker.get_properties_of_type(type)
        if predicates.prop_identity(prop) not in inherited_ids
    ]

    number_index = ctx.checker.get_number_index_type(type)
    if number_index is not None and not _inherits_index(ctx, edges, IndexKind.NUMBER, number_index):
        props.append(get_index_type(ctx, type, number_index, IndexKind.NUMBER))

    string_index = ctx.checker.get_string_index_type(type)
    if string_index is not None and not _inherits_index(ctx, edges, IndexKind.STRING, string_index):
        props.append(get_index_type(ctx, type, string_index, IndexKind.STRING))

    props.extend(get_function_type(ctx, sig) for sig in ctx.checker.get_call_signatures(type))

    return InterfaceModel(
        extends=heritage.extends,
        comment=predicates.get_comment(ctx.checker, type.symbol),
        props=props,
        types=generics.get_type_parameters(ctx, type.type_parameters),
    )


def include_class_object(ctx: ExtractionContext, type: OracleType) -> ClassModel:
    heritage = include_inherited_types(ctx, type)
    shape = include_standard_object(ctx, type, heritage)
    props = list(shape.props)

    if type.symbol is not None:
        for member in ctx.checker.get_exports_of_module(type.symbol):
            if predicates.is_prototype(member) or member.value_declaration is None:
                continue
            static = member.value_declaration.symbol or member
            props.append(get_prop_type(ctx, static))

    props.extend(get_constructor_types(ctx, type))

    return ClassModel(
        extends=shape.extends,
        implements=heritage.implements,
        comment=shape.comment,
        props=props,
        types=shape.types,
    )


def include_mapped_object(ctx: ExtractionContext, type: OracleType) -> InterfaceModel:
    key = type.type_parameter
    decl = predicates.first_declaration(type.symbol)
    if key is None or key.symbol is None or decl is None or decl.type is None:
        raise ExtractionError.missing_declaration(repr(type), "mapped type declaration")

    ctx.declare_local(key.symbol.name)
    value = ctx.checker.get_type_from_type_node(decl.type)
    return InterfaceModel(
        comment=predicates.get_comment(ctx.checker, type.symbol),
        mapped=MappedModel(
            name=key.symbol.name,
            constraint=generics.include_constraint(ctx, key),
            optional=decl.question,
            value=dispatch.include_type(ctx, value),
        ),
    )


# =============================================================================
# Members
# =============================================================================


def get_prop_type(ctx: ExtractionContext, prop: OracleSymbol) -> PropModel:
    return PropModel(
        name=prop.name,
        modifiers=predicates.get_modifiers(prop),
        member_id=predicates.prop_identity(prop),
        optional=predicates.is_optional(prop),
        comment=predicates.get_comment(ctx.checker, prop),
        value_type=get_prop_value(ctx, prop),
    )


def get_prop_value(ctx: ExtractionContext, prop: OracleSymbol) -> BaseModel:
    decl = predicates.first_declaration(prop)
    if decl is None:
        raise ExtractionError.missing_declaration(prop.name, "declaration")

    if predicates.is_method(decl) or prop.flags & SymbolFlags.METHOD:
        signature = ctx.checker.get_signature_from_declaration(decl)
        return get_function_type(ctx, signature)

    from_syntax = combinators.include_node(ctx, decl.type)
    if from_syntax is not None:
        return from_syntax
    return dispatch.include_type(ctx, ctx.checker.get_type_of_symbol_at_location(prop, decl))


def get_index_type(
    ctx: ExtractionContext, type: OracleType, value: OracleType, kind: IndexKind
) -> IndexModel:
    info = ctx.checker.get_index_info_of_type(type, kind)
    key = PrimitiveModel(kind="number" if kind is IndexKind.NUMBER else "string")
    return IndexModel(
        parameters=[ParameterModel(param=predicates.get_key_name(info), value=key)],
        value_type=dispatch.include_type(ctx, value),
    )


def get_function_type(ctx: ExtractionContext, signature: Signature) -> FunctionModel:
    return FunctionModel(
        types=generics.get_type_parameters(ctx, signature.type_parameters),
        parameters=get_function_parameters(ctx, signature.parameters),
        return_type=dispatch.include_type(ctx, signature.return_type),
    )


def get_constructor_types(ctx: ExtractionContext, type: OracleType) -> list[ConstructorModel]:
    constructors = []
    for decl in predicates.get_constructors(type):
        function = get_function_type(ctx, ctx.checker.get_signature_from_declaration(decl))
        constructors.append(
            ConstructorModel(
                types=function.types,
                parameters=function.parameters,
                return_type=function.return_type,
            )
        )
    return constructors


def get_function_parameters(
    ctx: ExtractionContext, parameters: list[OracleSymbol]
) -> list[ParameterModel]:
    result = []
    for param in parameters:
        decl = param.value_declaration
        if decl is None:
            raise ExtractionError.missing_declaration(param.name, "declaration")
        if decl.type is None:
            raise ExtractionError.missing_declaration(param.name, "parameter type")
        result.append(
            ParameterModel(
                param=param.name,
                spread=decl.dot_dot_dot,
                optional=decl.question,
                value=get_parameter_type(ctx, decl.type),
            )
        )
    return result


def get_parameter_type(ctx: ExtractionContext, node: Node) -> BaseModel:
    """Classify a type written in declaration syntax."""
    if predicates.is_type_reference_node(node):
        return dispatch.get_type_model(ctx, ctx.checker.get_type_at_location(node), node.name)

    if predicates.is_infer_node(node) and node.type_parameter is not None:
        variable = node.type_parameter.symbol
        if variable is None:
            raise ExtractionError.missing_declaration(repr(node), "infer variable")
        declared = ctx.checker.get_declared_type_of_symbol(variable)
        return InferModel(parameter=dispatch.include_type(ctx, declared))

    return dispatch.include_anonymous_node(ctx, node)
