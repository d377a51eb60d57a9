"""Primitive and literal classifier.

The oracle's flag sets overlap: ``boolean`` is a union of its two literals,
an enum member is both a literal and an enum literal, an enum is a union of
its members. Rules are therefore evaluated top to bottom and the first match
wins; a narrower rule must come before any broader rule whose flags it
shares.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel

from typegraph.extract import dispatch, predicates
from typegraph.extract.context import ExtractionContext
from typegraph.model.nodes import (
    BigIntLiteralModel,
    ConditionalModel,
    EnumLiteralModel,
    EnumModel,
    LiteralModel,
    MemberModel,
    NonPrimitiveModel,
    PrimitiveKind,
    PrimitiveModel,
    SubstitutionModel,
)
from typegraph.oracle.flags import SymbolFlags, TypeFlags
from typegraph.oracle.records import OracleType

Rule = tuple[Callable[[OracleType], bool], Callable[[ExtractionContext, OracleType], BaseModel]]


def include_basic(ctx: ExtractionContext, type: OracleType) -> BaseModel | None:
    """Classify terminal types; None when ``type`` is not a terminal."""
    for matches, build in _RULES:
        if matches(type):
            return build(ctx, type)
    return None


def include_member(ctx: ExtractionContext, type: OracleType) -> MemberModel:
    symbol = type.symbol
    return MemberModel(
        name=symbol.name if symbol is not None else "",
        value=dispatch.include_anonymous(ctx, type),
        comment=predicates.get_comment(ctx.checker, symbol),
    )


def _flag(flag: TypeFlags) -> Callable[[OracleType], bool]:
    return lambda type: bool(type.flags & flag)


def _flags(*flags: TypeFlags) -> Callable[[OracleType], bool]:
    combined = TypeFlags.NONE
    for flag in flags:
        combined |= flag
    return lambda type: (type.flags & combined) == combined


def _primitive(kind: PrimitiveKind) -> Callable[[ExtractionContext, OracleType], BaseModel]:
    return lambda _ctx, _type: PrimitiveModel(kind=kind)


def _literal(_ctx: ExtractionContext, type: OracleType) -> BaseModel:
    return LiteralModel(value=type.value)  # type: ignore[arg-type]


def _boolean_literal(_ctx: ExtractionContext, type: OracleType) -> BaseModel:
    return LiteralModel(value=type.intrinsic_name == "true")


def _enum_literal(ctx: ExtractionContext, type: OracleType) -> BaseModel:
    symbol = type.symbol
    return EnumLiteralModel(
        is_const=symbol is not None and bool(symbol.flags & SymbolFlags.CONST_ENUM),
        comment=predicates.get_comment(ctx.checker, symbol),
        values=[include_member(ctx, t) for t in type.types],
    )


def _enum(ctx: ExtractionContext, type: OracleType) -> BaseModel:
    return EnumModel(
        comment=predicates.get_comment(ctx.checker, type.symbol),
        values=[include_member(ctx, t) for t in type.types],
    )


def _bigint_literal(_ctx: ExtractionContext, type: OracleType) -> BaseModel:
    return BigIntLiteralModel(value=str(type.value))


def _conditional(ctx: ExtractionContext, type: OracleType) -> BaseModel:
    return ConditionalModel(
        extends=dispatch.include_type(ctx, type.extends_type),  # type: ignore[arg-type]
        check=dispatch.include_type(ctx, type.check_type),  # type: ignore[arg-type]
        primary=dispatch.include_type(ctx, type.true_type),  # type: ignore[arg-type]
        alternate=dispatch.include_type(ctx, type.false_type),  # type: ignore[arg-type]
    )


def _substitution(ctx: ExtractionContext, type: OracleType) -> BaseModel:
    return SubstitutionModel(variable=dispatch.include_type(ctx, type.base_type))  # type: ignore[arg-type]


def _non_primitive(_ctx: ExtractionContext, type: OracleType) -> BaseModel:
    return NonPrimitiveModel(name=type.intrinsic_name)


_RULES: tuple[Rule, ...] = (
    (_flag(TypeFlags.ANY), _primitive("any")),
    (_flag(TypeFlags.UNKNOWN), _primitive("unknown")),
    (_flag(TypeFlags.STRING_LITERAL), _literal),
    (_flag(TypeFlags.NUMBER_LITERAL), _literal),
    (_flag(TypeFlags.BOOLEAN_LITERAL), _boolean_literal),
    # Enum unions before plain unions and their member literals
    (_flags(TypeFlags.ENUM_LITERAL, TypeFlags.UNION), _enum_literal),
    (_flags(TypeFlags.ENUM, TypeFlags.UNION), _enum),
    (_flag(TypeFlags.BIGINT_LITERAL), _bigint_literal),
    (_flag(TypeFlags.STRING), _primitive("string")),
    # boolean carries UNION as well; it must never reach the union combinator
    (_flag(TypeFlags.BOOLEAN), _primitive("boolean")),
    (_flag(TypeFlags.NUMBER), _primitive("number")),
    (_flag(TypeFlags.BIGINT), _primitive("bigint")),
    (_flag(TypeFlags.ES_SYMBOL), _primitive("esSymbol")),
    (_flag(TypeFlags.UNIQUE_ES_SYMBOL), _primitive("uniqueEsSymbol")),
    (_flag(TypeFlags.VOID), _primitive("void")),
    (_flag(TypeFlags.UNDEFINED), _primitive("undefined")),
    (_flag(TypeFlags.NULL), _primitive("null")),
    (_flag(TypeFlags.NEVER), _primitive("never")),
    (_flag(TypeFlags.CONDITIONAL), _conditional),
    (_flag(TypeFlags.SUBSTITUTION), _substitution),
    (_flag(TypeFlags.NON_PRIMITIVE), _non_primitive),
)
