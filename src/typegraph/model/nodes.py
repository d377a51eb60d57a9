"""TypeModel node variants.

Every node carries a ``kind`` discriminator. Field names are snake_case in
Python and camelCase on the wire (``ref_name`` -> ``refName``); a handful of
fields whose wire names collide with Python builtins or keywords carry
explicit aliases.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PrimitiveKind = Literal[
    "string",
    "number",
    "boolean",
    "bigint",
    "void",
    "undefined",
    "null",
    "never",
    "any",
    "unknown",
    "esSymbol",
    "uniqueEsSymbol",
]


class _Node(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Terminals
# =============================================================================


class PrimitiveModel(_Node):
    kind: PrimitiveKind


class NonPrimitiveModel(_Node):
    kind: Literal["nonPrimitive"] = "nonPrimitive"
    name: str | None = None


class UnidentifiedModel(_Node):
    """A construct no classifier recognized."""

    kind: Literal["unidentified"] = "unidentified"


class LiteralModel(_Node):
    kind: Literal["literal"] = "literal"
    value: bool | int | float | str


class BigIntLiteralModel(_Node):
    kind: Literal["bigintLiteral"] = "bigintLiteral"
    # Base-10 text; the value may exceed any float.
    value: str


class MemberModel(_Node):
    kind: Literal["member"] = "member"
    name: str
    value: TypeModel
    comment: str | None = None


class EnumModel(_Node):
    kind: Literal["enum"] = "enum"
    values: list[MemberModel] = Field(default_factory=list)
    comment: str | None = None


class EnumLiteralModel(_Node):
    kind: Literal["enumLiteral"] = "enumLiteral"
    values: list[MemberModel] = Field(default_factory=list)
    is_const: bool = Field(default=False, alias="const")
    comment: str | None = None


# =============================================================================
# Structural composites
# =============================================================================


class TupleModel(_Node):
    kind: Literal["tuple"] = "tuple"
    types: list[TypeModel] = Field(default_factory=list)


class UnionModel(_Node):
    kind: Literal["union"] = "union"
    types: list[TypeModel] = Field(default_factory=list)


class IntersectionModel(_Node):
    kind: Literal["intersection"] = "intersection"
    types: list[TypeModel] = Field(default_factory=list)


class IndexedAccessModel(_Node):
    """``object[index]``."""

    kind: Literal["indexedAccess"] = "indexedAccess"
    index: TypeModel | None = None
    object_type: TypeModel | None = Field(default=None, alias="object")


class PrefixModel(_Node):
    """A unary type operator such as ``keyof``."""

    kind: Literal["prefix"] = "prefix"
    prefix: str = "keyof"
    value: TypeModel


class ConditionalModel(_Node):
    """``check extends extends ? primary : alternate``."""

    kind: Literal["conditional"] = "conditional"
    check: TypeModel
    extends: TypeModel
    primary: TypeModel
    alternate: TypeModel


class SubstitutionModel(_Node):
    kind: Literal["substitution"] = "substitution"
    variable: TypeModel


class InferModel(_Node):
    kind: Literal["infer"] = "infer"
    parameter: TypeModel


# =============================================================================
# Members
# =============================================================================


class TypeParameterModel(_Node):
    kind: Literal["typeParameter"] = "typeParameter"
    parameter: RefModel
    constraint: TypeModel | None = None
    default_type: TypeModel | None = Field(default=None, alias="default")


class ParameterModel(_Node):
    kind: Literal["parameter"] = "parameter"
    param: str
    modifiers: str = ""
    spread: bool = False
    optional: bool = False
    value: TypeModel


class PropModel(_Node):
    kind: Literal["prop"] = "prop"
    name: str
    modifiers: str = ""
    # Oracle identity of the declared member; equal ids mean the same member
    member_id: int | None = Field(default=None, alias="id")
    optional: bool = False
    comment: str | None = None
    value_type: TypeModel


class IndexModel(_Node):
    kind: Literal["index"] = "index"
    parameters: list[ParameterModel] = Field(default_factory=list)
    optional: bool = False
    value_type: TypeModel


class FunctionModel(_Node):
    kind: Literal["function"] = "function"
    types: list[TypeParameterModel] = Field(default_factory=list)
    parameters: list[ParameterModel] = Field(default_factory=list)
    return_type: TypeModel
    comment: str | None = None


class ConstructorModel(_Node):
    kind: Literal["constructor"] = "constructor"
    types: list[TypeParameterModel] = Field(default_factory=list)
    parameters: list[ParameterModel] = Field(default_factory=list)
    return_type: TypeModel
    comment: str | None = None


class MappedModel(_Node):
    """``{ [name in constraint]?: value }``."""

    kind: Literal["mapped"] = "mapped"
    name: str
    constraint: TypeModel | None = None
    optional: bool = False
    value: TypeModel


# =============================================================================
# Object shapes
# =============================================================================


class InterfaceModel(_Node):
    kind: Literal["interface"] = "interface"
    extends: list[TypeModel] = Field(default_factory=list)
    props: list[TypeModel] = Field(default_factory=list)
    types: list[TypeParameterModel] = Field(default_factory=list)
    mapped: MappedModel | None = None
    comment: str | None = None


class ClassModel(_Node):
    kind: Literal["class"] = "class"
    extends: list[TypeModel] = Field(default_factory=list)
    implements: list[TypeModel] = Field(default_factory=list)
    props: list[TypeModel] = Field(default_factory=list)
    types: list[TypeParameterModel] = Field(default_factory=list)
    mapped: MappedModel | None = None
    comment: str | None = None


# =============================================================================
# Root entries and references
# =============================================================================


class AliasModel(_Node):
    kind: Literal["alias"] = "alias"
    types: list[TypeParameterModel] = Field(default_factory=list)
    child: TypeModel
    comment: str | None = None


class ConstModel(_Node):
    kind: Literal["const"] = "const"
    value: TypeModel
    comment: str | None = None


class DefaultModel(_Node):
    kind: Literal["default"] = "default"
    value: TypeModel
    comment: str | None = None


class RefModel(_Node):
    kind: Literal["ref"] = "ref"
    ref_name: str
    types: list[TypeModel] = Field(default_factory=list)
    # Live oracle type for inherited-member lookups; never serialized
    external: Any = Field(default=None, exclude=True, repr=False)


class ImportModel(_Node):
    """A type owned by a library or the ambient global scope."""

    kind: Literal["import"] = "import"
    name: str
    module: str | None = None
    scope: Literal["lib", "global", "module"]


TypeModel = Annotated[
    Union[
        PrimitiveModel,
        NonPrimitiveModel,
        UnidentifiedModel,
        LiteralModel,
        BigIntLiteralModel,
        MemberModel,
        EnumModel,
        EnumLiteralModel,
        TupleModel,
        UnionModel,
        IntersectionModel,
        IndexedAccessModel,
        PrefixModel,
        ConditionalModel,
        SubstitutionModel,
        InferModel,
        TypeParameterModel,
        ParameterModel,
        PropModel,
        IndexModel,
        FunctionModel,
        ConstructorModel,
        MappedModel,
        InterfaceModel,
        ClassModel,
        AliasModel,
        ConstModel,
        DefaultModel,
        RefModel,
        ImportModel,
    ],
    Field(discriminator="kind"),
]

ObjectShape = InterfaceModel | ClassModel

for _model in (
    MemberModel,
    EnumModel,
    EnumLiteralModel,
    TupleModel,
    UnionModel,
    IntersectionModel,
    IndexedAccessModel,
    PrefixModel,
    ConditionalModel,
    SubstitutionModel,
    InferModel,
    TypeParameterModel,
    ParameterModel,
    PropModel,
    IndexModel,
    FunctionModel,
    ConstructorModel,
    MappedModel,
    InterfaceModel,
    ClassModel,
    AliasModel,
    ConstModel,
    DefaultModel,
    RefModel,
):
    _model.model_rebuild()


def primitive(kind: PrimitiveKind) -> PrimitiveModel:
    return PrimitiveModel(kind=kind)


def ref(name: str, types: list[Any] | None = None, external: Any = None) -> RefModel:
    return RefModel(ref_name=name, types=types or [], external=external)
