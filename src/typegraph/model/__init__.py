"""Type model: the normalized nodes of an extracted type graph."""

from typegraph.model.graph import TypeGraph, iter_refs, validate_node
from typegraph.model.nodes import (
    AliasModel,
    BigIntLiteralModel,
    ClassModel,
    ConditionalModel,
    ConstModel,
    ConstructorModel,
    DefaultModel,
    EnumLiteralModel,
    EnumModel,
    FunctionModel,
    ImportModel,
    IndexedAccessModel,
    IndexModel,
    InferModel,
    InterfaceModel,
    IntersectionModel,
    LiteralModel,
    MappedModel,
    MemberModel,
    NonPrimitiveModel,
    ObjectShape,
    ParameterModel,
    PrefixModel,
    PrimitiveModel,
    PropModel,
    RefModel,
    SubstitutionModel,
    TupleModel,
    TypeModel,
    TypeParameterModel,
    UnidentifiedModel,
    UnionModel,
    primitive,
    ref,
)

__all__ = [
    "TypeGraph",
    "iter_refs",
    "validate_node",
    "TypeModel",
    "ObjectShape",
    "AliasModel",
    "BigIntLiteralModel",
    "ClassModel",
    "ConditionalModel",
    "ConstModel",
    "ConstructorModel",
    "DefaultModel",
    "EnumLiteralModel",
    "EnumModel",
    "FunctionModel",
    "ImportModel",
    "IndexedAccessModel",
    "IndexModel",
    "InferModel",
    "InterfaceModel",
    "IntersectionModel",
    "LiteralModel",
    "MappedModel",
    "MemberModel",
    "NonPrimitiveModel",
    "ParameterModel",
    "PrefixModel",
    "PrimitiveModel",
    "PropModel",
    "RefModel",
    "SubstitutionModel",
    "TupleModel",
    "TypeParameterModel",
    "UnidentifiedModel",
    "UnionModel",
    "primitive",
    "ref",
]
