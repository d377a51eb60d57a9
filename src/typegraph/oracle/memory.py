"""In-memory oracle.

``InMemoryChecker`` answers every ``TypeChecker`` query from explicit
bindings. ``ProgramBuilder`` assembles those bindings the way a compiler
would lay them out: intrinsic singletons, literal types cached per value,
declarations parented to a source file, interfaces that see their bases'
members, generic instantiations whose members point back at the declared
members they were created from.

Usage::

    b = ProgramBuilder()
    node = b.interface("Node", {"value": b.number})
    b.interface("Tree", {"left": b.prop(node, optional=True)})
    program = b.build()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace

from typegraph.config.constants import CONSTRUCTOR_MEMBER_NAME, DEFAULT_EXPORT_NAME
from typegraph.core.errors import OracleError
from typegraph.oracle.flags import (
    HeritageToken,
    IndexKind,
    NodeKind,
    ObjectFlags,
    SymbolFlags,
    TypeFlags,
)
from typegraph.oracle.protocol import OracleProgram
from typegraph.oracle.records import (
    HeritageClause,
    IndexInfo,
    Node,
    OracleSymbol,
    OracleType,
    Signature,
    next_id,
)


_LITERAL_FLAGS = (
    TypeFlags.STRING_LITERAL
    | TypeFlags.NUMBER_LITERAL
    | TypeFlags.BOOLEAN_LITERAL
    | TypeFlags.BIGINT_LITERAL
)

_DECLARED_TYPE_SYMBOLS = (
    SymbolFlags.TYPE_ALIAS
    | SymbolFlags.INTERFACE
    | SymbolFlags.CLASS
    | SymbolFlags.REGULAR_ENUM
    | SymbolFlags.CONST_ENUM
)


class InMemoryChecker:
    """TypeChecker implementation backed by explicit node/symbol bindings."""

    def __init__(self) -> None:
        self._node_types: dict[Node, OracleType] = {}
        self._symbol_types: dict[OracleSymbol, OracleType] = {}
        self._declared_types: dict[OracleSymbol, OracleType] = {}
        self._signatures: dict[Node, Signature] = {}

    # -- bindings ---------------------------------------------------------

    def bind_node(self, node: Node, type: OracleType) -> None:
        self._node_types[node] = type

    def bind_symbol(self, symbol: OracleSymbol, type: OracleType) -> None:
        self._symbol_types[symbol] = type

    def bind_declared(self, symbol: OracleSymbol, type: OracleType) -> None:
        self._declared_types[symbol] = type

    def bind_signature(self, node: Node, signature: Signature) -> None:
        self._signatures[node] = signature

    # -- TypeChecker ------------------------------------------------------

    def get_type_at_location(self, node: Node) -> OracleType:
        try:
            return self._node_types[node]
        except KeyError:
            raise OracleError.unknown_node("get_type_at_location", repr(node)) from None

    def get_type_from_type_node(self, node: Node) -> OracleType:
        try:
            return self._node_types[node]
        except KeyError:
            raise OracleError.unknown_node("get_type_from_type_node", repr(node)) from None

    def get_symbol_at_location(self, node: Node) -> OracleSymbol | None:
        return node.symbol

    def get_declared_type_of_symbol(self, symbol: OracleSymbol) -> OracleType:
        try:
            return self._declared_types[symbol]
        except KeyError:
            raise OracleError.query_failed(
                "get_declared_type_of_symbol", f"{symbol!r} declares no type"
            ) from None

    def get_type_of_symbol_at_location(self, symbol: OracleSymbol, node: Node) -> OracleType:
        if symbol in self._symbol_types:
            return self._symbol_types[symbol]
        if node.type is not None and node.type in self._node_types:
            return self._node_types[node.type]
        raise OracleError.query_failed(
            "get_type_of_symbol_at_location", f"{symbol!r} has no type at {node!r}"
        )

    def get_signature_from_declaration(self, node: Node) -> Signature:
        try:
            return self._signatures[node]
        except KeyError:
            raise OracleError.unknown_node("get_signature_from_declaration", repr(node)) from None

    def get_exports_of_module(self, symbol: OracleSymbol) -> list[OracleSymbol]:
        return list(symbol.exports)

    def get_documentation_comment(self, symbol: OracleSymbol) -> list[str]:
        return list(symbol.documentation)

    def get_properties_of_type(self, type: OracleType) -> list[OracleSymbol]:
        return list(type.properties)

    def get_call_signatures(self, type: OracleType) -> list[Signature]:
        return list(type.call_signatures)

    def get_construct_signatures(self, type: OracleType) -> list[Signature]:
        return list(type.construct_signatures)

    def get_string_index_type(self, type: OracleType) -> OracleType | None:
        return type.string_index_info.type if type.string_index_info else None

    def get_number_index_type(self, type: OracleType) -> OracleType | None:
        return type.number_index_info.type if type.number_index_info else None

    def get_index_info_of_type(self, type: OracleType, kind: IndexKind) -> IndexInfo | None:
        if kind is IndexKind.STRING:
            return type.string_index_info
        return type.number_index_info

    def get_constraint_of_type_parameter(self, type: OracleType) -> OracleType | None:
        return type.constraint


# =============================================================================
# Builder specs
# =============================================================================


@dataclass
class PropSpec:
    type: OracleType
    optional: bool = False
    modifiers: tuple[str, ...] = ()
    doc: str | None = None


@dataclass
class ParamSpec:
    name: str
    type: OracleType | None
    optional: bool = False
    rest: bool = False


@dataclass
class MethodSpec:
    parameters: list[ParamSpec]
    returns: OracleType
    type_parameters: list[OracleType] = field(default_factory=list)
    optional: bool = False
    doc: str | None = None


@dataclass
class IndexSpec:
    type: OracleType
    key_name: str | None = "key"


MemberSpec = OracleType | PropSpec | MethodSpec


class ProgramBuilder:
    """Assemble an in-memory program for extraction."""

    def __init__(self, file_name: str = "src/index.ts") -> None:
        self.checker = InMemoryChecker()
        self.file_name = file_name
        self.module = OracleSymbol(name=file_name, flags=SymbolFlags.MODULE)
        self._files: dict[str, Node] = {}
        self._literals: dict[tuple[str, object], OracleType] = {}
        self._tuple_targets: dict[int, OracleType] = {}
        self._infer_parameters: set[OracleType] = set()

        self.any = self._intrinsic(TypeFlags.ANY, "any")
        self.unknown = self._intrinsic(TypeFlags.UNKNOWN, "unknown")
        self.string = self._intrinsic(TypeFlags.STRING, "string")
        self.number = self._intrinsic(TypeFlags.NUMBER, "number")
        self.bigint = self._intrinsic(TypeFlags.BIGINT, "bigint")
        self.es_symbol = self._intrinsic(TypeFlags.ES_SYMBOL, "symbol")
        self.unique_es_symbol = self._intrinsic(TypeFlags.UNIQUE_ES_SYMBOL, "unique symbol")
        self.void = self._intrinsic(TypeFlags.VOID, "void")
        self.undefined = self._intrinsic(TypeFlags.UNDEFINED, "undefined")
        self.null = self._intrinsic(TypeFlags.NULL, "null")
        self.never = self._intrinsic(TypeFlags.NEVER, "never")
        self.non_primitive = self._intrinsic(TypeFlags.NON_PRIMITIVE, "object")
        self.false_ = self._intrinsic(TypeFlags.BOOLEAN_LITERAL, "false")
        self.true_ = self._intrinsic(TypeFlags.BOOLEAN_LITERAL, "true")
        self.boolean = OracleType(
            flags=TypeFlags.BOOLEAN | TypeFlags.UNION,
            intrinsic_name="boolean",
            types=[self.false_, self.true_],
        )

    def build(self) -> OracleProgram:
        return OracleProgram(checker=self.checker, module=self.module)

    # -- member specs -----------------------------------------------------

    def prop(
        self,
        type: OracleType,
        *,
        optional: bool = False,
        modifiers: Iterable[str] = (),
        doc: str | None = None,
    ) -> PropSpec:
        return PropSpec(type=type, optional=optional, modifiers=tuple(modifiers), doc=doc)

    def param(
        self,
        name: str,
        type: OracleType | None,
        *,
        optional: bool = False,
        rest: bool = False,
    ) -> ParamSpec:
        return ParamSpec(name=name, type=type, optional=optional, rest=rest)

    def method(
        self,
        parameters: Iterable[ParamSpec],
        returns: OracleType,
        *,
        type_parameters: Iterable[OracleType] = (),
        optional: bool = False,
        doc: str | None = None,
    ) -> MethodSpec:
        return MethodSpec(
            parameters=list(parameters),
            returns=returns,
            type_parameters=list(type_parameters),
            optional=optional,
            doc=doc,
        )

    def index_signature(self, type: OracleType, key_name: str | None = "key") -> IndexSpec:
        return IndexSpec(type=type, key_name=key_name)

    # -- terminals --------------------------------------------------------

    def literal(self, value: str | int | float | bool) -> OracleType:
        if isinstance(value, bool):
            return self.true_ if value else self.false_
        flags = TypeFlags.STRING_LITERAL if isinstance(value, str) else TypeFlags.NUMBER_LITERAL
        key = (flags.name or "", value)
        if key not in self._literals:
            self._literals[key] = OracleType(flags=flags, value=value)
        return self._literals[key]

    def bigint_literal(self, value: str) -> OracleType:
        key = ("bigint", value)
        if key not in self._literals:
            self._literals[key] = OracleType(flags=TypeFlags.BIGINT_LITERAL, value=value)
        return self._literals[key]

    # -- combinators ------------------------------------------------------

    def union(self, *types: OracleType) -> OracleType:
        return OracleType(flags=TypeFlags.UNION, types=list(types))

    def intersection(self, *types: OracleType) -> OracleType:
        return OracleType(flags=TypeFlags.INTERSECTION, types=list(types))

    def tuple(self, *elements: OracleType) -> OracleType:
        arity = len(elements)
        if arity not in self._tuple_targets:
            self._tuple_targets[arity] = OracleType(
                flags=TypeFlags.OBJECT, object_flags=ObjectFlags.TUPLE
            )
        return OracleType(
            flags=TypeFlags.OBJECT,
            object_flags=ObjectFlags.REFERENCE,
            target=self._tuple_targets[arity],
            type_arguments=list(elements),
        )

    def keyof(self, type: OracleType) -> OracleType:
        return OracleType(flags=TypeFlags.INDEX, operand=type)

    def indexed_access(self, object_type: OracleType, index_type: OracleType) -> OracleType:
        return OracleType(
            flags=TypeFlags.INDEXED_ACCESS, object_type=object_type, index_type=index_type
        )

    def conditional(
        self,
        check: OracleType,
        extends: OracleType,
        true_type: OracleType,
        false_type: OracleType,
    ) -> OracleType:
        return OracleType(
            flags=TypeFlags.CONDITIONAL,
            check_type=check,
            extends_type=extends,
            true_type=true_type,
            false_type=false_type,
        )

    def substitution(self, base: OracleType) -> OracleType:
        return OracleType(flags=TypeFlags.SUBSTITUTION, base_type=base)

    # -- generics ---------------------------------------------------------

    def type_parameter(
        self,
        name: str,
        *,
        constraint: OracleType | None = None,
        default: OracleType | None = None,
    ) -> OracleType:
        symbol, decl = self._declare(NodeKind.TYPE_PARAMETER, name, SymbolFlags.TYPE_PARAMETER)
        decl.parent = None
        type = OracleType(flags=TypeFlags.TYPE_PARAMETER, symbol=symbol, constraint=constraint)
        if constraint is not None:
            decl.constraint = self.type_node(constraint, parent=decl)
        if default is not None:
            decl.default = self.type_node(default, parent=decl)
        self.checker.bind_declared(symbol, type)
        self.checker.bind_node(decl, type)
        return type

    def infer(self, name: str) -> OracleType:
        type = self.type_parameter(name)
        self._infer_parameters.add(type)
        return type

    def instantiate(self, generic: OracleType, *args: OracleType) -> OracleType:
        """Reference a generic interface or class with type arguments."""
        params = generic.type_parameters or []
        arguments = self._fill_defaults(params, list(args))
        mapping = dict(zip(params, arguments, strict=False))
        return OracleType(
            flags=TypeFlags.OBJECT,
            object_flags=ObjectFlags.REFERENCE,
            symbol=generic.symbol,
            target=generic,
            type_arguments=arguments,
            properties=[self._instantiate_member(p, mapping) for p in generic.properties],
            call_signatures=list(generic.call_signatures),
            string_index_info=self._instantiate_index(generic.string_index_info, mapping),
            number_index_info=self._instantiate_index(generic.number_index_info, mapping),
        )

    def instantiate_alias(self, alias: OracleType, *args: OracleType) -> OracleType:
        """Reference a generic type alias with type arguments."""
        if alias.alias_symbol is None:
            raise ValueError(f"{alias!r} is not an alias")
        decl = alias.alias_symbol.declarations[0]
        params = [self.checker.get_type_at_location(p) for p in decl.type_parameters]
        return replace(
            alias,
            id=next_id(),
            alias_type_arguments=self._fill_defaults(params, list(args)),
        )

    # -- declarations -----------------------------------------------------

    def interface(
        self,
        name: str,
        members: Mapping[str, MemberSpec] | None = None,
        *,
        extends: Iterable[OracleType] = (),
        type_parameters: Iterable[OracleType] = (),
        string_index: OracleType | IndexSpec | None = None,
        number_index: OracleType | IndexSpec | None = None,
        call_signatures: Iterable[Signature] = (),
        doc: str | None = None,
        file_name: str | None = None,
        namespace: OracleSymbol | None = None,
        export: bool = True,
    ) -> OracleType:
        symbol, decl = self._declare(
            NodeKind.INTERFACE, name, SymbolFlags.INTERFACE, doc=doc, file_name=file_name
        )
        symbol.parent = namespace
        type_parameters = list(type_parameters)
        type = OracleType(
            flags=TypeFlags.OBJECT,
            object_flags=ObjectFlags.INTERFACE,
            symbol=symbol,
            type_parameters=type_parameters or None,
        )
        self._attach_type_parameters(decl, type_parameters)
        bases = list(extends)
        self._populate_object(
            type,
            decl,
            members or {},
            bases,
            NodeKind.PROPERTY_SIGNATURE,
            string_index=string_index,
            number_index=number_index,
        )
        type.call_signatures = list(call_signatures)
        if bases:
            decl.heritage_clauses.append(
                HeritageClause(
                    token=HeritageToken.EXTENDS,
                    types=[self._heritage_node(b, decl) for b in bases],
                )
            )
        self.checker.bind_declared(symbol, type)
        self.checker.bind_node(decl, type)
        if export:
            self.export(symbol)
        return type

    def class_(
        self,
        name: str,
        members: Mapping[str, MemberSpec] | None = None,
        *,
        extends: OracleType | None = None,
        implements: Iterable[OracleType] = (),
        statics: Mapping[str, MemberSpec] | None = None,
        constructors: Iterable[Iterable[ParamSpec]] = (),
        type_parameters: Iterable[OracleType] = (),
        doc: str | None = None,
        file_name: str | None = None,
        export: bool = True,
    ) -> OracleType:
        symbol, decl = self._declare(
            NodeKind.CLASS, name, SymbolFlags.CLASS, doc=doc, file_name=file_name
        )
        type_parameters = list(type_parameters)
        type = OracleType(
            flags=TypeFlags.OBJECT,
            object_flags=ObjectFlags.CLASS,
            symbol=symbol,
            type_parameters=type_parameters or None,
        )
        self._attach_type_parameters(decl, type_parameters)
        bases = [extends] if extends is not None else []
        self._populate_object(type, decl, members or {}, bases, NodeKind.PROPERTY_DECLARATION)

        if bases:
            decl.heritage_clauses.append(
                HeritageClause(
                    token=HeritageToken.EXTENDS, types=[self._heritage_node(extends, decl)]
                )
            )
        implemented = list(implements)
        if implemented:
            decl.heritage_clauses.append(
                HeritageClause(
                    token=HeritageToken.IMPLEMENTS,
                    types=[self._heritage_node(i, decl) for i in implemented],
                )
            )

        prototype = OracleSymbol(
            name="prototype", flags=SymbolFlags.PROPERTY | SymbolFlags.PROTOTYPE
        )
        symbol.exports.append(prototype)
        for static_name, spec in (statics or {}).items():
            static = self._member(static_name, spec, decl, NodeKind.PROPERTY_DECLARATION)
            static.value_declaration.modifiers.insert(0, "static")  # type: ignore[union-attr]
            symbol.exports.append(static)

        ctor_decls = [self._constructor(decl, params, type) for params in constructors]
        if ctor_decls:
            symbol.members[CONSTRUCTOR_MEMBER_NAME] = OracleSymbol(
                name=CONSTRUCTOR_MEMBER_NAME, declarations=ctor_decls
            )

        self.checker.bind_declared(symbol, type)
        self.checker.bind_node(decl, type)
        if export:
            self.export(symbol)
        return type

    def add_members(self, type: OracleType, members: Mapping[str, MemberSpec]) -> OracleType:
        """Add own members to a declared interface or class.

        Lets a declaration mention itself (or a type declared after it) in
        its own members.
        """
        decl = type.symbol.declarations[0]  # type: ignore[union-attr]
        kind = (
            NodeKind.PROPERTY_DECLARATION
            if decl.kind is NodeKind.CLASS
            else NodeKind.PROPERTY_SIGNATURE
        )
        added = [self._member(name, spec, decl, kind) for name, spec in members.items()]
        added_names = {p.name for p in added}
        own = [p for p in type.properties if p.declarations and p.declarations[0].parent is decl]
        inherited = [
            p for p in type.properties if p not in own and p.name not in added_names
        ]
        type.properties = own + added + inherited
        return type

    def alias(
        self,
        name: str,
        type: OracleType,
        *,
        type_parameters: Iterable[OracleType] = (),
        doc: str | None = None,
        file_name: str | None = None,
        export: bool = True,
    ) -> OracleType:
        """Declare ``type name<...> = type`` and return the aliased type."""
        symbol, decl = self._declare(
            NodeKind.TYPE_ALIAS, name, SymbolFlags.TYPE_ALIAS, doc=doc, file_name=file_name
        )
        type_parameters = list(type_parameters)
        self._attach_type_parameters(decl, type_parameters)
        # Built before the alias is attached so the node names the right-hand side.
        decl.type = self.type_node(type, parent=decl)
        if self._can_alias(type):
            type.alias_symbol = symbol
            type.alias_type_arguments = type_parameters or None
        self.checker.bind_declared(symbol, type)
        self.checker.bind_node(decl, type)
        if export:
            self.export(symbol)
        return type

    def enum(
        self,
        name: str,
        members: Mapping[str, int | str] | Iterable[str],
        *,
        const: bool = False,
        literal: bool = True,
        doc: str | None = None,
        member_docs: Mapping[str, str] | None = None,
        export: bool = True,
    ) -> OracleType:
        flags = SymbolFlags.CONST_ENUM if const else SymbolFlags.REGULAR_ENUM
        symbol, decl = self._declare(NodeKind.ENUM, name, flags, doc=doc)
        values = members if isinstance(members, Mapping) else {m: i for i, m in enumerate(members)}
        member_types = []
        for member_name, value in values.items():
            member_symbol, member_decl = self._declare(
                NodeKind.ENUM_MEMBER,
                member_name,
                SymbolFlags.ENUM_MEMBER,
                doc=(member_docs or {}).get(member_name),
            )
            member_decl.parent = decl
            literal_flag = (
                TypeFlags.STRING_LITERAL if isinstance(value, str) else TypeFlags.NUMBER_LITERAL
            )
            member_types.append(
                OracleType(
                    flags=TypeFlags.ENUM_LITERAL | literal_flag,
                    symbol=member_symbol,
                    value=value,
                )
            )
        type = OracleType(
            flags=(TypeFlags.ENUM_LITERAL if literal else TypeFlags.ENUM) | TypeFlags.UNION,
            symbol=symbol,
            types=member_types,
        )
        self.checker.bind_declared(symbol, type)
        self.checker.bind_node(decl, type)
        if export:
            self.export(symbol)
        return type

    def function(
        self,
        name: str,
        parameters: Iterable[ParamSpec] = (),
        returns: OracleType | None = None,
        *,
        type_parameters: Iterable[OracleType] = (),
        doc: str | None = None,
        export: bool = True,
    ) -> OracleSymbol:
        symbol, decl = self._declare(NodeKind.FUNCTION, name, SymbolFlags.FUNCTION, doc=doc)
        symbol.value_declaration = decl
        type = self._function_type(
            symbol, decl, list(parameters), returns or self.void, list(type_parameters)
        )
        self.checker.bind_symbol(symbol, type)
        if export:
            self.export(symbol)
        return symbol

    def function_type(
        self,
        parameters: Iterable[ParamSpec] = (),
        returns: OracleType | None = None,
        *,
        type_parameters: Iterable[OracleType] = (),
    ) -> OracleType:
        """An anonymous ``(a: A) => R`` type literal."""
        symbol, decl = self._declare(NodeKind.FUNCTION_TYPE, "__type", SymbolFlags.TYPE_LITERAL)
        return self._function_type(
            symbol, decl, list(parameters), returns or self.void, list(type_parameters)
        )

    def constructor_type(
        self,
        parameters: Iterable[ParamSpec],
        returns: OracleType,
        *,
        parent: Node | None = None,
        file_name: str | None = None,
    ) -> OracleType:
        """An anonymous ``new (a: A) => R`` type literal."""
        symbol, decl = self._declare(
            NodeKind.CONSTRUCTOR_TYPE, "__type", SymbolFlags.TYPE_LITERAL, file_name=file_name
        )
        if parent is not None:
            decl.parent = parent
        params = [self._parameter(p, decl) for p in parameters]
        decl.parameters = [p.value_declaration for p in params if p.value_declaration]
        signature = Signature(declaration=decl, parameters=params, return_type=returns)
        self.checker.bind_signature(decl, signature)
        type = OracleType(
            flags=TypeFlags.OBJECT,
            object_flags=ObjectFlags.ANONYMOUS,
            symbol=symbol,
            construct_signatures=[signature],
        )
        self.checker.bind_node(decl, type)
        return type

    def signature(
        self,
        parameters: Iterable[ParamSpec] = (),
        returns: OracleType | None = None,
        *,
        type_parameters: Iterable[OracleType] = (),
    ) -> Signature:
        """A call signature for an interface or object literal."""
        decl = Node(kind=NodeKind.FUNCTION_TYPE, name="__call")
        params = [self._parameter(p, decl) for p in parameters]
        decl.parameters = [p.value_declaration for p in params if p.value_declaration]
        signature = Signature(
            declaration=decl,
            type_parameters=list(type_parameters),
            parameters=params,
            return_type=returns or self.void,
        )
        self.checker.bind_signature(decl, signature)
        return signature

    def object_literal(
        self,
        members: Mapping[str, MemberSpec] | None = None,
        *,
        call_signatures: Iterable[Signature] = (),
        string_index: OracleType | IndexSpec | None = None,
        number_index: OracleType | IndexSpec | None = None,
    ) -> OracleType:
        symbol, decl = self._declare(NodeKind.TYPE_LITERAL, "__type", SymbolFlags.TYPE_LITERAL)
        type = OracleType(
            flags=TypeFlags.OBJECT, object_flags=ObjectFlags.ANONYMOUS, symbol=symbol
        )
        self._populate_object(
            type,
            decl,
            members or {},
            [],
            NodeKind.PROPERTY_SIGNATURE,
            string_index=string_index,
            number_index=number_index,
        )
        type.call_signatures = list(call_signatures)
        self.checker.bind_node(decl, type)
        return type

    def mapped(
        self,
        key: str,
        constraint: OracleType,
        value: OracleType | Callable[[OracleType], OracleType],
        *,
        optional: bool = False,
    ) -> OracleType:
        """``{ [key in constraint]?: value }``; ``value`` may be built from the key."""
        symbol, decl = self._declare(NodeKind.MAPPED_TYPE, "__type", SymbolFlags.TYPE_LITERAL)
        decl.question = optional
        key_type = self.type_parameter(key, constraint=constraint)
        key_decl = key_type.symbol.declarations[0]  # type: ignore[union-attr]
        key_decl.parent = decl
        decl.type_parameter = key_decl
        value_type = value(key_type) if callable(value) else value
        decl.type = self.type_node(value_type, parent=decl)
        type = OracleType(
            flags=TypeFlags.OBJECT,
            object_flags=ObjectFlags.MAPPED,
            symbol=symbol,
            type_parameter=key_type,
        )
        self.checker.bind_node(decl, type)
        return type

    def variable(
        self,
        name: str,
        type: OracleType | None = None,
        *,
        initializer: OracleType | None = None,
        doc: str | None = None,
        export: bool = True,
    ) -> OracleSymbol:
        symbol, decl = self._declare(NodeKind.VARIABLE, name, SymbolFlags.VARIABLE, doc=doc)
        symbol.value_declaration = decl
        if type is not None:
            decl.type = self.type_node(type, parent=decl)
        if initializer is not None:
            decl.initializer = Node(kind=NodeKind.EXPRESSION, parent=decl)
            self.checker.bind_node(decl.initializer, initializer)
        value = type if type is not None else initializer
        if value is not None:
            self.checker.bind_symbol(symbol, value)
            self.checker.bind_node(decl, value)
        if export:
            self.export(symbol)
        return symbol

    def namespace(self, name: str, *, file_name: str | None = None) -> OracleSymbol:
        symbol, _ = self._declare(
            NodeKind.MODULE, name, SymbolFlags.NAMESPACE, file_name=file_name
        )
        return symbol

    # -- exports ----------------------------------------------------------

    def export(self, symbol: OracleSymbol) -> None:
        if symbol not in self.module.exports:
            self.module.exports.append(symbol)

    def default_export(
        self, target: OracleSymbol | OracleType, *, doc: str | None = None
    ) -> OracleSymbol:
        """``export default <identifier>`` or ``export default <expression>``."""
        default = OracleSymbol(
            name=DEFAULT_EXPORT_NAME,
            flags=SymbolFlags.ALIAS,
            documentation=[doc] if doc else [],
        )
        node = Node(
            kind=NodeKind.EXPORT_ASSIGNMENT,
            symbol=default,
            parent=self._source(self.file_name),
        )
        default.declarations.append(node)
        if isinstance(target, OracleSymbol):
            node.expression = Node(
                kind=NodeKind.IDENTIFIER, name=target.name, symbol=target, parent=node
            )
            value = self._value_type(target)
        else:
            node.expression = Node(kind=NodeKind.EXPRESSION, parent=node)
            value = target
        self.checker.bind_node(node.expression, value)
        self.module.exports.append(default)
        return default

    def default_function(
        self,
        parameters: Iterable[ParamSpec] = (),
        returns: OracleType | None = None,
        *,
        doc: str | None = None,
    ) -> OracleSymbol:
        """``export default function (...) {}``."""
        symbol, decl = self._declare(
            NodeKind.FUNCTION, DEFAULT_EXPORT_NAME, SymbolFlags.FUNCTION, doc=doc
        )
        symbol.value_declaration = decl
        type = self._function_type(symbol, decl, list(parameters), returns or self.void, [])
        self.checker.bind_symbol(symbol, type)
        self.module.exports.append(symbol)
        return symbol

    # -- syntax -----------------------------------------------------------

    def type_node(self, type: OracleType, *, parent: Node | None = None) -> Node:
        """Build the syntax a declaration would carry for ``type``."""
        name = self._reference_name(type)
        if type in self._infer_parameters:
            node = Node(kind=NodeKind.INFER_TYPE, parent=parent)
            node.type_parameter = type.symbol.declarations[0]  # type: ignore[union-attr]
        elif name is not None:
            node = Node(kind=NodeKind.TYPE_REFERENCE, name=name, parent=parent)
        elif type.flags & TypeFlags.INDEX and type.operand is not None:
            node = Node(kind=NodeKind.KEYOF_OPERATOR, parent=parent)
            node.type = self.type_node(type.operand, parent=node)
        elif type.flags & TypeFlags.UNION and not type.flags & TypeFlags.BOOLEAN:
            node = Node(kind=NodeKind.UNION_TYPE, parent=parent)
            node.types = [self.type_node(t, parent=node) for t in type.types]
        else:
            node = Node(kind=NodeKind.TYPE_NODE, parent=parent)
        self.checker.bind_node(node, type)
        return node

    # -- internals --------------------------------------------------------

    def _intrinsic(self, flags: TypeFlags, name: str) -> OracleType:
        return OracleType(flags=flags, intrinsic_name=name)

    def _can_alias(self, type: OracleType) -> bool:
        """Only structural types remember the alias they were declared through."""
        if type.alias_symbol is not None or type.intrinsic_name is not None:
            return False
        if type.flags & (_LITERAL_FLAGS | TypeFlags.TYPE_PARAMETER | TypeFlags.ENUM_LITERAL):
            return False
        if type.object_flags & ObjectFlags.REFERENCE:
            return False
        return type.symbol is None or type.symbol.name.startswith("__")

    def _source(self, file_name: str) -> Node:
        if file_name not in self._files:
            self._files[file_name] = Node(kind=NodeKind.SOURCE_FILE, file_name=file_name)
        return self._files[file_name]

    def _declare(
        self,
        kind: NodeKind,
        name: str,
        flags: SymbolFlags,
        *,
        doc: str | None = None,
        file_name: str | None = None,
    ) -> tuple[OracleSymbol, Node]:
        decl = Node(kind=kind, name=name, parent=self._source(file_name or self.file_name))
        symbol = OracleSymbol(
            name=name, flags=flags, declarations=[decl], documentation=[doc] if doc else []
        )
        decl.symbol = symbol
        return symbol, decl

    def _reference_name(self, type: OracleType) -> str | None:
        if type.alias_symbol is not None:
            return type.alias_symbol.name
        symbol = type.symbol
        if symbol is None or symbol.name.startswith("__"):
            return None
        if type.flags & (TypeFlags.OBJECT | TypeFlags.TYPE_PARAMETER | TypeFlags.UNION):
            return symbol.name
        return None

    def _value_type(self, symbol: OracleSymbol) -> OracleType:
        if symbol.flags & _DECLARED_TYPE_SYMBOLS:
            return self.checker.get_declared_type_of_symbol(symbol)
        decl = symbol.value_declaration or symbol.declarations[0]
        return self.checker.get_type_of_symbol_at_location(symbol, decl)

    def _fill_defaults(
        self, params: list[OracleType], args: list[OracleType]
    ) -> list[OracleType]:
        filled = list(args)
        for param in params[len(args) :]:
            decl = param.symbol.declarations[0]  # type: ignore[union-attr]
            if decl.default is None:
                break
            filled.append(self.checker.get_type_at_location(decl.default))
        return filled

    def _attach_type_parameters(self, decl: Node, params: list[OracleType]) -> None:
        for param in params:
            param_decl = param.symbol.declarations[0]  # type: ignore[union-attr]
            param_decl.parent = decl
            decl.type_parameters.append(param_decl)

    def _populate_object(
        self,
        type: OracleType,
        decl: Node,
        members: Mapping[str, MemberSpec],
        bases: list[OracleType],
        member_kind: NodeKind,
        *,
        string_index: OracleType | IndexSpec | None = None,
        number_index: OracleType | IndexSpec | None = None,
    ) -> None:
        own = [self._member(name, spec, decl, member_kind) for name, spec in members.items()]
        own_names = {p.name for p in own}
        inherited: list[OracleSymbol] = []
        for base in bases:
            for prop in base.properties:
                if prop.name not in own_names and all(p.name != prop.name for p in inherited):
                    inherited.append(prop)
        type.properties = own + inherited

        type.string_index_info = self._index_info(self.string, string_index, decl)
        type.number_index_info = self._index_info(self.number, number_index, decl)
        for base in bases:
            type.string_index_info = type.string_index_info or base.string_index_info
            type.number_index_info = type.number_index_info or base.number_index_info

    def _index_info(
        self, key_type: OracleType, spec: OracleType | IndexSpec | None, parent: Node
    ) -> IndexInfo | None:
        if spec is None:
            return None
        if isinstance(spec, OracleType):
            spec = IndexSpec(type=spec)
        decl = Node(kind=NodeKind.INDEX_SIGNATURE, parent=parent)
        if spec.key_name is not None:
            decl.parameters = [Node(kind=NodeKind.PARAMETER, name=spec.key_name, parent=decl)]
        return IndexInfo(key_type=key_type, type=spec.type, declaration=decl)

    def _member(
        self, name: str, spec: MemberSpec, parent: Node, kind: NodeKind
    ) -> OracleSymbol:
        if isinstance(spec, MethodSpec):
            return self._method(name, spec, parent)
        if isinstance(spec, OracleType):
            spec = PropSpec(type=spec)
        flags = SymbolFlags.PROPERTY | (SymbolFlags.OPTIONAL if spec.optional else SymbolFlags.NONE)
        decl = Node(kind=kind, name=name, parent=parent, modifiers=list(spec.modifiers))
        decl.type = self.type_node(spec.type, parent=decl)
        symbol = OracleSymbol(
            name=name,
            flags=flags,
            declarations=[decl],
            value_declaration=decl,
            documentation=[spec.doc] if spec.doc else [],
        )
        decl.symbol = symbol
        self.checker.bind_symbol(symbol, spec.type)
        return symbol

    def _method(self, name: str, spec: MethodSpec, parent: Node) -> OracleSymbol:
        flags = SymbolFlags.METHOD | (SymbolFlags.OPTIONAL if spec.optional else SymbolFlags.NONE)
        decl = Node(kind=NodeKind.METHOD_SIGNATURE, name=name, parent=parent)
        symbol = OracleSymbol(
            name=name,
            flags=flags,
            declarations=[decl],
            value_declaration=decl,
            documentation=[spec.doc] if spec.doc else [],
        )
        decl.symbol = symbol
        type = self._function_type(
            symbol, decl, spec.parameters, spec.returns, spec.type_parameters
        )
        self.checker.bind_symbol(symbol, type)
        return symbol

    def _function_type(
        self,
        symbol: OracleSymbol,
        decl: Node,
        parameters: list[ParamSpec],
        returns: OracleType,
        type_parameters: list[OracleType],
    ) -> OracleType:
        self._attach_type_parameters(decl, type_parameters)
        params = [self._parameter(p, decl) for p in parameters]
        decl.parameters = [p.value_declaration for p in params if p.value_declaration]
        decl.type = self.type_node(returns, parent=decl)
        signature = Signature(
            declaration=decl,
            type_parameters=type_parameters,
            parameters=params,
            return_type=returns,
        )
        self.checker.bind_signature(decl, signature)
        type = OracleType(
            flags=TypeFlags.OBJECT,
            object_flags=ObjectFlags.ANONYMOUS,
            symbol=symbol,
            call_signatures=[signature],
        )
        self.checker.bind_node(decl, type)
        return type

    def _parameter(self, spec: ParamSpec, parent: Node) -> OracleSymbol:
        decl = Node(
            kind=NodeKind.PARAMETER,
            name=spec.name,
            parent=parent,
            question=spec.optional,
            dot_dot_dot=spec.rest,
        )
        symbol = OracleSymbol(
            name=spec.name, flags=SymbolFlags.VARIABLE, declarations=[decl], value_declaration=decl
        )
        decl.symbol = symbol
        if spec.type is not None:
            decl.type = self.type_node(spec.type, parent=decl)
            self.checker.bind_symbol(symbol, spec.type)
        return symbol

    def _constructor(
        self, class_decl: Node, parameters: Iterable[ParamSpec], instance: OracleType
    ) -> Node:
        decl = Node(kind=NodeKind.CONSTRUCTOR, parent=class_decl)
        params = [self._parameter(p, decl) for p in parameters]
        decl.parameters = [p.value_declaration for p in params if p.value_declaration]
        self.checker.bind_signature(
            decl, Signature(declaration=decl, parameters=params, return_type=instance)
        )
        return decl

    def _heritage_node(self, base: OracleType, parent: Node) -> Node:
        name = base.symbol.name if base.symbol else None
        node = Node(kind=NodeKind.EXPRESSION_WITH_TYPE_ARGUMENTS, parent=parent)
        node.expression = Node(kind=NodeKind.IDENTIFIER, name=name, parent=node)
        self.checker.bind_node(node, base)
        return node

    def _instantiate_member(
        self, member: OracleSymbol, mapping: dict[OracleType, OracleType]
    ) -> OracleSymbol:
        instance = OracleSymbol(
            name=member.name,
            flags=member.flags,
            declarations=member.declarations,
            value_declaration=member.value_declaration,
            documentation=member.documentation,
            target=member,
        )
        declared = self.checker._symbol_types.get(member)
        if declared is not None:
            self.checker.bind_symbol(instance, mapping.get(declared, declared))
        return instance

    def _instantiate_index(
        self, info: IndexInfo | None, mapping: dict[OracleType, OracleType]
    ) -> IndexInfo | None:
        if info is None or info.type not in mapping:
            return info
        return IndexInfo(
            key_type=info.key_type, type=mapping[info.type], declaration=info.declaration
        )
