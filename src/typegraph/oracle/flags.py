"""Flag sets and syntax kinds exposed by the type-checking oracle.

Flag sets overlap by design of the oracle (a boolean is a union of its two
literals, an enum member is both a number literal and an enum literal), so
classifiers must test them in a fixed priority order.
"""

from enum import IntEnum, IntFlag, StrEnum


class TypeFlags(IntFlag):
    NONE = 0
    ANY = 1 << 0
    UNKNOWN = 1 << 1
    STRING = 1 << 2
    NUMBER = 1 << 3
    BOOLEAN = 1 << 4
    ENUM = 1 << 5
    BIGINT = 1 << 6
    STRING_LITERAL = 1 << 7
    NUMBER_LITERAL = 1 << 8
    BOOLEAN_LITERAL = 1 << 9
    ENUM_LITERAL = 1 << 10
    BIGINT_LITERAL = 1 << 11
    ES_SYMBOL = 1 << 12
    UNIQUE_ES_SYMBOL = 1 << 13
    VOID = 1 << 14
    UNDEFINED = 1 << 15
    NULL = 1 << 16
    NEVER = 1 << 17
    TYPE_PARAMETER = 1 << 18
    OBJECT = 1 << 19
    UNION = 1 << 20
    INTERSECTION = 1 << 21
    INDEX = 1 << 22
    INDEXED_ACCESS = 1 << 23
    CONDITIONAL = 1 << 24
    SUBSTITUTION = 1 << 25
    NON_PRIMITIVE = 1 << 26


class ObjectFlags(IntFlag):
    NONE = 0
    CLASS = 1 << 0
    INTERFACE = 1 << 1
    REFERENCE = 1 << 2
    TUPLE = 1 << 3
    ANONYMOUS = 1 << 4
    MAPPED = 1 << 5


class SymbolFlags(IntFlag):
    NONE = 0
    VARIABLE = 1 << 0
    PROPERTY = 1 << 1
    ENUM_MEMBER = 1 << 2
    FUNCTION = 1 << 3
    CLASS = 1 << 4
    INTERFACE = 1 << 5
    CONST_ENUM = 1 << 6
    REGULAR_ENUM = 1 << 7
    METHOD = 1 << 8
    TYPE_LITERAL = 1 << 9
    TYPE_PARAMETER = 1 << 10
    TYPE_ALIAS = 1 << 11
    ALIAS = 1 << 12
    PROTOTYPE = 1 << 13
    OPTIONAL = 1 << 14
    MODULE = 1 << 15
    NAMESPACE = 1 << 16


class IndexKind(IntEnum):
    STRING = 0
    NUMBER = 1


class NodeKind(StrEnum):
    """Syntax kinds the extractor inspects on declarations and type nodes."""

    # Declarations
    SOURCE_FILE = "sourceFile"
    MODULE = "module"
    INTERFACE = "interface"
    CLASS = "class"
    ENUM = "enum"
    ENUM_MEMBER = "enumMember"
    TYPE_ALIAS = "typeAlias"
    TYPE_PARAMETER = "typeParameter"
    VARIABLE = "variable"
    FUNCTION = "function"
    PARAMETER = "parameter"
    PROPERTY_SIGNATURE = "propertySignature"
    PROPERTY_DECLARATION = "propertyDeclaration"
    METHOD_SIGNATURE = "methodSignature"
    METHOD_DECLARATION = "methodDeclaration"
    CONSTRUCTOR = "constructor"
    INDEX_SIGNATURE = "indexSignature"
    EXPORT_ASSIGNMENT = "exportAssignment"
    # Type nodes
    TYPE_REFERENCE = "typeReference"
    TYPE_LITERAL = "typeLiteral"
    KEYOF_OPERATOR = "keyofOperator"
    UNION_TYPE = "unionType"
    INFER_TYPE = "inferType"
    MAPPED_TYPE = "mappedType"
    FUNCTION_TYPE = "functionType"
    CONSTRUCTOR_TYPE = "constructorType"
    TYPE_NODE = "typeNode"
    # Expressions
    IDENTIFIER = "identifier"
    EXPRESSION_WITH_TYPE_ARGUMENTS = "expressionWithTypeArguments"
    EXPRESSION = "expression"


class HeritageToken(StrEnum):
    EXTENDS = "extends"
    IMPLEMENTS = "implements"
