"""
AST (Abstract Syntax Tree) node definitions for TypeScript type declarations.

These nodes represent the parsed structure of a ``type`` or ``interface``
declaration before any schema generation. They form a closed set: the
compiler matches on every one of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class TypeNodeBase:
    """Base class for all type nodes."""

    # TypeScript syntax kind, used in error messages
    syntax_kind: ClassVar[str] = ""

    # Original source text (for error messages)
    source_text: str = ""


@dataclass(frozen=True)
class PrimitiveNode(TypeNodeBase):
    """Represents a keyword type (string, number, boolean, any, null, ...)."""

    syntax_kind: ClassVar[str] = "KeywordType"

    kind: str = ""


@dataclass(frozen=True)
class LiteralNode(TypeNodeBase):
    """Represents a literal type ("superman", 2, true)."""

    syntax_kind: ClassVar[str] = "LiteralType"

    value: str | int | float | bool = ""

    # Number literals keep their source spelling (0x10, 1e3, ...)
    raw: str = ""


@dataclass(frozen=True)
class ReferenceNode(TypeNodeBase):
    """Represents a reference to another declared type."""

    syntax_kind: ClassVar[str] = "TypeReference"

    name: str = ""


@dataclass(frozen=True)
class ArrayNode(TypeNodeBase):
    """Represents ``T[]`` and ``Array<T>``."""

    syntax_kind: ClassVar[str] = "ArrayType"

    element: TypeNode | None = None


@dataclass(frozen=True)
class TupleNode(TypeNodeBase):
    """Represents a fixed-length tuple ``[A, B]``."""

    syntax_kind: ClassVar[str] = "TupleType"

    elements: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class ObjectMember:
    """Represents a property signature in an object type or interface body."""

    key: str = ""
    type_node: TypeNode | None = None
    is_optional: bool = False

    # Raw JSDoc comment attached to the member, kept verbatim
    comment: str | None = None


@dataclass(frozen=True)
class IndexSignature:
    """Represents ``[key: K]: V``."""

    key_type: TypeNode | None = None
    value_type: TypeNode | None = None


@dataclass(frozen=True)
class ObjectNode(TypeNodeBase):
    """Represents an object type literal or an interface body."""

    syntax_kind: ClassVar[str] = "TypeLiteral"

    members: tuple[ObjectMember, ...] = ()
    index_signature: IndexSignature | None = None


@dataclass(frozen=True)
class UnionNode(TypeNodeBase):
    """Represents ``A | B | C``."""

    syntax_kind: ClassVar[str] = "UnionType"

    members: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class IntersectionNode(TypeNodeBase):
    """Represents ``A & B & C``."""

    syntax_kind: ClassVar[str] = "IntersectionType"

    members: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class GenericNode(TypeNodeBase):
    """Represents a generic application such as ``Pick<T, K>``."""

    syntax_kind: ClassVar[str] = "GenericType"

    base_name: str = ""
    type_arguments: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class TemplateSpan:
    """One ``${type}text`` part of a template literal type."""

    type_node: TypeNode | None = None
    trailing_text: str = ""


@dataclass(frozen=True)
class TemplateLiteralNode(TypeNodeBase):
    """Represents a template literal type such as `` `${string}_${number}` ``."""

    syntax_kind: ClassVar[str] = "TemplateLiteralType"

    head: str = ""
    spans: tuple[TemplateSpan, ...] = ()


@dataclass(frozen=True)
class ParenthesizedNode(TypeNodeBase):
    """Represents ``(T)``. Transparent for schema generation."""

    syntax_kind: ClassVar[str] = "ParenthesizedType"

    inner: TypeNode | None = None


TypeNode = (
    PrimitiveNode
    | LiteralNode
    | ReferenceNode
    | ArrayNode
    | TupleNode
    | ObjectNode
    | UnionNode
    | IntersectionNode
    | GenericNode
    | TemplateLiteralNode
    | ParenthesizedNode
)

# Every concrete node class, in the order of the union above
TYPE_NODE_CLASSES: tuple[type[TypeNodeBase], ...] = TypeNode.__args__


@dataclass(frozen=True)
class Declaration:
    """Represents a ``type`` alias or ``interface`` declaration."""

    name: str = ""
    kind: str = "type"  # "type" or "interface"
    body: TypeNode | None = None

    # Interface heritage (``interface A extends B, C``)
    bases: tuple[TypeNode, ...] = ()

    is_exported: bool = False

    # Raw JSDoc comment attached to the declaration
    comment: str | None = None

    # Position in the source unit (for log messages)
    line: int = 0
