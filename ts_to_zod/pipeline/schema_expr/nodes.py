"""
Zod schema expression node definitions.

These nodes represent a Zod schema as a call tree: a base constructor
call (or a reference to another generated schema) followed by chained
method calls. They are built by ``SchemaBuilder`` and serialized to
TypeScript source by ``TypeScriptSerializer``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExpressionNode:
    """Base class for all expression nodes."""

    pass


@dataclass(frozen=True)
class BaseCall(ExpressionNode):
    """Represents a Zod constructor call (e.g. ``z.string()``)."""

    namespace: str = "z"
    constructor: str = ""
    arguments: tuple[Argument, ...] = ()


@dataclass(frozen=True)
class SchemaReference(ExpressionNode):
    """Represents a reference to another generated schema (e.g. ``heroSchema``)."""

    identifier: str = ""


@dataclass(frozen=True)
class ChainedCall(ExpressionNode):
    """Represents a chained method call (e.g. ``.optional()``)."""

    method: str = ""
    arguments: tuple[Argument, ...] = ()


@dataclass(frozen=True)
class SchemaExpression(ExpressionNode):
    """A base call or reference followed by chained calls, in order."""

    base: BaseCall | SchemaReference = BaseCall()
    chain: tuple[ChainedCall, ...] = ()


@dataclass(frozen=True)
class LiteralArgument(ExpressionNode):
    """Represents a literal value argument (string, number, boolean)."""

    value: str | int | float | bool = ""

    # Source spelling for numbers
    raw: str = ""


@dataclass(frozen=True)
class ArrayArgument(ExpressionNode):
    """Represents an array literal argument (e.g. the members of ``z.union``)."""

    items: tuple[Argument, ...] = ()


@dataclass(frozen=True)
class ShapeEntry(ExpressionNode):
    """One ``key: schema`` entry of an object shape."""

    key: str = ""
    value: SchemaExpression = SchemaExpression()

    # Raw JSDoc comment re-emitted above the entry
    comment: str | None = None


@dataclass(frozen=True)
class ObjectShape(ExpressionNode):
    """Represents the object literal passed to ``z.object`` or ``.extend``."""

    entries: tuple[ShapeEntry, ...] = ()


@dataclass(frozen=True)
class KeyMask(ExpressionNode):
    """Represents the ``{ "a": true }`` argument of ``.pick`` and ``.omit``."""

    keys: tuple[str, ...] = ()


@dataclass(frozen=True)
class RegexArgument(ExpressionNode):
    """Represents a regular expression literal argument."""

    pattern: str = ""


Argument = SchemaExpression | LiteralArgument | ArrayArgument | ObjectShape | KeyMask | RegexArgument


@dataclass(frozen=True)
class GeneratedDeclaration:
    """A schema identifier bound to its expression."""

    identifier: str = ""
    expression: SchemaExpression = SchemaExpression()
    is_exported: bool = True

    # Raw JSDoc comment of the source declaration
    comment: str | None = None

    # Name of the source declaration
    source_name: str = ""
