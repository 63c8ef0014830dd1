"""
Builder for Zod schema expressions.

Assembles ``SchemaExpression`` trees for the compiler. Chained calls are
appended in exactly the order they are requested, never reordered or
deduplicated.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from .nodes import (
    Argument,
    ArrayArgument,
    BaseCall,
    ChainedCall,
    KeyMask,
    LiteralArgument,
    ObjectShape,
    RegexArgument,
    SchemaExpression,
    SchemaReference,
    ShapeEntry,
)


class SchemaBuilder:
    """Builds schema expressions under a given Zod namespace."""

    def __init__(self, namespace: str = "z"):
        """
        Initialize the builder.

        Args:
            namespace: Identifier the Zod module is imported as
        """
        self.namespace = namespace

    def call(self, constructor: str, *arguments: Argument) -> SchemaExpression:
        """Build a Zod constructor call, e.g. ``z.array(...)``."""
        return SchemaExpression(base=BaseCall(self.namespace, constructor, tuple(arguments)))

    def reference(self, identifier: str) -> SchemaExpression:
        """Build a bare reference to another schema."""
        return SchemaExpression(base=SchemaReference(identifier))

    def chain(self, expression: SchemaExpression, method: str, *arguments: Argument) -> SchemaExpression:
        """Append one chained call to an expression."""
        return replace(expression, chain=expression.chain + (ChainedCall(method, tuple(arguments)),))

    def chain_all(self, expression: SchemaExpression, calls: Iterable[ChainedCall]) -> SchemaExpression:
        """Append several chained calls, keeping their order."""
        return replace(expression, chain=expression.chain + tuple(calls))

    def literal(self, value: str | int | float | bool, raw: str = "") -> LiteralArgument:
        return LiteralArgument(value, raw)

    def array(self, items: Iterable[Argument]) -> ArrayArgument:
        return ArrayArgument(tuple(items))

    def entry(self, key: str, value: SchemaExpression, comment: str | None = None) -> ShapeEntry:
        return ShapeEntry(key, value, comment)

    def object_shape(self, entries: Iterable[ShapeEntry]) -> ObjectShape:
        return ObjectShape(tuple(entries))

    def key_mask(self, keys: Iterable[str]) -> KeyMask:
        return KeyMask(tuple(keys))

    def regex(self, pattern: str) -> RegexArgument:
        return RegexArgument(pattern)
