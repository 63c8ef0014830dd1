"""
Schema expression module.

Contains the Zod expression node definitions and their builder.
"""

from __future__ import annotations

from .builder import SchemaBuilder
from .nodes import (
    ArrayArgument,
    BaseCall,
    ChainedCall,
    GeneratedDeclaration,
    KeyMask,
    LiteralArgument,
    ObjectShape,
    RegexArgument,
    SchemaExpression,
    SchemaReference,
    ShapeEntry,
)

__all__ = [
    "SchemaBuilder",
    "SchemaExpression",
    "BaseCall",
    "SchemaReference",
    "ChainedCall",
    "LiteralArgument",
    "ArrayArgument",
    "ObjectShape",
    "ShapeEntry",
    "KeyMask",
    "RegexArgument",
    "GeneratedDeclaration",
]
