"""
Type AST (Abstract Syntax Tree) module.

Contains the type node definitions and the tree-sitter declaration parser.
"""

from __future__ import annotations

from .nodes import (
    TYPE_NODE_CLASSES,
    ArrayNode,
    Declaration,
    GenericNode,
    IndexSignature,
    IntersectionNode,
    LiteralNode,
    ObjectMember,
    ObjectNode,
    ParenthesizedNode,
    PrimitiveNode,
    ReferenceNode,
    TemplateLiteralNode,
    TemplateSpan,
    TupleNode,
    TypeNode,
    UnionNode,
)
from .parser import DeclarationParser

__all__ = [
    "TypeNode",
    "TYPE_NODE_CLASSES",
    "PrimitiveNode",
    "LiteralNode",
    "ReferenceNode",
    "ArrayNode",
    "TupleNode",
    "ObjectNode",
    "ObjectMember",
    "IndexSignature",
    "UnionNode",
    "IntersectionNode",
    "GenericNode",
    "TemplateLiteralNode",
    "TemplateSpan",
    "ParenthesizedNode",
    "Declaration",
    "DeclarationParser",
]
