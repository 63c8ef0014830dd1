"""
Template literal type to regular expression compiler.

    `${string}_${number}`  ->  ^\\w+_\\d+$
"""

from __future__ import annotations

import re

from ..errors import UnsupportedTemplateLiteralSpanError
from ..type_ast.nodes import ParenthesizedNode, PrimitiveNode, TemplateLiteralNode, TypeNode

# Interpolated keyword -> pattern fragment
SPAN_PATTERNS = {
    "string": r"\w+",
    "number": r"\d+",
    "boolean": r"(true|false)",
    "any": r"[\s\S]*",
    "unknown": r"[\s\S]*",
}

_PATTERN_METACHARACTERS = re.compile(r"[.*+?^${}()|\[\]\\/]")


def escape_pattern_text(text: str) -> str:
    """Backslash-escape every pattern metacharacter in literal text."""
    return _PATTERN_METACHARACTERS.sub(lambda match: "\\" + match.group(0), text)


def _span_pattern(type_node: TypeNode | None) -> str:
    while isinstance(type_node, ParenthesizedNode):
        type_node = type_node.inner

    if isinstance(type_node, PrimitiveNode) and type_node.kind in SPAN_PATTERNS:
        return SPAN_PATTERNS[type_node.kind]

    if isinstance(type_node, PrimitiveNode):
        kind = type_node.kind
    else:
        kind = type_node.syntax_kind if type_node is not None else "missing type"
    raise UnsupportedTemplateLiteralSpanError(f"Unsupported type in template literal: {kind}")


def compile_pattern(node: TemplateLiteralNode) -> str:
    """
    Compile a template literal type to an anchored pattern.

    Args:
        node: The template literal node

    Returns:
        Pattern source, anchored at both ends

    Raises:
        UnsupportedTemplateLiteralSpanError: If a span interpolates an unsupported type
    """
    parts = ["^", escape_pattern_text(node.head)]
    for span in node.spans:
        parts.append(_span_pattern(span.type_node))
        parts.append(escape_pattern_text(span.trailing_text))
    parts.append("$")
    return "".join(parts)
