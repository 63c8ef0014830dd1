"""
TypeScript serializer for Zod schema expressions.

Converts schema expression trees to TypeScript source code:
- Object shapes render one member per line, 4-space indentation per level
- Chained calls render left to right on the same line
- Keys that are not bare identifiers are double-quoted
- JSDoc comments are re-emitted above their member
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import assert_never

import jinja2

from ...utils import is_bare_identifier
from ..schema_expr.nodes import (
    Argument,
    ArrayArgument,
    BaseCall,
    GeneratedDeclaration,
    KeyMask,
    LiteralArgument,
    ObjectShape,
    RegexArgument,
    SchemaExpression,
    SchemaReference,
)


def format_comment(comment: str) -> list[str]:
    """Re-indent a JSDoc comment so that continuation lines start with `` *``."""
    lines = comment.strip().splitlines()
    formatted = [lines[0].strip()]
    for line in lines[1:]:
        line = line.strip()
        formatted.append(f" {line}" if line.startswith("*") else line)
    return formatted


class TypeScriptSerializer:
    """Serializes generated declarations to TypeScript source code."""

    INDENT = "    "  # 4 spaces

    # Template directory name
    TEMPLATE_LANG = "typescript"

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template("prefix.ts.jinja2")
        self.declaration_template = self.jinja_env.get_template("declaration.ts.jinja2")

    def serialize_file(
        self,
        declarations: list[GeneratedDeclaration],
        zod_import_value: str = "z",
        generation_comment: str = "",
    ) -> str:
        """
        Serialize a complete output file.

        Args:
            declarations: Generated declarations, in output order
            zod_import_value: Identifier Zod is imported as
            generation_comment: Optional first line of the file

        Returns:
            TypeScript source code
        """
        prefix = self.prefix_template.render(
            generation_comment=generation_comment,
            zod_import_value=zod_import_value,
        )
        parts = [prefix] + [self.serialize_declaration(declaration) for declaration in declarations]
        return "\n\n".join(parts) + "\n"

    def serialize_declaration(self, declaration: GeneratedDeclaration) -> str:
        """Serialize one ``const`` declaration."""
        comment = "\n".join(format_comment(declaration.comment)) if declaration.comment else ""
        return self.declaration_template.render(
            comment=comment,
            is_exported=declaration.is_exported,
            identifier=declaration.identifier,
            expression=self.serialize_expression(declaration.expression),
        )

    def serialize_expression(self, expression: SchemaExpression, level: int = 0) -> str:
        """
        Serialize a schema expression.

        Args:
            expression: The expression
            level: Indentation level of the line the expression starts on

        Returns:
            Source text of the expression
        """
        parts = [self._serialize_base(expression.base, level)]
        for call in expression.chain:
            parts.append(f".{call.method}({self._serialize_arguments(call.arguments, level)})")
        return "".join(parts)

    def _serialize_base(self, base: BaseCall | SchemaReference, level: int) -> str:
        if isinstance(base, SchemaReference):
            return base.identifier
        return f"{base.namespace}.{base.constructor}({self._serialize_arguments(base.arguments, level)})"

    def _serialize_arguments(self, arguments: tuple[Argument, ...], level: int) -> str:
        return ", ".join(self._serialize_argument(argument, level) for argument in arguments)

    def _serialize_argument(self, argument: Argument, level: int) -> str:
        match argument:
            case SchemaExpression():
                return self.serialize_expression(argument, level)
            case LiteralArgument():
                return self._serialize_literal(argument)
            case ArrayArgument():
                return "[" + ", ".join(self._serialize_argument(item, level) for item in argument.items) + "]"
            case ObjectShape():
                return self._serialize_shape(argument, level)
            case KeyMask():
                return self._serialize_key_mask(argument)
            case RegexArgument():
                return self._regex_literal(argument.pattern)
            case _:
                assert_never(argument)

    def _serialize_literal(self, literal: LiteralArgument) -> str:
        value = literal.value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return self._quote(value)
        return literal.raw or str(value)

    def _serialize_shape(self, shape: ObjectShape, level: int) -> str:
        if not shape.entries:
            return "{}"

        indent = self.INDENT * (level + 1)
        lines: list[str] = []
        for i, entry in enumerate(shape.entries):
            if entry.comment:
                lines.extend(indent + line for line in format_comment(entry.comment))
            comma = "," if i < len(shape.entries) - 1 else ""
            value = self.serialize_expression(entry.value, level + 1)
            lines.append(f"{indent}{self._serialize_key(entry.key)}: {value}{comma}")

        return "{\n" + "\n".join(lines) + "\n" + self.INDENT * level + "}"

    def _serialize_key_mask(self, mask: KeyMask) -> str:
        if not mask.keys:
            return "{}"
        return "{ " + ", ".join(f"{self._quote(key)}: true" for key in mask.keys) + " }"

    def _serialize_key(self, key: str) -> str:
        return key if is_bare_identifier(key) else self._quote(key)

    @staticmethod
    def _quote(text: str) -> str:
        """Quote a string for a double-quoted TypeScript context."""
        return json.dumps(text, ensure_ascii=False)

    @staticmethod
    def _regex_literal(pattern: str) -> str:
        """Render a pattern as a ``/.../`` literal, escaping bare slashes."""
        chars: list[str] = []
        escaped = False
        for char in pattern:
            if char == "/" and not escaped:
                chars.append("\\")
            chars.append(char)
            escaped = char == "\\" and not escaped
        return "/" + "".join(chars) + "/"
