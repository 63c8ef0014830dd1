"""
TypeScript declaration parser that builds a type AST.

Phase 1 of the pipeline: parse TypeScript source with tree-sitter and
convert every top-level ``type`` alias and ``interface`` into a
``Declaration`` holding type nodes. No schema generation happens here.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection
from pathlib import Path
from typing import cast

from tree_sitter import Node
from tree_sitter_language_pack import SupportedLanguage, get_parser

from ..errors import MissingDeclarationError, UnsupportedTypeError
from .nodes import (
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

logger = logging.getLogger(__name__)

DECLARATION_TYPES = {"type_alias_declaration", "interface_declaration"}

# Identifiers the grammar may not report as predefined types
KEYWORD_IDENTIFIERS = {"bigint", "undefined", "null"}

# Generic names that are plain array notations
ARRAY_GENERICS = {"Array", "ReadonlyArray"}

_STRING_ESCAPE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    "\n": "",
}


def _decode_escape(match: re.Match) -> str:
    escape = match.group(1)
    if escape.startswith("u{"):
        return chr(int(escape[2:-1], 16))
    if escape.startswith("u") and len(escape) == 5:
        return chr(int(escape[1:], 16))
    if escape.startswith("x") and len(escape) == 3:
        return chr(int(escape[1:], 16))
    return _SIMPLE_ESCAPES.get(escape, escape)


def decode_string_literal(text: str) -> str:
    """Decode a quoted TypeScript string literal (``"a\\"b"`` -> ``a"b``).

    ``\\uXXXX`` escapes are UTF-16 code units, so surrogate pairs are joined
    back into one character.

    Raises:
        UnsupportedTypeError: If the literal holds an unpaired surrogate
    """
    decoded = _STRING_ESCAPE.sub(_decode_escape, text[1:-1])
    try:
        return decoded.encode("utf-16", "surrogatepass").decode("utf-16")
    except UnicodeDecodeError:
        raise UnsupportedTypeError(f"Unpaired surrogate in string literal: {text}") from None


def parse_number_literal(text: str) -> int | float:
    """Parse a TypeScript number literal (decimal, hex, octal, binary, exponent)."""
    cleaned = "".join(text.split()).replace("_", "")
    try:
        return int(cleaned, 0)
    except ValueError:
        pass
    try:
        return float(cleaned)
    except ValueError:
        raise UnsupportedTypeError(f"Unsupported number literal: {text}") from None


class _TreeConverter:
    """Converts the tree-sitter nodes of one source unit to type nodes."""

    def __init__(self, source: bytes):
        self.source = source

    def text(self, node: Node) -> str:
        return self.slice(node.start_byte, node.end_byte)

    def slice(self, start: int, end: int) -> str:
        return self.source[start:end].decode("utf-8")

    def syntax_error(self, node: Node) -> UnsupportedTypeError:
        """Build the error for a subtree that tree-sitter could only partially parse."""
        culprit = self.first_error(node) or node
        if culprit.is_missing:
            detail = f"missing {culprit.type}"
        else:
            detail = self.text(culprit).strip()
        return UnsupportedTypeError(f"Syntax error at line {culprit.start_point[0] + 1}: {detail}")

    @staticmethod
    def first_error(node: Node) -> Node | None:
        """Depth-first search for the first ERROR or MISSING node."""
        if node.is_error or node.is_missing:
            return node
        for child in node.children:
            if child.has_error or child.is_missing:
                found = _TreeConverter.first_error(child)
                if found is not None:
                    return found
        return None

    @staticmethod
    def named_children(node: Node) -> list[Node]:
        """Named children without comments."""
        return [child for child in node.named_children if child.type != "comment"]

    def first_named_child(self, node: Node) -> Node:
        children = self.named_children(node)
        if not children:
            raise UnsupportedTypeError(f"Unsupported type syntax ({node.type}): {self.text(node)}")
        return children[0]

    def leading_jsdoc(self, node: Node) -> str | None:
        """Return the ``/** ... */`` comment directly above a statement, if any."""
        previous = node.prev_named_sibling
        if previous is None or previous.type != "comment":
            return None
        text = self.text(previous)
        if not text.startswith("/**"):
            return None
        if previous.end_point[0] < node.start_point[0] - 1:
            return None
        return text

    def declaration(self, node: Node, is_exported: bool, comment: str | None) -> Declaration:
        name = self.text(node.child_by_field_name("name"))

        if node.type == "type_alias_declaration":
            return Declaration(
                name=name,
                kind="type",
                body=self.convert(node.child_by_field_name("value")),
                is_exported=is_exported,
                comment=comment,
                line=node.start_point[0] + 1,
            )

        bases: list[TypeNode] = []
        for child in node.named_children:
            if child.type in ("extends_type_clause", "extends_clause"):
                bases.extend(self.convert(base) for base in self.named_children(child))

        return Declaration(
            name=name,
            kind="interface",
            body=self.object_type(node.child_by_field_name("body")),
            bases=tuple(bases),
            is_exported=is_exported,
            comment=comment,
            line=node.start_point[0] + 1,
        )

    def convert(self, node: Node | None) -> TypeNode:
        """
        Convert a tree-sitter type node.

        Args:
            node: Node of any type syntax

        Returns:
            The matching type node

        Raises:
            UnsupportedTypeError: If the syntax has no type node equivalent
        """
        if node is None:
            raise UnsupportedTypeError("Missing type")
        if node.is_missing or node.is_error or node.has_error:
            raise self.syntax_error(node)

        text = self.text(node)

        match node.type:
            case "predefined_type":
                return PrimitiveNode(source_text=text, kind=text)
            case "type_identifier":
                if text in KEYWORD_IDENTIFIERS:
                    return PrimitiveNode(source_text=text, kind=text)
                return ReferenceNode(source_text=text, name=text)
            case "nested_type_identifier":
                return ReferenceNode(source_text=text, name=text)
            case "literal_type":
                return self.literal(node)
            case "array_type":
                return ArrayNode(source_text=text, element=self.convert(self.first_named_child(node)))
            case "readonly_type":
                # readonly T[] validates like T[]
                return self.convert(self.first_named_child(node))
            case "tuple_type":
                return TupleNode(source_text=text, elements=tuple(self.tuple_member(c) for c in self.named_children(node)))
            case "object_type" | "interface_body":
                return self.object_type(node)
            case "union_type":
                return UnionNode(source_text=text, members=tuple(self.flatten(node, "union_type")))
            case "intersection_type":
                return IntersectionNode(source_text=text, members=tuple(self.flatten(node, "intersection_type")))
            case "generic_type":
                return self.generic(node)
            case "parenthesized_type":
                return ParenthesizedNode(source_text=text, inner=self.convert(self.first_named_child(node)))
            case "template_literal_type":
                return self.template_literal(node)
            case _:
                raise UnsupportedTypeError(f"Unsupported type syntax ({node.type}): {text}")

    def literal(self, node: Node) -> TypeNode:
        children = self.named_children(node)
        inner = children[0] if children else node
        text = self.text(inner)

        if inner.type == "string":
            return LiteralNode(source_text=text, value=decode_string_literal(text))
        if inner.type in ("number", "unary_expression"):
            return LiteralNode(source_text=text, value=parse_number_literal(text), raw="".join(text.split()))
        if text in ("true", "false"):
            return LiteralNode(source_text=text, value=text == "true")
        if text in ("null", "undefined"):
            return PrimitiveNode(source_text=text, kind=text)
        raise UnsupportedTypeError(f"Unsupported literal type: {text}")

    def tuple_member(self, node: Node) -> TypeNode:
        if node.type in ("optional_type", "rest_type", "required_parameter", "optional_parameter"):
            raise UnsupportedTypeError(f"Unsupported tuple member: {self.text(node)}")
        return self.convert(node)

    def flatten(self, node: Node, node_type: str) -> list[TypeNode]:
        """Flatten the left-nested binary ``|``/``&`` nodes into one member list."""
        members: list[TypeNode] = []
        for child in self.named_children(node):
            if child.type == node_type:
                members.extend(self.flatten(child, node_type))
            else:
                members.append(self.convert(child))
        return members

    def generic(self, node: Node) -> TypeNode:
        text = self.text(node)
        name = self.text(node.child_by_field_name("name"))
        arguments_node = node.child_by_field_name("type_arguments")
        arguments = tuple(self.convert(child) for child in self.named_children(arguments_node))

        if name in ARRAY_GENERICS and len(arguments) == 1:
            return ArrayNode(source_text=text, element=arguments[0])
        return GenericNode(source_text=text, base_name=name, type_arguments=arguments)

    def object_type(self, node: Node | None) -> ObjectNode:
        if node is None:
            raise UnsupportedTypeError("Missing object body")

        members: list[ObjectMember] = []
        index_signature = None
        pending_comment = None

        for child in node.children:
            if child.type == "comment":
                comment = self.text(child)
                if comment.startswith("/**"):
                    pending_comment = comment
                continue
            if not child.is_named:
                continue

            if child.type == "property_signature":
                members.append(self.property_signature(child, pending_comment))
            elif child.type == "index_signature":
                if index_signature is not None:
                    raise UnsupportedTypeError(f"Multiple index signatures are not supported: {self.text(node)}")
                index_signature = self.index_signature(child)
            else:
                raise UnsupportedTypeError(f"Unsupported member syntax ({child.type}): {self.text(child)}")
            pending_comment = None

        return ObjectNode(source_text=self.text(node), members=tuple(members), index_signature=index_signature)

    def property_signature(self, node: Node, comment: str | None) -> ObjectMember:
        name_node = node.child_by_field_name("name")
        if name_node.type == "string":
            key = decode_string_literal(self.text(name_node))
        elif name_node.type in ("property_identifier", "number", "private_property_identifier"):
            key = self.text(name_node)
        else:
            raise UnsupportedTypeError(f"Unsupported property name: {self.text(name_node)}")

        annotation = node.child_by_field_name("type")
        return ObjectMember(
            key=key,
            type_node=self.annotation_type(annotation) if annotation is not None else None,
            is_optional=any(child.type == "?" for child in node.children),
            comment=comment,
        )

    def annotation_type(self, annotation: Node) -> TypeNode:
        if annotation.type != "type_annotation":
            raise UnsupportedTypeError(f"Unsupported type annotation: {self.text(annotation)}")
        return self.convert(self.first_named_child(annotation))

    def index_signature(self, node: Node) -> IndexSignature:
        if any(child.type == "mapped_type_clause" for child in node.named_children):
            raise UnsupportedTypeError(f"Mapped types are not supported: {self.text(node)}")

        return IndexSignature(
            key_type=self.convert(node.child_by_field_name("index_type")),
            value_type=self.annotation_type(node.child_by_field_name("type")),
        )

    def template_literal(self, node: Node) -> TemplateLiteralNode:
        # Literal chunks are sliced from the source between the ${...} spans
        span_nodes = [child for child in node.named_children if child.type == "template_type"]
        start = node.start_byte + 1
        end = node.end_byte - 1

        head = self.slice(start, span_nodes[0].start_byte if span_nodes else end)
        spans = []
        for i, span_node in enumerate(span_nodes):
            next_start = span_nodes[i + 1].start_byte if i + 1 < len(span_nodes) else end
            spans.append(
                TemplateSpan(
                    type_node=self.convert(self.first_named_child(span_node)),
                    trailing_text=self.slice(span_node.end_byte, next_start),
                )
            )

        return TemplateLiteralNode(source_text=self.text(node), head=head, spans=tuple(spans))


class DeclarationParser:
    """Parses TypeScript source into declarations."""

    def __init__(self, language: str = "typescript"):
        """
        Initialize the parser.

        Args:
            language: tree-sitter grammar to use ("typescript" or "tsx")
        """
        self.language = language
        self._parser = get_parser(cast(SupportedLanguage, language))

    def parse(
        self,
        source: str,
        skip_unsupported: bool = False,
        ignore_names: Collection[str] = (),
    ) -> list[Declaration]:
        """
        Parse every top-level ``type`` and ``interface`` declaration.

        Args:
            source: TypeScript source text
            skip_unsupported: Log and skip declarations with unsupported syntax instead of raising
            ignore_names: Declaration names to leave out

        Returns:
            Declarations in source order

        Raises:
            UnsupportedTypeError: If a declaration uses syntax with no type node equivalent
                or the source has syntax errors
        """
        source_bytes = source.encode("utf-8")
        tree = self._parser.parse(source_bytes)
        converter = _TreeConverter(source_bytes)

        error_rows: set[int] = set()
        for statement in tree.root_node.named_children:
            if statement.is_error:
                error_rows.update(range(statement.start_point[0], statement.end_point[0] + 1))

        declarations = []
        for statement in tree.root_node.named_children:
            if statement.is_error:
                error = converter.syntax_error(statement)
                if not skip_unsupported:
                    raise error
                logger.warning("Skipping unparsable source: %s", error)
                continue

            node, is_exported = self._unwrap_statement(statement)
            if node is None or node.type not in DECLARATION_TYPES:
                continue

            name_node = node.child_by_field_name("name")
            name = converter.text(name_node) if name_node is not None else "<unnamed>"
            if name in ignore_names:
                logger.debug("Ignoring declaration %s", name)
                continue

            try:
                # A declaration sharing a line with unparsable text may have been cut short
                rows = range(statement.start_point[0], statement.end_point[0] + 1)
                if statement.has_error or name_node is None or error_rows.intersection(rows):
                    raise converter.syntax_error(statement)
                declarations.append(converter.declaration(node, is_exported, converter.leading_jsdoc(statement)))
            except UnsupportedTypeError as e:
                if not skip_unsupported:
                    raise
                logger.warning("Skipping declaration %s: %s", name, e)

        logger.debug("Parsed %d declaration(s)", len(declarations))
        return declarations

    def parse_file(
        self,
        path: str | Path,
        skip_unsupported: bool = False,
        ignore_names: Collection[str] = (),
    ) -> list[Declaration]:
        """Parse a TypeScript file."""
        return self.parse(Path(path).read_text(encoding="utf-8"), skip_unsupported, ignore_names)

    def find_declaration(self, source: str) -> Declaration:
        """
        Return the first declaration of a source unit.

        Raises:
            MissingDeclarationError: If the source holds no ``type`` or ``interface``
        """
        declarations = self.parse(source)
        if not declarations:
            raise MissingDeclarationError("No `type` or `interface` found!")
        return declarations[0]

    @staticmethod
    def _unwrap_statement(statement: Node) -> tuple[Node | None, bool]:
        """Return the declaration inside ``export``/``declare`` wrappers."""
        if statement.type == "export_statement":
            declaration = statement.child_by_field_name("declaration")
            if declaration is not None and declaration.type == "ambient_declaration":
                declaration, _ = DeclarationParser._unwrap_statement(declaration)
            return declaration, True
        if statement.type == "ambient_declaration":
            inner = [child for child in statement.named_children if child.type in DECLARATION_TYPES]
            return (inner[0] if inner else None), False
        return statement, False
