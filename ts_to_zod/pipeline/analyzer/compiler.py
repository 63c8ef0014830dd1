"""
Type node to Zod schema compiler.

Walks a declaration's type nodes recursively, decides the shape of each
node and builds the matching schema expression. Any construct without a
Zod equivalent raises immediately, so a declaration is either compiled
entirely or not at all.
"""

from __future__ import annotations

from typing import assert_never

from ..errors import (
    UnsupportedGenericKeySyntaxError,
    UnsupportedRecordKeyTypeError,
    UnsupportedTypeError,
)
from ..schema_expr.builder import SchemaBuilder
from ..schema_expr.nodes import GeneratedDeclaration, ObjectShape, SchemaExpression
from ..type_ast.nodes import (
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
    TupleNode,
    TypeNode,
    UnionNode,
)
from .directives import directive_calls, extract_directives
from .name_resolver import NameResolver
from .template_literal import compile_pattern

# Keyword types with a zero-argument Zod constructor of the same name
PRIMITIVE_KINDS = {
    "string",
    "number",
    "boolean",
    "any",
    "undefined",
    "null",
    "void",
    "bigint",
    "unknown",
    "never",
    "symbol",
}

RECORD_DOC_URL = "https://github.com/colinhacks/zod/tree/v3#records"


def unwrap(node: TypeNode | None) -> TypeNode | None:
    """Strip any number of enclosing parentheses."""
    while isinstance(node, ParenthesizedNode):
        node = node.inner
    return node


def describe(node: TypeNode | None) -> str:
    """Short description of a node for error messages."""
    if node is None:
        return "missing type"
    if node.source_text:
        return node.source_text
    if isinstance(node, PrimitiveNode):
        return node.kind
    return node.syntax_kind


class SchemaCompiler:
    """Compiles type nodes and declarations to schema expressions."""

    def __init__(
        self,
        zod_import_value: str | None = None,
        keep_comments: bool = True,
        skip_parse_jsdoc: bool = False,
        name_resolver: NameResolver | None = None,
    ):
        """
        Initialize the compiler.

        Args:
            zod_import_value: Identifier Zod is imported as (default "z")
            keep_comments: Whether JSDoc comments are carried to the output
            skip_parse_jsdoc: Whether to ignore JSDoc tags entirely
            name_resolver: Resolver for schema identifiers
        """
        self.name_resolver = name_resolver or NameResolver()
        self.builder = SchemaBuilder(self.name_resolver.schema_library_alias(zod_import_value))
        self.keep_comments = keep_comments
        self.skip_parse_jsdoc = skip_parse_jsdoc

        self._generic_handlers = {
            "Record": self._compile_record,
            "Partial": self._compile_partial,
            "Required": self._compile_required,
            "Readonly": self._compile_readonly,
            "Pick": self._compile_pick,
            "Omit": self._compile_omit,
        }

    def compile_declaration(self, declaration: Declaration, var_name: str | None = None) -> GeneratedDeclaration:
        """
        Compile a whole declaration.

        Args:
            declaration: The parsed declaration
            var_name: Identifier of the generated schema (resolved from the name if omitted)

        Returns:
            GeneratedDeclaration binding the identifier to the schema expression
        """
        identifier = var_name or self.name_resolver.resolve(declaration.name)

        if declaration.kind == "interface" and declaration.bases:
            expression = self._compile_heritage(declaration)
        else:
            expression = self.compile(declaration.body)

        expression = self.builder.chain_all(expression, self._refinements(declaration.comment))

        return GeneratedDeclaration(
            identifier=identifier,
            expression=expression,
            is_exported=declaration.is_exported,
            comment=declaration.comment if self.keep_comments else None,
            source_name=declaration.name,
        )

    def compile(self, node: TypeNode | None) -> SchemaExpression:
        """
        Compile a type node to a schema expression.

        Args:
            node: Any type node

        Returns:
            The schema expression

        Raises:
            UnsupportedTypeError: If the node (or one of its children) has no Zod equivalent
        """
        node = unwrap(node)
        if node is None:
            raise UnsupportedTypeError("Missing type node")

        match node:
            case PrimitiveNode():
                return self._compile_primitive(node)
            case LiteralNode():
                return self.builder.call("literal", self.builder.literal(node.value, node.raw))
            case ReferenceNode():
                return self.builder.reference(self.name_resolver.resolve(node.name))
            case ArrayNode():
                return self.builder.call("array", self.compile(node.element))
            case TupleNode():
                return self.builder.call("tuple", self.builder.array(self.compile(e) for e in node.elements))
            case ObjectNode():
                return self._compile_object(node)
            case UnionNode():
                return self.builder.call("union", self.builder.array(self.compile(m) for m in node.members))
            case IntersectionNode():
                return self._compile_intersection(node)
            case GenericNode():
                return self._compile_generic(node)
            case TemplateLiteralNode():
                string = self.builder.call("string")
                return self.builder.chain(string, "regex", self.builder.regex(compile_pattern(node)))
            case ParenthesizedNode():
                return self.compile(node.inner)
            case _:
                assert_never(node)

    def _compile_primitive(self, node: PrimitiveNode) -> SchemaExpression:
        if node.kind not in PRIMITIVE_KINDS:
            raise UnsupportedTypeError(f"Unsupported keyword type: {node.kind}")
        return self.builder.call(node.kind)

    def _compile_object(self, node: ObjectNode) -> SchemaExpression:
        if node.index_signature is None:
            return self.builder.call("object", self._object_shape(node.members))

        record = self._compile_index_signature(node.index_signature)
        if not node.members:
            return record

        # Named members only; the index signature is not repeated in the object
        shape = self.builder.call("object", self._object_shape(node.members))
        return self.builder.chain(record, "and", shape)

    def _object_shape(self, members: tuple[ObjectMember, ...]) -> ObjectShape:
        entries = []
        for member in members:
            value = self.compile(member.type_node) if member.type_node is not None else self.builder.call("any")
            value = self.builder.chain_all(value, self._refinements(member.comment))
            if member.is_optional:
                value = self.builder.chain(value, "optional")
            comment = member.comment if self.keep_comments else None
            entries.append(self.builder.entry(member.key, value, comment))
        return self.builder.object_shape(entries)

    def _refinements(self, comment: str | None):
        if self.skip_parse_jsdoc:
            return []
        return directive_calls(extract_directives(comment))

    def _compile_index_signature(self, signature: IndexSignature) -> SchemaExpression:
        key = unwrap(signature.key_type)
        if not self._is_string_keyword(key):
            raise UnsupportedRecordKeyTypeError(
                f"Index signatures with {describe(key)} keys are not supported ({RECORD_DOC_URL})"
            )
        return self.builder.call("record", self.compile(signature.value_type))

    def _compile_intersection(self, node: IntersectionNode) -> SchemaExpression:
        if not node.members:
            raise UnsupportedTypeError("Empty intersection type")

        first, *rest = node.members
        result = self.compile(first)
        for member in rest:
            result = self.builder.chain(result, "and", self.compile(member))
        return result

    def _compile_heritage(self, declaration: Declaration) -> SchemaExpression:
        """Compile ``interface A extends B, C { ... }`` as ``b.merge(c).extend({...})``."""
        first, *rest = declaration.bases
        result = self.compile(first)
        for base in rest:
            result = self.builder.chain(result, "merge", self.compile(base))

        body = unwrap(declaration.body)
        if not isinstance(body, ObjectNode):
            raise UnsupportedTypeError(f"Unsupported interface body: {describe(body)}")

        result = self.builder.chain(result, "extend", self._object_shape(body.members))
        if body.index_signature is None:
            return result
        return self.builder.chain(self._compile_index_signature(body.index_signature), "and", result)

    def _compile_generic(self, node: GenericNode) -> SchemaExpression:
        handler = self._generic_handlers.get(node.base_name)
        if handler is None:
            raise UnsupportedTypeError(f"Generic type {node.base_name}<…> is not supported")
        return handler(node)

    def _arguments(self, node: GenericNode, count: int) -> tuple[TypeNode, ...]:
        if len(node.type_arguments) != count:
            raise UnsupportedTypeError(
                f"{node.base_name} expects {count} type argument(s), got {len(node.type_arguments)}"
            )
        return node.type_arguments

    def _compile_record(self, node: GenericNode) -> SchemaExpression:
        key, value = self._arguments(node, 2)
        key = unwrap(key)
        if not self._is_string_keyword(key):
            raise UnsupportedRecordKeyTypeError(f"Record<{describe(key)}, …> are not supported ({RECORD_DOC_URL})")
        return self.builder.call("record", self.compile(value))

    def _compile_partial(self, node: GenericNode) -> SchemaExpression:
        (target,) = self._arguments(node, 1)
        return self.builder.chain(self.compile(target), "partial")

    def _compile_required(self, node: GenericNode) -> SchemaExpression:
        (target,) = self._arguments(node, 1)
        return self.builder.chain(self.compile(target), "required")

    def _compile_readonly(self, node: GenericNode) -> SchemaExpression:
        # Readonly has no runtime meaning
        (target,) = self._arguments(node, 1)
        return self.compile(target)

    def _compile_pick(self, node: GenericNode) -> SchemaExpression:
        return self._compile_key_mask(node, "pick")

    def _compile_omit(self, node: GenericNode) -> SchemaExpression:
        return self._compile_key_mask(node, "omit")

    def _compile_key_mask(self, node: GenericNode, method: str) -> SchemaExpression:
        target, keys = self._arguments(node, 2)
        mask = self.builder.key_mask(self._literal_keys(node.base_name, keys))
        return self.builder.chain(self.compile(target), method, mask)

    def _literal_keys(self, generic_name: str, keys_node: TypeNode) -> list[str]:
        """Collect the string literals of a ``Pick``/``Omit`` key argument, in order."""
        keys_node = unwrap(keys_node)

        if isinstance(keys_node, UnionNode):
            keys = []
            for part in self._union_parts(keys_node):
                if not self._is_string_literal(part):
                    raise UnsupportedGenericKeySyntaxError(
                        f"{generic_name}<T, K> unknown syntax: ({part.syntax_kind} as K union part not supported)"
                    )
                keys.append(part.value)
            return keys

        if self._is_string_literal(keys_node):
            return [keys_node.value]

        kind = keys_node.syntax_kind if keys_node is not None else "missing type"
        raise UnsupportedGenericKeySyntaxError(f"{generic_name}<T, K> unknown syntax: ({kind} as K not supported)")

    @classmethod
    def _union_parts(cls, union: UnionNode) -> list[TypeNode]:
        """Members of a union, with parenthesized inner unions flattened in place."""
        parts: list[TypeNode] = []
        for member in union.members:
            member = unwrap(member)
            if isinstance(member, UnionNode):
                parts.extend(cls._union_parts(member))
            else:
                parts.append(member)
        return parts

    @staticmethod
    def _is_string_keyword(node: TypeNode | None) -> bool:
        return isinstance(node, PrimitiveNode) and node.kind == "string"

    @staticmethod
    def _is_string_literal(node: TypeNode | None) -> bool:
        return isinstance(node, LiteralNode) and isinstance(node.value, str)


def generate_zod_schema(
    declaration: Declaration,
    var_name: str | None = None,
    zod_import_value: str | None = None,
    keep_comments: bool = True,
    skip_parse_jsdoc: bool = False,
) -> GeneratedDeclaration:
    """
    Convenience function to compile one declaration.

    Args:
        declaration: The parsed declaration
        var_name: Identifier of the generated schema
        zod_import_value: Identifier Zod is imported as (default "z")
        keep_comments: Whether JSDoc comments are carried to the output
        skip_parse_jsdoc: Whether to ignore JSDoc tags entirely

    Returns:
        The generated declaration
    """
    compiler = SchemaCompiler(
        zod_import_value=zod_import_value,
        keep_comments=keep_comments,
        skip_parse_jsdoc=skip_parse_jsdoc,
    )
    return compiler.compile_declaration(declaration, var_name)
