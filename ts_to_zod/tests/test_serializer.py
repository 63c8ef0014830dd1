"""
Tests for the TypeScript serializer, built from schema expressions directly.
"""

from __future__ import annotations

from unittest import TestCase

import pytest

from ts_to_zod.pipeline.backends import TypeScriptSerializer
from ts_to_zod.pipeline.backends.typescript_serializer import format_comment
from ts_to_zod.pipeline.schema_expr import SchemaBuilder
from ts_to_zod.pipeline.schema_expr.nodes import GeneratedDeclaration


class TestTypeScriptSerializer(TestCase):
    """Test rendering of schema expressions"""

    def setUp(self):
        self.serializer = TypeScriptSerializer()
        self.z = SchemaBuilder()

    def test_chain_renders_left_to_right(self):
        expression = self.z.chain(self.z.chain(self.z.call("string"), "min", self.z.literal(2, "2")), "optional")
        self.assertEqual(self.serializer.serialize_expression(expression), "z.string().min(2).optional()")

    def test_literal_escaping(self):
        expression = self.z.call("literal", self.z.literal('a "quoted"\nline'))
        self.assertEqual(self.serializer.serialize_expression(expression), 'z.literal("a \\"quoted\\"\\nline")')

    def test_literal_number_without_raw(self):
        self.assertEqual(self.serializer.serialize_expression(self.z.call("literal", self.z.literal(3))), "z.literal(3)")

    def test_regex(self):
        expression = self.z.chain(self.z.call("string"), "regex", self.z.regex(r"^\d+$"))
        self.assertEqual(self.serializer.serialize_expression(expression), r"z.string().regex(/^\d+$/)")

    def test_regex_slashes_are_escaped(self):
        cases = [
            (r"^a/b$", r"z.string().regex(/^a\/b$/)"),
            (r"^a\/b$", r"z.string().regex(/^a\/b$/)"),
            (r"^a\\/b$", r"z.string().regex(/^a\\\/b$/)"),
        ]
        for pattern, expected in cases:
            with self.subTest(pattern=pattern):
                expression = self.z.chain(self.z.call("string"), "regex", self.z.regex(pattern))
                self.assertEqual(self.serializer.serialize_expression(expression), expected)

    def test_key_mask(self):
        expression = self.z.chain(self.z.reference("heroSchema"), "omit", self.z.key_mask(["a", "b"]))
        self.assertEqual(self.serializer.serialize_expression(expression), 'heroSchema.omit({ "a": true, "b": true })')

    def test_empty_shape(self):
        self.assertEqual(self.serializer.serialize_expression(self.z.call("object", self.z.object_shape([]))), "z.object({})")

    def test_shape_keys_and_indentation(self):
        inner = self.z.call("object", self.z.object_shape([self.z.entry("city", self.z.call("string"))]))
        shape = self.z.object_shape(
            [
                self.z.entry("name", self.z.call("string")),
                self.z.entry("Man of Steel", self.z.reference("movieSchema")),
                self.z.entry("location", inner),
            ]
        )
        self.assertEqual(
            self.serializer.serialize_expression(self.z.call("object", shape)),
            "z.object({\n"
            "    name: z.string(),\n"
            '    "Man of Steel": movieSchema,\n'
            "    location: z.object({\n"
            "        city: z.string()\n"
            "    })\n"
            "})",
        )

    def test_entry_comment(self):
        shape = self.z.object_shape([self.z.entry("name", self.z.call("string"), "/**\n   * The name\n   */")])
        self.assertEqual(
            self.serializer.serialize_expression(self.z.call("object", shape)),
            "z.object({\n    /**\n     * The name\n     */\n    name: z.string()\n})",
        )

    def test_declaration(self):
        declaration = GeneratedDeclaration(identifier="nameSchema", expression=self.z.call("string"))
        self.assertEqual(self.serializer.serialize_declaration(declaration), "export const nameSchema = z.string();")

    def test_declaration_not_exported_with_comment(self):
        declaration = GeneratedDeclaration(
            identifier="nameSchema",
            expression=self.z.call("string"),
            is_exported=False,
            comment="/** A name */",
        )
        self.assertEqual(
            self.serializer.serialize_declaration(declaration),
            "/** A name */\nconst nameSchema = z.string();",
        )

    def test_file(self):
        declarations = [
            GeneratedDeclaration(identifier="aSchema", expression=self.z.call("string")),
            GeneratedDeclaration(identifier="bSchema", expression=self.z.reference("aSchema")),
        ]
        self.assertEqual(
            self.serializer.serialize_file(declarations),
            'import { z } from "zod";\n\nexport const aSchema = z.string();\n\nexport const bSchema = aSchema;\n',
        )

    def test_file_with_alias_and_generation_comment(self):
        builder = SchemaBuilder("zod")
        declarations = [GeneratedDeclaration(identifier="aSchema", expression=builder.call("boolean"))]
        self.assertEqual(
            self.serializer.serialize_file(declarations, zod_import_value="zod", generation_comment="// Generated"),
            '// Generated\nimport { z as zod } from "zod";\n\nexport const aSchema = zod.boolean();\n',
        )


@pytest.mark.parametrize(
    "comment, expected",
    [
        ("/** one line */", ["/** one line */"]),
        ("/**\n      * deep\n      *\n      */", ["/**", " * deep", " *", " */"]),
        ("/**\nno star\n*/", ["/**", "no star", " */"]),
    ],
)
def test_format_comment(comment, expected):
    assert format_comment(comment) == expected


if __name__ == "__main__":
    pytest.main([__file__])
