"""
Tests for the tree-sitter declaration parser.
"""

from __future__ import annotations

from textwrap import dedent
from unittest import TestCase

import pytest

from ts_to_zod.pipeline.errors import MissingDeclarationError, UnsupportedTypeError
from ts_to_zod.pipeline.type_ast import (
    ArrayNode,
    GenericNode,
    IntersectionNode,
    LiteralNode,
    ObjectNode,
    ParenthesizedNode,
    PrimitiveNode,
    ReferenceNode,
    TemplateLiteralNode,
    TupleNode,
    UnionNode,
)
from ts_to_zod.pipeline.type_ast.parser import DeclarationParser, decode_string_literal, parse_number_literal


class TestDeclarationParser(TestCase):
    """Test conversion of TypeScript syntax to type nodes"""

    def setUp(self):
        self.parser = DeclarationParser()

    def _body(self, type_source):
        return self.parser.find_declaration(f"type T = {type_source};").body

    def test_keywords(self):
        for kind in ("string", "number", "boolean", "any", "void", "unknown", "never", "bigint", "null", "undefined"):
            with self.subTest(kind=kind):
                body = self._body(kind)
                self.assertIsInstance(body, PrimitiveNode)
                self.assertEqual(body.kind, kind)

    def test_literals(self):
        self.assertEqual(self._body('"superman"').value, "superman")
        self.assertEqual(self._body("42").value, 42)
        self.assertEqual(self._body("-1.5").value, -1.5)
        self.assertIs(self._body("true").value, True)
        self.assertIs(self._body("false").value, False)

    def test_number_literal_keeps_source_spelling(self):
        body = self._body("0x10")
        self.assertIsInstance(body, LiteralNode)
        self.assertEqual(body.value, 16)
        self.assertEqual(body.raw, "0x10")

    def test_references(self):
        self.assertEqual(self._body("Superman").name, "Superman")
        self.assertEqual(self._body("Heroes.Superman").name, "Heroes.Superman")

    def test_arrays(self):
        for source in ("string[]", "Array<string>", "ReadonlyArray<string>", "readonly string[]"):
            with self.subTest(source=source):
                body = self._body(source)
                self.assertIsInstance(body, ArrayNode)
                self.assertEqual(body.element.kind, "string")

    def test_tuple(self):
        body = self._body("[string, Hero]")
        self.assertIsInstance(body, TupleNode)
        self.assertEqual([type(e) for e in body.elements], [PrimitiveNode, ReferenceNode])

    def test_union_is_flattened(self):
        body = self._body('"a" | "b" | "c" | "d"')
        self.assertIsInstance(body, UnionNode)
        self.assertEqual([m.value for m in body.members], ["a", "b", "c", "d"])

    def test_leading_pipe_union(self):
        body = self.parser.find_declaration('type T =\n  | "a"\n  | "b";').body
        self.assertEqual([m.value for m in body.members], ["a", "b"])

    def test_intersection_is_flattened(self):
        body = self._body("A & B & C")
        self.assertIsInstance(body, IntersectionNode)
        self.assertEqual([m.name for m in body.members], ["A", "B", "C"])

    def test_parenthesized(self):
        body = self._body("(A | B)")
        self.assertIsInstance(body, ParenthesizedNode)
        self.assertIsInstance(body.inner, UnionNode)

    def test_generic(self):
        body = self._body('Pick<Hero, "name">')
        self.assertIsInstance(body, GenericNode)
        self.assertEqual(body.base_name, "Pick")
        self.assertEqual(body.type_arguments[1].value, "name")

    def test_template_literal(self):
        body = self._body("`user.${string}-${number}!`")
        self.assertIsInstance(body, TemplateLiteralNode)
        self.assertEqual(body.head, "user.")
        self.assertEqual([s.type_node.kind for s in body.spans], ["string", "number"])
        self.assertEqual([s.trailing_text for s in body.spans], ["-", "!"])

    def test_object_members(self):
        body = self._body('{ name: string; "kal-l"?: number, readonly age: number }')
        self.assertIsInstance(body, ObjectNode)
        self.assertEqual([m.key for m in body.members], ["name", "kal-l", "age"])
        self.assertEqual([m.is_optional for m in body.members], [False, True, False])
        self.assertIsNone(body.index_signature)

    def test_index_signature(self):
        body = self._body("{ [key: string]: Movie; title: string }")
        self.assertEqual(body.index_signature.key_type.kind, "string")
        self.assertEqual(body.index_signature.value_type.name, "Movie")
        self.assertEqual([m.key for m in body.members], ["title"])

    def test_member_comments(self):
        source = dedent(
            """
            type Hero = {
              /** The name */
              name: string;
              // not a JSDoc comment
              age: number;
            };
            """
        )
        body = self.parser.find_declaration(source).body
        self.assertEqual([m.comment for m in body.members], ["/** The name */", None])

    def test_method_signature_is_unsupported(self):
        with self.assertRaises(UnsupportedTypeError):
            self._body("{ fly(): void }")

    def test_mapped_type_is_unsupported(self):
        with self.assertRaises(UnsupportedTypeError):
            self._body("{ [K in Keys]: string }")


class TestDeclarations(TestCase):
    """Test declaration discovery"""

    def setUp(self):
        self.parser = DeclarationParser()

    def test_declarations_in_source_order(self):
        source = dedent(
            """
            import { Power } from "./power";

            export type Name = string;
            const notAType = 1;
            interface Hero {
              name: Name;
            }
            export declare type Planet = "krypton";
            """
        )
        declarations = self.parser.parse(source)
        self.assertEqual([d.name for d in declarations], ["Name", "Hero", "Planet"])
        self.assertEqual([d.kind for d in declarations], ["type", "interface", "type"])
        self.assertEqual([d.is_exported for d in declarations], [True, False, True])
        self.assertEqual(declarations[1].line, 6)

    def test_interface_bases(self):
        declaration = self.parser.find_declaration("interface A extends B, C { a: string }")
        self.assertEqual([base.name for base in declaration.bases], ["B", "C"])

    def test_declaration_comment(self):
        source = "/**\n * A hero\n */\nexport interface Hero {}\n"
        self.assertEqual(self.parser.find_declaration(source).comment, "/**\n * A hero\n */")

    def test_detached_comment_is_not_attached(self):
        source = "/** File header */\n\nexport type Name = string;\n"
        self.assertIsNone(self.parser.find_declaration(source).comment)

    def test_ignore_names(self):
        source = "type A = string;\ntype B = number;"
        self.assertEqual([d.name for d in self.parser.parse(source, ignore_names={"A"})], ["B"])

    def test_unsupported_declaration_raises(self):
        with self.assertRaises(UnsupportedTypeError):
            self.parser.parse("type A = string;\ntype Fn = (a: string) => void;")

    def test_skip_unsupported(self):
        source = "type A = string;\ntype Fn = (a: string) => void;\ntype B = number;"
        with self.assertLogs("ts_to_zod.pipeline.type_ast.parser", level="WARNING") as logs:
            declarations = self.parser.parse(source, skip_unsupported=True)
        self.assertEqual([d.name for d in declarations], ["A", "B"])
        self.assertIn("Fn", logs.output[0])

    def test_syntax_error_raises(self):
        with self.assertRaisesRegex(UnsupportedTypeError, "Syntax error at line 2"):
            self.parser.parse("type A = string;\ntype G = Array<>;")

    def test_skip_syntax_error(self):
        source = "type A = string;\n\ntype C = string |;\n\ntype B = number;"
        with self.assertLogs("ts_to_zod.pipeline.type_ast.parser", level="WARNING") as logs:
            declarations = self.parser.parse(source, skip_unsupported=True)
        names = [d.name for d in declarations]
        self.assertIn("A", names)
        self.assertNotIn("C", names)
        self.assertIn("Syntax error", "\n".join(logs.output))

    def test_missing_declaration(self):
        with self.assertRaises(MissingDeclarationError):
            self.parser.find_declaration("export const hero = 'superman';")

    def test_parse_file(self):
        import tempfile
        from pathlib import Path

        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "hero.ts"
            path.write_text("export type Hero = { name: string };", encoding="utf-8")
            self.assertEqual([d.name for d in self.parser.parse_file(path)], ["Hero"])


@pytest.mark.parametrize(
    "text, expected",
    [
        ('"superman"', "superman"),
        ("'clark kent'", "clark kent"),
        (r'"say \"hi\""', 'say "hi"'),
        (r"'it\'s'", "it's"),
        (r'"tab\there"', "tab\there"),
        (r'"é"', "é"),
        (r'"\uD83D\uDE00"', "\U0001F600"),
        (r'"\u{1F600}"', "\U0001F600"),
    ],
)
def test_decode_string_literal(text, expected):
    assert decode_string_literal(text) == expected


def test_decode_unpaired_surrogate():
    with pytest.raises(UnsupportedTypeError, match="Unpaired surrogate"):
        decode_string_literal(r'"\uD83D"')


@pytest.mark.parametrize(
    "text, expected",
    [("2", 2), ("-3", -3), ("1.5", 1.5), ("1e3", 1000.0), ("0b101", 5), ("0o17", 15), ("1_000", 1000)],
)
def test_parse_number_literal(text, expected):
    assert parse_number_literal(text) == expected


if __name__ == "__main__":
    pytest.main([__file__])
