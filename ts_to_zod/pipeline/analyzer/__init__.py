"""
Analyzer module.

Contains name resolution, JSDoc directive extraction, template literal
compilation and the type node compiler.
"""

from __future__ import annotations

from .compiler import SchemaCompiler, generate_zod_schema
from .directives import Directive, directive_calls, extract_directives
from .name_resolver import NameResolver
from .template_literal import compile_pattern

__all__ = [
    "SchemaCompiler",
    "generate_zod_schema",
    "Directive",
    "extract_directives",
    "directive_calls",
    "NameResolver",
    "compile_pattern",
]
