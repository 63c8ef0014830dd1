"""
Pipeline - TypeScript declarations to Zod schemas.

1. Phase 1 (Parser): Parse TypeScript source into a type AST (tree-sitter)
2. Phase 2 (Compiler): Compile type nodes into Zod schema expressions
3. Phase 3 (Serializer): Render schema expressions as TypeScript source
4. Phase 4 (Writer): Optionally write the output file atomically
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .config import GeneratorConfig, OutputConfig, OutputMode
from .errors import (
    MissingDeclarationError,
    UnsupportedGenericKeySyntaxError,
    UnsupportedRecordKeyTypeError,
    UnsupportedTemplateLiteralSpanError,
    UnsupportedTypeError,
    ZodGenerationError,
)
from .generator import PipelineGenerator

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "ZodGenerationError",
    "UnsupportedTypeError",
    "UnsupportedRecordKeyTypeError",
    "UnsupportedGenericKeySyntaxError",
    "UnsupportedTemplateLiteralSpanError",
    "MissingDeclarationError",
]
