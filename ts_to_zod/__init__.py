"""TypeScript to Zod Schema Generator

A Python package for generating Zod validation schemas from TypeScript
type aliases and interfaces, with refinements taken from JSDoc tags.
"""

__version__ = "0.1.0"
__author__ = "François Lagunas"

from .pipeline import (
    AtomicWriter,
    GeneratorConfig,
    MissingDeclarationError,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    UnsupportedTypeError,
    ZodGenerationError,
)
from .pipeline.analyzer import generate_zod_schema

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "ZodGenerationError",
    "UnsupportedTypeError",
    "MissingDeclarationError",
    "generate_zod_schema",
]
