"""
Pipeline generator: TypeScript source in, Zod schemas out.

1. Parser: tree-sitter source -> declarations of type nodes
2. Compiler: declarations -> schema expressions
3. Serializer: schema expressions -> TypeScript source
"""

from __future__ import annotations

import logging
from pathlib import Path

from .. import __version__
from ..cli_utils import reconstruct_command_line
from .analyzer.compiler import SchemaCompiler
from .atomic_writer import AtomicWriter
from .backends.typescript_serializer import TypeScriptSerializer
from .config import GeneratorConfig, OutputMode
from .errors import MissingDeclarationError, UnsupportedTypeError
from .schema_expr.nodes import GeneratedDeclaration
from .type_ast.parser import DeclarationParser

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates a Zod schema file from TypeScript declarations."""

    def __init__(self, source: str, config: GeneratorConfig | None = None, language: str = "typescript"):
        """
        Initialize the generator.

        Args:
            source: TypeScript source text
            config: Generation configuration
            language: tree-sitter grammar ("typescript" or "tsx")
        """
        self.source = source
        self.config = config or GeneratorConfig()
        self.parser = DeclarationParser(language)
        self.compiler = SchemaCompiler(
            zod_import_value=self.config.zod_import_value,
            keep_comments=self.config.keep_comments,
            skip_parse_jsdoc=self.config.skip_parse_jsdoc,
        )
        self.serializer = TypeScriptSerializer()

    def compile(self) -> list[GeneratedDeclaration]:
        """
        Compile every declaration of the source, in source order.

        Returns:
            The generated declarations

        Raises:
            MissingDeclarationError: If there is nothing to generate
            UnsupportedTypeError: On the first unsupported declaration, unless skip_unsupported is set
        """
        declarations = self.parser.parse(
            self.source,
            skip_unsupported=self.config.skip_unsupported,
            ignore_names=set(self.config.ignore_declarations),
        )
        if not declarations:
            raise MissingDeclarationError("No `type` or `interface` found!")

        generated = []
        for declaration in declarations:
            try:
                generated.append(self.compiler.compile_declaration(declaration))
            except UnsupportedTypeError as e:
                if not self.config.skip_unsupported:
                    raise
                logger.warning("Skipping declaration %s (line %d): %s", declaration.name, declaration.line, e)
                continue
            logger.debug("Generated %s from %s", generated[-1].identifier, declaration.name)

        return generated

    def generate(self) -> str:
        """Generate the complete output file."""
        return self.serializer.serialize_file(
            self.compile(),
            zod_import_value=self.compiler.builder.namespace,
            generation_comment=self._generate_command_comment(),
        )

    def write(self, output: str | Path) -> None:
        """
        Generate and write the output file.

        Raises:
            FileExistsError: If the file exists and the output mode is not "force"
        """
        content = self.generate()
        writer = AtomicWriter(atomic=self.config.output.atomic_write)
        if self.config.output.mode == OutputMode.FORCE:
            writer.write(Path(output), content)
        else:
            writer.write_if_not_exists(Path(output), content)
        logger.info("Wrote %s", output)

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        # Reconstruct command line using CLI utilities
        try:
            from ..ts_to_zod import ts_to_zod as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            # Fallback if Click command not available
            command_line = "ts_to_zod"

        return f"// Generated by ts_to_zod v{__version__} : {command_line}"
