"""
Errors raised while turning type declarations into Zod schemas.

Every error aborts the generation of the declaration being compiled.
Whether a batch run continues with the next declaration is decided by
the caller (see ``GeneratorConfig.skip_unsupported``).
"""

from __future__ import annotations


class ZodGenerationError(Exception):
    """Base class for all generation errors."""

    pass


class UnsupportedTypeError(ZodGenerationError):
    """Raised when a type construct has no Zod equivalent.

    This covers function types, mapped types, unknown generics and
    anything the source parser could not make sense of.
    """

    pass


class UnsupportedRecordKeyTypeError(UnsupportedTypeError):
    """Raised when a ``Record`` or index signature key is not ``string``."""

    pass


class UnsupportedGenericKeySyntaxError(UnsupportedTypeError):
    """Raised when the key argument of ``Pick``/``Omit`` is not made of string literals."""

    pass


class UnsupportedTemplateLiteralSpanError(UnsupportedTypeError):
    """Raised when a template literal interpolates an unsupported type."""

    pass


class MissingDeclarationError(ZodGenerationError):
    """Raised when a source unit holds no ``type`` or ``interface`` declaration."""

    pass
