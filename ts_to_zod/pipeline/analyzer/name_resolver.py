"""
Name resolver for schema identifiers.

Converts declared type names to the identifier of their generated schema
constant and picks the namespace used for every Zod constructor call.
"""

from __future__ import annotations

from ...utils import to_camel_case


class NameResolver:
    """Resolves schema identifiers and the Zod import alias."""

    # Appended to every generated schema identifier
    SCHEMA_SUFFIX = "Schema"

    # Namespace used for Zod constructors when no override is given
    DEFAULT_ZOD_IMPORT_VALUE = "z"

    def resolve(self, declared_name: str) -> str:
        """
        Resolve a declared type name to its schema identifier.

        The mapping only depends on the name, so a reference to a type
        declared elsewhere resolves to the same identifier as the
        declaration itself.

        Args:
            declared_name: Type name as written in the source

        Returns:
            Identifier of the generated schema (e.g. "superman" -> "supermanSchema")
        """
        return f"{to_camel_case(declared_name)}{self.SCHEMA_SUFFIX}"

    def schema_library_alias(self, override: str | None = None) -> str:
        """Return the namespace prefix for Zod constructors."""
        return override or self.DEFAULT_ZOD_IMPORT_VALUE
