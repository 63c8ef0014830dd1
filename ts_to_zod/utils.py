"""
Utility functions for the TypeScript to Zod generator.
"""

import re

# Regex pattern to split text into words, handling camelCase and acronym boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

# A key that can be written without quotes in an object literal
_BARE_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def to_camel_case(text: str) -> str:
    """Convert PascalCase, snake_case or space-separated text to camelCase.

    Examples:
        "MyHeroName" -> "myHeroName"
        "loisLaneCapturedCount" -> "loisLaneCapturedCount"
        "IDidFindYou" -> "iDidFindYou"
        "HTMLParser" -> "htmlParser"
        "user_profile" -> "userProfile"
        "Vec3D" -> "vec3D"

    Args:
        text: The text to convert

    Returns:
        camelCase string
    """
    if not text:
        return ""
    words = _split_into_words(_normalize_separators(text))
    if not words:
        return ""
    first, rest = words[0], words[1:]
    return first.lower() + "".join(word.capitalize() for word in rest)


def is_bare_identifier(text: str) -> bool:
    """Check whether an object key can be written without quotes."""
    return bool(_BARE_IDENTIFIER.match(text))
