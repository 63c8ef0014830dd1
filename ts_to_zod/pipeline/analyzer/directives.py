"""
JSDoc directive extraction.

Turns the JSDoc block attached to a member into ``@tag argument`` pairs
and maps the known tags to Zod refinement calls. Unknown tags and tags
with a malformed argument produce no call; the comment itself is still
re-emitted verbatim by the serializer.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..schema_expr.nodes import ChainedCall, LiteralArgument, RegexArgument

_TAG_LINE = re.compile(r"^@(\w+)(?:\s+(.*))?$")
_NUMBER = re.compile(r"^-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?$")
_NON_NEGATIVE_INTEGER = re.compile(r"^\d+$")


@dataclass(frozen=True)
class Directive:
    """A ``@tag argument`` line of a JSDoc comment."""

    tag: str = ""
    argument: str = ""


def _comment_lines(comment: str) -> list[str]:
    """Strip comment delimiters and leading stars."""
    body = comment.strip()
    if body.startswith("/**"):
        body = body[3:]
    elif body.startswith("/*"):
        body = body[2:]
    if body.endswith("*/"):
        body = body[:-2]

    lines = []
    for line in body.splitlines():
        line = line.strip()
        if line.startswith("*"):
            line = line[1:].strip()
        lines.append(line)
    return lines


def extract_directives(comment: str | None) -> list[Directive]:
    """
    Extract the tag lines of a JSDoc comment, in order.

    Args:
        comment: Raw comment text (``/** ... */``) or None

    Returns:
        One Directive per ``@tag`` line, unknown tags included
    """
    if not comment:
        return []

    directives = []
    for line in _comment_lines(comment):
        match = _TAG_LINE.match(line)
        if match:
            directives.append(Directive(tag=match.group(1), argument=(match.group(2) or "").strip()))
    return directives


def _number(text: str) -> LiteralArgument:
    value = int(text) if _NON_NEGATIVE_INTEGER.match(text.lstrip("-")) else float(text)
    return LiteralArgument(value=value, raw=text)


# @format value -> Zod string method
FORMAT_METHODS = {
    "email": "email",
    "uri": "url",
    "url": "url",
    "uuid": "uuid",
    "cuid": "cuid",
    "date-time": "datetime",
}


def _format_call(argument: str) -> ChainedCall | None:
    method = FORMAT_METHODS.get(argument)
    return ChainedCall(method) if method else None


def _pattern_call(argument: str) -> ChainedCall | None:
    if not argument:
        return None
    return ChainedCall("regex", (RegexArgument(argument),))


def _bound_call(method: str) -> Callable[[str], ChainedCall | None]:
    def build(argument: str) -> ChainedCall | None:
        if not _NUMBER.match(argument):
            return None
        return ChainedCall(method, (_number(argument),))

    return build


def _length_call(method: str) -> Callable[[str], ChainedCall | None]:
    def build(argument: str) -> ChainedCall | None:
        if not _NON_NEGATIVE_INTEGER.match(argument):
            return None
        return ChainedCall(method, (_number(argument),))

    return build


# Known tag -> builder of its refinement call (None when the argument is malformed)
DIRECTIVE_CALLS: dict[str, Callable[[str], ChainedCall | None]] = {
    "format": _format_call,
    "pattern": _pattern_call,
    "minimum": _bound_call("min"),
    "maximum": _bound_call("max"),
    "minLength": _length_call("min"),
    "maxLength": _length_call("max"),
    # Misspellings accepted by earlier releases
    "minLenght": _length_call("min"),
    "maxLenght": _length_call("max"),
}


def directive_calls(directives: Iterable[Directive]) -> list[ChainedCall]:
    """Map directives to refinement calls, keeping their order."""
    calls = []
    for directive in directives:
        build = DIRECTIVE_CALLS.get(directive.tag)
        if build is None:
            continue
        call = build(directive.argument)
        if call is not None:
            calls.append(call)
    return calls
