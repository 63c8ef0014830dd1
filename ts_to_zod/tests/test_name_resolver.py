#!/usr/bin/env python3

import pytest

from ts_to_zod.pipeline.analyzer import NameResolver
from ts_to_zod.utils import is_bare_identifier, to_camel_case


@pytest.mark.parametrize(
    "text, expected",
    [
        ("MyHeroName", "myHeroName"),
        ("loisLaneCapturedCount", "loisLaneCapturedCount"),
        ("IDidFindYou", "iDidFindYou"),
        ("HTMLParser", "htmlParser"),
        ("user_profile", "userProfile"),
        ("super-man", "superMan"),
        ("Vec3D", "vec3D"),
        ("Superman", "superman"),
        ("", ""),
    ],
)
def test_to_camel_case(text, expected):
    assert to_camel_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("name", True),
        ("_private", True),
        ("$ref", True),
        ("underKryptonite2", True),
        ("i.will.kill.everybody", False),
        ("Man of Steel", False),
        ("kal-l", False),
        ("2fast", False),
        ("", False),
    ],
)
def test_is_bare_identifier(text, expected):
    assert is_bare_identifier(text) is expected


class TestNameResolver:
    """Test cases for schema identifier resolution"""

    def test_resolve(self):
        resolver = NameResolver()
        assert resolver.resolve("Superman") == "supermanSchema"
        assert resolver.resolve("IDidFindYou") == "iDidFindYouSchema"

    def test_resolve_is_stable(self):
        # References to a declaration resolve to the declaration's identifier
        assert NameResolver().resolve("BadGuy") == NameResolver().resolve("BadGuy") == "badGuySchema"

    def test_schema_library_alias(self):
        resolver = NameResolver()
        assert resolver.schema_library_alias() == "z"
        assert resolver.schema_library_alias(None) == "z"
        assert resolver.schema_library_alias("zod") == "zod"


if __name__ == "__main__":
    pytest.main([__file__])
