"""
Code generation backends.

Contains the TypeScript serializer for Zod schemas.
"""

from __future__ import annotations

from .typescript_serializer import TypeScriptSerializer

__all__ = [
    "TypeScriptSerializer",
]
