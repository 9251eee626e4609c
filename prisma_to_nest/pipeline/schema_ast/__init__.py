"""
Schema AST - nodes describing the models of a Prisma schema.

The parser lives in .parser and is imported from there directly.
"""

from __future__ import annotations

from .nodes import CREATED_AT, DELETED_AT, LIFECYCLE_FIELDS, UPDATED_AT, Capability, Field, Model

__all__ = [
    "CREATED_AT",
    "UPDATED_AT",
    "DELETED_AT",
    "LIFECYCLE_FIELDS",
    "Capability",
    "Field",
    "Model",
]
