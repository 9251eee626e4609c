"""
Field classification.

Turns the raw groups captured from one field declaration into a Field node:
scalar type mapping, relation detection and attribute flags.
"""

from __future__ import annotations

import re

from ..schema_ast.nodes import Field

# Prisma scalar types the generator knows about
BUILTIN_SCALARS = frozenset({"String", "Int", "Boolean", "DateTime", "Decimal", "BigInt", "Json"})

# Prisma scalar -> TypeScript type
TYPE_MAP: dict[str, str] = {
    "String": "string",
    "Int": "number",
    "BigInt": "bigint",
    "Boolean": "boolean",
    "DateTime": "Date",
    "Decimal": "Decimal",
    "Json": "any",
}

FALLBACK_TYPE = "any"

ARRAY_MARKER = "[]"


def map_type(type_name: str) -> str:
    """Map a Prisma type name to a TypeScript type, "any" when unknown."""
    return TYPE_MAP.get(type_name, FALLBACK_TYPE)


def is_relation_type(type_name: str) -> bool:
    """A capitalized type that is not a builtin scalar refers to another model."""
    bare = type_name.replace(ARRAY_MARKER, "")
    return bool(bare) and bare[0].isupper() and bare not in BUILTIN_SCALARS


_STRING_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"')


def has_attribute(attributes: str, attribute: str) -> bool:
    """Check for a single-@ field attribute anywhere in the attribute suffix, outside string literals."""
    bare = _STRING_LITERAL.sub('""', attributes)
    return re.search(rf"(?<!@)@{re.escape(attribute)}\b", bare) is not None


def classify_field(name: str, type_token: str, optional_marker: str | None = None, attributes: str = "") -> Field:
    """
    Build a Field from a parsed declaration.

    Args:
        name: Field name
        type_token: Declared type, possibly ending with "[]"
        optional_marker: "?" when the type was declared nullable
        attributes: Remainder of the line after the type

    Returns:
        Classified Field
    """
    is_array = type_token.endswith(ARRAY_MARKER)
    type_name = type_token.replace(ARRAY_MARKER, "")
    is_relation = is_relation_type(type_name)

    return Field(
        name=name,
        type_name=type_name,
        is_optional=bool(optional_marker),
        is_id=has_attribute(attributes, "id"),
        is_unique=has_attribute(attributes, "unique"),
        has_default=has_attribute(attributes, "default"),
        is_relation=is_relation,
        relation_name=type_name if is_relation else None,
        is_array=is_array,
    )
