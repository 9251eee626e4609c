"""
Model synthesis: derive capability flags from a parsed field sequence.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..schema_ast.nodes import CREATED_AT, DELETED_AT, UPDATED_AT, Field, Model


def build_model(name: str, fields: Iterable[Field], composite_id_fields: Sequence[str] = ()) -> Model:
    """
    Build a Model and compute its derived flags.

    Args:
        name: Model name
        fields: Fields in declaration order
        composite_id_fields: Field names from a @@id([...]) annotation, in listed order

    Returns:
        The Model
    """
    fields = tuple(fields)
    names = {f.name for f in fields}

    return Model(
        name=name,
        fields=fields,
        has_timestamps=CREATED_AT in names and UPDATED_AT in names,
        has_soft_delete=DELETED_AT in names,
        has_composite_id=bool(composite_id_fields),
        composite_id_fields=tuple(composite_id_fields),
    )
