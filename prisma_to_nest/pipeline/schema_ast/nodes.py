"""
Schema node definitions.

These nodes describe the models found in a Prisma schema after parsing
and classification. They are built fresh for every run and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Lifecycle marker fields
CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"
DELETED_AT = "deletedAt"

LIFECYCLE_FIELDS = frozenset({CREATED_AT, UPDATED_AT, DELETED_AT})


class Capability(str, Enum):
    """Which family of generated code a model gets.

    RICH models extend the shared base repository/service/controller,
    BASIC models get hand-written CRUD bodies.
    """

    RICH = "rich"
    BASIC = "basic"


@dataclass(frozen=True)
class Field:
    """One declared attribute of a model."""

    name: str
    type_name: str  # Declared type, "[]" stripped
    is_optional: bool = False
    is_id: bool = False
    is_unique: bool = False
    has_default: bool = False
    is_relation: bool = False
    relation_name: str | None = None
    is_array: bool = False

    def __post_init__(self):
        if self.is_relation != (self.relation_name is not None):
            raise ValueError(f"Field {self.name}: relation_name must be set if and only if is_relation is true")


@dataclass(frozen=True)
class Model:
    """One named entity extracted from the schema."""

    name: str
    fields: tuple[Field, ...] = ()
    has_timestamps: bool = False
    has_soft_delete: bool = False
    has_composite_id: bool = False
    composite_id_fields: tuple[str, ...] = field(default_factory=tuple)

    @property
    def capability(self) -> Capability:
        if self.has_timestamps and self.has_soft_delete:
            return Capability.RICH
        return Capability.BASIC

    @property
    def scalar_fields(self) -> list[Field]:
        """Fields that are neither relations, identity nor lifecycle markers."""
        return [f for f in self.fields if not f.is_relation and not f.is_id and f.name not in LIFECYCLE_FIELDS]

    def get_field(self, name: str) -> Field | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None
