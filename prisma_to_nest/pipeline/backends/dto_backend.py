"""
DTO backend: create and update payload classes for a model.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ...utils import to_kebab_case
from ..analyzer.field_classifier import map_type
from ..schema_ast.nodes import Field, Model
from .base import Artifact, CodeBackend

# Prisma scalar -> class-validator type decorator
TYPE_VALIDATORS: dict[str, str] = {
    "String": "IsString",
    "Int": "IsNumber",
    "Decimal": "IsNumber",
    "Boolean": "IsBoolean",
    "DateTime": "IsDateString",
}

# Imported in this order, presence validators first
VALIDATOR_IMPORT_ORDER = ["IsOptional", "IsNotEmpty", "IsString", "IsNumber", "IsBoolean", "IsDateString", "IsArray"]

DTO_DIR = "dto"


@dataclass(frozen=True)
class DtoField:
    """A payload property as rendered in the create DTO."""

    name: str
    ts_type: str
    optional: bool
    decorators: tuple[str, ...]


class DtoBackend(CodeBackend):
    """Generates dto/create-<model>.dto.ts and dto/update-<model>.dto.ts."""

    def emit(self, model: Model) -> list[Artifact]:
        kebab = to_kebab_case(model.name)
        context = self._prepare_model_context(model)
        context.update(self._prepare_dto_context(model))

        return [
            Artifact(Path(DTO_DIR) / self._file_name(f"create-{kebab}.dto"), self._render("create-dto", context)),
            Artifact(Path(DTO_DIR) / self._file_name(f"update-{kebab}.dto"), self._render("update-dto", context)),
        ]

    def is_optional(self, model: Model, field: Field) -> bool:
        """Declared nullable, defaulted, or forced optional by configuration."""
        return field.is_optional or field.has_default or field.name in self.config.optional_overrides_for(model.name)

    def _prepare_dto_context(self, model: Model) -> dict[str, Any]:
        fields = [self._prepare_field(model, f) for f in model.scalar_fields]

        used = {"IsOptional", "IsNotEmpty"}
        for f in model.scalar_fields:
            if f.type_name in TYPE_VALIDATORS:
                used.add(TYPE_VALIDATORS[f.type_name])
            if f.is_array:
                used.add("IsArray")

        return {
            "fields": fields,
            "VALIDATOR_IMPORTS": [name for name in VALIDATOR_IMPORT_ORDER if name in used],
            "HAS_DECIMAL": any(f.type_name == "Decimal" for f in model.scalar_fields),
        }

    def _prepare_field(self, model: Model, field: Field) -> DtoField:
        optional = self.is_optional(model, field)
        decorators = ["@ApiPropertyOptional()", "@IsOptional()"] if optional else ["@ApiProperty()", "@IsNotEmpty()"]

        ts_type = map_type(field.type_name)
        type_validator = TYPE_VALIDATORS.get(field.type_name)
        if field.is_array:
            ts_type += "[]"
            decorators.append("@IsArray()")
            if type_validator:
                decorators.append(f"@{type_validator}({{ each: true }})")
        elif type_validator:
            decorators.append(f"@{type_validator}()")

        return DtoField(name=field.name, ts_type=ts_type, optional=optional, decorators=tuple(decorators))
