"""
Repository backend: data access class for a model.
"""

from __future__ import annotations

from pathlib import Path

from ...utils import to_kebab_case
from ..schema_ast.nodes import LIFECYCLE_FIELDS, Model
from .base import Artifact, CodeBackend


def search_fields(model: Model) -> list[str]:
    """Text columns the base repository searches."""
    return [f.name for f in model.fields if f.type_name == "String" and not f.is_relation and f.name not in LIFECYCLE_FIELDS]


class RepositoryBackend(CodeBackend):
    """Generates <model>.repository.ts."""

    def emit(self, model: Model) -> list[Artifact]:
        context = self._prepare_model_context(model)
        context["SEARCH_FIELDS"] = search_fields(model)
        path = Path(self._file_name(f"{to_kebab_case(model.name)}.repository"))
        return [Artifact(path, self._render("repository", context))]
