"""
Service backend: business layer class for a model.
"""

from __future__ import annotations

from pathlib import Path

from ...utils import to_camel_case, to_kebab_case
from ..schema_ast.nodes import Model
from .base import Artifact, CodeBackend


class ServiceBackend(CodeBackend):
    """Generates <model>.service.ts."""

    def emit(self, model: Model) -> list[Artifact]:
        context = self._prepare_model_context(model)
        context["REPOSITORY_VAR"] = f"{to_camel_case(model.name)}Repository"
        path = Path(self._file_name(f"{to_kebab_case(model.name)}.service"))
        return [Artifact(path, self._render("service", context))]
