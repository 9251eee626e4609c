"""
Module backend: NestJS module wiring controller, service and repository.
"""

from __future__ import annotations

from pathlib import Path

from ...utils import to_kebab_case
from ..schema_ast.nodes import Model
from .base import Artifact, CodeBackend


class ModuleBackend(CodeBackend):
    """Generates <model>.module.ts."""

    def emit(self, model: Model) -> list[Artifact]:
        path = Path(self._file_name(f"{to_kebab_case(model.name)}.module"))
        return [Artifact(path, self._render("module", self._prepare_model_context(model)))]
