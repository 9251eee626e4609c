"""
Controller backend: REST endpoints for a model.
"""

from __future__ import annotations

from pathlib import Path

from ...utils import to_camel_case, to_kebab_case
from ..schema_ast.nodes import Model
from .base import Artifact, CodeBackend, IdParam


def param_decorator(param: IdParam) -> str:
    """Route parameter binding; numeric parameters are parsed with ParseIntPipe."""
    if param.is_numeric:
        return f"@Param('{param.name}', ParseIntPipe) {param.name}: {param.ts_type}"
    return f"@Param('{param.name}') {param.name}: {param.ts_type}"


class ControllerBackend(CodeBackend):
    """Generates <model>.controller.ts."""

    def emit(self, model: Model) -> list[Artifact]:
        context = self._prepare_model_context(model)
        params = context["ID_PARAMS"]
        context.update(
            {
                "SERVICE_VAR": f"{to_camel_case(model.name)}Service",
                "ROUTE_PATH": "/".join(f":{p.name}" for p in params),
                "PARAM_DECORATORS": ", ".join(param_decorator(p) for p in params),
                "ID_LABEL": "composite id" if model.has_composite_id else "id",
            }
        )
        path = Path(self._file_name(f"{to_kebab_case(model.name)}.controller"))
        return [Artifact(path, self._render("controller", context))]
