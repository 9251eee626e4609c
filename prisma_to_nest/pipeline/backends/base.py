"""
Base class for artifact backends.

Each backend turns a Model into one or more generated NestJS source files.
Backends render Jinja2 templates and keep no state between models.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from ... import __version__
from ...cli_utils import reconstruct_command_line
from ...utils import to_camel_case, to_kebab_case, to_pascal_case
from ..analyzer.field_classifier import FALLBACK_TYPE, map_type
from ..config import GeneratorConfig
from ..schema_ast.nodes import Capability, Model

# Type of the single "id" parameter and of composite parts we cannot type
DEFAULT_ID_TYPE = "number"


def composite_key_name(fields: Sequence[str]) -> str:
    """
    Name of the compound unique input Prisma generates for a composite id.

    Prisma names the `@@id([a, b])` key `a_b`; generated lookups embed this
    name literally, so it has to follow Prisma's rule exactly.
    """
    return "_".join(fields)


@dataclass(frozen=True)
class Artifact:
    """One generated file, relative to the module directory."""

    relative_path: Path
    content: str


@dataclass(frozen=True)
class IdParam:
    """One identity parameter of a generated method."""

    name: str
    ts_type: str

    @property
    def is_numeric(self) -> bool:
        return self.ts_type == "number"


def identity_params(model: Model) -> list[IdParam]:
    """Parameters identifying one record: the composite id fields in order, or a single numeric `id`."""
    if not model.has_composite_id:
        return [IdParam("id", DEFAULT_ID_TYPE)]

    params = []
    for name in model.composite_id_fields:
        field = model.get_field(name)
        ts_type = map_type(field.type_name) if field else FALLBACK_TYPE
        if ts_type == FALLBACK_TYPE:
            ts_type = DEFAULT_ID_TYPE
        params.append(IdParam(name, ts_type))
    return params


class CodeBackend(ABC):
    """Abstract base class for artifact backends."""

    # Template directory name
    TEMPLATE_LANG: str = "nest"

    # File extension of generated files
    FILE_EXTENSION: str = "ts"

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["pascal_case"] = to_pascal_case
        self.jinja_env.filters["camel_case"] = to_camel_case
        self.jinja_env.filters["kebab_case"] = to_kebab_case

    @abstractmethod
    def emit(self, model: Model) -> list[Artifact]:
        """
        Generate the artifacts for a model.

        Args:
            model: The model

        Returns:
            Generated files
        """

    def _render(self, template_name: str, context: dict[str, Any]) -> str:
        template = self.jinja_env.get_template(f"{template_name}.{self.FILE_EXTENSION}.jinja2")
        return template.render(HEADER=self._generate_command_comment(), **context)

    def _file_name(self, stem: str) -> str:
        return f"{stem}.{self.FILE_EXTENSION}"

    def _generate_command_comment(self) -> str:
        """Generate the command line comment put at the top of generated files."""
        if not self.config.add_generation_comment:
            return ""

        try:
            from ...prisma_to_nest import prisma_to_nest as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "prisma_to_nest"

        return f"// Generated by prisma_to_nest v{__version__} : {command_line}"

    def _prepare_model_context(self, model: Model) -> dict[str, Any]:
        """
        Template variables shared by every artifact of a model.

        Args:
            model: The model

        Returns:
            Dictionary of template variables
        """
        params = identity_params(model)
        names = [p.name for p in params]

        if model.has_composite_id:
            where = f"{{ {composite_key_name(names)}: {{ {', '.join(names)} }} }}"
            find_one = "findByCompositeId"
        else:
            where = "{ id }"
            find_one = "findById"

        return {
            "MODEL_NAME": model.name,
            "CAMEL_NAME": to_camel_case(model.name),
            "KEBAB_NAME": to_kebab_case(model.name),
            "LOWER_NAME": model.name.lower(),
            "RICH": model.capability is Capability.RICH,
            "COMPOSITE": model.has_composite_id,
            "ID_PARAMS": params,
            "ID_SIGNATURE": ", ".join(f"{p.name}: {p.ts_type}" for p in params),
            "ID_ARGS": ", ".join(names),
            "WHERE": where,
            "FIND_ONE": find_one,
        }
