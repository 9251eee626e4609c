"""
Module generator - orchestrates the pipeline for one or more models.

1. Parse: read the Prisma schema into Model nodes
2. Select: find the requested model
3. Emit: render every artifact through the backends
4. Write: create the module directory and write the files
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ..utils import to_kebab_case
from .backends import BACKENDS, Artifact, CodeBackend
from .config import GeneratorConfig, OutputMode
from .schema_ast.nodes import Capability, Model
from .schema_ast.parser import parse_schema_file
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


class ModelNotFoundError(Exception):
    """Raised when the requested model is not declared in the schema."""

    def __init__(self, model_name: str):
        self.model_name = model_name
        super().__init__(f'Model "{model_name}" not found in schema')


@dataclass
class GenerationResult:
    """Outcome of generating one module."""

    model: Model
    module_dir: Path
    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


class ModuleGenerator:
    """Generates NestJS modules from a Prisma schema."""

    def __init__(self, config: GeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            config: Generation configuration, defaults when None
        """
        self.config = config or GeneratorConfig()
        self.backends: list[CodeBackend] = [backend(self.config) for backend in BACKENDS]
        self.writer = AtomicWriter(atomic=self.config.output.atomic_write)

    @property
    def schema_path(self) -> Path:
        return Path(self.config.schema_path)

    @property
    def modules_path(self) -> Path:
        return Path(self.config.modules_path)

    def parse_schema(self) -> list[Model]:
        """Read and parse the configured schema; SchemaReadError if unreadable."""
        models = parse_schema_file(self.schema_path, strict=self.config.strict_schema)
        logger.debug("Parsed %d models from %s", len(models), self.schema_path)
        return models

    @staticmethod
    def find_model(models: list[Model], model_name: str) -> Model:
        """Case-insensitive exact match on the model name."""
        wanted = model_name.lower()
        for model in models:
            if model.name.lower() == wanted:
                return model
        raise ModelNotFoundError(model_name)

    def list_models(self) -> list[tuple[Model, Capability]]:
        """Every parsed model with its capability; writes nothing."""
        return [(model, model.capability) for model in self.parse_schema()]

    def render(self, model: Model) -> list[Artifact]:
        """Render every artifact of a model without touching the filesystem."""
        artifacts: list[Artifact] = []
        for backend in self.backends:
            artifacts.extend(backend.emit(model))
        return artifacts

    def module_dir(self, model: Model) -> Path:
        return self.modules_path / to_kebab_case(model.name)

    def generate_module(self, model_name: str, on_write: Callable[[Path], None] | None = None) -> GenerationResult:
        """
        Generate the module for one model.

        Args:
            model_name: Model to generate, matched case-insensitively
            on_write: Called with each path right after it is written

        Returns:
            GenerationResult with the written and skipped paths

        Raises:
            SchemaReadError: If the schema cannot be read
            ModelNotFoundError: If the model is not in the schema
            FileExistsError: In ERROR_IF_EXISTS mode, before anything is written
        """
        model = self.find_model(self.parse_schema(), model_name)
        return self._write_module(model, on_write)

    def generate_all(self, on_write: Callable[[Path], None] | None = None) -> list[GenerationResult]:
        """Generate a module for every model in the schema."""
        return [self._write_module(model, on_write) for model in self.parse_schema()]

    def _write_module(self, model: Model, on_write: Callable[[Path], None] | None) -> GenerationResult:
        module_dir = self.module_dir(model)
        result = GenerationResult(model=model, module_dir=module_dir)

        # Everything is rendered before the first write
        artifacts = self.render(model)
        targets = [(module_dir / artifact.relative_path, artifact) for artifact in artifacts]

        mode = self.config.output.mode
        if mode is OutputMode.ERROR_IF_EXISTS:
            existing = [path for path, _ in targets if path.exists()]
            if existing:
                raise FileExistsError(f"Output file already exists: {existing[0]}. Use --mode force to overwrite or --mode skip to keep it.")

        for directory in sorted({path.parent for path, _ in targets}):
            directory.mkdir(parents=True, exist_ok=True)

        for path, artifact in targets:
            if mode is OutputMode.SKIP and path.exists():
                logger.info("Keeping existing %s", path)
                result.skipped.append(path)
                continue
            self.writer.write(path, artifact.content, validate=self.config.output.validate_before_write)
            result.written.append(path)
            if on_write is not None:
                on_write(path)

        return result
