"""
Pipeline - Prisma schema to NestJS module generator.

1. Phase 1 (Parser): Scan the schema text into model blocks
2. Phase 2 (Analyzer): Classify fields and derive model capabilities
3. Phase 3 (Backends): Render DTOs, repository, service, controller and module
4. Phase 4 (Writer): Write the files atomically under the modules directory
"""

from __future__ import annotations

from .config import ConfigError, GeneratorConfig, OutputConfig, OutputMode, load_config
from .generator import GenerationResult, ModelNotFoundError, ModuleGenerator
from .schema_ast.nodes import Capability, Field, Model
from .schema_ast.parser import SchemaParser, SchemaReadError, SchemaSyntaxError, parse_schema_file
from .writer import ArtifactValidationError, AtomicWriter

__all__ = [
    "ModuleGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "load_config",
    "ConfigError",
    "Capability",
    "Field",
    "Model",
    "SchemaParser",
    "parse_schema_file",
    "ModelNotFoundError",
    "SchemaReadError",
    "SchemaSyntaxError",
    "ArtifactValidationError",
    "AtomicWriter",
]
