"""Prisma to NestJS module generator

Reads a Prisma schema and generates a NestJS feature module (DTOs,
repository, service, controller and module file) for a model.
"""

__version__ = "1.0.0"

from .pipeline import (
    Capability,
    ConfigError,
    GeneratorConfig,
    ModelNotFoundError,
    ModuleGenerator,
    OutputConfig,
    OutputMode,
    SchemaParser,
    SchemaReadError,
    load_config,
)

__all__ = [
    "ModuleGenerator",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "Capability",
    "SchemaParser",
    "ModelNotFoundError",
    "SchemaReadError",
    "load_config",
    "ConfigError",
]
