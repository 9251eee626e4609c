"""
Configuration for the module generator.

Settings can be loaded from a JSON file; command line flags override them.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# Applies to every model in optional_field_overrides
ALL_MODELS = "*"

# Field names treated as optional in create DTOs whatever the schema says
DEFAULT_OPTIONAL_FIELDS = [
    "sku",
    "description",
    "shortDescription",
    "compareAtPrice",
    "brandId",
    "isActive",
    "isFeatured",
    "stockQuantity",
    "lowStockThreshold",
    "metaTitle",
    "metaDescription",
]


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when a generated file already exists.
    """

    FORCE = "force"  # Default: overwrite, generation is re-runnable
    ERROR_IF_EXISTS = "error"  # Refuse to touch the module if any target exists
    SKIP = "skip"  # Keep existing files, write only the missing ones


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check generated code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True
    atomic_write: bool = True

    @staticmethod
    def from_dict(d: dict) -> OutputConfig:
        config = OutputConfig()
        for k, v in d.items():
            if k == "mode":
                v = OutputMode(v)
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "validate_before_write": self.validate_before_write,
            "atomic_write": self.atomic_write,
        }


@dataclass
class GeneratorConfig:
    """Configuration options for module generation."""

    # Prisma schema to read
    schema_path: str = "src/database/prisma/schema.prisma"

    # Root directory receiving one sub-directory per generated module
    modules_path: str = "src/modules"

    # Model name (or "*") -> field names always optional in create DTOs
    optional_field_overrides: dict[str, list[str]] = field(default_factory=lambda: {ALL_MODELS: list(DEFAULT_OPTIONAL_FIELDS)})

    # Add generation comment at top of each file
    add_generation_comment: bool = True

    # Fail on schema lines that are not fields, annotations or comments
    strict_schema: bool = False

    output: OutputConfig = field(default_factory=OutputConfig)

    def optional_overrides_for(self, model_name: str) -> frozenset[str]:
        """Field names forced optional for a model."""
        names = set(self.optional_field_overrides.get(ALL_MODELS, []))
        names.update(self.optional_field_overrides.get(model_name, []))
        return frozenset(names)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "output":
                v = OutputConfig.from_dict(v)
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "schema_path": self.schema_path,
            "modules_path": self.modules_path,
            "optional_field_overrides": self.optional_field_overrides,
            "add_generation_comment": self.add_generation_comment,
            "strict_schema": self.strict_schema,
            "output": self.output.to_dict(),
        }


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or holds invalid values."""

    pass


def load_config(path: Path | None) -> GeneratorConfig:
    """Load a config from a JSON file, or the defaults when path is None.

    Raises:
        ConfigError: If the file is unreadable, not JSON, or holds invalid values
    """
    if path is None:
        return GeneratorConfig()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        return GeneratorConfig.from_dict(data)
    except (OSError, ValueError, AttributeError) as e:
        raise ConfigError(f"Invalid configuration file {path}: {e}") from e
