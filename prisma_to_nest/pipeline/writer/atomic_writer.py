"""
Atomic file writer for generated modules.

Ensures that a single file write is atomic so an interrupted run never
leaves a half-written file behind. Writing a whole module is not atomic:
files already written stay on disk if a later one fails.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


class ArtifactValidationError(Exception):
    """Raised when generated code fails the structural checks before writing."""

    pass


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_typescript: Callable[[str], None] | None = None, atomic: bool = True):
        """Initialize the atomic writer.

        Args:
            validate_typescript: Optional validation function for TypeScript code
            atomic: Write through a temporary file; plain write when False
        """
        self._validate_typescript = validate_typescript or self._default_validate_typescript
        self._atomic = atomic

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            ArtifactValidationError: If validation fails
            OSError: If file operations fail
        """
        if validate:
            self._validate_typescript(content)

        path.parent.mkdir(parents=True, exist_ok=True)

        if not self._atomic:
            path.write_text(content, encoding="utf-8")
            return

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.debug("Could not remove temporary file %s", temp_path)
            raise

        logger.debug("Wrote %s (%d bytes)", path, len(content))

    def _default_validate_typescript(self, content: str) -> None:
        """Structural checks on generated TypeScript.

        Raises:
            ArtifactValidationError: If validation fails
        """
        # Comment lines may quote arbitrary text
        code = "\n".join(line for line in content.splitlines() if not line.lstrip().startswith("//"))

        if "export class " not in code:
            raise ArtifactValidationError("Generated TypeScript code has no exported class")

        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise ArtifactValidationError(f"Generated TypeScript code has unbalanced braces: {open_braces} open, {close_braces} close")

        open_parens = code.count("(")
        close_parens = code.count(")")
        if open_parens != close_parens:
            raise ArtifactValidationError(f"Generated TypeScript code has unbalanced parentheses: {open_parens} open, {close_parens} close")
