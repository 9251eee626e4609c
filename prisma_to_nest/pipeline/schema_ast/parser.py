"""
Prisma schema parser.

Phase 1 of the pipeline: scan the schema text line by line and build one
Model per `model Name { ... }` block. The grammar handled is flat:

    block      := header line* "}"
    header     := <kind> <Name> "{"
    line       := field | block-annotation | comment | blank
    field      := <name> <Type>["[]"]["?"] [attributes]

Trailing // comments are removed before a line is classified. Nested braces
are not supported.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from ..analyzer.field_classifier import classify_field
from ..analyzer.model_synthesizer import build_model
from .nodes import Field, Model

logger = logging.getLogger(__name__)

_BLOCK_HEADER = re.compile(r"^(?P<kind>[A-Za-z]\w*)\s+(?P<name>\w+)\s*\{\s*(?P<close>\})?$")
_FIELD_LINE = re.compile(r"^(?P<name>\w+)\s+(?P<type>[A-Za-z]\w*(?:\[\])?)(?P<optional>\?)?(?P<attributes>(?:[\s@].*)?)$")
# name:/map: arguments may precede the field list
_COMPOSITE_ID = re.compile(r'^@@id\(\s*(?:\w+\s*:\s*"[^"]*"\s*,\s*)*(?:fields\s*:\s*)?\[(?P<fields>[^\]]*)\]')
_FIELD_REF = re.compile(r"^\s*(\w+)")
_LINE_COMMENT = "//"

MODEL_KIND = "model"


class SchemaReadError(Exception):
    """Raised when the schema file cannot be read."""

    pass


class SchemaSyntaxError(Exception):
    """Raised in strict mode for schema lines the parser does not recognize."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def strip_comment(line: str) -> str:
    """Drop a trailing // comment, leaving // inside string literals alone."""
    in_string = False
    escaped = False
    for i, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = in_string
        elif char == '"':
            in_string = not in_string
        elif not in_string and line.startswith(_LINE_COMMENT, i):
            return line[:i]
    return line


@dataclass
class _OpenBlock:
    """A block whose closing brace has not been reached yet."""

    kind: str
    name: str
    line_number: int
    fields: list[Field] = field(default_factory=list)
    composite_id_fields: list[str] = field(default_factory=list)


class SchemaParser:
    """Parses Prisma schema text into Model nodes."""

    def __init__(self, strict: bool = False):
        """
        Initialize the parser.

        Args:
            strict: Raise SchemaSyntaxError on unrecognized lines instead of
                logging a warning and skipping them
        """
        self.strict = strict

    def parse(self, text: str) -> list[Model]:
        """
        Parse schema text.

        Args:
            text: Full schema content

        Returns:
            One Model per model block, in source order
        """
        models: list[Model] = []
        block: _OpenBlock | None = None

        for line_number, raw_line in enumerate(text.splitlines(), start=1):
            line = strip_comment(raw_line).strip()
            if not line:
                continue

            header = _BLOCK_HEADER.match(line)
            if block is None or header is not None:
                if header is None:
                    self._unrecognized(line, line_number, "expected a block header")
                    continue
                if block is not None:
                    # a header inside a block means the previous one was never closed
                    self._unrecognized(f"{block.kind} {block.name}", block.line_number, "block is never closed")
                block = _OpenBlock(kind=header["kind"], name=header["name"], line_number=line_number)
                if header["close"]:
                    self._close(block, models)
                    block = None
                continue

            if line == "}":
                self._close(block, models)
                block = None
            elif block.kind != MODEL_KIND:
                # enum values, generator/datasource settings
                continue
            elif line.startswith("@@"):
                self._parse_block_annotation(line, block)
            else:
                self._parse_field_line(line, line_number, block)

        if block is not None:
            self._unrecognized(f"{block.kind} {block.name}", block.line_number, "block is never closed")

        return models

    def _close(self, block: _OpenBlock, models: list[Model]) -> None:
        if block.kind != MODEL_KIND:
            return
        models.append(build_model(block.name, block.fields, block.composite_id_fields))

    def _parse_block_annotation(self, line: str, block: _OpenBlock) -> None:
        """Record @@id field lists; other block annotations carry nothing we use."""
        match = _COMPOSITE_ID.match(line)
        if match is None:
            return
        for part in match["fields"].split(","):
            # "a(sort: Desc)" -> "a"
            ref = _FIELD_REF.match(part)
            if ref:
                block.composite_id_fields.append(ref.group(1))

    def _parse_field_line(self, line: str, line_number: int, block: _OpenBlock) -> None:
        match = _FIELD_LINE.match(line)
        if match is None:
            self._unrecognized(line, line_number, f"not a field declaration in model {block.name}")
            return
        block.fields.append(
            classify_field(
                name=match["name"],
                type_token=match["type"],
                optional_marker=match["optional"],
                attributes=match["attributes"],
            )
        )

    def _unrecognized(self, line: str, line_number: int, reason: str) -> None:
        if self.strict:
            raise SchemaSyntaxError(f"{reason}: {line!r}", line_number)
        logger.warning("Skipping schema line %d (%s): %s", line_number, reason, line)


def read_schema(path: Path) -> str:
    """Read the schema file, raising SchemaReadError on any I/O failure."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaReadError(f"Cannot read schema file {path}: {e}") from e


def parse_schema_file(path: Path, strict: bool = False) -> list[Model]:
    """Read and parse a schema file."""
    return SchemaParser(strict=strict).parse(read_schema(path))
