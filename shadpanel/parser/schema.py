"""Prisma schema parser.

Turns raw ``schema.prisma`` text into a ``SchemaTable``.  Uses regex block
matching and line tokenisation only; it does not validate the schema beyond
what is needed to classify fields.

Enums are collected in a first pass over the whole document so that model
fields referring to an enum declared *later* in the file still classify as
enums.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from shadpanel.errors import SchemaNotFoundError

from .classifier import classify_type
from .models import EnumDefinition, FieldDefinition, ModelDefinition, SchemaTable


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_ENUM_BLOCK = re.compile(r"^[ \t]*enum\s+(\w+)\s*\{(.*?)\}", re.MULTILINE | re.DOTALL)
_MODEL_BLOCK = re.compile(
    r"^[ \t]*model\s+(\w+)\s*\{(.*?)^[ \t]*\}", re.MULTILINE | re.DOTALL
)
_ID_MARKER = re.compile(r"@id\b")
_DEFAULT_MARKER = "@default("
_OPTIONAL_MARKER = "?"
_SKIP_PREFIXES = ("//", "@@")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _body_lines(body: str) -> list[str]:
    """Non-empty, stripped lines of a block body minus comments and block attributes."""
    lines = []
    for raw in body.splitlines():
        line = raw.strip()
        if not line or line.startswith(_SKIP_PREFIXES):
            continue
        lines.append(line)
    return lines


def _extract_default(line: str) -> str | None:
    """Return the text inside ``@default(...)``, honouring nested parentheses.

    ``@default(autoincrement())`` yields ``"autoincrement()"``.  An unbalanced
    call yields everything after the opening parenthesis.
    """
    start = line.find(_DEFAULT_MARKER)
    if start == -1:
        return None
    begin = start + len(_DEFAULT_MARKER)
    depth = 1
    quote: str | None = None
    for index in range(begin, len(line)):
        char = line[index]
        if quote:
            if char == quote and line[index - 1] != "\\":
                quote = None
            continue
        if char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return line[begin:index]
    return line[begin:]


def _parse_enums(content: str) -> dict[str, EnumDefinition]:
    enums: dict[str, EnumDefinition] = {}
    for match in _ENUM_BLOCK.finditer(content):
        name, body = match.group(1), match.group(2)
        members = tuple(line.split()[0] for line in _body_lines(body))
        enums[name] = EnumDefinition(name=name, members=members)
    return enums


def _parse_field(line: str, enums: dict[str, EnumDefinition]) -> FieldDefinition | None:
    """Parse one model body line, or return ``None`` if it is not a field."""
    parts = line.split()
    if len(parts) < 2:
        return None
    name, raw_type = parts[0], parts[1]
    required = not raw_type.endswith(_OPTIONAL_MARKER)
    declared_type = raw_type[:-1] if not required else raw_type

    return FieldDefinition(
        name=name,
        declared_type=declared_type,
        required=required,
        is_primary_key=bool(_ID_MARKER.search(line)),
        kind=classify_type(declared_type, enums),
        default_expression=_extract_default(line),
    )


def _parse_models(content: str, enums: dict[str, EnumDefinition]) -> dict[str, ModelDefinition]:
    models: dict[str, ModelDefinition] = {}
    for match in _MODEL_BLOCK.finditer(content):
        name, body = match.group(1), match.group(2)
        fields = []
        for line in _body_lines(body):
            field = _parse_field(line, enums)
            if field is not None:
                fields.append(field)
        models[name] = ModelDefinition(name=name, fields=tuple(fields))
    return models


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_schema(content: str) -> SchemaTable:
    """Parse schema source text into enum and model tables.

    Unknown field types are never an error: they classify as relations.
    """
    enums = _parse_enums(content)
    models = _parse_models(content, enums)
    return SchemaTable(enums=enums, models=models)


async def load_schema(path: str | Path) -> SchemaTable:
    """Read and parse the schema document at *path*.

    Raises:
        SchemaNotFoundError: If the file does not exist.
    """
    schema_path = Path(path)
    if not await asyncio.to_thread(schema_path.is_file):
        raise SchemaNotFoundError(schema_path)
    content = await asyncio.to_thread(schema_path.read_text, "utf-8")
    return parse_schema(content)
