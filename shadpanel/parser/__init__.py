"""Prisma schema parsing and model resolution.

Usage::

    from shadpanel.parser import load_schema, resolve_model

    schema = await load_schema("prisma/schema.prisma")
    model = resolve_model("invoices", schema)
"""

from shadpanel.parser.classifier import find_identifier, form_fields, list_columns
from shadpanel.parser.models import (
    EnumDefinition,
    FieldDefinition,
    FieldKind,
    InputKind,
    ModelDefinition,
    SchemaTable,
)
from shadpanel.parser.resolver import resolve_model
from shadpanel.parser.schema import load_schema, parse_schema

__all__ = [
    "EnumDefinition",
    "FieldDefinition",
    "FieldKind",
    "InputKind",
    "ModelDefinition",
    "SchemaTable",
    "find_identifier",
    "form_fields",
    "list_columns",
    "load_schema",
    "parse_schema",
    "resolve_model",
]
