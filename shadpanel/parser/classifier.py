"""Field classification.

Assigns each field a semantic category and derives the facts the artifact
templates branch on: which field is the identifier, whether it is numeric,
which fields become form inputs and list columns, and which control each
input uses.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from shadpanel.errors import IdentifierNotFoundError

from .models import FieldDefinition, FieldKind, InputKind, ModelDefinition


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SCALAR_TYPES: frozenset[str] = frozenset({
    "Int",
    "String",
    "Boolean",
    "DateTime",
    "Float",
    "Decimal",
    "Json",
    "Bytes",
})

NUMERIC_TYPES: frozenset[str] = frozenset({"Int", "Float", "Decimal"})

INTEGER_TYPES: frozenset[str] = frozenset({"Int"})

SEARCHABLE_HINTS: tuple[str, ...] = ("name", "title", "email")

MAX_LIST_COLUMNS = 2


# ---------------------------------------------------------------------------
# Type classification
# ---------------------------------------------------------------------------

def classify_type(declared_type: str, enum_names: Iterable[str] | Mapping[str, object]) -> FieldKind:
    """Return the category of *declared_type*.

    Enums are checked first so that an enum shadowing a scalar name still
    classifies as an enum.  Anything unrecognised is a relation.
    """
    if declared_type in enum_names:
        return FieldKind.ENUM
    if declared_type in SCALAR_TYPES:
        return FieldKind.SCALAR
    return FieldKind.RELATION


def input_kind(field: FieldDefinition) -> InputKind:
    """Pick the form control used to edit *field*."""
    if field.is_enum:
        return InputKind.SELECT
    if field.declared_type == "Boolean":
        return InputKind.CHECKBOX
    if field.declared_type in NUMERIC_TYPES:
        return InputKind.NUMBER
    if "email" in field.name.lower():
        return InputKind.EMAIL
    return InputKind.TEXT


def is_searchable(field: FieldDefinition) -> bool:
    """True when the field name hints at free text worth searching."""
    lower = field.name.lower()
    return any(hint in lower for hint in SEARCHABLE_HINTS)


# ---------------------------------------------------------------------------
# Identifier handling
# ---------------------------------------------------------------------------

def find_identifier(model: ModelDefinition) -> FieldDefinition:
    """Return the model's identifier field.

    The field marked ``@id`` wins; otherwise a field literally named ``id``.

    Raises:
        IdentifierNotFoundError: If the model has neither.
    """
    for field in model.fields:
        if field.is_primary_key:
            return field
    fallback = model.get_field("id")
    if fallback is None:
        raise IdentifierNotFoundError(model.name)
    return fallback


def identifier_is_numeric(identifier: FieldDefinition) -> bool:
    """True when route parameters must be converted to a number before lookup."""
    return identifier.declared_type in INTEGER_TYPES


# ---------------------------------------------------------------------------
# Field selections
# ---------------------------------------------------------------------------

def form_fields(model: ModelDefinition, identifier: FieldDefinition) -> list[FieldDefinition]:
    """Fields rendered in the create/edit forms, in source order."""
    return [
        f for f in model.fields
        if f.name != identifier.name and not f.is_primary_key and not f.is_relation
    ]


def list_columns(model: ModelDefinition, identifier: FieldDefinition) -> list[FieldDefinition]:
    """Up to ``MAX_LIST_COLUMNS`` editable fields shown in the list view."""
    return form_fields(model, identifier)[:MAX_LIST_COLUMNS]
