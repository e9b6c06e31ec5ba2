"""Pydantic v2 models for the parsed Prisma schema.

Defines the in-memory representation the rest of the pipeline reads: enum
and model tables, and per-field classification flags.  All models are frozen
once built; a parse produces a fresh ``SchemaTable`` every time.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FieldKind(str, Enum):
    """Semantic category of a field's declared type.

    Exactly one holds for every field.  ``RELATION`` is the closed-world
    default: any type that is neither a known scalar nor a declared enum.
    """
    SCALAR = "scalar"
    ENUM = "enum"
    RELATION = "relation"


class InputKind(str, Enum):
    """Form control emitted for an editable field."""
    CHECKBOX = "checkbox"
    SELECT = "select"
    NUMBER = "number"
    EMAIL = "email"
    TEXT = "text"


# ---------------------------------------------------------------------------
# Schema Models
# ---------------------------------------------------------------------------

class EnumDefinition(BaseModel):
    """A schema ``enum`` block."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Enum name, e.g. 'Status'")
    members: tuple[str, ...] = Field(
        default=(), description="Member names in declaration order"
    )


class FieldDefinition(BaseModel):
    """A single field line inside a ``model`` block."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name")
    declared_type: str = Field(..., description="Type token without the '?' marker")
    required: bool = Field(default=True, description="False when the type ends in '?'")
    is_primary_key: bool = Field(default=False, description="Line carries '@id'")
    kind: FieldKind = Field(..., description="Scalar, enum or relation")
    default_expression: Optional[str] = Field(
        default=None, description="Raw text inside @default(...), unparsed"
    )

    @property
    def is_enum(self) -> bool:
        return self.kind is FieldKind.ENUM

    @property
    def is_relation(self) -> bool:
        return self.kind is FieldKind.RELATION

    @property
    def is_scalar(self) -> bool:
        return self.kind is FieldKind.SCALAR


class ModelDefinition(BaseModel):
    """A schema ``model`` block.  Field order follows the source."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Model name, e.g. 'Invoice'")
    fields: tuple[FieldDefinition, ...] = Field(default=(), description="Fields in source order")

    def get_field(self, name: str) -> Optional[FieldDefinition]:
        """Return the field called *name*, if any."""
        return next((f for f in self.fields if f.name == name), None)


class SchemaTable(BaseModel):
    """Complete result of parsing a schema document."""
    model_config = ConfigDict(frozen=True)

    enums: dict[str, EnumDefinition] = Field(default_factory=dict)
    models: dict[str, ModelDefinition] = Field(default_factory=dict)

    @property
    def model_names(self) -> list[str]:
        """Model names in declaration order."""
        return list(self.models)

    def enum_members(self, name: str) -> tuple[str, ...]:
        """Members of enum *name*, or an empty tuple when it is unknown."""
        enum = self.enums.get(name)
        return enum.members if enum else ()
