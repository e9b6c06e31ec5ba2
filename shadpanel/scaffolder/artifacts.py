"""Artifact builders for a scaffolded resource.

One pure function per generated file.  Each takes the resource identity and
the classified model (plus the project settings it needs for import paths
and routes) and returns the file content; ``build_artifacts`` pairs the
contents with their target paths in write order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from shadpanel.config import ScaffoldConfig
from shadpanel.naming import ResourceIdentity, humanize, lower_first
from shadpanel.parser.classifier import (
    find_identifier,
    identifier_is_numeric,
    form_fields,
    input_kind,
    is_searchable,
    list_columns,
)
from shadpanel.parser.models import FieldDefinition, InputKind, ModelDefinition, SchemaTable

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class GeneratedArtifact(BaseModel):
    """One generated source file, not yet written."""
    model_config = ConfigDict(frozen=True)

    target_path: Path
    content: str


class ResourcePlan(BaseModel):
    """Everything the templates need, computed once per invocation."""
    model_config = ConfigDict(frozen=True)

    identity: ResourceIdentity
    model: ModelDefinition
    identifier: FieldDefinition
    id_numeric: bool
    fields: tuple[FieldDefinition, ...]
    columns: tuple[FieldDefinition, ...]
    enum_members: dict[str, tuple[str, ...]]


# Relative paths inside the resource directory, in write order.
ACTIONS_FILE = Path("actions.ts")
LIST_PAGE_FILE = Path("page.tsx")
CREATE_PAGE_FILE = Path("create") / "page.tsx"
EDIT_PAGE_FILE = Path("edit") / "[id]" / "page.tsx"


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------

def plan_resource(
    identity: ResourceIdentity,
    model: ModelDefinition,
    schema: SchemaTable,
) -> ResourcePlan:
    """Classify *model*'s fields for rendering.

    Raises:
        IdentifierNotFoundError: If the model has no usable identifier.
    """
    identifier = find_identifier(model)
    fields = form_fields(model, identifier)
    return ResourcePlan(
        identity=identity,
        model=model,
        identifier=identifier,
        id_numeric=identifier_is_numeric(identifier),
        fields=tuple(fields),
        columns=tuple(list_columns(model, identifier)),
        enum_members={
            f.declared_type: schema.enum_members(f.declared_type)
            for f in fields if f.is_enum
        },
    )


# ---------------------------------------------------------------------------
# Context helpers
# ---------------------------------------------------------------------------

def _field_view(field: FieldDefinition, plan: ResourcePlan) -> dict[str, Any]:
    kind = input_kind(field)
    return {
        "name": field.name,
        "label": humanize(field.name),
        "input": kind.value,
        "options": list(plan.enum_members.get(field.declared_type, ())),
        "initial": "false" if kind is InputKind.CHECKBOX else "''",
        "required": field.required,
    }


def _base_context(plan: ResourcePlan, config: ScaffoldConfig) -> dict[str, Any]:
    identity = plan.identity
    return {
        "identity": identity,
        "delegate": lower_first(plan.model.name),
        "identifier": plan.identifier.name,
        "id_ts_type": "number" if plan.id_numeric else "string",
        "id_lookup": "Number(id)" if plan.id_numeric else "id",
        "id_param": "Number(idParam as string)" if plan.id_numeric else "String(idParam)",
        "list_url": config.resource_url(identity.kebab_path),
        "fields": [_field_view(f, plan) for f in plan.fields],
        "columns": [
            {"name": f.name, "label": humanize(f.name), "searchable": is_searchable(f)}
            for f in plan.columns
        ],
    }


# ---------------------------------------------------------------------------
# Artifact content
# ---------------------------------------------------------------------------

def render_actions(plan: ResourcePlan, config: ScaffoldConfig, renderer: TemplateRenderer) -> str:
    """Server actions: list, get-by-id, create, update and delete."""
    context = {
        **_base_context(plan, config),
        "data_client_import": config.data_client_import,
        "list_limit": config.list_limit,
    }
    return renderer.render("resource/actions.ts.j2", context)


def render_list_page(plan: ResourcePlan, config: ScaffoldConfig, renderer: TemplateRenderer) -> str:
    """Table view with create, edit and delete wiring."""
    list_url = config.resource_url(plan.identity.kebab_path)
    context = {
        **_base_context(plan, config),
        "actions_import": f"@/app{list_url}/actions",
    }
    return renderer.render("resource/list_page.tsx.j2", context)


def render_create_page(plan: ResourcePlan, config: ScaffoldConfig, renderer: TemplateRenderer) -> str:
    """Form view calling the create action."""
    return renderer.render("resource/create_page.tsx.j2", _base_context(plan, config))


def render_edit_page(plan: ResourcePlan, config: ScaffoldConfig, renderer: TemplateRenderer) -> str:
    """Form view that loads the record by id and calls the update action."""
    return renderer.render("resource/edit_page.tsx.j2", _base_context(plan, config))


def build_artifacts(
    plan: ResourcePlan,
    config: ScaffoldConfig,
    renderer: TemplateRenderer | None = None,
) -> list[GeneratedArtifact]:
    """Render all four artifacts in write order."""
    renderer = renderer or TemplateRenderer()
    base = config.resource_dir(plan.identity.kebab_path)
    builders = (
        (ACTIONS_FILE, render_actions),
        (LIST_PAGE_FILE, render_list_page),
        (CREATE_PAGE_FILE, render_create_page),
        (EDIT_PAGE_FILE, render_edit_page),
    )
    return [
        GeneratedArtifact(target_path=base / relative, content=build(plan, config, renderer))
        for relative, build in builders
    ]
