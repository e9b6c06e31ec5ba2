"""Resource scaffolding orchestrator.

Runs the full pipeline for one resource name against one project:
schema load, model resolution, identity derivation, artifact rendering,
writes, then the navigation merge.  Each step awaits the previous one; file
operations are never run concurrently so artifact order is preserved.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shadpanel.config import ResourceOptions, ScaffoldConfig
from shadpanel.errors import NavigationMergeError
from shadpanel.naming import ResourceIdentity, derive_identity
from shadpanel.parser.resolver import resolve_model
from shadpanel.parser.schema import load_schema
from shadpanel.utils import print_info, print_warning

from .artifacts import build_artifacts, plan_resource
from .menu import MenuEntry, MergeOutcome, merge_navigation
from .templates import TemplateRenderer
from .writer import WriteManifest, WritePlanner


class ScaffoldResult(BaseModel):
    """Outcome of one ``resource`` run."""
    model_config = ConfigDict(protected_namespaces=())

    model_name: str = Field(..., description="Schema model the name resolved to")
    identity: ResourceIdentity
    manifest: WriteManifest
    menu_outcome: Optional[MergeOutcome] = Field(
        default=None, description="None when the menu was skipped or could not be merged"
    )
    warnings: list[str] = Field(default_factory=list)


class ResourceGenerator:
    """Scaffolds CRUD artifacts for a single resource."""

    def __init__(
        self,
        config: ScaffoldConfig,
        options: ResourceOptions | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.options = options or ResourceOptions()
        self.renderer = renderer or TemplateRenderer()

    async def generate(self, name: str) -> ScaffoldResult:
        """Scaffold the resource called *name*.

        Raises:
            SchemaNotFoundError: If the schema document is missing.
            ModelNotFoundError: If no model matches *name*.
            IdentifierNotFoundError: If the model has no identifier field.
            ArtifactConflictError: If an artifact exists and ``force`` is off.
        """
        schema = await load_schema(self.config.schema_file)
        model = resolve_model(name, schema)
        identity = derive_identity(model.name)
        plan = plan_resource(identity, model, schema)
        print_info(f"Scaffolding {model.name} as '{identity.kebab_path}'")

        artifacts = build_artifacts(plan, self.config, self.renderer)
        planner = WritePlanner(force=self.options.force, dry_run=self.options.dry_run)
        manifest = await planner.apply(artifacts)

        result = ScaffoldResult(model_name=model.name, identity=identity, manifest=manifest)
        if not self.options.skip_menu:
            await self._update_menu(result)
        return result

    async def _update_menu(self, result: ScaffoldResult) -> None:
        identity = result.identity
        entry = MenuEntry(
            title=identity.human_label,
            url=self.config.resource_url(identity.kebab_path),
            icon=self.config.menu_icon,
        )
        menu_file = self.config.menu_file
        try:
            outcome = await merge_navigation(
                menu_file,
                entry,
                group_title=self.config.menu_group_title,
                renderer=self.renderer,
                dry_run=self.options.dry_run,
            )
        except NavigationMergeError as exc:
            message = f"{exc}. Add the menu entry for {entry.url} by hand."
            print_warning(message)
            result.warnings.append(message)
            return

        result.menu_outcome = outcome
        if outcome is not MergeOutcome.UNCHANGED:
            result.manifest.record(menu_file)
