"""shadpanel configuration.

Project layout and generation settings as Pydantic v2 models.  Values come
from defaults, ``SHADPANEL_*`` environment variables and CLI flags, in
increasing order of precedence.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class ResourceOptions(BaseModel):
    """Per-invocation flags for the ``resource`` command."""

    force: bool = Field(default=False, description="Overwrite existing artifacts")
    dry_run: bool = Field(default=False, description="Report the plan without writing")
    skip_menu: bool = Field(default=False, description="Leave the navigation document alone")


class ScaffoldConfig(BaseModel):
    """Project layout and code-generation settings.

    Every path field is relative to ``project_root``; the resolved locations
    are exposed as read-only properties.
    """

    project_root: Path = Field(default=Path("."))
    schema_path: str = Field(default="prisma/schema.prisma")
    dashboard_dir: str = Field(default="app/admin/dashboard")
    route_base: str = Field(default="/admin/dashboard")
    menu_path: str = Field(default="config/menu.ts")
    data_client_import: str = Field(default="@/lib/prisma")
    menu_icon: str = Field(default="Users", min_length=1)
    menu_group_title: str = Field(default="Content")
    list_limit: int = Field(default=100, ge=1, description="Rows fetched by the list routine")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def schema_file(self) -> Path:
        """Absolute path of the schema document."""
        return self.project_root / self.schema_path

    @property
    def dashboard_path(self) -> Path:
        """Directory holding one sub-directory per scaffolded resource."""
        return self.project_root / self.dashboard_dir

    @property
    def menu_file(self) -> Path:
        """Path to the navigation document."""
        return self.project_root / self.menu_path

    def resource_dir(self, kebab_path: str) -> Path:
        """Directory that receives the artifacts for one resource."""
        return self.dashboard_path / kebab_path

    def resource_url(self, kebab_path: str) -> str:
        """Route of the generated list view."""
        return f"{self.route_base.rstrip('/')}/{kebab_path}"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            SHADPANEL_PROJECT_PATH, SHADPANEL_SCHEMA_PATH, SHADPANEL_MENU_PATH,
            SHADPANEL_MENU_ICON, SHADPANEL_LIST_LIMIT.

        Keyword arguments that are not ``None`` win over the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SHADPANEL_PROJECT_PATH"):
            kwargs["project_root"] = Path(os.environ["SHADPANEL_PROJECT_PATH"])
        if os.environ.get("SHADPANEL_SCHEMA_PATH"):
            kwargs["schema_path"] = os.environ["SHADPANEL_SCHEMA_PATH"]
        if os.environ.get("SHADPANEL_MENU_PATH"):
            kwargs["menu_path"] = os.environ["SHADPANEL_MENU_PATH"]
        if os.environ.get("SHADPANEL_MENU_ICON"):
            kwargs["menu_icon"] = os.environ["SHADPANEL_MENU_ICON"]
        if os.environ.get("SHADPANEL_LIST_LIMIT"):
            kwargs["list_limit"] = int(os.environ["SHADPANEL_LIST_LIMIT"])

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
