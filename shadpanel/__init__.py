"""shadpanel -- CRUD resource scaffolding for shadpanel admin projects.

Reads a project's Prisma schema and generates server actions plus list,
create and edit pages for one model, then links the new pages into the
project's navigation menu.

Quick usage::

    from shadpanel import ResourceGenerator, ResourceOptions, ScaffoldConfig

    config = ScaffoldConfig(project_root=Path("my-admin"))
    result = await ResourceGenerator(config, ResourceOptions(dry_run=True)).generate("invoice")
    print(result.manifest.lines())
"""

from shadpanel.config import ResourceOptions, ScaffoldConfig
from shadpanel.errors import ExitCode, ScaffoldError
from shadpanel.naming import ResourceIdentity, derive_identity
from shadpanel.scaffolder.generator import ResourceGenerator, ScaffoldResult

__version__ = "0.1.0"

__all__ = [
    "ExitCode",
    "ResourceGenerator",
    "ResourceIdentity",
    "ResourceOptions",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldResult",
    "derive_identity",
    "__version__",
]
