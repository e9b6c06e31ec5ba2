"""Resource scaffolder -- renders and writes the CRUD artifacts for one model.

Quick usage::

    from shadpanel.scaffolder import ResourceGenerator

    result = await ResourceGenerator(config).generate("invoice")
"""

from shadpanel.scaffolder.generator import ResourceGenerator, ScaffoldResult
from shadpanel.scaffolder.templates import TemplateRenderer
from shadpanel.scaffolder.writer import WriteManifest, WritePlanner

__all__ = [
    "ResourceGenerator",
    "ScaffoldResult",
    "TemplateRenderer",
    "WriteManifest",
    "WritePlanner",
]
