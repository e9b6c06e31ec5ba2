"""Jinja2 template rendering for resource scaffolding.

Templates live in ``shadpanel/scaffolder/templates/`` (shipped as package
data) and produce TypeScript/TSX sources.  Rendering is pure: writing files
is the job of the write planner.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from shadpanel.naming import camel_case, humanize, kebab_case, pascal_case


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders the ``.j2`` templates for generated TypeScript sources.

    Autoescaping is off (the output is code, not HTML) and undefined
    variables raise, so a template/context mismatch fails at render time
    instead of emitting broken code.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir or _DEFAULT_TEMPLATE_DIR)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(
            pascal_case=pascal_case,
            camel_case=camel_case,
            kebab_case=kebab_case,
            humanize=humanize,
            ts_string=ts_string,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render *template_path* (relative to the template directory)."""
        return self.env.get_template(template_path).render(**context)


def ts_string(value: Any) -> str:
    """Escape a value for use inside a single-quoted TypeScript string."""
    return str(value).replace("\\", "\\\\").replace("'", "\\'")
