"""Navigation merger.

Adds one entry for a scaffolded resource to the project's navigation
document (``config/menu.ts``).  The document is edited as text: the entry is
appended to the first ``items: [...]`` list found under ``navMain`` and the
icon is added to the ``lucide-react`` import.  An existing entry is detected
by its URL, which makes the merge idempotent.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from shadpanel.errors import NavigationMergeError
from shadpanel.utils import path_exists, read_text, write_text

from .templates import TemplateRenderer


_ITEMS_OPEN = re.compile(r"\bitems\s*:\s*\[")
_LUCIDE_IMPORT = re.compile(r"import\s*\{(?P<names>[^}]*)\}\s*from\s*[\"']lucide-react[\"']")

INDENT_STEP = "  "


class MergeOutcome(str, Enum):
    """What ``merge_navigation`` did to the document."""
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


class MenuEntry(BaseModel):
    """One navigation link."""

    title: str = Field(..., description="Label shown in the sidebar")
    url: str = Field(..., description="Route of the list view; doubles as the idempotence marker")
    icon: str = Field(..., description="lucide-react export name")

    def render(self, indent: str) -> str:
        inner = indent + INDENT_STEP
        return (
            f"{indent}{{\n"
            f"{inner}title: {_quote(self.title)},\n"
            f"{inner}url: {_quote(self.url)},\n"
            f"{inner}icon: {self.icon},\n"
            f"{indent}}}"
        )


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


# ---------------------------------------------------------------------------
# Pure text operations
# ---------------------------------------------------------------------------

def has_entry(text: str, url: str) -> bool:
    """True if *text* already links to *url*."""
    return re.search(rf"url\s*:\s*[\"']{re.escape(url)}[\"']", text) is not None


def _matching_bracket(text: str, open_index: int) -> int:
    """Index of the ``]`` closing the ``[`` at *open_index*, or -1.

    String literals and ``//`` comments are skipped.
    """
    depth = 0
    quote: str | None = None
    i = open_index
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in "\"'`":
            quote = ch
        elif text.startswith("//", i):
            newline = text.find("\n", i)
            if newline == -1:
                return -1
            i = newline
        elif ch in "[{(":
            depth += 1
        elif ch in "]})":
            depth -= 1
            if depth == 0:
                return i if ch == "]" else -1
        i += 1
    return -1


def _line_indent(text: str, index: int) -> str:
    start = text.rfind("\n", 0, index) + 1
    line = text[start:index]
    return line[: len(line) - len(line.lstrip())]


def insert_entry(text: str, entry: MenuEntry) -> str:
    """Append *entry* to the first group's item list.

    Raises:
        ValueError: If no ``items: [`` list can be located.
    """
    anchor = text.find("navMain")
    match = _ITEMS_OPEN.search(text, anchor if anchor != -1 else 0)
    if match is None:
        raise ValueError("no 'items: [' list found")
    open_index = match.end() - 1
    close_index = _matching_bracket(text, open_index)
    if close_index == -1:
        raise ValueError("unbalanced 'items' list")

    base_indent = _line_indent(text, match.start())
    head = text[:close_index].rstrip()
    separator = "" if head.endswith(("[", ",")) else ","
    block = entry.render(base_indent + INDENT_STEP)
    return f"{head}{separator}\n{block},\n{base_indent}{text[close_index:]}"


def ensure_icon_import(text: str, icon: str) -> str:
    """Make sure *icon* is imported from ``lucide-react``."""
    match = _LUCIDE_IMPORT.search(text)
    if match is None:
        return f'import {{ {icon} }} from "lucide-react"\n{text}'

    inner = match.group("names")
    names = [n.strip() for n in inner.split(",") if n.strip()]
    if icon in names:
        return text
    if "\n" in inner:
        body = inner.rstrip()
        last = body.rsplit("\n", 1)[-1]
        indent = last[: len(last) - len(last.lstrip())] or INDENT_STEP
        replacement = f"{body}{'' if body.endswith(',') else ','}\n{indent}{icon},\n"
    else:
        replacement = " " + ", ".join([*names, icon]) + " "
    start, end = match.span("names")
    return text[:start] + replacement + text[end:]


def merge_menu_text(text: str, entry: MenuEntry) -> str:
    """Return *text* with *entry* merged in; unchanged when already present."""
    if has_entry(text, entry.url):
        return text
    return ensure_icon_import(insert_entry(text, entry), entry.icon)


# ---------------------------------------------------------------------------
# Document update
# ---------------------------------------------------------------------------

async def merge_navigation(
    menu_file: Path,
    entry: MenuEntry,
    *,
    group_title: str,
    renderer: TemplateRenderer | None = None,
    dry_run: bool = False,
) -> MergeOutcome:
    """Create or update the navigation document at *menu_file*.

    Nothing is written when *dry_run* is set; the returned outcome still
    reports what would have happened.

    Raises:
        NavigationMergeError: If the document exists but cannot be read,
            written, or understood.
    """
    if not await path_exists(menu_file):
        renderer = renderer or TemplateRenderer()
        content = renderer.render(
            "menu/menu.ts.j2",
            {"icon": entry.icon, "group_title": group_title, "title": entry.title, "url": entry.url},
        )
        if not dry_run:
            await _write(menu_file, content)
        return MergeOutcome.CREATED

    try:
        original = await read_text(menu_file)
    except OSError as exc:
        raise NavigationMergeError(menu_file, str(exc)) from exc

    try:
        merged = merge_menu_text(original, entry)
    except ValueError as exc:
        raise NavigationMergeError(menu_file, str(exc)) from exc

    if merged == original:
        return MergeOutcome.UNCHANGED
    if not dry_run:
        await _write(menu_file, merged)
    return MergeOutcome.UPDATED


async def _write(menu_file: Path, content: str) -> None:
    try:
        await write_text(menu_file, content)
    except OSError as exc:
        raise NavigationMergeError(menu_file, str(exc)) from exc
