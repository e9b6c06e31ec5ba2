"""Write planner.

Applies the overwrite and dry-run policy to an ordered artifact list and
performs the writes one at a time, in list order.  Conflicts are detected in
the same pass that writes, so artifacts ahead of a conflicting one are
already on disk when the run aborts; nothing is rolled back.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from shadpanel.errors import ArtifactConflictError
from shadpanel.utils import path_exists, write_text

from .artifacts import GeneratedArtifact


class WriteManifest(BaseModel):
    """Paths written, or in dry-run mode the paths that would be written."""

    dry_run: bool = False
    paths: list[Path] = Field(default_factory=list)

    def record(self, path: Path) -> None:
        self.paths.append(path)

    def lines(self) -> list[str]:
        """Human-readable report, one line per path."""
        if self.dry_run:
            return [f"Would write: {p}" for p in self.paths]
        return [str(p) for p in self.paths]


class WritePlanner:
    """Writes artifacts under a force / dry-run policy."""

    def __init__(self, force: bool = False, dry_run: bool = False) -> None:
        self.force = force
        self.dry_run = dry_run

    async def apply(self, artifacts: list[GeneratedArtifact]) -> WriteManifest:
        """Process *artifacts* in order and return the manifest.

        Raises:
            ArtifactConflictError: When a target exists and ``force`` is off.
                Processing stops at that artifact; ``written`` on the error
                lists what this call already wrote.
        """
        manifest = WriteManifest(dry_run=self.dry_run)
        for artifact in artifacts:
            target = artifact.target_path
            if self.dry_run:
                manifest.record(target)
                continue
            if not self.force and await path_exists(target):
                raise ArtifactConflictError(target, written=manifest.paths)
            await write_text(target, artifact.content)
            manifest.record(target)
        return manifest
