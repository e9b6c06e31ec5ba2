"""Exception taxonomy for the shadpanel scaffolder.

Every fatal condition maps to a distinct, stable exit status so that callers
(shell scripts, CI jobs) can branch on *why* a run failed rather than on the
message text.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path


class ExitCode(IntEnum):
    """Process exit statuses returned by the CLI."""

    OK = 0
    FAILURE = 1
    SCHEMA_NOT_FOUND = 2
    MODEL_NOT_FOUND = 3
    ARTIFACT_CONFLICT = 4


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""

    exit_code: ExitCode = ExitCode.FAILURE


# ---------------------------------------------------------------------------
# Preconditions
# ---------------------------------------------------------------------------


class PreconditionError(ScaffoldError):
    """Raised before any work is done when the project is not usable."""

    exit_code = ExitCode.SCHEMA_NOT_FOUND


class SchemaNotFoundError(PreconditionError):
    """The schema document does not exist at the expected path."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Prisma schema not found at {path}")


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class ResolutionError(ScaffoldError):
    """The requested resource cannot be mapped onto a usable model."""

    exit_code = ExitCode.MODEL_NOT_FOUND


class ModelNotFoundError(ResolutionError):
    """No model matches the requested resource name."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(f"Model for '{name}' not found in schema.")


class IdentifierNotFoundError(ResolutionError):
    """The resolved model has neither an ``@id`` field nor a field named ``id``."""

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(
            f"Model '{model}' has no @id field and no field named 'id'."
        )


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------


class ConflictError(ScaffoldError):
    """A destination already exists and overwriting was not requested."""

    exit_code = ExitCode.ARTIFACT_CONFLICT


class ArtifactConflictError(ConflictError):
    """An artifact's target path exists and ``--force`` was not given.

    ``written`` lists the artifacts already written earlier in the same run.
    """

    def __init__(self, path: Path, written: list[Path] | None = None) -> None:
        self.path = path
        self.written = list(written or [])
        super().__init__(f"File exists: {path} (use --force to overwrite)")


class NavigationMergeError(ScaffoldError):
    """The navigation document could not be updated.

    Never fatal: the generator downgrades it to a warning.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not update {path}: {reason}")
