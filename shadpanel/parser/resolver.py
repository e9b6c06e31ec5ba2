"""Model resolution.

Maps a user-supplied resource name ("invoice", "Invoices", "POST") onto
exactly one parsed model.  Matching is an ordered list of strategies; each
strategy turns the lowercased input into a candidate, and the first model
whose lowercased name equals a candidate wins.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from shadpanel.errors import ModelNotFoundError
from shadpanel.naming import singularize

from .models import ModelDefinition, SchemaTable


class MatchStrategy(NamedTuple):
    """A named transformation from lowercased input to a candidate model name."""
    name: str
    candidate: Callable[[str], str]


def _plural_guess(name: str) -> str:
    """Flip the trailing ``s``: strip it if present, append it otherwise."""
    return name[:-1] if name.endswith("s") else name + "s"


DEFAULT_STRATEGIES: tuple[MatchStrategy, ...] = (
    MatchStrategy("exact", lambda name: name),
    MatchStrategy("singular", singularize),
    MatchStrategy("plural-guess", _plural_guess),
)


def resolve_model(
    name: str,
    schema: SchemaTable,
    strategies: tuple[MatchStrategy, ...] = DEFAULT_STRATEGIES,
) -> ModelDefinition:
    """Return the model matching *name*, case-insensitively.

    Strategies are tried in order; within a strategy, models are tried in
    declaration order.  Matching stops at the first hit.

    Raises:
        ModelNotFoundError: If no strategy matches any model.  The error
            lists every known model name.
    """
    provided = name.strip().lower()
    by_lower = [(model_name.lower(), model) for model_name, model in schema.models.items()]

    for strategy in strategies:
        candidate = strategy.candidate(provided)
        for lowered, model in by_lower:
            if lowered == candidate:
                return model

    raise ModelNotFoundError(name, schema.model_names)
