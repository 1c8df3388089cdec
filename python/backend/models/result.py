"""Outcome of a single breadth-first search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from backend.engine.puzzlestate import Configuration

C = TypeVar("C", bound=Configuration)

NO_SOLUTION = "No solution"


@dataclass(frozen=True)
class SearchResult(Generic[C]):
    """Shortest path found by the solver plus exploration statistics.

    ``path`` runs from the start configuration to the goal inclusive, or is
    ``None`` when no goal is reachable.  ``total_configs`` counts every
    successor produced (plus one for the start); ``unique_configs`` counts
    distinct configurations discovered.
    """

    path: list[C] | None
    total_configs: int
    unique_configs: int

    # -- queries --------------------------------------------------------------

    @property
    def is_solvable(self) -> bool:
        return self.path is not None

    @property
    def goal(self) -> C | None:
        return self.path[-1] if self.path else None

    @property
    def steps(self) -> int | None:
        """Number of moves from start to goal, ``None`` without a solution."""
        if self.path is None:
            return None
        return len(self.path) - 1

    # -- formatting -----------------------------------------------------------

    def path_as_string(self) -> str:
        """Return ``Step i: <config>`` lines, or ``"No solution"``."""
        if self.path is None:
            return NO_SOLUTION
        return "\n".join(f"Step {i}: {config}" for i, config in enumerate(self.path))
