"""Breadth-first puzzle solver."""

from __future__ import annotations

import logging
from collections import Counter, deque
from typing import TypeVar

from backend.engine.puzzlestate import Configuration
from backend.models.result import SearchResult

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Configuration)


class Solver:
    """Stateless solver — all methods are static.

    Every call to :meth:`solve` owns its own frontier and maps, so nothing
    leaks from one search into the next.
    """

    @staticmethod
    def solve(start: C) -> SearchResult[C]:
        """Search breadth-first from *start* for the nearest goal configuration.

        Never raises for an unsolvable start; the result's ``path`` is
        ``None`` instead.
        """
        logger.debug("Searching from %s", start)

        frontier: deque[C] = deque([start])
        # The root is its own predecessor.
        predecessors: dict[C, C] = {start: start}
        seen: Counter[C] = Counter({start: 1})
        total_configs = 1
        goal: C | None = None

        while frontier:
            current = frontier.popleft()

            if current.is_goal():
                goal = current
                break

            for neighbor in current.successors():
                if neighbor not in predecessors:
                    predecessors[neighbor] = current
                    frontier.append(neighbor)
                seen[neighbor] += 1
                total_configs += 1

        path = Solver._build_path(start, goal, predecessors)

        if path is None:
            logger.debug(
                "Frontier exhausted after %d unique configurations, no solution",
                len(seen),
            )
        else:
            logger.debug(
                "Goal %s reached in %d steps (%d unique / %d total configurations)",
                goal, len(path) - 1, len(seen), total_configs,
            )

        return SearchResult(
            path=path,
            total_configs=total_configs,
            unique_configs=len(seen),
        )

    @staticmethod
    def next_state(start: C) -> C | None:
        """Return the configuration one step along the shortest path.

        ``None`` if *start* is already solved or no solution exists.
        """
        if start.is_goal():
            return None

        path = Solver.solve(start).path
        return path[1] if path else None

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _build_path(
        start: C, goal: C | None, predecessors: dict[C, C]
    ) -> list[C] | None:
        """Walk predecessor links from *goal* back to *start*."""
        if goal is None:
            return None

        path: deque[C] = deque()
        current = goal
        while current != start:
            path.appendleft(current)
            current = predecessors[current]
        path.appendleft(start)
        return list(path)
