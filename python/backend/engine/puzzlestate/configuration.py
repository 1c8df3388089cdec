"""The contract every searchable puzzle state satisfies."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class Configuration(Hashable, Protocol):
    """An immutable puzzle configuration the solver can search over.

    Implementations must compare and hash by value: two configurations that
    describe the same arrangement are equal and share a hash, however they
    were built.  The solver never mutates a configuration; every move
    produces a new one.
    """

    def is_goal(self) -> bool:
        """Return True if this configuration solves the puzzle."""
        ...

    def successors(self) -> Iterable[Configuration]:
        """Return the configurations reachable in one move.

        The collection holds no duplicates and its order is the same on
        every run.  It may contain ``self`` and may be empty.
        """
        ...
