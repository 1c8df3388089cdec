"""Vanilla terminal frontend — no third-party dependencies.

Prints a solver result in the plain step-by-step format.
"""

from __future__ import annotations

from backend.models.result import SearchResult


def run(title: str, result: SearchResult) -> None:
    """Print *title*, the search statistics, and the solution path."""
    print(title)
    print(f"Total configs: {result.total_configs}")
    print(f"Unique configs: {result.unique_configs}")
    print(result.path_as_string())
