"""Water buckets puzzle: fill, dump and pour until one bucket holds the goal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class WaterStep(StrEnum):
    FILL = "fill"
    DUMP = "dump"
    POUR = "pour"


@dataclass(frozen=True)
class WaterConfig:
    """Current amount in each bucket, alongside the fixed capacities and goal.

    ``capacities`` and ``buckets`` are index-aligned tuples.
    """

    capacities: tuple[int, ...]
    buckets: tuple[int, ...]
    goal: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "capacities", tuple(self.capacities))
        object.__setattr__(self, "buckets", tuple(self.buckets))
        if not self.capacities:
            raise ValueError("At least one bucket is required.")
        if any(c < 0 for c in self.capacities):
            raise ValueError(f"Bucket capacities must be >= 0, got {list(self.capacities)}.")
        if self.goal < 0:
            raise ValueError(f"Goal amount must be >= 0, got {self.goal}.")
        if len(self.buckets) != len(self.capacities):
            raise ValueError(
                f"Expected {len(self.capacities)} bucket amounts, "
                f"got {len(self.buckets)}."
            )
        for amount, capacity in zip(self.buckets, self.capacities):
            if not 0 <= amount <= capacity:
                raise ValueError(
                    f"Amount {amount} does not fit a bucket of capacity {capacity}."
                )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def initial(cls, capacities: list[int] | tuple[int, ...], goal: int) -> WaterConfig:
        """Return the starting configuration with every bucket empty.

        Example::

            WaterConfig.initial([5, 3], 4)
        """
        capacities = tuple(capacities)
        return cls(capacities=capacities, buckets=(0,) * len(capacities), goal=goal)

    # -- configuration contract -----------------------------------------------

    def is_goal(self) -> bool:
        return self.goal in self.buckets

    def successors(self) -> tuple[WaterConfig, ...]:
        """Every fill, then every dump, then every pour, without duplicates."""
        moves: dict[WaterConfig, None] = {}
        for step in WaterStep:
            for neighbor in self._apply(step):
                moves.setdefault(neighbor, None)
        return tuple(moves)

    # -- moves ----------------------------------------------------------------

    def fill(self, index: int) -> WaterConfig:
        return self._with(index, self.capacities[index])

    def dump(self, index: int) -> WaterConfig:
        return self._with(index, 0)

    def pour(self, source: int, target: int) -> WaterConfig:
        """Pour *source* into *target* until one is empty or the other full."""
        room = self.capacities[target] - self.buckets[target]
        moved = min(room, self.buckets[source])
        amounts = list(self.buckets)
        amounts[source] -= moved
        amounts[target] += moved
        return WaterConfig(self.capacities, tuple(amounts), self.goal)

    # -- helpers --------------------------------------------------------------

    def _apply(self, step: WaterStep) -> list[WaterConfig]:
        indices = range(len(self.buckets))
        if step is WaterStep.FILL:
            return [self.fill(i) for i in indices if self.buckets[i] != self.capacities[i]]
        if step is WaterStep.DUMP:
            return [self.dump(i) for i in indices if self.buckets[i] != 0]
        return [
            self.pour(a, b)
            for a in indices
            for b in indices
            if a != b
            and self.buckets[a] != 0
            and self.buckets[b] != self.capacities[b]
        ]

    def _with(self, index: int, amount: int) -> WaterConfig:
        amounts = list(self.buckets)
        amounts[index] = amount
        return WaterConfig(self.capacities, tuple(amounts), self.goal)

    def __str__(self) -> str:
        return str(list(self.buckets))
