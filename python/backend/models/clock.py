"""Clock puzzle: turn the hand one hour at a time until it points at the goal."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClockConfig:
    """A clock with *hours* marks (numbered ``1..hours``) and one hand."""

    hours: int
    hand: int
    goal: int

    def __post_init__(self) -> None:
        if self.hours < 1:
            raise ValueError(f"A clock needs at least 1 hour, got {self.hours}.")
        for name, value in (("hand", self.hand), ("goal", self.goal)):
            if not 1 <= value <= self.hours:
                raise ValueError(
                    f"{name.capitalize()} hour {value} is not on a "
                    f"{self.hours}-hour clock."
                )

    # -- configuration contract -----------------------------------------------

    def is_goal(self) -> bool:
        return self.hand == self.goal

    def successors(self) -> tuple[ClockConfig, ...]:
        """Turn the hand back one hour, then forward one hour (wrapping)."""
        back = self.hours if self.hand == 1 else self.hand - 1
        forward = 1 if self.hand == self.hours else self.hand + 1
        # dict preserves order while dropping the duplicate on tiny clocks
        hands = dict.fromkeys((back, forward))
        return tuple(self._turn_to(h) for h in hands)

    # -- helpers --------------------------------------------------------------

    def _turn_to(self, hand: int) -> ClockConfig:
        return ClockConfig(hours=self.hours, hand=hand, goal=self.goal)

    def __str__(self) -> str:
        return str(self.hand)
