"""Water buckets tests — model moves and solver results."""

from __future__ import annotations

import pytest

from backend.engine.puzzlesolver import Solver
from backend.models.water import WaterConfig


def _amounts(path: list[WaterConfig]) -> list[tuple[int, ...]]:
    return [c.buckets for c in path]


# -- model --------------------------------------------------------------------


def test_initial_is_empty() -> None:
    config = WaterConfig.initial([5, 3], 4)

    assert config.buckets == (0, 0)
    assert config.capacities == (5, 3)
    assert str(config) == "[0, 0]"
    assert not config.is_goal()


def test_successor_order_fill_dump_pour() -> None:
    config = WaterConfig((5, 3), (2, 1), 4)

    assert [c.buckets for c in config.successors()] == [
        (5, 1),  # fill 0
        (2, 3),  # fill 1
        (0, 1),  # dump 0
        (2, 0),  # dump 1
        (0, 3),  # pour 0 -> 1
        (3, 0),  # pour 1 -> 0
    ]


def test_successors_are_distinct() -> None:
    config = WaterConfig((3, 3, 3), (3, 0, 3), 3)

    buckets = [c.buckets for c in config.successors()]

    assert len(buckets) == len(set(buckets))
    assert (3, 3, 3) in buckets
    assert (0, 3, 3) in buckets


def test_pour_stops_when_target_full() -> None:
    config = WaterConfig((5, 3), (5, 1), 4)

    assert config.pour(0, 1).buckets == (3, 3)
    assert config.pour(1, 0).buckets == (5, 1)


@pytest.mark.parametrize(
    ("capacities", "goal"),
    [([], 1), ([5, -1], 1), ([5, 3], -2)],
)
def test_invalid_buckets(capacities: list[int], goal: int) -> None:
    with pytest.raises(ValueError):
        WaterConfig.initial(capacities, goal)


def test_amount_over_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        WaterConfig((5, 3), (6, 0), 4)


# -- solving ------------------------------------------------------------------


def test_classic_five_three_four() -> None:
    result = Solver.solve(WaterConfig.initial([5, 3], 4))

    assert result.steps == 6
    assert _amounts(result.path) == [
        (0, 0), (5, 0), (2, 3), (2, 0), (0, 2), (5, 2), (4, 3),
    ]
    assert 4 in result.goal.buckets
    assert result.total_configs == 43
    assert result.unique_configs == 14


def test_goal_larger_than_every_bucket() -> None:
    result = Solver.solve(WaterConfig.initial([5, 3], 9))

    assert result.path is None
    assert result.path_as_string() == "No solution"
    # only states with a bucket full or empty are reachable
    assert result.unique_configs <= 16


def test_goal_not_a_multiple_of_gcd() -> None:
    result = Solver.solve(WaterConfig.initial([6, 4], 3))

    assert not result.is_solvable


def test_zero_goal_is_solved_at_start() -> None:
    start = WaterConfig.initial([5, 3], 0)

    result = Solver.solve(start)

    assert result.path == [start]
    assert Solver.next_state(start) is None


def test_three_buckets() -> None:
    # 8/5/3 split: reach 4 starting from empty buckets
    result = Solver.solve(WaterConfig.initial([8, 5, 3], 4))

    assert result.is_solvable
    assert 4 in result.goal.buckets
    # fill 5, pour 5->3, dump 3, pour 5->3, fill 5, pour 5->3
    assert result.steps == 6
    assert result.total_configs == 523
    assert result.unique_configs == 96


def test_list_fields_are_stored_as_tuples() -> None:
    config = WaterConfig([5, 3], [0, 0], 4)

    assert config.capacities == (5, 3)
    assert config.buckets == (0, 0)
    assert config == WaterConfig.initial([5, 3], 4)
    assert Solver.solve(config).steps == 6
