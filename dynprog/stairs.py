"""Staircase counting and minimum-cost climbing."""

from collections.abc import Sequence

__all__ = ["climb_stairs", "min_cost_climbing_stairs", "min_cost_climbing_stairs_table"]


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb n stairs taking 1 or 2 steps at a time."""
    if n <= 2:
        return n
    prev2, prev1 = 1, 2
    for _ in range(3, n + 1):
        prev2, prev1 = prev1, prev1 + prev2
    return prev1


def _check_cost(cost: Sequence[int]) -> None:
    if len(cost) < 2:
        raise ValueError("cost must hold at least two steps")


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the minimum cost to reach the top, using constant space."""
    _check_cost(cost)
    stair0, stair1 = cost[0], cost[1]
    for step in cost[2:]:
        stair0, stair1 = stair1, min(stair0, stair1) + step
    return min(stair0, stair1)


def min_cost_climbing_stairs_table(cost: Sequence[int]) -> int:
    """Return the minimum cost to reach the top, keeping the full table."""
    _check_cost(cost)
    table = [cost[0], cost[1]]
    for step in cost[2:]:
        table.append(min(table[-1], table[-2]) + step)
    return min(table[-1], table[-2])