"""
Order Enumerator for the Simulator.

Generates every execution order (permutation of process indices) by
backtracking in ascending-value order, so output is reproducible.
"""

import math
from typing import Iterator, List


def iter_permutations(n: int) -> Iterator[List[int]]:
    """
    Yield every permutation of range(n), one fresh list per order.

    Backtracking: at each depth try each unused value in ascending order,
    mark it used, recurse, then unmark before the next value. The used/path
    state is local to this call.

    Args:
        n: Number of processes

    Yields:
        Orders as lists of indices; permutation of range(0) is []
    """
    used = [False] * n
    path: List[int] = []

    def backtrack() -> Iterator[List[int]]:
        if len(path) == n:
            yield path.copy()
            return

        for value in range(n):
            if used[value]:
                continue
            used[value] = True
            path.append(value)
            yield from backtrack()
            path.pop()
            used[value] = False

    yield from backtrack()


def permutations(n: int) -> List[List[int]]:
    """
    List all n! orders of range(n).

    No upper bound is applied here; callers should refuse large n first.

    Args:
        n: Number of processes

    Returns:
        List of orders in backtracking order
    """
    return list(iter_permutations(n))


def count_permutations(n: int) -> int:
    """Number of orders permutations(n) produces (n!)."""
    return math.factorial(n)
