"""
Order Safety Evaluator (Banker's Algorithm) for the Simulator.

Simulates sequential completion of processes in a GIVEN order over a single
pool of resource units, and decides whether the order is safe.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass
class SafetyTrace:
    """
    Step-by-step record of one order's simulation.

    Attributes:
        is_safe: True if every process in the order could finish
        failed_step: Position in the order where the simulation stopped (None if safe)
        available_before: Available pool before each examined step
    """
    is_safe: bool
    failed_step: Optional[int] = None
    available_before: List[int] = field(default_factory=list)


def as_int_vector(values: Sequence[int]) -> np.ndarray:
    """Vector of exact Python ints (object dtype, so sums never wrap)."""
    return np.array([int(v) for v in values], dtype=object)


def compute_need(max_claims: Sequence[int], holds: Sequence[int]) -> np.ndarray:
    """
    Need[i] = Max[i] - Hold[i].

    Args:
        max_claims: Maximum claim per process
        holds: Current holding per process (same length as max_claims)

    Returns:
        Vector of exact integer needs, same length as the inputs
    """
    return as_int_vector(max_claims) - as_int_vector(holds)


def initial_available(total: int, holds: Sequence[int]) -> int:
    """Available = Total - sum(Hold)."""
    return int(total) - sum(int(h) for h in holds)


def simulate_order(
    order: Sequence[int],
    total: int,
    max_claims: Sequence[int],
    holds: Sequence[int]
) -> SafetyTrace:
    """
    Simulate processes finishing in exactly the given order.

    Algorithm:
    1. Available = Total - sum(Hold[0..n-1]), n = len(order)
    2. For each process i in order:
       if Need[i] <= Available -> it can finish, Available += Hold[i]
       else                    -> UNSAFE, stop examining the order
    3. If every process finished -> SAFE

    Entries of max_claims/holds beyond n-1 are ignored. Negative need or
    negative available are not rejected; the comparison decides.

    Args:
        order: Permutation of range(n)
        total: Total resource units
        max_claims: Maximum claim per process (length >= n)
        holds: Current holding per process (length >= n)

    Returns:
        SafetyTrace for the order
    """
    n = len(order)
    max_vec = as_int_vector(max_claims[:n])
    hold_vec = as_int_vector(holds[:n])
    need = max_vec - hold_vec

    available = initial_available(total, hold_vec)
    trace = SafetyTrace(is_safe=True)

    for step, i in enumerate(order):
        trace.available_before.append(available)

        if need[i] <= available:
            # Process finishes and releases what it holds
            available += int(hold_vec[i])
        else:
            trace.is_safe = False
            trace.failed_step = step
            break

    return trace


def evaluate(
    order: Sequence[int],
    total: int,
    max_claims: Sequence[int],
    holds: Sequence[int]
) -> bool:
    """
    Check if the given order is SAFE.

    Args:
        order: Permutation of range(n)
        total: Total resource units
        max_claims: Maximum claim per process
        holds: Current holding per process

    Returns:
        True if the order is safe, False otherwise
    """
    return simulate_order(order, total, max_claims, holds).is_safe
