"""
Order Enumerator Tests

Tests that every permutation is produced exactly once, in a reproducible
backtracking order, and that enumeration finds a safe order when one exists.
"""

import itertools
import math
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from algorithms.permutations import permutations, iter_permutations, count_permutations
from algorithms.safety import evaluate


def test_permutation_counts_and_distinctness():
    """permutations(n) returns n! distinct permutations of range(n)."""
    print("\n" + "="*60)
    print("TEST 1: Permutation Completeness")
    print("="*60)

    for n in range(0, 7):
        orders = permutations(n)
        expected = set(itertools.permutations(range(n)))
        produced = {tuple(order) for order in orders}

        print(f"  n={n}: {len(orders)} orders")
        assert len(orders) == math.factorial(n), f"n={n} should give n! orders"
        assert len(produced) == len(orders), f"n={n} produced duplicates"
        assert produced == expected, f"n={n} omitted or invented orders"
        assert count_permutations(n) == len(orders)

    print("\n✅ Permutation Completeness Tests PASSED")


def test_zero_processes():
    """n = 0 yields exactly one empty order."""
    assert permutations(0) == [[]]
    assert list(iter_permutations(0)) == [[]]
    print("  ✓ permutations(0) == [[]]")


def test_backtracking_order():
    """Orders come out in ascending-value backtracking order."""
    print("\n" + "="*60)
    print("TEST 2: Deterministic Order")
    print("="*60)

    assert permutations(3) == [
        [0, 1, 2],
        [0, 2, 1],
        [1, 0, 2],
        [1, 2, 0],
        [2, 0, 1],
        [2, 1, 0],
    ]
    assert permutations(4) == [list(p) for p in itertools.permutations(range(4))]
    assert permutations(5) == permutations(5), "Enumeration should be reproducible"
    print("  ✓ Ascending backtracking order, reproducible")


def test_orders_are_independent_copies():
    """Each yielded order is a fresh list, not a view of the working path."""
    orders = list(iter_permutations(3))
    orders[0].append(99)
    assert orders[1] == [0, 2, 1]
    assert permutations(3)[0] == [0, 1, 2]
    print("  ✓ Orders are independent")


def test_enumeration_finds_safe_order():
    """If some order is safe, enumeration must surface at least one SAFE verdict."""
    print("\n" + "="*60)
    print("TEST 3: Enumeration Completeness Against Evaluator")
    print("="*60)

    snapshots = [
        (10, [8, 5, 9], [1, 3, 3]),
        (12, [10, 4, 9, 3], [5, 2, 2, 1]),
        (7, [3, 3, 3, 3, 3], [1, 1, 1, 1, 1]),
    ]

    for total, max_claims, holds in snapshots:
        n = len(max_claims)
        # Greedy order: smallest need first is safe whenever any order is
        need = [m - h for m, h in zip(max_claims, holds)]
        greedy = sorted(range(n), key=lambda i: need[i])
        greedy_safe = evaluate(greedy, total, max_claims, holds)

        verdicts = [evaluate(order, total, max_claims, holds) for order in permutations(n)]
        print(f"  total={total}, max={max_claims}, hold={holds}: {sum(verdicts)} SAFE of {len(verdicts)}")

        assert greedy_safe, "Test snapshots are chosen to have a safe order"
        assert any(verdicts), "Enumeration should include a safe order"


def main():
    """Run all order enumerator tests."""
    try:
        test_permutation_counts_and_distinctness()
        test_zero_processes()
        test_backtracking_order()
        test_orders_are_independent_copies()
        test_enumeration_finds_safe_order()
        print("\n🎉 ALL PERMUTATION TESTS PASSED\n")
        return 0
    except AssertionError as e:
        print(f"\n❌ TEST FAILED: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
