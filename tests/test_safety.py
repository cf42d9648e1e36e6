"""
Safety Evaluator Tests

Tests need/available computation and the order safety simulation,
including the classical example and inconsistent snapshots.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from algorithms.safety import compute_need, initial_available, evaluate, simulate_order


# Classical example: total=10, max=[8,5,9], hold=[1,3,3]
TOTAL = 10
MAX = [8, 5, 9]
HOLD = [1, 3, 3]


def test_compute_need_and_available():
    """Test Need = Max - Hold and Available = Total - sum(Hold)."""
    print("\n" + "="*60)
    print("TEST 1: Need and Available")
    print("="*60)

    need = compute_need(MAX, HOLD)
    print(f"  Need: {list(need)}")
    assert list(need) == [7, 2, 6], "Need should be Max - Hold"
    assert len(need) == len(MAX), "Need should preserve length"

    available = initial_available(TOTAL, HOLD)
    print(f"  Available: {available}")
    assert available == 3, "Available should be 10 - 7"

    print("\n✅ Need and Available Tests PASSED")


def test_pure_functions_do_not_mutate():
    """Calling need/available twice gives the same answer and leaves inputs alone."""
    print("\n" + "="*60)
    print("TEST 2: Purity")
    print("="*60)

    max_claims = [4, 0, 6]
    holds = [5, 0, 2]

    first = compute_need(max_claims, holds)
    second = compute_need(max_claims, holds)
    assert list(first) == list(second), "compute_need should be deterministic"
    assert list(first) == [-1, 0, 4], "Negative need is returned as-is"

    assert initial_available(3, holds) == initial_available(3, holds) == -4

    assert max_claims == [4, 0, 6], "max_claims should not be mutated"
    assert holds == [5, 0, 2], "holds should not be mutated"

    order = [2, 0, 1]
    evaluate(order, 10, max_claims, holds)
    assert order == [2, 0, 1], "order should not be mutated"
    assert holds == [5, 0, 2], "evaluate should not mutate holds"

    print("  ✓ Inputs unchanged, outputs repeatable")


def test_classical_example():
    """The three documented orders of the classical example."""
    print("\n" + "="*60)
    print("TEST 3: Classical Example")
    print("="*60)

    # need[0]=7 > 3
    assert evaluate([0, 1, 2], TOTAL, MAX, HOLD) is False
    print("  ✓ [0, 1, 2] UNSAFE")

    # need[1]=2 <= 3 -> 6; need[0]=7 > 6
    assert evaluate([1, 0, 2], TOTAL, MAX, HOLD) is False
    print("  ✓ [1, 0, 2] UNSAFE")

    # 2 <= 3 -> 6; 6 <= 6 -> 9; 7 <= 9
    assert evaluate([1, 2, 0], TOTAL, MAX, HOLD) is True
    print("  ✓ [1, 2, 0] SAFE")


def test_order_sensitivity():
    """Same snapshot, different verdicts depending on order."""
    print("\n" + "="*60)
    print("TEST 4: Order Sensitivity")
    print("="*60)

    total = 5
    max_claims = [2, 5, 1]
    holds = [1, 2, 1]
    # available = 1, need = [1, 3, 0]

    assert evaluate([0, 1, 2], total, max_claims, holds) is False  # 1 -> 2; need 3 > 2
    assert evaluate([0, 2, 1], total, max_claims, holds) is True   # 1 -> 2 -> 3; need 3 <= 3
    print("  ✓ Verdicts differ by order")


def test_trace_records_failure_step():
    """simulate_order reports where the order stopped."""
    print("\n" + "="*60)
    print("TEST 5: Safety Trace")
    print("="*60)

    trace = simulate_order([1, 0, 2], TOTAL, MAX, HOLD)
    assert trace.is_safe is False
    assert trace.failed_step == 1, "Should fail at the second process"
    assert trace.available_before == [3, 6], "Short-circuit after the failing step"

    trace = simulate_order([1, 2, 0], TOTAL, MAX, HOLD)
    assert trace.is_safe is True
    assert trace.failed_step is None
    assert trace.available_before == [3, 6, 9]
    print("  ✓ Trace matches hand simulation")


def test_empty_order_is_safe():
    """n = 0: the empty order is trivially safe."""
    assert evaluate([], 0, [], []) is True
    assert evaluate([], 7, [], []) is True
    print("  ✓ Empty order SAFE")


def test_extra_entries_are_ignored():
    """Entries of max/hold beyond len(order) do not affect the verdict."""
    # A fourth row holding 100 units would make available negative if counted
    assert evaluate([1, 2, 0], TOTAL, MAX + [200], HOLD + [100]) is True
    print("  ✓ Extra rows ignored")


def test_inconsistent_snapshots():
    """Negative need and negative available fall through the arithmetic."""
    print("\n" + "="*60)
    print("TEST 6: Inconsistent Snapshots")
    print("="*60)

    # hold > max: need = -2, trivially satisfiable
    assert evaluate([0], 5, [1], [3]) is True
    print("  ✓ Negative need with non-negative available: SAFE")

    # total < sum(hold): available = -1, even a zero need fails
    assert evaluate([0, 1], 3, [2, 2], [2, 2]) is False
    print("  ✓ Negative available with zero need: UNSAFE")

    # both at once: need = -5 <= available = -4
    assert evaluate([0], 1, [0], [5]) is True
    # need = -1 > available = -4
    assert evaluate([0], 1, [4], [5]) is False
    print("  ✓ Negative need with negative available decided by comparison")


def test_large_integers_stay_exact():
    """Quantities beyond 64 bits neither wrap nor raise."""
    print("\n" + "="*60)
    print("TEST 7: Large Integers")
    print("="*60)

    assert initial_available(2**63, [2**62, 2**62]) == 0
    print("  ✓ 2**63 - (2**62 + 2**62) == 0")

    # need[0] = 2**62 - 1 > available 0
    assert evaluate([0, 1], 2**63, [2**63 - 1, 2**62], [2**62, 2**62]) is False
    print("  ✓ Sum of holdings does not wrap")

    assert evaluate([0], 2**64, [2**64], [2**64]) is True
    assert list(compute_need([2**70], [1])) == [2**70 - 1]

    trace = simulate_order([1, 0], 2**65, [2**64, 3], [2**63, 1])
    assert trace.available_before == [2**65 - 2**63 - 1, 2**65 - 2**63]
    assert trace.is_safe is True
    print("  ✓ Values above 2**63 evaluate exactly")


def main():
    """Run all safety evaluator tests."""
    try:
        test_compute_need_and_available()
        test_pure_functions_do_not_mutate()
        test_classical_example()
        test_order_sensitivity()
        test_trace_records_failure_step()
        test_empty_order_is_safe()
        test_extra_entries_are_ignored()
        test_inconsistent_snapshots()
        test_large_integers_stay_exact()
        print("\n🎉 ALL SAFETY TESTS PASSED\n")
        return 0
    except AssertionError as e:
        print(f"\n❌ TEST FAILED: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
