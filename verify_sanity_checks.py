"""
Verify sanity checks are working:
1. Classical example reproduces its documented verdicts
2. Enumeration yields n! distinct orders
3. Inconsistent snapshots evaluate without raising
"""
import math
import sys
import io
sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')

from utils.scenario_loader import load_scenario
from algorithms.safety import evaluate
from algorithms.permutations import permutations
from analysis.analyzer import analyze_snapshot

scenario_path = "scenarios/classic.json"
snapshot = load_scenario(scenario_path)

print("="*60)
print("SANITY CHECK VERIFICATION")
print("="*60)

print("\n1. Classical example verdicts...")
expected = {(0, 1, 2): False, (1, 0, 2): False, (1, 2, 0): True}
for order, safe in expected.items():
    result = evaluate(list(order), snapshot.total, snapshot.max_vector, snapshot.hold_vector)
    if result != safe:
        print(f"   ✗ FAILED: {list(order)} should be {'SAFE' if safe else 'UNSAFE'}")
        sys.exit(1)
    print(f"   ✓ {snapshot.label(list(order))} - {'SAFE' if safe else 'UNSAFE'}")

print("\n2. Enumeration completeness...")
for n in range(0, 7):
    orders = permutations(n)
    distinct = {tuple(o) for o in orders}
    if len(orders) != math.factorial(n) or len(distinct) != len(orders):
        print(f"   ✗ FAILED: n={n} produced {len(orders)} orders ({len(distinct)} distinct)")
        sys.exit(1)
print("   ✓ n! distinct orders for n = 0..6")

print("\n3. Inconsistent snapshot evaluates without error...")
inconsistent = load_scenario("scenarios/inconsistent.json")
report = analyze_snapshot(inconsistent)
print(f"   ✓ {report.total_orders} orders evaluated, {report.safe_count} SAFE")

print("\n" + "="*60)
print("ALL SANITY CHECKS PASSED ✓")
print("="*60)
