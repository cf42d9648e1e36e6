"""
Order Analysis Library for the Banker's Algorithm Simulator.

Runs the Order Enumerator over a snapshot, evaluates every order, and
aggregates the verdicts into a report.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass, field
import statistics

import numpy as np

from algorithms.permutations import iter_permutations
from algorithms.safety import SafetyTrace, simulate_order
from models.snapshot import Snapshot
from models.verdict import OrderResult, Verdict
from utils.logger import SimulatorLogger


@dataclass
class EvaluationReport:
    """Verdicts for every order of one snapshot."""
    snapshot: Snapshot
    results: List[OrderResult] = field(default_factory=list)

    @property
    def total_orders(self) -> int:
        return len(self.results)

    @property
    def safe_count(self) -> int:
        return sum(1 for r in self.results if r.is_safe)

    @property
    def unsafe_count(self) -> int:
        return self.total_orders - self.safe_count

    @property
    def safe_ratio(self) -> float:
        """Fraction of orders that are safe (0.0 when there are no orders)."""
        if not self.results:
            return 0.0
        return self.safe_count / self.total_orders

    @property
    def safe_orders(self) -> List[OrderResult]:
        return [r for r in self.results if r.is_safe]

    def has_safe_order(self) -> bool:
        return any(r.is_safe for r in self.results)

    def failure_step_counts(self) -> Dict[int, int]:
        """Number of UNSAFE orders that failed at each position."""
        counts: Dict[int, int] = {}
        for r in self.results:
            if r.failed_step is not None:
                counts[r.failed_step] = counts.get(r.failed_step, 0) + 1
        return dict(sorted(counts.items()))

    def avg_failure_step(self) -> float:
        """Mean position at which UNSAFE orders failed (0.0 if none failed)."""
        steps = [r.failed_step for r in self.results if r.failed_step is not None]
        if not steps:
            return 0.0
        return statistics.mean(steps)

    def lines(self) -> List[str]:
        """Result lines in enumeration order."""
        return [str(r) for r in self.results]

    def display(self) -> str:
        """Format summary for display."""
        result = "\nSummary:\n"
        result += f"  Orders evaluated: {self.total_orders}\n"
        result += f"  SAFE: {self.safe_count}\n"
        result += f"  UNSAFE: {self.unsafe_count}\n"
        result += f"  Safe ratio: {self.safe_ratio:.2%}"

        failures = self.failure_step_counts()
        if failures:
            result += "\n  UNSAFE orders by failing step:"
            for step, count in failures.items():
                result += f"\n    Step {step}: {count}"
        return result


def evaluate_order(snapshot: Snapshot, order: List[int]) -> OrderResult:
    """
    Evaluate a single order against a snapshot.

    Args:
        snapshot: Snapshot to evaluate
        order: Permutation of range(snapshot.num_processes)

    Returns:
        OrderResult with verdict, label, and failing step
    """
    trace = simulate_order(order, snapshot.total, snapshot.max_vector, snapshot.hold_vector)
    return _build_result(snapshot, order, trace)


def _build_result(snapshot: Snapshot, order: List[int], trace: SafetyTrace) -> OrderResult:
    return OrderResult(
        order=list(order),
        verdict=Verdict.from_bool(trace.is_safe),
        label=snapshot.label(order),
        failed_step=trace.failed_step
    )


def analyze_snapshot(snapshot: Snapshot, logger: Optional[SimulatorLogger] = None) -> EvaluationReport:
    """
    Enumerate every order of the snapshot's processes and classify each.

    Orders are evaluated independently and in backtracking order, so the
    report is reproducible for a given snapshot.

    Args:
        snapshot: Snapshot to evaluate (already validated by the caller)
        logger: Optional logger; each verdict is logged, traces in verbose mode

    Returns:
        EvaluationReport with one result per order
    """
    report = EvaluationReport(snapshot=snapshot)
    max_vec = snapshot.max_vector
    hold_vec = snapshot.hold_vector
    need = max_vec - hold_vec

    for order in iter_permutations(snapshot.num_processes):
        trace = simulate_order(order, snapshot.total, max_vec, hold_vec)
        result = _build_result(snapshot, order, trace)
        report.results.append(result)

        if logger:
            _log_result(logger, snapshot, result, trace, need)

    return report


def _log_result(
    logger: SimulatorLogger,
    snapshot: Snapshot,
    result: OrderResult,
    trace: SafetyTrace,
    need: np.ndarray
) -> None:
    """Log one verdict, with the blocking process for UNSAFE orders."""
    examined = result.order[:len(trace.available_before)]
    logger.log_trace(
        result.label,
        [snapshot.processes[i].pid for i in examined],
        [int(need[i]) for i in examined],
        trace.available_before
    )

    reason = ""
    if result.failed_step is not None:
        blocked = result.order[result.failed_step]
        reason = (
            f"{snapshot.processes[blocked].pid} needs {int(need[blocked])}, "
            f"available {trace.available_before[-1]}"
        )
    logger.log_order(result.label, result.is_safe, reason)
