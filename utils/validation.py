"""
Snapshot validation policies for the Banker's Algorithm Simulator.

The evaluator accepts any integer snapshot. Whether inconsistent input is
rejected, auto-corrected, or reported and evaluated anyway is decided here,
by a policy the caller selects.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from models.snapshot import Snapshot
from utils.logger import SimulatorLogger


DEFAULT_MAX_PROCESSES = 8


class SnapshotValidationError(Exception):
    """Exception raised when a blocking policy rejects a snapshot."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(self.problems[0] if self.problems else "Invalid snapshot")


@dataclass
class ValidationOutcome:
    """Snapshot to evaluate, plus the messages produced while validating it."""
    snapshot: Snapshot
    messages: List[str] = field(default_factory=list)


def find_problems(snapshot: Snapshot, max_processes: int = DEFAULT_MAX_PROCESSES) -> List[str]:
    """
    List every domain-consistency problem of a snapshot.

    Checks, in order:
    1. Total >= sum(Hold)
    2. Hold[i] <= Max[i] for each row
    3. n <= max_processes (n! orders are enumerated)

    Args:
        snapshot: Snapshot to check
        max_processes: Largest process count allowed

    Returns:
        Problem messages (empty if the snapshot is consistent)
    """
    problems = []

    if snapshot.total < snapshot.total_hold:
        problems.append("Total resources cannot be less than currently held.")

    for i, process in enumerate(snapshot.processes):
        if process.hold > process.max_claim:
            problems.append(f"Row {i + 1}: Hold cannot exceed Max.")

    if snapshot.num_processes > max_processes:
        problems.append(_too_many_processes_message(max_processes))

    return problems


def _too_many_processes_message(max_processes: int) -> str:
    return (
        f"n > {max_processes} creates a very large list (factorial). "
        f"Reduce to {max_processes} or below."
    )


class ValidationPolicy:
    """Base class for validation strategies."""

    name = ""

    def __init__(self, max_processes: int = DEFAULT_MAX_PROCESSES, logger: Optional[SimulatorLogger] = None):
        self.max_processes = max_processes
        self.logger = logger

    def apply(self, snapshot: Snapshot) -> ValidationOutcome:
        raise NotImplementedError

    def _log(self, message: str, level: str = "info") -> None:
        if self.logger:
            self.logger.log(message, level)


class BlockPolicy(ValidationPolicy):
    """Reject any inconsistent snapshot."""

    name = "block"

    def apply(self, snapshot: Snapshot) -> ValidationOutcome:
        problems = find_problems(snapshot, self.max_processes)
        if problems:
            for problem in problems:
                self._log(problem, "error")
            raise SnapshotValidationError(problems)
        return ValidationOutcome(snapshot=snapshot)


class ClampPolicy(ValidationPolicy):
    """
    Auto-correct the snapshot.

    Hold is clamped to Max row by row, then Total is raised to the held sum.
    A process count above the limit cannot be corrected and is rejected.
    """

    name = "clamp"

    def apply(self, snapshot: Snapshot) -> ValidationOutcome:
        if snapshot.num_processes > self.max_processes:
            message = _too_many_processes_message(self.max_processes)
            self._log(message, "error")
            raise SnapshotValidationError([message])

        messages = []
        corrected = snapshot

        for i, process in enumerate(snapshot.processes):
            if process.hold > process.max_claim:
                corrected = corrected.with_hold(i, process.max_claim)
                messages.append(f"Hold for row {i + 1} clamped to Max.")

        if corrected.total < corrected.total_hold:
            messages.append(
                f"Total cannot be less than currently held ({corrected.total_hold}). Auto-corrected."
            )
            corrected = corrected.with_total(corrected.total_hold)

        for message in messages:
            self._log(message, "warning")

        return ValidationOutcome(snapshot=corrected, messages=messages)


class WarnPolicy(ValidationPolicy):
    """Report problems and evaluate the snapshot unchanged."""

    name = "warn"

    def apply(self, snapshot: Snapshot) -> ValidationOutcome:
        problems = find_problems(snapshot, self.max_processes)
        for problem in problems:
            self._log(problem, "warning")
        return ValidationOutcome(snapshot=snapshot, messages=problems)


POLICIES = {
    BlockPolicy.name: BlockPolicy,
    ClampPolicy.name: ClampPolicy,
    WarnPolicy.name: WarnPolicy,
}


def get_policy(
    name: str,
    max_processes: int = DEFAULT_MAX_PROCESSES,
    logger: Optional[SimulatorLogger] = None
) -> ValidationPolicy:
    """
    Create a validation policy by name.

    Args:
        name: One of 'block', 'clamp', 'warn'
        max_processes: Largest process count allowed
        logger: Optional logger for policy messages

    Raises:
        ValueError: If the policy name is unknown
    """
    if name not in POLICIES:
        raise ValueError(f"Unknown validation policy '{name}' (expected one of: {', '.join(POLICIES)})")
    return POLICIES[name](max_processes=max_processes, logger=logger)
