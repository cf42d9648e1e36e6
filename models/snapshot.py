"""
Snapshot model for the Banker's Algorithm Order Safety Evaluator.

Holds the immutable system snapshot evaluated against every execution order.
"""

import numpy as np
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class ProcessClaim:
    """
    A single process row of the snapshot.

    Attributes:
        pid: Human-readable process identifier (e.g. "P1")
        max_claim: Maximum units the process may ever claim
        hold: Units currently allocated to the process
    """
    pid: str
    max_claim: int
    hold: int

    @property
    def need(self) -> int:
        """Remaining units required to reach max_claim (may be negative)."""
        return self.max_claim - self.hold


@dataclass(frozen=True)
class Snapshot:
    """
    Immutable system snapshot: total units plus per-process claims.

    Domain invariants (hold <= max, total >= sum(hold)) are not enforced here;
    a validation policy decides what to do about them before evaluation.
    """
    total: int
    processes: Tuple[ProcessClaim, ...] = field(default_factory=tuple)

    @classmethod
    def from_lists(
        cls,
        total: int,
        max_claims: List[int],
        holds: List[int],
        pids: Optional[List[str]] = None
    ) -> "Snapshot":
        """
        Build a snapshot from parallel max/hold lists.

        Missing or blank ids default to P1..Pn.
        """
        if len(max_claims) != len(holds):
            raise ValueError(
                f"max ({len(max_claims)}) and hold ({len(holds)}) lengths differ"
            )
        pids = list(pids or [])
        processes = tuple(
            ProcessClaim(
                pid=pids[i] if i < len(pids) and pids[i] else f"P{i + 1}",
                max_claim=int(max_claims[i]),
                hold=int(holds[i])
            )
            for i in range(len(max_claims))
        )
        return cls(total=int(total), processes=processes)

    @property
    def num_processes(self) -> int:
        return len(self.processes)

    @property
    def pids(self) -> List[str]:
        return [p.pid for p in self.processes]

    @property
    def max_vector(self) -> np.ndarray:
        """Max claims as an exact integer vector [P]."""
        return np.array([p.max_claim for p in self.processes], dtype=object)

    @property
    def hold_vector(self) -> np.ndarray:
        """Current holdings as an exact integer vector [P]."""
        return np.array([p.hold for p in self.processes], dtype=object)

    @property
    def need_vector(self) -> np.ndarray:
        """Need = Max - Hold [P]."""
        return self.max_vector - self.hold_vector

    @property
    def total_hold(self) -> int:
        return sum(p.hold for p in self.processes)

    @property
    def available(self) -> int:
        """Unallocated units before any process runs (may be negative)."""
        return self.total - self.total_hold

    def with_total(self, total: int) -> "Snapshot":
        return replace(self, total=int(total))

    def with_hold(self, index: int, hold: int) -> "Snapshot":
        """Return a copy with one process's hold replaced."""
        processes = list(self.processes)
        processes[index] = replace(processes[index], hold=int(hold))
        return replace(self, processes=tuple(processes))

    def with_process_count(self, n: int) -> "Snapshot":
        """
        Resize to n processes, keeping existing rows and padding new rows
        with zero max/hold and default ids.
        """
        processes = list(self.processes[:n])
        for i in range(len(processes), n):
            processes.append(ProcessClaim(pid=f"P{i + 1}", max_claim=0, hold=0))
        return replace(self, processes=tuple(processes))

    def with_pids(self, pids: List[str]) -> "Snapshot":
        """Return a copy relabelled row by row; blank ids keep the current one."""
        processes = tuple(
            replace(p, pid=pids[i]) if i < len(pids) and pids[i] else p
            for i, p in enumerate(self.processes)
        )
        return replace(self, processes=processes)

    def label(self, order: List[int]) -> str:
        """Render an order as process ids joined by spaces."""
        return " ".join(
            self.processes[i].pid if i < self.num_processes else f"P{i + 1}"
            for i in order
        )

    def display(self) -> str:
        """
        Generate readable table of the snapshot.

        Returns:
            Formatted string showing totals and the Max/Hold/Need table
        """
        output = []
        output.append("\n" + "="*60)
        output.append("SYSTEM SNAPSHOT")
        output.append("="*60)
        output.append(f"\nTotal resources: {self.total}")
        output.append(f"Currently held:  {self.total_hold}")
        output.append(f"Available:       {self.available}")

        output.append("\n  #  Process ID     Max   Hold   Need")
        for i, p in enumerate(self.processes):
            output.append(
                f"  {i + 1:<2} {p.pid:<12} {p.max_claim:5} {p.hold:6} {p.need:6}"
            )

        output.append("\n" + "="*60)
        return "\n".join(output)
