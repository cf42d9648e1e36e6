"""
Verdict model for the Banker's Algorithm Order Safety Evaluator.

Defines the SAFE/UNSAFE classification of an execution order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Verdict(Enum):
    """Safety classification of one execution order."""
    SAFE = "SAFE"
    UNSAFE = "UNSAFE"

    @classmethod
    def from_bool(cls, is_safe: bool) -> "Verdict":
        return cls.SAFE if is_safe else cls.UNSAFE


@dataclass
class OrderResult:
    """
    Verdict for a single order.

    Attributes:
        order: Process indices in hypothesized completion order
        verdict: SAFE or UNSAFE
        label: Process ids joined by spaces (e.g. "P2 P3 P1")
        failed_step: Position in order where need exceeded available (None if SAFE)
    """
    order: List[int]
    verdict: Verdict
    label: str = ""
    failed_step: Optional[int] = None

    @property
    def is_safe(self) -> bool:
        return self.verdict == Verdict.SAFE

    def __str__(self) -> str:
        """Format as an export line: '<ids> - SAFE|UNSAFE'."""
        return f"{self.label} - {self.verdict.value}"
