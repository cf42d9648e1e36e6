"""
Logger utility for the Banker's Algorithm Simulator.

Provides per-order logging with verbosity levels.
"""

from typing import List, Optional
from datetime import datetime


class SimulatorLogger:
    """
    Logger for evaluation results and decisions.

    Format: "P2 P3 P1 - SAFE" / "P1 P2 P3 - UNSAFE (P1 needs 7, available 3)"
    """

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None, quiet: bool = False):
        """
        Initialize logger.

        Args:
            verbose: Enable verbose (debug) output
            log_file: Optional file path for logging
            quiet: Suppress console output (file output is unaffected)
        """
        self.verbose = verbose
        self.quiet = quiet
        self.log_file = log_file
        self.file_handle = None

        if self.log_file:
            self.file_handle = open(self.log_file, 'w', encoding='utf-8')
            self._write_header()

    def _write_header(self) -> None:
        """Write log file header."""
        if self.file_handle:
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self.file_handle.write(f"Banker's Algorithm Log - {timestamp}\n")
            self.file_handle.write("="*60 + "\n\n")

    def log(self, message: str, level: str = "info") -> None:
        """
        Log a message.

        Args:
            message: Message to log
            level: Log level (info, debug, warning, error)
        """
        if level == "debug" and not self.verbose:
            return

        formatted = self._format_message(message, level)

        if not self.quiet:
            print(formatted)

        if self.file_handle:
            self.file_handle.write(formatted + "\n")
            self.file_handle.flush()

    def _format_message(self, message: str, level: str) -> str:
        """Format message with level prefix."""
        if level == "error":
            return f"[ERROR] {message}"
        elif level == "warning":
            return f"[WARNING] {message}"
        elif level == "debug":
            return f"[DEBUG] {message}"
        else:
            return message

    def log_order(self, label: str, safe: bool, reason: str = "") -> None:
        """
        Log the verdict for one order.

        Args:
            label: Process ids in order, space separated
            safe: Whether the order is safe
            reason: Why the order failed (UNSAFE only)
        """
        status = "SAFE" if safe else "UNSAFE"
        message = f"{label} - {status}"
        if reason:
            message += f" ({reason})"
        self.log(message)

    def log_trace(self, label: str, pids: List[str], needs: List[int], available_before: List[int]) -> None:
        """
        Log each simulated step of an order (verbose only).

        Args:
            label: Process ids in order
            pids: Process id at each examined step
            needs: Need of the process at each examined step
            available_before: Available pool before each examined step
        """
        if not self.verbose:
            return
        self.log(f"Order {label}:", "debug")
        for step, (pid, need, available) in enumerate(zip(pids, needs, available_before)):
            status = "finishes" if need <= available else "blocked"
            self.log(f"  Step {step}: {pid} need={need}, available={available} -> {status}", "debug")

    def log_snapshot(self, snapshot_str: str) -> None:
        """Log a formatted snapshot."""
        self.log(snapshot_str)

    def close(self) -> None:
        """Close log file if open."""
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def __del__(self):
        """Cleanup on destruction."""
        self.close()
