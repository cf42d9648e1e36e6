"""
Result exporter for the Banker's Algorithm Simulator.

Writes one "<ids> - SAFE|UNSAFE" line per order to a plain-text file.
"""

from pathlib import Path
from typing import Iterable

from models.verdict import OrderResult


DEFAULT_EXPORT_FILE = "BANKERS.txt"


def format_lines(results: Iterable[OrderResult]) -> str:
    """Join result lines, each newline-terminated."""
    return "".join(f"{result}\n" for result in results)


def export_results(results: Iterable[OrderResult], file_path: str = DEFAULT_EXPORT_FILE) -> Path:
    """
    Save result lines to a text file.

    Args:
        results: Order results in enumeration order
        file_path: Destination path (default BANKERS.txt)

    Returns:
        Path of the written file
    """
    path = Path(file_path)
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(format_lines(results))
    return path
