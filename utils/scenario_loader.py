"""
Scenario Loader for the Banker's Algorithm Simulator.

Loads snapshot definitions from JSON scenario files. Only the structure is
checked here; domain consistency (hold <= max, total >= held) is left to
the selected validation policy.
"""

import json
from typing import Any, Dict, List

from models.snapshot import ProcessClaim, Snapshot


class ScenarioLoadError(Exception):
    """Exception raised when scenario file cannot be loaded or is invalid."""
    pass


def load_scenario(file_path: str) -> Snapshot:
    """
    Load a snapshot from a JSON file.

    Format:
        {"description": "...", "total": 10,
         "processes": [{"pid": "P1", "max": 8, "hold": 1}, ...]}

    Args:
        file_path: Path to scenario JSON file

    Returns:
        Snapshot described by the file

    Raises:
        ScenarioLoadError: If file cannot be loaded or is invalid
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ScenarioLoadError(f"Scenario file not found: {file_path}")
    except json.JSONDecodeError as e:
        raise ScenarioLoadError(f"Invalid JSON in scenario file: {e}")

    return parse_scenario(data)


def parse_scenario(data: Dict[str, Any]) -> Snapshot:
    """
    Build a snapshot from already-decoded scenario data.

    Raises:
        ScenarioLoadError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise ScenarioLoadError("Scenario must be a JSON object")
    if 'total' not in data:
        raise ScenarioLoadError("Scenario missing 'total' field")
    if 'processes' not in data:
        raise ScenarioLoadError("Scenario missing 'processes' field")
    if not isinstance(data['processes'], list):
        raise ScenarioLoadError("'processes' must be a list")

    total = _non_negative_int(data['total'], "total")
    processes = [_load_process(proc_data, i) for i, proc_data in enumerate(data['processes'])]

    return Snapshot(total=total, processes=tuple(processes))


def _load_process(proc_data: Dict, index: int) -> ProcessClaim:
    """
    Load a single process row.

    Args:
        proc_data: Process dictionary from scenario
        index: Row position (used for the default id and error messages)

    Returns:
        ProcessClaim for the row
    """
    if not isinstance(proc_data, dict):
        raise ScenarioLoadError(f"Process {index + 1}: entry must be an object")

    for field in ['max', 'hold']:
        if field not in proc_data:
            raise ScenarioLoadError(f"Process {index + 1}: missing required field: {field}")

    pid = str(proc_data.get('pid') or f"P{index + 1}")

    return ProcessClaim(
        pid=pid,
        max_claim=_non_negative_int(proc_data['max'], f"{pid}.max"),
        hold=_non_negative_int(proc_data['hold'], f"{pid}.hold")
    )


def _non_negative_int(value: Any, name: str) -> int:
    """Validate that a scenario value is a non-negative integer."""
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ScenarioLoadError(f"'{name}' must be an integer (got {value!r})")
    if value < 0:
        raise ScenarioLoadError(f"'{name}' must be non-negative (got {value})")
    return value


def get_scenario_description(file_path: str) -> str:
    """
    Get description from scenario file without full loading.

    Args:
        file_path: Path to scenario JSON file

    Returns:
        Description string, or empty string if not present or unreadable
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return ''
    if not isinstance(data, dict):
        return ''
    return data.get('description', '')


def save_scenario(snapshot: Snapshot, file_path: str, description: str = "") -> None:
    """
    Write a snapshot as a scenario JSON file.

    Args:
        snapshot: Snapshot to save
        file_path: Destination path
        description: Optional description stored with the scenario
    """
    processes: List[Dict[str, Any]] = [
        {'pid': p.pid, 'max': p.max_claim, 'hold': p.hold}
        for p in snapshot.processes
    ]
    data: Dict[str, Any] = {'total': snapshot.total, 'processes': processes}
    if description:
        data = {'description': description, **data}

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)
        f.write("\n")
