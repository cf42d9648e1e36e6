#!/usr/bin/env python3
"""
Banker's Algorithm Order Safety Simulator
Main entry point for the evaluation system.

Lists every execution order of the processes in a snapshot and labels each
order SAFE or UNSAFE.
"""

import argparse
import sys
from typing import List, Optional

from analysis.analyzer import EvaluationReport, analyze_snapshot
from algorithms.permutations import count_permutations
from models.snapshot import Snapshot
from utils.exporter import DEFAULT_EXPORT_FILE, export_results
from utils.logger import SimulatorLogger
from utils.scenario_loader import ScenarioLoadError, get_scenario_description, load_scenario
from utils.validation import (
    DEFAULT_MAX_PROCESSES,
    POLICIES,
    SnapshotValidationError,
    get_policy,
)


# Sample snapshot used when no input is given
DEFAULT_TOTAL = 10
DEFAULT_MAX = [8, 5, 9]
DEFAULT_HOLD = [1, 3, 3]


def run_evaluation(
    snapshot: Snapshot,
    policy: str = "block",
    max_processes: int = DEFAULT_MAX_PROCESSES,
    output: Optional[str] = None,
    logger: Optional[SimulatorLogger] = None
) -> EvaluationReport:
    """
    Validate a snapshot, evaluate every order, and optionally export results.

    Steps:
    1. Apply the validation policy (may raise, correct, or warn)
    2. Enumerate all n! orders and evaluate each
    3. Export "<ids> - SAFE|UNSAFE" lines if an output path is given

    Args:
        snapshot: Snapshot built by the caller
        policy: One of 'block', 'clamp', 'warn'
        max_processes: Largest process count the policy accepts
        output: Optional path for the exported result lines
        logger: Logger to use; its own verbose flag controls per-step traces
            (a plain console logger is created if omitted)

    Returns:
        EvaluationReport for the validated snapshot

    Raises:
        SnapshotValidationError: If the policy rejects the snapshot
    """
    owns_logger = logger is None
    if logger is None:
        logger = SimulatorLogger()

    try:
        validator = get_policy(policy, max_processes=max_processes, logger=logger)
        outcome = validator.apply(snapshot)
        snapshot = outcome.snapshot

        logger.log_snapshot(snapshot.display())

        num_orders = count_permutations(snapshot.num_processes)
        logger.log(f"\n{'='*60}")
        logger.log(f"EVALUATING {num_orders} ORDERS (policy: {policy.upper()})")
        logger.log(f"{'='*60}\n")

        report = analyze_snapshot(snapshot, logger)

        logger.log(report.display())

        if output:
            path = export_results(report.results, output)
            logger.log(f"\nSaved {report.total_orders} lines to {path}")

        return report
    finally:
        if owns_logger:
            logger.close()


def build_snapshot(args: argparse.Namespace) -> Snapshot:
    """
    Build the snapshot from CLI arguments.

    A scenario file takes precedence; otherwise --total/--max/--hold are used,
    falling back to the sample snapshot. --processes resizes either source,
    and --ids relabels the resized rows.

    Raises:
        ScenarioLoadError: If the scenario file cannot be loaded
        ValueError: If --max and --hold lengths differ
    """
    if args.scenario:
        snapshot = load_scenario(args.scenario)
        if args.processes is not None:
            snapshot = snapshot.with_process_count(args.processes)
        return snapshot

    max_claims = args.max if args.max is not None else DEFAULT_MAX
    holds = args.hold if args.hold is not None else DEFAULT_HOLD
    total = args.total if args.total is not None else DEFAULT_TOTAL

    snapshot = Snapshot.from_lists(total, max_claims, holds)
    if args.processes is not None:
        snapshot = snapshot.with_process_count(args.processes)
    if args.ids:
        snapshot = snapshot.with_pids(args.ids)
    return snapshot


def _non_negative_int(value: str) -> int:
    """argparse type: digits only."""
    if not value.isdigit():
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got '{value}'")
    return int(value)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Banker's Algorithm Order Safety Simulator"
    )
    parser.add_argument(
        '--scenario',
        type=str,
        help='Path to scenario JSON file (overrides --total/--max/--hold)'
    )
    parser.add_argument(
        '--total',
        type=_non_negative_int,
        help=f'Total resource units (default: {DEFAULT_TOTAL})'
    )
    parser.add_argument(
        '--max',
        type=_non_negative_int,
        nargs='+',
        help='Maximum claim per process'
    )
    parser.add_argument(
        '--hold',
        type=_non_negative_int,
        nargs='+',
        help='Units currently held per process'
    )
    parser.add_argument(
        '--ids',
        type=str,
        nargs='+',
        help='Process identifiers (default: P1 P2 ...)'
    )
    parser.add_argument(
        '--processes',
        type=_non_negative_int,
        help='Resize the process table to this many rows (new rows are zero)'
    )
    parser.add_argument(
        '--policy',
        choices=sorted(POLICIES),
        default='block',
        help='How to handle inconsistent input (default: block)'
    )
    parser.add_argument(
        '--max-processes',
        type=_non_negative_int,
        default=DEFAULT_MAX_PROCESSES,
        help=f'Largest process count to enumerate (default: {DEFAULT_MAX_PROCESSES})'
    )
    parser.add_argument(
        '--output',
        type=str,
        help='Write result lines to this file'
    )
    parser.add_argument(
        '--save',
        action='store_true',
        help=f'Write result lines to {DEFAULT_EXPORT_FILE}'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        help='Also write the log to this file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args(argv)

    if args.scenario and any(v is not None for v in (args.total, args.max, args.hold, args.ids)):
        parser.error('--scenario cannot be combined with --total/--max/--hold/--ids')
    if args.max is not None and args.hold is not None and len(args.max) != len(args.hold):
        parser.error('--max and --hold must list the same number of processes')
    if (args.max is None) != (args.hold is None):
        parser.error('--max and --hold must be given together')
    if args.ids is not None:
        rows = args.processes if args.processes is not None else len(args.max or DEFAULT_MAX)
        if len(args.ids) != rows:
            parser.error(f'--ids lists {len(args.ids)} ids for {rows} processes')

    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the simulator."""
    args = parse_args(argv)
    logger = SimulatorLogger(verbose=args.verbose, log_file=args.log_file)

    try:
        try:
            snapshot = build_snapshot(args)
        except ScenarioLoadError as e:
            logger.log(f"Failed to load scenario: {e}", "error")
            return 1

        if args.scenario:
            description = get_scenario_description(args.scenario)
            if description:
                logger.log(f"Scenario: {description}")

        output = args.output or (DEFAULT_EXPORT_FILE if args.save else None)

        try:
            run_evaluation(
                snapshot,
                policy=args.policy,
                max_processes=args.max_processes,
                output=output,
                logger=logger
            )
        except SnapshotValidationError as e:
            logger.log(f"Evaluation refused: {e}", "error")
            return 1

        return 0
    finally:
        logger.close()


if __name__ == '__main__':
    sys.exit(main())
