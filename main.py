#!/usr/bin/env python3
# load-scheduler/main.py
"""
Command-Line Interface for the load scheduler.

Reads a problem file and prints one schedule per driver, one line each,
as [id1,id2,...]. Diagnostics go to stderr so stdout stays parseable.

Usage:
    python main.py problem.txt                      # Detour strategy
    python main.py problem.txt --strategy nearest   # Index-driven strategy
    python main.py problem.txt --stats              # Describe the loads first
    python main.py problem.txt --summary --verbose  # KPIs and debug logging

Exit Codes:
    0: Success
    1: Data loading error
    2: Scheduling error
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

# Ensure the package is importable when run from a checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from load_scheduler import config
from load_scheduler.models import Load
from load_scheduler.planner import Planner, PlanResults


def print_summary(results: PlanResults) -> None:
    """
    Print the run's KPIs to stderr.

    Args:
        results: Output of Planner.run
    """
    metrics = [
        "Total Loads",
        "Drivers Used",
        "Total Distance",
        "Longest Schedule",
        "Loads/Driver",
        "Over-Budget Schedules",
    ]
    display = results.to_dict()

    print("\n" + "=" * 44, file=sys.stderr)
    print(f"  {results.strategy.upper()} SUMMARY", file=sys.stderr)
    print("=" * 44, file=sys.stderr)
    for metric in metrics:
        print(f"| {metric:<24} | {str(display[metric]):>13} |", file=sys.stderr)
    print("=" * 44 + "\n", file=sys.stderr)


def load_data_safe(problem_file: str) -> Optional[List[Load]]:
    """
    Load data with graceful error handling.

    Args:
        problem_file: Path to the problem file

    Returns:
        List of loads, or None if the file is missing or malformed
    """
    try:
        return Planner.load_data(problem_file)
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return None
    except ValueError as e:
        print(f"ERROR: Failed to load data: {e}", file=sys.stderr)
        return None


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="Assign loads to a minimal number of drivers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py problem.txt                        # Default: detour strategy
  python main.py problem.txt -s nearest             # Index-driven strategy
  python main.py problem.txt --max-drive-time 600   # Tighter shifts
        """
    )

    parser.add_argument(
        "problem_file",
        help="Path to the problem file (header line, then '<id> (<x>,<y>) (<x>,<y>)')"
    )

    parser.add_argument(
        "--strategy", "-s",
        choices=config.AVAILABLE_STRATEGIES,
        default=config.DEFAULT_STRATEGY,
        help=f"Scheduling strategy (default: {config.DEFAULT_STRATEGY})"
    )

    parser.add_argument(
        "--max-drive-time",
        type=float,
        default=None,
        help=f"Round-trip budget per driver (default: {config.MAX_DRIVE_TIME})"
    )

    parser.add_argument(
        "--min-detour-cost",
        type=float,
        default=None,
        help=f"Early-acceptance detour threshold (default: {config.MIN_DETOUR_COST})"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print load statistics before the schedules"
    )

    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print run KPIs to stderr after the schedules"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging on stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load everything before scheduling so a bad line prints nothing
    loads = load_data_safe(args.problem_file)
    if loads is None:
        return 1

    try:
        planner = Planner(
            loads,
            max_drive_time=args.max_drive_time,
            min_detour_cost=args.min_detour_cost,
        )
        results = planner.run(args.strategy)
    except ValueError as e:
        print(f"ERROR: Scheduling failed for '{args.strategy}': {e}", file=sys.stderr)
        return 2

    if args.stats:
        stats = planner.statistics()
        print("No loads." if stats.empty else stats.to_string())

    for schedule in results.schedules:
        print(schedule)

    if args.summary:
        print_summary(results)

    return 0


if __name__ == "__main__":
    sys.exit(main())
