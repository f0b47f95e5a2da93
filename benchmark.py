# load-scheduler/benchmark.py
"""
Benchmark script for the load scheduler.
Runs every strategy over every problem file in a directory and writes CSV,
JSON and Markdown reports comparing each strategy to the primary one.

Usage:
    python benchmark.py                 # problems/ -> results/
    python benchmark.py path/to/problems
"""

import csv
import glob
import json
import os
import sys
from datetime import datetime

from load_scheduler import config
from load_scheduler.planner import Planner

PROBLEM_DIR = "problems"
RESULTS_DIR = "results"
BASELINE_STRATEGY = config.DEFAULT_STRATEGY

STRATEGIES = list(config.AVAILABLE_STRATEGIES)

# KPIs written to CSV
CSV_KPIS = [
    "total_loads",
    "drivers_used",
    "total_distance",
    "max_schedule_distance",
    "loads_per_driver",
    "over_budget_schedules",
]

# Metrics where LOWER is better (for highlighting improvements)
LOWER_IS_BETTER = [
    "drivers_used",
    "total_distance",
    "max_schedule_distance",
    "over_budget_schedules",
]


def discover_scenarios(problem_dir: str) -> list:
    """Return one scenario per problem file, sorted by name."""
    paths = sorted(glob.glob(os.path.join(problem_dir, "*.txt")))
    return [
        {"name": os.path.splitext(os.path.basename(path))[0], "problem": path}
        for path in paths
    ]


def run_scenario(scenario: dict, strategies_to_run: list = None) -> dict:
    """Run all strategies on a single scenario and return results."""
    if strategies_to_run is None:
        strategies_to_run = STRATEGIES

    print(f"\n{'='*60}")
    print(f"SCENARIO: {scenario['name']}")
    print(f"Problem: {scenario['problem']}")
    print(f"{'='*60}")

    try:
        loads = Planner.load_data(scenario['problem'])
    except (FileNotFoundError, ValueError) as e:
        print(f"  ERROR: Could not load data - {e}")
        return None

    print(f"  Loaded {len(loads)} loads")

    scenario_results = {
        "scenario": scenario['name'],
        "problem_file": scenario['problem'],
        "total_loads": len(loads),
        "strategies": {}
    }

    planner = Planner(loads)
    for strategy in strategies_to_run:
        results = planner.run(strategy).to_dict()
        scenario_results["strategies"][strategy] = {kpi: results[kpi] for kpi in CSV_KPIS}
        print(f"    ✓ {strategy}: {results['drivers_used']} drivers, {results['total_distance']:.2f} distance")

    return scenario_results


def _compare_kpi(kpi: str, value: float, baseline_value: float) -> tuple:
    """Absolute difference, percent difference and whether it beats the baseline."""
    diff = (value or 0) - (baseline_value or 0)
    pct = round(diff / abs(baseline_value) * 100, 2) if baseline_value else 0
    better = diff < 0 if kpi in LOWER_IS_BETTER else diff > 0
    return round(diff, 4), pct, better


def calculate_comparison_stats(results: dict, baseline_key: str = BASELINE_STRATEGY) -> dict:
    """Annotate each strategy's KPIs with its difference from the baseline strategy."""
    baseline = results["strategies"].get(baseline_key)
    if baseline is None:
        return results

    for strategy, data in results["strategies"].items():
        data["vs_baseline"], data["vs_baseline_pct"], data["is_improvement"] = {}, {}, {}
        for kpi in CSV_KPIS:
            diff, pct, better = _compare_kpi(kpi, data.get(kpi), baseline.get(kpi))
            data["vs_baseline"][kpi] = diff
            data["vs_baseline_pct"][kpi] = pct
            # The baseline never improves on itself
            data["is_improvement"][kpi] = better and strategy != baseline_key

    return results


def save_master_csv(all_results: list, output_dir: str, timestamp: str) -> str:
    """Save a master CSV with all scenarios and strategies in a flat format."""
    filename = f"{output_dir}/MASTER_DATA_{timestamp}.csv"

    with open(filename, 'w', newline='') as f:
        writer = csv.writer(f)

        header = ["scenario", "loads", "strategy"]
        for kpi in CSV_KPIS:
            header.append(kpi)
            header.append(f"{kpi}_vs_baseline")
            header.append(f"{kpi}_vs_baseline_pct")
        writer.writerow(header)

        for result in all_results:
            if result is None:
                continue
            for strategy, data in result["strategies"].items():
                row = [result["scenario"], result["total_loads"], strategy]
                for kpi in CSV_KPIS:
                    row.append(data.get(kpi, ""))
                    row.append(data.get("vs_baseline", {}).get(kpi, ""))
                    row.append(data.get("vs_baseline_pct", {}).get(kpi, ""))
                writer.writerow(row)

    print(f"✓ Saved master data: {filename}")
    return filename


def generate_markdown_report(all_results: list, output_dir: str, timestamp: str) -> str:
    """Write a human-readable comparison table per scenario."""
    filename = f"{output_dir}/REPORT_{timestamp}.md"

    with open(filename, 'w') as f:
        f.write("# Load Scheduler Benchmark Report\n\n")
        f.write(f"*Generated: {timestamp}*\n\n")
        f.write(f"Baseline strategy: **{BASELINE_STRATEGY}**, budget {config.MAX_DRIVE_TIME}\n\n")

        for result in all_results:
            if result is None:
                continue

            strategies = list(result["strategies"].keys())
            f.write(f"## {result['scenario']} ({result['total_loads']} loads)\n\n")
            f.write("| Metric | " + " | ".join(s.title() for s in strategies) + " |\n")
            f.write("|:-------|" + "|".join(":---:" for _ in strategies) + "|\n")

            for kpi in CSV_KPIS:
                row = f"| {kpi} |"
                for strat in strategies:
                    data = result["strategies"][strat]
                    val = data.get(kpi, "N/A")
                    vs_pct = data.get("vs_baseline_pct", {}).get(kpi, 0)
                    if strat != BASELINE_STRATEGY and vs_pct != 0:
                        sign = "+" if vs_pct > 0 else ""
                        indicator = "✓" if data.get("is_improvement", {}).get(kpi, False) else ""
                        row += f" {val} ({sign}{vs_pct}%) {indicator} |"
                    else:
                        row += f" {val} |"
                f.write(row + "\n")

            f.write("\n---\n\n")

        f.write("*Report generated by benchmark.py*\n")

    print(f"✓ Saved report: {filename}")
    return filename


def main(problem_dir: str = PROBLEM_DIR, output_dir: str = RESULTS_DIR) -> list:
    """Run the full benchmark suite."""
    print("=" * 60)
    print("LOAD SCHEDULER BENCHMARK SUITE")
    print("=" * 60)

    scenarios = discover_scenarios(problem_dir)
    if not scenarios:
        print(f"No problem files found in {problem_dir}/")
        return []

    os.makedirs(output_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    all_results = []
    for scenario in scenarios:
        result = run_scenario(scenario)
        if result:
            all_results.append(calculate_comparison_stats(result))

    print(f"\n{'='*60}")
    print("GENERATING SUMMARY FILES")
    print("=" * 60)

    save_master_csv(all_results, output_dir, timestamp)
    generate_markdown_report(all_results, output_dir, timestamp)

    json_file = f"{output_dir}/benchmark_{timestamp}.json"
    with open(json_file, 'w') as f:
        json.dump(all_results, f, indent=2, default=str)
    print(f"✓ Saved JSON: {json_file}")

    print(f"\n{'='*60}")
    print("BENCHMARK COMPLETE")
    print(f"{'='*60}")
    return all_results


if __name__ == "__main__":
    main(*sys.argv[1:2])
