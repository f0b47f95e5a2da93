import csv
import glob
import os

import benchmark

from conftest import PROBLEM_TEXT


def _problem_dir(tmp_path):
    problems = tmp_path / "problems"
    problems.mkdir()
    (problems / "small.txt").write_text(PROBLEM_TEXT)
    (problems / "notes.md").write_text("ignored")
    return problems


def test_discover_scenarios_finds_problem_files(tmp_path):
    scenarios = benchmark.discover_scenarios(str(_problem_dir(tmp_path)))

    assert [s["name"] for s in scenarios] == ["small"]


def test_run_scenario_covers_every_strategy(tmp_path):
    scenario = benchmark.discover_scenarios(str(_problem_dir(tmp_path)))[0]

    result = benchmark.run_scenario(scenario)

    assert result["total_loads"] == 3
    assert set(result["strategies"]) == {"detour", "nearest"}
    assert result["strategies"]["detour"]["drivers_used"] == 1


def test_run_scenario_with_bad_file_returns_none(tmp_path):
    assert benchmark.run_scenario({"name": "x", "problem": str(tmp_path / "x.txt")}) is None


def test_comparison_against_baseline():
    result = {
        "strategies": {
            "detour": {kpi: 10 for kpi in benchmark.CSV_KPIS},
            "nearest": {**{kpi: 10 for kpi in benchmark.CSV_KPIS}, "drivers_used": 8},
        }
    }

    benchmark.calculate_comparison_stats(result)

    nearest = result["strategies"]["nearest"]
    assert nearest["vs_baseline"]["drivers_used"] == -2
    assert nearest["vs_baseline_pct"]["drivers_used"] == -20.0
    assert nearest["is_improvement"]["drivers_used"] is True
    assert result["strategies"]["detour"]["is_improvement"]["drivers_used"] is False


def test_comparison_direction_and_zero_baseline():
    result = {
        "strategies": {
            "detour": {"loads_per_driver": 2.0, "over_budget_schedules": 0},
            "nearest": {"loads_per_driver": 3.0, "over_budget_schedules": 1},
        }
    }

    benchmark.calculate_comparison_stats(result)

    nearest = result["strategies"]["nearest"]
    assert nearest["is_improvement"]["loads_per_driver"] is True
    assert nearest["vs_baseline_pct"]["loads_per_driver"] == 50.0
    assert nearest["is_improvement"]["over_budget_schedules"] is False
    assert nearest["vs_baseline_pct"]["over_budget_schedules"] == 0
    assert nearest["vs_baseline"]["total_distance"] == 0


def test_main_writes_reports(tmp_path):
    output_dir = tmp_path / "results"

    all_results = benchmark.main(str(_problem_dir(tmp_path)), str(output_dir))

    assert len(all_results) == 1
    master = glob.glob(os.path.join(output_dir, "MASTER_DATA_*.csv"))
    assert len(master) == 1
    with open(master[0], newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0][:3] == ["scenario", "loads", "strategy"]
    assert len(rows) == 3
    assert glob.glob(os.path.join(output_dir, "REPORT_*.md"))
    assert glob.glob(os.path.join(output_dir, "benchmark_*.json"))


def test_main_without_problems_does_nothing(tmp_path):
    assert benchmark.main(str(tmp_path / "none"), str(tmp_path / "out")) == []
    assert not (tmp_path / "out").exists()
