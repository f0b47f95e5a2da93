import pytest

import main


def _lines(text):
    return [line for line in text.splitlines() if line]


def test_prints_one_schedule_per_line(problem_file, capsys):
    assert main.main([str(problem_file), "--max-drive-time", "20"]) == 0

    assert _lines(capsys.readouterr().out) == ["[C]", "[A,B]"]


def test_default_budget_fits_a_single_driver(problem_file, capsys):
    assert main.main([str(problem_file)]) == 0

    assert _lines(capsys.readouterr().out) == ["[A,B,C]"]


def test_nearest_strategy(problem_file, capsys):
    assert main.main([str(problem_file), "-s", "nearest", "--max-drive-time", "20"]) == 0

    assert _lines(capsys.readouterr().out) == ["[A,B]", "[C]"]


def test_missing_file_exits_with_data_error(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.txt")]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR" in captured.err


def test_malformed_file_prints_no_partial_schedule(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("loadNumber pickup dropoff\nA (1,0) (2,0)\nB (5,0) (six,0)\n")

    assert main.main([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "line 3" in captured.err


def test_negative_budget_exits_with_scheduling_error(problem_file, capsys):
    assert main.main([str(problem_file), "--max-drive-time", "-5"]) == 2
    assert capsys.readouterr().out == ""


def test_unknown_strategy_is_a_usage_error(problem_file):
    with pytest.raises(SystemExit) as excinfo:
        main.main([str(problem_file), "--strategy", "genetic"])
    assert excinfo.value.code == 2


def test_stats_are_printed_before_schedules(problem_file, capsys):
    assert main.main([str(problem_file), "--stats"]) == 0

    lines = _lines(capsys.readouterr().out)
    assert any("round_trip" in line for line in lines)
    assert lines[-1] == "[A,B,C]"


def test_summary_goes_to_stderr(problem_file, capsys):
    assert main.main([str(problem_file), "--summary", "--max-drive-time", "20"]) == 0

    captured = capsys.readouterr()
    assert "Drivers Used" in captured.err
    assert "Drivers Used" not in captured.out


def test_empty_problem_prints_nothing(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("loadNumber pickup dropoff\n")

    assert main.main([str(path)]) == 0
    assert capsys.readouterr().out == ""
