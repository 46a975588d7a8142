import io

import pytest

from bojsolve.cli import main, solve
from bojsolve.containers import apply_ac
from bojsolve.graphs import distances_to_target, tomato_days

AC_INPUT = """4
RDD
4
[1,2,3,4]
DD
1
[42]
RRD
6
[1,1,2,3,5,8]
D
0
[]
"""

TOMATO_INPUT = """6 4
0 0 0 0 0 0
0 0 0 0 0 0
0 0 0 0 0 0
0 0 0 0 0 1
"""


def test_ac_reports_error_for_empty_deletes():
    lines = solve("5430", AC_INPUT).splitlines()
    assert len(lines) == 4
    assert lines[1] == "error"
    assert lines[3] == "error"


def test_ac_matches_library_results():
    lines = solve("5430", AC_INPUT).splitlines()
    expected_first = apply_ac("RDD", [1, 2, 3, 4])
    expected_third = apply_ac("RRD", [1, 1, 2, 3, 5, 8])
    assert lines[0] == "[" + ",".join(map(str, expected_first)) + "]"
    assert lines[2] == "[" + ",".join(map(str, expected_third)) + "]"


def test_ac_empty_result_prints_brackets():
    assert solve("5430", "1\nD\n1\n[7]\n") == "[]\n"


def test_ac_reverse_only_reverses_output():
    assert solve("5430", "1\nR\n3\n[1,2,3]\n") == "[3,2,1]\n"


def test_set_prints_only_check_answers():
    text = "8\nadd 1\ncheck 1\ncheck 2\nall\ncheck 20\nempty\ncheck 1\ntoggle 5\n"
    assert solve("11723", text) == "1\n0\n1\n0\n"


def test_set_toggle_and_remove():
    text = "6\ntoggle 3\ncheck 3\ntoggle 3\ncheck 3\nadd 4\nremove 4\n"
    assert solve("11723", text).splitlines() == ["1", "0"]


def test_set_rejects_out_of_range_element():
    with pytest.raises(ValueError):
        solve("11723", "1\nadd 21\n")


def test_tomato_example():
    assert solve("7576", TOMATO_INPUT) == "8\n"


def test_tomato_agrees_with_library():
    grid = [[1, -1, 0], [0, -1, 0], [0, 0, 0]]
    text = "3 3\n" + "\n".join(" ".join(map(str, row)) for row in grid)
    assert solve("7576", text) == f"{tomato_days(grid)}\n"


def test_tomato_all_ripe_and_unreachable():
    assert solve("7576", "2 1\n1 1\n") == "0\n"
    assert solve("7576", "3 1\n1 -1 0\n") == "-1\n"


def test_shortest_distance_grid():
    grid = [[2, 1, 1], [0, 1, 1], [1, 0, 1]]
    text = "3 3\n" + "\n".join(" ".join(map(str, row)) for row in grid)
    expected = "".join(
        " ".join(map(str, row)) + "\n" for row in distances_to_target(grid)
    )
    output = solve("14940", text)
    assert output == expected
    assert output.splitlines()[0].split()[0] == "0"


def test_shortest_distance_unreachable_land_is_minus_one():
    output = solve("14940", "1 3\n2 0 1\n")
    assert output.split() == ["0", "0", "-1"]


def test_unknown_problem_raises():
    with pytest.raises(ValueError):
        solve("9999", "")


def test_truncated_input_raises():
    with pytest.raises(ValueError):
        solve("7576", "3 2\n1 0 0\n")


def test_non_numeric_token_raises():
    with pytest.raises(ValueError):
        solve("7576", "x 2\n")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TOMATO_INPUT))
    assert main(["7576"]) == 0
    assert capsys.readouterr().out == solve("7576", TOMATO_INPUT)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(AC_INPUT)
    assert main(["5430", str(path)]) == 0
    assert capsys.readouterr().out == solve("5430", AC_INPUT)


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 2\n1\n"))
    assert main(["7576"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "bojsolve:" in captured.err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit) as excinfo:
        main(["12345"])
    assert excinfo.value.code == 2