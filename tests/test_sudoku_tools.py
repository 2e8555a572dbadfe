# tests/test_sudoku_tools.py
from solver.sudoku_tools import sanity_check, solve_tool


def test_sanity_check_clean_board(puzzle):
    assert sanity_check(puzzle) == {"ok": True, "complete": False, "issues": []}


def test_sanity_check_flags_finished_board(solution):
    res = sanity_check(solution)
    assert res["ok"] and res["complete"]
    solution[0][0], solution[0][1] = solution[0][1], solution[0][0]
    assert not sanity_check(solution)["complete"]


def test_sanity_check_reports_row_and_box_duplicates(blank):
    blank[0][0] = 5
    blank[0][3] = 5
    blank[4][4] = 9
    blank[5][3] = 9
    res = sanity_check(blank)
    assert not res["ok"]
    units = {i["unit"]: i for i in res["issues"] if i["type"] == "duplicate"}
    assert units["r1"]["digits"] == [5]
    assert units["r1"]["cells"] == ["r1c1", "r1c4"]
    assert units["b5"]["cells"] == ["r5c5", "r6c4"]
    assert "c1" not in units


def test_sanity_check_reports_out_of_range(blank):
    blank[1][2] = 12
    res = sanity_check(blank)
    assert res["issues"] == [{"type": "out_of_range", "cell": "r2c3", "found": 12}]


def test_solve_tool_does_not_touch_input(puzzle, solution):
    before = [row[:] for row in puzzle]
    res = solve_tool(puzzle)
    assert puzzle == before
    assert res["outcome"] == "solved"
    assert res["solved"] is True
    assert res["grid"] == solution
    assert res["issues"] == []
    assert res["stats"]["placements"] > 0


def test_solve_tool_invalid_input_lists_issues(blank):
    blank[0][0] = 9
    blank[1][1] = 9
    res = solve_tool(blank)
    assert res["outcome"] == "invalid_input"
    assert res["solved"] is False
    assert res["issues"][0]["unit"] == "b1"
    assert res["stats"] == {"placements": 0, "backtracks": 0}


def test_solve_tool_unsolvable(dead_end):
    res = solve_tool(dead_end)
    assert res["outcome"] == "unsolvable"
    assert res["issues"] == []
    assert res["grid"] == dead_end
