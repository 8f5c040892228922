"""Tests for the console overlay and the command line entry point."""

import pytest

import main
from demos.console import format_overlay, route_order, visualize_route
from pathing import grid_from_blocked


def test_route_order():
    assert route_order([(0, 0), (1, 0), (1, 1)]) == {(0, 0): 0, (1, 0): 1, (1, 1): 2}


def test_format_overlay_marks_route_and_blocks():
    grid = grid_from_blocked(3, 2, [(2, 1)])
    lines = format_overlay(grid, [(0, 0), (1, 0), (1, 1)]).splitlines()

    assert lines[0].split() == ["x0", "x1", "x2"]
    assert lines[1].split() == ["y0", "0", "1", "."]
    assert lines[2].split() == ["y1", ".", "2", "##"]


def test_format_overlay_without_route():
    lines = format_overlay([[0, 1]]).splitlines()
    assert lines[1].split() == ["y0", ".", "##"]


def test_format_overlay_rejects_invalid_grid():
    with pytest.raises(ValueError):
        format_overlay([[0, 0], [0]])


def test_visualize_route_reports_closure(capsys):
    grid = grid_from_blocked(2, 2)
    visualize_route(grid, [(0, 0), (1, 0), (1, 1), (0, 1)], "Square", closed=True)
    out = capsys.readouterr().out
    assert "Square" in out
    assert "Length: 4 cells" in out
    assert "Closes back to start: True" in out


def test_visualize_route_without_result(capsys):
    visualize_route(grid_from_blocked(2, 2), None, "Nothing")
    assert "No route found." in capsys.readouterr().out


def test_main_astar(capsys):
    code = main.main(["astar", "--width", "4", "--block", "0,1", "--start", "0", "--target", "15"])
    assert code == 0
    assert "Length: 7 cells" in capsys.readouterr().out


def test_main_astar_without_path(capsys):
    code = main.main(["astar", "--width", "4", "--block", "0,1", "1,0", "--target", "3,3"])
    assert code == 1
    assert "No route found." in capsys.readouterr().out


def test_main_seed_cycle(capsys):
    code = main.main(["seed", "--width", "10", "--block", "1,1", "1,2", "1,3", "--start", "1,3", "--target", "1,1"])
    assert code == 0
    assert "Length: 6 cells" in capsys.readouterr().out


def test_main_hamilton(capsys):
    assert main.main(["hamilton", "--width", "2", "--height", "2"]) == 0
    assert "Length: 4 cells" in capsys.readouterr().out
    assert main.main(["hamilton", "--width", "3"]) == 1


@pytest.mark.parametrize(
    "argv",
    [
        ["astar", "--block", "1,2,3"],
        ["astar", "--start", "a,b"],
        ["astar", "--block", "99,0"],
        ["astar", "--width", "0"],
        ["longest", "--attempts", "0"],
        ["teleport"],
    ],
)
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        main.parse_args(argv)
    assert excinfo.value.code == 2


def test_parse_cell():
    assert main.parse_cell("3,4") == (3, 4)
    assert main.parse_cell(" 7 ") == 7
