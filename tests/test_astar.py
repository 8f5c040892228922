"""Tests for the A* shortest path search."""

import random
from collections import deque

import numpy as np
import pytest

from pathing import AStar, Cell, astar, grid_from_blocked, is_adjacent


def bfs_distance(board, start, target):
    """Reference shortest distance by breadth-first search (None if unreachable)."""
    height, width = board.shape
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        (x, y), dist = queue.popleft()
        if (x, y) == target:
            return dist
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and board[ny, nx] == 0 and (nx, ny) not in seen:
                seen.add((nx, ny))
                queue.append(((nx, ny), dist + 1))
    return None


def assert_valid_path(board, path, start, target):
    assert path[0] == start
    assert path[-1] == target
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert is_adjacent(a, b)
    for cell in path[1:]:
        assert board[cell.y, cell.x] == 0


def test_empty_grid_corner_to_corner():
    grid = [[0] * 4 for _ in range(4)]
    path = astar(grid, 0, 15)
    assert path is not None
    assert len(path) == 7


def test_blocked_neighbour_forces_x_first_route():
    grid = grid_from_blocked(4, 4, [(0, 1)])
    path = astar(grid, Cell(0, 0), Cell(3, 3))
    assert path == [(0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (3, 2), (3, 3)]


def test_walled_in_start_has_no_path():
    grid = grid_from_blocked(4, 4, [(0, 1), (1, 0)])
    assert astar(grid, 0, 15) is None


def test_detour_around_obstacles():
    grid = grid_from_blocked(10, 10, [(6, 6), (5, 6), (4, 5)])
    path = astar(grid, (5, 5), (2, 5))
    assert path is not None
    assert len(path) == 6
    assert (4, 5) not in path


def test_start_equals_target():
    grid = grid_from_blocked(3, 3)
    assert astar(grid, (1, 1), (1, 1)) == [(1, 1)]


def test_blocked_target_is_unreachable():
    grid = grid_from_blocked(3, 3, [(2, 2)])
    assert astar(grid, (0, 0), (2, 2)) is None


@pytest.mark.parametrize(
    "start, target",
    [
        (0, 16),
        (16, 0),
        (-1, 3),
        ((4, 0), (0, 0)),
        ((0, 0), (0, 4)),
        ((0, 0), (-1, 0)),
        ((0, 0), "nowhere"),
    ],
)
def test_out_of_bounds_endpoints_return_none(start, target):
    grid = grid_from_blocked(4, 4)
    assert astar(grid, start, target) is None


@pytest.mark.parametrize("grid", [[], [[]], [[0, 0], [0]], None])
def test_invalid_grid_returns_none(grid):
    assert astar(grid, 0, 0) is None


def test_rectangular_grid_uses_row_major_indices():
    grid = grid_from_blocked(5, 2)
    path = astar(grid, 0, 9)
    assert path[0] == (0, 0)
    assert path[-1] == (4, 1)
    assert len(path) == 6


def test_caller_grid_is_not_modified():
    grid = [[0, 0, 0], [1, 1, 0], [0, 0, 0]]
    snapshot = [row[:] for row in grid]
    astar(grid, (0, 0), (0, 2))
    assert grid == snapshot


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_matches_breadth_first_search_on_random_grids(seed):
    rng = random.Random(seed)
    width, height = 6, 5
    blocked = [(x, y) for y in range(height) for x in range(width) if rng.random() < 0.3]
    board = grid_from_blocked(width, height, blocked)
    free = [Cell(x, y) for y in range(height) for x in range(width) if board[y, x] == 0]

    for start in free:
        for target in free:
            expected = bfs_distance(board, start, target)
            path = astar(board, start, target)
            if expected is None:
                assert path is None
            else:
                assert path is not None
                assert len(path) - 1 == expected
                assert_valid_path(board, path, start, target)


def test_output_is_deterministic():
    grid = grid_from_blocked(8, 8, [(3, y) for y in range(1, 7)])
    first = astar(grid, (0, 0), (7, 7))
    for _ in range(5):
        assert astar(grid, (0, 0), (7, 7)) == first


def test_numpy_and_list_grids_agree():
    rows = [[0, 0, 0, 0], [0, 1, 1, 0], [0, 0, 0, 0]]
    assert astar(rows, (0, 1), (3, 1)) == astar(np.array(rows), (0, 1), (3, 1))


def test_astar_class_returns_indices():
    grid = grid_from_blocked(4, 4, [(0, 1)])
    assert AStar(grid, 0, 15).calculate_path() == [0, 1, 2, 3, 7, 11, 15]


def test_astar_class_unreachable_returns_none():
    grid = grid_from_blocked(4, 4, [(0, 1), (1, 0)])
    assert AStar(grid, 0, 15).calculate_path() is None


def test_astar_class_validates_input():
    grid = grid_from_blocked(4, 4)
    with pytest.raises(ValueError):
        AStar(grid, 0, 16)
    with pytest.raises(ValueError):
        AStar([[0, 0], [0]], 0, 1)
