"""
Grid coordinates and occupancy helpers
- Cells are (x, y) pairs, linear indices are row-major: index = y * width + x
- Grids are indexed grid[y][x]; 0 means free, anything else is blocked
- Every helper works on a private numpy copy, the caller's grid is never touched
"""

from __future__ import annotations
from typing import Iterable, List, NamedTuple, Optional, Sequence, Union

import numpy as np

FREE = 0
BLOCKED = 1


class Cell(NamedTuple):
    x: int
    y: int


CellLike = Union[Cell, Sequence[int], int]


def offset(cell: Cell, dx: int, dy: int, width: int, height: int) -> Optional[Cell]:
    """Move a cell by (dx, dy). Returns None instead of wrapping or clamping at the edge."""
    x = cell[0] + dx
    y = cell[1] + dy
    if 0 <= x < width and 0 <= y < height:
        return Cell(x, y)
    return None


def index_of(width: int, cell: Cell) -> int:
    return cell[1] * width + cell[0]


def cell_of(width: int, index: int) -> Cell:
    return Cell(index % width, index // width)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def is_adjacent(a: Cell, b: Cell) -> bool:
    return manhattan(a, b) == 1


def as_grid(grid) -> Optional[np.ndarray]:
    """
    Normalize an occupancy grid into an int8 array of 0 (free) / 1 (blocked).

    Accepts a list of rows or a 2D numpy array. Ragged rows, anything that is
    not two dimensional, and empty grids give None.
    """
    if grid is None:
        return None
    try:
        raw = np.asarray(grid)
    except ValueError:
        # numpy refuses ragged nested sequences
        return None
    if raw.ndim != 2 or raw.size == 0 or raw.dtype == object:
        return None
    return (raw != FREE).astype(np.int8)


def grid_size(board: np.ndarray) -> tuple:
    """(width, height) of a normalized grid."""
    height, width = board.shape
    return width, height


def in_bounds(board: np.ndarray, cell: Cell) -> bool:
    width, height = grid_size(board)
    return 0 <= cell[0] < width and 0 <= cell[1] < height


def is_free(board: np.ndarray, cell: Cell) -> bool:
    return board[cell[1], cell[0]] == FREE


def to_cell(width: int, value: CellLike) -> Optional[Cell]:
    """
    Accept a Cell, an (x, y) pair, or a linear index and return a Cell.

    Bounds are not checked here; a negative index still maps to a negative
    coordinate so that the caller's bounds check rejects it.
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        value = int(value)
        if value < 0:
            return Cell(-1, -1)
        return cell_of(width, value)
    try:
        x, y = value
        return Cell(int(x), int(y))
    except (TypeError, ValueError):
        return None


def complement(board: np.ndarray) -> np.ndarray:
    """Free cells become blocked and blocked cells become free."""
    return (board == FREE).astype(np.int8)


def with_free(board: np.ndarray, *cells: Cell) -> np.ndarray:
    """Copy of the grid with the given cells forced free."""
    masked = board.copy()
    for cell in cells:
        masked[cell[1], cell[0]] = FREE
    return masked


def free_count(board: np.ndarray) -> int:
    return int(np.count_nonzero(board == FREE))


def grid_from_blocked(width: int, height: int, blocked: Iterable[CellLike] = ()) -> np.ndarray:
    """
    Build a height x width grid with the given cells marked blocked.

    Cells may be (x, y) pairs or linear indices. Out-of-range cells raise
    ValueError, since a game-state layer passing them is a bug on its side.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
    board = np.zeros((height, width), dtype=np.int8)
    for value in blocked:
        cell = to_cell(width, value)
        if cell is None or not (0 <= cell.x < width and 0 <= cell.y < height):
            raise ValueError(f"Blocked cell {value!r} is outside the {width}x{height} grid")
        board[cell.y, cell.x] = BLOCKED
    return board


def neighbor_indices(width: int, height: int, index: int) -> List[int]:
    """
    Linear indices of the 4-neighbours of `index` in west, east, north, south order.

    Row wrap is guarded explicitly: index 5 on a 5-wide grid has no west
    neighbour even though 4 is a valid index.
    """
    neighbors = []
    if index % width != 0:
        neighbors.append(index - 1)
    if index % width != width - 1:
        neighbors.append(index + 1)
    if index >= width:
        neighbors.append(index - width)
    if index + width < width * height:
        neighbors.append(index + width)
    return neighbors


def is_simple_cycle(cycle: Sequence[Cell]) -> bool:
    """
    True if the sequence is a closed loop with no repeated cell.

    Needs at least 4 cells, every step (including last -> first) must move to a
    4-adjacent cell.
    """
    if len(cycle) < 4:
        return False
    if len(set(map(tuple, cycle))) != len(cycle):
        return False
    return all(is_adjacent(cycle[i], cycle[(i + 1) % len(cycle)]) for i in range(len(cycle)))
