"""
Longest cycle through two cells by randomized extension
- A seed loop is built from two A* legs: a -> b through free space, then
  b -> a through the complement grid (the blocked cells, e.g. a snake body)
- The loop grows by "bulging" one edge outward at a time, two cells per step
- Growth stops when no edge can bulge; the attempt succeeds only if every cell
  of the coverage region ended up on the loop
- A bounded number of attempts is made, each with a fresh seed loop and fresh
  random scan offsets

Known limitation: the second leg is searched without knowledge of the first,
so on adversarial layouts the two legs can cross and the seed is not simple.
Such seeds simply fail to reach full coverage and use up an attempt.
"""

from __future__ import annotations
from typing import List, MutableSequence, Optional
import logging
import random

from .astar import shortest_path
from .grid_index import (
    Cell,
    CellLike,
    as_grid,
    complement,
    free_count,
    grid_size,
    in_bounds,
    index_of,
    is_free,
    offset,
    to_cell,
    with_free,
)

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10


def build_seed_cycle(grid, a: CellLike, b: CellLike) -> Optional[List[Cell]]:
    """
    Build a small closed loop through a and b.

    a and b are treated as free for the first leg whatever their real
    occupancy. The loop is leg1 followed by leg2 without its two endpoints,
    which are already on leg1.

    Returns:
        list of Cells starting at a, or None if either leg cannot be found,
        an endpoint is out of bounds, or a == b
    """
    board = as_grid(grid)
    if board is None:
        return None
    width, _ = grid_size(board)
    start = to_cell(width, a)
    target = to_cell(width, b)
    if start is None or target is None:
        return None
    if not in_bounds(board, start) or not in_bounds(board, target):
        return None
    if start == target:
        return None
    return _seed(board, start, target)


def _seed(board, start: Cell, target: Cell) -> Optional[List[Cell]]:
    leg1 = shortest_path(with_free(board, start, target), start, target)
    if leg1 is None:
        logger.debug("Seed leg %s -> %s failed on the masked grid", start, target)
        return None
    leg2 = shortest_path(complement(board), target, start)
    if leg2 is None:
        logger.debug("Seed leg %s -> %s failed on the complement grid", target, start)
        return None
    return leg1 + leg2[1:-1]


def extend_cycle(grid, cycle: MutableSequence[Cell], edge_index: int) -> bool:
    """
    Try to bulge the edge cycle[edge_index] -> cycle[edge_index + 1] outward.

    The two cells beside the edge (first on the +1 side, then on the -1 side)
    are spliced in after edge_index if both are in bounds, free and not
    already on the cycle.

    Returns:
        True if the cycle grew by two cells, False otherwise
    """
    board = as_grid(grid)
    if board is None:
        return False
    if len(cycle) < 2 or not 0 <= edge_index < len(cycle):
        return False
    return _extend(board, cycle, edge_index)


def _extend(board, cycle: MutableSequence[Cell], edge_index: int) -> bool:
    width, height = grid_size(board)
    current_len = len(cycle)
    insert_at = (edge_index + 1) % current_len
    point_1 = Cell(*cycle[edge_index])
    point_2 = Cell(*cycle[insert_at])

    if point_1.y == point_2.y:
        bulges = ((0, 1), (0, -1))
    else:
        bulges = ((1, 0), (-1, 0))

    members = set(cycle)
    for dx, dy in bulges:
        side_1 = offset(point_1, dx, dy, width, height)
        side_2 = offset(point_2, dx, dy, width, height)
        if side_1 is None or side_2 is None:
            continue
        if not is_free(board, side_1) or not is_free(board, side_2):
            continue
        if side_1 in members or side_2 in members:
            continue
        cycle[insert_at:insert_at] = [side_1, side_2]
        return True
    return False


def _grow(board, cycle: List[Cell], rng: random.Random) -> List[Cell]:
    """Extend until a full scan over every edge finds nothing to bulge."""
    extended = True
    while extended:
        extended = False
        current_len = len(cycle)
        start_index = rng.randrange(current_len)
        for i in range(current_len):
            # indices shift after a splice, so restart the scan
            if _extend(board, cycle, (start_index + i) % current_len):
                extended = True
                break
    return cycle


def coverage_target(board, seed: List[Cell]) -> int:
    """Free cells plus the blocked cells the seed loop already runs through."""
    blocked_on_seed = sum(1 for cell in set(seed) if not is_free(board, cell))
    return free_count(board) + blocked_on_seed


def get_longest_cycle(
    grid,
    a: CellLike,
    b: CellLike,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> Optional[List[Cell]]:
    """
    Grow a loop through a and b until it covers the whole region.

    Args:
        grid: occupancy grid indexed [y][x], 0 = free
        a, b: cells the loop must pass through (Cell, (x, y) or linear index)
        rng: random source for the scan offsets. If None, a private
            random.Random(seed) is created; the global generator is never used.
        seed: seed for the private generator when rng is None
        max_attempts: number of fresh seed loops to try

    Returns:
        the covering cycle as a list of Cells rotated to start at a, or None if the
        input is invalid, no seed loop exists, the region has an odd number of
        cells, or every attempt got stuck
    """
    board = as_grid(grid)
    if board is None:
        return None
    width, _ = grid_size(board)
    start = to_cell(width, a)
    target = to_cell(width, b)
    if start is None or target is None:
        return None
    if not in_bounds(board, start) or not in_bounds(board, target) or start == target:
        return None
    if rng is None:
        rng = random.Random(seed)

    for attempt in range(max_attempts):
        cycle = _seed(board, start, target)
        if cycle is None:
            return None
        region = coverage_target(board, cycle)
        if region % 2:
            # every closed walk on a grid graph has even length
            logger.debug("Coverage region of %d cells is odd, no covering cycle exists", region)
            return None
        _grow(board, cycle, rng)
        if len(cycle) == region and len(set(cycle)) == region:
            logger.debug("Covering cycle of %d cells found on attempt %d", region, attempt + 1)
            # splices on the closing edge land at index 0
            first = cycle.index(start)
            return cycle[first:] + cycle[:first]
        logger.debug("Attempt %d stuck at %d/%d cells", attempt + 1, len(cycle), region)

    logger.debug("No covering cycle after %d attempts", max_attempts)
    return None


class LongestCycle:
    def __init__(
        self,
        grid,
        start: CellLike,
        target: CellLike,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        Index based wrapper around get_longest_cycle().

        Raises:
            ValueError: if the grid is empty or ragged, or an endpoint lies
                outside it
        """
        board = as_grid(grid)
        if board is None:
            raise ValueError("Grid must be a non-empty rectangular 2D grid")
        self.board = board
        self.grid_width, self.grid_height = grid_size(board)
        self.start = to_cell(self.grid_width, start)
        self.target = to_cell(self.grid_width, target)
        for name, cell, raw in (("start", self.start, start), ("target", self.target, target)):
            if cell is None or not in_bounds(board, cell):
                raise ValueError(f"{name} {raw!r} is outside the {self.grid_width}x{self.grid_height} grid")
        self.rng = rng if rng is not None else random.Random(seed)

    def get_longest_cycle(self, max_attempts: int = MAX_ATTEMPTS) -> Optional[List[int]]:
        """Covering cycle as linear indices, or None."""
        cycle = get_longest_cycle(self.board, self.start, self.target, rng=self.rng, max_attempts=max_attempts)
        if cycle is None:
            return None
        return [index_of(self.grid_width, cell) for cell in cycle]
