"""
A* shortest path on a 4-connected occupancy grid
- Uniform step cost, Manhattan distance heuristic
- Open set ordered by (f, node index): ties go to the node created first
- Successors are generated in a fixed order so results are reproducible
- Nodes live in an arena list and point at their parent by arena index
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional
import heapq
import logging

from .grid_index import (
    Cell,
    CellLike,
    as_grid,
    grid_size,
    in_bounds,
    index_of,
    is_free,
    manhattan,
    offset,
    to_cell,
)

logger = logging.getLogger(__name__)

# +x, +y, -x, -y. Part of the tie-breaking, do not reorder.
SUCCESSOR_OFFSETS = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass
class SearchNode:
    index: int
    parent: Optional[int]
    position: Cell
    g: int = 0
    h: int = 0

    @property
    def f(self) -> int:
        return self.g + self.h


def astar(grid, start: CellLike, target: CellLike) -> Optional[List[Cell]]:
    """
    Find a shortest path from start to target.

    Args:
        grid: occupancy grid indexed [y][x], 0 = free
        start: Cell, (x, y) pair or linear index
        target: Cell, (x, y) pair or linear index

    Returns:
        list of Cells from start to target (both included), or None if the
        input is invalid or the target cannot be reached
    """
    board = as_grid(grid)
    if board is None:
        return None
    width, _ = grid_size(board)
    start_cell = to_cell(width, start)
    target_cell = to_cell(width, target)
    if start_cell is None or target_cell is None:
        return None
    if not in_bounds(board, start_cell) or not in_bounds(board, target_cell):
        return None
    return shortest_path(board, start_cell, target_cell)


def shortest_path(board, start: Cell, target: Cell) -> Optional[List[Cell]]:
    """A* over an already normalized grid with in-bounds endpoints."""
    if start == target:
        return [start]

    width, height = grid_size(board)
    arena: List[SearchNode] = []
    open_heap: List[tuple] = []
    open_g: Dict[Cell, int] = {}
    closed: Dict[Cell, int] = {}

    def push(parent: Optional[int], position: Cell, g: int) -> None:
        node = SearchNode(len(arena), parent, position, g, manhattan(position, target))
        arena.append(node)
        heapq.heappush(open_heap, (node.f, node.index))
        best = open_g.get(position)
        if best is None or g < best:
            open_g[position] = g

    push(None, start, 0)

    while open_heap:
        _, node_index = heapq.heappop(open_heap)
        node = arena[node_index]
        if node.position in closed:
            continue  # stale duplicate
        closed[node.position] = node.index

        if node.position == target:
            return _reconstruct(arena, node)

        for dx, dy in SUCCESSOR_OFFSETS:
            child = offset(node.position, dx, dy, width, height)
            if child is None or not is_free(board, child):
                continue
            if child in closed:
                continue
            g = node.g + 1
            best = open_g.get(child)
            if best is not None and best < g:
                continue
            push(node.index, child, g)

    logger.debug("No path from %s to %s after expanding %d nodes", start, target, len(closed))
    return None


def _reconstruct(arena: List[SearchNode], goal: SearchNode) -> List[Cell]:
    path = [goal.position]
    parent = goal.parent
    while parent is not None:
        node = arena[parent]
        path.append(node.position)
        parent = node.parent
    path.reverse()
    return path


class AStar:
    def __init__(self, grid, start: CellLike, target: CellLike):
        """
        Index based wrapper around astar().

        Args:
            grid: occupancy grid indexed [y][x], 0 = free
            start: linear index, Cell or (x, y) pair
            target: linear index, Cell or (x, y) pair

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

    def calculate_path(self) -> Optional[List[int]]:
        """Shortest path as linear indices, or None if unreachable."""
        path = shortest_path(self.board, self.start, self.target)
        if path is None:
            return None
        return [index_of(self.grid_width, cell) for cell in path]
