"""
Hamiltonian Cycle on a full grid by exhaustive backtracking
- Visits every cell exactly once and returns to the start
- Iterative depth-first search; each stack frame holds its own copy of the
  partial path, so search depth is not bounded by the recursion limit
- Neighbours are tried in adjacency build order (west, east, north, south)
- Exponential in the worst case: meant for small grids, generated offline
- Grids with an odd number of cells have no Hamiltonian cycle (the grid graph
  is bipartite), the search proves that the slow way
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Union
import logging

from .grid_index import Cell, cell_of, index_of, neighbor_indices, to_cell

logger = logging.getLogger(__name__)


def grid_adjacency(width: int, height: int = None) -> List[List[int]]:
    """
    Adjacency list of a full width x height grid graph.

    Args:
        width: Width of the grid (x dimension)
        height: Height of the grid (y dimension). If None, uses width (square grid)

    Returns:
        list indexed by linear cell index; each entry lists the neighbouring
        indices in west, east, north, south order, skipping the ones that would
        leave the grid
    """
    if height is None:
        height = width
    return [neighbor_indices(width, height, index) for index in range(width * height)]


def hamiltonian_cycle(adjacency: Sequence[Sequence[int]], vertex_count: int, start: int) -> Optional[List[int]]:
    """
    Find a Hamiltonian cycle starting (and implicitly ending) at `start`.

    Args:
        adjacency: neighbour lists indexed by vertex
        vertex_count: number of vertices, must match len(adjacency)
        start: vertex the cycle begins at

    Returns:
        list of vertex_count vertices beginning with start, where the last one
        is adjacent to start, or None if no such cycle exists or the input is
        inconsistent
    """
    if vertex_count < 1 or len(adjacency) != vertex_count:
        return None
    if not 0 <= start < vertex_count:
        return None
    cycle = _backtrack(adjacency, vertex_count, start)
    if cycle is None:
        logger.debug("No Hamiltonian cycle from %d over %d vertices", start, vertex_count)
    return cycle


def _backtrack(adjacency, vertex_count: int, start: int) -> Optional[List[int]]:
    # explicit stack of (partial path, remaining neighbours of its last vertex)
    stack = [([start], iter(adjacency[start]))]
    while stack:
        path, neighbors = stack[-1]
        if len(path) == vertex_count:
            if start in adjacency[path[-1]]:
                return path
            stack.pop()
            continue

        for neighbor in neighbors:
            if neighbor not in path:
                stack.append((path + [neighbor], iter(adjacency[neighbor])))
                break
        else:
            stack.pop()
    return None


def hamiltonian_cycle_cells(
    width: int,
    height: int = None,
    start: Union[Cell, Sequence[int], int] = 0,
) -> Optional[List[Cell]]:
    """Hamiltonian cycle of a full grid as Cells, start given as a cell or linear index."""
    if height is None:
        height = width
    if width <= 0 or height <= 0:
        return None
    start_cell = to_cell(width, start)
    if start_cell is None or not (0 <= start_cell.x < width and 0 <= start_cell.y < height):
        return None
    start_index = index_of(width, start_cell)
    cycle = hamiltonian_cycle(grid_adjacency(width, height), width * height, start_index)
    if cycle is None:
        return None
    return [cell_of(width, index) for index in cycle]
