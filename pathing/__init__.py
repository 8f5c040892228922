"""Pathing module - Shortest paths and covering cycles on occupancy grids"""
from .grid_index import (
    BLOCKED,
    FREE,
    Cell,
    as_grid,
    cell_of,
    complement,
    grid_from_blocked,
    index_of,
    is_adjacent,
    is_simple_cycle,
    manhattan,
    offset,
)
from .astar import AStar, SearchNode, astar
from .longest_cycle import MAX_ATTEMPTS, LongestCycle, build_seed_cycle, extend_cycle, get_longest_cycle
from .hamilton_cycle import grid_adjacency, hamiltonian_cycle, hamiltonian_cycle_cells

__all__ = [
    'BLOCKED', 'FREE', 'Cell', 'as_grid', 'cell_of', 'complement', 'grid_from_blocked', 'index_of',
    'is_adjacent', 'is_simple_cycle', 'manhattan', 'offset',
    'AStar', 'SearchNode', 'astar',
    'MAX_ATTEMPTS', 'LongestCycle', 'build_seed_cycle', 'extend_cycle', 'get_longest_cycle',
    'grid_adjacency', 'hamiltonian_cycle', 'hamiltonian_cycle_cells',
]
