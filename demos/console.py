"""
Console view of a grid with a path or cycle overlay
- Cells on the route show their position in it (0, 1, 2, ...)
- Blocked cells show as ##, free cells off the route as .
"""

from typing import Dict, List, Optional, Sequence, Tuple

from pathing import as_grid, is_adjacent


def route_order(route: Sequence[Tuple[int, int]]) -> Dict[Tuple[int, int], int]:
    """Map each (x, y) on the route to its position in it."""
    return {tuple(cell): order for order, cell in enumerate(route)}


def format_overlay(grid, route: Optional[Sequence[Tuple[int, int]]] = None) -> str:
    """
    Render the grid as text, one line per row, with the route's visiting order.

    Args:
        grid: occupancy grid indexed [y][x], 0 = free
        route: path or cycle as (x, y) cells, or None for the bare grid
    """
    board = as_grid(grid)
    if board is None:
        raise ValueError("Grid must be a non-empty rectangular 2D grid")
    height, width = board.shape
    order = route_order(route or [])

    cell_width = max(2, len(str(max(len(order) - 1, 0)))) + 1

    lines = ["    " + "".join(f"x{x}".ljust(cell_width) for x in range(width))]
    for y in range(height):
        row = []
        for x in range(width):
            if (x, y) in order:
                row.append(str(order[(x, y)]).ljust(cell_width))
            elif board[y, x]:
                row.append("##".ljust(cell_width))
            else:
                row.append(".".ljust(cell_width))
        lines.append(f"y{y}".ljust(4) + "".join(row).rstrip())
    return "\n".join(lines)


def visualize_route(grid, route: Optional[List[Tuple[int, int]]], title: str, closed: bool = False):
    """Print the overlay with a short summary, like the old cycle visualizer did."""
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)
    if not route:
        print("No route found.")
        print(format_overlay(grid))
        print("=" * 60)
        return

    print("Numbers show the order in which cells are visited:")
    print()
    print(format_overlay(grid, route))
    print(f"\nLength: {len(route)} cells")
    if closed:
        adjacent = is_adjacent(route[0], route[-1])
        print(f"Closes back to start: {adjacent} {'✓' if adjacent else '✗ NOT A VALID CYCLE!'}")
    print("=" * 60)
