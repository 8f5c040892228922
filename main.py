"""
Grid Pathing - Main Entry Point
Run a search on a grid from the command line and look at the result
"""

import argparse
import logging
import random
import sys

from pathing import (
    MAX_ATTEMPTS,
    astar,
    build_seed_cycle,
    get_longest_cycle,
    grid_from_blocked,
    hamiltonian_cycle_cells,
)
from demos.console import visualize_route

MODES = ('astar', 'seed', 'longest', 'hamilton')


def parse_cell(text):
    """Parse 'X,Y' into a tuple or a bare number into a linear index"""
    text = text.strip()
    if ',' in text:
        parts = text.split(',')
        if len(parts) != 2:
            raise argparse.ArgumentTypeError(f"Expected X,Y but got '{text}'")
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            raise argparse.ArgumentTypeError(f"Expected integer coordinates but got '{text}'")
    try:
        return int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected X,Y or a cell index but got '{text}'")


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='Shortest paths and covering cycles on an occupancy grid',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py astar --width 4 --height 4 --block 0,1 --start 0 --target 15
  python main.py seed --width 10 --block 1,1 1,2 1,3 --start 1,3 --target 1,1
  python main.py longest --width 6 --block 1,1 1,2 1,3 --start 1,3 --target 1,1 --seed 7
  python main.py hamilton --width 4 --height 4 --render
        """
    )

    parser.add_argument('mode', choices=MODES,
                        help='Which search to run')
    parser.add_argument('--width', type=int, default=10,
                        help='Grid width (default: 10)')
    parser.add_argument('--height', type=int, default=None,
                        help='Grid height (default: same as width)')
    parser.add_argument('--block', type=parse_cell, nargs='*', default=[],
                        help='Blocked cells as X,Y or index')
    parser.add_argument('--start', type=parse_cell, default=0,
                        help='Start cell as X,Y or index (default: 0)')
    parser.add_argument('--target', type=parse_cell, default=None,
                        help='Target cell as X,Y or index (default: last cell)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for the longest cycle search')
    parser.add_argument('--attempts', type=int, default=MAX_ATTEMPTS,
                        help=f'Attempts for the longest cycle search (default: {MAX_ATTEMPTS})')
    parser.add_argument('--render', action='store_true',
                        help='Show the result in a pygame window')
    parser.add_argument('--cell-size', type=int, default=None,
                        help='Cell size in pixels for --render (default: fit to screen)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log search details')

    args = parser.parse_args(argv)
    if args.height is None:
        args.height = args.width
    if args.width <= 0 or args.height <= 0:
        parser.error(f"Grid must be at least 1x1, got {args.width}x{args.height}")
    if args.target is None:
        args.target = args.width * args.height - 1
    if args.attempts < 1:
        parser.error("--attempts must be at least 1")
    try:
        args.grid = grid_from_blocked(args.width, args.height, args.block)
    except ValueError as e:
        parser.error(str(e))
    return args


def run(args):
    """Run the selected search. Returns (route, closed, title)"""
    grid = args.grid
    size = f"{args.width}x{args.height}"

    if args.mode == 'astar':
        route = astar(grid, args.start, args.target)
        return route, False, f"A* path on {size} grid"

    if args.mode == 'seed':
        route = build_seed_cycle(grid, args.start, args.target)
        return route, True, f"Seed cycle on {size} grid"

    if args.mode == 'longest':
        rng = random.Random(args.seed)
        route = get_longest_cycle(grid, args.start, args.target, rng=rng, max_attempts=args.attempts)
        return route, True, f"Covering cycle on {size} grid"

    if args.block:
        logging.warning("Hamiltonian backtracking ignores blocked cells")
    route = hamiltonian_cycle_cells(args.width, args.height, args.start)
    return route, True, f"Hamiltonian cycle on {size} grid"


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    route, closed, title = run(args)
    visualize_route(args.grid, route, title, closed=closed)

    if args.render:
        try:
            from demos.cycle_viewer import show_route
            show_route(args.grid, route, closed=closed, title=title, cell_size=args.cell_size)
        except ImportError as e:
            print(f"❌ Error: Could not import the pygame viewer: {e}")

    return 0 if route else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\n👋 Interrupted by user. Goodbye!\n")
        sys.exit(0)
