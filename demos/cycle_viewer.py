"""
Pygame viewer for a grid with a path or cycle overlay
- Blocked cells are grey blocks, the route is drawn as a thick tube with
  filled corners
- Press H to toggle the visiting-order numbers
- Press ESC or close the window to exit
- Window is resizable; cell size is recalculated on resize
"""

import pygame

from pathing import as_grid


def cell_center(cell_xy, cell_size):
    """Get pixel center of a grid cell"""
    return (cell_xy[0] * cell_size + cell_size / 2, cell_xy[1] * cell_size + cell_size / 2)


def draw_route_with_filled_corners(surface, points, thickness, color):
    """Draw a route through pixel points with square elbows"""
    if not points:
        return
    half = thickness / 2

    # axis-aligned segment rectangles
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        dx = x2 - x1
        dy = y2 - y1
        if abs(dx) >= abs(dy):  # horizontal
            left = min(x1, x2)
            rect = pygame.Rect(int(left), int(y1 - half), int(abs(dx)), int(thickness))
        else:                   # vertical
            top = min(y1, y2)
            rect = pygame.Rect(int(x1 - half), int(top), int(thickness), int(abs(dy)))
        pygame.draw.rect(surface, color, rect)

    # fill joints with boxes
    s = int(thickness)
    for (cx, cy) in points:
        rect = pygame.Rect(int(cx - half), int(cy - half), s, s)
        pygame.draw.rect(surface, color, rect)


def fit_cell_size(grid_width, grid_height, cap=60):
    """Largest cell size that fits 90% of the screen, capped for small grids"""
    display_info = pygame.display.Info()
    max_width = int(display_info.current_w * 0.9)
    max_height = int(display_info.current_h * 0.9)
    return max(4, min(max_width // grid_width, max_height // grid_height, cap))


def show_route(grid, route=None, closed=False, title='Grid Route', cell_size=None, fps=30, show_numbers=True):
    """
    Open a window showing the grid and the route until the user closes it.

    Args:
        grid: occupancy grid indexed [y][x], 0 = free
        route: path or cycle as (x, y) cells, or None for the bare grid
        closed: if True, draw the closing segment from the last cell to the first
        title: window caption
        cell_size: Size of each cell in pixels (None = auto-calculate to fit screen)
        fps: redraw rate of the (static) window
        show_numbers: initial state of the order-number overlay
    """
    board = as_grid(grid)
    if board is None:
        raise ValueError("Grid must be a non-empty rectangular 2D grid")
    grid_height, grid_width = board.shape
    route = [tuple(cell) for cell in (route or [])]

    pygame.init()
    if cell_size is None:
        cell_size = fit_cell_size(grid_width, grid_height)
        print(f"Auto-calculated cell size: {cell_size}px (Window: {cell_size * grid_width}x{cell_size * grid_height})")

    window = pygame.display.set_mode((grid_width * cell_size, grid_height * cell_size), pygame.RESIZABLE)
    pygame.display.set_caption(title)
    clock = pygame.time.Clock()

    black = pygame.Color(0, 0, 0)
    white = pygame.Color(255, 255, 255)
    green = pygame.Color(0, 200, 0)
    red = pygame.Color(255, 0, 0)
    wall = pygame.Color(90, 90, 90)
    grid_col = pygame.Color(40, 40, 40)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                cell_size = max(4, min(event.w // grid_width, event.h // grid_height))
                window = pygame.display.set_mode((grid_width * cell_size, grid_height * cell_size), pygame.RESIZABLE)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_h:
                    show_numbers = not show_numbers

        window.fill(black)

        for y in range(grid_height):
            for x in range(grid_width):
                rect = pygame.Rect(x * cell_size, y * cell_size, cell_size, cell_size)
                if board[y, x]:
                    pygame.draw.rect(window, wall, rect)
                pygame.draw.rect(window, grid_col, rect, 1)

        points = [cell_center(cell, cell_size) for cell in route]
        if closed and len(points) > 1:
            points.append(points[0])
        draw_route_with_filled_corners(window, points, max(2, int(cell_size * 0.4)), green)

        if route:
            # start marker
            start = cell_center(route[0], cell_size)
            pygame.draw.circle(window, red, (int(start[0]), int(start[1])), max(2, cell_size // 4))

        if show_numbers and route:
            font = pygame.font.SysFont('consolas', max(10, cell_size // 3))
            for order, cell in enumerate(route):
                label = font.render(str(order), True, white)
                cx, cy = cell_center(cell, cell_size)
                window.blit(label, label.get_rect(center=(int(cx), int(cy))))

        pygame.display.update()
        clock.tick(fps)

    pygame.quit()
