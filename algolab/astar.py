"""A* path finding on a character grid with eight-way movement."""

from __future__ import annotations

import argparse
import heapq
import math
from collections.abc import Sequence

Point = tuple[int, int]

OPEN = "."
WALL = "#"
START = "S"
GOAL = "G"
PATH = "*"

DIAGONAL_COST = 1.414
STRAIGHT_COST = 1.0

# Up, right, down, left, then the four diagonals.
DIRECTIONS: tuple[Point, ...] = (
    (0, -1), (1, 0), (0, 1), (-1, 0),
    (1, -1), (1, 1), (-1, 1), (-1, -1),
)

EXAMPLE_GRID = """\
..........
.#####.#..
.......#..
.####.##..
....#.....
###.#####.
..........
.#######..
..........
..........
"""

EXAMPLE_START: Point = (0, 0)
EXAMPLE_GOAL: Point = (9, 9)


def parse_grid(text: str) -> list[list[str]]:
    """Parse rows of cell characters; blank lines and whitespace are ignored."""
    rows = [list("".join(line.split())) for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("grid is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows have different lengths")
    return rows


def _heuristic(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def _dimensions(grid: Sequence[Sequence[str]]) -> tuple[int, int]:
    height = len(grid)
    if height == 0 or len(grid[0]) == 0:
        raise ValueError("grid is empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows have different lengths")
    return width, height


def find_path(
    grid: Sequence[Sequence[str]],
    start: Sequence[int],
    goal: Sequence[int],
) -> list[Point]:
    """Return the path from start to goal as (x, y) points, or [] if none exists.

    Cells marked '#' are walls; diagonal steps cost 1.414, straight steps 1.
    """
    width, height = _dimensions(grid)
    start_pt: Point = (int(start[0]), int(start[1]))
    goal_pt: Point = (int(goal[0]), int(goal[1]))
    for name, (x, y) in (("start", start_pt), ("goal", goal_pt)):
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"{name} is outside the grid")

    g_score: dict[Point, float] = {start_pt: 0.0}
    came_from: dict[Point, Point] = {}
    closed: set[Point] = set()
    open_heap: list[tuple[float, Point]] = [(_heuristic(start_pt, goal_pt), start_pt)]

    while open_heap:
        _, current = heapq.heappop(open_heap)
        if current == goal_pt:
            return _reconstruct(came_from, start_pt, goal_pt)
        if current in closed:
            continue
        closed.add(current)

        for dx, dy in DIRECTIONS:
            neighbour = (current[0] + dx, current[1] + dy)
            nx, ny = neighbour
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if grid[ny][nx] == WALL or neighbour in closed:
                continue
            step = DIAGONAL_COST if dx and dy else STRAIGHT_COST
            tentative = g_score[current] + step
            if neighbour not in g_score or tentative < g_score[neighbour]:
                came_from[neighbour] = current
                g_score[neighbour] = tentative
                heapq.heappush(open_heap, (tentative + _heuristic(neighbour, goal_pt), neighbour))
    return []


def _reconstruct(came_from: dict[Point, Point], start: Point, goal: Point) -> list[Point]:
    path = [goal]
    while path[-1] != start:
        path.append(came_from[path[-1]])
    path.reverse()
    return path


def _format_row(row: Sequence[str]) -> str:
    return "".join(f"{cell} " for cell in row)


def render_grid(grid: Sequence[Sequence[str]], path: Sequence[Sequence[int]]) -> str:
    """Return the grid as text with the path marked '*' and open cells blank."""
    cells = [list(row) for row in grid]
    for x, y in path:
        if cells[y][x] not in (START, GOAL):
            cells[y][x] = PATH
    return "\n".join(
        _format_row(" " if cell == OPEN else cell for cell in row) for row in cells
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Find and print a path across the example grid."""
    parser = argparse.ArgumentParser(description="A* search on an example grid.")
    parser.parse_args(argv)

    grid = parse_grid(EXAMPLE_GRID)
    sx, sy = EXAMPLE_START
    gx, gy = EXAMPLE_GOAL
    grid[sy][sx] = START
    grid[gy][gx] = GOAL

    print("Initial Grid:")
    for row in grid:
        print(_format_row(row))
    print()

    path = find_path(grid, EXAMPLE_START, EXAMPLE_GOAL)
    if not path:
        print("No path found!")
        return 0

    print(f"Path found! Path length: {len(path)}")
    print("Path coordinates: " + "".join(f"({x},{y}) " for x, y in path))
    print()
    print("Grid with Path:")
    print(render_grid(grid, path))
    return 0