"""
Plain-text rendering of search results.

Grid overlay legend:
    S = start, G = goal, P = path, . = open, # = obstacle
"""

from typing import Optional, Sequence, Tuple, Union
import numpy as np

from ..models.grid_map import GridMap, OBSTACLE
from ..models.results import AllDistances, NotFound, Path

Cell = Tuple[int, int]


def _format_cost(cost: float) -> str:
    """INF for unreachable, integers without a trailing .0."""
    if not np.isfinite(cost):
        return "INF"
    if float(cost).is_integer():
        return str(int(cost))
    return f"{cost:g}"


def render_grid(grid: Union[GridMap, np.ndarray],
                path: Union[Path, NotFound, Sequence[Cell], None] = None,
                start: Optional[Cell] = None,
                goal: Optional[Cell] = None) -> str:
    """
    Draw the grid with the path overlaid.

    Args:
        grid: GridMap or 2D cell array
        path: Path result, NotFound, plain list of cells, or None
        start: Start cell, taken from the result when omitted
        goal: Goal cell, taken from the result when omitted

    Returns:
        One line per row, cells separated by single spaces
    """
    cells = grid.cells if isinstance(grid, GridMap) else np.asarray(grid)

    if isinstance(path, (Path, NotFound)):
        start = path.source if start is None else start
        goal = path.goal if goal is None else goal
    path_cells = set(path) if isinstance(path, (Path, list, tuple)) else set()

    lines = []
    for row in range(cells.shape[0]):
        symbols = []
        for col in range(cells.shape[1]):
            cell = (row, col)
            if cell == start:
                symbols.append('S')
            elif cell == goal:
                symbols.append('G')
            elif cells[row, col] == OBSTACLE:
                symbols.append('#')
            elif cell in path_cells:
                symbols.append('P')
            else:
                symbols.append('.')
        lines.append(' '.join(symbols))

    return '\n'.join(lines)


def format_path(result: Union[Path, NotFound]) -> str:
    """Describe a path result as the step count followed by its nodes."""
    if isinstance(result, NotFound):
        return "Search aborted." if result.aborted else "No path found."

    nodes = ' '.join(f"({node[0]}, {node[1]})" if isinstance(node, tuple) else str(node)
                     for node in result.nodes)
    return (f"Path found ({len(result)} steps, cost {_format_cost(result.cost)}):\n"
            f"{nodes}")


def format_distances(result: AllDistances) -> str:
    """
    Tabulate single-source distances.

    Args:
        result: Distances from a Dijkstra-mode search

    Returns:
        Header line followed by ``Vertex i: d`` lines (INF when unreachable)
    """
    lines = [f"Shortest distances from vertex {result.source}:"]
    for node, cost in result.as_dict().items():
        lines.append(f"Vertex {node}: {_format_cost(cost)}")
    return '\n'.join(lines)
