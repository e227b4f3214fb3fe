"""
@Description: This module defines the occupancy grid supplied to the grid
search, along with the plain-text map format used by the demos.

Map text format:
    rows cols
    followed by rows*cols whitespace-separated cell values,
    0 = walkable, 1 = obstacle
"""

from dataclasses import dataclass
from pathlib import Path as FilePath
from typing import Optional, Tuple, Union
import numpy as np


WALKABLE = 0
OBSTACLE = 1

Cell = Tuple[int, int]


@dataclass
class GridMap:
    """
    Rectangular occupancy grid.

    Attributes:
        cells: 2D integer array, WALKABLE or OBSTACLE per cell
        name: Optional label (file name when loaded from disk)
    """
    cells: np.ndarray
    name: Optional[str] = None

    def __post_init__(self):
        """Normalise and validate the cell matrix."""
        self.cells = np.asarray(self.cells, dtype=np.int8)

        if self.cells.ndim != 2:
            raise ValueError(f"Grid must be 2-dimensional, got {self.cells.ndim} dimensions")

        rows, cols = self.cells.shape
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Invalid map dimensions: {rows}x{cols}")

        if not np.isin(self.cells, (WALKABLE, OBSTACLE)).all():
            raise ValueError("Grid cells must be 0 (walkable) or 1 (obstacle)")

    @classmethod
    def from_text(cls, text: str, name: Optional[str] = None) -> 'GridMap':
        """
        Parse a grid from its text form.

        Args:
            text: Header ``rows cols`` followed by the cell values
            name: Optional label for the map

        Returns:
            Parsed GridMap

        Raises:
            ValueError: On a malformed header, wrong cell count or bad values
        """
        tokens = text.split()
        if len(tokens) < 2:
            raise ValueError("Map is missing its 'rows cols' header")

        try:
            rows, cols = int(tokens[0]), int(tokens[1])
            values = [int(tok) for tok in tokens[2:]]
        except ValueError as exc:
            raise ValueError(f"Map contains a non-integer token: {exc}") from exc

        if rows <= 0 or cols <= 0:
            raise ValueError(f"Invalid map dimensions: {rows}x{cols}")

        if len(values) != rows * cols:
            raise ValueError(
                f"Expected {rows * cols} cells for a {rows}x{cols} map, got {len(values)}"
            )

        return cls(cells=np.array(values).reshape(rows, cols), name=name)

    @classmethod
    def load(cls, path: Union[str, FilePath]) -> 'GridMap':
        """Read a map file from disk."""
        path = FilePath(path)
        return cls.from_text(path.read_text(), name=path.name)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    @property
    def rows(self) -> int:
        return self.cells.shape[0]

    @property
    def cols(self) -> int:
        return self.cells.shape[1]

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_walkable(self, cell: Cell) -> bool:
        """
        Check if a cell is inside the grid and not an obstacle.

        Args:
            cell: (row, col) to check

        Returns:
            True if the cell can be entered
        """
        return self.in_bounds(cell) and self.cells[cell] == WALKABLE

    def default_endpoints(self) -> Tuple[Cell, Cell]:
        """Top-left and bottom-right corners, the demo's default start and goal."""
        return (0, 0), (self.rows - 1, self.cols - 1)

    def validate_endpoints(self, start: Cell, goal: Cell) -> None:
        """
        Ensure start and goal are usable before a search.

        Raises:
            ValueError: If either endpoint is out of bounds or on an obstacle
        """
        for label, cell in (('Start', start), ('Goal', goal)):
            if not self.in_bounds(cell):
                raise ValueError(f"{label} {cell} is outside the {self.rows}x{self.cols} grid")
            if not self.is_walkable(cell):
                raise ValueError(f"{label} {cell} is on an obstacle")

    def obstacle_ratio(self) -> float:
        return float(np.count_nonzero(self.cells == OBSTACLE)) / self.cells.size

    def to_graph(self):
        """Build the 4-neighbour GridGraph over this map."""
        from ..planning.graph import GridGraph
        return GridGraph(self.cells, obstacle=OBSTACLE)

    def __repr__(self) -> str:
        return (f"GridMap({self.rows}x{self.cols}, "
                f"obstacles={self.obstacle_ratio():.0%})")


if __name__ == "__main__":
    # Example usage
    grid_map = GridMap.from_text("""
        3 4
        0 0 0 0
        1 1 0 1
        0 0 0 0
    """)

    print(grid_map)
    print(f"\nCell (0, 0) walkable? {grid_map.is_walkable((0, 0))}")
    print(f"Cell (1, 0) walkable? {grid_map.is_walkable((1, 0))}")
    print(f"Default endpoints: {grid_map.default_endpoints()}")
