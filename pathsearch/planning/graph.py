"""
Graph representation module for path planning.

This module defines the contract the search engine relies on and the two
standard adapters:

1. GridGraph: 4-connected occupancy grid, unit step cost
2. AdjacencyGraph: explicit weighted adjacency lists over integer ids

The engine only ever sees dense integer indices in [0, num_nodes). Each graph
maps its public identifiers to those indices and back.
"""

from abc import ABC, abstractmethod
from numbers import Integral, Real
from typing import Hashable, Iterable, Iterator, List, Tuple
import numpy as np

from ..models.errors import InvalidNodeError, MalformedGraphError
from ..models.grid_map import OBSTACLE


GRID_STEP_COST = 1.0

# 4-neighbourhood: up, down, left, right
GRID_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


class SearchGraph(ABC):
    """
    Read-only graph as seen by the search engine.

    Implementations must be safe to share across searches: ``neighbors`` may
    be called any number of times and must give the same answer for the same
    node while a search runs.
    """

    @property
    @abstractmethod
    def num_nodes(self) -> int:
        """Number of dense node indices."""

    @abstractmethod
    def neighbors(self, index: int) -> Iterable[Tuple[int, float]]:
        """
        Enumerate outgoing edges of a node.

        Args:
            index: Dense index of a node already validated by the engine

        Returns:
            Iterable of (neighbor_index, edge_weight)
        """

    def to_index(self, node: Hashable) -> int:
        """
        Map a public node identifier to its dense index.

        Raises:
            InvalidNodeError: If ``node`` is not part of the graph
        """
        if not _is_int(node) or not 0 <= node < self.num_nodes:
            raise InvalidNodeError(node, f"Node {node!r} is outside 0..{self.num_nodes - 1}")
        return int(node)

    def to_node(self, index: int) -> Hashable:
        """Map a dense index back to the public identifier."""
        return int(index)

    def contains(self, node: Hashable) -> bool:
        try:
            self.to_index(node)
        except InvalidNodeError:
            return False
        return True

    def __len__(self) -> int:
        return self.num_nodes


class GridGraph(SearchGraph):
    """
    Occupancy grid with 4-neighbourhood moves.

    Nodes are (row, col) cells mapped row-major to ``row * cols + col``.
    Obstacle cells are still valid identifiers but have no neighbours and
    are never entered.

    Attributes:
        rows: Number of grid rows
        cols: Number of grid columns
        step_cost: Weight of every move
        walkable: Flat bool array, True where the cell can be entered
    """

    def __init__(self, grid, obstacle: int = OBSTACLE,
                 step_cost: float = GRID_STEP_COST):
        """
        Initialize grid graph.

        Args:
            grid: 2D array-like of cell values
            obstacle: Cell value marking an obstacle
            step_cost: Weight of each orthogonal move (must be >= 0)
        """
        cells = np.asarray(grid)
        if cells.ndim != 2 or cells.shape[0] <= 0 or cells.shape[1] <= 0:
            raise ValueError(f"Grid must be a non-empty 2D array, got shape {cells.shape}")
        if step_cost < 0:
            raise ValueError(f"Step cost must be non-negative, got {step_cost}")

        self.rows, self.cols = cells.shape
        self.step_cost = float(step_cost)
        self.walkable = (cells != obstacle).ravel()

    @property
    def num_nodes(self) -> int:
        return self.rows * self.cols

    def to_index(self, node: Hashable) -> int:
        try:
            row, col = node
        except (TypeError, ValueError):
            raise InvalidNodeError(node, f"Grid node must be a (row, col) pair, got {node!r}")

        if not (_is_int(row) and _is_int(col)):
            raise InvalidNodeError(node, f"Grid coordinates must be integers, got {node!r}")
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise InvalidNodeError(node, f"Cell {node!r} is outside the {self.rows}x{self.cols} grid")

        return int(row) * self.cols + int(col)

    def to_node(self, index: int) -> Tuple[int, int]:
        row, col = divmod(int(index), self.cols)
        return row, col

    def is_walkable(self, node: Tuple[int, int]) -> bool:
        return self.contains(node) and bool(self.walkable[self.to_index(node)])

    def neighbors(self, index: int) -> Iterator[Tuple[int, float]]:
        if not self.walkable[index]:
            return
        row, col = divmod(index, self.cols)
        for d_row, d_col in GRID_DIRECTIONS:
            n_row, n_col = row + d_row, col + d_col
            if 0 <= n_row < self.rows and 0 <= n_col < self.cols:
                n_index = n_row * self.cols + n_col
                if self.walkable[n_index]:
                    yield n_index, self.step_cost

    def get_graph_info(self) -> dict:
        """
        Get information about the graph structure.

        Returns:
            Dictionary with graph statistics
        """
        open_cells = int(np.count_nonzero(self.walkable))
        return {
            'rows': self.rows,
            'cols': self.cols,
            'num_nodes': self.num_nodes,
            'open_cells': open_cells,
            'obstacle_cells': self.num_nodes - open_cells,
            'step_cost': self.step_cost,
        }

    def __repr__(self) -> str:
        info = self.get_graph_info()
        return (f"GridGraph({self.rows}x{self.cols}, "
                f"open={info['open_cells']}, "
                f"obstacles={info['obstacle_cells']})")


class AdjacencyGraph(SearchGraph):
    """
    Explicit weighted graph over integer ids 0..num_nodes-1.

    Edges are stored exactly as inserted; pass ``directed=False`` (or call
    ``add_edge`` twice) for undirected semantics.

    Attributes:
        adjacency: List indexed by node id of [(neighbor, weight), ...]
        directed: Whether constructor edges are inserted one way only
    """

    def __init__(self, num_nodes: int,
                 edges: Iterable[Tuple[int, int, float]] = (),
                 directed: bool = True):
        """
        Initialize adjacency graph.

        Args:
            num_nodes: Number of vertices
            edges: Iterable of (u, v, weight)
            directed: If False, each edge is also inserted as (v, u, weight)
        """
        if not _is_int(num_nodes) or num_nodes <= 0:
            raise ValueError(f"Graph needs a positive vertex count, got {num_nodes!r}")

        self._num_nodes = int(num_nodes)
        self.directed = directed
        self.adjacency: List[List[Tuple[int, float]]] = [[] for _ in range(self._num_nodes)]

        for u, v, weight in edges:
            self.add_edge(u, v, weight)
            if not directed:
                self.add_edge(v, u, weight)

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    @property
    def num_edges(self) -> int:
        return sum(len(edges) for edges in self.adjacency)

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """
        Append the directed edge u -> v.

        Raises:
            MalformedGraphError: If an endpoint is out of range or the weight is negative
        """
        for end in (u, v):
            if not _is_int(end) or not 0 <= end < self._num_nodes:
                raise MalformedGraphError(
                    f"Edge ({u}, {v}) references a vertex outside 0..{self._num_nodes - 1}"
                )
        if not isinstance(weight, Real) or weight < 0:
            raise MalformedGraphError(f"Edge ({u}, {v}) has invalid weight {weight!r}")

        self.adjacency[u].append((int(v), float(weight)))

    def neighbors(self, index: int) -> List[Tuple[int, float]]:
        return self.adjacency[index]

    def get_graph_info(self) -> dict:
        total_edges = self.num_edges
        return {
            'num_nodes': self._num_nodes,
            'num_edges': total_edges,
            'directed': self.directed,
            'avg_degree': total_edges / self._num_nodes,
        }

    def __repr__(self) -> str:
        return (f"AdjacencyGraph(nodes={self._num_nodes}, "
                f"edges={self.num_edges}, directed={self.directed})")


if __name__ == "__main__":
    # Example usage
    grid = np.array([
        [0, 0, 0],
        [1, 1, 0],
        [0, 0, 0],
    ])
    graph = GridGraph(grid)
    print(graph)

    start = graph.to_index((0, 0))
    print(f"\nNeighbours of (0, 0): "
          f"{[graph.to_node(n) for n, _ in graph.neighbors(start)]}")

    weighted = AdjacencyGraph(3, [(0, 1, 4), (1, 2, 1)], directed=False)
    print(f"\n{weighted}")
    print(f"Neighbours of 1: {weighted.neighbors(1)}")
