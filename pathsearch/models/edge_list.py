"""
Weighted edge list supplied to the general-graph search.

Text format:
    n m
    u v w      (m lines, 0-based vertices, non-negative integer weight)
    s          (optional source vertex)
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


Edge = Tuple[int, int, float]


@dataclass
class EdgeList:
    """
    Vertex count plus weighted edges.

    Attributes:
        num_nodes: Number of vertices, ids are 0..num_nodes-1
        edges: List of (u, v, weight)
        source: Optional source vertex read from the input
    """
    num_nodes: int
    edges: List[Edge] = field(default_factory=list)
    source: Optional[int] = None

    def __post_init__(self):
        if self.num_nodes <= 0:
            raise ValueError(f"Graph needs at least one vertex, got {self.num_nodes}")

        for u, v, w in self.edges:
            if not (0 <= u < self.num_nodes and 0 <= v < self.num_nodes):
                raise ValueError(f"Edge ({u}, {v}) references a vertex outside 0..{self.num_nodes - 1}")
            if w < 0:
                raise ValueError(f"Edge ({u}, {v}) has negative weight {w}")

        if self.source is not None and not 0 <= self.source < self.num_nodes:
            raise ValueError(f"Source {self.source} is outside 0..{self.num_nodes - 1}")

    @classmethod
    def from_text(cls, text: str) -> 'EdgeList':
        """
        Parse the ``n m`` / ``u v w`` / ``s`` format.

        Raises:
            ValueError: On truncated input, non-numeric tokens or invalid edges
        """
        tokens = text.split()
        if len(tokens) < 2:
            raise ValueError("Input is missing its 'n m' header")

        try:
            num_nodes, num_edges = int(tokens[0]), int(tokens[1])
        except ValueError as exc:
            raise ValueError(f"Invalid header: {exc}") from exc
        if num_edges < 0:
            raise ValueError(f"Edge count must be non-negative, got {num_edges}")

        body = tokens[2:]
        if len(body) < 3 * num_edges:
            raise ValueError(f"Expected {num_edges} edges, input ends early")

        edges = []
        try:
            for i in range(num_edges):
                u, v, w = body[3 * i:3 * i + 3]
                edges.append((int(u), int(v), float(w)))
            rest = body[3 * num_edges:]
            source = int(rest[0]) if rest else None
        except ValueError as exc:
            raise ValueError(f"Invalid edge list entry: {exc}") from exc

        return cls(num_nodes=num_nodes, edges=edges, source=source)

    def to_graph(self, directed: bool = False):
        """
        Build an AdjacencyGraph.

        Args:
            directed: If False, every edge is inserted in both directions
        """
        from ..planning.graph import AdjacencyGraph
        return AdjacencyGraph(self.num_nodes, self.edges, directed=directed)

    def __len__(self) -> int:
        return len(self.edges)
