"""
Path reconstruction from predecessor links.
"""

from typing import Hashable, List, Sequence
import numpy as np

from .graph import SearchGraph
from ..models.errors import MalformedGraphError
from ..models.records import SearchRecords


def reconstruct_path(records: SearchRecords, terminal: int) -> List[int]:
    """
    Walk predecessor links back from ``terminal`` to the source.

    Args:
        records: Record table of a finished search
        terminal: Dense index of the last node on the path

    Returns:
        Dense indices from source to terminal, both inclusive

    Raises:
        ValueError: If ``terminal`` was never reached
        MalformedGraphError: If the predecessor chain loops
    """
    if not np.isfinite(records.best_cost[terminal]):
        raise ValueError(f"Node index {terminal} was not reached by the search")

    path = []
    current = terminal

    while current is not None:
        path.append(current)
        # A simple path visits each node at most once
        if len(path) > len(records):
            raise MalformedGraphError(f"Predecessor chain from {terminal} contains a cycle")
        current = records.get_predecessor(current)

    path.reverse()
    return path


def path_cost(graph: SearchGraph, nodes: Sequence[Hashable]) -> float:
    """
    Sum edge weights along a path of public node identifiers.

    Between two consecutive nodes the cheapest parallel edge is used.

    Raises:
        ValueError: If two consecutive nodes are not joined by an edge
    """
    total = 0.0
    indices = [graph.to_index(node) for node in nodes]

    for u, v in zip(indices, indices[1:]):
        weights = [w for n, w in graph.neighbors(u) if n == v]
        if not weights:
            raise ValueError(f"No edge from {graph.to_node(u)!r} to {graph.to_node(v)!r}")
        total += min(weights)

    return total
