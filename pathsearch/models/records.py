"""
Per-search bookkeeping table.

@Description: Holds best cost, heuristic, predecessor and settled flag for
every node of one search invocation. Storage is a set of dense numpy arrays
indexed by node index, allocated once per call and dropped with it.
"""

from dataclasses import dataclass
from typing import Optional
import numpy as np


NO_PREDECESSOR = -1


@dataclass(frozen=True)
class SearchRecord:
    """
    Snapshot of one node's search state.

    Attributes:
        index: Dense node index
        best_cost: Best known cost from the source (inf if undiscovered)
        heuristic: Static estimate to the goal (0 in Dijkstra mode)
        predecessor: Index of the previous node on the best path, or None
        settled: True once the node was popped with its final cost
    """
    index: int
    best_cost: float
    heuristic: float
    predecessor: Optional[int]
    settled: bool


class SearchRecords:
    """
    Arena-style record table for a single search.

    Attributes:
        best_cost: float64 array, initialised to +inf
        heuristic: float64 array, initialised to 0
        predecessor: int64 array, initialised to NO_PREDECESSOR
        settled: bool array, initialised to False
    """

    def __init__(self, num_nodes: int):
        self.best_cost = np.full(num_nodes, np.inf, dtype=np.float64)
        self.heuristic = np.zeros(num_nodes, dtype=np.float64)
        self.predecessor = np.full(num_nodes, NO_PREDECESSOR, dtype=np.int64)
        self.settled = np.zeros(num_nodes, dtype=bool)

    def __len__(self) -> int:
        return len(self.best_cost)

    def relax(self, index: int, cost: float, predecessor: int,
              heuristic: float = 0.0) -> None:
        """Record an improved cost for ``index`` reached from ``predecessor``."""
        self.best_cost[index] = cost
        self.predecessor[index] = predecessor
        self.heuristic[index] = heuristic

    def get_predecessor(self, index: int) -> Optional[int]:
        """Predecessor index of ``index``, or None for the source/undiscovered nodes."""
        pred = int(self.predecessor[index])
        return None if pred == NO_PREDECESSOR else pred

    def record(self, index: int) -> SearchRecord:
        """Return an immutable snapshot of the record at ``index``."""
        return SearchRecord(
            index=index,
            best_cost=float(self.best_cost[index]),
            heuristic=float(self.heuristic[index]),
            predecessor=self.get_predecessor(index),
            settled=bool(self.settled[index]),
        )

    def settled_count(self) -> int:
        return int(np.count_nonzero(self.settled))

    def __repr__(self) -> str:
        return (f"SearchRecords(nodes={len(self)}, "
                f"settled={self.settled_count()})")
