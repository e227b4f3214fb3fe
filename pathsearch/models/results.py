"""
Search result types.

A search returns exactly one of:
    - AllDistances: best cost to every node (single-source, no goal)
    - Path: ordered nodes from source to goal plus total cost
    - NotFound: goal unreachable, or the search was aborted by its hook
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterator, List, Optional
import numpy as np


INFINITY = float('inf')


@dataclass
class SearchStats:
    """
    Counters collected during one search.

    Attributes:
        iterations: Frontier pops, including stale ones
        nodes_expanded: Nodes settled and expanded
        stale_discarded: Frontier entries dropped because the node was already settled
        entries_pushed: Frontier insertions, including the source
        max_frontier: Peak frontier size
    """
    iterations: int = 0
    nodes_expanded: int = 0
    stale_discarded: int = 0
    entries_pushed: int = 0
    max_frontier: int = 0

    def as_dict(self) -> dict:
        return {
            'iterations': self.iterations,
            'nodes_expanded': self.nodes_expanded,
            'stale_discarded': self.stale_discarded,
            'entries_pushed': self.entries_pushed,
            'max_frontier': self.max_frontier,
        }


@dataclass
class AllDistances:
    """
    Single-source distances produced in Dijkstra mode.

    Attributes:
        source: Public identifier of the source node
        costs: Best cost per dense node index (inf when unreachable)
        graph: Graph the search ran on, used to map identifiers
        stats: Search counters
    """
    source: Hashable
    costs: np.ndarray
    graph: Any = field(repr=False)
    stats: SearchStats = field(default_factory=SearchStats)

    def cost_to(self, node: Hashable) -> float:
        """Best cost from the source to ``node`` (INFINITY if unreachable)."""
        return float(self.costs[self.graph.to_index(node)])

    def is_reachable(self, node: Hashable) -> bool:
        return bool(np.isfinite(self.costs[self.graph.to_index(node)]))

    @property
    def reachable_count(self) -> int:
        return int(np.count_nonzero(np.isfinite(self.costs)))

    def as_dict(self) -> Dict[Hashable, float]:
        """Map every public node identifier to its best cost."""
        return {self.graph.to_node(i): float(c) for i, c in enumerate(self.costs)}

    def as_list(self) -> List[float]:
        return [float(c) for c in self.costs]

    def __len__(self) -> int:
        return len(self.costs)


@dataclass
class Path:
    """
    A source-to-goal path.

    Attributes:
        nodes: Public identifiers from source to goal, both inclusive
        cost: Total cost of the path
        stats: Search counters
    """
    nodes: List[Hashable]
    cost: float
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def source(self) -> Hashable:
        return self.nodes[0]

    @property
    def goal(self) -> Hashable:
        return self.nodes[-1]

    @property
    def edge_count(self) -> int:
        return len(self.nodes) - 1

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.nodes)


@dataclass
class NotFound:
    """
    No path exists from source to goal, or the search was aborted.

    Always falsy, so callers can branch with ``if not result``.
    """
    source: Hashable
    goal: Optional[Hashable] = None
    aborted: bool = False
    stats: SearchStats = field(default_factory=SearchStats)

    def __bool__(self) -> bool:
        return False
