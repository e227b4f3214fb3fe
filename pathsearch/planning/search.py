"""
Best-first shortest path engine

@Description: This module implements the search shared by Dijkstra and A*.
With no heuristic it settles nodes in order of cost from the source
(Dijkstra); with an admissible, consistent heuristic it settles them in order
of cost plus estimate (A*).

The frontier is a binary heap with lazy deletion: an improved cost pushes a
fresh entry and the old one stays in the heap until it is popped and
discarded, either because its node is already settled or because the cost it
was pushed with is no longer the best known.
"""

import heapq
import itertools
import logging
from typing import Callable, Hashable, List, Optional, Tuple, Union

from .graph import SearchGraph
from .reconstruct import reconstruct_path
from ..models.errors import MalformedGraphError
from ..models.records import NO_PREDECESSOR, SearchRecords
from ..models.results import AllDistances, NotFound, Path, SearchStats

logger = logging.getLogger(__name__)

Heuristic = Callable[[Hashable], float]
IterationHook = Callable[[int, int], bool]
SearchResult = Union[AllDistances, Path, NotFound]

# (priority, insertion sequence, node index, cost at insertion)
FrontierEntry = Tuple[float, int, int, float]


class BestFirstSearch:
    """
    Best-first search over a SearchGraph.

    One instance may run any number of searches one after another; each call
    allocates its own record table and frontier. The graph is never mutated.

    Attributes:
        graph: Graph to search
        records: Record table of the most recent search (None before the first)
        stats: Counters of the most recent search
    """

    def __init__(self, graph: SearchGraph):
        self.graph = graph
        self.records: Optional[SearchRecords] = None
        self.stats = SearchStats()

    def search(self, source: Hashable,
               goal: Optional[Hashable] = None,
               heuristic: Optional[Heuristic] = None,
               on_iteration: Optional[IterationHook] = None) -> SearchResult:
        """
        Run a best-first search from ``source``.

        Args:
            source: Public identifier of the start node
            goal: Optional target; without it every reachable node is settled
            heuristic: Optional ``h(node) -> float`` estimate to the goal.
                Must be admissible and consistent for optimal paths.
            on_iteration: Optional ``hook(iteration, frontier_size)`` called
                before every frontier pop; a falsy return aborts the search

        Returns:
            AllDistances when no goal is given, Path when the goal is
            reached, NotFound when it is unreachable or the hook aborted

        Raises:
            InvalidNodeError: If source or goal is not in the graph
            MalformedGraphError: If the graph yields an out-of-range
                neighbour or a negative edge weight
        """
        graph = self.graph
        source_index = graph.to_index(source)
        goal_index = graph.to_index(goal) if goal is not None else None
        num_nodes = graph.num_nodes

        records = SearchRecords(num_nodes)
        stats = SearchStats()
        self.records = records
        self.stats = stats

        if heuristic is None:
            estimate = lambda index: 0.0
        else:
            estimate = lambda index: float(heuristic(graph.to_node(index)))

        sequence = itertools.count()
        source_h = estimate(source_index)
        records.relax(source_index, 0.0, NO_PREDECESSOR, source_h)
        frontier: List[FrontierEntry] = [(source_h, next(sequence), source_index, 0.0)]
        stats.entries_pushed = 1
        stats.max_frontier = 1

        logger.debug("Search from %r to %r over %d nodes (%s)", source, goal,
                     num_nodes, 'A*' if heuristic is not None else 'Dijkstra')

        while frontier:
            if on_iteration is not None and not on_iteration(stats.iterations + 1, len(frontier)):
                logger.warning("Search from %r aborted after %d iterations",
                               source, stats.iterations)
                return NotFound(source=source, goal=goal, aborted=True, stats=stats)

            _, _, current, cost_at_push = heapq.heappop(frontier)
            stats.iterations += 1

            # Stale entry: the node is settled or was since reached more cheaply
            if records.settled[current] or cost_at_push > records.best_cost[current]:
                stats.stale_discarded += 1
                continue

            records.settled[current] = True
            stats.nodes_expanded += 1

            if current == goal_index:
                nodes = [graph.to_node(i) for i in reconstruct_path(records, current)]
                cost = float(records.best_cost[current])
                logger.debug("Reached %r with cost %s: %s", goal, cost, stats.as_dict())
                return Path(nodes=nodes, cost=cost, stats=stats)

            current_cost = float(records.best_cost[current])

            for neighbor, weight in graph.neighbors(current):
                if not 0 <= neighbor < num_nodes:
                    raise MalformedGraphError(
                        f"Node {graph.to_node(current)!r} lists neighbour index "
                        f"{neighbor} outside 0..{num_nodes - 1}"
                    )
                if weight < 0:
                    raise MalformedGraphError(
                        f"Edge {graph.to_node(current)!r} -> {graph.to_node(neighbor)!r} "
                        f"has negative weight {weight}"
                    )

                if records.settled[neighbor]:
                    continue

                candidate = current_cost + weight
                # Strict comparison: the first path found at a given cost wins
                if candidate < records.best_cost[neighbor]:
                    h = estimate(neighbor)
                    records.relax(neighbor, candidate, current, h)
                    heapq.heappush(frontier, (candidate + h, next(sequence), neighbor, candidate))
                    stats.entries_pushed += 1

            stats.max_frontier = max(stats.max_frontier, len(frontier))

        if goal_index is not None:
            logger.debug("Goal %r unreachable from %r: %s", goal, source, stats.as_dict())
            return NotFound(source=source, goal=goal, stats=stats)

        logger.debug("Settled %d nodes from %r: %s", stats.nodes_expanded, source, stats.as_dict())
        return AllDistances(source=source, costs=records.best_cost, graph=graph, stats=stats)


def search(graph: SearchGraph, source: Hashable,
           goal: Optional[Hashable] = None,
           heuristic: Optional[Heuristic] = None,
           on_iteration: Optional[IterationHook] = None) -> SearchResult:
    """
    Convenience function running a single best-first search.

    See BestFirstSearch.search for arguments and results.
    """
    return BestFirstSearch(graph).search(source, goal=goal, heuristic=heuristic,
                                         on_iteration=on_iteration)
