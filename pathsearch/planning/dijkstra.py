"""
Dijkstra's algorithm implementation

@Description: This module runs the best-first engine without a heuristic,
either to settle every reachable node (single-source distances) or to stop
at a goal and return its path.
"""

from typing import Hashable, Iterable, Tuple, Union

from .graph import SearchGraph, AdjacencyGraph
from .search import BestFirstSearch
from ..models.results import AllDistances, NotFound, Path


class DijkstraPlanner:
    """
    Dijkstra's algorithm planner.

    Guarantees the minimum-cost result on graphs with non-negative weights
    by settling nodes strictly in order of cost from the source.

    Attributes:
        graph: Graph to search
        engine: Best-first engine bound to the graph
        visited_nodes: Number of nodes expanded in the last search
    """

    def __init__(self, graph: SearchGraph):
        """
        Initialize Dijkstra planner.

        Args:
            graph: Graph to search
        """
        self.graph = graph
        self.engine = BestFirstSearch(graph)
        self.visited_nodes = 0

    def find_distances(self, source: Hashable) -> Union[AllDistances, NotFound]:
        """
        Compute the best cost from ``source`` to every node.

        Args:
            source: Start node

        Returns:
            AllDistances with INFINITY for unreachable nodes
        """
        result = self.engine.search(source)
        self.visited_nodes = self.engine.stats.nodes_expanded
        return result

    def find_path(self, source: Hashable, goal: Hashable) -> Union[Path, NotFound]:
        """
        Find the minimum-cost path from source to goal.

        Returns:
            Path from source to goal, or NotFound if the goal is unreachable
        """
        result = self.engine.search(source, goal=goal)
        self.visited_nodes = self.engine.stats.nodes_expanded
        return result

    def get_performance_metrics(self) -> dict:
        """
        Get performance metrics from the last search.

        Returns:
            Dictionary with search statistics
        """
        total = self.graph.num_nodes
        metrics = {
            'algorithm': 'Dijkstra',
            'nodes_visited': self.visited_nodes,
            'total_nodes': total,
            'exploration_ratio': self.visited_nodes / total if total else 0,
        }
        metrics.update(self.engine.stats.as_dict())
        return metrics


def plan_distances_dijkstra(num_nodes: int,
                            edges: Iterable[Tuple[int, int, float]],
                            source: int,
                            directed: bool = False) -> Tuple[AllDistances, dict]:
    """
    Convenience function computing single-source distances on an edge list.

    Args:
        num_nodes: Number of vertices
        edges: Iterable of (u, v, weight)
        source: Source vertex
        directed: If False, every edge is traversable both ways

    Returns:
        Tuple of (distances, metrics)
    """
    graph = AdjacencyGraph(num_nodes, edges, directed=directed)

    planner = DijkstraPlanner(graph)
    distances = planner.find_distances(source)
    metrics = planner.get_performance_metrics()

    return distances, metrics


if __name__ == "__main__":
    # Example usage
    from ..visualizer.text import format_distances

    edges = [
        (0, 1, 4),
        (0, 2, 2),
        (1, 2, 3),
        (1, 3, 2),
        (2, 3, 4),
        (3, 4, 1),
    ]

    print("Computing distances with Dijkstra's algorithm...")
    distances, metrics = plan_distances_dijkstra(5, edges, source=0)

    print()
    print(format_distances(distances))
    print("\nPerformance metrics:")
    for key, value in metrics.items():
        print(f"  {key}: {value}")
