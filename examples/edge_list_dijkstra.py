"""
Single-source distances on a weighted graph read from stdin.

Input format:
    n m
    u v w      (m lines)
    s

Usage:
    python edge_list_dijkstra.py < graph.txt
"""

import sys
sys.path.append('..')

from pathsearch.models.edge_list import EdgeList
from pathsearch.planning.dijkstra import DijkstraPlanner
from pathsearch.visualizer.text import format_distances


def main():
    try:
        edge_list = EdgeList.from_text(sys.stdin.read())
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    graph = edge_list.to_graph(directed=False)
    source = edge_list.source if edge_list.source is not None else 0

    planner = DijkstraPlanner(graph)
    distances = planner.find_distances(source)

    print(format_distances(distances))

    metrics = planner.get_performance_metrics()
    print(f"\nNodes expanded: {metrics['nodes_visited']} / {metrics['total_nodes']}")
    print(f"Stale entries discarded: {metrics['stale_discarded']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
