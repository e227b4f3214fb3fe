"""
Planning module for graph adapters and search algorithms.
"""

from .graph import SearchGraph, GridGraph, AdjacencyGraph, GRID_STEP_COST
from .heuristics import (
    HeuristicCalculator,
    manhattan_distance,
    euclidean_distance,
    chebyshev_distance,
    zero_heuristic,
)
from .reconstruct import reconstruct_path, path_cost
from .search import BestFirstSearch, search
from .dijkstra import DijkstraPlanner, plan_distances_dijkstra
from .astar import AStarPlanner, plan_path_astar, compare_algorithms

__all__ = [
    'SearchGraph',
    'GridGraph',
    'AdjacencyGraph',
    'GRID_STEP_COST',
    'HeuristicCalculator',
    'manhattan_distance',
    'euclidean_distance',
    'chebyshev_distance',
    'zero_heuristic',
    'reconstruct_path',
    'path_cost',
    'BestFirstSearch',
    'search',
    'DijkstraPlanner',
    'plan_distances_dijkstra',
    'AStarPlanner',
    'plan_path_astar',
    'compare_algorithms',
]
