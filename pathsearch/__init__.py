"""
pathsearch

Shortest and least-cost paths over weighted graphs and occupancy grids
with Dijkstra and A* best-first search.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Import main classes for easy access
from .models.errors import SearchError, InvalidNodeError, MalformedGraphError
from .models.results import INFINITY, AllDistances, Path, NotFound, SearchStats
from .models.grid_map import GridMap
from .models.edge_list import EdgeList
from .planning.graph import SearchGraph, GridGraph, AdjacencyGraph
from .planning.search import BestFirstSearch, search
from .planning.dijkstra import DijkstraPlanner, plan_distances_dijkstra
from .planning.astar import AStarPlanner, plan_path_astar

__all__ = [
    'SearchError',
    'InvalidNodeError',
    'MalformedGraphError',
    'INFINITY',
    'AllDistances',
    'Path',
    'NotFound',
    'SearchStats',
    'GridMap',
    'EdgeList',
    'SearchGraph',
    'GridGraph',
    'AdjacencyGraph',
    'BestFirstSearch',
    'search',
    'DijkstraPlanner',
    'AStarPlanner',
    'plan_distances_dijkstra',
    'plan_path_astar',
]
