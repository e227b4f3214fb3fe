"""
Models module for search records, results, errors and input collaborators.
"""

from .errors import SearchError, InvalidNodeError, MalformedGraphError
from .records import SearchRecord, SearchRecords
from .results import INFINITY, SearchStats, AllDistances, Path, NotFound
from .grid_map import GridMap, WALKABLE, OBSTACLE
from .edge_list import EdgeList

__all__ = [
    'SearchError',
    'InvalidNodeError',
    'MalformedGraphError',
    'SearchRecord',
    'SearchRecords',
    'INFINITY',
    'SearchStats',
    'AllDistances',
    'Path',
    'NotFound',
    'GridMap',
    'WALKABLE',
    'OBSTACLE',
    'EdgeList',
]
