"""
Heuristic functions for informed search.

All distance heuristics here are admissible and consistent on a 4-connected
grid when scaled by the grid step cost: Euclidean and Chebyshev distance
never exceed Manhattan distance, which is the exact obstacle-free cost.
"""

import math
from typing import Callable, Hashable, Tuple, Union


Point = Tuple[int, int]
Heuristic = Callable[[Hashable], float]


def manhattan_distance(p1: Point, p2: Point) -> float:
    """
    Calculate Manhattan (L1) distance between two cells.

    Args:
        p1: First cell (row, col)
        p2: Second cell (row, col)

    Returns:
        Sum of absolute row and column differences
    """
    return float(abs(p1[0] - p2[0]) + abs(p1[1] - p2[1]))


def euclidean_distance(p1: Point, p2: Point) -> float:
    """Straight-line distance between two cells."""
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def chebyshev_distance(p1: Point, p2: Point) -> float:
    """Largest of the row and column differences."""
    return float(max(abs(p1[0] - p2[0]), abs(p1[1] - p2[1])))


def zero_heuristic(node: Hashable) -> float:
    """Uninformed estimate; turns A* into Dijkstra."""
    return 0.0


DISTANCE_FUNCTIONS = {
    'manhattan': manhattan_distance,
    'euclidean': euclidean_distance,
    'chebyshev': chebyshev_distance,
}


class HeuristicCalculator:
    """
    Configurable heuristic for A*.

    Attributes:
        heuristic_type: 'manhattan', 'euclidean', 'chebyshev', 'zero', or a
            callable ``f(current, goal) -> float``
        weight: Multiplier on the estimate; values above 1 trade optimality
            for fewer expansions
        step_cost: Cost of one grid move, keeps distance estimates in cost units
    """

    def __init__(self, heuristic_type: Union[str, Callable] = 'manhattan',
                 weight: float = 1.0,
                 step_cost: float = 1.0):
        """
        Initialize heuristic calculator.

        Raises:
            ValueError: For an unknown heuristic name or a negative weight
        """
        if weight < 0:
            raise ValueError(f"Heuristic weight must be non-negative, got {weight}")
        if (not callable(heuristic_type) and heuristic_type != 'zero'
                and heuristic_type not in DISTANCE_FUNCTIONS):
            raise ValueError(f"Unknown heuristic type: {heuristic_type}")

        self.heuristic_type = heuristic_type
        self.weight = weight
        self.step_cost = step_cost

    @property
    def name(self) -> str:
        if callable(self.heuristic_type):
            return getattr(self.heuristic_type, '__name__', 'custom')
        return self.heuristic_type

    def calculate_heuristic(self, current: Hashable, goal: Hashable) -> float:
        """
        Calculate heuristic estimate to goal.

        Args:
            current: Current node
            goal: Goal node

        Returns:
            Heuristic cost estimate
        """
        if callable(self.heuristic_type):
            estimate = self.heuristic_type(current, goal)
        elif self.heuristic_type == 'zero':
            return 0.0
        else:
            estimate = DISTANCE_FUNCTIONS[self.heuristic_type](current, goal) * self.step_cost
        return self.weight * estimate

    def for_goal(self, goal: Hashable) -> Heuristic:
        """Bind ``goal`` and return a single-argument heuristic for the engine."""
        if self.heuristic_type == 'zero':
            return zero_heuristic
        return lambda node: self.calculate_heuristic(node, goal)

    def __repr__(self) -> str:
        return f"HeuristicCalculator({self.name}, weight={self.weight})"
