"""
Grid pathfinding example demonstrating A* on an occupancy map.

This script shows how to:
1. Load a map file (0 = walkable, 1 = obstacle)
2. Validate start and goal cells
3. Plan a path with A*
4. Compare against Dijkstra
5. Print and plot the result

Usage:
    python grid_astar.py [map.txt] [--plot]
"""

import sys
from pathlib import Path as FilePath
sys.path.append('..')

from pathsearch.models.grid_map import GridMap
from pathsearch.planning.astar import AStarPlanner, plan_path_astar, compare_algorithms
from pathsearch.planning.dijkstra import DijkstraPlanner
from pathsearch.visualizer.text import render_grid, format_path


def main():
    """Run the grid pathfinding demonstration."""
    args = [arg for arg in sys.argv[1:] if not arg.startswith('--')]
    map_path = args[0] if args else FilePath(__file__).with_name('map.txt')

    print("=" * 70)
    print("PATHSEARCH - Grid A* Demonstration")
    print("=" * 70)

    # ========================================================================
    # Step 1: Load map
    # ========================================================================
    print(f"\n[1] Loading map from {map_path}...")

    try:
        grid_map = GridMap.load(map_path)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1

    print(f"    {grid_map}")

    # ========================================================================
    # Step 2: Validate endpoints
    # ========================================================================
    start, goal = grid_map.default_endpoints()
    print(f"\n[2] Start: {start}  Goal: {goal}")

    try:
        grid_map.validate_endpoints(start, goal)
    except ValueError as exc:
        print(f"Error: {exc}. Exiting.")
        return 1

    # ========================================================================
    # Step 3: Plan with A*
    # ========================================================================
    print("\n[3] Planning path with A* (Manhattan heuristic)...")

    result, metrics = plan_path_astar(grid_map, start, goal)

    print(format_path(result))
    print()
    print(render_grid(grid_map, result))

    # ========================================================================
    # Step 4: Compare with Dijkstra
    # ========================================================================
    print("\n[4] Comparing with Dijkstra...")

    graph = grid_map.to_graph()
    comparison = compare_algorithms(graph, start, goal)

    print(f"    Dijkstra nodes expanded: {comparison['dijkstra']['nodes_visited']}")
    print(f"    A* nodes expanded:       {comparison['astar']['nodes_visited']}")
    print(f"    Speedup factor:          {comparison['speedup_factor']:.2f}x")
    print(f"    Cost difference:         {comparison['cost_difference']:.4f}")

    # ========================================================================
    # Step 5: Plot
    # ========================================================================
    if '--plot' in sys.argv:
        from pathsearch.visualizer.visualizer import (
            plot_grid_path, plot_comparison, plot_performance_comparison
        )

        dijkstra = DijkstraPlanner(graph)
        astar = AStarPlanner(graph)
        results = {
            'Dijkstra': dijkstra.find_path(start, goal),
            'A*': astar.find_path(start, goal),
        }

        print("\n[5] Plotting...")
        plot_grid_path(grid_map, result, title="A* Path")
        plot_comparison(grid_map, results)
        plot_performance_comparison([dijkstra.get_performance_metrics(),
                                     astar.get_performance_metrics()])

    return 0


if __name__ == "__main__":
    sys.exit(main())
