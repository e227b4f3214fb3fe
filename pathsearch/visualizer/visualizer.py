"""
Visualization module for search results.

This module provides functions to plot grids, paths, distance fields and
performance metrics.
"""

import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
import numpy as np
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..models.grid_map import GridMap
from ..models.results import AllDistances, NotFound, Path

Cell = Tuple[int, int]


def _cells_of(grid: Union[GridMap, np.ndarray]) -> np.ndarray:
    return grid.cells if isinstance(grid, GridMap) else np.asarray(grid)


def _finish(fig, save_path: Optional[str], show: bool):
    """Save and/or display a finished figure."""
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        print(f"Figure saved to {save_path}")

    if show:
        plt.show()
    else:
        plt.close(fig)


def _plot_grid(ax, cells: np.ndarray):
    """Draw obstacles as dark cells with a light cell grid."""
    ax.imshow(cells, cmap=ListedColormap(['white', '#333333']),
              vmin=0, vmax=1, origin='upper')

    rows, cols = cells.shape
    ax.set_xticks(np.arange(-0.5, cols, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, rows, 1), minor=True)
    ax.grid(which='minor', color='#cccccc', linewidth=0.5)
    ax.tick_params(which='minor', length=0)


def _path_xy(path: Sequence[Cell]) -> Tuple[List[int], List[int]]:
    """Cells are (row, col); plots want x = col, y = row."""
    return [cell[1] for cell in path], [cell[0] for cell in path]


def plot_grid_path(grid: Union[GridMap, np.ndarray],
                   result: Union[Path, NotFound, None] = None,
                   title: str = "Grid Path",
                   save_path: Optional[str] = None,
                   show: bool = True):
    """
    Visualize a grid with the planned path, start and goal.

    Args:
        grid: GridMap or 2D cell array
        result: Path or NotFound from a search
        title: Plot title
        save_path: Optional path to save figure
        show: Whether to display the plot
    """
    fig, ax = plt.subplots(figsize=(8, 8))
    _plot_grid(ax, _cells_of(grid))

    if isinstance(result, Path):
        path_x, path_y = _path_xy(result.nodes)
        ax.plot(path_x, path_y, 'b-', linewidth=2,
                label=f'Path (cost {result.cost:g})', zorder=4)

    if result is not None:
        ax.plot(result.source[1], result.source[0], 'go', markersize=12,
                label='Start', zorder=6)
        if result.goal is not None:
            ax.plot(result.goal[1], result.goal[0], 'r^', markersize=12,
                    label='Goal', zorder=6)

    if isinstance(result, NotFound):
        title = f"{title} (no path)"

    ax.set_xlabel('Column', fontsize=12)
    ax.set_ylabel('Row', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')
    if result is not None:
        ax.legend(loc='best')

    _finish(fig, save_path, show)


def plot_comparison(grid: Union[GridMap, np.ndarray],
                    paths_dict: Dict[str, Union[Path, NotFound]],
                    title: str = "Algorithm Comparison",
                    save_path: Optional[str] = None,
                    show: bool = True):
    """
    Compare multiple paths on the same grid.

    Args:
        grid: GridMap or 2D cell array
        paths_dict: Dictionary mapping algorithm names to results
        title: Plot title
        save_path: Optional save path
        show: Whether to display
    """
    fig, ax = plt.subplots(figsize=(8, 8))
    _plot_grid(ax, _cells_of(grid))

    colors = ['blue', 'green', 'orange', 'purple', 'cyan']
    styles = ['-', '--', '-.', ':']

    for i, (name, result) in enumerate(paths_dict.items()):
        if result:
            path_x, path_y = _path_xy(result.nodes)
            ax.plot(path_x, path_y, color=colors[i % len(colors)],
                    linestyle=styles[i % len(styles)], linewidth=2,
                    label=f"{name} ({result.cost:g})", zorder=4)

    ax.set_xlabel('Column', fontsize=12)
    ax.set_ylabel('Row', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.legend(loc='best')

    _finish(fig, save_path, show)


def plot_distance_field(distances: AllDistances,
                        shape: Tuple[int, int],
                        title: str = "Distance From Source",
                        save_path: Optional[str] = None,
                        show: bool = True):
    """
    Heat map of single-source distances over a grid.

    Args:
        distances: Result of a Dijkstra-mode search on a GridGraph
        shape: (rows, cols) of the grid
        title: Plot title
        save_path: Optional save path
        show: Whether to display
    """
    field = np.ma.masked_invalid(np.asarray(distances.costs, dtype=float).reshape(shape))

    fig, ax = plt.subplots(figsize=(8, 8))
    image = ax.imshow(field, cmap='viridis', origin='upper')
    fig.colorbar(image, ax=ax, label='Cost')

    row, col = distances.source
    ax.plot(col, row, 'wo', markersize=10, label='Source')

    ax.set_xlabel('Column', fontsize=12)
    ax.set_ylabel('Row', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.legend(loc='best')

    _finish(fig, save_path, show)


def plot_performance_comparison(metrics_list: List[dict],
                                save_path: Optional[str] = None,
                                show: bool = True):
    """
    Create bar chart comparing algorithm performance.

    Args:
        metrics_list: List of metric dictionaries from different planners
        save_path: Optional save path
        show: Whether to display
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

    algorithms = [m['algorithm'] for m in metrics_list]
    nodes_visited = [m['nodes_visited'] for m in metrics_list]
    exploration_ratios = [m['exploration_ratio'] * 100 for m in metrics_list]

    # Nodes visited comparison
    bars1 = ax1.bar(algorithms, nodes_visited, color=['#2E86AB', '#A23B72'])
    ax1.set_ylabel('Nodes Expanded', fontsize=12)
    ax1.set_title('Search Efficiency', fontsize=14, fontweight='bold')
    ax1.grid(True, alpha=0.3, axis='y')

    for bar in bars1:
        height = bar.get_height()
        ax1.text(bar.get_x() + bar.get_width()/2., height,
                 f'{int(height)}',
                 ha='center', va='bottom', fontsize=10)

    # Exploration ratio comparison
    bars2 = ax2.bar(algorithms, exploration_ratios, color=['#2E86AB', '#A23B72'])
    ax2.set_ylabel('Exploration Ratio (%)', fontsize=12)
    ax2.set_title('Graph Coverage', fontsize=14, fontweight='bold')
    ax2.grid(True, alpha=0.3, axis='y')

    for bar in bars2:
        height = bar.get_height()
        ax2.text(bar.get_x() + bar.get_width()/2., height,
                 f'{height:.1f}%',
                 ha='center', va='bottom', fontsize=10)

    _finish(fig, save_path, show)
