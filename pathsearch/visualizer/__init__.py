"""
Visualization module for search results.
"""

from .text import render_grid, format_distances, format_path
from .visualizer import (
    plot_grid_path,
    plot_comparison,
    plot_distance_field,
    plot_performance_comparison
)

__all__ = [
    'render_grid',
    'format_distances',
    'format_path',
    'plot_grid_path',
    'plot_comparison',
    'plot_distance_field',
    'plot_performance_comparison',
]
