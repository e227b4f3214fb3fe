"""
Shared pytest configuration.

Selects a non-interactive matplotlib backend before any plotting module loads.
"""

import matplotlib

matplotlib.use('Agg')
