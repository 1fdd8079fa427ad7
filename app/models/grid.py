"""
grid.py - Grid settings and snapping.

This file is the SINGLE SOURCE OF TRUTH for:
- GRID_SIZE: Used for snapping components and laying out terminals
- COMPONENT_WIDTH / COMPONENT_HEIGHT: Bounding box of every component
- TERMINAL_HIT_RADIUS: Click tolerance for picking a terminal
"""

import math

# Grid settings
GRID_SIZE = 60

# Component bounding box (in pixels)
COMPONENT_WIDTH = GRID_SIZE * 2
COMPONENT_HEIGHT = GRID_SIZE

# Click radius for picking terminals when wiring (in pixels)
TERMINAL_HIT_RADIUS = 40


def snap(value: float, grid_size: int = GRID_SIZE) -> int:
    """
    Snap a coordinate to the nearest grid line.

    Halfway values round toward positive infinity, so snap(30) == 60 and
    snap(-30) == 0 for a 60 px grid.
    """
    return int(math.floor(value / grid_size + 0.5)) * grid_size


def snap_point(x: float, y: float, grid_size: int = GRID_SIZE) -> tuple[int, int]:
    """Snap both coordinates of a point to the grid."""
    return snap(x, grid_size), snap(y, grid_size)
