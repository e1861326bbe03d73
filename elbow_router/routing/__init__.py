"""
Grid-based routing for elbow connectors.

This package routes orthogonal connectors between diagram nodes,
searching around the endpoint boxes and tidying up the result.
"""

from .grid import (
    GRID_SIZE,
    Point,
    Box,
    snap_to_grid,
    snap_point_to_grid,
    boxes_overlap,
    box_from_points,
    point_in_box,
    point_in_any_box,
)
from .obstacles import derive_obstacle
from .planner import find_path, search_bounds
from .path_optimizer import simplify_path, balance_path, to_svg_path
from .connector import create_elbow_connector, direct_elbow

__all__ = [
    'GRID_SIZE',
    'Point',
    'Box',
    'snap_to_grid',
    'snap_point_to_grid',
    'boxes_overlap',
    'box_from_points',
    'point_in_box',
    'point_in_any_box',
    'derive_obstacle',
    'find_path',
    'search_bounds',
    'simplify_path',
    'balance_path',
    'to_svg_path',
    'create_elbow_connector',
    'direct_elbow',
]
