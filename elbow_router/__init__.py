"""
Elbow Router - orthogonal connector routing with undo/redo history
Grid-constrained elbow connectors for diagram editors
"""

from importlib.metadata import version, PackageNotFoundError

from .routing import (
    GRID_SIZE,
    Point,
    Box,
    snap_to_grid,
    snap_point_to_grid,
    boxes_overlap,
    create_elbow_connector,
)
from .history import History
from .core.diagram import Diagram

try:
    __version__ = version("elbow-router")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    "GRID_SIZE",
    "Point",
    "Box",
    "snap_to_grid",
    "snap_point_to_grid",
    "boxes_overlap",
    "create_elbow_connector",
    "History",
    "Diagram",
]
