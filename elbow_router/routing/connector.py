"""
Elbow connector routing between two endpoints.

Chooses between a direct two-bend elbow and a grid search around the
endpoint boxes, and always returns a usable orthogonal path.
"""

from typing import List, Optional
import logging

from .grid import GRID_SIZE, Box, Point
from .obstacles import derive_obstacle
from .planner import find_path, search_bounds
from .path_optimizer import balance_path, simplify_path

logger = logging.getLogger(__name__)


def direct_elbow(p1: Point, p2: Point) -> List[Point]:
    """
    Two-bend elbow between two points, without any search.

    The bends sit at the midpoint of the axis with the larger delta
    (horizontal when the deltas are equal).
    """
    dx = abs(p1.x - p2.x)
    dy = abs(p1.y - p2.y)

    if dx >= dy:
        mid_x = (p1.x + p2.x) / 2
        return [p1, Point(mid_x, p1.y), Point(mid_x, p2.y), p2]

    mid_y = (p1.y + p2.y) / 2
    return [p1, Point(p1.x, mid_y), Point(p2.x, mid_y), p2]


def create_elbow_connector(
    p1: Point,
    p2: Point,
    box1: Optional[Box] = None,
    box2: Optional[Box] = None,
    grid: int = GRID_SIZE
) -> List[Point]:
    """
    Route an orthogonal connector from p1 to p2.

    Args:
        p1: Start point
        p2: End point
        box1: Footprint of the start endpoint (optional)
        box2: Footprint of the end endpoint (optional)
        grid: Grid spacing

    Returns:
        Orthogonal list of points from p1 to p2
    """
    if box1 is None and box2 is None:
        return direct_elbow(p1, p2)

    # A missing footprint is synthesized and routed like a real box
    if box1 is None:
        box1 = derive_obstacle(p1, p2, grid)
    elif box2 is None:
        box2 = derive_obstacle(p2, p1, grid)

    bounds = search_bounds(box1, box2, grid)
    path = find_path(bounds, p1, p2, [box1, box2], grid)

    if not path:
        logger.debug(f"No grid route from {p1} to {p2}, using direct elbow")
        return direct_elbow(p1, p2)

    path = simplify_path(path)
    return balance_path(path, box1, box2)
