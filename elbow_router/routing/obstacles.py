"""
Obstacle derivation for endpoints without a footprint.
"""

from .grid import GRID_SIZE, Box, Point


def derive_obstacle(point: Point, other: Point, grid: int = GRID_SIZE) -> Box:
    """
    Synthesize a footprint for an endpoint that has no box.

    The footprint is a 2x2 grid square sitting flush against the point on
    the side facing away from the other endpoint. The dominant travel axis
    decides the side: horizontal when |dx| >= |dy|, vertical otherwise.

    Args:
        point: Endpoint that needs a footprint
        other: The opposite endpoint of the connector
        grid: Grid spacing

    Returns:
        Box anchored at point
    """
    size = grid * 2
    dx = other.x - point.x
    dy = other.y - point.y

    if abs(dx) >= abs(dy):
        # Extend left when the other end lies to the right, and vice versa
        x = point.x - size if dx > 0 else point.x
        return Box(x, point.y - size / 2, size, size)

    y = point.y - size if dy > 0 else point.y
    return Box(point.x - size / 2, y, size, size)
