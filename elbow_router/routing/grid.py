"""
Grid geometry for elbow connector routing.

Snaps canvas coordinates onto the routing grid and provides the
box tests the planner uses to keep paths out of obstacles.
"""

from typing import Iterable
from dataclasses import dataclass
import math


# Spacing between grid lines in canvas units
GRID_SIZE = 10


@dataclass(frozen=True)
class Point:
    """A point on the canvas."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle (x, y, width, height)."""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> Point:
        return Point(self.x + self.w / 2, self.y + self.h / 2)

    def expand(self, margin: float) -> 'Box':
        """Grow the box by margin on every side."""
        return Box(self.x - margin, self.y - margin, self.w + margin * 2, self.h + margin * 2)

    def union(self, other: 'Box') -> 'Box':
        """Smallest box containing both boxes."""
        x1 = min(self.x, other.x)
        y1 = min(self.y, other.y)
        x2 = max(self.right, other.right)
        y2 = max(self.bottom, other.bottom)
        return Box(x1, y1, x2 - x1, y2 - y1)


def snap_to_grid(value: float, grid: int = GRID_SIZE) -> float:
    """
    Snap a coordinate to the nearest grid line.

    Halves round up (towards positive infinity), so 5 snaps to 10
    and -5 snaps to 0 on a 10 unit grid.
    """
    return math.floor(value / grid + 0.5) * grid


def snap_point_to_grid(point: Point, grid: int = GRID_SIZE) -> Point:
    """Snap both coordinates of a point to the grid."""
    return Point(snap_to_grid(point.x, grid), snap_to_grid(point.y, grid))


def boxes_overlap(a: Box, b: Box) -> bool:
    """
    Check if two boxes overlap.

    Boxes that only share an edge do not overlap.
    """
    return not (
        a.right <= b.x or
        b.right <= a.x or
        a.bottom <= b.y or
        b.bottom <= a.y
    )


def box_from_points(p1: Point, p2: Point) -> Box:
    """Normalized box spanning two points."""
    x = min(p1.x, p2.x)
    y = min(p1.y, p2.y)
    return Box(x, y, abs(p1.x - p2.x), abs(p1.y - p2.y))


def point_in_box(point: Point, box: Box) -> bool:
    """Check if a point lies inside a box (edges included)."""
    return box.x <= point.x <= box.right and box.y <= point.y <= box.bottom


def point_in_any_box(point: Point, boxes: Iterable[Box]) -> bool:
    """Check if a point lies inside any of the boxes."""
    return any(point_in_box(point, box) for box in boxes)
