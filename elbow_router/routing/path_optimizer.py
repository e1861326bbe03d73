"""
Path post-processing for elbow connectors.

Cleans up raw planner output:
- Drop waypoints that continue in a straight line
- Center a single jog inside the gap between the two endpoint boxes
- Render the result as an SVG path
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass

from .grid import Box, Point


@dataclass
class Gap:
    """Open interval between two separated boxes along one axis."""
    start: float
    end: float

    @property
    def midpoint(self) -> float:
        return (self.start + self.end) / 2

    def contains(self, value: float) -> bool:
        """Check if a coordinate lies strictly inside the gap."""
        return self.start < value < self.end


def simplify_path(path: List[Point]) -> List[Point]:
    """
    Remove waypoints that lie on a straight segment.

    An interior point is dropped when it shares x (or y) with both of its
    neighbours. Corners are kept.

    Args:
        path: Orthogonal path

    Returns:
        Path with only the endpoints and corners
    """
    if len(path) <= 2:
        return list(path)

    simplified = [path[0]]

    for i in range(1, len(path) - 1):
        prev_point = path[i - 1]
        point = path[i]
        next_point = path[i + 1]

        if prev_point.x == point.x == next_point.x:
            continue
        if prev_point.y == point.y == next_point.y:
            continue

        simplified.append(point)

    simplified.append(path[-1])

    return simplified


def horizontal_gap(box1: Box, box2: Box) -> Optional[Gap]:
    """Gap along x between two boxes, or None if their x-ranges meet."""
    if box1.right <= box2.x:
        return Gap(box1.right, box2.x)
    if box2.right <= box1.x:
        return Gap(box2.right, box1.x)
    return None


def vertical_gap(box1: Box, box2: Box) -> Optional[Gap]:
    """Gap along y between two boxes, or None if their y-ranges meet."""
    if box1.bottom <= box2.y:
        return Gap(box1.bottom, box2.y)
    if box2.bottom <= box1.y:
        return Gap(box2.bottom, box1.y)
    return None


def _interior_points_in_gap(path: List[Point], gap: Gap, axis: str) -> List[int]:
    """Indexes of interior points whose coordinate on axis is inside the gap."""
    return [
        i for i in range(1, len(path) - 1)
        if gap.contains(getattr(path[i], axis))
    ]


def balance_path(path: List[Point], box1: Box, box2: Box) -> List[Point]:
    """
    Center a single jog inside the gap between two boxes.

    When the boxes are separated along x and exactly two interior points
    fall inside that gap, both move to the gap's x-midpoint. Otherwise the
    same rule is tried along y. Paths with more than one jog are left as
    they are.

    Args:
        path: Simplified path
        box1: Footprint of the start endpoint
        box2: Footprint of the end endpoint

    Returns:
        New path (the input list is not modified)
    """
    balanced = list(path)

    gap = horizontal_gap(box1, box2)
    if gap is not None:
        indexes = _interior_points_in_gap(balanced, gap, 'x')
        if len(indexes) == 2:
            for i in indexes:
                balanced[i] = Point(gap.midpoint, balanced[i].y)
            return balanced

    gap = vertical_gap(box1, box2)
    if gap is not None:
        indexes = _interior_points_in_gap(balanced, gap, 'y')
        if len(indexes) == 2:
            for i in indexes:
                balanced[i] = Point(balanced[i].x, gap.midpoint)

    return balanced


def to_svg_path(points: List[Point]) -> str:
    """
    Generate an SVG path string from a list of points.

    Args:
        points: Connector waypoints

    Returns:
        SVG path data ("M x y L x y ..."), empty for an empty path
    """
    if not points:
        return ""

    path = f"M {_format(points[0].x)} {_format(points[0].y)}"
    for point in points[1:]:
        path += f" L {_format(point.x)} {_format(point.y)}"

    return path


def _format(value: float) -> str:
    """Print whole numbers without a trailing .0"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def path_to_tuples(points: List[Point]) -> List[Tuple[float, float]]:
    """Convert points to plain (x, y) tuples for serialization."""
    return [(point.x, point.y) for point in points]
