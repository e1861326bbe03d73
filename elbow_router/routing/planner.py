"""
Grid search for elbow connector routing.

Finds an orthogonal path between two snapped points by expanding
4-connected grid moves in order of:
- Path length (shortest first)
- Direction changes (fewest turns breaks length ties)
- Insertion order (earliest first breaks the remaining ties)
"""

from typing import Dict, List, Optional, Sequence, Tuple
import heapq
import itertools
import logging
from dataclasses import dataclass, field

from .grid import GRID_SIZE, Box, Point, point_in_any_box, point_in_box, snap_point_to_grid

logger = logging.getLogger(__name__)


# Up, Right, Down, Left (in units of grid spacing)
DIRECTIONS = [(0, -1), (1, 0), (0, 1), (-1, 0)]


@dataclass(order=True)
class SearchNode:
    """Node in the frontier."""
    length: int = field(compare=True)  # Points on the path so far
    turns: int = field(compare=True)
    sequence: int = field(compare=True)  # Push order, keeps ties FIFO
    point: Point = field(compare=False)
    direction: Optional[int] = field(default=None, compare=False)
    parent: Optional['SearchNode'] = field(default=None, compare=False)


def reconstruct_path(node: SearchNode) -> List[Point]:
    """Reconstruct path from goal node by following parent pointers."""
    path = []
    current = node

    while current is not None:
        path.append(current.point)
        current = current.parent

    path.reverse()
    return path


def search_bounds(box1: Box, box2: Box, grid: int = GRID_SIZE) -> Box:
    """Union of both endpoint boxes padded by one grid unit."""
    return box1.union(box2).expand(grid)


def find_path(
    bounds: Box,
    start: Point,
    end: Point,
    obstacles: Sequence[Box],
    grid: int = GRID_SIZE
) -> List[Point]:
    """
    Find the shortest, straightest grid path from start to end.

    Moves leaving the bounds are never taken. Moves into an obstacle are
    only allowed when they land exactly on the destination.

    Args:
        bounds: Search area (edges included)
        start: Start point (snapped before searching)
        end: Destination point (snapped before searching)
        obstacles: Boxes the path must stay out of
        grid: Grid spacing

    Returns:
        List of points forming the path, or an empty list if no path exists
    """
    start = snap_point_to_grid(start, grid)
    end = snap_point_to_grid(end, grid)

    if start == end:
        return [start]

    counter = itertools.count()
    open_set = [SearchNode(length=1, turns=0, sequence=next(counter), point=start)]

    # Best (length, turns) accepted for each grid point
    best: Dict[Point, Tuple[int, int]] = {start: (1, 0)}
    expanded = 0

    while open_set:
        current = heapq.heappop(open_set)
        expanded += 1

        # Goal reached
        if current.point == end:
            logger.debug(
                f"Path found after expanding {expanded} nodes "
                f"(length={current.length}, turns={current.turns})"
            )
            return reconstruct_path(current)

        for direction, (dx, dy) in enumerate(DIRECTIONS):
            next_point = Point(current.point.x + dx * grid, current.point.y + dy * grid)

            if not point_in_box(next_point, bounds):
                continue
            if next_point != end and point_in_any_box(next_point, obstacles):
                continue

            turns = current.turns
            if current.direction is not None and current.direction != direction:
                turns += 1

            length = current.length + 1

            # Revisit a point only on an equal or shorter path with fewer turns
            if next_point in best:
                best_length, best_turns = best[next_point]
                if length > best_length or turns >= best_turns:
                    continue

            best[next_point] = (length, turns)
            heapq.heappush(open_set, SearchNode(
                length=length,
                turns=turns,
                sequence=next(counter),
                point=next_point,
                direction=direction,
                parent=current
            ))

    logger.debug(f"No path from {start} to {end} after expanding {expanded} nodes")
    return []
