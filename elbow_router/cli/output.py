"""
Output formatting for routed connectors
"""

from typing import Dict, List, Optional
import json

from ..routing.grid import Point
from ..routing.path_optimizer import path_to_tuples, to_svg_path


def format_point(point: Point) -> str:
    """Format a point as "(x, y)" without trailing .0 on whole numbers"""
    return "({}, {})".format(*(_number(v) for v in point))


def _number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_routes(routes: Dict[str, List[Point]], output_format: str, indent: Optional[int] = 2) -> str:
    """
    Render routed paths keyed by edge id

    Args:
        routes: Mapping of edge id to connector points
        output_format: 'points', 'svg' or 'json'
        indent: JSON indentation

    Returns:
        Text ready to print
    """
    if output_format == 'json':
        return json.dumps(
            {edge_id: path_to_tuples(points) for edge_id, points in routes.items()},
            indent=indent
        )

    lines = []
    for edge_id, points in routes.items():
        if output_format == 'svg':
            lines.append(f"{edge_id}: {to_svg_path(points)}")
        else:
            lines.append(f"{edge_id}: " + " -> ".join(format_point(p) for p in points))
    return "\n".join(lines)


def print_separator(width: int = 70, char: str = '=') -> None:
    """Print a separator line"""
    print(char * width)
