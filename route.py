#!/usr/bin/env python
"""
Simple CLI for routing elbow connectors
Usage: python route.py route scene.yaml | python route.py connect x1 y1 x2 y2
"""

import sys
import logging
from typing import List, Optional

from elbow_router import Point, create_elbow_connector
from elbow_router.cli import setup_argument_parser, format_routes, print_separator
from elbow_router.core.config import RouterConfig, load_config, load_yaml
from elbow_router.core.diagram import Diagram
from elbow_router.core.exceptions import ElbowRouterError


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure console logging

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Only add handler if none exists
    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, log_level.upper()))
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)


def load_scene(scene_file: str, config: RouterConfig) -> Diagram:
    """
    Build a diagram from a scene file

    A grid_size set in the config file wins over the scene's own grid_size,
    which in turn wins over the default.
    """
    scene = load_yaml(scene_file)
    grid_size = config.grid_size if 'grid_size' in config.model_fields_set else None
    return Diagram.from_dict(scene, grid_size=grid_size)


def route_scene(scene_file: str, config: RouterConfig, output_format: str) -> str:
    """
    Route every edge of a scene file

    Args:
        scene_file: Path to YAML scene
        config: Router configuration
        output_format: Output format name

    Returns:
        Formatted routes
    """
    diagram = load_scene(scene_file, config)
    routes = diagram.route_all()
    return format_routes(routes, output_format, config.output.indent)


def connect_points(x1: float, y1: float, x2: float, y2: float, config: RouterConfig, output_format: str) -> str:
    """Route a boxless connector between two points"""
    points = create_elbow_connector(Point(x1, y1), Point(x2, y2), grid=config.grid_size)
    return format_routes({'connector': points}, output_format, config.output.indent)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ElbowRouterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or config.logging.level)
    logger = logging.getLogger(__name__)
    output_format = args.format or config.output.format

    try:
        if args.command == 'route':
            logger.info(f"Routing scene: {args.scene_file}")
            output = route_scene(args.scene_file, config, output_format)
        else:
            output = connect_points(args.x1, args.y1, args.x2, args.y2, config, output_format)
    except ElbowRouterError as e:
        logger.error(str(e))
        return 1

    if output_format != 'json':
        print_separator()
    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
