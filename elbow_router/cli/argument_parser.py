"""
Command-line argument parser configuration with subcommands
"""

import argparse


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser with subcommands (route, connect)

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='elbow-router',
        description='Route orthogonal elbow connectors between diagram nodes',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Route every edge of a scene
  elbow-router route scene.yaml                     # Print points per edge
  elbow-router route scene.yaml --format svg        # Print SVG path data
  elbow-router route scene.yaml --config router.yaml

  # Route between two points
  elbow-router connect 20 20 40 30
        """
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='Set logging level (default: from config, INFO). Use DEBUG to see search statistics.'
    )

    parser.add_argument(
        '--config',
        type=str,
        help='Path to YAML router configuration file'
    )

    parser.add_argument(
        '--format',
        choices=['points', 'svg', 'json'],
        default=None,
        help='Output format (default: from config, points)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        required=True,
        help='Command to execute'
    )

    # ========================================================================
    # ROUTE SUBCOMMAND
    # ========================================================================
    route_parser = subparsers.add_parser(
        'route',
        help='Route every edge in a scene file',
        description='Load nodes and edges from a YAML scene and route all edges'
    )

    route_parser.add_argument(
        'scene_file',
        help='Path to YAML scene file'
    )

    # ========================================================================
    # CONNECT SUBCOMMAND
    # ========================================================================
    connect_parser = subparsers.add_parser(
        'connect',
        help='Route a connector between two points',
        description='Route a boxless elbow connector from (x1, y1) to (x2, y2)'
    )

    for name in ('x1', 'y1', 'x2', 'y2'):
        connect_parser.add_argument(name, type=float)

    return parser
