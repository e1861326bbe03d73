"""
CLI utilities for route.py
"""

from .argument_parser import setup_argument_parser
from .output import format_routes, format_point, print_separator

__all__ = [
    'setup_argument_parser',
    'format_routes',
    'format_point',
    'print_separator',
]
