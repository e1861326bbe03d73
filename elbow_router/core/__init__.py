"""
Diagram model, configuration and exceptions
"""

from .config import RouterConfig, load_config, config_from_dict
from .diagram import Diagram, Node, Edge
from .exceptions import ElbowRouterError, ConfigError, SceneError, CommandError

__all__ = [
    'RouterConfig',
    'load_config',
    'config_from_dict',
    'Diagram',
    'Node',
    'Edge',
    'ElbowRouterError',
    'ConfigError',
    'SceneError',
    'CommandError',
]
