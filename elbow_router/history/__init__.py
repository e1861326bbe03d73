"""
Undo/redo history and the typed commands recorded in it
"""

from .undo_stack import Action, History
from .commands import (
    BaseCommand,
    MoveNode,
    ResizeNode,
    CreateNode,
    DeleteNode,
    CreateEdge,
    DeleteEdge,
    register_command,
    get_command,
    list_commands,
    command_to_dict,
    command_from_dict,
)

__all__ = [
    'Action',
    'History',
    'BaseCommand',
    'MoveNode',
    'ResizeNode',
    'CreateNode',
    'DeleteNode',
    'CreateEdge',
    'DeleteEdge',
    'register_command',
    'get_command',
    'list_commands',
    'command_to_dict',
    'command_from_dict',
]
