"""
Typed, serializable editor commands for the undo history

Each command carries everything needed to apply and reverse itself, so
history entries never depend on live diagram state.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Optional, Type
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.diagram import Diagram, Edge, Node
from ..core.exceptions import CommandError


# Global registry mapping command kinds to command classes
COMMAND_REGISTRY: Dict[str, Type['BaseCommand']] = {}


def register_command(kind: str):
    """Decorator to register a command class under its kind

    Usage:
        @register_command("move_node")
        class MoveNode(BaseCommand):
            ...

    Raises:
        TypeError: If decorated class doesn't inherit from BaseCommand
        ValueError: If kind is already registered
    """
    def decorator(cls: Type['BaseCommand']):
        if not issubclass(cls, BaseCommand):
            raise TypeError(
                f"{cls.__name__} must inherit from BaseCommand to be registered"
            )

        if kind in COMMAND_REGISTRY:
            raise ValueError(
                f"Command '{kind}' is already registered by {COMMAND_REGISTRY[kind].__name__}"
            )

        COMMAND_REGISTRY[kind] = cls
        return cls

    return decorator


class BaseCommand(BaseModel, ABC):
    """Abstract base class for undoable diagram commands

    Subclasses declare a `kind` literal and implement apply() and reverse().
    """
    model_config = ConfigDict(frozen=True)

    kind: str

    @abstractmethod
    def apply(self, diagram: Diagram) -> None:
        """Perform the change"""
        pass

    @abstractmethod
    def reverse(self, diagram: Diagram) -> None:
        """Undo the change made by apply()"""
        pass


@register_command("move_node")
class MoveNode(BaseCommand):
    kind: Literal['move_node'] = 'move_node'
    node_id: str
    x: float
    y: float
    previous_x: float
    previous_y: float

    @classmethod
    def capture(cls, diagram: Diagram, node_id: str, x: float, y: float) -> 'MoveNode':
        """Build a move that remembers the node's current position"""
        node = diagram.get_node(node_id)
        return cls(node_id=node_id, x=x, y=y, previous_x=node.x, previous_y=node.y)

    def apply(self, diagram: Diagram) -> None:
        diagram.move_node(self.node_id, self.x, self.y)

    def reverse(self, diagram: Diagram) -> None:
        diagram.move_node(self.node_id, self.previous_x, self.previous_y)


@register_command("resize_node")
class ResizeNode(BaseCommand):
    kind: Literal['resize_node'] = 'resize_node'
    node_id: str
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    previous_width: float
    previous_height: float

    @classmethod
    def capture(cls, diagram: Diagram, node_id: str, width: float, height: float) -> 'ResizeNode':
        """Build a resize that remembers the node's current size"""
        node = diagram.get_node(node_id)
        return cls(
            node_id=node_id,
            width=width,
            height=height,
            previous_width=node.width,
            previous_height=node.height
        )

    def apply(self, diagram: Diagram) -> None:
        diagram.resize_node(self.node_id, self.width, self.height)

    def reverse(self, diagram: Diagram) -> None:
        diagram.resize_node(self.node_id, self.previous_width, self.previous_height)


@register_command("create_node")
class CreateNode(BaseCommand):
    kind: Literal['create_node'] = 'create_node'
    node: Node

    def apply(self, diagram: Diagram) -> None:
        diagram.add_node(self.node)

    def reverse(self, diagram: Diagram) -> None:
        diagram.remove_node(self.node.id)


@register_command("delete_node")
class DeleteNode(BaseCommand):
    """Delete a node; reversing restores the node and its edges"""
    kind: Literal['delete_node'] = 'delete_node'
    node: Node
    edges: List[Edge] = Field(default_factory=list)

    @classmethod
    def capture(cls, diagram: Diagram, node_id: str) -> 'DeleteNode':
        node = diagram.get_node(node_id)
        return cls(
            node=node.model_copy(deep=True),
            edges=[edge.model_copy(deep=True) for edge in diagram.edges_for_node(node_id)]
        )

    def apply(self, diagram: Diagram) -> None:
        diagram.remove_node(self.node.id)

    def reverse(self, diagram: Diagram) -> None:
        diagram.add_node(self.node)
        for edge in self.edges:
            diagram.add_edge(edge)


@register_command("create_edge")
class CreateEdge(BaseCommand):
    kind: Literal['create_edge'] = 'create_edge'
    edge: Edge

    def apply(self, diagram: Diagram) -> None:
        diagram.add_edge(self.edge)

    def reverse(self, diagram: Diagram) -> None:
        diagram.remove_edge(self.edge.id)


@register_command("delete_edge")
class DeleteEdge(BaseCommand):
    kind: Literal['delete_edge'] = 'delete_edge'
    edge: Edge

    @classmethod
    def capture(cls, diagram: Diagram, edge_id: str) -> 'DeleteEdge':
        return cls(edge=diagram.get_edge(edge_id).model_copy(deep=True))

    def apply(self, diagram: Diagram) -> None:
        diagram.remove_edge(self.edge.id)

    def reverse(self, diagram: Diagram) -> None:
        diagram.add_edge(self.edge)


def get_command(kind: str) -> Optional[Type[BaseCommand]]:
    """Retrieve a command class by kind from the registry"""
    return COMMAND_REGISTRY.get(kind)


def list_commands() -> List[str]:
    """Sorted list of registered command kinds"""
    return sorted(COMMAND_REGISTRY.keys())


def command_to_dict(command: BaseCommand) -> Dict[str, Any]:
    """Serialize a command (including its kind) to plain data"""
    return command.model_dump(mode='json', by_alias=True)


def command_from_dict(data: Dict[str, Any]) -> BaseCommand:
    """
    Rebuild a command from command_to_dict() output

    Raises:
        CommandError: If the kind is unknown or the payload is invalid
    """
    kind = data.get('kind') if isinstance(data, dict) else None
    command_class = get_command(kind) if kind else None
    if command_class is None:
        raise CommandError(f"Unknown command kind: {kind!r}")

    try:
        return command_class.model_validate(data)
    except ValidationError as e:
        raise CommandError(f"Invalid '{kind}' command: {e}") from e
