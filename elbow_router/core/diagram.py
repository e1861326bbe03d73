"""
In-memory diagram of nodes and edges whose connectors are kept routed
"""

from typing import Any, Dict, List, Optional, Tuple
import logging
import uuid
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..routing.grid import GRID_SIZE, Box, Point
from ..routing.connector import create_elbow_connector
from .exceptions import SceneError

logger = logging.getLogger(__name__)


def generate_id(prefix: str = '') -> str:
    """Short random identifier with an optional prefix"""
    return f"{prefix}{uuid.uuid4().hex[:8]}"


def connection_points(from_box: Box, to_box: Box) -> Tuple[Point, Point]:
    """
    Pick where a connector leaves and enters two boxes

    Uses the midpoints of the sides that face each other along the axis
    with the larger distance between the box centers.
    """
    c1 = from_box.center
    c2 = to_box.center

    if abs(c2.x - c1.x) >= abs(c2.y - c1.y):
        if c2.x >= c1.x:
            return Point(from_box.right, c1.y), Point(to_box.x, c2.y)
        return Point(from_box.x, c1.y), Point(to_box.right, c2.y)

    if c2.y >= c1.y:
        return Point(c1.x, from_box.bottom), Point(c2.x, to_box.y)
    return Point(c1.x, from_box.y), Point(c2.x, to_box.bottom)


class Node(BaseModel):
    """A box on the canvas that edges connect to"""
    model_config = ConfigDict(extra='forbid')

    id: str = Field(default_factory=lambda: generate_id('node-'), min_length=1)
    type: str = 'default'
    x: float = 0
    y: float = 0
    width: float = Field(100, ge=0)
    height: float = Field(80, ge=0)
    data: Dict[str, Any] = Field(default_factory=dict)

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


class Edge(BaseModel):
    """A connector between two nodes"""
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    id: str = Field(default_factory=lambda: generate_id('edge-'), min_length=1)
    type: str = 'default'
    from_node_id: str = Field(..., alias='from')
    to_node_id: str = Field(..., alias='to')
    points: List[Point] = Field(default_factory=list, description="Routed connector, recomputed on change")


class Diagram:
    """
    Node/edge store for the editor.

    Nodes and edges are stored as private copies, so objects handed in by
    callers (or held by undo commands) never alias live state. Every change
    to a node's geometry re-routes the edges attached to it.
    """

    def __init__(self, grid_size: int = GRID_SIZE):
        self.grid_size = grid_size
        self.nodes: Dict[str, Node] = {}
        self.edges: Dict[str, Edge] = {}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_node(self, node_id: str) -> Node:
        """Return a node, raising SceneError if it does not exist"""
        try:
            return self.nodes[node_id]
        except KeyError:
            raise SceneError(f"Unknown node '{node_id}'") from None

    def get_edge(self, edge_id: str) -> Edge:
        """Return an edge, raising SceneError if it does not exist"""
        try:
            return self.edges[edge_id]
        except KeyError:
            raise SceneError(f"Unknown edge '{edge_id}'") from None

    def edges_for_node(self, node_id: str) -> List[Edge]:
        """All edges that start or end at the node"""
        return [
            edge for edge in self.edges.values()
            if edge.from_node_id == node_id or edge.to_node_id == node_id
        ]

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise SceneError(f"Node '{node.id}' already exists")

        stored = node.model_copy(deep=True)
        self.nodes[stored.id] = stored
        return stored

    def remove_node(self, node_id: str) -> Tuple[Node, List[Edge]]:
        """
        Remove a node together with its edges

        Returns:
            The removed node and the edges that were attached to it
        """
        node = self.get_node(node_id)
        removed_edges = [self.remove_edge(edge.id) for edge in self.edges_for_node(node_id)]
        del self.nodes[node_id]
        return node, removed_edges

    def move_node(self, node_id: str, x: float, y: float) -> None:
        node = self.get_node(node_id)
        node.x = x
        node.y = y
        self.reroute_edges_for_node(node_id)

    def resize_node(self, node_id: str, width: float, height: float) -> None:
        node = self.get_node(node_id)
        node.width = width
        node.height = height
        self.reroute_edges_for_node(node_id)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, edge: Edge) -> Edge:
        if edge.id in self.edges:
            raise SceneError(f"Edge '{edge.id}' already exists")
        self.get_node(edge.from_node_id)
        self.get_node(edge.to_node_id)

        stored = edge.model_copy(deep=True)
        self.edges[stored.id] = stored
        self.route_edge(stored.id)
        return stored

    def remove_edge(self, edge_id: str) -> Edge:
        edge = self.get_edge(edge_id)
        del self.edges[edge_id]
        return edge

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def route_edge(self, edge_id: str) -> List[Point]:
        """Route an edge between the facing sides of its two node boxes"""
        edge = self.get_edge(edge_id)
        from_node = self.get_node(edge.from_node_id)
        to_node = self.get_node(edge.to_node_id)

        start, end = connection_points(from_node.box, to_node.box)
        edge.points = create_elbow_connector(
            start,
            end,
            from_node.box,
            to_node.box,
            grid=self.grid_size
        )
        logger.debug(f"Routed {edge.id} with {len(edge.points)} points")
        return edge.points

    def reroute_edges_for_node(self, node_id: str) -> None:
        for edge in self.edges_for_node(node_id):
            self.route_edge(edge.id)

    def route_all(self) -> Dict[str, List[Point]]:
        """Route every edge, returning paths by edge id"""
        return {edge_id: self.route_edge(edge_id) for edge_id in list(self.edges)}

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, scene: Optional[Dict[str, Any]], grid_size: Optional[int] = None) -> 'Diagram':
        """
        Build a diagram from a scene mapping

        Expected layout:
            grid_size: int (optional, overridden by the grid_size argument)
            nodes: [{id, x, y, width, height, type, data}, ...]
            edges: [{id, from, to, type}, ...]

        Raises:
            SceneError: If the scene is malformed or references unknown nodes
        """
        scene = scene or {}
        if not isinstance(scene, dict):
            raise SceneError(f"Scene root must be a mapping, got {type(scene).__name__}")

        if grid_size is None:
            grid_size = scene.get('grid_size', GRID_SIZE)
        if not isinstance(grid_size, int) or isinstance(grid_size, bool) or grid_size <= 0:
            raise SceneError(f"grid_size must be a positive integer, got {grid_size!r}")

        diagram = cls(grid_size=grid_size)

        try:
            for entry in scene.get('nodes') or []:
                diagram.add_node(Node(**entry))
            for entry in scene.get('edges') or []:
                diagram.add_edge(Edge(**entry))
        except (ValidationError, TypeError) as e:
            raise SceneError(f"Scene validation failed: {e}") from e

        logger.info(f"Loaded scene with {len(diagram.nodes)} nodes and {len(diagram.edges)} edges")
        return diagram

    def to_dict(self) -> Dict[str, Any]:
        """Serializable snapshot of nodes and edges"""
        return {
            'grid_size': self.grid_size,
            'nodes': [node.model_dump() for node in self.nodes.values()],
            'edges': [edge.model_dump(by_alias=True) for edge in self.edges.values()],
        }
