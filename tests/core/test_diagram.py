"""
Tests for the diagram model and edge routing
"""

import pytest

from elbow_router.core.diagram import Diagram, Edge, Node, connection_points
from elbow_router.core.exceptions import SceneError
from elbow_router.routing.grid import Box, Point
from tests.conftest import assert_orthogonal


class TestConnectionPoints:
    """Test suite for connection_points"""

    def test_stacked_boxes_use_bottom_and_top(self):
        start, end = connection_points(Box(40, 40, 120, 60), Box(240, 300, 120, 60))
        assert start == Point(100, 100)
        assert end == Point(300, 300)

    def test_side_by_side_boxes_use_facing_sides(self):
        start, end = connection_points(Box(100, 0, 40, 40), Box(0, 0, 40, 40))
        assert start == Point(100, 20)
        assert end == Point(40, 20)

    def test_box_above(self):
        start, end = connection_points(Box(0, 200, 40, 40), Box(0, 0, 40, 40))
        assert start == Point(20, 200)
        assert end == Point(20, 40)


class TestDiagram:
    """Test suite for Diagram"""

    def test_from_dict_routes_edges(self, sample_diagram):
        assert sample_diagram.edges['a-b'].points == [
            Point(100, 100), Point(100, 200), Point(300, 200), Point(300, 300)
        ]

    def test_side_by_side_nodes(self):
        diagram = Diagram()
        diagram.add_node(Node(id='a', x=0, y=0, width=40, height=40))
        diagram.add_node(Node(id='b', x=100, y=0, width=40, height=40))
        edge = diagram.add_edge(Edge(id='e', from_node_id='a', to_node_id='b'))

        assert edge.points == [Point(40, 20), Point(100, 20)]

    def test_move_node_reroutes(self, sample_diagram):
        sample_diagram.move_node('b', 500, 400)
        path = sample_diagram.edges['a-b'].points

        assert path[0] == Point(160, 70)
        assert path[-1] == Point(500, 430)
        assert_orthogonal(path)

    def test_remove_node_removes_edges(self, sample_diagram):
        node, edges = sample_diagram.remove_node('b')

        assert node.id == 'b'
        assert [edge.id for edge in edges] == ['a-b']
        assert sample_diagram.edges == {}

    def test_added_node_is_a_copy(self):
        diagram = Diagram()
        node = Node(id='a')
        diagram.add_node(node)
        node.x = 999

        assert diagram.nodes['a'].x == 0

    def test_duplicate_node(self, sample_diagram):
        with pytest.raises(SceneError):
            sample_diagram.add_node(Node(id='a'))

    def test_edge_to_unknown_node(self, sample_diagram):
        with pytest.raises(SceneError):
            sample_diagram.add_edge(Edge(id='x', from_node_id='a', to_node_id='zzz'))

    def test_unknown_lookups(self, sample_diagram):
        with pytest.raises(SceneError):
            sample_diagram.get_node('zzz')
        with pytest.raises(SceneError):
            sample_diagram.get_edge('zzz')

    def test_edges_for_node(self, sample_diagram):
        assert [edge.id for edge in sample_diagram.edges_for_node('a')] == ['a-b']
        assert sample_diagram.edges_for_node('c') == []

    def test_generated_ids(self):
        node = Node()
        assert node.id.startswith('node-')

    def test_invalid_scene(self):
        with pytest.raises(SceneError):
            Diagram.from_dict({'nodes': [{'id': 'a', 'width': -5}]})
        with pytest.raises(SceneError):
            Diagram.from_dict({'nodes': [{'id': 'a', 'colour': 'red'}]})
        with pytest.raises(SceneError):
            Diagram.from_dict(['not', 'a', 'mapping'])

    def test_round_trip(self, sample_diagram):
        restored = Diagram.from_dict(sample_diagram.to_dict())

        assert restored.nodes.keys() == sample_diagram.nodes.keys()
        assert restored.edges['a-b'].points == sample_diagram.edges['a-b'].points

    def test_grid_size_from_scene(self):
        diagram = Diagram.from_dict({'grid_size': 20})
        assert diagram.grid_size == 20

    def test_grid_size_argument_overrides_scene(self):
        diagram = Diagram.from_dict({'grid_size': 20}, grid_size=5)
        assert diagram.grid_size == 5

    @pytest.mark.parametrize('grid_size', [0, -10, 'ten', True])
    def test_invalid_grid_size(self, grid_size):
        with pytest.raises(SceneError):
            Diagram.from_dict({'grid_size': grid_size})
