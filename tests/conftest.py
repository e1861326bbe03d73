"""
Shared pytest fixtures and utilities for testing
"""

import pytest

from elbow_router import Box, Diagram, History, Point


@pytest.fixture
def separated_boxes():
    """Two boxes separated along both axes, with anchors on their facing sides"""
    return {
        'p1': Point(100, 100),
        'p2': Point(300, 300),
        'box1': Box(40, 40, 120, 60),
        'box2': Box(240, 300, 120, 60),
    }


@pytest.fixture
def history():
    """Empty undo/redo history"""
    return History()


@pytest.fixture
def sample_diagram():
    """Diagram with two stacked nodes joined by one edge"""
    return Diagram.from_dict({
        'nodes': [
            {'id': 'a', 'x': 40, 'y': 40, 'width': 120, 'height': 60},
            {'id': 'b', 'x': 240, 'y': 300, 'width': 120, 'height': 60},
            {'id': 'c', 'x': 500, 'y': 40, 'width': 80, 'height': 60},
        ],
        'edges': [
            {'id': 'a-b', 'from': 'a', 'to': 'b'},
        ],
    })


# Helper functions for tests

def assert_orthogonal(path, step=None):
    """
    Assert that consecutive points differ on exactly one axis

    Args:
        path: List of points
        step: Exact distance expected between consecutive points (optional)
    """
    for a, b in zip(path, path[1:]):
        dx = abs(a.x - b.x)
        dy = abs(a.y - b.y)
        assert (dx == 0) != (dy == 0), f"Segment {a} -> {b} is not orthogonal"
        if step is not None:
            assert dx + dy == step, f"Segment {a} -> {b} is not one grid step"


def count_turns(path):
    """Number of direction changes along a path"""
    turns = 0
    for a, b, c in zip(path, path[1:], path[2:]):
        first = (b.x - a.x, b.y - a.y)
        second = (c.x - b.x, c.y - b.y)
        if (first[0] == 0) != (second[0] == 0):
            turns += 1
    return turns
