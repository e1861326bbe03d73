"""
Tests for path simplification, balancing and SVG output
"""

from hypothesis import given, strategies as st, settings

from elbow_router.routing.grid import Box, Point
from elbow_router.routing.path_optimizer import balance_path, simplify_path, to_svg_path
from tests.conftest import assert_orthogonal


# Random orthogonal walks: a start point plus (direction, steps) moves
moves = st.lists(
    st.tuples(st.sampled_from([(0, -1), (1, 0), (0, 1), (-1, 0)]), st.integers(min_value=1, max_value=5)),
    min_size=0,
    max_size=12
)


def build_walk(start, walk_moves):
    """Grid walk that never reverses straight back on itself, like planner output"""
    path = [start]
    last_direction = None
    for (dx, dy), steps in walk_moves:
        if last_direction == (-dx, -dy):
            continue
        last_direction = (dx, dy)
        for _ in range(steps):
            last = path[-1]
            path.append(Point(last.x + dx * 10, last.y + dy * 10))
    return path


class TestSimplifyPath:
    """Test suite for simplify_path"""

    def test_drops_collinear_points(self):
        path = [Point(0, 0), Point(10, 0), Point(20, 0), Point(20, 10), Point(20, 20)]
        assert simplify_path(path) == [Point(0, 0), Point(20, 0), Point(20, 20)]

    def test_keeps_corners(self):
        path = [Point(0, 0), Point(10, 0), Point(10, 10), Point(20, 10)]
        assert simplify_path(path) == path

    def test_short_paths_unchanged(self):
        assert simplify_path([]) == []
        assert simplify_path([Point(0, 0)]) == [Point(0, 0)]
        assert simplify_path([Point(0, 0), Point(0, 0)]) == [Point(0, 0), Point(0, 0)]

    def test_does_not_modify_input(self):
        path = [Point(0, 0), Point(10, 0), Point(20, 0)]
        simplify_path(path)
        assert len(path) == 3

    @given(moves)
    @settings(max_examples=200, deadline=None)
    def test_property_idempotent(self, walk_moves):
        """Property: simplifying twice equals simplifying once"""
        path = build_walk(Point(0, 0), walk_moves)
        once = simplify_path(path)
        assert simplify_path(once) == once

    @given(moves)
    @settings(max_examples=200, deadline=None)
    def test_property_keeps_endpoints(self, walk_moves):
        """Property: the first and last points always survive"""
        path = build_walk(Point(0, 0), walk_moves)
        simplified = simplify_path(path)
        assert simplified[0] == path[0]
        assert simplified[-1] == path[-1]


class TestBalancePath:
    """Test suite for balance_path"""

    def test_centers_jog_in_horizontal_gap(self):
        box1 = Box(0, 0, 40, 40)
        box2 = Box(100, 60, 40, 40)
        path = [Point(40, 20), Point(50, 20), Point(50, 80), Point(100, 80)]

        assert balance_path(path, box1, box2) == [
            Point(40, 20), Point(70, 20), Point(70, 80), Point(100, 80)
        ]

    def test_centers_jog_in_vertical_gap(self, separated_boxes):
        path = [Point(100, 100), Point(100, 120), Point(300, 120), Point(300, 300)]

        balanced = balance_path(path, separated_boxes['box1'], separated_boxes['box2'])

        assert balanced == [Point(100, 100), Point(100, 200), Point(300, 200), Point(300, 300)]

    def test_horizontal_gap_takes_precedence(self):
        box1 = Box(0, 0, 40, 40)
        box2 = Box(100, 100, 40, 40)
        # Both jog points sit inside the x gap and the y gap
        path = [Point(20, 50), Point(60, 50), Point(60, 80), Point(120, 80)]

        balanced = balance_path(path, box1, box2)

        assert balanced == [Point(20, 50), Point(70, 50), Point(70, 80), Point(120, 80)]
        assert_orthogonal(balanced)

    def test_overlapping_boxes_unchanged(self):
        box1 = Box(0, 0, 40, 40)
        box2 = Box(20, 20, 40, 40)
        path = [Point(0, 0), Point(30, 0), Point(30, 50), Point(60, 50)]
        assert balance_path(path, box1, box2) == path

    def test_multiple_jogs_unchanged(self):
        """Only the single-jog case is balanced"""
        box1 = Box(0, 0, 40, 40)
        box2 = Box(100, 20, 40, 40)
        path = [
            Point(40, 20), Point(50, 20), Point(50, 50),
            Point(60, 50), Point(60, 80), Point(100, 80)
        ]
        assert balance_path(path, box1, box2) == path

    def test_does_not_modify_input(self, separated_boxes):
        path = [Point(100, 100), Point(100, 120), Point(300, 120), Point(300, 300)]
        original = list(path)
        balance_path(path, separated_boxes['box1'], separated_boxes['box2'])
        assert path == original


class TestSvgPath:
    """Test suite for to_svg_path"""

    def test_empty(self):
        assert to_svg_path([]) == ""

    def test_points(self):
        path = [Point(0, 0), Point(10, 0), Point(10, 5.5)]
        assert to_svg_path(path) == "M 0 0 L 10 0 L 10 5.5"
