from modules.geometry.primitives import Edge, Point


def test_point_to_tuple():
    """Point should serialize as an `(x, y)` tuple."""
    p = Point(10.5, 20.7)
    assert p.to_tuple() == (10.5, 20.7)
    assert Point.from_tuple([1, 2]) == Point(1.0, 2.0)


def test_point_is_close_uses_absolute_tolerance():
    """Points within 1e-7 on both axes compare close."""
    assert Point(1.0, 2.0).is_close(Point(1.0 + 5e-8, 2.0 - 5e-8))
    assert not Point(1.0, 2.0).is_close(Point(1.0, 2.0 + 1e-6))


def test_vertical_edge_intersection():
    """A vertical edge meets a sloped edge at x=2, y=4/3."""
    crossing = Edge(Point(2, 2), Point(2, 0)).intersection(Edge(Point(1.5, 3), Point(2.1, 1)))
    assert crossing is not None
    assert crossing.is_close(Point(2, 4 / 3))


def test_vertical_line_intersection_is_symmetric():
    """Swapping the operands must yield the same crossing."""
    vertical = Edge(Point(2, 2), Point(2, 0))
    sloped = Edge(Point(1.5, 3), Point(2.1, 1))
    forward = vertical.intersection(sloped)
    backward = sloped.intersection(vertical)
    assert forward is not None and backward is not None
    assert backward.is_close(Point(2, 4 / 3))
    assert forward.is_close(backward)


def test_intersection_with_horizontal_edge():
    """Horizontal boundary intersection matches the expected crossing."""
    crossing = Edge(Point(0, 2), Point(2, 2)).intersection(Edge(Point(1.5, 3), Point(2, 0.5)))
    assert crossing is not None
    assert crossing.is_close(Point(1.7, 2))


def test_intersection_uses_supporting_lines():
    """Crossings outside both finite segments are still reported."""
    crossing = Edge(Point(0, 0), Point(1, 1)).intersection(Edge(Point(5, 0), Point(4, 1)))
    assert crossing is not None
    assert crossing.is_close(Point(2.5, 2.5))


def test_parallel_and_coincident_edges_have_no_intersection():
    """Parallel or overlapping lines are signaled with None rather than an error."""
    base = Edge(Point(0, 0), Point(2, 1))
    assert base.intersection(Edge(Point(0, 1), Point(2, 2))) is None
    assert base.intersection(Edge(Point(4, 2), Point(6, 3))) is None
    assert Edge(Point(1, 0), Point(1, 5)).intersection(Edge(Point(3, 0), Point(3, 5))) is None


def test_zero_length_edge_has_no_intersection():
    """Degenerate edges never crash intersection."""
    point_edge = Edge(Point(1, 1), Point(1, 1))
    other = Edge(Point(0, 0), Point(2, 2))
    assert point_edge.is_degenerate
    assert point_edge.intersection(other) is None
    assert other.intersection(point_edge) is None


def test_edge_contains_right_hand_side():
    """Points on the right of the directed edge are inside, the left side is not."""
    edge = Edge(Point(0, 5), Point(3, 7))
    assert edge.contains(Point(3, 4))
    assert not edge.contains(Point(0, 9))


def test_edge_contains_points_on_the_line():
    """The supporting line itself belongs to the half-plane."""
    edge = Edge(Point(0, 0), Point(0, 10))
    assert edge.contains(Point(0, 5))
    assert edge.contains(Point(0, 20))
    assert edge.contains(Point(1, 5))
    assert not edge.contains(Point(-1, 5))


def test_spans_and_parameter_of():
    """Finite-extent checks and positions along the edge."""
    edge = Edge(Point(0, 0), Point(4, 2))
    assert edge.spans(Point(2, 1))
    assert not edge.spans(Point(6, 3))
    assert edge.parameter_of(Point(2, 1)) == 0.5
    assert edge.parameter_of(Point(4, 2)) == 1.0
    assert Edge(Point(1, 1), Point(1, 1)).parameter_of(Point(3, 3)) == 0.0
