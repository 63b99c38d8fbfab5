import logging
import math

import pytest

from meshspawn.node import Node, vector_intersection_2d
from meshspawn.vec3 import Vec3


def make(x, y, z, node_id=0):
    return Node(Vec3(x, y, z), node_id)


def test_constructor_copies_position():
    pos = Vec3(1, 2, 3)
    node = Node(pos, 4)
    pos.x = 99
    assert node.pos == Vec3(1, 2, 3)
    assert node.id == 4
    assert node.connections == []
    assert node.surrounded is False


def test_set_position_updates_coordinates():
    node = make(0, 0, 0)
    node.set_position(5, -1, 2.5)
    assert node.pos == Vec3(5, -1, 2.5)


def test_distance_is_symmetric_and_zero_to_self():
    p = make(1, 2, 3)
    q = make(-4, 6, 0.5)
    assert p.distance_to(q) == pytest.approx(q.distance_to(p))
    assert p.distance_to(p) == 0


def test_distance_of_known_points():
    assert make(0, 0, 0).distance_to(make(3, 0, 4)) == pytest.approx(5.0)


def test_set_vert_fills_a_then_b_and_records_connections():
    n = make(0, 0, 0, 0)
    first = make(1, 0, 0, 1)
    second = make(0, 0, 1, 2)
    third = make(1, 0, 1, 3)
    n.set_vert(first)
    n.set_vert(second)
    assert n.a is first
    assert n.b is second
    n.set_vert(third)
    assert n.a is first and n.b is second
    assert n.connections == [1, 2, 3]


def test_set_vert_warns_when_full_and_on_duplicate(caplog):
    n = make(0, 0, 0, 0)
    other = make(1, 0, 0, 1)
    with caplog.at_level(logging.WARNING):
        n.set_vert(other)
        n.set_vert(other)
        n.set_vert(other)
    assert "full" in caplog.text
    assert "twice" in caplog.text
    assert n.connections == [1, 1, 1]


def test_vector_intersection_lands_on_both_lines():
    zero_t, vec_t = Vec3(0, 0, 0), Vec3(1, 0, 0)
    zero_u, vec_u = Vec3(2, 0, -1), Vec3(0, 0, 2)
    t, u = vector_intersection_2d(zero_t, vec_t, zero_u, vec_u)
    on_t = zero_t + vec_t * t
    on_u = zero_u + vec_u * u
    assert (on_t.x, on_t.z) == pytest.approx((on_u.x, on_u.z))


def test_vector_intersection_parallel_from_same_origin_is_nan():
    origin = Vec3(1, 0, 1)
    result = vector_intersection_2d(origin, Vec3(1, 0, 0), origin, Vec3(2, 0, 0))
    assert len(result) == 2
    assert [math.isnan(value) for value in result] == [True, True]


def test_vector_intersection_parallel_offset_is_infinite():
    t, _ = vector_intersection_2d(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 0, 1), Vec3(1, 0, 0))
    assert abs(t) == math.inf


def test_get_connection_vertex_picks_a_for_crossing_lines():
    n = make(0, 0, 0, 0)
    a = make(10, 0, 0, 1)
    b = make(0, 0, 10, 2)
    n.set_vert(a)
    n.set_vert(b)
    assert n.get_connection_vertex(make(5, 0, 5, 3)) is a


def test_get_connection_vertex_picks_b_for_parallel_lines():
    n = make(0, 0, 0, 0)
    a = make(10, 0, 0, 1)
    b = make(0, 0, 10, 2)
    n.set_vert(a)
    n.set_vert(b)
    assert n.get_connection_vertex(make(20, 0, 0, 3)) is b


def test_get_connection_vertex_without_links_raises():
    with pytest.raises(ValueError):
        make(0, 0, 0).get_connection_vertex(make(1, 0, 1))


def _wedge():
    v = make(0, 0, 0, 0)
    v.set_vert(make(10, 0, -10, 1))
    v.set_vert(make(10, 0, 10, 2))
    return v


def test_check_within_none_is_false():
    assert Node.check_within(None, make(1, 0, 1)) is False


def test_check_within_unlinked_is_false(caplog):
    with caplog.at_level(logging.ERROR):
        assert Node.check_within(make(0, 0, 0), make(1, 0, 1)) is False
    assert "unlinked" in caplog.text


def test_check_within_point_before_segment():
    assert Node.check_within(_wedge(), make(5, 0, 0)) is True


def test_check_within_point_past_segment():
    assert Node.check_within(_wedge(), make(20, 0, 0)) is False


def test_check_within_point_outside_wedge():
    assert Node.check_within(_wedge(), make(5, 0, 50)) is False


def test_check_within_follows_clones():
    outer = _wedge()
    point = make(20, 0, 0)
    assert Node.check_within(outer, point) is False
    clone = make(0, 0, 0, 5)
    clone.set_vert(make(30, 0, -10, 6))
    clone.set_vert(make(30, 0, 10, 7))
    outer.clone_f = clone
    assert Node.check_within(outer, point) is True


def test_check_surrounded_without_self_link_marks_surrounded():
    n = make(0, 0, 0, 0)
    a = make(1, 0, 0, 1)
    b = make(0, 0, 1, 2)
    n.set_vert(a)
    n.set_vert(b)
    n.check_surrounded()
    assert n.surrounded is True


def test_check_surrounded_with_self_link_stays_open():
    n = make(0, 0, 0, 0)
    n.set_vert(n)
    n.check_surrounded()
    assert n.surrounded is False


def test_str_format():
    assert str(make(1, 2, 3, 7)) == "Node(id=7, x=1, y=2, z=3)"