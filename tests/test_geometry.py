import pytest

from tuikit.geometry import BoundingBox, Dimension, Insets, Point, Rectangle


def test_point_equality():
    assert Point(3, 4) == Point(3, 4)
    assert not (Point(3, 4) == Point(4, 3))


def test_insets_field_order():
    insets = Insets(1, 2, 3, 4)
    assert (insets.top, insets.left, insets.bottom, insets.right) == (1, 2, 3, 4)


def test_rectangle_location_and_size():
    r = Rectangle(1, 2, 3, 4)
    assert r.location == Point(1, 2)
    assert r.size == Dimension(3, 4)
    assert r.right == r.x + r.width
    assert r.bottom == r.y + r.height


@pytest.mark.parametrize(
    "point, expected",
    [
        ((0, 0), True),
        ((9, 9), True),
        ((5, 0), True),
        ((10, 5), False),
        ((5, 10), False),
        ((-1, 0), False),
        ((0, -1), False),
    ],
)
def test_contains_point(point, expected):
    assert Rectangle(0, 0, 10, 10).contains(*point) is expected


def test_empty_rectangle_contains_nothing():
    assert Rectangle(0, 0, 0, 0).contains(0, 0) is False


def test_negative_size_contains_nothing():
    assert Rectangle(0, 0, -1, 5).contains(0, 0) is False
    assert Rectangle(0, 0, 10, 10).contains(0, 0, -1, 2) is False


def test_contains_rectangle():
    r = Rectangle(0, 0, 10, 10)
    assert r.contains(0, 0, 10, 10) is True
    assert r.contains(2, 2, 3, 3) is True
    assert r.contains(5, 5, 6, 2) is False
    assert r.contains(-1, 0, 2, 2) is False


def test_contains_requires_both_dimensions():
    with pytest.raises(TypeError):
        Rectangle(0, 0, 10, 10).contains(0, 0, 5)


def test_intersection_lies_in_both():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(5, 3, 10, 10)
    i = a & b
    assert i == a.intersection(b)
    assert i == b & a
    assert a.contains(i.x, i.y, i.width, i.height)
    assert b.contains(i.x, i.y, i.width, i.height)


def test_intersection_of_disjoint_is_empty():
    i = Rectangle(0, 0, 2, 2) & Rectangle(5, 5, 2, 2)
    assert i.width <= 0
    assert i.height <= 0


def test_intersection_with_self_is_self():
    r = Rectangle(1, 2, 3, 4)
    assert r & r == r


def test_union_holds_both():
    a = Rectangle(0, 0, 4, 4)
    b = Rectangle(6, 2, 3, 5)
    u = a | b
    assert u == a.union(b)
    assert u == b | a
    assert u.contains(a.x, a.y, a.width, a.height)
    assert u.contains(b.x, b.y, b.width, b.height)


def test_operators_reject_other_types():
    with pytest.raises(TypeError):
        Rectangle(0, 0, 1, 1) & 3


def test_translate_moves_origin_only():
    r = Rectangle(1, 2, 3, 4)
    r.translate(5, -2)
    assert r == Rectangle(6, 0, 3, 4)


def test_set_bounds():
    r = Rectangle()
    r.set_bounds(7, 8, 9, 10)
    assert r == Rectangle(7, 8, 9, 10)


def test_bounding_box_round_trip():
    r = Rectangle(1, 2, 3, 4)
    box = r.to_bounding_box()
    assert box == BoundingBox(r.left, r.right, r.top, r.bottom)
    assert box.to_rectangle() == r