from __future__ import annotations

import pytest

from tooltip_kit.geometry import ArrowDirection, ArrowPosition, Point, Rect, Size


def test_rect_derived_edges():
    rect = Rect(10.0, 20.0, 100.0, 40.0)

    assert (rect.min_x, rect.mid_x, rect.max_x) == (10.0, 60.0, 110.0)
    assert (rect.min_y, rect.mid_y, rect.max_y) == (20.0, 40.0, 60.0)
    assert rect.origin == Point(10.0, 20.0)
    assert rect.size == Size(100.0, 40.0)
    assert rect.center == Point(60.0, 40.0)


@pytest.mark.parametrize(
    "point, expected",
    [
        (Point(0.0, 0.0), True),
        (Point(9.999, 9.999), True),
        (Point(10.0, 5.0), False),
        (Point(5.0, 10.0), False),
        (Point(-0.001, 5.0), False),
    ],
)
def test_contains_is_left_closed_right_open(point, expected):
    assert Rect(0.0, 0.0, 10.0, 10.0).contains(point) is expected


def test_empty_rect_contains_nothing():
    assert Rect(5.0, 5.0, 0.0, 10.0).contains(Point(5.0, 5.0)) is False
    assert Rect(5.0, 5.0, 10.0, 0.0).is_empty


def test_intersection_and_intersects():
    first = Rect(0.0, 0.0, 10.0, 10.0)
    second = Rect(5.0, 5.0, 10.0, 10.0)

    assert first.intersection(second) == Rect(5.0, 5.0, 5.0, 5.0)
    assert first.intersects(second)
    # Touching edges do not overlap.
    assert first.intersection(Rect(10.0, 0.0, 5.0, 5.0)) is None
    assert not first.intersects(Rect(10.0, 0.0, 5.0, 5.0))


def test_offset_by_returns_translated_copy():
    rect = Rect(1.0, 2.0, 3.0, 4.0)

    moved = rect.offset_by(10.0, -2.0)

    assert moved == Rect(11.0, 0.0, 3.0, 4.0)
    assert rect == Rect(1.0, 2.0, 3.0, 4.0)
    assert Point(1.0, 1.0).offset_by(2.0, 3.0) == Point(3.0, 4.0)


def test_enums_round_trip_from_names():
    assert ArrowDirection("left") is ArrowDirection.LEFT
    assert ArrowPosition("trailing") is ArrowPosition.TRAILING
    assert ArrowDirection.UP.is_vertical and ArrowDirection.DOWN.is_vertical
    assert not ArrowDirection.LEFT.is_vertical and not ArrowDirection.RIGHT.is_vertical


def test_negative_sizes_are_standardised_before_containment():
    rect = Rect(0.0, 0.0, -10.0, 10.0)

    assert not rect.is_empty
    assert (rect.min_x, rect.max_x) == (-10.0, 0.0)
    assert rect.contains(Point(-5.0, 5.0))
    assert not rect.contains(Point(0.0, 5.0))
    assert not rect.contains(Point(5.0, 5.0))
