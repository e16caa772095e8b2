"""Tests for domain models to verify they work correctly."""

import pytest

from wordgoal.domain import MIN_PERSISTED_SIZE, Point, Rect, Size, WindowGeometry


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(-12.5, 40.0)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestSize:
    """Tests for Size class."""

    @pytest.mark.parametrize(
        "width,height,expected",
        [(300, 300, True), (299.9, 800, False), (800, 299.9, False), (0, 0, False)],
    )
    def test_at_least(self, width: float, height: float, expected: bool) -> None:
        """Test the minimum-size check on both dimensions."""
        assert Size(width, height).at_least(MIN_PERSISTED_SIZE) is expected


class TestRect:
    """Tests for Rect class."""

    def test_edges(self) -> None:
        """Test min/max edge properties."""
        r = Rect(10, -20, 100, 50)
        assert (r.min_x, r.max_x, r.min_y, r.max_y) == (10, 110, -20, 30)
        assert r.origin == Point(10, -20)
        assert r.size == Size(100, 50)

    def test_contains_lower_edges_inclusive(self) -> None:
        """Test that lower edges are inside and upper edges are outside."""
        r = Rect(0, 0, 100, 100)
        assert r.contains(Point(0, 0))
        assert r.contains(Point(99.9, 99.9))
        assert not r.contains(Point(100, 50))
        assert not r.contains(Point(50, 100))
        assert not r.contains(Point(-0.1, 50))

    def test_empty_contains_nothing(self) -> None:
        """Test that a zero-area rectangle contains no points."""
        assert not Rect(5, 5, 0, 10).contains(Point(5, 5))
        assert Rect(5, 5, 0, 10).is_empty()

    def test_with_origin(self) -> None:
        assert Rect(0, 0, 40, 30).with_origin(Point(7, 8)) == Rect(7, 8, 40, 30)

    def test_rect_serialization(self) -> None:
        r = Rect(1440, -200, 1920, 1055)
        assert Rect.from_dict(r.to_dict()) == r


class TestWindowGeometry:
    """Tests for the persisted window geometry record."""

    def test_defaults_are_zero(self) -> None:
        g = WindowGeometry()
        assert g.to_dict() == {"width": 0.0, "height": 0.0, "origin_x": 0.0, "origin_y": 0.0}

    def test_stored_size_requires_minimum(self) -> None:
        assert WindowGeometry(800, 600).stored_size() == Size(800, 600)
        assert WindowGeometry(800, 200).stored_size() is None
        assert WindowGeometry(250, 250).stored_size(minimum=200) == Size(250, 250)

    def test_zero_zero_origin_is_sentinel(self) -> None:
        assert WindowGeometry().stored_origin() is None
        assert WindowGeometry(origin_x=0, origin_y=15).stored_origin() == Point(0, 15)
        assert WindowGeometry(origin_x=-5, origin_y=0).stored_origin() == Point(-5, 0)

    def test_from_dict_fills_missing(self) -> None:
        assert WindowGeometry.from_dict({"width": 640}) == WindowGeometry(640, 0, 0, 0)
