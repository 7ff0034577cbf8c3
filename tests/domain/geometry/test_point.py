import pytest
from domain.geometry.coordinate import Coordinate
from domain.geometry.dimension import Dimension
from domain.geometry.point import Point


class TestPoint:
    def test_create_point(self):
        p = Point(coordinate=Coordinate(x=1.0, y=2.0))
        assert p.x == 1.0
        assert p.y == 2.0
        assert not p.is_empty
        assert p.dimension == Dimension.POINT

    def test_empty_point(self):
        p = Point()
        assert p.is_empty
        assert p.coordinates == ()
        assert p.envelope.is_null
        assert p.dimension == Dimension.POINT

        with pytest.raises(ValueError):
            _ = p.x

    def test_envelope(self):
        env = Point(coordinate=Coordinate(x=1.0, y=2.0)).envelope
        assert (env.min_x, env.max_x, env.min_y, env.max_y) == (1.0, 1.0, 2.0, 2.0)
        assert env.width == 0.0

    def test_atomic_geometry_elements(self):
        p = Point(coordinate=Coordinate(x=1.0, y=2.0))
        assert p.num_geometries == 1
        assert p.geometry_n(0) is p
        assert not p.is_collection()

        with pytest.raises(IndexError):
            p.geometry_n(1)

    def test_string_representation(self):
        assert str(Point()) == "POINT EMPTY"
        assert str(Point(coordinate=Coordinate(x=1.0, y=2.0))) == "Point([(1.0, 2.0)])"
