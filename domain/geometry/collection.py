from typing import Tuple
from pydantic import Field
from domain.geometry.coordinate import Coordinate
from domain.geometry.dimension import Dimension
from domain.geometry.envelope import Envelope
from domain.geometry.geometry import Geometry
from domain.geometry.line_string import LineString
from domain.geometry.point import Point
from domain.geometry.polygon import Polygon


class GeometryCollection(Geometry):
    """
    An ordered collection of geometries of any type.

    The collection's dimension is the highest dimension of its elements;
    an empty collection has dimension FALSE.
    """
    geometries: Tuple[Geometry, ...] = Field(default=(), description="Element geometries, in order")

    @property
    def dimension(self) -> Dimension:
        return max((g.dimension for g in self.geometries), default=Dimension.FALSE)

    @property
    def is_empty(self) -> bool:
        return all(g.is_empty for g in self.geometries)

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        coords = []
        for g in self.geometries:
            coords.extend(g.coordinates)
        return tuple(coords)

    @property
    def envelope(self) -> Envelope:
        env = Envelope()
        for g in self.geometries:
            env = env.expand_to_include(g.envelope)
        return env

    @property
    def area(self) -> float:
        return sum(g.area for g in self.geometries)

    @property
    def num_geometries(self) -> int:
        return len(self.geometries)

    def geometry_n(self, n: int) -> Geometry:
        return self.geometries[n]

    def is_collection(self) -> bool:
        return True


class MultiPoint(GeometryCollection):
    """A collection of points."""
    geometries: Tuple[Point, ...] = Field(default=(), description="Element points, in order")


class MultiLineString(GeometryCollection):
    """A collection of line strings."""
    geometries: Tuple[LineString, ...] = Field(default=(), description="Element line strings, in order")


class MultiPolygon(GeometryCollection):
    """A collection of polygons."""
    geometries: Tuple[Polygon, ...] = Field(default=(), description="Element polygons, in order")
