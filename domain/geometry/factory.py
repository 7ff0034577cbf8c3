import logging
from typing import Any, Iterable, List, Optional, Sequence
from pydantic import Field
from domain.geometry.collection import GeometryCollection, MultiLineString, MultiPoint, MultiPolygon
from domain.geometry.coordinate import Coordinate
from domain.geometry.geometry import Geometry
from domain.geometry.line_string import LineString
from domain.geometry.point import Point
from domain.geometry.polygon import Polygon
from domain.geometry.precision import PrecisionModel
from utils.base_model import ImmutableModel
from utils.errors import should_never_reach_here

logger = logging.getLogger(__name__)


class GeometryFactory(ImmutableModel):
    """
    Creates geometries under a shared precision model.

    Called without coordinates, the ``create_*`` methods return the canonical
    empty instance of their type. The factory does not round coordinates
    itself; the precision model is carried for the operations that use it.
    """
    precision_model: PrecisionModel = Field(
        default_factory=PrecisionModel.floating,
        description="Precision model of geometries created by this factory"
    )

    def create_point(self, coordinate: Optional[Coordinate] = None) -> Point:
        """Create a point (empty if no coordinate is given)."""
        return Point(coordinate=coordinate)

    def create_line_string(self, coordinates: Sequence[Coordinate] = (),
                           user_data: Optional[Any] = None) -> LineString:
        """Create a line string (empty if no coordinates are given)."""
        return LineString(points=tuple(coordinates), user_data=user_data)

    def create_polygon(self, shell: Sequence[Coordinate] = (),
                       holes: Iterable[Sequence[Coordinate]] = ()) -> Polygon:
        """Create a polygon (empty if no shell is given)."""
        return Polygon(shell=tuple(shell), holes=tuple(tuple(h) for h in holes))

    def create_multi_point(self, points: Iterable[Point] = ()) -> MultiPoint:
        return MultiPoint(geometries=tuple(points))

    def create_multi_line_string(self, lines: Iterable[LineString] = ()) -> MultiLineString:
        return MultiLineString(geometries=tuple(lines))

    def create_multi_polygon(self, polygons: Iterable[Polygon] = ()) -> MultiPolygon:
        return MultiPolygon(geometries=tuple(polygons))

    def create_geometry_collection(self, geometries: Iterable[Geometry] = ()) -> GeometryCollection:
        return GeometryCollection(geometries=tuple(geometries))

    def build_geometry(self, geometries: Iterable[Geometry]) -> Geometry:
        """
        Build the most specific geometry possible from a list of geometries.

        The rules are:
        - an empty list gives an empty GeometryCollection
        - a list mixing geometry types, or holding any collection, gives a
          GeometryCollection of the elements as they are
        - a list of two or more geometries of one atomic type gives the
          matching Multi geometry
        - a single atomic geometry is returned unchanged

        Element order is preserved in every case.

        Args:
            geometries: The geometries to combine

        Returns:
            A geometry holding all the given elements
        """
        geom_list: List[Geometry] = list(geometries)
        if not geom_list:
            return self.create_geometry_collection()

        geom_types = {type(g) for g in geom_list}
        is_heterogeneous = len(geom_types) > 1
        has_collection = any(g.is_collection() for g in geom_list)

        if is_heterogeneous or has_collection:
            return self.create_geometry_collection(geom_list)

        if len(geom_list) == 1:
            return geom_list[0]

        geom_type = geom_types.pop()
        if issubclass(geom_type, Polygon):
            return self.create_multi_polygon(geom_list)
        if issubclass(geom_type, LineString):
            return self.create_multi_line_string(geom_list)
        if issubclass(geom_type, Point):
            return self.create_multi_point(geom_list)

        logger.error(f"Unhandled geometry type in build_geometry: {geom_type.__name__}")
        should_never_reach_here(f"Unhandled geometry type: {geom_type.__name__}")
