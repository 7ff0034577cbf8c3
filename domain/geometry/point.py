from typing import Optional, Tuple
from pydantic import Field
from domain.geometry.coordinate import Coordinate
from domain.geometry.dimension import Dimension
from domain.geometry.geometry import Geometry


class Point(Geometry):
    """
    A single location in the plane, or the empty point.

    The empty point has no coordinate; it is the canonical empty result of
    an overlay whose result dimension is POINT.
    """
    coordinate: Optional[Coordinate] = Field(
        default=None,
        description="Location of the point (None for the empty point)"
    )

    @property
    def dimension(self) -> Dimension:
        return Dimension.POINT

    @property
    def is_empty(self) -> bool:
        return self.coordinate is None

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        if self.coordinate is None:
            return ()
        return (self.coordinate,)

    @property
    def x(self) -> float:
        """X ordinate of the point."""
        if self.coordinate is None:
            raise ValueError("Empty point has no x ordinate")
        return self.coordinate.x

    @property
    def y(self) -> float:
        """Y ordinate of the point."""
        if self.coordinate is None:
            raise ValueError("Empty point has no y ordinate")
        return self.coordinate.y
