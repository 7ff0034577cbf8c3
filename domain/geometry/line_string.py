from typing import Tuple
from pydantic import Field, field_validator
from domain.geometry.coordinate import Coordinate
from domain.geometry.dimension import Dimension
from domain.geometry.geometry import Geometry


class LineString(Geometry):
    """
    Represents a polyline through a sequence of vertices.

    A line string is either empty or has at least two vertices.
    Repeated vertices are allowed; the overlay graph may produce them.
    """
    points: Tuple[Coordinate, ...] = Field(
        default=(),
        description="Vertices of the line string, in order"
    )

    @field_validator("points")
    @classmethod
    def validate_point_count(cls, v: Tuple[Coordinate, ...]) -> Tuple[Coordinate, ...]:
        """Validate that a non-empty line string has at least two vertices."""
        if len(v) == 1:
            raise ValueError("Line string must have 0 or at least 2 vertices")
        return v

    @property
    def dimension(self) -> Dimension:
        return Dimension.CURVE

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        return self.points

    @property
    def num_points(self) -> int:
        return len(self.points)

    @property
    def length(self) -> float:
        """Get the total length of the line string."""
        return sum(
            start.distance_to(end)
            for start, end in zip(self.points, self.points[1:])
        )

    def is_closed(self) -> bool:
        """Check if the first and last vertices coincide (False when empty)."""
        if self.is_empty:
            return False
        return self.points[0] == self.points[-1]

    def reverse(self) -> "LineString":
        """Create a line string with the vertex order reversed."""
        return self.with_changes(points=self.points[::-1])
