from typing import Iterable, Optional
from pydantic import Field
from domain.geometry.coordinate import Coordinate
from utils.base_model import ImmutableModel


class Envelope(ImmutableModel):
    """
    Axis-aligned bounding box of a geometry.

    An envelope whose minimum exceeds its maximum is *null*: it represents
    no points at all (the envelope of an empty geometry). A default-constructed
    envelope is null. All operations return new envelopes.
    """
    min_x: float = Field(default=0.0, description="Minimum x value")
    max_x: float = Field(default=-1.0, description="Maximum x value")
    min_y: float = Field(default=0.0, description="Minimum y value")
    max_y: float = Field(default=-1.0, description="Maximum y value")

    @classmethod
    def from_bounds(cls, x1: float, x2: float, y1: float, y2: float) -> 'Envelope':
        """Create an envelope spanning two x values and two y values, in either order."""
        return cls(min_x=min(x1, x2), max_x=max(x1, x2), min_y=min(y1, y2), max_y=max(y1, y2))

    @classmethod
    def of(cls, coordinates: Iterable[Coordinate]) -> 'Envelope':
        """Create the envelope of a set of coordinates (null if there are none)."""
        coordinates = list(coordinates)
        if not coordinates:
            return cls()
        return cls(
            min_x=min(c.x for c in coordinates),
            max_x=max(c.x for c in coordinates),
            min_y=min(c.y for c in coordinates),
            max_y=max(c.y for c in coordinates),
        )

    @property
    def is_null(self) -> bool:
        """True if this envelope contains no points."""
        return self.max_x < self.min_x

    @property
    def width(self) -> float:
        if self.is_null:
            return 0.0
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        if self.is_null:
            return 0.0
        return self.max_y - self.min_y

    def expand_by(self, delta_x: float, delta_y: Optional[float] = None) -> 'Envelope':
        """
        Expand the envelope by a distance in each direction.

        Args:
            delta_x: Distance to expand by on both sides in x
            delta_y: Distance to expand by on both sides in y (defaults to delta_x)

        Returns:
            The expanded envelope. A null envelope stays null, and a negative
            delta that shrinks the envelope past zero size makes it null.
        """
        if delta_y is None:
            delta_y = delta_x
        if self.is_null:
            return Envelope()

        min_x = self.min_x - delta_x
        max_x = self.max_x + delta_x
        min_y = self.min_y - delta_y
        max_y = self.max_y + delta_y
        if min_x > max_x or min_y > max_y:
            return Envelope()
        return Envelope(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)

    def expand_to_include(self, other: 'Envelope') -> 'Envelope':
        """Return the smallest envelope covering both this envelope and another."""
        if other.is_null:
            return self.model_copy()
        if self.is_null:
            return other.model_copy()
        return Envelope(
            min_x=min(self.min_x, other.min_x),
            max_x=max(self.max_x, other.max_x),
            min_y=min(self.min_y, other.min_y),
            max_y=max(self.max_y, other.max_y),
        )

    def intersects(self, other: 'Envelope') -> bool:
        """Check if this envelope shares at least one point with another."""
        if self.is_null or other.is_null:
            return False
        return not (other.min_x > self.max_x or other.max_x < self.min_x
                    or other.min_y > self.max_y or other.max_y < self.min_y)

    def disjoint(self, other: 'Envelope') -> bool:
        """Check if this envelope shares no point with another (null envelopes are disjoint from everything)."""
        return not self.intersects(other)

    def intersection(self, other: 'Envelope') -> 'Envelope':
        """Compute the overlap of two envelopes (null if they are disjoint)."""
        if not self.intersects(other):
            return Envelope()
        return Envelope(
            min_x=max(self.min_x, other.min_x),
            max_x=min(self.max_x, other.max_x),
            min_y=max(self.min_y, other.min_y),
            max_y=min(self.max_y, other.max_y),
        )

    def covers(self, other: 'Envelope') -> bool:
        """Check if every point of another envelope lies in this one."""
        if self.is_null or other.is_null:
            return False
        return (other.min_x >= self.min_x and other.max_x <= self.max_x
                and other.min_y >= self.min_y and other.max_y <= self.max_y)

    def __str__(self) -> str:
        if self.is_null:
            return "Env[Null]"
        return f"Env[{self.min_x} : {self.max_x}, {self.min_y} : {self.max_y}]"
