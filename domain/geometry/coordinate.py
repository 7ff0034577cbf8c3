from pydantic import Field, field_validator
import math
from utils.constants import EPSILON
from utils.base_model import ImmutableModel


class Coordinate(ImmutableModel):
    """
    Represents a 2D location in Cartesian coordinates.

    Coordinates are the raw values that geometries are built from. They carry
    no topology of their own; precision models snap them to a grid.
    """
    x: float = Field(description="X ordinate")
    y: float = Field(description="Y ordinate")

    @field_validator("x", "y")
    @classmethod
    def validate_ordinates(cls, value: float) -> float:
        """Validate that ordinates are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Ordinate must be a finite number, got {value}")
        return value

    def distance_to(self, other: "Coordinate") -> float:
        """Calculate the Euclidean distance to another coordinate."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close_to(self, other: "Coordinate", tolerance: float = None) -> bool:
        """
        Check if this coordinate is close to another within the specified tolerance.

        Args:
            other: The coordinate to compare with
            tolerance: Maximum distance between coordinates to be considered equal.
                      If None, uses the default EPSILON value.

        Returns:
            True if coordinates are within the tolerance distance of each other
        """
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_to(other) <= tolerance

    def format_as_tuple(self) -> str:
        """Format the coordinate as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.format_as_tuple()
