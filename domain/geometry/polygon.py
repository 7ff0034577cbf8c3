from typing import Tuple
from pydantic import Field, field_validator, model_validator
from domain.geometry.coordinate import Coordinate
from domain.geometry.dimension import Dimension
from domain.geometry.geometry import Geometry

Ring = Tuple[Coordinate, ...]


class Polygon(Geometry):
    """
    Represents a polygon bounded by a shell ring and optional hole rings.

    Rings are closed vertex sequences (first vertex equal to the last) with
    at least four vertices. A polygon with no shell is the empty polygon.
    Ring orientation is kept as given; overlay output orientation is the
    noding engine's concern.
    """
    shell: Ring = Field(default=(), description="Closed outer ring")
    holes: Tuple[Ring, ...] = Field(default=(), description="Closed inner rings")

    @field_validator("shell")
    @classmethod
    def validate_shell(cls, v: Ring) -> Ring:
        """Validate that the shell is empty or a closed ring."""
        if len(v) == 0:
            return v
        return cls._validate_ring(v)

    @field_validator("holes")
    @classmethod
    def validate_holes(cls, v: Tuple[Ring, ...]) -> Tuple[Ring, ...]:
        """Validate that every hole is a closed ring."""
        for hole in v:
            cls._validate_ring(hole)
        return v

    @model_validator(mode="after")
    def validate_holes_need_shell(self):
        """Validate that holes only appear inside a shell."""
        if not self.shell and self.holes:
            raise ValueError("Empty polygon cannot have holes")
        return self

    @staticmethod
    def _validate_ring(ring: Ring) -> Ring:
        if len(ring) < 4:
            raise ValueError(f"Ring must have at least 4 vertices, got {len(ring)}")
        if ring[0] != ring[-1]:
            raise ValueError("Ring must be closed (first and last vertices equal)")
        return ring

    @staticmethod
    def _signed_ring_area(ring: Ring) -> float:
        """Calculate the signed area of a closed ring using the shoelace formula."""
        area = 0.0
        for current, next_vertex in zip(ring, ring[1:]):
            area += current.x * next_vertex.y - next_vertex.x * current.y
        return area / 2.0

    @property
    def dimension(self) -> Dimension:
        return Dimension.SURFACE

    @property
    def is_empty(self) -> bool:
        return len(self.shell) == 0

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        coords = list(self.shell)
        for hole in self.holes:
            coords.extend(hole)
        return tuple(coords)

    @property
    def area(self) -> float:
        """Area of the shell minus the area of the holes."""
        area = abs(self._signed_ring_area(self.shell))
        for hole in self.holes:
            area -= abs(self._signed_ring_area(hole))
        return area

    @property
    def num_holes(self) -> int:
        return len(self.holes)

    def is_clockwise(self) -> bool:
        """Determine if the shell is oriented clockwise."""
        return self._signed_ring_area(self.shell) < 0
