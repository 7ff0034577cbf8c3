from abc import abstractmethod
from typing import Any, Optional, Tuple
from pydantic import Field
from domain.geometry.coordinate import Coordinate
from domain.geometry.dimension import Dimension
from domain.geometry.envelope import Envelope
from utils.base_model import ImmutableModel


class Geometry(ImmutableModel):
    """
    Base class for all planar geometries.

    A geometry is an immutable value with a topological dimension, an
    emptiness flag and an envelope. ``user_data`` is an opaque annotation
    that geometry operations carry along but never interpret.
    """
    user_data: Optional[Any] = Field(
        default=None,
        description="Opaque application metadata attached to the geometry"
    )

    @property
    @abstractmethod
    def dimension(self) -> Dimension:
        """Topological dimension of the geometry."""

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """True if the geometry contains no points."""

    @property
    @abstractmethod
    def coordinates(self) -> Tuple[Coordinate, ...]:
        """All coordinates of the geometry, in order."""

    @property
    def geometry_type(self) -> str:
        return type(self).__name__

    @property
    def envelope(self) -> Envelope:
        """Bounding box of the geometry (null for an empty geometry)."""
        return Envelope.of(self.coordinates)

    @property
    def area(self) -> float:
        return 0.0

    @property
    def num_geometries(self) -> int:
        return 1

    def geometry_n(self, n: int) -> 'Geometry':
        """Get the n-th element geometry (an atomic geometry is its own only element)."""
        if n != 0:
            raise IndexError(f"Geometry index out of range: {n}")
        return self

    def is_collection(self) -> bool:
        return False

    def __str__(self) -> str:
        if self.is_empty:
            return f"{self.geometry_type.upper()} EMPTY"
        coords = ", ".join(str(c) for c in self.coordinates)
        return f"{self.geometry_type}([{coords}])"
