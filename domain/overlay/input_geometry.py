from typing import Optional
from pydantic import Field
from domain.geometry.dimension import Dimension
from domain.geometry.envelope import Envelope
from domain.geometry.geometry import Geometry
from utils.base_model import ImmutableModel


class InputGeometry(ImmutableModel):
    """
    The ordered pair of operand geometries of an overlay operation.

    Operands are addressed by index: 0 for A, 1 for B. Either operand may be
    absent, which is treated the same as an empty geometry.
    """
    geom_a: Optional[Geometry] = Field(default=None, description="Operand A")
    geom_b: Optional[Geometry] = Field(default=None, description="Operand B")

    def get_geometry(self, index: int) -> Optional[Geometry]:
        """Get the operand geometry at an index (0 for A, 1 for B)."""
        if index == 0:
            return self.geom_a
        if index == 1:
            return self.geom_b
        raise IndexError(f"Operand index must be 0 or 1, got {index}")

    def get_dimension(self, index: int) -> Dimension:
        """Get the dimension of an operand, or FALSE if it is absent."""
        geom = self.get_geometry(index)
        if geom is None:
            return Dimension.FALSE
        return geom.dimension

    def get_envelope(self, index: int) -> Envelope:
        """Get the envelope of an operand (null if it is absent or empty)."""
        geom = self.get_geometry(index)
        if geom is None:
            return Envelope()
        return geom.envelope

    def is_empty(self, index: int) -> bool:
        geom = self.get_geometry(index)
        return geom is None or geom.is_empty

    def is_area(self, index: int) -> bool:
        """Check if an operand is present and polygonal."""
        return self.get_dimension(index) == Dimension.SURFACE
