"""
Read-only view of the overlay graph built by the noding and labelling stage.

Only the state needed to extract diagnostic lines is modelled here: each
directed half-edge's vertices, direction, topology label and whether it
bounds the result area.
"""
from enum import Enum, IntEnum
from typing import Tuple
from pydantic import Field
from domain.geometry.coordinate import Coordinate
from utils.base_model import ImmutableModel


class Location(IntEnum):
    """Topological location of a point relative to an operand geometry."""
    NONE = -1
    INTERIOR = 0
    BOUNDARY = 1
    EXTERIOR = 2

    @property
    def symbol(self) -> str:
        return _LOCATION_SYMBOLS[self]


_LOCATION_SYMBOLS = {
    Location.NONE: "-",
    Location.INTERIOR: "i",
    Location.BOUNDARY: "b",
    Location.EXTERIOR: "e",
}


class Position(Enum):
    """Side of a directed edge."""
    ON = "on"
    LEFT = "left"
    RIGHT = "right"


class EdgeDimension(IntEnum):
    """How an operand contributes to an edge."""
    NOT_PART = -1  # Operand has no edge here
    LINE = 1       # Edge of a linear operand
    BOUNDARY = 2   # Edge on the boundary of a polygonal operand
    COLLAPSE = 3   # Polygon ring edge that collapsed to a line under rounding

    @property
    def symbol(self) -> str:
        return _DIMENSION_SYMBOLS.get(self, "#")


_DIMENSION_SYMBOLS = {
    EdgeDimension.LINE: "L",
    EdgeDimension.BOUNDARY: "B",
    EdgeDimension.COLLAPSE: "C",
}


class OperandLabel(ImmutableModel):
    """Topology of an edge relative to one operand, in the edge's forward direction."""
    dim: EdgeDimension = Field(default=EdgeDimension.NOT_PART, description="Operand contribution")
    is_hole: bool = Field(default=False, description="Edge comes from a hole ring")
    loc_left: Location = Field(default=Location.NONE, description="Location on the left")
    loc_right: Location = Field(default=Location.NONE, description="Location on the right")
    loc_line: Location = Field(default=Location.NONE, description="Location of the edge itself")

    @property
    def is_boundary(self) -> bool:
        return self.dim == EdgeDimension.BOUNDARY

    @property
    def is_collapse(self) -> bool:
        return self.dim == EdgeDimension.COLLAPSE

    @property
    def is_known(self) -> bool:
        return self.dim != EdgeDimension.NOT_PART

    def location(self, position: Position, is_forward: bool) -> Location:
        """Get the location on a side of the edge, swapping sides when traversed in reverse."""
        if position is Position.LEFT:
            return self.loc_left if is_forward else self.loc_right
        if position is Position.RIGHT:
            return self.loc_right if is_forward else self.loc_left
        return self.loc_line

    def to_string(self, is_forward: bool) -> str:
        if self.is_boundary:
            text = (self.location(Position.LEFT, is_forward).symbol
                    + self.location(Position.RIGHT, is_forward).symbol)
        else:
            text = self.loc_line.symbol
        if self.is_known:
            text += self.dim.symbol
        if self.is_collapse:
            text += "h" if self.is_hole else "s"
        return text


class OverlayLabel(ImmutableModel):
    """Topology label of an overlay edge for both operands."""
    a: OperandLabel = Field(default_factory=OperandLabel, description="Label for operand A")
    b: OperandLabel = Field(default_factory=OperandLabel, description="Label for operand B")

    def operand(self, index: int) -> OperandLabel:
        if index == 0:
            return self.a
        if index == 1:
            return self.b
        raise IndexError(f"Operand index must be 0 or 1, got {index}")

    def to_string(self, is_forward: bool = True) -> str:
        """
        Render the label for diagnostics, e.g. ``A:ieB/B:-``.

        Boundary edges show their left and right locations followed by ``B``;
        line edges show their own location followed by ``L``; collapsed edges
        add ``C`` and ``h``/``s`` for a hole or shell ring.
        """
        return f"A:{self.a.to_string(is_forward)}/B:{self.b.to_string(is_forward)}"

    def __str__(self) -> str:
        return self.to_string(True)


class OverlayEdge(ImmutableModel):
    """A directed half-edge of the overlay graph."""
    coordinates: Tuple[Coordinate, ...] = Field(description="Vertices of the underlying edge")
    is_forward: bool = Field(default=True, description="Half-edge runs in the direction of its vertices")
    label: OverlayLabel = Field(default_factory=OverlayLabel, description="Topology label")
    is_in_result_area: bool = Field(default=False, description="Half-edge bounds the result area")

    @property
    def coordinates_oriented(self) -> Tuple[Coordinate, ...]:
        """Vertices in the direction of this half-edge."""
        if self.is_forward:
            return self.coordinates
        return self.coordinates[::-1]


class OverlayGraph(ImmutableModel):
    """The half-edges of an overlay graph, in graph order."""
    edges: Tuple[OverlayEdge, ...] = Field(default=(), description="Half-edges of the graph")
