import pytest
from domain.geometry.coordinate import Coordinate
from domain.overlay.graph import (
    EdgeDimension,
    Location,
    OperandLabel,
    OverlayEdge,
    OverlayGraph,
    OverlayLabel,
    Position,
)


class TestOperandLabel:
    def test_defaults_to_not_part(self):
        label = OperandLabel()
        assert not label.is_known
        assert not label.is_boundary
        assert label.to_string(True) == "-"

    def test_boundary_locations_swap_in_reverse(self):
        label = OperandLabel(dim=EdgeDimension.BOUNDARY, loc_left=Location.INTERIOR,
                             loc_right=Location.EXTERIOR, loc_line=Location.BOUNDARY)
        assert label.location(Position.LEFT, True) is Location.INTERIOR
        assert label.location(Position.LEFT, False) is Location.EXTERIOR
        assert label.location(Position.RIGHT, False) is Location.INTERIOR
        assert label.location(Position.ON, False) is Location.BOUNDARY

    def test_line_string(self):
        label = OperandLabel(dim=EdgeDimension.LINE, loc_line=Location.EXTERIOR)
        assert label.to_string(True) == "eL"
        assert label.to_string(False) == "eL"

    def test_collapse_string(self):
        shell = OperandLabel(dim=EdgeDimension.COLLAPSE, loc_line=Location.INTERIOR)
        hole = OperandLabel(dim=EdgeDimension.COLLAPSE, loc_line=Location.INTERIOR, is_hole=True)
        assert shell.is_collapse
        assert shell.to_string(True) == "iCs"
        assert hole.to_string(True) == "iCh"


class TestOverlayLabel:
    def test_to_string(self):
        label = OverlayLabel(
            a=OperandLabel(dim=EdgeDimension.BOUNDARY, loc_left=Location.EXTERIOR, loc_right=Location.INTERIOR),
            b=OperandLabel(dim=EdgeDimension.BOUNDARY, loc_left=Location.INTERIOR, loc_right=Location.INTERIOR),
        )
        assert label.to_string(True) == "A:eiB/B:iiB"
        assert label.to_string(False) == "A:ieB/B:iiB"
        assert str(label) == "A:eiB/B:iiB"

    def test_operand(self):
        label = OverlayLabel(b=OperandLabel(dim=EdgeDimension.LINE))
        assert label.operand(0).dim is EdgeDimension.NOT_PART
        assert label.operand(1).dim is EdgeDimension.LINE
        with pytest.raises(IndexError):
            label.operand(2)


class TestOverlayEdge:
    def test_coordinates_oriented(self):
        coords = (Coordinate(x=0.0, y=0.0), Coordinate(x=1.0, y=0.0), Coordinate(x=1.0, y=1.0))
        forward = OverlayEdge(coordinates=coords, is_forward=True)
        backward = OverlayEdge(coordinates=coords, is_forward=False)

        assert forward.coordinates_oriented == coords
        assert backward.coordinates_oriented == coords[::-1]
        # Underlying coordinates are shared, not reversed in place
        assert backward.coordinates == coords

    def test_graph_keeps_edge_order(self):
        edges = tuple(
            OverlayEdge(coordinates=(Coordinate(x=float(i), y=0.0), Coordinate(x=float(i + 1), y=0.0)))
            for i in range(4)
        )
        graph = OverlayGraph(edges=edges)
        assert graph.edges == edges
