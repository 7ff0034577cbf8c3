import logging
from typing import List, Optional, Sequence
from typing_extensions import assert_never
from domain.geometry.coordinate import Coordinate
from domain.geometry.dimension import Dimension
from domain.geometry.factory import GeometryFactory
from domain.geometry.geometry import Geometry
from domain.geometry.line_string import LineString
from domain.geometry.point import Point
from domain.geometry.polygon import Polygon
from domain.geometry.precision import PrecisionModel, is_floating
from domain.overlay.graph import OverlayEdge, OverlayGraph
from domain.overlay.op_code import OverlayOp
from utils.constants import AREA_HEURISTIC_TOLERANCE, RESULT_AREA_LABEL_SUFFIX

logger = logging.getLogger(__name__)


def create_result_geometry(result_polygons: Optional[Sequence[Polygon]],
                           result_lines: Optional[Sequence[LineString]],
                           result_points: Optional[Sequence[Point]],
                           geometry_factory: GeometryFactory) -> Geometry:
    """
    Create an overlay result geometry from its homogeneous or mixed components.

    Element geometries of the result are always in the order polygons,
    lines, points. The components are not validated.

    Args:
        result_polygons: Result polygons (None or empty for none)
        result_lines: Result lines (None or empty for none)
        result_points: Result points (None or empty for none)
        geometry_factory: The factory of the operation

    Returns:
        The most specific geometry holding all the components
    """
    geom_list: List[Geometry] = []
    if result_polygons is not None:
        geom_list.extend(result_polygons)
    if result_lines is not None:
        geom_list.extend(result_lines)
    if result_points is not None:
        geom_list.extend(result_points)

    return geometry_factory.build_geometry(geom_list)


def to_lines(graph: OverlayGraph, include_all_edges: bool,
             geometry_factory: GeometryFactory) -> Geometry:
    """
    Extract the edges of an overlay graph as labelled lines, for debugging.

    Each line carries its edge's label as ``user_data``.

    Args:
        graph: The overlay graph
        include_all_edges: Include every edge, not only those bounding the result area
        geometry_factory: The factory to build lines with

    Returns:
        The lines, in graph order, as the most specific geometry possible
    """
    lines = []
    for edge in graph.edges:
        if not (include_all_edges or edge.is_in_result_area):
            continue
        line = geometry_factory.create_line_string(
            edge.coordinates_oriented,
            user_data=label_for_result(edge),
        )
        lines.append(line)
    logger.debug(f"Extracted {len(lines)} of {len(graph.edges)} graph edges")
    return geometry_factory.build_geometry(lines)


def label_for_result(edge: OverlayEdge) -> str:
    label = edge.label.to_string(edge.is_forward)
    if edge.is_in_result_area:
        label += RESULT_AREA_LABEL_SUFFIX
    return label


def round_point(point: Point, pm: Optional[PrecisionModel]) -> Optional[Coordinate]:
    """
    Round a point's coordinate to the precision grid.

    Returns:
        None for an empty point; otherwise a copy of the coordinate, snapped
        to the grid if the precision model is fixed
    """
    if point.is_empty:
        return None
    p = point.coordinate.model_copy()
    if not is_floating(pm):
        p = pm.make_precise(p)
    return p


def is_result_area_consistent(geom_a: Optional[Geometry], geom_b: Optional[Geometry],
                              op_code: OverlayOp, result: Geometry) -> bool:
    """
    Heuristic check that the area of an overlay result is plausible for the
    operation and the areas of its inputs.

    The check allows a relative tolerance and only applies to polygonal
    results; it is a sanity check for callers, not a proof of correctness.

    Args:
        geom_a: The A operand (may be None)
        geom_b: The B operand (may be None)
        op_code: The overlay operation
        result: The computed result

    Returns:
        False if the result area is clearly inconsistent with the inputs
    """
    if geom_a is None or geom_b is None:
        return True
    if result.dimension < Dimension.SURFACE:
        return True

    area_result = result.area
    area_a = geom_a.area
    area_b = geom_b.area
    tolerance = AREA_HEURISTIC_TOLERANCE

    if op_code is OverlayOp.INTERSECTION:
        is_consistent = (_is_less(area_result, area_a, tolerance)
                         and _is_less(area_result, area_b, tolerance))
    elif op_code is OverlayOp.DIFFERENCE:
        is_consistent = _is_difference_area_consistent(area_a, area_b, area_result, tolerance)
    elif op_code is OverlayOp.SYMDIFFERENCE:
        is_consistent = _is_less(area_result, area_a + area_b, tolerance)
    elif op_code is OverlayOp.UNION:
        is_consistent = (_is_less(area_a, area_result, tolerance)
                         and _is_less(area_b, area_result, tolerance)
                         and _is_greater(area_result, area_a - area_b, tolerance))
    else:
        assert_never(op_code)

    if not is_consistent:
        logger.warning(
            f"{op_code.name} result area {area_result} is inconsistent "
            f"with input areas {area_a} and {area_b}"
        )
    return is_consistent


def _is_difference_area_consistent(area_a: float, area_b: float, area_result: float,
                                   tolerance: float) -> bool:
    if not _is_less(area_result, area_a, tolerance):
        return False
    area_diff_min = area_a - area_b - tolerance * area_a
    return area_result > area_diff_min


def _is_less(v1: float, v2: float, tolerance: float) -> bool:
    return v1 <= v2 * (1 + tolerance)


def _is_greater(v1: float, v2: float, tolerance: float) -> bool:
    return v1 >= v2 * (1 - tolerance)
