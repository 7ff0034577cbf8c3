import logging
from typing_extensions import assert_never
from domain.geometry.dimension import Dimension
from domain.geometry.factory import GeometryFactory
from domain.geometry.geometry import Geometry
from domain.overlay.input_geometry import InputGeometry
from domain.overlay.op_code import OverlayOp
from utils.errors import should_never_reach_here

logger = logging.getLogger(__name__)


def result_dimension(op_code: OverlayOp, dim_a: Dimension, dim_b: Dimension) -> Dimension:
    """
    Compute the dimension of the result of an operation on inputs of the
    given dimensions.

    - INTERSECTION: the lower input dimension
    - UNION: the higher input dimension
    - DIFFERENCE: the dimension of A
    - SYMDIFFERENCE: the higher input dimension, since
      ``SymDiff(A, B) = Union(Diff(A, B), Diff(B, A))``

    This assumes the inputs do not collapse completely under rounding.
    Checking that would need the rounded coordinates, which are not known
    here, so callers must only rely on the result when collapse is ruled out.
    """
    if op_code is OverlayOp.INTERSECTION:
        return min(dim_a, dim_b)
    if op_code is OverlayOp.UNION:
        return max(dim_a, dim_b)
    if op_code is OverlayOp.DIFFERENCE:
        return dim_a
    if op_code is OverlayOp.SYMDIFFERENCE:
        return max(dim_a, dim_b)
    assert_never(op_code)


def create_empty_result(dim: Dimension, geometry_factory: GeometryFactory) -> Geometry:
    """
    Create an empty atomic geometry of a dimension.

    The result is never a collection: an empty Point, LineString or Polygon.

    Args:
        dim: POINT, CURVE or SURFACE
        geometry_factory: The factory of the operation

    Returns:
        An empty geometry of the requested dimension

    Raises:
        AssertionFailedError: If the dimension is not one of the above. This
            is a defect in the caller's dimension algebra and is not
            recoverable.
    """
    if dim == Dimension.POINT:
        return geometry_factory.create_point()
    if dim == Dimension.CURVE:
        return geometry_factory.create_line_string()
    if dim == Dimension.SURFACE:
        return geometry_factory.create_polygon()

    logger.error(f"Cannot create an empty result of dimension {dim!r}")
    should_never_reach_here("Unable to determine overlay result geometry dimension")


def empty_result_for(op_code: OverlayOp, input_geom: InputGeometry,
                     geometry_factory: GeometryFactory) -> Geometry:
    """Create the empty result of an operation on a pair of operands."""
    dim = result_dimension(op_code, input_geom.get_dimension(0), input_geom.get_dimension(1))
    logger.debug(f"Empty {op_code.name} result has dimension {dim.symbol}")
    return create_empty_result(dim, geometry_factory)
