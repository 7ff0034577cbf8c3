"""
Tests that decide an overlay result is empty without computing it.

The tests are conservative: they may fail to detect an empty result (two
overlapping envelopes can still have an empty intersection), but they never
report a result as empty when it is not.
"""
import logging
from typing import Optional
from typing_extensions import assert_never
from domain.geometry.envelope import Envelope
from domain.geometry.geometry import Geometry
from domain.geometry.precision import PrecisionModel, is_floating
from domain.overlay.op_code import OverlayOp

logger = logging.getLogger(__name__)


def is_empty(geom: Optional[Geometry]) -> bool:
    """Check if a geometry is absent or empty."""
    return geom is None or geom.is_empty


def is_empty_result(op_code: OverlayOp, a: Optional[Geometry], b: Optional[Geometry],
                    pm: Optional[PrecisionModel]) -> bool:
    """
    Test if the result of an operation is determined to be empty by simple
    properties of the inputs (emptiness, disjoint envelopes).

    Args:
        op_code: The overlay operation
        a: The A operand (may be None)
        b: The B operand (may be None)
        pm: The precision model in use (None means floating)

    Returns:
        True if the overlay result is certainly empty
    """
    if op_code is OverlayOp.INTERSECTION:
        result = is_env_disjoint(a, b, pm)
    elif op_code is OverlayOp.DIFFERENCE:
        result = is_empty(a)
    elif op_code is OverlayOp.UNION or op_code is OverlayOp.SYMDIFFERENCE:
        result = is_empty(a) and is_empty(b)
    else:
        assert_never(op_code)

    if result:
        logger.debug(f"{op_code.name} result is trivially empty")
    return result


def is_env_disjoint(a: Optional[Geometry], b: Optional[Geometry],
                    pm: Optional[PrecisionModel]) -> bool:
    """
    Test if the operand envelopes are disjoint, or either operand is empty.

    The test takes the precision model into account, since coordinates may
    shift under rounding.
    """
    if is_empty(a) or is_empty(b):
        return True
    if is_floating(pm):
        return a.envelope.disjoint(b.envelope)
    return is_disjoint(a.envelope, b.envelope, pm)


def is_disjoint(env_a: Envelope, env_b: Envelope, pm: PrecisionModel) -> bool:
    """
    Test for disjoint envelopes after rounding their bounds with a fixed
    precision model. Both envelopes must be non-null.
    """
    if pm.make_precise(env_b.min_x) > pm.make_precise(env_a.max_x):
        return True
    if pm.make_precise(env_b.max_x) < pm.make_precise(env_a.min_x):
        return True
    if pm.make_precise(env_b.min_y) > pm.make_precise(env_a.max_y):
        return True
    if pm.make_precise(env_b.max_y) < pm.make_precise(env_a.min_y):
        return True
    return False
