import logging
from typing import Optional
from typing_extensions import assert_never
from domain.geometry.envelope import Envelope
from domain.geometry.precision import PrecisionModel
from domain.overlay.envelope_safety import safe_overlap_envelope
from domain.overlay.input_geometry import InputGeometry
from domain.overlay.op_code import OverlayOp

logger = logging.getLogger(__name__)


def clipping_envelope(op_code: OverlayOp, input_geom: InputGeometry,
                      pm: Optional[PrecisionModel]) -> Optional[Envelope]:
    """
    Choose the region that operand geometry can safely be clipped to.

    Only input inside this region can affect the result of the operation:
    - INTERSECTION: the overlap of the padded envelopes of A and B
    - DIFFERENCE: the padded envelope of A (B outside it cannot change A - B)
    - UNION, SYMDIFFERENCE: every part of both operands may appear in the
      result, so no clipping is possible

    Args:
        op_code: The overlay operation
        input_geom: The operand pair
        pm: The precision model in use (None means floating)

    Returns:
        The clipping envelope, or None if the operands must not be clipped
    """
    if op_code is OverlayOp.INTERSECTION:
        env_a = safe_overlap_envelope(input_geom.get_envelope(0), pm)
        env_b = safe_overlap_envelope(input_geom.get_envelope(1), pm)
        clip_env = env_a.intersection(env_b)
    elif op_code is OverlayOp.DIFFERENCE:
        clip_env = safe_overlap_envelope(input_geom.get_envelope(0), pm)
    elif op_code is OverlayOp.UNION or op_code is OverlayOp.SYMDIFFERENCE:
        clip_env = None
    else:
        assert_never(op_code)

    logger.debug(f"Clipping envelope for {op_code.name}: {clip_env}")
    return clip_env
