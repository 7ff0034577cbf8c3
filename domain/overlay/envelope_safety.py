"""
Safety margins around operand envelopes.

Noding and rounding can move coordinates slightly, so an envelope used to
clip overlay input has to be padded. Under a floating model the padding is a
fixed fraction of the envelope size; under a fixed model it is a small number
of grid cells.
"""
import logging
from typing import Optional
from domain.geometry.envelope import Envelope
from domain.geometry.precision import PrecisionModel, is_floating
from utils.constants import FLOATING_ENV_EXPAND_FRACTION, SAFE_ENV_EXPAND_FACTOR

logger = logging.getLogger(__name__)


def expand_distance(env: Envelope, pm: Optional[PrecisionModel]) -> float:
    """
    Compute the safety margin for an envelope.

    Args:
        env: The envelope to pad
        pm: The precision model in use (None means floating)

    Returns:
        ``0.1 * min(height, width)`` under a floating model,
        ``3 * grid_size`` under a fixed model
    """
    if is_floating(pm):
        # No grid to go by, so pad by a fraction of the envelope itself
        min_size = min(env.height, env.width)
        return FLOATING_ENV_EXPAND_FRACTION * min_size

    return SAFE_ENV_EXPAND_FACTOR * pm.grid_size


def safe_overlap_envelope(env: Envelope, pm: Optional[PrecisionModel]) -> Envelope:
    """Return a new envelope padded on every side by the safety margin."""
    distance = expand_distance(env, pm)
    safe_env = env.expand_by(distance)
    logger.debug(f"Safe envelope {safe_env} (margin {distance}) for {env}")
    return safe_env
