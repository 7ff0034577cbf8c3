from enum import IntEnum


class Dimension(IntEnum):
    """
    Topological dimension of a geometry.

    The integer values give the total ordering POINT < CURVE < SURFACE used by
    the overlay dimension algebra. FALSE is a placeholder for "no dimension"
    (an absent geometry or an empty collection) and never takes part in that
    algebra.
    """
    FALSE = -1
    POINT = 0
    CURVE = 1
    SURFACE = 2

    @property
    def symbol(self) -> str:
        """Single-character symbol as used in DE-9IM matrices."""
        if self is Dimension.FALSE:
            return "F"
        return str(self.value)
