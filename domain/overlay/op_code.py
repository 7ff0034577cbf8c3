from enum import IntEnum


class OverlayOp(IntEnum):
    """
    Boolean set operations computed by overlay.

    Operand order matters for DIFFERENCE (A - B is not B - A); the other
    operations are symmetric.
    """
    INTERSECTION = 1
    UNION = 2
    DIFFERENCE = 3
    SYMDIFFERENCE = 4
