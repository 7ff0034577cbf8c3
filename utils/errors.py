from typing import NoReturn, Optional


class AssertionFailedError(AssertionError):
    """Exception raised when an internal contract of the overlay code is broken.

    This signals a defect in the calling code (for example an impossible
    result dimension), never a problem with the input data. It must not be
    caught and recovered from.

    Attributes:
        message -- explanation of the broken contract
    """

    def __init__(self, message: Optional[str] = None):
        if message is None:
            message = "Should never reach here"
        self.message = message
        super().__init__(self.message)


def should_never_reach_here(message: Optional[str] = None) -> NoReturn:
    """Abort on a code path that a correct caller can never take."""
    raise AssertionFailedError(message)
