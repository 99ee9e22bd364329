"""
Exceptions raised by the editing core.
"""


class NoFilenameError(IOError):
    """Raised when a buffer is saved without a target filename."""

    def __init__(self, message: str = 'No filename set for buffer') -> None:
        super().__init__(message)
