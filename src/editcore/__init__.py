"""
EditCore - line buffer and syntax highlighting core for terminal text editors.
"""

from .core import (
    Buffer,
    FileType,
    HighlightKind,
    Line,
    NoFilenameError,
    Position,
    SearchDirection,
    tokenize,
)

__version__ = '0.1.0'

__all__ = [
    'Buffer',
    'FileType',
    'HighlightKind',
    'Line',
    'NoFilenameError',
    'Position',
    'SearchDirection',
    'tokenize',
]
