"""
Core package for the text editing engine.

This package implements the editing core: the Buffer holding a document as
lines, the Line with its highlight overlays, the syntax tokenizer and the
per-language highlighting options it is driven by.
"""

from .buffer import Buffer
from .errors import NoFilenameError
from .filetype import FileType, HighlightingOptions, highlighting_options
from .line import Line
from .position import Position, SearchDirection
from .syntax import HighlightKind, Token, classify, tokenize

__all__ = [
    'Buffer',
    'FileType',
    'HighlightKind',
    'HighlightingOptions',
    'Line',
    'NoFilenameError',
    'Position',
    'SearchDirection',
    'Token',
    'classify',
    'highlighting_options',
    'tokenize',
]
