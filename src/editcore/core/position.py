"""
Caret addressing shared by lines and buffers.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Position:
    """A caret location: character column within a line and line row."""

    column: int = 0
    row: int = 0


class SearchDirection(Enum):
    FORWARD = 'forward'
    BACKWARD = 'backward'
