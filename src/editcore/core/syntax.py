"""
Syntax tokenizer classifying the content of a single line for highlighting.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Final, Iterable, List

from .filetype import HighlightingOptions


class HighlightKind(Enum):
    """Display classification of a character or token."""

    NONE = 'none'
    NUMBER = 'number'
    MATCH = 'match'
    STRING = 'string'
    CHARACTER = 'character'
    COMMENT = 'comment'
    PRIMARY_KEYWORD = 'primary_keyword'
    SECONDARY_KEYWORD = 'secondary_keyword'
    WHITESPACE = 'whitespace'
    PUNCTUATION = 'punctuation'


# '_' is part of identifiers, not a token boundary
PUNCTUATION: Final[FrozenSet[str]] = frozenset(string.punctuation) - {'_'}
WHITESPACE: Final[FrozenSet[str]] = frozenset(string.whitespace)
DELIMITERS: Final[FrozenSet[str]] = PUNCTUATION | WHITESPACE
QUOTES: Final[FrozenSet[str]] = frozenset('"\'')
COMMENT_START: Final[str] = '//'


@dataclass(frozen=True)
class Token:
    """A classified span of a line."""

    text: str
    kind: HighlightKind

    def __len__(self) -> int:
        return len(self.text)


def _is_number(span: str) -> bool:
    return span.isascii() and span.isdigit()


def _is_quoted(span: str, quote: str) -> bool:
    return len(span) >= 2 and span.startswith(quote) and span.endswith(quote)


def classify(options: HighlightingOptions, span: str) -> HighlightKind:
    """
    Classify one span of text. The first matching rule wins.

    Surrounding whitespace is ignored by the number, string, comment and
    keyword tests; the span itself is never modified.

    Args:
        options: Highlighting options of the current file type
        span: The text to classify

    Returns:
        The highlight kind of the span
    """

    trimmed = span.strip()

    if not trimmed:
        return HighlightKind.WHITESPACE

    if options.numbers and _is_number(trimmed):
        return HighlightKind.NUMBER

    if options.strings and _is_quoted(trimmed, '"'):
        return HighlightKind.STRING

    if options.characters and _is_quoted(span, "'"):
        return HighlightKind.CHARACTER

    if options.comments and trimmed.startswith(COMMENT_START):
        return HighlightKind.COMMENT

    if trimmed in options.primary_keywords:
        return HighlightKind.PRIMARY_KEYWORD

    if trimmed in options.secondary_keywords:
        return HighlightKind.SECONDARY_KEYWORD

    if options.punctuation and len(span) == 1 and span in PUNCTUATION:
        return HighlightKind.PUNCTUATION

    return HighlightKind.NONE


def tokenize(options: HighlightingOptions, text: str) -> List[Token]:
    """
    Split a line into classified tokens.

    Words run until the next punctuation or whitespace character, which is
    emitted as a token of its own. Quoted strings and character literals are
    kept whole including their quotes, and with comments enabled a '//'
    outside a literal turns the rest of the line into one token. Joining the
    token texts always gives back the input line.

    Args:
        options: Highlighting options of the current file type
        text: Line content without the line terminator

    Returns:
        The tokens in line order
    """

    tokens: List[Token] = []

    def emit(span: str) -> None:
        if span:
            tokens.append(Token(span, classify(options, span)))

    start = 0
    quote = None
    escaped = False

    for index, char in enumerate(text):
        if quote is not None:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == quote:
                emit(text[start:index + 1])
                start = index + 1
                quote = None
            continue

        if char not in DELIMITERS:
            continue

        if options.comments and text.startswith(COMMENT_START, index):
            emit(text[start:index])
            emit(text[index:])
            start = len(text)
            break

        emit(text[start:index])

        if char in QUOTES:
            start = index
            quote = char
            continue

        emit(char)
        start = index + 1

    emit(text[start:])

    return tokens


def expand(tokens: Iterable[Token]) -> List[HighlightKind]:
    """Expand token kinds to one entry per character."""

    kinds: List[HighlightKind] = []
    for token in tokens:
        kinds.extend([token.kind] * len(token.text))

    return kinds
