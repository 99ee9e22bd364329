"""
File type detection and per-language highlighting options.

Languages are resolved from the filename through the pygments lexer registry
and mapped onto the closed set of file types the tokenizer knows about.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Final, Iterable, Optional

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HighlightingOptions:
    """Category toggles and keyword sets for one language."""

    numbers: bool = False
    strings: bool = False
    characters: bool = False
    comments: bool = False
    punctuation: bool = False
    primary_keywords: FrozenSet[str] = field(default_factory=frozenset)
    secondary_keywords: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        overlap = self.primary_keywords & self.secondary_keywords
        if overlap:
            raise ValueError(f"Keywords listed as both primary and secondary: {sorted(overlap)}")


def _keywords(words: str) -> FrozenSet[str]:
    return frozenset(words.split())


def _code_options(primary: Iterable[str], secondary: Iterable[str],
                  comments: bool = True) -> HighlightingOptions:
    return HighlightingOptions(
        numbers=True,
        strings=True,
        characters=True,
        comments=comments,
        punctuation=True,
        primary_keywords=frozenset(primary),
        secondary_keywords=frozenset(secondary),
    )


class FileType(Enum):
    """Supported languages. Values match the pygments lexer names."""

    PLAIN = 'No filetype'
    RUST = 'Rust'
    C = 'C'
    CPP = 'C++'
    PYTHON = 'Python'
    JAVASCRIPT = 'JavaScript'
    GO = 'Go'

    def __str__(self) -> str:
        return self.value

    @property
    def options(self) -> HighlightingOptions:
        """Highlighting options for this file type."""

        return FILE_TYPE_OPTIONS.get(self, DEFAULT_OPTIONS)

    @classmethod
    def from_filename(cls, filename: Optional[str]) -> 'FileType':
        """
        Resolve the file type for a filename.

        Args:
            filename: Path or bare name of the file, may be None for new buffers

        Returns:
            The matching file type, or PLAIN when the language is unknown
        """

        if not filename:
            return cls.PLAIN

        try:
            lexer = get_lexer_for_filename(filename)
        except ClassNotFound:
            logger.debug("No lexer registered for %s", filename)
            return cls.PLAIN

        try:
            return cls(lexer.name)
        except ValueError:
            logger.debug("Lexer %s for %s has no highlighting rules", lexer.name, filename)
            return cls.PLAIN


DEFAULT_OPTIONS: Final[HighlightingOptions] = HighlightingOptions()

RUST_PRIMARY: Final[FrozenSet[str]] = _keywords("""
    as async await break const continue crate dyn else enum extern false fn for
    if impl in let loop match mod move mut pub ref return self Self static struct
    super trait true type unsafe use where while abstract become box do final
    macro override priv try typeof unsized virtual yield
""")
RUST_SECONDARY: Final[FrozenSet[str]] = _keywords("""
    bool char i8 i16 i32 i64 i128 isize u8 u16 u32 u64 u128 usize f32 f64 str
    String Vec Option Result Some None Ok Err Box
""")

C_PRIMARY: Final[FrozenSet[str]] = _keywords("""
    auto break case const continue default do else enum extern for goto if
    inline register restrict return sizeof static struct switch typedef union
    volatile while
""")
C_SECONDARY: Final[FrozenSet[str]] = _keywords("""
    char double float int long short signed unsigned void size_t bool NULL
""")

CPP_PRIMARY: Final[FrozenSet[str]] = C_PRIMARY | _keywords("""
    catch class constexpr delete explicit friend mutable namespace new noexcept
    nullptr operator private protected public template this throw try typename
    using virtual true false
""")
CPP_SECONDARY: Final[FrozenSet[str]] = (C_SECONDARY | _keywords("""
    auto_ptr string vector map set unique_ptr shared_ptr wchar_t
""")) - CPP_PRIMARY

PYTHON_PRIMARY: Final[FrozenSet[str]] = _keywords("""
    and as assert async await break class continue def del elif else except
    finally for from global if import in is lambda nonlocal not or pass raise
    return try while with yield True False None
""")
PYTHON_SECONDARY: Final[FrozenSet[str]] = _keywords("""
    bool bytes dict float int list object set str tuple self cls print len range
""")

JAVASCRIPT_PRIMARY: Final[FrozenSet[str]] = _keywords("""
    async await break case catch class const continue debugger default delete do
    else export extends finally for function if import in instanceof let new
    return super switch this throw try typeof var void while with yield
""")
JAVASCRIPT_SECONDARY: Final[FrozenSet[str]] = _keywords("""
    true false null undefined NaN Infinity Array Object String Number Boolean
    Promise Map Set console
""")

GO_PRIMARY: Final[FrozenSet[str]] = _keywords("""
    break case chan const continue default defer else fallthrough for func go
    goto if import interface map package range return select struct switch type
    var
""")
GO_SECONDARY: Final[FrozenSet[str]] = _keywords("""
    bool byte complex64 complex128 error float32 float64 int int8 int16 int32
    int64 rune string uint uint8 uint16 uint32 uint64 uintptr true false nil iota
""")

FILE_TYPE_OPTIONS: Final[Dict[FileType, HighlightingOptions]] = {
    FileType.RUST: _code_options(RUST_PRIMARY, RUST_SECONDARY),
    FileType.C: _code_options(C_PRIMARY, C_SECONDARY),
    FileType.CPP: _code_options(CPP_PRIMARY, CPP_SECONDARY),
    # '#' comments are not tokenized and '//' is floor division
    FileType.PYTHON: _code_options(PYTHON_PRIMARY, PYTHON_SECONDARY, comments=False),
    FileType.JAVASCRIPT: _code_options(JAVASCRIPT_PRIMARY, JAVASCRIPT_SECONDARY),
    FileType.GO: _code_options(GO_PRIMARY, GO_SECONDARY),
}


def highlighting_options(file_type: Optional[FileType]) -> HighlightingOptions:
    """Look up the options for a file type, falling back to everything disabled."""

    if file_type is None:
        return DEFAULT_OPTIONS

    return file_type.options
