"""Pattern values: the builders that produce searchers.

Patterns form a closed set of variants (Char, CharSet, CharPredicate,
Substring), each a frozen dataclass. The three character classifiers
build a CharSearcher; Substring builds a StrSearcher.

A pattern is consumed conceptually when a searcher is built from it, but
since pattern values are immutable the same value can be turned into any
number of fresh searchers. A CharPredicate's function travels into the
searcher with it, together with any state it closes over.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from strpat._char_searcher import CharSearcher
from strpat._str_searcher import StrSearcher
from strpat._types import Match, ReverseSearcher

if TYPE_CHECKING:
    from collections.abc import Iterable

    from strpat._types import Haystack, Searcher


class PatternError(Exception):
    """Errors from pattern construction and loading."""


class PatternLike(Protocol):
    """Build a searcher for a haystack; derive simple queries from it.

    Finding nothing is never an error: the queries just return False.
    """

    def into_searcher(self, haystack: Haystack, /) -> Searcher: ...

    def is_contained_in(self, haystack: Haystack, /) -> bool:
        """True if the pattern matches anywhere in the haystack."""
        return self.into_searcher(haystack).next_match() is not None

    def is_prefix_of(self, haystack: Haystack, /) -> bool:
        """True if the first forward step is a Match at offset 0."""
        match self.into_searcher(haystack).next():
            case Match(start=0):
                return True
        return False

    def is_suffix_of(self, haystack: Haystack, /) -> bool:
        """True if the first backward step is a Match ending at len.

        Raises:
            TypeError: If this pattern's searcher cannot search backward.
        """
        searcher = self.into_searcher(haystack)
        if not isinstance(searcher, ReverseSearcher):
            msg = f"{type(searcher).__name__} does not support backward search"
            raise TypeError(msg)
        match searcher.next_back():
            case Match(end=end) if end == _byte_len(haystack):
                return True
        return False


def _byte_len(haystack: Haystack) -> int:
    if isinstance(haystack, str):
        return len(haystack.encode("utf-8"))
    return len(haystack)


def _check_single_char(value: Any, what: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        msg = f"{what} must be a single character, got {value!r}"
        raise PatternError(msg)


@dataclass(frozen=True, slots=True)
class Char(PatternLike):
    """Matches one specific character."""

    ch: str

    def __post_init__(self) -> None:
        _check_single_char(self.ch, "Char")

    def matches(self, ch: str, /) -> bool:
        return ch == self.ch

    def is_ascii_only(self) -> bool:
        return ord(self.ch) < 128

    def into_searcher(self, haystack: Haystack, /) -> CharSearcher:
        return CharSearcher(self, haystack)


@dataclass(frozen=True, slots=True)
class CharSet(PatternLike):
    """Matches any character of a set.

    Accepts any iterable of single characters, including a plain string
    (``CharSet("abc")``). Members are stored as a frozenset.
    """

    chars: frozenset[str]

    def __init__(self, chars: Iterable[str]) -> None:
        members = frozenset(chars)
        for ch in members:
            _check_single_char(ch, "CharSet member")
        object.__setattr__(self, "chars", members)

    def matches(self, ch: str, /) -> bool:
        return ch in self.chars

    def is_ascii_only(self) -> bool:
        return all(ord(ch) < 128 for ch in self.chars)

    def into_searcher(self, haystack: Haystack, /) -> CharSearcher:
        return CharSearcher(self, haystack)


@dataclass(frozen=True, slots=True)
class CharPredicate(PatternLike):
    """Matches every character for which ``func`` returns true.

    The predicate is opaque, so it never reports ascii-only.
    """

    func: Callable[[str], Any]
    name: str = field(default="", compare=False)

    def matches(self, ch: str, /) -> bool:
        return bool(self.func(ch))

    def is_ascii_only(self) -> bool:
        return False

    def into_searcher(self, haystack: Haystack, /) -> CharSearcher:
        return CharSearcher(self, haystack)


@dataclass(frozen=True, slots=True)
class Substring(PatternLike):
    """Matches a literal piece of text.

    The empty string matches at every character boundary.
    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            msg = f"Substring text must be a str, got {type(self.text).__name__}"
            raise PatternError(msg)

    def into_searcher(self, haystack: Haystack, /) -> StrSearcher:
        return StrSearcher(self.text, haystack)


type Pattern = Char | CharSet | CharPredicate | Substring

_PATTERN_TYPES = (Char, CharSet, CharPredicate, Substring)


def as_pattern(value: Any) -> Pattern:
    """Coerce a plain Python value into a pattern.

    - a pattern passes through unchanged
    - ``str`` becomes a Substring (wrap in Char for a single character)
    - a set, frozenset, list or tuple of characters becomes a CharSet
    - any other callable becomes a CharPredicate

    Raises:
        PatternError: If the value cannot be used as a pattern.
    """
    match value:
        case Char() | CharSet() | CharPredicate() | Substring():
            return value
        case str():
            return Substring(value)
        case set() | frozenset() | list() | tuple():
            return CharSet(value)
    if callable(value):
        return CharPredicate(value)
    msg = f"cannot use {type(value).__name__} as a pattern"
    raise PatternError(msg)
