"""Core step type and searcher protocols for strpat.

The stepping contract is shared by every searcher:
- SearchStep is the tagged result of one unit of work (Match, Reject, Done)
- Searcher walks the haystack from the front
- ReverseSearcher adds walking from the back
- DoubleEndedSearcher marks searchers whose two directions agree

INV: Over one searcher's output up to Done, the Match/Reject ranges are
adjacent, non-overlapping, cover [0, len) exactly once, and every offset
is a UTF-8 character boundary of the haystack. Consumers may slice with
these offsets directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from strpat._utf8 import is_char_boundary

# A haystack is text, or bytes already known to be valid UTF-8.
type Haystack = str | bytes


@dataclass(frozen=True, slots=True)
class Match:
    """``haystack[start:end]`` matches the pattern (byte offsets)."""

    start: int
    end: int

    def slice(self, buf: bytes) -> bytes:
        assert is_char_boundary(buf, self.start), self.start
        assert is_char_boundary(buf, self.end), self.end
        return buf[self.start : self.end]


@dataclass(frozen=True, slots=True)
class Reject:
    """``haystack[start:end]`` cannot match the pattern, even partially.

    There may be several Rejects between two Matches; they are not
    required to be merged.
    """

    start: int
    end: int

    def slice(self, buf: bytes) -> bytes:
        assert is_char_boundary(buf, self.start), self.start
        assert is_char_boundary(buf, self.end), self.end
        return buf[self.start : self.end]


@dataclass(frozen=True, slots=True)
class Done:
    """Every byte of the haystack has been visited."""


DONE = Done()

type SearchStep = Match | Reject | Done


@runtime_checkable
class CharClassifier(Protocol):
    """Decide whether a single character matches.

    ``is_ascii_only()`` is a hint, not a correctness requirement: True
    only if every character the classifier could match is one byte wide.
    """

    def matches(self, ch: str, /) -> bool: ...

    def is_ascii_only(self) -> bool: ...


@runtime_checkable
class Searcher(Protocol):
    """Search for non-overlapping matches starting from the front.

    ``next()`` performs exactly one step. The derived helpers skip the
    variant they are not interested in.
    """

    @property
    def haystack(self) -> Haystack: ...

    def next(self) -> SearchStep: ...

    def next_match(self) -> tuple[int, int] | None:
        """Step forward until a Match; None once Done."""
        while True:
            match self.next():
                case Match(start=a, end=b):
                    return a, b
                case Done():
                    return None

    def next_reject(self) -> tuple[int, int] | None:
        """Step forward until a Reject; None once Done."""
        while True:
            match self.next():
                case Reject(start=a, end=b):
                    return a, b
                case Done():
                    return None


@runtime_checkable
class ReverseSearcher(Searcher, Protocol):
    """Search for non-overlapping matches starting from the back.

    The ranges from ``next_back()`` need not be the reverse of those from
    ``next()``: ``"aa"`` in ``"aaa"`` is ``[aa]a`` forward and ``a[aa]``
    backward.
    """

    def next_back(self) -> SearchStep: ...

    def next_match_back(self) -> tuple[int, int] | None:
        """Step backward until a Match; None once Done."""
        while True:
            match self.next_back():
                case Match(start=a, end=b):
                    return a, b
                case Done():
                    return None

    def next_reject_back(self) -> tuple[int, int] | None:
        """Step backward until a Reject; None once Done."""
        while True:
            match self.next_back():
                case Reject(start=a, end=b):
                    return a, b
                case Done():
                    return None


class DoubleEndedSearcher(ReverseSearcher):
    """Marker: ``next_back()`` yields exactly the ``next()`` ranges, reversed.

    The two cursors behave as the ends of one range and never walk past
    each other. Nominal: a searcher qualifies only by inheriting from
    this class, never by shape alone.
    """


def is_double_ended(searcher: Searcher) -> bool:
    """Check whether a searcher may drive symmetric iteration."""
    return isinstance(searcher, DoubleEndedSearcher)
