"""Naive, non-allocating substring search.

The needle is compared against raw byte windows, but a mismatch only
ever skips one decoded character. That keeps Reject boundaries on
character boundaries even though the comparison may straddle several
characters.

The empty needle matches at every character boundary, including both
ends of the haystack. Between two such zero-length matches the character
in between is rejected, so the stream still covers the haystack:
``""`` in ``"ab"`` is Match(0, 0), Reject(0, 1), Match(1, 1), Reject(1, 2),
Match(2, 2).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from strpat._types import DONE, Match, Reject, ReverseSearcher
from strpat._utf8 import decode_at, decode_before, encode_haystack

if TYPE_CHECKING:
    from collections.abc import Callable

    from strpat._types import Haystack, SearchStep


class StrSearcher(ReverseSearcher):
    """Searcher for Substring patterns.

    ``[start, end)`` is the still-unsearched window. Not double-ended:
    ``"aa"`` in ``"aaa"`` splits differently from each side.

    Example (forward), needle ``"aaa"`` in ``"cbaaaaab"``::

        Reject(0, 1), Reject(1, 2), Match(2, 5), Reject(5, 8), Done
    """

    def __init__(self, needle: str | bytes, haystack: Haystack) -> None:
        self._haystack = haystack
        self._buf = encode_haystack(haystack)
        self._needle = encode_haystack(needle)
        self.start = 0
        self.end = len(self._buf)
        self.done = False
        # Empty needle: whether the next step from each side is a Match.
        self._match_fw = True
        self._match_bw = True

    def __repr__(self) -> str:
        return (
            f"StrSearcher({self._needle!r}, start={self.start}, "
            f"end={self.end}, done={self.done})"
        )

    @property
    def haystack(self) -> Haystack:
        return self._haystack

    @property
    def needle(self) -> bytes:
        return self._needle

    def next(self) -> SearchStep:
        return _search_step(self, _empty_step_forward, _nonempty_step_forward)

    def next_back(self) -> SearchStep:
        return _search_step(self, _empty_step_backward, _nonempty_step_backward)


type _Step = Callable[[StrSearcher], SearchStep]


def _search_step(m: StrSearcher, empty_step: _Step, nonempty_step: _Step) -> SearchStep:
    """Control flow shared by forward and backward steps."""
    n = len(m._needle)
    if m.done:
        return DONE
    if n == 0:
        return empty_step(m)
    if m.start + n <= m.end:
        return nonempty_step(m)
    if m.start < m.end:
        # Remainder is shorter than the needle.
        m.done = True
        return Reject(m.start, m.end)
    m.done = True
    return DONE


def _empty_step_forward(m: StrSearcher) -> SearchStep:
    if m.start == m.end:
        m.done = True
        # The meeting boundary is owed only if neither side matched it yet.
        if m._match_fw and m._match_bw:
            return Match(m.start, m.start)
        return DONE
    if m._match_fw:
        m._match_fw = False
        return Match(m.start, m.start)
    current = m.start
    m.start += decode_at(m._buf, current)[1]
    m._match_fw = True
    return Reject(current, m.start)


def _empty_step_backward(m: StrSearcher) -> SearchStep:
    if m.start == m.end:
        m.done = True
        if m._match_fw and m._match_bw:
            return Match(m.end, m.end)
        return DONE
    if m._match_bw:
        m._match_bw = False
        return Match(m.end, m.end)
    current = m.end
    m.end -= decode_before(m._buf, current)[1]
    m._match_bw = True
    return Reject(m.end, current)


def _nonempty_step_forward(m: StrSearcher) -> SearchStep:
    current = m.start
    n = len(m._needle)
    if m._buf[current : current + n] == m._needle:
        m.start = current + n
        return Match(current, m.start)
    m.start = current + decode_at(m._buf, current)[1]
    if m.start + n > m.end:
        # No alignment left can hold the needle.
        m.done = True
        return Reject(current, m.end)
    return Reject(current, m.start)


def _nonempty_step_backward(m: StrSearcher) -> SearchStep:
    current = m.end
    n = len(m._needle)
    if m._buf[current - n : current] == m._needle:
        m.end = current - n
        return Match(m.end, current)
    m.end = current - decode_before(m._buf, current)[1]
    if m.start + n > m.end:
        m.done = True
        return Reject(m.start, current)
    return Reject(m.end, current)
