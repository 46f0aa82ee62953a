"""Classifier-driven searcher.

Turns a per-character yes/no answer into the step protocol. Each step
consumes one whole decoded character, so every offset is a character
boundary and the output trivially partitions the haystack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from strpat._types import DONE, DoubleEndedSearcher, Match, Reject
from strpat._utf8 import decode_at, decode_before, encode_haystack

if TYPE_CHECKING:
    from strpat._types import CharClassifier, Haystack, SearchStep


class CharSearcher(DoubleEndedSearcher):
    """Searcher for Char, CharSet and CharPredicate patterns.

    ``_front`` is the start of the next unvisited character from the
    front, ``_back`` the end of the next unvisited character from the
    back. Both directions stop when they meet.
    """

    def __init__(self, classifier: CharClassifier, haystack: Haystack) -> None:
        self._classifier = classifier
        self._haystack = haystack
        self._buf = encode_haystack(haystack)
        self._front = 0
        self._back = len(self._buf)
        self.ascii_only = classifier.is_ascii_only()

    def __repr__(self) -> str:
        return (
            f"CharSearcher({self._classifier!r}, front={self._front}, "
            f"back={self._back})"
        )

    @property
    def haystack(self) -> Haystack:
        return self._haystack

    def next(self) -> SearchStep:
        if self._front >= self._back:
            return DONE
        start = self._front
        ch, width = decode_at(self._buf, start)
        self._front = start + width
        if self._classifier.matches(ch):
            return Match(start, self._front)
        return Reject(start, self._front)

    def next_back(self) -> SearchStep:
        if self._back <= self._front:
            return DONE
        end = self._back
        ch, width = decode_before(self._buf, end)
        self._back = end - width
        if self._classifier.matches(ch):
            return Match(self._back, end)
        return Reject(self._back, end)
