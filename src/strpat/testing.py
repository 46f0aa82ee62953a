"""Test utilities for strpat.

Helpers for driving a searcher to completion and checking its output
against the step contract. Useful when writing a new searcher, or when
testing code that consumes steps.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from strpat._types import Done, Match, Reject
from strpat._utf8 import encode_haystack, is_char_boundary

if TYPE_CHECKING:
    from strpat._types import Haystack, ReverseSearcher, Searcher, SearchStep


def collect_steps(searcher: Searcher) -> list[SearchStep]:
    """Step forward until Done; the Done itself is not included.

    >>> from strpat import Substring
    >>> collect_steps(Substring("aa").into_searcher("aaa"))
    [Match(start=0, end=2), Reject(start=2, end=3)]
    """
    steps: list[SearchStep] = []
    while not isinstance(step := searcher.next(), Done):
        steps.append(step)
    return steps


def collect_steps_back(searcher: ReverseSearcher) -> list[SearchStep]:
    """Step backward until Done, in emission order (tail first)."""
    steps: list[SearchStep] = []
    while not isinstance(step := searcher.next_back(), Done):
        steps.append(step)
    return steps


def check_partition(haystack: Haystack, steps: list[SearchStep], *, backward: bool = False) -> None:
    """Assert that steps partition the haystack on character boundaries.

    ``steps`` is in emission order; pass ``backward=True`` for the
    output of ``next_back()``.

    Raises:
        AssertionError: On a gap, overlap, inverted range, or an offset
            that is not a character boundary.
    """
    buf = encode_haystack(haystack)
    ordered = list(reversed(steps)) if backward else list(steps)
    pos = 0
    for step in ordered:
        assert isinstance(step, Match | Reject), f"unexpected step {step!r}"
        assert step.start == pos, f"{step!r} does not start at {pos}"
        assert step.start <= step.end, f"{step!r} is inverted"
        assert is_char_boundary(buf, step.start), f"{step!r} start splits a character"
        assert is_char_boundary(buf, step.end), f"{step!r} end splits a character"
        pos = step.end
    assert pos == len(buf), f"steps stop at {pos}, haystack is {len(buf)} bytes"
