"""Text queries driven purely through the step protocol.

These are thin consumers: they build a searcher from a pattern and pull
steps from it. All offsets are byte offsets into the UTF-8 encoding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from strpat._patterns import as_pattern
from strpat._types import ReverseSearcher, is_double_ended

if TYPE_CHECKING:
    from collections.abc import Iterator

    from strpat._types import Haystack, Searcher


def contains(haystack: Haystack, pattern: Any) -> bool:
    """True if ``pattern`` matches anywhere in ``haystack``."""
    return as_pattern(pattern).is_contained_in(haystack)


def starts_with(haystack: Haystack, pattern: Any) -> bool:
    """True if ``pattern`` matches at the front of ``haystack``."""
    return as_pattern(pattern).is_prefix_of(haystack)


def ends_with(haystack: Haystack, pattern: Any) -> bool:
    """True if ``pattern`` matches at the back of ``haystack``."""
    return as_pattern(pattern).is_suffix_of(haystack)


def find(haystack: Haystack, pattern: Any) -> int | None:
    """Byte offset of the first match, or None."""
    found = as_pattern(pattern).into_searcher(haystack).next_match()
    return found[0] if found is not None else None


def rfind(haystack: Haystack, pattern: Any) -> int | None:
    """Byte offset of the last match (searching from the back), or None."""
    found = _reverse(as_pattern(pattern).into_searcher(haystack)).next_match_back()
    return found[0] if found is not None else None


def match_indices(haystack: Haystack, pattern: Any) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` of each non-overlapping match, front to back."""
    return iter(Matches(as_pattern(pattern).into_searcher(haystack)))


def rmatch_indices(haystack: Haystack, pattern: Any) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` of each non-overlapping match, back to front.

    For Substring patterns the matches may differ from ``match_indices``
    reversed, because overlapping candidates are resolved from the back.
    """
    return _drain_back(_reverse(as_pattern(pattern).into_searcher(haystack)))


def _drain_back(searcher: ReverseSearcher) -> Iterator[tuple[int, int]]:
    while (found := searcher.next_match_back()) is not None:
        yield found


class Matches:
    """Iterator over match ranges of one searcher.

    ``next_back()`` and ``reversed()`` are only available for
    double-ended searchers; both ends then share the searcher's cursors
    and never cross.
    """

    def __init__(self, searcher: Searcher) -> None:
        self._searcher = searcher

    def __iter__(self) -> Matches:
        return self

    def __next__(self) -> tuple[int, int]:
        found = self._searcher.next_match()
        if found is None:
            raise StopIteration
        return found

    def next_back(self) -> tuple[int, int] | None:
        """Take the last remaining match, or None when exhausted.

        Raises:
            TypeError: If the searcher is not double-ended.
        """
        return self._double_ended().next_match_back()

    def __reversed__(self) -> Iterator[tuple[int, int]]:
        return _drain_back(self._double_ended())

    def _double_ended(self) -> ReverseSearcher:
        if not is_double_ended(self._searcher):
            msg = (
                f"{type(self._searcher).__name__} is not double-ended; "
                "use rmatch_indices() to search from the back"
            )
            raise TypeError(msg)
        return self._searcher  # type: ignore[return-value]


def matches(haystack: Haystack, pattern: Any) -> Matches:
    """Matches iterator for ``pattern`` over ``haystack``."""
    return Matches(as_pattern(pattern).into_searcher(haystack))


def _reverse(searcher: Searcher) -> ReverseSearcher:
    if not isinstance(searcher, ReverseSearcher):
        msg = f"{type(searcher).__name__} does not support backward search"
        raise TypeError(msg)
    return searcher
