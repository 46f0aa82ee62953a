"""Tests for the protocol-driven text queries."""

import pytest

from strpat import (
    Char,
    CharSet,
    Matches,
    Substring,
    contains,
    ends_with,
    find,
    match_indices,
    matches,
    rfind,
    rmatch_indices,
    starts_with,
)


class TestBooleanQueries:
    def test_contains(self) -> None:
        assert contains("baz", "a") is True
        assert contains("baz", "x") is False

    def test_starts_with(self) -> None:
        assert starts_with("baz", "ba") is True
        assert starts_with("baz", Char("a")) is False

    def test_ends_with(self) -> None:
        assert ends_with("baz", "az") is True
        assert ends_with("baz", str.isdigit) is False


class TestFind:
    def test_find_first(self) -> None:
        assert find("abcabc", "bc") == 1

    def test_rfind_last(self) -> None:
        assert rfind("abcabc", "bc") == 4

    def test_byte_offsets(self) -> None:
        assert find("héllo", "l") == 3
        assert rfind("héllo", Char("l")) == 4

    def test_not_found(self) -> None:
        assert find("abc", "x") is None
        assert rfind("abc", "x") is None

    def test_empty_needle(self) -> None:
        assert find("abc", "") == 0
        assert rfind("abc", "") == 3


class TestMatchIndices:
    def test_forward_non_overlapping(self) -> None:
        assert list(match_indices("aaaa", "aa")) == [(0, 2), (2, 4)]

    def test_direction_changes_overlap_choice(self) -> None:
        assert list(match_indices("aaa", "aa")) == [(0, 2)]
        assert list(rmatch_indices("aaa", "aa")) == [(1, 3)]

    def test_char_set(self) -> None:
        assert list(match_indices("a,b;c", CharSet(",;"))) == [(1, 2), (3, 4)]


class TestMatches:
    def test_iterates_forward(self) -> None:
        assert list(matches("a,b,c", Char(","))) == [(1, 2), (3, 4)]

    def test_both_ends(self) -> None:
        m = matches("a,b,c,d", Char(","))
        assert m.next_back() == (5, 6)
        assert next(m) == (1, 2)
        assert next(m) == (3, 4)
        assert m.next_back() is None
        with pytest.raises(StopIteration):
            next(m)

    def test_reversed(self) -> None:
        assert list(reversed(matches("a,b,c", Char(",")))) == [(3, 4), (1, 2)]

    def test_literal_refuses_backward(self) -> None:
        m = Matches(Substring("aa").into_searcher("aaa"))
        with pytest.raises(TypeError, match="not double-ended"):
            m.next_back()
        with pytest.raises(TypeError):
            reversed(m)
