"""Search benchmarks for strpat (Pure Python).

Measures full-stream stepping cost per pattern kind, and the naive
literal search on its worst case (long near-miss prefix).

Run: uv run pytest tests/bench/test_bench_search.py --benchmark-only
"""

from __future__ import annotations

from strpat import Char, CharPredicate, CharSet, Substring, contains, find, rfind
from strpat.testing import collect_steps, collect_steps_back

# ── Fixtures ─────────────────────────────────────────────────────────────────

ASCII_TEXT = "the quick brown fox jumps over the lazy dog " * 50
MIXED_TEXT = "naïve café – 日本語テキスト 😀 " * 50
NEAR_MISS = "a" * 2000 + "b"


def _drain(pattern, haystack):  # noqa: ANN001, ANN202
    return collect_steps(pattern.into_searcher(haystack))


# ── Classifier searcher ──────────────────────────────────────────────────────


def test_bench_search_char_ascii(benchmark):
    benchmark(_drain, Char("o"), ASCII_TEXT)


def test_bench_search_char_mixed(benchmark):
    benchmark(_drain, Char("é"), MIXED_TEXT)


def test_bench_search_char_set(benchmark):
    benchmark(_drain, CharSet(" –"), MIXED_TEXT)


def test_bench_search_predicate(benchmark):
    benchmark(_drain, CharPredicate(str.isspace), MIXED_TEXT)


def test_bench_search_char_backward(benchmark):
    benchmark(lambda: collect_steps_back(Char("o").into_searcher(ASCII_TEXT)))


# ── Literal searcher ─────────────────────────────────────────────────────────


def test_bench_search_literal_ascii(benchmark):
    benchmark(_drain, Substring("lazy"), ASCII_TEXT)


def test_bench_search_literal_mixed(benchmark):
    benchmark(_drain, Substring("テキスト"), MIXED_TEXT)


def test_bench_search_literal_near_miss(benchmark):
    benchmark(contains, NEAR_MISS, "a" * 50 + "b")


def test_bench_search_empty_needle(benchmark):
    benchmark(_drain, Substring(""), MIXED_TEXT)


# ── Consumers ────────────────────────────────────────────────────────────────


def test_bench_search_find_miss(benchmark):
    benchmark(find, ASCII_TEXT, "cat")


def test_bench_search_rfind_hit(benchmark):
    benchmark(rfind, ASCII_TEXT, "quick")
