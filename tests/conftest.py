"""Conformance fixture loader for strpat.

Loads YAML fixtures from tests/fixtures/ and converts them to strpat
types. Any test that takes a ``search_case`` argument is parametrized
over every fixture document.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from strpat import (
    Match,
    Reject,
    RegistryBuilder,
    parse_pattern_config,
    register_core_predicates,
)

if TYPE_CHECKING:
    import pytest

    from strpat import Pattern, SearchStep

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class SearchCase:
    """A single search stream from a conformance fixture."""

    fixture_file: str
    name: str
    pattern: Pattern
    haystack: str
    forward: list[SearchStep]
    backward: list[SearchStep]
    double_ended: bool


# ─── YAML → strpat type conversion ─────────────────────────────────────────

_STEP_KINDS = {"match": Match, "reject": Reject}


def parse_step(spec: list[Any]) -> SearchStep:
    """Parse ``[kind, start, end]`` into a Match or Reject."""
    kind, start, end = spec
    if kind not in _STEP_KINDS:
        msg = f"Unknown step kind: {kind!r}"
        raise ValueError(msg)
    return _STEP_KINDS[kind](int(start), int(end))


def _make_registry():  # noqa: ANN202
    return register_core_predicates(RegistryBuilder()).build()


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_search_fixtures() -> list[SearchCase]:
    """Load every search fixture document under tests/fixtures/."""
    registry = _make_registry()
    cases: list[SearchCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        with yaml_file.open(encoding="utf-8") as f:
            for doc in yaml.safe_load_all(f):
                if doc is None:
                    continue
                forward = [parse_step(s) for s in doc["forward"]]
                double_ended = bool(doc.get("double_ended", False))
                if "backward" in doc:
                    backward = [parse_step(s) for s in doc["backward"]]
                else:
                    backward = list(reversed(forward))
                cases.append(
                    SearchCase(
                        fixture_file=yaml_file.name,
                        name=doc["name"],
                        pattern=registry.load_pattern(parse_pattern_config(doc["pattern"])),
                        haystack=doc["haystack"],
                        forward=forward,
                        backward=backward,
                        double_ended=double_ended,
                    )
                )
    return cases


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    if "search_case" in metafunc.fixturenames:
        cases = load_search_fixtures()
        ids = [f"{c.fixture_file}::{c.name}" for c in cases]
        metafunc.parametrize("search_case", cases, ids=ids)
