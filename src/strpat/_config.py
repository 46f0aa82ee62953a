"""Config types for config-driven pattern construction.

Config-driven construction path:
  dict → parse_pattern_config() → PatternConfig → Registry.load_pattern() → Pattern

Relationship to runtime types:

| Config type      | Runtime type   |
|------------------|----------------|
| CharConfig       | Char           |
| CharSetConfig    | CharSet        |
| LiteralConfig    | Substring      |
| PredicateConfig  | CharPredicate  |
| TypedConfig      | predicate func |

Accepted shapes (one key per pattern)::

    {"char": "a"}
    {"any_of": "abc"}                  # or ["a", "b", "c"]
    {"literal": "needle"}
    {"predicate": {"type_url": "strpat.core.v1.Whitespace", "config": {}}}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from strpat._patterns import PatternError

# ═══════════════════════════════════════════════════════════════════════════════
# Config types (frozen dataclasses)
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class TypedConfig:
    """Reference to a registered predicate with its configuration.

    - type_url identifies the registered predicate factory
    - config carries the factory-specific payload
    """

    type_url: str
    config: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CharConfig:
    """A single character."""

    ch: str


@dataclass(frozen=True, slots=True)
class CharSetConfig:
    """Any one of a set of characters (order preserved as given)."""

    chars: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class LiteralConfig:
    """A literal substring. May be empty."""

    text: str


@dataclass(frozen=True, slots=True)
class PredicateConfig:
    """A character predicate resolved via the registry."""

    typed_config: TypedConfig


type PatternConfig = CharConfig | CharSetConfig | LiteralConfig | PredicateConfig

# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════

_PATTERN_KEYS = frozenset({"char", "any_of", "literal", "predicate"})


class ConfigParseError(PatternError):
    """Error parsing a config dict into config types."""


def parse_pattern_config(data: dict[str, Any]) -> PatternConfig:
    """Parse a dict into a PatternConfig.

    This is the main entry point for config loading. Exactly one of
    ``char``, ``any_of``, ``literal`` or ``predicate`` must be present.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    present = sorted(_PATTERN_KEYS.intersection(data))
    if not present:
        expected = sorted(_PATTERN_KEYS)
        msg = f"pattern must contain one of {expected}, got keys: {sorted(data.keys())}"
        raise ConfigParseError(msg)
    if len(present) > 1:
        msg = f"pattern must contain exactly one kind, got {present}"
        raise ConfigParseError(msg)

    kind = present[0]
    value = data[kind]
    if kind == "char":
        return _parse_char(value)
    if kind == "any_of":
        return _parse_any_of(value)
    if kind == "literal":
        if not isinstance(value, str):
            msg = f"literal value must be a string, got {type(value).__name__}"
            raise ConfigParseError(msg)
        return LiteralConfig(text=value)
    return PredicateConfig(typed_config=_parse_typed_config(value))


def _parse_char(value: Any) -> CharConfig:
    if not isinstance(value, str) or len(value) != 1:
        msg = f"char value must be a single character, got {value!r}"
        raise ConfigParseError(msg)
    return CharConfig(ch=value)


def _parse_any_of(value: Any) -> CharSetConfig:
    """Parse an any_of value: a string or a list of single characters."""
    if isinstance(value, str):
        return CharSetConfig(chars=tuple(value))
    if not isinstance(value, list):
        msg = f"any_of must be a string or list, got {type(value).__name__}"
        raise ConfigParseError(msg)
    for item in value:
        if not isinstance(item, str) or len(item) != 1:
            msg = f"any_of members must be single characters, got {item!r}"
            raise ConfigParseError(msg)
    return CharSetConfig(chars=tuple(value))


def _parse_typed_config(data: dict[str, Any]) -> TypedConfig:
    """Parse a typed config dict."""
    if not isinstance(data, dict):
        msg = f"typed_config must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "type_url" not in data:
        msg = "typed_config missing required field 'type_url'"
        raise ConfigParseError(msg)

    type_url = data["type_url"]
    if not isinstance(type_url, str):
        msg = f"type_url must be a string, got {type(type_url).__name__}"
        raise ConfigParseError(msg)

    config = data.get("config", {})
    if not isinstance(config, dict):
        msg = f"config must be a dict, got {type(config).__name__}"
        raise ConfigParseError(msg)

    return TypedConfig(type_url=type_url, config=config)
