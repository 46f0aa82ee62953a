"""Type registry for config-driven pattern construction.

The registry maps predicate type URLs to factories, so a config can
name a character class without carrying code:

- RegistryBuilder → .build() → Registry (immutable)
- Factories are plain callables: (config: dict) → (str) → bool
- load_pattern() turns a PatternConfig into a runtime Pattern

Example::

    builder = register_core_predicates(RegistryBuilder())
    registry = builder.build()

    config = parse_pattern_config({"predicate": {"type_url": "strpat.core.v1.Whitespace"}})
    pattern = registry.load_pattern(config)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from strpat._config import (
    CharConfig,
    CharSetConfig,
    LiteralConfig,
    PredicateConfig,
)
from strpat._patterns import Char, CharPredicate, CharSet, PatternError, Substring

if TYPE_CHECKING:
    from collections.abc import Callable

    from strpat._config import PatternConfig
    from strpat._patterns import Pattern

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_PATTERN_LENGTH = 8192
MAX_CHAR_SET_SIZE = 256

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownTypeUrlError(PatternError):
    """A type_url was not found in the registry."""

    def __init__(self, type_url: str, available: list[str]) -> None:
        self.type_url = type_url
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = (
                f"unknown predicate type_url: {type_url!r} "
                f"(registered: {registered})"
            )
        else:
            msg = (
                f"unknown predicate type_url: {type_url!r} "
                "(no predicate types are registered)"
            )
        super().__init__(msg)


class InvalidConfigError(PatternError):
    """A config payload was malformed or semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class PatternTooLongError(PatternError):
    """A literal pattern exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


class TooManyCharsError(PatternError):
    """A character set exceeds the size limit."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many characters in set: {count} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

type CharFunc = Callable[[str], bool]
type PredicateFactory = Callable[[dict[str, Any]], CharFunc]


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register predicate factories with type URLs, then call build() to
    produce an immutable Registry. No registration after build.
    """

    def __init__(self) -> None:
        self._predicate_factories: dict[str, PredicateFactory] = {}

    def predicate(self, type_url: str, factory: PredicateFactory) -> RegistryBuilder:
        """Register a character predicate factory with a type URL."""
        self._predicate_factories[type_url] = factory
        return self

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        logger.debug("building registry with %d predicate types", len(self._predicate_factories))
        return Registry(
            _predicate_factories=MappingProxyType(dict(self._predicate_factories)),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable registry of predicate factories.

    Constructed via RegistryBuilder. Use load_pattern() to compile a
    config into a runtime Pattern.
    """

    _predicate_factories: MappingProxyType[str, PredicateFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_pattern(self, config: PatternConfig) -> Pattern:
        """Load a Pattern from configuration.

        Raises:
            UnknownTypeUrlError: predicate type_url not registered
            InvalidConfigError: predicate factory rejected its config
            PatternTooLongError: literal exceeds MAX_PATTERN_LENGTH
            TooManyCharsError: distinct set members exceed MAX_CHAR_SET_SIZE
        """
        match config:
            case CharConfig(ch=ch):
                pattern: Pattern = Char(ch)
            case CharSetConfig(chars=chars):
                members = frozenset(chars)
                if len(members) > MAX_CHAR_SET_SIZE:
                    raise TooManyCharsError(len(members), MAX_CHAR_SET_SIZE)
                pattern = CharSet(members)
            case LiteralConfig(text=text):
                if len(text) > MAX_PATTERN_LENGTH:
                    raise PatternTooLongError(len(text), MAX_PATTERN_LENGTH)
                pattern = Substring(text)
            case PredicateConfig(typed_config=tc):
                pattern = self._load_predicate(tc.type_url, tc.config)
            case _:  # pragma: no cover
                msg = f"unknown pattern config type: {type(config).__name__}"
                raise InvalidConfigError(msg)
        logger.debug("loaded %s pattern", type(pattern).__name__)
        return pattern

    @property
    def predicate_count(self) -> int:
        """Number of registered predicate types."""
        return len(self._predicate_factories)

    def contains_predicate(self, type_url: str) -> bool:
        """Check if a predicate type URL is registered."""
        return type_url in self._predicate_factories

    def predicate_type_urls(self) -> list[str]:
        """Return all registered predicate type URLs (sorted)."""
        return sorted(self._predicate_factories.keys())

    def _load_predicate(self, type_url: str, config: dict[str, Any]) -> CharPredicate:
        factory = self._predicate_factories.get(type_url)
        if factory is None:
            raise UnknownTypeUrlError(type_url, list(self._predicate_factories.keys()))
        try:
            func = factory(config)
        except Exception as e:
            raise InvalidConfigError(str(e)) from e
        return CharPredicate(func, name=type_url)


# ═══════════════════════════════════════════════════════════════════════════════
# Core predicates
# ═══════════════════════════════════════════════════════════════════════════════

_CORE_PREFIX = "strpat.core.v1."


def register_core_predicates(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the built-in character classes.

    Type URLs: strpat.core.v1.{Whitespace, Alphabetic, Numeric,
    Alphanumeric, AsciiDigit, Uppercase, Lowercase, CharRange}.
    """
    simple: dict[str, CharFunc] = {
        "Whitespace": str.isspace,
        "Alphabetic": str.isalpha,
        "Numeric": str.isnumeric,
        "Alphanumeric": str.isalnum,
        "AsciiDigit": lambda ch: "0" <= ch <= "9",
        "Uppercase": str.isupper,
        "Lowercase": str.islower,
    }
    for name, func in simple.items():
        builder.predicate(_CORE_PREFIX + name, _constant_factory(func))
    return builder.predicate(_CORE_PREFIX + "CharRange", _char_range_factory)


def _constant_factory(func: CharFunc) -> PredicateFactory:
    def factory(config: dict[str, Any]) -> CharFunc:
        if config:
            msg = f"takes no config, got keys: {sorted(config.keys())}"
            raise ValueError(msg)
        return func

    return factory


def _char_range_factory(config: dict[str, Any]) -> CharFunc:
    """Inclusive code point range: { "lo": "a", "hi": "z" }."""
    lo = config.get("lo")
    hi = config.get("hi")
    for key, value in (("lo", lo), ("hi", hi)):
        if not isinstance(value, str) or len(value) != 1:
            msg = f"CharRange requires '{key}' (single character)"
            raise ValueError(msg)
    if lo > hi:
        msg = f"CharRange lo {lo!r} is above hi {hi!r}"
        raise ValueError(msg)
    return lambda ch: lo <= ch <= hi
