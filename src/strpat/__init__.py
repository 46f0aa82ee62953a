"""strpat — Pattern searching over UTF-8 text.

All public types are exported from this module for flat imports:

    from strpat import Char, CharSet, Substring, Match, Reject, DONE
"""

__version__ = "0.1.0"

# Searchers
from strpat._char_searcher import CharSearcher

# Config types — see strpat._config for details
from strpat._config import (
    CharConfig,
    CharSetConfig,
    ConfigParseError,
    LiteralConfig,
    PatternConfig,
    PredicateConfig,
    TypedConfig,
    parse_pattern_config,
)

# Consumers
from strpat._ops import (
    Matches,
    contains,
    ends_with,
    find,
    match_indices,
    matches,
    rfind,
    rmatch_indices,
    starts_with,
)

# Patterns
from strpat._patterns import (
    Char,
    CharPredicate,
    CharSet,
    Pattern,
    PatternError,
    PatternLike,
    Substring,
    as_pattern,
)

# Registry — see strpat._registry for details
from strpat._registry import (
    MAX_CHAR_SET_SIZE,
    MAX_PATTERN_LENGTH,
    InvalidConfigError,
    PatternTooLongError,
    Registry,
    RegistryBuilder,
    TooManyCharsError,
    UnknownTypeUrlError,
    register_core_predicates,
)
from strpat._str_searcher import StrSearcher

# Steps and protocols
from strpat._types import (
    DONE,
    CharClassifier,
    Done,
    DoubleEndedSearcher,
    Haystack,
    Match,
    Reject,
    ReverseSearcher,
    Searcher,
    SearchStep,
    is_double_ended,
)

__all__ = [
    # Steps and protocols
    "Match",
    "Reject",
    "Done",
    "DONE",
    "SearchStep",
    "Haystack",
    "CharClassifier",
    "Searcher",
    "ReverseSearcher",
    "DoubleEndedSearcher",
    "is_double_ended",
    # Searchers
    "CharSearcher",
    "StrSearcher",
    # Patterns
    "Char",
    "CharSet",
    "CharPredicate",
    "Substring",
    "Pattern",
    "PatternLike",
    "PatternError",
    "as_pattern",
    # Consumers
    "contains",
    "starts_with",
    "ends_with",
    "find",
    "rfind",
    "match_indices",
    "rmatch_indices",
    "matches",
    "Matches",
    # Config types
    "TypedConfig",
    "CharConfig",
    "CharSetConfig",
    "LiteralConfig",
    "PredicateConfig",
    "PatternConfig",
    "ConfigParseError",
    "parse_pattern_config",
    # Registry
    "RegistryBuilder",
    "Registry",
    "register_core_predicates",
    "UnknownTypeUrlError",
    "InvalidConfigError",
    "PatternTooLongError",
    "TooManyCharsError",
    "MAX_PATTERN_LENGTH",
    "MAX_CHAR_SET_SIZE",
]
