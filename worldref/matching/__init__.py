"""Phrase matching: ordinal parsing and the three-tier matcher."""

from worldref.matching.ordinals import ORDINAL_WORDS, parse_ordinal
from worldref.matching.tiered_matcher import (
    NO_MATCHES,
    MatchOutcome,
    MatchTier,
    complex_match,
    split_ordinal,
)

__all__ = [
    "ORDINAL_WORDS",
    "parse_ordinal",
    "NO_MATCHES",
    "MatchOutcome",
    "MatchTier",
    "complex_match",
    "split_ordinal",
]
