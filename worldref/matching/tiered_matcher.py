"""Three-tier phrase matcher.

Ranks candidate name lists against a phrase:
1. Exact - a name equals the subject
2. Prefix - a name starts with the subject
3. Substring - a name contains the subject

All comparisons are case-insensitive. A leading ordinal word ("second",
"2nd") selects one candidate from the strongest tier that has enough
entries. Candidate order is significant: ties and ordinals resolve in
the order candidates are given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from worldref.matching.ordinals import parse_ordinal

logger = logging.getLogger(__name__)


class MatchTier(str, Enum):
    """Match strength, strongest first."""

    EXACT = "exact"
    PREFIX = "prefix"
    SUBSTRING = "substring"


@dataclass(frozen=True)
class MatchOutcome:
    """Result of matching a phrase against candidate name lists.

    Attributes:
        indices: Matching candidate indices, in candidate order. Empty
            means no match; one entry is unique; more is ambiguous.
        tier: Tier the indices were taken from, None when nothing matched.
        ordinal: Ordinal parsed from the phrase, 0 if none.
    """

    indices: tuple[int, ...] = ()
    tier: MatchTier | None = None
    ordinal: int = 0

    @property
    def matched(self) -> bool:
        return bool(self.indices)

    @property
    def unique(self) -> bool:
        return len(self.indices) == 1

    @property
    def ambiguous(self) -> bool:
        return len(self.indices) > 1


NO_MATCHES = MatchOutcome()


def split_ordinal(query: str) -> tuple[int, str] | None:
    """Split a leading ordinal word off a phrase.

    Args:
        query: Raw phrase.

    Returns:
        (ordinal, subject), with ordinal 0 and the untouched query when
        the first word is not an ordinal. None when there is nothing
        left to match.
    """
    words = [word for word in query.split(" ") if word]
    if not words:
        return None

    ordinal = parse_ordinal(words[0])
    if ordinal is None:
        return 0, query

    remaining = words[1:]
    if not remaining:
        return None
    return ordinal, " ".join(remaining)


def match_tier(name: str, subject: str) -> MatchTier | None:
    """Classify one name against a lower-cased subject."""
    name = name.lower()
    if name == subject:
        return MatchTier.EXACT
    if name.startswith(subject):
        return MatchTier.PREFIX
    if subject in name:
        return MatchTier.SUBSTRING
    return None


def complex_match(query: str, candidates: Sequence[Sequence[str]]) -> MatchOutcome:
    """Match a phrase against candidate name lists.

    Each candidate is filed into at most one tier, using the first of
    its names that matches at all. With an ordinal N, the N-th exact
    match returns as soon as it is seen; otherwise the N-th entry of the
    first tier holding at least N candidates is returned.

    Args:
        query: Raw phrase, possibly starting with an ordinal word.
        candidates: One name list per candidate; names[0] is the primary
            name, the rest are aliases.

    Returns:
        MatchOutcome with the selected candidate indices.

    Example:
        >>> complex_match("2nd red", [["red"], ["red ball"], ["redwood"]]).indices
        (2,)
    """
    if not candidates:
        return NO_MATCHES

    parsed = split_ordinal(query)
    if parsed is None:
        return NO_MATCHES
    ordinal, subject = parsed
    needle = subject.lower()

    tiers: dict[MatchTier, list[int]] = {tier: [] for tier in MatchTier}

    for index, names in enumerate(candidates):
        for name in names:
            tier = match_tier(name, needle)
            if tier is None:
                continue

            tiers[tier].append(index)
            if tier is MatchTier.EXACT and ordinal and len(tiers[tier]) == ordinal:
                return MatchOutcome(indices=(index,), tier=tier, ordinal=ordinal)
            break

    logger.debug(
        "Tiers for %r (ordinal %d): exact=%s prefix=%s substring=%s",
        subject,
        ordinal,
        tiers[MatchTier.EXACT],
        tiers[MatchTier.PREFIX],
        tiers[MatchTier.SUBSTRING],
    )

    if ordinal:
        for tier in MatchTier:
            if len(tiers[tier]) >= ordinal:
                return MatchOutcome(
                    indices=(tiers[tier][ordinal - 1],), tier=tier, ordinal=ordinal
                )
        return MatchOutcome(ordinal=ordinal)

    for tier in MatchTier:
        if tiers[tier]:
            return MatchOutcome(indices=tuple(tiers[tier]), tier=tier)
    return NO_MATCHES
