"""Ordinal parsing for disambiguation phrases.

Recognizes a leading word such as "second", "3rd", "2." or
"twenty-first" as a 1-based ordinal. Ordinary words are simply not
ordinals; parse_ordinal never raises.
"""

import re
from types import MappingProxyType

# Row n (1-based) lists every spelling that maps to n. Tens words share a
# row with their digit so that "twenty-first" combines as 2 * 10 + 1.
# Spellings are matched verbatim, misspellings included.
ORDINAL_WORDS: tuple[tuple[str, ...], ...] = (
    ("first",),
    ("second", "twenty", "twentieth"),
    ("third", "thirty", "thirtieth"),
    ("fourth", "fourtieth", "fourty"),
    ("fifth", "fiftieth", "fifty"),
    ("sixth", "sixtieth", "sixty"),
    ("seventh", "seventieth", "seventy"),
    ("eighth", "eightieth", "eighty"),
    ("ninth", "ninetieth", "ninty"),
    ("tenth",),
    ("eleventh",),
    ("twelth",),
    ("thirteenth",),
    ("fourteenth",),
    ("fifteenth",),
    ("sixteenth",),
    ("seventeeth",),
    ("eighteenth",),
    ("nineteenth",),
)

_WORD_VALUES = MappingProxyType(
    {spelling: row for row, spellings in enumerate(ORDINAL_WORDS, start=1) for spelling in spellings}
)

_SUFFIX_NUMERAL = re.compile(r"([0-9]+)(th|st|nd|rd)")
_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

MAX_ORDINAL_PARTS = 2


def _leading_integer(text: str) -> int:
    """Read leading digits the way C atoi does: no digits reads as 0."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def classify_part(part: str) -> list[int]:
    """Return every ordinal value one lower-cased part classifies as.

    All three forms are tried and every hit is kept:
    - dotted numeral ("12." reads the text before the final two characters)
    - word form from ORDINAL_WORDS
    - suffix numeral ("3rd", "21st")
    """
    values: list[int] = []

    if len(part) > 1 and part.endswith("."):
        values.append(_leading_integer(part[:-2]))

    word_value = _WORD_VALUES.get(part)
    if word_value is not None:
        values.append(word_value)

    match = _SUFFIX_NUMERAL.search(part)
    if match:
        values.append(int(match.group(1)))

    return values


def parse_ordinal(word: str) -> int | None:
    """Parse a word as a disambiguation ordinal.

    Args:
        word: A single phrase word, possibly hyphenated.

    Returns:
        The ordinal (>= 1), or None if the word is not an ordinal.

    Examples:
        >>> parse_ordinal("2nd")
        2
        >>> parse_ordinal("Second")
        2
        >>> parse_ordinal("twenty-first")
        21
        >>> parse_ordinal("21") is None
        True
    """
    parts = [part for part in word.lower().split("-") if part]
    if len(parts) > MAX_ORDINAL_PARTS:
        return None

    values: list[int] = []
    for part in parts:
        values.extend(classify_part(part))

    if len(values) == 1:
        ordinal = values[0]
    elif len(values) == 2:
        # First value is the tens digit, second the ones digit
        ordinal = values[0] * 10 + values[1]
    else:
        return None

    return ordinal if ordinal >= 1 else None
