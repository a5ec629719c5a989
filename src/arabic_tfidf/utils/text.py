"""Arabic token normalization and fallback text splitting.

`normalize_arabic` applies one fixed, ordered chain of transformations to a
single token:

1. strip diacritics (tashkeel + superscript alef)
2. strip punctuation
3. unify alef / teh marbuta / alef maksura variants
4. strip ASCII digits
5. strip a compound prefix (conjunction/particle + definite article)
6. strip the bare definite article
7. strip a single-letter leading particle
8. strip a plural/dual suffix (long tokens only)
9. strip a possessive/pronoun suffix (long tokens only)
10. trim whitespace

The order matters and TF-IDF output downstream is defined relative to it, so
the chain is not configurable. Prefix and suffix steps are driven by the rule
tables below; each table is evaluated first-match-wins.
"""

from __future__ import annotations
import re
from typing import List, Optional, Sequence, Tuple

_DIACRITICS_RE = re.compile(r"[\u064B-\u065F\u0610-\u061A\u0670]")
_PUNCT_RE = re.compile(r"[.,;!?؟،؛()\"«»\[\]{}]")
_DIGITS_RE = re.compile(r"[0-9]")

# Fallback tokenizer delimiters.
_SPLIT_RE = re.compile(r"[\s,.;:!?()\"«»\[\]{}]+")

_LETTER_MAP = str.maketrans({
    "أ": "ا",
    "إ": "ا",
    "آ": "ا",
    "ة": "ه",
    "ى": "ي",
})

# (affix, min_length): the rule fires only when len(current) > min_length.
AffixRule = Tuple[str, int]

COMPOUND_PREFIXES: Tuple[AffixRule, ...] = (
    ("وال", 0),
    ("فال", 0),
    ("بال", 0),
    ("كال", 0),
)
ARTICLE_PREFIXES: Tuple[AffixRule, ...] = (
    ("ال", 0),
)
PARTICLE_PREFIXES: Tuple[AffixRule, ...] = (
    ("و", 0),
    ("ف", 0),
    ("ب", 0),
    ("ل", 0),
)
PLURAL_SUFFIXES: Tuple[AffixRule, ...] = (
    ("ون", 4),
    ("ين", 4),
    ("ات", 4),
    ("ان", 4),
)
PRONOUN_SUFFIXES: Tuple[AffixRule, ...] = (
    ("هم", 4),
    ("ها", 4),
    ("كم", 4),
    ("ه", 4),
    ("ي", 4),
)


def strip_prefix(text: str, rules: Sequence[AffixRule]) -> str:
    """Remove the first matching prefix from `rules`, or return `text` unchanged."""
    for prefix, min_length in rules:
        if len(text) > min_length and text.startswith(prefix):
            return text[len(prefix):]
    return text


def strip_suffix(text: str, rules: Sequence[AffixRule]) -> str:
    """Remove the first matching suffix from `rules`, or return `text` unchanged."""
    for suffix, min_length in rules:
        if len(text) > min_length and text.endswith(suffix):
            return text[: len(text) - len(suffix)]
    return text


def strip_diacritics(text: str) -> str:
    return _DIACRITICS_RE.sub("", text)


def strip_punctuation(text: str) -> str:
    return _PUNCT_RE.sub("", text)


def unify_letters(text: str) -> str:
    return text.translate(_LETTER_MAP)


def strip_digits(text: str) -> str:
    return _DIGITS_RE.sub("", text)


def normalize_arabic(text: Optional[str]) -> str:
    """Normalize a single Arabic token.

    Total function: `None` or empty input yields an empty string.

    Args:
        text: Raw token, possibly with diacritics, punctuation and affixes

    Returns:
        The stemmed, normalized token (may be empty)
    """
    if not text:
        return ""

    text = strip_diacritics(text)
    text = strip_punctuation(text)
    text = unify_letters(text)
    text = strip_digits(text)

    # Steps 5 and 6 are two separate checks: the article check sees the
    # output of the compound-prefix check, whether or not it fired.
    text = strip_prefix(text, COMPOUND_PREFIXES)
    text = strip_prefix(text, ARTICLE_PREFIXES)
    text = strip_prefix(text, PARTICLE_PREFIXES)

    text = strip_suffix(text, PLURAL_SUFFIXES)
    text = strip_suffix(text, PRONOUN_SUFFIXES)

    return text.strip()


def split_text(text: Optional[str]) -> List[str]:
    """Lower-case and split on whitespace/punctuation runs, dropping empty pieces."""
    if not text or not text.strip():
        return []
    return [t for t in _SPLIT_RE.split(text.lower()) if t]
