"""Stop-word set.

Stop words are stored *normalized*, so membership tests compare like with like:
a token and a stop word are equal only after both went through `normalize_arabic`.
"""

from __future__ import annotations
import logging
from typing import FrozenSet, Iterable, Optional
from ..utils.text import normalize_arabic

log = logging.getLogger("arabic_tfidf.stop_words")

def build_stop_words(lines: Iterable[str]) -> FrozenSet[str]:
    """Trim, drop blank lines, normalize each entry."""
    words = set()
    for line in lines:
        line = line.strip()
        if not line:
            continue
        word = normalize_arabic(line)
        if word:
            words.add(word)
    return frozenset(words)

def load_stop_words(path: Optional[str]) -> FrozenSet[str]:
    """Read a UTF-8 stop-word file (one word per line). No path means no stop words."""
    if not path:
        log.info("No stop-word list configured")
        return frozenset()
    with open(path, "r", encoding="utf-8") as f:
        words = build_stop_words(f)
    log.info(f"Loaded {len(words)} normalized stop words from {path}")
    return words
